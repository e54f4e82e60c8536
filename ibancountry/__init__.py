"""Country-specific BBAN format validation for IBAN addresses.

Usage:
    >>> from ibancountry import classify, IbanCountryResult
    >>> classify("GB82WEST12345698765432") is IbanCountryResult.VALID
    True
"""

__version__ = "0.1.0"

__all__ = [
    "COUNTRY_FORMATS",
    "CountryFormat",
    "IbanCountryResult",
    "IbanRegistry",
    "classify",
    "detect_country",
    "get_compiled_patterns",
    "validate_iban_country",
]

from .formats import COUNTRY_FORMATS, CountryFormat, IbanRegistry
from .matcher import (
    IbanCountryResult,
    classify,
    detect_country,
    get_compiled_patterns,
    validate_iban_country,
)
