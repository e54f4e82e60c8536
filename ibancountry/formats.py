"""IBAN country formats from the Swift IBAN registry.

Each entry pairs a pattern for the two-character country code with a pattern
for the rest of the address (check digits followed by the BBAN). Entries are
identified by their position in :data:`COUNTRY_FORMATS`; the compiled prefix
and remainder matchers share those positions.

Source: SWIFT IBAN Registry
Reference: https://www.swift.com/standards/data-standards/iban-international-bank-account-number

Updating behaviour means editing this table. There is no runtime
configuration and no file-based loading.
"""

from dataclasses import dataclass
from typing import ClassVar

from .patterns import StructuralPattern, parse_pattern


@dataclass(frozen=True)
class CountryFormat:
    """IBAN format of one registry country.

    Attributes:
        code: ISO 3166-1 alpha-2 code (e.g., "DE")
        country_name: Full country name in English
        prefix_pattern: Pattern for the first two characters of the address
        remainder_pattern: Pattern for everything after the first two characters
    """

    code: str
    country_name: str
    prefix_pattern: str
    remainder_pattern: str

    def prefix(self) -> StructuralPattern:
        return parse_pattern(self.prefix_pattern)

    def remainder(self) -> StructuralPattern:
        return parse_pattern(self.remainder_pattern)


COUNTRY_FORMATS: tuple[CountryFormat, ...] = (
    CountryFormat("AD", "Andorra", r"^AD$", r"^\d{10}[A-Z\d]{12}$"),
    CountryFormat("AE", "United Arab Emirates", r"^AE$", r"^\d{21}$"),
    CountryFormat("AL", "Albania", r"^AL$", r"^\d{10}[A-Z\d]{16}$"),
    CountryFormat("AT", "Austria", r"^AT$", r"^\d{18}$"),
    CountryFormat("AZ", "Azerbaijan", r"^AZ$", r"^\d{2}[A-Z]{4}[A-Z\d]{20}$"),
    CountryFormat("BA", "Bosnia and Herzegovina", r"^BA$", r"^\d{18}$"),
    CountryFormat("BE", "Belgium", r"^BE$", r"^\d{14}$"),
    CountryFormat("BG", "Bulgaria", r"^BG$", r"^\d{2}[A-Z]{4}\d{6}[A-Z\d]{8}$"),
    CountryFormat("BH", "Bahrain", r"^BH$", r"^\d{2}[A-Z]{4}[A-Z\d]{14}$"),
    CountryFormat("BR", "Brazil", r"^BR$", r"^\d{25}[A-Z]{1}[A-Z\d]{1}$"),
    CountryFormat("BY", "Belarus", r"^BY$", r"^\d{2}[A-Z\d]{4}\d{4}[A-Z\d]{16}$"),
    CountryFormat("CH", "Switzerland", r"^CH$", r"^\d{7}[A-Z\d]{12}$"),
    CountryFormat("CR", "Costa Rica", r"^CR$", r"^\d{20}$"),
    CountryFormat("CY", "Cyprus", r"^CY$", r"^\d{10}[A-Z\d]{16}$"),
    CountryFormat("CZ", "Czech Republic", r"^CZ$", r"^\d{22}$"),
    CountryFormat("DE", "Germany", r"^DE$", r"^\d{20}$"),
    CountryFormat("DK", "Denmark", r"^DK$", r"^\d{16}$"),
    CountryFormat("DO", "Dominican Republic", r"^DO$", r"^\d{2}[A-Z\d]{4}\d{20}$"),
    CountryFormat("EE", "Estonia", r"^EE$", r"^\d{18}$"),
    CountryFormat("ES", "Spain", r"^ES$", r"^\d{22}$"),
    CountryFormat("FI", "Finland", r"^FI$", r"^\d{16}$"),
    CountryFormat("FO", "Faroe Islands", r"^FO$", r"^\d{16}$"),
    CountryFormat("FR", "France", r"^FR$", r"^\d{12}[A-Z\d]{11}\d{2}$"),
    CountryFormat("GB", "United Kingdom", r"^GB$", r"^\d{2}[A-Z]{4}\d{14}$"),
    CountryFormat("GE", "Georgia", r"^GE$", r"^\d{2}[A-Z]{2}\d{16}$"),
    CountryFormat("GI", "Gibraltar", r"^GI$", r"^\d{2}[A-Z]{4}[A-Z\d]{15}$"),
    CountryFormat("GL", "Greenland", r"^GL$", r"^\d{16}$"),
    CountryFormat("GR", "Greece", r"^GR$", r"^\d{9}[A-Z\d]{16}$"),
    CountryFormat("GT", "Guatemala", r"^GT$", r"^\d{2}[A-Z\d]{24}$"),
    CountryFormat("HR", "Croatia", r"^HR$", r"^\d{19}$"),
    CountryFormat("HU", "Hungary", r"^HU$", r"^\d{26}$"),
    CountryFormat("IE", "Ireland", r"^IE$", r"^\d{2}[A-Z]{4}\d{14}$"),
    CountryFormat("IL", "Israel", r"^IL$", r"^\d{21}$"),
    CountryFormat("IQ", "Iraq", r"^IQ$", r"^\d{2}[A-Z]{4}\d{15}$"),
    CountryFormat("IS", "Iceland", r"^IS$", r"^\d{24}$"),
    CountryFormat("IT", "Italy", r"^IT$", r"^\d{2}[A-Z]{1}\d{10}[A-Z\d]{12}$"),
    CountryFormat("JO", "Jordan", r"^JO$", r"^\d{2}[A-Z]{4}\d{4}[A-Z\d]{18}$"),
    CountryFormat("KW", "Kuwait", r"^KW$", r"^\d{2}[A-Z]{4}[A-Z\d]{22}$"),
    CountryFormat("KZ", "Kazakhstan", r"^KZ$", r"^\d{5}[A-Z\d]{13}$"),
    CountryFormat("LB", "Lebanon", r"^LB$", r"^\d{6}[A-Z\d]{20}$"),
    CountryFormat("LC", "Saint Lucia", r"^LC$", r"^\d{2}[A-Z]{4}[A-Z\d]{24}$"),
    CountryFormat("LI", "Liechtenstein", r"^LI$", r"^\d{7}[A-Z\d]{12}$"),
    CountryFormat("LT", "Lithuania", r"^LT$", r"^\d{18}$"),
    CountryFormat("LU", "Luxembourg", r"^LU$", r"^\d{5}[A-Z\d]{13}$"),
    CountryFormat("LV", "Latvia", r"^LV$", r"^\d{2}[A-Z]{4}[A-Z\d]{13}$"),
    CountryFormat("MC", "Monaco", r"^MC$", r"^\d{12}[A-Z\d]{11}\d{2}$"),
    CountryFormat("MD", "Moldova", r"^MD$", r"^\d{2}[A-Z\d]{20}$"),
    CountryFormat("ME", "Montenegro", r"^ME$", r"^\d{20}$"),
    CountryFormat("MK", "North Macedonia", r"^MK$", r"^\d{5}[A-Z\d]{10}\d{2}$"),
    CountryFormat("MR", "Mauritania", r"^MR$", r"^\d{25}$"),
    CountryFormat("MT", "Malta", r"^MT$", r"^\d{2}[A-Z]{4}\d{5}[A-Z\d]{18}$"),
    CountryFormat("MU", "Mauritius", r"^MU$", r"^\d{2}[A-Z]{4}\d{19}[A-Z]{3}$"),
    CountryFormat("NL", "Netherlands", r"^NL$", r"^\d{2}[A-Z]{4}\d{10}$"),
    CountryFormat("NO", "Norway", r"^NO$", r"^\d{13}$"),
    CountryFormat("PK", "Pakistan", r"^PK$", r"^\d{2}[A-Z]{4}[A-Z\d]{16}$"),
    CountryFormat("PL", "Poland", r"^PL$", r"^\d{26}$"),
    CountryFormat("PS", "Palestine", r"^PS$", r"^\d{2}[A-Z]{4}[A-Z\d]{21}$"),
    CountryFormat("PT", "Portugal", r"^PT$", r"^\d{23}$"),
    CountryFormat("QA", "Qatar", r"^QA$", r"^\d{2}[A-Z]{4}[A-Z\d]{21}$"),
    # [A-z] as transcribed from the registry, it also admits a-z and [\]^_`
    CountryFormat("RO", "Romania", r"^RO$", r"^\d{2}[A-z]{4}[A-Z\d]{16}$"),
    CountryFormat("RS", "Serbia", r"^RS$", r"^\d{20}$"),
    CountryFormat("SA", "Saudi Arabia", r"^SA$", r"^\d{4}[A-Z\d]{18}$"),
    CountryFormat("SC", "Seychelles", r"^SC$", r"^\d{2}[A-Z]{4}\d{20}[A-Z]{3}$"),
    CountryFormat("SE", "Sweden", r"^SE$", r"^\d{22}$"),
    CountryFormat("SI", "Slovenia", r"^SI$", r"^\d{17}$"),
    CountryFormat("SK", "Slovakia", r"^SK$", r"^\d{22}$"),
    CountryFormat("SM", "San Marino", r"^SM$", r"^\d{2}[A-Z]{1}\d{10}[A-Z\d]{12}$"),
    CountryFormat("ST", "Sao Tome and Principe", r"^ST$", r"^\d{23}$"),
    CountryFormat("SV", "El Salvador", r"^SV$", r"^\d{2}[A-Z]{4}\d{20}$"),
    CountryFormat("TL", "Timor-Leste", r"^TL$", r"^\d{21}$"),
    CountryFormat("TN", "Tunisia", r"^TN$", r"^\d{22}$"),
    CountryFormat("TR", "Turkey", r"^TR$", r"^\d{8}[A-Z\d]{16}$"),
    CountryFormat("UA", "Ukraine", r"^UA$", r"^\d{8}[A-Z\d]{19}$"),
    CountryFormat("VG", "British Virgin Islands", r"^VG$", r"^\d{2}[A-Z]{4}\d{16}$"),
    CountryFormat("XK", "Kosovo", r"^XK$", r"^\d{18}$"),
)


class IbanRegistry:
    """Lookups over :data:`COUNTRY_FORMATS` by country code.

    These helpers answer questions about the table itself. Classifying an
    address goes through :func:`ibancountry.matcher.classify`.

    Usage:
        >>> IbanRegistry.get_country_name("DE")
        'Germany'
        >>> IbanRegistry.iban_length("GB")
        22
    """

    FORMATS: ClassVar[dict[str, CountryFormat]] = {fmt.code: fmt for fmt in COUNTRY_FORMATS}

    @classmethod
    def get_format(cls, country_code: str) -> CountryFormat | None:
        """Get the format entry for a country code (case-insensitive)."""
        return cls.FORMATS.get(country_code.upper())

    @classmethod
    def get_country_name(cls, country_code: str) -> str | None:
        fmt = cls.get_format(country_code)
        return fmt.country_name if fmt else None

    @classmethod
    def list_supported_countries(cls) -> list[str]:
        """Get sorted list of all registry country codes."""
        return sorted(cls.FORMATS.keys())

    @classmethod
    def iban_length(cls, country_code: str) -> int | None:
        """Total IBAN length for a country, country code included.

        Informational only: no check in this package compares an address
        against it.

        Args:
            country_code: ISO 3166-1 alpha-2 code (e.g., "IT", "DE")

        Returns:
            Expected length (e.g., 22 for Germany) or None if not registered
        """
        fmt = cls.get_format(country_code)
        if fmt is None:
            return None
        return 2 + fmt.remainder().length
