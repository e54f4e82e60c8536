"""Country format matching for IBAN addresses.

Checks whether an address starts with a registry country code and whether the
rest of it fits that country's structure. Check digits are never verified:
a general IBAN validator should combine this result with its own length and
mod-97 checks before calling an account number valid.

The prefix and remainder patterns of all countries are compiled into two
automata, once per process and on first use. After that every call is a pure
read of immutable tables.

Usage:
    >>> classify("DE44500105175407324931")
    <IbanCountryResult.VALID: 'valid'>
    >>> classify("DE44ABCDE5175407324931")
    <IbanCountryResult.INVALID: 'invalid'>
    >>> classify("ZZ44500105175407324931")
    <IbanCountryResult.COUNTRY_UNKNOWN: 'country_unknown'>
"""

import threading
import time
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .automaton import DEFAULT_SIZE_LIMIT, PatternSet
from .exceptions import DuplicateCountryError
from .formats import COUNTRY_FORMATS, CountryFormat
from .metrics import record_build_time
from .patterns import StructuralPattern
from .utils.logging import LogPerformance, get_logger

logger = get_logger(__name__)

# Combining ~75 remainder patterns with alphanumeric runs can produce many
# states, so the remainder automaton gets an explicit allowance.
REMAINDER_SIZE_LIMIT = 16_000_000


class IbanCountryResult(str, Enum):
    """Outcome of :func:`classify`."""

    VALID = "valid"  # Country recognized, address fits its format
    INVALID = "invalid"  # Country recognized, address does not fit
    COUNTRY_UNKNOWN = "country_unknown"  # Country not recognized


@dataclass(frozen=True)
class CompiledPatternSet:
    """Index-aligned matchers built from a country format table.

    Index ``i`` in ``country_codes`` and ``remainders`` both refer to
    ``formats[i]``.
    """

    formats: tuple[CountryFormat, ...]
    country_codes: PatternSet
    remainders: PatternSet


def build_pattern_set(formats: Sequence[CountryFormat]) -> CompiledPatternSet:
    """Compile a country format table.

    Raises:
        ConfigurationError: If the table is malformed (bad pattern syntax,
            duplicate country codes, or an automaton over its size limit)
    """
    formats = tuple(formats)

    with LogPerformance("pattern_set_build", logger):
        seen: set[str] = set()
        for fmt in formats:
            if fmt.code in seen:
                raise DuplicateCountryError(fmt.code)
            seen.add(fmt.code)

        country_codes = _timed_build(
            "country_code", [fmt.prefix() for fmt in formats], DEFAULT_SIZE_LIMIT
        )
        remainders = _timed_build(
            "remainder", [fmt.remainder() for fmt in formats], REMAINDER_SIZE_LIMIT
        )

    logger.debug(
        "pattern_set_compiled",
        countries=len(formats),
        country_code_states=country_codes.state_count,
        remainder_states=remainders.state_count,
        remainder_cells=remainders.size,
    )
    return CompiledPatternSet(formats, country_codes, remainders)


def _timed_build(
    name: str, patterns: Sequence[StructuralPattern], size_limit: int
) -> PatternSet:
    start = time.perf_counter()
    matcher = PatternSet(patterns, size_limit=size_limit)
    record_build_time(name, time.perf_counter() - start)
    return matcher


_compiled: CompiledPatternSet | None = None
_compile_lock = threading.Lock()


def get_compiled_patterns() -> CompiledPatternSet:
    """Get the process-wide compiled pattern set, building it on first use.

    Concurrent first callers build it exactly once. A build failure is not
    cached and propagates to every caller: the table ships with the package,
    so there is nothing to fall back to.
    """
    global _compiled

    compiled = _compiled
    if compiled is None:
        with _compile_lock:
            if _compiled is None:
                _compiled = build_pattern_set(COUNTRY_FORMATS)
            compiled = _compiled
    return compiled


def _country_index(compiled: CompiledPatternSet, address: str) -> int | None:
    if len(address) < 2:
        return None
    # Lowest index wins if several prefix patterns ever overlap
    matches = compiled.country_codes.matches(address[:2])
    return matches[0] if matches else None


def classify(address: str) -> IbanCountryResult:
    """Validate the BBAN part of an IBAN address.

    - If the country code is recognized and the address fits the country's
      format, returns ``IbanCountryResult.VALID``.
    - If the country code is recognized and the address does not fit,
      returns ``IbanCountryResult.INVALID``.
    - If the country code is not recognized, or the address is shorter than
      two characters, returns ``IbanCountryResult.COUNTRY_UNKNOWN``.

    The address is matched exactly as given: no whitespace stripping or case
    folding.

    Args:
        address: Full IBAN string, country code first

    Returns:
        One of the three :class:`IbanCountryResult` members
    """
    compiled = get_compiled_patterns()

    country_index = _country_index(compiled, address)
    if country_index is None:
        return IbanCountryResult.COUNTRY_UNKNOWN

    if country_index in compiled.remainders.matches(address[2:]):
        return IbanCountryResult.VALID
    return IbanCountryResult.INVALID


validate_iban_country = classify


def detect_country(address: str) -> CountryFormat | None:
    """Return the format entry whose country code pattern matches the address.

    Example:
        >>> detect_country("GB82WEST12345698765432").country_name
        'United Kingdom'
        >>> detect_country("ZZ44500105175407324931") is None
        True
    """
    compiled = get_compiled_patterns()
    country_index = _country_index(compiled, address)
    if country_index is None:
        return None
    return compiled.formats[country_index]
