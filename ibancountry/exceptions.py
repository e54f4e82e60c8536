"""Exception hierarchy for ibancountry.

Classification itself never raises: every address maps to one of the three
results. The exceptions below only surface while the country format table is
compiled, which happens once per process on first use. They signal a defect in
the static table and are not meant to be caught by callers.

Usage:
    from ibancountry.exceptions import ConfigurationError

    try:
        get_compiled_patterns()
    except ConfigurationError as e:
        logger.critical("pattern_set_broken", error=str(e), **e.context)
        raise
"""

from __future__ import annotations

from typing import Any


class IbanCountryError(Exception):
    """Base exception for all ibancountry errors.

    Attributes:
        message: Human-readable error message
        context: Table details that locate the defect (pattern, code, sizes)
    """

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = dict(context or {})

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = " ".join(f"{key}={value!r}" for key, value in self.context.items())
        return f"{self.message} [{details}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, context={self.context!r})"


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(IbanCountryError):
    """Raised when the static format table cannot be compiled.

    The table ships with the package, so this always indicates a build-time
    defect rather than bad user input.
    """


class PatternSyntaxError(ConfigurationError):
    """Raised when a pattern uses syntax outside the structural subset.

    Supported: optional ``^``/``$`` anchors, ``\\d``, bracket classes built from
    ranges, ``\\d`` and literals, literal letters and digits, and exact ``{n}``
    repetition.
    """

    def __init__(self, message: str, *, pattern: str, position: int) -> None:
        super().__init__(message, context={"pattern": pattern, "position": position})
        self.pattern = pattern
        self.position = position


class PatternSizeLimitError(ConfigurationError):
    """Raised when a compiled automaton outgrows its transition table budget."""

    def __init__(self, message: str, *, size: int, limit: int) -> None:
        super().__init__(message, context={"size": size, "limit": limit})
        self.size = size
        self.limit = limit


class DuplicateCountryError(ConfigurationError):
    """Raised when two table entries share a country code."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Country code registered twice: {code}", context={"code": code})
        self.code = code
