"""Structural patterns: fixed-length sequences of per-position character classes.

The registry formats are written as a small regular expression subset
(``^\\d{2}[A-Z]{4}\\d{14}$``). Every pattern in that subset has one fixed
length, so it can be expanded into one character class per position. The
expanded form is what the multi-pattern automaton is built from.

Supported syntax:
    ^ and $        optional anchors, matching is always against the whole string
    \\d             ASCII digit 0-9
    [...]          bracket class of ranges (A-Z), literals and \\d
    X              literal ASCII letter or digit
    {n}            exact repetition of the preceding atom

Anything else (alternation, groups, optional or open repetition, negated
classes, other escapes) raises :class:`PatternSyntaxError`.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .exceptions import PatternSyntaxError


@dataclass(frozen=True)
class CharClass:
    """Set of code points stored as sorted, merged, inclusive ranges."""

    ranges: tuple[tuple[int, int], ...]

    @classmethod
    def from_ranges(cls, ranges: Iterable[tuple[int, int]]) -> CharClass:
        merged: list[tuple[int, int]] = []
        for lo, hi in sorted(ranges):
            if merged and lo <= merged[-1][1] + 1:
                merged[-1] = (merged[-1][0], max(merged[-1][1], hi))
            else:
                merged.append((lo, hi))
        return cls(tuple(merged))

    @classmethod
    def literal(cls, char: str) -> CharClass:
        return cls(((ord(char), ord(char)),))

    def contains_codepoint(self, codepoint: int) -> bool:
        return any(lo <= codepoint <= hi for lo, hi in self.ranges)

    def __contains__(self, char: object) -> bool:
        if not isinstance(char, str) or len(char) != 1:
            return False
        return self.contains_codepoint(ord(char))

    @property
    def is_literal(self) -> bool:
        return len(self.ranges) == 1 and self.ranges[0][0] == self.ranges[0][1]

    def describe(self) -> str:
        """Render the class in bracket notation, e.g. ``[0-9A-Z]``."""
        parts = []
        for lo, hi in self.ranges:
            parts.append(chr(lo) if lo == hi else f"{chr(lo)}-{chr(hi)}")
        return f"[{''.join(parts)}]"


DIGIT = CharClass.from_ranges([(ord("0"), ord("9"))])
UPPER = CharClass.from_ranges([(ord("A"), ord("Z"))])
ALNUM = CharClass.from_ranges([(ord("0"), ord("9")), (ord("A"), ord("Z"))])

# Registry notation codes: n = digits, a = upper case letters, c = alphanumeric
_REGISTRY_CODES: dict[CharClass, str] = {DIGIT: "n", UPPER: "a", ALNUM: "c"}


@dataclass(frozen=True)
class StructuralPattern:
    """A parsed pattern: its source text and one character class per position."""

    source: str
    positions: tuple[CharClass, ...]

    @property
    def length(self) -> int:
        return len(self.positions)

    def fullmatch(self, text: str) -> bool:
        """Check a single string against this pattern alone.

        The compiled automaton is the fast path; this is the per-pattern
        reference used when only one pattern is of interest.
        """
        if len(text) != len(self.positions):
            return False
        return all(char in char_class for char, char_class in zip(text, self.positions))

    def notation(self) -> str:
        """Describe the pattern in Swift registry style.

        Examples:
            >>> parse_pattern(r"^\\d{2}[A-Z]{4}\\d{14}$").notation()
            '2!n4!a14!n'
            >>> parse_pattern(r"^DE$").notation()
            'DE'
        """
        out: list[str] = []
        index = 0
        while index < len(self.positions):
            char_class = self.positions[index]
            run = 1
            while (
                index + run < len(self.positions) and self.positions[index + run] == char_class
            ):
                run += 1

            if char_class.is_literal:
                out.append(chr(char_class.ranges[0][0]) * run)
            else:
                code = _REGISTRY_CODES.get(char_class, char_class.describe())
                out.append(f"{run}!{code}")
            index += run
        return "".join(out)


def parse_pattern(source: str) -> StructuralPattern:
    """Parse a pattern string into a :class:`StructuralPattern`.

    Raises:
        PatternSyntaxError: If the pattern leaves the supported subset
    """
    start = 1 if source.startswith("^") else 0
    end = len(source) - 1 if source.endswith("$") else len(source)

    positions: list[CharClass] = []
    index = start
    while index < end:
        char_class, index = _parse_atom(source, index, end)
        count, index = _parse_repeat(source, index, end)
        positions.extend([char_class] * count)

    return StructuralPattern(source=source, positions=tuple(positions))


def _parse_atom(source: str, index: int, end: int) -> tuple[CharClass, int]:
    char = source[index]

    if char == "\\":
        if index + 1 < end and source[index + 1] == "d":
            return DIGIT, index + 2
        raise PatternSyntaxError("Unsupported escape sequence", pattern=source, position=index)

    if char == "[":
        return _parse_bracket(source, index, end)

    if char.isascii() and char.isalnum():
        return CharClass.literal(char), index + 1

    raise PatternSyntaxError(f"Unsupported syntax {char!r}", pattern=source, position=index)


def _parse_bracket(source: str, index: int, end: int) -> tuple[CharClass, int]:
    opening = index
    index += 1
    if index < end and source[index] == "^":
        raise PatternSyntaxError("Negated classes are not supported", pattern=source, position=index)

    ranges: list[tuple[int, int]] = []
    while index < end and source[index] != "]":
        if source[index] == "\\":
            if index + 1 < end and source[index + 1] == "d":
                ranges.extend(DIGIT.ranges)
                index += 2
                continue
            raise PatternSyntaxError("Unsupported escape in class", pattern=source, position=index)

        lo = source[index]
        if index + 2 < end and source[index + 1] == "-" and source[index + 2] not in "]\\":
            hi = source[index + 2]
            if ord(lo) > ord(hi):
                raise PatternSyntaxError(
                    f"Reversed range {lo}-{hi}", pattern=source, position=index
                )
            ranges.append((ord(lo), ord(hi)))
            index += 3
        else:
            ranges.append((ord(lo), ord(lo)))
            index += 1

    if index >= end:
        raise PatternSyntaxError("Unterminated character class", pattern=source, position=opening)
    if not ranges:
        raise PatternSyntaxError("Empty character class", pattern=source, position=opening)

    return CharClass.from_ranges(ranges), index + 1


def _parse_repeat(source: str, index: int, end: int) -> tuple[int, int]:
    if index >= end or source[index] != "{":
        return 1, index

    closing = source.find("}", index, end)
    if closing == -1:
        raise PatternSyntaxError("Unterminated repetition", pattern=source, position=index)

    count = source[index + 1 : closing]
    if not count.isdigit() or not count.isascii():
        # {n,m} and {n,} would make the length variable
        raise PatternSyntaxError(
            f"Only exact repetition is supported, got {{{count}}}",
            pattern=source,
            position=index,
        )
    return int(count), closing + 1
