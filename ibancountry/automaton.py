"""Multi-pattern matching over structural patterns.

:class:`PatternSet` compiles many fixed-length patterns into a single
deterministic automaton and reports every pattern that matches a string in one
left-to-right pass, instead of trying each pattern in turn.

Construction:

1. The alphabet is partitioned into equivalence classes. Every range used by
   any pattern contributes its two boundaries; code points between two
   consecutive boundaries are indistinguishable to all patterns. Looking up the
   class of a character is a binary search over the boundaries.
2. States are ``(position, patterns still alive)`` pairs, discovered
   breadth-first from ``(0, all patterns)``. A pattern stays alive while every
   character so far fell inside its class at that position.
3. A state accepts the alive patterns whose length equals its position.

State 0 is the dead state: once reached, no pattern can match any more.

Usage:
    >>> matcher = PatternSet([parse_pattern(r"^\\d{2}$"), parse_pattern(r"^[A-Z\\d]{2}$")])
    >>> matcher.matches("12")
    (0, 1)
    >>> matcher.matches("A1")
    (1,)
"""

from __future__ import annotations

from bisect import bisect_right
from collections import deque
from collections.abc import Sequence

from .exceptions import PatternSizeLimitError
from .patterns import StructuralPattern

DEAD_STATE = 0

# Transition table cells (states x alphabet classes)
DEFAULT_SIZE_LIMIT = 1_000_000


class PatternSet:
    """Immutable automaton reporting all matching pattern indices.

    Attributes:
        patterns: The patterns in index order
        size_limit: Maximum number of transition table cells
    """

    def __init__(
        self, patterns: Sequence[StructuralPattern], *, size_limit: int = DEFAULT_SIZE_LIMIT
    ) -> None:
        self.patterns: tuple[StructuralPattern, ...] = tuple(patterns)
        self.size_limit = size_limit

        self._boundaries = _alphabet_boundaries(self.patterns)
        self._class_count = len(self._boundaries) + 1
        self._transitions, self._accepting = self._build()
        self._start = 1 if self.patterns else DEAD_STATE

    def __len__(self) -> int:
        return len(self.patterns)

    @property
    def state_count(self) -> int:
        return len(self._accepting)

    @property
    def size(self) -> int:
        """Number of cells in the transition table."""
        return len(self._transitions)

    def matches(self, text: str) -> tuple[int, ...]:
        """Return the sorted indices of all patterns matching ``text`` in full."""
        transitions = self._transitions
        boundaries = self._boundaries
        width = self._class_count

        state = self._start
        for char in text:
            state = transitions[state * width + bisect_right(boundaries, ord(char))]
            if state == DEAD_STATE:
                return ()
        return self._accepting[state]

    def _build(self) -> tuple[tuple[int, ...], tuple[tuple[int, ...], ...]]:
        # One representative code point per alphabet class. Class 0 lies below
        # every boundary and belongs to no pattern range.
        representatives = [-1] + list(self._boundaries)
        width = self._class_count

        transitions: list[int] = [DEAD_STATE] * width
        accepting: list[tuple[int, ...]] = [()]
        if not self.patterns:
            return tuple(transitions), tuple(accepting)

        start = (0, frozenset(range(len(self.patterns))))
        state_ids: dict[tuple[int, frozenset[int]], int] = {start: 1}
        queue: deque[tuple[int, frozenset[int]]] = deque([start])
        transitions.extend([DEAD_STATE] * width)
        accepting.append(self._accepted(start))
        if len(transitions) > self.size_limit:
            raise PatternSizeLimitError(
                "Compiled pattern set exceeds its size limit",
                size=len(transitions),
                limit=self.size_limit,
                context={"patterns": len(self.patterns), "states": 2},
            )

        while queue:
            key = queue.popleft()
            position, alive = key
            row = state_ids[key] * width

            for alphabet_class, codepoint in enumerate(representatives):
                survivors = frozenset(
                    index
                    for index in alive
                    if position < self.patterns[index].length
                    and self.patterns[index].positions[position].contains_codepoint(codepoint)
                )
                if not survivors:
                    continue

                target = (position + 1, survivors)
                target_id = state_ids.get(target)
                if target_id is None:
                    target_id = len(accepting)
                    size = (target_id + 1) * width
                    if size > self.size_limit:
                        raise PatternSizeLimitError(
                            "Compiled pattern set exceeds its size limit",
                            size=size,
                            limit=self.size_limit,
                            context={"patterns": len(self.patterns), "states": target_id + 1},
                        )
                    state_ids[target] = target_id
                    transitions.extend([DEAD_STATE] * width)
                    accepting.append(self._accepted(target))
                    queue.append(target)

                transitions[row + alphabet_class] = target_id

        return tuple(transitions), tuple(accepting)

    def _accepted(self, key: tuple[int, frozenset[int]]) -> tuple[int, ...]:
        position, alive = key
        return tuple(sorted(i for i in alive if self.patterns[i].length == position))

    def __repr__(self) -> str:
        return (
            f"<PatternSet(patterns={len(self.patterns)}, "
            f"states={self.state_count}, classes={self._class_count})>"
        )


def _alphabet_boundaries(patterns: Sequence[StructuralPattern]) -> tuple[int, ...]:
    """Sorted code points where class membership can change."""
    boundaries: set[int] = set()
    for pattern in patterns:
        for char_class in set(pattern.positions):
            for lo, hi in char_class.ranges:
                boundaries.add(lo)
                boundaries.add(hi + 1)
    return tuple(sorted(boundaries))
