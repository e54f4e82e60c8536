"""Tests for the multi-pattern automaton."""

import pytest

from ibancountry.automaton import DEAD_STATE, PatternSet
from ibancountry.exceptions import PatternSizeLimitError
from ibancountry.formats import COUNTRY_FORMATS
from ibancountry.patterns import parse_pattern

from .conftest import conforming_text

pytestmark = pytest.mark.unit


@pytest.fixture
def small_set() -> PatternSet:
    return PatternSet(
        [
            parse_pattern(r"^\d{2}$"),
            parse_pattern(r"^[A-Z\d]{2}$"),
            parse_pattern(r"^[A-Z]{2}$"),
            parse_pattern(r"^\d{3}$"),
        ]
    )


class TestPatternSetMatches:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("12", (0, 1)),
            ("AB", (1, 2)),
            ("A1", (1,)),
            ("123", (3,)),
            ("1", ()),
            ("", ()),
            ("1a", ()),
            ("1234", ()),
            ("é1", ()),
        ],
    )
    def test_reports_every_matching_index(self, small_set, text, expected):
        assert small_set.matches(text) == expected

    def test_len(self, small_set):
        assert len(small_set) == 4

    def test_empty_set_matches_nothing(self):
        matcher = PatternSet([])

        assert len(matcher) == 0
        assert matcher.matches("") == ()
        assert matcher.matches("DE") == ()

    def test_zero_length_pattern_matches_only_empty_text(self):
        matcher = PatternSet([parse_pattern("^$"), parse_pattern(r"^\d$")])

        assert matcher.matches("") == (0,)
        assert matcher.matches("1") == (1,)

    def test_duplicate_patterns_both_reported(self):
        matcher = PatternSet([parse_pattern(r"^\d{2}$"), parse_pattern(r"^\d{2}$")])

        assert matcher.matches("42") == (0, 1)


class TestPatternSetTables:
    def test_size_is_states_times_classes(self, small_set):
        # Boundaries: 0, :, A, [  ->  5 alphabet classes
        assert small_set.size == small_set.state_count * 5

    def test_dead_state_is_absorbing(self, small_set):
        # Internals: the first row belongs to the dead state
        assert all(cell == DEAD_STATE for cell in small_set._transitions[:5])

    def test_size_limit_enforced(self):
        patterns = [parse_pattern(r"^\d{2}[A-Z]{4}[A-Z\d]{20}$")]

        with pytest.raises(PatternSizeLimitError) as exc_info:
            PatternSet(patterns, size_limit=10)

        assert exc_info.value.limit == 10
        assert exc_info.value.size > 10

    def test_registry_remainders_fit_generous_limit(self):
        matcher = PatternSet(
            [fmt.remainder() for fmt in COUNTRY_FORMATS], size_limit=16_000_000
        )

        assert matcher.size <= 16_000_000

    def test_repr(self, small_set):
        assert repr(small_set).startswith("<PatternSet(patterns=4")


class TestAgreesWithSinglePatternMatching:
    """The combined automaton must agree with matching each pattern on its own."""

    @pytest.fixture(scope="class")
    def remainders(self):
        patterns = [fmt.remainder() for fmt in COUNTRY_FORMATS]
        return patterns, PatternSet(patterns, size_limit=16_000_000)

    def _samples(self, patterns):
        for pattern in patterns:
            text = conforming_text(pattern)
            yield text
            yield text[:-1]
            yield text + "0"
            yield "A" + text[1:]
            yield text.replace("0", "Z")
            yield text.lower()

    def test_every_sample(self, remainders):
        patterns, matcher = remainders

        for text in self._samples(patterns):
            expected = tuple(i for i, pattern in enumerate(patterns) if pattern.fullmatch(text))
            assert matcher.matches(text) == expected, text
