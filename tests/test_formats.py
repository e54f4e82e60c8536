"""Tests for the IBAN registry country format table."""

from dataclasses import FrozenInstanceError

import pytest

from ibancountry.formats import COUNTRY_FORMATS, IbanRegistry
from ibancountry.patterns import DIGIT

pytestmark = pytest.mark.unit


class TestCountryFormatTable:
    def test_registry_size(self):
        assert len(COUNTRY_FORMATS) == 75

    def test_codes_are_unique(self):
        codes = [fmt.code for fmt in COUNTRY_FORMATS]

        assert len(codes) == len(set(codes))

    @pytest.mark.parametrize("fmt", COUNTRY_FORMATS, ids=lambda fmt: fmt.code)
    def test_prefix_pattern_matches_own_code(self, fmt):
        prefix = fmt.prefix()

        assert prefix.length == 2
        assert prefix.fullmatch(fmt.code)

    @pytest.mark.parametrize("fmt", COUNTRY_FORMATS, ids=lambda fmt: fmt.code)
    def test_remainder_starts_with_check_digits(self, fmt):
        remainder = fmt.remainder()

        assert remainder.positions[:2] == (DIGIT, DIGIT)

    def test_entries_are_immutable(self):
        with pytest.raises(FrozenInstanceError):
            COUNTRY_FORMATS[0].code = "XX"  # type: ignore[misc]

    def test_romania_keeps_transcribed_class(self):
        romania = IbanRegistry.get_format("RO")

        assert romania is not None
        assert "[A-z]" in romania.remainder_pattern


class TestIbanRegistry:
    @pytest.mark.parametrize(
        "code,name",
        [
            ("DE", "Germany"),
            ("GB", "United Kingdom"),
            ("IT", "Italy"),
            ("XK", "Kosovo"),
        ],
    )
    def test_country_names(self, code, name):
        assert IbanRegistry.get_country_name(code) == name

    def test_lookup_is_case_insensitive(self):
        assert IbanRegistry.get_format("de") is IbanRegistry.get_format("DE")

    def test_unknown_country(self):
        assert IbanRegistry.get_format("ZZ") is None
        assert IbanRegistry.get_country_name("ZZ") is None
        assert IbanRegistry.iban_length("ZZ") is None

    @pytest.mark.parametrize(
        "code,expected_length",
        [
            ("DE", 22),
            ("GB", 22),
            ("NO", 15),  # Shortest
            ("MT", 31),
            ("LC", 32),  # Longest
            ("BR", 29),
        ],
    )
    def test_iban_length(self, code, expected_length):
        assert IbanRegistry.iban_length(code) == expected_length

    def test_list_supported_countries(self):
        countries = IbanRegistry.list_supported_countries()

        assert countries == sorted(countries)
        assert len(countries) == 75
        assert "DE" in countries
        assert "ZZ" not in countries
