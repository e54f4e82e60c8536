"""Tests for the ibancountry CLI - Typer commands with CliRunner."""

import json

import pytest
from prometheus_client import REGISTRY
from typer.testing import CliRunner

from ibancountry import __version__
from ibancountry.cli.main import app

runner = CliRunner()

pytestmark = pytest.mark.integration


def _classified(result: str) -> float:
    return REGISTRY.get_sample_value("ibancountry_classifications_total", {"result": result}) or 0.0


class TestCheckCommand:
    def test_valid_address(self):
        result = runner.invoke(app, ["check", "GB82WEST12345698765432"])

        assert result.exit_code == 0
        assert "valid" in result.stdout
        assert "United Kingdom" in result.stdout

    def test_any_rejection_exits_with_error(self):
        result = runner.invoke(app, ["check", "DE44500105175407324931", "DE44ABCDE5175407324931"])

        assert result.exit_code == 1
        assert "invalid" in result.stdout

    def test_json_output(self):
        result = runner.invoke(
            app,
            [
                "check",
                "DE44500105175407324931",
                "DE44ABCDE5175407324931",
                "ZZ44500105175407324931",
                "--json",
            ],
        )

        assert result.exit_code == 1
        payload = json.loads(result.stdout)
        assert payload == [
            {"address": "DE44500105175407324931", "country": "DE", "result": "valid"},
            {"address": "DE44ABCDE5175407324931", "country": "DE", "result": "invalid"},
            {"address": "ZZ44500105175407324931", "country": None, "result": "country_unknown"},
        ]

    def test_records_metrics(self):
        before = _classified("country_unknown")

        runner.invoke(app, ["check", "ZZ00", "XX00", "--json"])

        assert _classified("country_unknown") == before + 2

    def test_metrics_can_be_disabled(self, monkeypatch):
        monkeypatch.setenv("IBANCOUNTRY_METRICS_ENABLED", "false")
        before = _classified("valid")

        result = runner.invoke(app, ["check", "GB82WEST12345698765432", "--json"])

        assert result.exit_code == 0
        assert _classified("valid") == before

    def test_bracketed_address_is_printed_verbatim(self):
        result = runner.invoke(app, ["check", "DE[/x]"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "DE[/x]" in result.stdout
        assert "invalid" in result.stdout

    def test_requires_an_address(self):
        result = runner.invoke(app, ["check"])

        assert result.exit_code != 0


class TestCountriesCommand:
    def test_lists_all_countries(self):
        result = runner.invoke(app, ["countries"])

        assert result.exit_code == 0
        assert "(75)" in result.stdout
        assert "Germany" in result.stdout
        assert "Kosovo" in result.stdout

    def test_single_country(self):
        result = runner.invoke(app, ["countries", "--code", "gb"])

        assert result.exit_code == 0
        assert "United Kingdom" in result.stdout
        assert "GB2!n4!a14!n" in result.stdout
        assert "22" in result.stdout
        assert "Germany" not in result.stdout

    def test_unknown_country(self):
        result = runner.invoke(app, ["countries", "--code", "ZZ"])

        assert result.exit_code == 1
        assert "Unknown country code" in result.stdout

    def test_bracketed_code_is_printed_verbatim(self):
        result = runner.invoke(app, ["countries", "--code", "[/x]"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Unknown country code: [/x]" in result.stdout


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout
