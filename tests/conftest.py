"""
Pytest configuration and global fixtures.

This module provides shared fixtures used across all tests.
"""

from collections.abc import Generator

import pytest

from ibancountry import matcher
from ibancountry.patterns import StructuralPattern
from ibancountry.utils import config


def conforming_text(pattern: StructuralPattern) -> str:
    """Build the simplest string that satisfies every position of a pattern."""
    return "".join(chr(char_class.ranges[0][0]) for char_class in pattern.positions)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Make every test read settings from its own environment."""
    monkeypatch.setattr(config, "_settings", None)
    yield


@pytest.fixture
def fresh_pattern_set(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop the process-wide compiled pattern set for the duration of a test."""
    monkeypatch.setattr(matcher, "_compiled", None)
