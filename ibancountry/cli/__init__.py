"""Command line interface for ibancountry."""

from .main import app

__all__ = ["app"]
