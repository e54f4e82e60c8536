"""Shared utilities: logging and settings."""
