"""Shared helpers used across the phishnet package."""

from .dates import format_date, parse_date

__all__ = ["format_date", "parse_date"]
