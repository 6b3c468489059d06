"""Utility functions."""

from readinglist.utils.dates import to_iso_date

__all__ = ["to_iso_date"]
