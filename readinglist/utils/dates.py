"""Date normalization helpers."""

from datetime import date, datetime
from typing import Optional, Union

from dateutil import parser as dtparser

DateLike = Union[date, datetime, str]


def to_iso_date(value: Optional[DateLike], default_today: bool = False) -> Optional[str]:
    """Normalize a date-like value to ``YYYY-MM-DD``.

    Args:
        value: ``date``, ``datetime`` or ISO 8601 string
        default_today: Return today's date when *value* is None

    Returns:
        ISO date string, or None if *value* is None and no default applies

    Raises:
        ValueError: If a string is not an ISO 8601 date
        TypeError: If *value* is not date-like
    """
    if value is None:
        return date.today().isoformat() if default_today else None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("empty date string")
        try:
            return dtparser.isoparse(text).date().isoformat()
        except (ValueError, OverflowError) as exc:
            raise ValueError(f"not an ISO 8601 date: {value!r}") from exc
    raise TypeError(f"expected a date or ISO string, got {type(value).__name__}")
