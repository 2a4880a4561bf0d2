from __future__ import annotations

from datetime import date, datetime

from ..core.constants import ISO_DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def parse_date(value: str, fmt: str) -> date:
    return datetime.strptime((value or "").strip(), fmt).date()


def inclusive_days(start_date: date, end_date: date) -> int:
    """Number of calendar days from start to end, both included.

    Negative when end_date is before start_date.
    """
    return (end_date - start_date).days + 1


def as_date(value: date) -> date:
    """Drop the time part of a datetime so it compares with plain dates."""
    if isinstance(value, datetime):
        return value.date()
    return value
