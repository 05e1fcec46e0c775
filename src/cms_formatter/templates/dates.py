"""Date tokens for slug templates."""

from __future__ import annotations

from datetime import datetime

DATE_TOKENS = ("year", "month", "day", "hour", "minute", "second")


def decompose_date(date: datetime) -> dict[str, str]:
    """Split a date into zero-padded ``year``/``month``/.../``second`` strings.

    Naive datetimes are read as local time; aware ones are converted to
    the local timezone first.

    Example:
        >>> decompose_date(datetime(2020, 1, 2, 3, 4, 5))["month"]
        '01'
    """
    if date.tzinfo is not None:
        date = date.astimezone()
    return {
        "year": f"{date.year:04d}",
        "month": f"{date.month:02d}",
        "day": f"{date.day:02d}",
        "hour": f"{date.hour:02d}",
        "minute": f"{date.minute:02d}",
        "second": f"{date.second:02d}",
    }
