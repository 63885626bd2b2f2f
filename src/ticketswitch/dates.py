"""Date rendering for query parameters."""

from __future__ import annotations

from datetime import date

_DATE_FORMAT = "%Y%m%d"


def format_date(value: date) -> str:
    return value.strftime(_DATE_FORMAT)


def date_range(start: date | None, end: date | None) -> str:
    """Render ``YYYYMMDD:YYYYMMDD``; either side may be open, ``""`` if both are."""

    if start is None and end is None:
        return ""
    left = format_date(start) if start is not None else ""
    right = format_date(end) if end is not None else ""
    return f"{left}:{right}"


__all__ = [
    "format_date",
    "date_range",
]
