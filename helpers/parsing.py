"""Lenient parsers for raw microservice record fields."""

import re
from datetime import date, datetime, timezone
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_date(value: Any) -> datetime | None:
    """ISO date/datetime (or date object) as an aware UTC datetime; None if unparseable."""
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        try:
            dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def parse_experience(value: Any) -> int:
    """Leading integer of a free-text field ("5 years" -> 5); 0 if there is none."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    return 0


def days_since(value: Any, now: datetime) -> int | None:
    """Whole days elapsed from a timestamp to now; None if unparseable."""
    dt = parse_date(value)
    if dt is None:
        return None
    return (now - dt).days
