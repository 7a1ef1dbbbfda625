from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Optional

from ..core.constants import DAY_END, DAY_START

_HHMM = re.compile(r"^(\d{1,2}):(\d{1,2})")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def try_parse_iso_date(value) -> Optional[date]:
    """Like parse_iso_date but returns None for anything unparsable.

    Accepts date objects and timestamp-suffixed strings ("2026-01-01T00:00:00").
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or len(value) < 10:
        return None
    try:
        return parse_iso_date(value[:10])
    except ValueError:
        return None


def date_key(day: date) -> str:
    """Key used by daily availability maps (YYYY-MM-DD)."""
    return day.strftime("%Y-%m-%d")


def previous_day(day: date) -> date:
    return day - timedelta(days=1)


def day_offset(target: date, anchor: date) -> int:
    """Whole days from anchor to target (negative when target is earlier)."""
    return (target - anchor).days


def date_range(start: date, days: int) -> list[date]:
    """Precomputed sequence of `days` consecutive dates starting at start."""
    return [start + timedelta(days=i) for i in range(max(int(days), 0))]


def normalize_time(value) -> Optional[str]:
    """Cut "HH:MM:SS" down to "HH:MM". Empty, garbled or non-string values give None."""
    if not isinstance(value, str):
        return None
    v = value.strip()[:5]
    if to_minutes(v) is None:
        return None
    return v


def normalize_start(value) -> str:
    return normalize_time(value) or DAY_START


def normalize_end(value) -> str:
    """Normalize an end hour; a bare midnight end means the full day."""
    v = normalize_time(value)
    if not v or v == DAY_START:
        return DAY_END
    return v


def to_minutes(value) -> Optional[int]:
    """Convert "HH:MM" to minutes after midnight, None when garbled."""
    if not isinstance(value, str):
        return None
    m = _HHMM.match(value.strip())
    if not m:
        return None
    hours, minutes = int(m.group(1)), int(m.group(2))
    if hours > 24 or minutes > 59:
        return None
    return hours * 60 + minutes
