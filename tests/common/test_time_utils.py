from datetime import date

from availability_engine.common.time_utils import (
    date_key,
    date_range,
    normalize_end,
    normalize_start,
    normalize_time,
    to_minutes,
    try_parse_iso_date,
)


def test_normalize_time_cuts_seconds():
    assert normalize_time("08:30:00") == "08:30"
    assert normalize_time("08:30") == "08:30"
    assert normalize_time("") is None
    assert normalize_time(None) is None
    assert normalize_time("abc") is None
    assert normalize_time("9:15") == "9:15"


def test_day_boundary_defaults():
    assert normalize_start(None) == "00:00"
    assert normalize_end(None) == "23:59"
    assert normalize_end("00:00:00") == "23:59"
    assert normalize_end("16:00:00") == "16:00"


def test_to_minutes_rejects_garbled_values():
    assert to_minutes("08:05") == 485
    assert to_minutes("8:05") == 485
    assert to_minutes("25:00") is None
    assert to_minutes("ab:cd") is None
    assert to_minutes(None) is None


def test_dates():
    assert try_parse_iso_date("2026-01-05T10:00:00") == date(2026, 1, 5)
    assert try_parse_iso_date("05/01/2026") is None
    assert date_key(date(2026, 1, 5)) == "2026-01-05"

    days = date_range(date(2026, 1, 30), 3)
    assert [date_key(d) for d in days] == ["2026-01-30", "2026-01-31", "2026-02-01"]
    assert date_range(date(2026, 1, 1), 0) == []
