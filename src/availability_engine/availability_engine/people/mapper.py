"""Map store rows (snake_case dicts) into frozen domain records.

Collaborators fetch rows over their own boundary; these helpers only shape
them. Garbled values degrade to None or defaults instead of raising.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from ..absences.model import Absence, HourlyBlockage
from ..availability.model import UnavailableBlock
from ..common.time_utils import date_key, normalize_time, try_parse_iso_date
from ..core.enums import ApprovalStatus
from ..rotations.model import TeamRotation
from .model import ExplicitRecord, Person


def _str(value: Any) -> Optional[str]:
    if value is None:
        return None
    v = str(value).strip()
    return v or None


def _int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _bool(value: Any) -> Optional[bool]:
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "t", "yes"}
    return bool(value)


def _date_str(value: Any) -> str:
    parsed = try_parse_iso_date(value)
    return date_key(parsed) if parsed else (_str(value) or "")


def block_from_row(row: Mapping[str, Any]) -> UnavailableBlock:
    return UnavailableBlock(
        block_id=_str(row.get("id")) or "",
        start=normalize_time(_str(row.get("start"))) or "",
        end=normalize_time(_str(row.get("end"))) or "",
        reason=_str(row.get("reason")),
        type=_str(row.get("type")),
        status=_str(row.get("status")),
    )


def record_from_row(row: Mapping[str, Any]) -> ExplicitRecord:
    """Daily presence row -> ExplicitRecord.

    Accepts both store column names (start_time, v2_state) and slot names
    (start_hour, state).
    """
    blocks = row.get("unavailable_blocks") or ()
    return ExplicitRecord(
        is_available=_bool(row.get("is_available")),
        status=_str(row.get("status")),
        start_hour=_str(row.get("start_time", row.get("start_hour"))),
        end_hour=_str(row.get("end_time", row.get("end_hour"))),
        home_status_type=_str(row.get("home_status_type")),
        source=_str(row.get("source")),
        state=_str(row.get("v2_state", row.get("state"))),
        sub_state=_str(row.get("v2_sub_state", row.get("sub_state"))),
        unavailable_blocks=tuple(block_from_row(b) for b in blocks if isinstance(b, Mapping)),
    )


def person_from_row(row: Mapping[str, Any], presence_rows: Iterable[Mapping[str, Any]] = ()) -> Person:
    """Build a Person and its daily map from presence rows keyed by `date`."""
    daily: dict[str, ExplicitRecord] = {}
    for presence in presence_rows:
        key = try_parse_iso_date(presence.get("date"))
        if key is None:
            continue
        daily[date_key(key)] = record_from_row(presence)
    return Person(
        person_id=_str(row.get("id")) or "",
        team_id=_str(row.get("team_id")),
        daily_availability=daily,
    )


def rotation_from_row(row: Mapping[str, Any]) -> TeamRotation:
    return TeamRotation(
        team_id=_str(row.get("team_id")) or "",
        days_on_base=_int(row.get("days_on_base")),
        days_at_home=_int(row.get("days_at_home")),
        start_date=_date_str(row.get("start_date")),
        arrival_time=normalize_time(_str(row.get("arrival_time"))),
        departure_time=normalize_time(_str(row.get("departure_time"))),
        rotation_id=_str(row.get("id")),
    )


def absence_from_row(row: Mapping[str, Any]) -> Absence:
    return Absence(
        absence_id=_str(row.get("id")) or "",
        person_id=_str(row.get("person_id")) or "",
        start_date=_date_str(row.get("start_date")),
        end_date=_date_str(row.get("end_date")),
        status=_str(row.get("status")) or ApprovalStatus.PENDING.value,
        start_time=normalize_time(_str(row.get("start_time"))),
        end_time=normalize_time(_str(row.get("end_time"))),
        reason=_str(row.get("reason")),
    )


def blockage_from_row(row: Mapping[str, Any]) -> HourlyBlockage:
    """Hourly blockage row; the date is kept as stored (strict day-key match)."""
    return HourlyBlockage(
        blockage_id=_str(row.get("id")) or "",
        person_id=_str(row.get("person_id")) or "",
        date=_str(row.get("date")) or "",
        start_time=normalize_time(_str(row.get("start_time"))) or "",
        end_time=normalize_time(_str(row.get("end_time"))) or "",
        reason=_str(row.get("reason")),
        status=_str(row.get("status")),
    )
