"""Slot builders shared by the legacy and write-based engines.

Each builder constructs the slot field by field; nothing from an upstream
record is spread into the result.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..absences.model import Absence
from ..common.time_utils import normalize_end, normalize_start
from ..core.constants import DAY_END, DAY_START
from ..core.enums import AvailabilityStatus, RotationCategory, SlotSource
from ..people.model import ExplicitRecord, Person
from ..rotations.evaluator import find_team_rotation, rotation_category
from ..rotations.model import TeamRotation
from .blocks import absence_block, absence_hours
from .model import AvailabilitySlot, UnavailableBlock

_AWAY = {AvailabilityStatus.HOME.value, AvailabilityStatus.UNAVAILABLE.value}


def record_status(record: ExplicitRecord) -> str:
    if record.status:
        return record.status
    if record.is_available is False:
        return AvailabilityStatus.HOME.value
    return AvailabilityStatus.FULL.value


def record_slot(record: ExplicitRecord, status: str, blocks: Sequence[UnavailableBlock]) -> AvailabilitySlot:
    is_available = record.is_available if record.is_available is not None else status not in _AWAY
    return AvailabilitySlot(
        is_available=bool(is_available),
        status=status,
        source=record.source or SlotSource.MANUAL.value,
        start_hour=normalize_start(record.start_hour),
        end_hour=normalize_end(record.end_hour),
        home_status_type=record.home_status_type,
        state=record.state,
        sub_state=record.sub_state,
        unavailable_blocks=tuple(blocks),
    )


def absence_slot(absence: Absence, key: str, extra_blocks: Sequence[UnavailableBlock] = ()) -> AvailabilitySlot:
    start, end = absence_hours(absence, key)
    return AvailabilitySlot(
        is_available=False,
        status=AvailabilityStatus.HOME.value,
        source=SlotSource.ABSENCE.value,
        start_hour=start,
        end_hour=end,
        unavailable_blocks=(absence_block(absence, key), *extra_blocks),
    )


def rotation_slot(
    person: Person,
    day: date,
    rotations: Sequence[TeamRotation],
    blocks: Sequence[UnavailableBlock] = (),
) -> Optional[AvailabilitySlot]:
    """Slot from the person's team rotation, or None when it has no opinion."""
    rotation = find_team_rotation(person.team_id, rotations)
    if rotation is None:
        return None
    category = rotation_category(day, rotation)
    if category is None:
        return None

    at_home = category == RotationCategory.HOME
    return AvailabilitySlot(
        is_available=not at_home,
        status=category.value,
        source=SlotSource.ROTATION.value,
        start_hour=DAY_START,
        end_hour=DAY_START if at_home else DAY_END,
        unavailable_blocks=tuple(blocks),
    )


def default_slot(blocks: Sequence[UnavailableBlock] = ()) -> AvailabilitySlot:
    return AvailabilitySlot(
        is_available=True,
        status=AvailabilityStatus.FULL.value,
        source=SlotSource.DEFAULT.value,
        start_hour=DAY_START,
        end_hour=DAY_END,
        unavailable_blocks=tuple(blocks),
    )
