"""Headcount rule: is a person physically present at a given minute of day."""

from __future__ import annotations

from ..common.time_utils import to_minutes
from ..core.constants import ABSENCE_ID_PREFIX, MINUTES_PER_DAY
from ..core.enums import ApprovalStatus, AvailabilityStatus, BlockType, SubState
from .model import AvailabilitySlot, UnavailableBlock

_AWAY_STATUSES = {
    AvailabilityStatus.HOME.value,
    AvailabilityStatus.UNAVAILABLE.value,
    AvailabilityStatus.NOT_DEFINED.value,
}
_ACTIVE_ABSENCE_STATUSES = {ApprovalStatus.APPROVED.value, ApprovalStatus.PARTIALLY_APPROVED.value}


def is_block_active(block: UnavailableBlock) -> bool:
    """Absence blocks count only once approved; manual blocks unless rejected."""
    is_absence = block.type == BlockType.ABSENCE.value or str(block.block_id or "").startswith(ABSENCE_ID_PREFIX)
    if is_absence:
        return block.status in _ACTIVE_ABSENCE_STATUSES
    return block.status != ApprovalStatus.REJECTED.value


def block_covers(block: UnavailableBlock, target_minutes: int) -> bool:
    start = to_minutes(block.start)
    end = to_minutes(block.end)
    if start is None or end is None:
        return False
    if end < start:
        end += MINUTES_PER_DAY
    return start <= target_minutes < end


def is_present(slot: AvailabilitySlot, target_minutes: int) -> bool:
    if not slot.is_available:
        return False
    if slot.status in _AWAY_STATUSES or slot.sub_state == SubState.NOT_DEFINED.value:
        return False

    if slot.status == AvailabilityStatus.ARRIVAL.value:
        start = to_minutes(slot.start_hour)
        if start is not None and target_minutes < start:
            return False

    if slot.status == AvailabilityStatus.DEPARTURE.value:
        end = to_minutes(slot.end_hour)
        if end is not None and target_minutes >= end:
            return False

    for block in slot.unavailable_blocks:
        if is_block_active(block) and block_covers(block, target_minutes):
            return False
    return True


def is_present_at(slot: AvailabilitySlot, time_of_day: str) -> bool:
    """Same as is_present for an "HH:MM" string; garbled input is not present."""
    minutes = to_minutes(time_of_day)
    if minutes is None:
        return False
    return is_present(slot, minutes)
