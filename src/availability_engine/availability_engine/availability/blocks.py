from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..absences.model import Absence, HourlyBlockage
from ..common.time_utils import normalize_time
from ..core.constants import DAY_END, DAY_START, DEFAULT_ABSENCE_REASON, DEFAULT_BLOCKAGE_REASON
from ..core.enums import ApprovalStatus, BlockType
from .model import UnavailableBlock


def absence_hours(absence: Absence, key: str) -> tuple[str, str]:
    """Boundary hours of an absence on the given day.

    Clock times only apply on the absence's own first/last day.
    """
    start, end = DAY_START, DAY_END
    if absence.start_date == key:
        start = normalize_time(absence.start_time) or DAY_START
    if absence.end_date == key:
        end = normalize_time(absence.end_time) or DAY_END
    return start, end


def absence_block(absence: Absence, key: str) -> UnavailableBlock:
    start, end = absence_hours(absence, key)
    return UnavailableBlock(
        block_id=str(absence.absence_id),
        start=start,
        end=end,
        reason=absence.reason or DEFAULT_ABSENCE_REASON,
        type=BlockType.ABSENCE.value,
        status=absence.status,
    )


def blockage_block(blockage: HourlyBlockage) -> UnavailableBlock:
    return UnavailableBlock(
        block_id=str(blockage.blockage_id),
        start=blockage.start_time,
        end=blockage.end_time,
        reason=blockage.reason or DEFAULT_BLOCKAGE_REASON,
        type=BlockType.HOURLY_BLOCKAGE.value,
        status=blockage.status or ApprovalStatus.APPROVED.value,
    )


def _is_for(person_id: str, record_person_id: Optional[str]) -> bool:
    return bool(record_person_id) and str(record_person_id) == str(person_id)


def absences_on(person_id: str, key: str, absences: Iterable[Absence], *, include_rejected: bool) -> list[Absence]:
    return [
        a
        for a in absences or ()
        if _is_for(person_id, a.person_id) and a.covers(key) and (include_rejected or not a.is_rejected)
    ]


def blockages_on(person_id: str, key: str, blockages: Iterable[HourlyBlockage]) -> list[HourlyBlockage]:
    return [b for b in blockages or () if _is_for(person_id, b.person_id) and b.date == key and not b.is_rejected]


def collect_blocks(
    person_id: str,
    key: str,
    absences: Sequence[Absence],
    blockages: Sequence[HourlyBlockage],
    *,
    include_rejected_absences: bool = False,
    strip_reason_suffix: bool = False,
) -> list[UnavailableBlock]:
    """Blocks for one day: absences first, then hourly blockages."""
    blocks: list[UnavailableBlock] = []
    for a in absences_on(person_id, key, absences, include_rejected=include_rejected_absences):
        block = absence_block(a, key)
        if strip_reason_suffix and block.reason:
            reason = block.reason.replace("| vacation", "").strip() or DEFAULT_ABSENCE_REASON
            block = UnavailableBlock(block.block_id, block.start, block.end, reason, block.type, block.status)
        blocks.append(block)
    blocks.extend(blockage_block(b) for b in blockages_on(person_id, key, blockages))
    return blocks
