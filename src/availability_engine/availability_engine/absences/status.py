from __future__ import annotations

from typing import Optional

from ..common.time_utils import date_key, date_range, day_offset, try_parse_iso_date
from ..core.enums import ApprovalStatus
from ..people.model import Person
from .model import Absence

_HOME_STATUSES = {"home", "leave"}
_BASE_STATUSES = {"base", "arrival", "departure"}


def computed_absence_status(person: Person, absence: Optional[Absence]) -> str:
    """Approval status of an absence as reflected by the person's daily records.

    An explicit non-pending status wins. A pending absence is read back from the
    records it covers: every day home means approved, some days home means
    partially approved, every day on base means rejected.
    """
    if absence is None:
        return ApprovalStatus.PENDING.value
    if absence.status and absence.status != ApprovalStatus.PENDING.value:
        return absence.status

    start = try_parse_iso_date(absence.start_date)
    end = try_parse_iso_date(absence.end_date)
    if start is None or end is None or end < start:
        return ApprovalStatus.PENDING.value

    days = date_range(start, day_offset(end, start) + 1)
    home_days = 0
    base_days = 0
    for day in days:
        record = person.record_for(date_key(day))
        if record is None:
            continue
        if record.status in _HOME_STATUSES or record.is_available is False:
            home_days += 1
        elif record.status in _BASE_STATUSES or record.is_available is True:
            base_days += 1

    total = len(days)
    if home_days == total:
        return ApprovalStatus.APPROVED.value
    if home_days > 0:
        return ApprovalStatus.PARTIALLY_APPROVED.value
    if base_days == total:
        return ApprovalStatus.REJECTED.value
    return ApprovalStatus.PENDING.value
