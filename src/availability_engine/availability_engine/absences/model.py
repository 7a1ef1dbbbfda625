from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import ApprovalStatus


@dataclass(frozen=True)
class Absence:
    """Leave request over a date range.

    start_time/end_time only apply on the first/last day of the range.
    """

    absence_id: str
    person_id: str
    start_date: str
    end_date: str
    status: str = ApprovalStatus.PENDING.value
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    reason: Optional[str] = None

    def covers(self, key: str) -> bool:
        return bool(self.start_date) and bool(self.end_date) and self.start_date <= key <= self.end_date

    @property
    def is_rejected(self) -> bool:
        return self.status == ApprovalStatus.REJECTED.value


@dataclass(frozen=True)
class HourlyBlockage:
    """Manually entered unavailable window on a single date."""

    blockage_id: str
    person_id: str
    date: str
    start_time: str
    end_time: str
    reason: Optional[str] = None
    status: Optional[str] = None

    @property
    def is_rejected(self) -> bool:
        return self.status == ApprovalStatus.REJECTED.value
