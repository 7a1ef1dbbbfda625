from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DAY_END, DAY_START


@dataclass(frozen=True)
class UnavailableBlock:
    """A time window during which the person is not counted present."""

    block_id: str
    start: str
    end: str
    reason: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None


@dataclass(frozen=True)
class AvailabilitySlot:
    """Resolved availability of one person on one date.

    `status` is one of the AvailabilityStatus values, except under the
    explicit-state engine where it carries the home status type or sub-state.
    """

    is_available: bool
    status: str
    source: str
    start_hour: str = DAY_START
    end_hour: str = DAY_END
    home_status_type: Optional[str] = None
    state: Optional[str] = None
    sub_state: Optional[str] = None
    unavailable_blocks: tuple[UnavailableBlock, ...] = ()
