from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TeamRotation:
    """Recurring on-base / at-home cycle anchored to start_date."""

    team_id: str
    days_on_base: int
    days_at_home: int
    start_date: str
    arrival_time: Optional[str] = None
    departure_time: Optional[str] = None
    rotation_id: Optional[str] = None

    @property
    def cycle_length(self) -> int:
        return int(self.days_on_base) + int(self.days_at_home)
