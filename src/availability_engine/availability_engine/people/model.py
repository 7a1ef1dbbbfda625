from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from ..availability.model import UnavailableBlock


@dataclass(frozen=True)
class ExplicitRecord:
    """A daily record as written by upstream editors (manual edits, imports).

    Every field is optional; the strategies decide how gaps are filled.
    """

    is_available: Optional[bool] = None
    status: Optional[str] = None
    start_hour: Optional[str] = None
    end_hour: Optional[str] = None
    home_status_type: Optional[str] = None
    source: Optional[str] = None
    state: Optional[str] = None
    sub_state: Optional[str] = None
    unavailable_blocks: tuple[UnavailableBlock, ...] = ()


@dataclass(frozen=True)
class Person:
    """Domain entity: a person whose presence is resolved.

    Note: read-only input; the engine never writes back into
    `daily_availability`.
    """

    person_id: str
    team_id: Optional[str] = None
    daily_availability: Mapping[str, ExplicitRecord] = field(default_factory=dict)

    def record_for(self, key: str) -> Optional[ExplicitRecord]:
        return (self.daily_availability or {}).get(key)
