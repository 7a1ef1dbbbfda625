from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator, Optional, Sequence, Union

import pandas as pd

from ..absences.model import Absence, HourlyBlockage
from ..availability.factory import AvailabilityStrategyFactory, coerce_version
from ..common.time_utils import date_key, date_range
from ..core.constants import (
    DEFAULT_SNAPSHOT_CHUNK_SIZE,
    DEFAULT_SNAPSHOT_DAYS_BACK,
    DEFAULT_SNAPSHOT_DAYS_FORWARD,
)
from ..core.enums import EngineVersion
from ..people.model import Person
from ..rotations.model import TeamRotation

logger = logging.getLogger(__name__)

SNAPSHOT_COLUMNS = ["person_id", "date", "status", "start_time", "end_time", "is_available", "source"]


@dataclass(frozen=True)
class SnapshotReport:
    rows: list[dict]
    summary: list[dict]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.rows, columns=SNAPSHOT_COLUMNS)


def iter_chunks(rows: Sequence[dict], size: int = DEFAULT_SNAPSHOT_CHUNK_SIZE) -> Iterator[Sequence[dict]]:
    """Split snapshot rows for callers that write them in batches."""
    size = max(int(size), 1)
    for i in range(0, len(rows), size):
        yield rows[i : i + size]


class SnapshotService:
    """Historical attendance snapshot: one resolved slot per person per day."""

    def __init__(
        self,
        *,
        strategy_factory: Optional[AvailabilityStrategyFactory] = None,
        days_back: int = DEFAULT_SNAPSHOT_DAYS_BACK,
        days_forward: int = DEFAULT_SNAPSHOT_DAYS_FORWARD,
    ):
        self._factory = strategy_factory or AvailabilityStrategyFactory()
        self._days_back = int(days_back)
        self._days_forward = int(days_forward)

    def default_window(self, today: date) -> tuple[date, int]:
        return today - timedelta(days=self._days_back), self._days_back + self._days_forward

    def build_snapshot(
        self,
        people: Sequence[Person],
        rotations: Sequence[TeamRotation] = (),
        absences: Sequence[Absence] = (),
        blockages: Sequence[HourlyBlockage] = (),
        *,
        version: Union[EngineVersion, str, None] = EngineVersion.V1_LEGACY,
        start: Optional[date] = None,
        days: Optional[int] = None,
        today: Optional[date] = None,
    ) -> SnapshotReport:
        if start is None or days is None:
            window_start, window_days = self.default_window(today or date.today())
            start = window_start if start is None else start
            days = window_days if days is None else days

        selected = coerce_version(version)
        strategy = self._factory.for_version(selected)
        day_dates = date_range(start, days)
        keys = [date_key(d) for d in day_dates]

        rows: list[dict] = []
        summary_map: dict[str, dict] = {k: {"date": k, "total": 0, "available": 0} for k in keys}

        for person in people:
            for day, key in zip(day_dates, keys):
                slot = strategy.resolve(person, day, rotations, absences, blockages)
                rows.append(
                    {
                        "person_id": person.person_id,
                        "date": key,
                        "status": slot.status,
                        "start_time": slot.start_hour,
                        "end_time": slot.end_hour,
                        "is_available": slot.is_available,
                        "source": slot.source,
                    }
                )
                s = summary_map[key]
                s["total"] += 1
                if slot.is_available:
                    s["available"] += 1

        logger.info(
            "snapshot built: engine=%s people=%d days=%d rows=%d",
            selected.value,
            len(people),
            len(day_dates),
            len(rows),
        )
        return SnapshotReport(rows=rows, summary=[summary_map[k] for k in keys])
