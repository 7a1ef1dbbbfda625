from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ...absences.model import Absence, HourlyBlockage
from ...common.time_utils import date_key, normalize_end, normalize_start
from ...core.constants import DAY_END, DAY_START
from ...core.enums import AvailabilityStatus, EngineVersion, ExplicitState, SlotSource, SubState
from ...people.model import ExplicitRecord, Person
from ...rotations.model import TeamRotation
from ..blocks import collect_blocks
from ..model import AvailabilitySlot, UnavailableBlock
from .base import AvailabilityStrategy

_BASE_STATUSES = {"base", "arrival", "departure", "full"}
_HOME_STATUSES = {"home", "unavailable"}


def state_from_status(status: str) -> str:
    if status in _HOME_STATUSES:
        return ExplicitState.HOME.value
    if status in _BASE_STATUSES:
        return ExplicitState.BASE.value
    return ExplicitState.HOME.value


def sub_state_from_status(status: str) -> str:
    return {
        "arrival": SubState.ARRIVAL.value,
        "departure": SubState.DEPARTURE.value,
        "home": SubState.VACATION.value,
        "unavailable": SubState.VACATION.value,
    }.get(status, SubState.FULL_DAY.value)


class ExplicitStateStrategy(AvailabilityStrategy):
    """Only explicit (state, sub_state) records count.

    A day without a record is "not defined" and the person is unavailable.
    Absences and blockages never change the state here; they only contribute
    unavailable blocks for display and presence checks.
    """

    version = EngineVersion.V2_SIMPLIFIED.value

    def resolve(
        self,
        person: Person,
        day: date,
        rotations: Sequence[TeamRotation] = (),
        absences: Sequence[Absence] = (),
        blockages: Sequence[HourlyBlockage] = (),
    ) -> AvailabilitySlot:
        key = date_key(day)
        blocks = collect_blocks(
            person.person_id,
            key,
            absences,
            blockages,
            include_rejected_absences=True,
            strip_reason_suffix=True,
        )

        record = person.record_for(key)
        pair = self._state_pair(record)
        if record is None or pair is None:
            return self._not_defined(blocks)

        state, sub_state = pair
        status = record.home_status_type if state == ExplicitState.HOME.value and record.home_status_type else sub_state
        return AvailabilitySlot(
            is_available=state == ExplicitState.BASE.value,
            status=status,
            source=record.source or SlotSource.MANUAL.value,
            start_hour=normalize_start(record.start_hour),
            end_hour=normalize_end(record.end_hour),
            home_status_type=record.home_status_type,
            state=state,
            sub_state=sub_state,
            unavailable_blocks=tuple(blocks),
        )

    @staticmethod
    def _state_pair(record: Optional[ExplicitRecord]) -> Optional[tuple[str, str]]:
        if record is None:
            return None
        if record.state:
            return record.state, record.sub_state or SubState.FULL_DAY.value
        if record.status:
            return state_from_status(record.status), sub_state_from_status(record.status)
        return None

    @staticmethod
    def _not_defined(blocks: Sequence[UnavailableBlock]) -> AvailabilitySlot:
        return AvailabilitySlot(
            is_available=False,
            status=AvailabilityStatus.NOT_DEFINED.value,
            source=SlotSource.SYSTEM.value,
            start_hour=DAY_START,
            end_hour=DAY_END,
            sub_state=SubState.NOT_DEFINED.value,
            unavailable_blocks=tuple(blocks),
        )
