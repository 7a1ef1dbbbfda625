from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence, Union

from ..absences.model import Absence, HourlyBlockage
from ..common.time_utils import previous_day
from ..core.constants import DAY_END, DAY_START, DEFAULT_HOME_LABEL, HOME_STATUS_LABELS
from ..core.enums import AvailabilityStatus, DisplayStatus, EngineVersion, ExplicitState, SubState
from ..people.model import Person
from ..rotations.model import TeamRotation
from .factory import create_strategy
from .model import AvailabilitySlot
from .strategies.base import AvailabilityStrategy

_ON_BASE_STATUSES = {
    AvailabilityStatus.BASE.value,
    AvailabilityStatus.FULL.value,
    AvailabilityStatus.ARRIVAL.value,
    AvailabilityStatus.DEPARTURE.value,
}


@dataclass(frozen=True)
class DisplayInfo:
    """How an attendance cell should be shown for one person and date."""

    availability: AvailabilitySlot
    display_status: str
    label: str
    is_base: bool = False
    is_home: bool = False
    is_arrival: bool = False
    is_departure: bool = False
    is_missing_arrival: bool = False
    is_missing_departure: bool = False
    has_continuity_warning: bool = False
    times: str = ""


def _label(status: DisplayStatus) -> str:
    return {
        DisplayStatus.BASE: "בבסיס",
        DisplayStatus.ARRIVAL: "הגעה",
        DisplayStatus.DEPARTURE: "יציאה",
        DisplayStatus.MISSING_ARRIVAL: "יציאה (חסר הגעה)",
        DisplayStatus.MISSING_DEPARTURE: "בסיס (חסר יציאה)",
        DisplayStatus.SINGLE_DAY: "יום בודד",
        DisplayStatus.UNAVAILABLE: "אילוץ",
        DisplayStatus.NOT_DEFINED: "לא הוגדר",
        DisplayStatus.UNKNOWN: "לא ידוע",
    }.get(status, status.value)


def home_label(slot: AvailabilitySlot) -> str:
    for key in (slot.home_status_type, slot.sub_state, slot.status):
        if key and key in HOME_STATUS_LABELS:
            return HOME_STATUS_LABELS[key]
    return DEFAULT_HOME_LABEL


def is_on_base(slot: AvailabilitySlot) -> bool:
    return slot.status in _ON_BASE_STATUSES or slot.state == ExplicitState.BASE.value


def ended_on_base(slot: AvailabilitySlot) -> bool:
    """Whether the person was still on base at the end of that day."""
    return slot.is_available and slot.end_hour == DAY_END and slot.state != ExplicitState.HOME.value


def classify_on_base(slot: AvailabilitySlot, previous: AvailabilitySlot) -> DisplayInfo:
    explicit_start = bool(slot.start_hour) and slot.start_hour != DAY_START
    explicit_end = bool(slot.end_hour) and slot.end_hour != DAY_END
    continuity = ended_on_base(previous)
    missing_arrival_trigger = not continuity and not explicit_start

    if explicit_start and explicit_end:
        status = DisplayStatus.SINGLE_DAY
    elif explicit_start:
        status = DisplayStatus.ARRIVAL
    elif explicit_end:
        status = DisplayStatus.MISSING_ARRIVAL if missing_arrival_trigger else DisplayStatus.DEPARTURE
    elif slot.status == AvailabilityStatus.ARRIVAL.value:
        status = DisplayStatus.ARRIVAL
    elif slot.status == AvailabilityStatus.DEPARTURE.value:
        status = DisplayStatus.DEPARTURE
    else:
        status = DisplayStatus.BASE

    label = _label(status)
    times = ""
    if status == DisplayStatus.SINGLE_DAY:
        times = f"{slot.start_hour}-{slot.end_hour}"
    elif explicit_start:
        times = slot.start_hour
    elif explicit_end:
        times = slot.end_hour
    if times:
        label = f"{label} {times}"

    return DisplayInfo(
        availability=slot,
        display_status=status.value,
        label=label,
        is_base=True,
        is_arrival=explicit_start,
        is_departure=explicit_end,
        is_missing_arrival=status == DisplayStatus.MISSING_ARRIVAL,
        is_missing_departure=slot.status == AvailabilityStatus.DEPARTURE.value and not explicit_end,
        has_continuity_warning=missing_arrival_trigger,
        times=times,
    )


def derive_display_info(
    person: Person,
    day: date,
    rotations: Sequence[TeamRotation] = (),
    absences: Sequence[Absence] = (),
    blockages: Sequence[HourlyBlockage] = (),
    version: Union[EngineVersion, str, None] = EngineVersion.V1_LEGACY,
    *,
    strategy: Optional[AvailabilityStrategy] = None,
) -> DisplayInfo:
    """Resolve the day (and the day before, for on-base days) into a display cell."""
    strategy = strategy or create_strategy(version)
    slot = strategy.resolve(person, day, rotations, absences, blockages)

    if is_on_base(slot):
        previous = strategy.resolve(person, previous_day(day), rotations, absences, blockages)
        return classify_on_base(slot, previous)

    if slot.status == AvailabilityStatus.HOME.value or slot.state == ExplicitState.HOME.value:
        return DisplayInfo(
            availability=slot,
            display_status=DisplayStatus.HOME.value,
            label=home_label(slot),
            is_home=True,
        )

    if slot.status == AvailabilityStatus.UNAVAILABLE.value:
        status = DisplayStatus.UNAVAILABLE
    elif slot.status == AvailabilityStatus.NOT_DEFINED.value or slot.sub_state == SubState.NOT_DEFINED.value:
        status = DisplayStatus.NOT_DEFINED
    else:
        status = DisplayStatus.UNKNOWN
    return DisplayInfo(availability=slot, display_status=status.value, label=_label(status))
