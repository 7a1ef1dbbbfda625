from __future__ import annotations

from datetime import date
from typing import Optional, Sequence, Union

from ..absences.model import Absence, HourlyBlockage
from ..core.enums import EngineVersion
from ..people.model import Person
from ..rotations.model import TeamRotation
from .display import DisplayInfo, derive_display_info
from .factory import AvailabilityStrategyFactory, coerce_version
from .model import AvailabilitySlot
from .presence import is_present_at


class AvailabilityService:
    """Entry points used by headcount, scheduling and snapshot consumers.

    Holds no per-call state; the engine version defaults to the configured
    one and can be overridden per organization on each call.
    """

    def __init__(
        self,
        *,
        strategy_factory: AvailabilityStrategyFactory | None = None,
        default_version: Union[EngineVersion, str] = EngineVersion.V1_LEGACY,
    ):
        self._factory = strategy_factory or AvailabilityStrategyFactory()
        self._default_version = coerce_version(default_version)

    @property
    def default_version(self) -> EngineVersion:
        return self._default_version

    def _version(self, version: Union[EngineVersion, str, None]) -> EngineVersion:
        return self._default_version if version is None else coerce_version(version)

    def resolve(
        self,
        person: Person,
        day: date,
        rotations: Sequence[TeamRotation] = (),
        absences: Sequence[Absence] = (),
        blockages: Sequence[HourlyBlockage] = (),
        *,
        version: Union[EngineVersion, str, None] = None,
    ) -> AvailabilitySlot:
        strategy = self._factory.for_version(self._version(version))
        return strategy.resolve(person, day, rotations, absences, blockages)

    def is_person_present_at(
        self,
        person: Person,
        day: date,
        time_of_day: str,
        rotations: Sequence[TeamRotation] = (),
        absences: Sequence[Absence] = (),
        blockages: Sequence[HourlyBlockage] = (),
        *,
        version: Union[EngineVersion, str, None] = None,
    ) -> bool:
        slot = self.resolve(person, day, rotations, absences, blockages, version=version)
        return is_present_at(slot, time_of_day)

    def display_info(
        self,
        person: Person,
        day: date,
        rotations: Sequence[TeamRotation] = (),
        absences: Sequence[Absence] = (),
        blockages: Sequence[HourlyBlockage] = (),
        *,
        version: Optional[Union[EngineVersion, str]] = None,
    ) -> DisplayInfo:
        selected = self._version(version)
        return derive_display_info(
            person,
            day,
            rotations,
            absences,
            blockages,
            selected,
            strategy=self._factory.for_version(selected),
        )
