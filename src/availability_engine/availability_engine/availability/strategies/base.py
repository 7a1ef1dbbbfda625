from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Sequence

from ...absences.model import Absence, HourlyBlockage
from ...people.model import Person
from ...rotations.model import TeamRotation
from ..model import AvailabilitySlot


class AvailabilityStrategy(ABC):
    """Strategy Pattern: encapsulate how one engine generation resolves a slot.

    Implementations are stateless and never mutate their arguments, so one
    instance can be shared across threads and called in tight batches.
    """

    version: str = ""

    @abstractmethod
    def resolve(
        self,
        person: Person,
        day: date,
        rotations: Sequence[TeamRotation] = (),
        absences: Sequence[Absence] = (),
        blockages: Sequence[HourlyBlockage] = (),
    ) -> AvailabilitySlot:
        raise NotImplementedError
