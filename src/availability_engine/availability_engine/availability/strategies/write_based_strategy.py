from __future__ import annotations

from datetime import date
from typing import Sequence

from ...absences.model import Absence, HourlyBlockage
from ...common.time_utils import date_key
from ...core.enums import AvailabilityStatus, EngineVersion
from ...people.model import Person
from ...rotations.model import TeamRotation
from ..blocks import absences_on
from ..fallbacks import absence_slot, default_slot, record_slot, record_status, rotation_slot
from ..model import AvailabilitySlot
from .base import AvailabilityStrategy


class WriteBasedStrategy(AvailabilityStrategy):
    """Status is computed at write time; the stored record is trusted as is.

    The absence/rotation/default chain only serves rows that were never
    written. A bare "base" is read back as "full" for older consumers.
    """

    version = EngineVersion.V2_WRITE_BASED.value

    def resolve(
        self,
        person: Person,
        day: date,
        rotations: Sequence[TeamRotation] = (),
        absences: Sequence[Absence] = (),
        blockages: Sequence[HourlyBlockage] = (),
    ) -> AvailabilitySlot:
        key = date_key(day)

        record = person.record_for(key)
        if record is not None:
            status = record_status(record)
            if status == AvailabilityStatus.BASE.value:
                status = AvailabilityStatus.FULL.value
            return record_slot(record, status, record.unavailable_blocks)

        active = absences_on(person.person_id, key, absences, include_rejected=False)
        if active:
            return absence_slot(active[0], key)

        by_rotation = rotation_slot(person, day, rotations)
        if by_rotation is not None:
            return by_rotation

        return default_slot()
