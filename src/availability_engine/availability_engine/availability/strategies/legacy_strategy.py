from __future__ import annotations

from datetime import date
from typing import Sequence

from ...absences.model import Absence, HourlyBlockage
from ...common.time_utils import date_key
from ...core.enums import EngineVersion
from ...people.model import Person
from ...rotations.model import TeamRotation
from ..blocks import absences_on, blockage_block, blockages_on, collect_blocks
from ..fallbacks import absence_slot, default_slot, record_slot, record_status, rotation_slot
from ..model import AvailabilitySlot
from .base import AvailabilityStrategy


class LegacyPropagationStrategy(AvailabilityStrategy):
    """Read-time resolution: explicit record, then absence, rotation, default.

    Status names are returned as written (a bare "base" stays "base").
    """

    version = EngineVersion.V1_LEGACY.value

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
            blocks = collect_blocks(person.person_id, key, absences, blockages)
            blocks.extend(record.unavailable_blocks)
            return record_slot(record, record_status(record), blocks)

        blockage_blocks = [blockage_block(b) for b in blockages_on(person.person_id, key, blockages)]

        active = absences_on(person.person_id, key, absences, include_rejected=False)
        if active:
            return absence_slot(active[0], key, blockage_blocks)

        by_rotation = rotation_slot(person, day, rotations, blockage_blocks)
        if by_rotation is not None:
            return by_rotation

        return default_slot(blockage_blocks)
