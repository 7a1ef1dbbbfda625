from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.time_utils import day_offset, try_parse_iso_date
from ..core.enums import RotationCategory
from .model import TeamRotation

logger = logging.getLogger(__name__)


def rotation_category(target: date, rotation: TeamRotation) -> Optional[RotationCategory]:
    """Cycle-relative category of target within the rotation.

    Returns None before the anchor date, and for rotations that cannot be
    evaluated (non-numeric day counts, non-positive cycle, unparsable anchor).
    """
    anchor = try_parse_iso_date(rotation.start_date)
    if anchor is None:
        logger.debug("rotation %s has unparsable start_date %r", rotation.team_id, rotation.start_date)
        return None

    try:
        days_on_base = int(rotation.days_on_base)
        cycle_length = days_on_base + int(rotation.days_at_home)
    except (TypeError, ValueError):
        logger.debug("rotation %s has non-numeric day counts", rotation.team_id)
        return None

    if cycle_length <= 0:
        logger.debug("rotation %s has non-positive cycle length", rotation.team_id)
        return None

    offset = day_offset(target, anchor)
    if offset < 0:
        return None

    day_in_cycle = offset % cycle_length
    if day_in_cycle == 0:
        return RotationCategory.ARRIVAL
    if day_in_cycle < days_on_base - 1:
        return RotationCategory.FULL
    if day_in_cycle == days_on_base - 1:
        return RotationCategory.DEPARTURE
    return RotationCategory.HOME


def find_team_rotation(team_id: Optional[str], rotations: Sequence[TeamRotation]) -> Optional[TeamRotation]:
    if not team_id:
        return None
    for rotation in rotations or ():
        if rotation.team_id == team_id:
            return rotation
    return None
