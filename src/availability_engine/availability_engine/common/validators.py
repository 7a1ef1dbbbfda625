from __future__ import annotations

from ..core.exceptions import ValidationError
from ..rotations.model import TeamRotation
from .time_utils import to_minutes, try_parse_iso_date


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_time(value: str, field_name: str) -> str:
    if to_minutes(value) is None:
        raise ValidationError(f"{field_name} must be HH:MM")
    return value


def validate_rotation(rotation: TeamRotation) -> TeamRotation:
    """Reject rotations the engine cannot evaluate.

    Callers run this before handing rotations to a strategy; resolution itself
    never raises and treats an invalid rotation as having no opinion.
    """
    require_non_empty(rotation.team_id, "team_id")
    if not isinstance(rotation.days_on_base, int) or not isinstance(rotation.days_at_home, int):
        raise ValidationError("days_on_base and days_at_home must be integers")
    if rotation.days_on_base <= 0:
        raise ValidationError("days_on_base must be positive")
    if rotation.days_at_home < 0:
        raise ValidationError("days_at_home cannot be negative")
    if rotation.cycle_length <= 0:
        raise ValidationError("Rotation cycle length must be positive")
    if try_parse_iso_date(rotation.start_date) is None:
        raise ValidationError("start_date must be YYYY-MM-DD")
    if rotation.arrival_time:
        require_time(rotation.arrival_time, "arrival_time")
    if rotation.departure_time:
        require_time(rotation.departure_time, "departure_time")
    return rotation
