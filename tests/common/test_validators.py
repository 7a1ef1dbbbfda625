import pytest

from availability_engine.common.validators import validate_rotation
from availability_engine.core.exceptions import DomainError, ValidationError
from availability_engine.rotations.model import TeamRotation


def test_valid_rotation_passes_through():
    rotation = TeamRotation(team_id="t1", days_on_base=11, days_at_home=3, start_date="2026-01-01", arrival_time="10:00")

    assert validate_rotation(rotation) is rotation


def test_non_positive_cycle_is_rejected():
    rotation = TeamRotation(team_id="t1", days_on_base=0, days_at_home=0, start_date="2026-01-01")

    with pytest.raises(ValidationError):
        validate_rotation(rotation)


def test_bad_anchor_and_times_are_rejected():
    with pytest.raises(ValidationError):
        validate_rotation(TeamRotation(team_id="t1", days_on_base=4, days_at_home=3, start_date="01/01/2026"))

    with pytest.raises(DomainError):
        validate_rotation(
            TeamRotation(team_id="t1", days_on_base=4, days_at_home=3, start_date="2026-01-01", departure_time="noon")
        )


def test_missing_day_counts_are_rejected():
    with pytest.raises(ValidationError):
        validate_rotation(TeamRotation(team_id="t1", days_on_base=None, days_at_home=3, start_date="2026-01-01"))
