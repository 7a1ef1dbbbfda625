from __future__ import annotations

from datetime import date

from availability_engine.absences.model import Absence, HourlyBlockage
from availability_engine.availability.strategies.legacy_strategy import LegacyPropagationStrategy
from availability_engine.people.model import ExplicitRecord, Person
from availability_engine.rotations.model import TeamRotation

DAY = date(2026, 1, 5)
ROTATION = TeamRotation(team_id="t1", days_on_base=10, days_at_home=0, start_date="2026-01-01")


def _absence(status: str, **kwargs) -> Absence:
    values = {"start_date": "2026-01-05", "end_date": "2026-01-05"}
    values.update(kwargs)
    return Absence(absence_id="abs-1", person_id="p1", status=status, **values)


def test_approved_absence_wins_over_rotation():
    person = Person(person_id="p1", team_id="t1")

    slot = LegacyPropagationStrategy().resolve(person, DAY, [ROTATION], [_absence("approved")])

    assert slot.status == "home"
    assert slot.is_available is False
    assert slot.source == "absence"
    assert len(slot.unavailable_blocks) == 1
    assert slot.unavailable_blocks[0].type == "absence"
    assert slot.unavailable_blocks[0].status == "approved"


def test_rotation_wins_over_default():
    person = Person(person_id="p1", team_id="t1")
    strategy = LegacyPropagationStrategy()

    by_rotation = strategy.resolve(person, DAY, [ROTATION])
    by_default = strategy.resolve(Person(person_id="p1"), DAY, [ROTATION])

    assert (by_rotation.status, by_rotation.source) == ("full", "rotation")
    assert (by_default.status, by_default.source) == ("full", "default")
    assert by_default.is_available is True
    assert (by_default.start_hour, by_default.end_hour) == ("00:00", "23:59")


def test_rotation_home_day_is_zero_length():
    rotation = TeamRotation(team_id="t1", days_on_base=4, days_at_home=3, start_date="2026-01-01")

    slot = LegacyPropagationStrategy().resolve(Person(person_id="p1", team_id="t1"), date(2026, 1, 6), [rotation])

    assert slot.status == "home"
    assert slot.is_available is False
    assert (slot.start_hour, slot.end_hour) == ("00:00", "00:00")


def test_absence_hours_apply_only_on_boundary_days():
    absence = _absence("approved", end_date="2026-01-07", start_time="14:00", end_time="10:00")
    person = Person(person_id="p1")
    strategy = LegacyPropagationStrategy()

    first = strategy.resolve(person, date(2026, 1, 5), absences=[absence])
    middle = strategy.resolve(person, date(2026, 1, 6), absences=[absence])
    last = strategy.resolve(person, date(2026, 1, 7), absences=[absence])

    assert (first.start_hour, first.end_hour) == ("14:00", "23:59")
    assert (middle.start_hour, middle.end_hour) == ("00:00", "23:59")
    assert (last.start_hour, last.end_hour) == ("00:00", "10:00")


def test_rejected_absence_is_ignored_but_pending_reduces_availability():
    person = Person(person_id="p1")
    strategy = LegacyPropagationStrategy()

    rejected = strategy.resolve(person, DAY, absences=[_absence("rejected")])
    pending = strategy.resolve(person, DAY, absences=[_absence("pending")])

    assert rejected.source == "default"
    assert rejected.unavailable_blocks == ()
    assert pending.status == "home"


def test_absence_for_other_person_is_ignored():
    other = Absence(absence_id="abs-2", person_id="p2", start_date="2026-01-05", end_date="2026-01-05", status="approved")

    slot = LegacyPropagationStrategy().resolve(Person(person_id="p1"), DAY, absences=[other])

    assert slot.source == "default"


def test_explicit_record_is_normalized_and_keeps_status_name():
    record = ExplicitRecord(status="base", start_hour="08:00:00", end_hour="00:00")
    person = Person(person_id="p1", team_id="t1", daily_availability={"2026-01-05": record})

    slot = LegacyPropagationStrategy().resolve(person, DAY, [ROTATION], [_absence("approved")])

    assert slot.status == "base"
    assert slot.is_available is True
    assert slot.source == "manual"
    assert (slot.start_hour, slot.end_hour) == ("08:00", "23:59")


def test_explicit_record_infers_availability_from_status():
    person = Person(person_id="p1", daily_availability={"2026-01-05": ExplicitRecord(status="unavailable")})

    slot = LegacyPropagationStrategy().resolve(person, DAY)

    assert slot.is_available is False


def test_blockages_are_attached_to_resolved_slots():
    blockage = HourlyBlockage(blockage_id="b1", person_id="p1", date="2026-01-05", start_time="10:00", end_time="12:00")
    stamped = HourlyBlockage(
        blockage_id="b2", person_id="p1", date="2026-01-05T00:00:00", start_time="13:00", end_time="14:00"
    )
    person = Person(person_id="p1", daily_availability={"2026-01-05": ExplicitRecord(status="full")})

    slot = LegacyPropagationStrategy().resolve(person, DAY, blockages=[blockage, stamped])

    assert [b.block_id for b in slot.unavailable_blocks] == ["b1"]
    assert slot.unavailable_blocks[0].type == "hourly_blockage"
    assert slot.unavailable_blocks[0].status == "approved"


def test_resolution_is_idempotent_and_does_not_mutate_inputs():
    daily = {"2026-01-04": ExplicitRecord(status="home")}
    person = Person(person_id="p1", team_id="t1", daily_availability=daily)
    absences = [_absence("approved")]
    strategy = LegacyPropagationStrategy()

    first = strategy.resolve(person, DAY, [ROTATION], absences)
    second = strategy.resolve(person, DAY, [ROTATION], absences)

    assert first == second
    assert daily == {"2026-01-04": ExplicitRecord(status="home")}
    assert absences == [_absence("approved")]


def test_rows_without_person_id_match_nobody():
    orphan_absence = Absence(absence_id="abs-3", person_id="", start_date="2026-01-05", end_date="2026-01-05",
                             status="approved")
    orphan_blockage = HourlyBlockage(blockage_id="b9", person_id="", date="2026-01-05", start_time="10:00",
                                     end_time="11:00")

    slot = LegacyPropagationStrategy().resolve(Person(person_id="p1"), DAY, [], [orphan_absence], [orphan_blockage])

    assert slot.source == "default"
    assert slot.unavailable_blocks == ()


def test_rotation_with_missing_day_counts_falls_back_to_default():
    broken = TeamRotation(team_id="t1", days_on_base=None, days_at_home=3, start_date="2026-01-01")

    slot = LegacyPropagationStrategy().resolve(Person(person_id="p1", team_id="t1"), DAY, [broken])

    assert slot.source == "default"
