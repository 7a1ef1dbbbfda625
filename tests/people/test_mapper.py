from availability_engine.people.mapper import (
    absence_from_row,
    blockage_from_row,
    person_from_row,
    record_from_row,
    rotation_from_row,
)


def test_record_from_store_columns():
    record = record_from_row(
        {
            "status": "home",
            "is_available": 0,
            "start_time": "08:00:00",
            "end_time": None,
            "home_status_type": "gimel",
            "v2_state": "home",
            "v2_sub_state": "vacation",
            "unavailable_blocks": [{"id": "m1", "start": "09:00:00", "end": "10:00", "status": "approved"}],
        }
    )

    assert record.is_available is False
    assert record.start_hour == "08:00:00"
    assert record.end_hour is None
    assert (record.state, record.sub_state) == ("home", "vacation")
    assert record.unavailable_blocks[0].start == "09:00"


def test_person_daily_map_is_keyed_by_day():
    person = person_from_row(
        {"id": 7, "team_id": "t1"},
        [{"date": "2026-01-05T00:00:00", "status": "base"}, {"date": "garbage", "status": "home"}],
    )

    assert person.person_id == "7"
    assert list(person.daily_availability) == ["2026-01-05"]


def test_rotation_absence_and_blockage_rows():
    rotation = rotation_from_row({"id": "r1", "team_id": "t1", "days_on_base": "11", "days_at_home": 3,
                                  "start_date": "2026-01-01", "arrival_time": "10:00:00"})
    absence = absence_from_row({"id": "a1", "person_id": "p1", "start_date": "2026-01-05",
                                "end_date": "2026-01-06T00:00:00", "start_time": "14:00:00"})
    blockage = blockage_from_row({"id": "b1", "person_id": "p1", "date": "2026-01-05",
                                  "start_time": "10:00:00", "end_time": "12:00:00"})

    assert (rotation.days_on_base, rotation.cycle_length, rotation.arrival_time) == (11, 14, "10:00")
    assert (absence.end_date, absence.start_time, absence.status) == ("2026-01-06", "14:00", "pending")
    assert (blockage.start_time, blockage.end_time) == ("10:00", "12:00")
