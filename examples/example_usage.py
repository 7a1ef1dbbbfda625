"""Example: resolve availability through the container (no database).

People, rotations and absences are built from plain rows, the way a caller
would after fetching them from its own store.
"""

from datetime import date

from availability_engine.common.validators import validate_rotation
from availability_engine.container import build_container
from availability_engine.people.mapper import absence_from_row, person_from_row, rotation_from_row
from availability_engine.snapshots.service import iter_chunks


def main():
    container = build_container()

    people = [
        person_from_row(
            {"id": "p1", "team_id": "t1"},
            [{"date": "2026-01-05", "status": "arrival", "start_time": "08:00:00", "is_available": 1}],
        ),
        person_from_row({"id": "p2", "team_id": "t1"}),
    ]
    rotation = rotation_from_row({"team_id": "t1", "days_on_base": 11, "days_at_home": 3, "start_date": "2026-01-01"})
    rotations = [validate_rotation(rotation)]
    absences = [absence_from_row({"id": "a1", "person_id": "p2", "start_date": "2026-01-06", "end_date": "2026-01-06"})]

    for person in people:
        info = container.availability_service.display_info(person, date(2026, 1, 6), rotations, absences)
        print(person.person_id, info.display_status, info.label)

    report = container.snapshot_service.build_snapshot(people, rotations, absences, start=date(2026, 1, 1), days=14)
    print(report.to_frame().head())
    print(report.summary)

    for chunk in iter_chunks(report.rows, container.snapshot_chunk_size):
        print(f"writing {len(chunk)} snapshot rows")


if __name__ == "__main__":
    main()
