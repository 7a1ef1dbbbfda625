"""Availability Engine package.

Resolves one authoritative presence slot per person per date from explicit
daily records, absences, team rotations and hourly blockages. Organized by
feature modules (people, rotations, absences, availability, snapshots) with
pure strategy/evaluator layers and no I/O.
"""
