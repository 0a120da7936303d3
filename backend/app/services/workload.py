from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from app.schemas.entities import (
    ClassMeetingRecord,
    ClassOfferingRecord,
    FacultyProfileRecord,
    FacultyUserRecord,
    SubjectRecord,
)
from app.schemas.report import FacultyLoadRow, LoadStatus
from app.services.resource_index import EMPTY_CELL, ResourceIndex
from app.services.time_utils import duration_minutes

logger = logging.getLogger(__name__)

UNKNOWN_FACULTY = "Unknown Faculty"


@dataclass
class _LoadTally:
    classes_count: int = 0
    total_units: int = 0
    total_minutes: int = 0


def classify_load(*, classes_count: int, total_units: int, total_hours: float, max_units: int, max_hours: float) -> LoadStatus:
    over_units = max_units > 0 and total_units > max_units
    over_hours = max_hours > 0 and total_hours > max_hours
    if over_units or over_hours:
        return "Overload"
    if classes_count == 0:
        return "No Load"
    return "OK"


def _load_row(
    faculty_user_id: str,
    name: str,
    tally: _LoadTally,
    profile: FacultyProfileRecord | None,
) -> FacultyLoadRow:
    max_units = (profile.max_units or 0) if profile is not None else 0
    max_hours = (profile.max_hours or 0.0) if profile is not None else 0.0
    total_hours = tally.total_minutes / 60
    load_pct = min(100.0, total_hours / max_hours * 100) if max_hours > 0 else 0.0
    return FacultyLoadRow(
        faculty_user_id=faculty_user_id,
        name=name,
        employee_no=(profile.employee_no if profile is not None else None) or EMPTY_CELL,
        max_units=max_units,
        max_hours=max_hours,
        classes_count=tally.classes_count,
        total_units=tally.total_units,
        total_minutes=tally.total_minutes,
        total_hours=total_hours,
        load_pct=load_pct,
        status=classify_load(
            classes_count=tally.classes_count,
            total_units=tally.total_units,
            total_hours=total_hours,
            max_units=max_units,
            max_hours=max_hours,
        ),
    )


def compute_faculty_load(
    offerings: Iterable[ClassOfferingRecord],
    meetings: Iterable[ClassMeetingRecord],
    faculty_roster: Iterable[FacultyUserRecord],
    faculty_profiles: Iterable[FacultyProfileRecord],
    subjects: Iterable[SubjectRecord],
) -> list[FacultyLoadRow]:
    """Summarise units and weekly minutes per faculty member.

    Every roster member gets a row, including those without classes. Faculty
    ids referenced by offerings but missing from the roster are reported as
    ``Unknown Faculty`` so their load is not silently lost.
    """
    roster = list(faculty_roster)
    index = ResourceIndex.build(
        subjects=subjects,
        faculty_users=roster,
        faculty_profiles=faculty_profiles,
        meetings=meetings,
    )

    tallies: dict[str, _LoadTally] = {}
    for offering in offerings:
        faculty_user_id = offering.faculty_user_id
        if not faculty_user_id:
            continue
        subject = index.subject(offering.subject_id)
        minutes = sum(
            duration_minutes(meeting.start_time, meeting.end_time) for meeting in index.meetings_for(offering.id)
        )
        tally = tallies.setdefault(faculty_user_id, _LoadTally())
        tally.classes_count += 1
        tally.total_units += subject.units if subject is not None else 0
        tally.total_minutes += minutes

    rows: list[FacultyLoadRow] = []
    seen: set[str] = set()
    for user in roster:
        if not user.user_id or user.user_id in seen:
            continue
        seen.add(user.user_id)
        rows.append(
            _load_row(
                user.user_id,
                user.display_name,
                tallies.get(user.user_id, _LoadTally()),
                index.faculty_profile(user.user_id),
            )
        )

    unknown = [faculty_user_id for faculty_user_id in tallies if faculty_user_id not in index.faculty_users]
    if unknown:
        logger.warning("Faculty load references %d faculty id(s) missing from the roster", len(unknown))
    for faculty_user_id in unknown:
        rows.append(_load_row(faculty_user_id, UNKNOWN_FACULTY, tallies[faculty_user_id], None))

    rows.sort(key=lambda row: (row.name.casefold(), row.name))
    return rows
