from __future__ import annotations

from collections.abc import Iterable

from app.schemas.entities import (
    ClassMeetingRecord,
    ClassOfferingRecord,
    FacultyUserRecord,
    RoomRecord,
    SectionRecord,
    SubjectRecord,
)
from app.schemas.report import ScheduleRow
from app.services.resource_index import EMPTY_CELL, FACULTY_PLACEHOLDER, SUBJECT_PLACEHOLDER, ResourceIndex
from app.services.time_utils import parse_time_to_minutes

UNKNOWN_SECTION = "Unknown Section"


def build_schedule_report(
    offerings: Iterable[ClassOfferingRecord],
    meetings: Iterable[ClassMeetingRecord],
    subjects: Iterable[SubjectRecord],
    sections: Iterable[SectionRecord],
    faculty_users: Iterable[FacultyUserRecord],
    rooms: Iterable[RoomRecord],
) -> list[ScheduleRow]:
    index = ResourceIndex.build(
        subjects=subjects,
        sections=sections,
        rooms=rooms,
        faculty_users=faculty_users,
        offerings=offerings,
    )

    rows: list[ScheduleRow] = []
    for meeting in meetings:
        offering = index.offering(meeting.class_id)
        if offering is None:
            continue
        subject = index.subject(offering.subject_id)
        rows.append(
            ScheduleRow(
                section_id=offering.section_id,
                section_name=index.section_name(offering.section_id) or UNKNOWN_SECTION,
                subject_code=(subject.code if subject is not None else "") or SUBJECT_PLACEHOLDER,
                subject_title=(subject.title if subject is not None else "") or EMPTY_CELL,
                faculty_name=index.faculty_name(offering.faculty_user_id) or FACULTY_PLACEHOLDER,
                day_of_week=meeting.day_of_week or EMPTY_CELL,
                start_time=meeting.start_time or EMPTY_CELL,
                end_time=meeting.end_time or EMPTY_CELL,
                room_code=index.room_code(meeting.room_id),
                meeting_type=meeting.meeting_type or "LECTURE",
                class_id=meeting.class_id,
            )
        )

    rows.sort(key=lambda row: (row.section_name, row.day_of_week, parse_time_to_minutes(row.start_time)))
    return rows
