from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from app.schemas.entities import (
    ClassMeetingRecord,
    ClassOfferingRecord,
    FacultyUserRecord,
    RoomRecord,
    SectionRecord,
    SubjectRecord,
)
from app.schemas.report import ConflictItem, ConflictType
from app.services.resource_index import EMPTY_CELL, ResourceIndex
from app.services.time_utils import overlaps, parse_time_to_minutes

logger = logging.getLogger(__name__)

CONFLICT_TYPE_ORDER: dict[str, int] = {"ROOM": 0, "FACULTY": 1, "SECTION": 2}


@dataclass(frozen=True)
class ConflictOptions:
    allow_room_conflict: bool = False
    allow_faculty_conflict: bool = False
    allow_section_conflict: bool = False
    # Meetings separated by less than this gap are reported as overlapping.
    grace_minutes: int = 0

    def allows(self, conflict_type: ConflictType) -> bool:
        if conflict_type == "ROOM":
            return self.allow_room_conflict
        if conflict_type == "FACULTY":
            return self.allow_faculty_conflict
        return self.allow_section_conflict


@dataclass(frozen=True)
class _Interval:
    start: int
    end: int
    meeting: ClassMeetingRecord


def overlapping_pairs(
    meetings: Iterable[ClassMeetingRecord],
    *,
    grace_minutes: int = 0,
) -> Iterator[tuple[ClassMeetingRecord, ClassMeetingRecord]]:
    """Yield every overlapping pair in one resource group.

    Meetings are swept in start order while keeping every interval that is
    still open, so a long meeting is compared against all later meetings it
    spans and not only its immediate neighbour. Pairs come out as
    ``(earlier, later)`` in start order, ties broken by meeting id.
    """
    grace = max(0, grace_minutes)
    intervals = sorted(
        (
            _Interval(parse_time_to_minutes(meeting.start_time), parse_time_to_minutes(meeting.end_time), meeting)
            for meeting in meetings
        ),
        key=lambda interval: (interval.start, interval.meeting.id),
    )
    open_intervals: list[_Interval] = []
    for current in intervals:
        open_intervals = [item for item in open_intervals if item.end + grace > current.start]
        for earlier in open_intervals:
            if overlaps(earlier.start, earlier.end + grace, current.start, current.end + grace):
                yield earlier.meeting, current.meeting
        open_intervals.append(current)


class ConflictDetector:
    def __init__(self, index: ResourceIndex, options: ConflictOptions | None = None):
        self.index = index
        self.options = options or ConflictOptions()

    def _group(
        self,
        meetings: Iterable[ClassMeetingRecord],
        resource_of: Callable[[ClassMeetingRecord], str | None],
    ) -> dict[tuple[str, str], list[ClassMeetingRecord]]:
        groups: dict[tuple[str, str], list[ClassMeetingRecord]] = defaultdict(list)
        for meeting in meetings:
            resource_id = resource_of(meeting)
            if not resource_id or not meeting.day_of_week:
                continue
            groups[(meeting.day_of_week, resource_id)].append(meeting)
        return groups

    def _faculty_of(self, meeting: ClassMeetingRecord) -> str | None:
        offering = self.index.offering(meeting.class_id)
        return offering.faculty_user_id if offering is not None else None

    def _section_of(self, meeting: ClassMeetingRecord) -> str | None:
        offering = self.index.offering(meeting.class_id)
        return offering.section_id if offering is not None else None

    def _scan(
        self,
        conflict_type: ConflictType,
        meetings: list[ClassMeetingRecord],
        resource_of: Callable[[ClassMeetingRecord], str | None],
    ) -> list[ConflictItem]:
        if self.options.allows(conflict_type):
            return []

        found: list[ConflictItem] = []
        for (_, resource_id), group in self._group(meetings, resource_of).items():
            for first, second in overlapping_pairs(group, grace_minutes=self.options.grace_minutes):
                # An offering's own lecture and lab share faculty and section.
                same_class = first.class_id and first.class_id == second.class_id
                if conflict_type != "ROOM" and same_class:
                    continue
                found.append(self._item(conflict_type, resource_id, first, second))
        return found

    def _item(
        self,
        conflict_type: ConflictType,
        resource_id: str,
        first: ClassMeetingRecord,
        second: ClassMeetingRecord,
    ) -> ConflictItem:
        first_labels = self.index.class_labels(first.class_id)
        second_labels = self.index.class_labels(second.class_id)
        item = ConflictItem(
            type=conflict_type,
            day_of_week=first.day_of_week or EMPTY_CELL,
            start_time=first.start_time,
            end_time=first.end_time,
            a_class_label=first_labels.label,
            b_class_label=second_labels.label,
            resource_id=resource_id,
            a_meeting_id=first.id,
            b_meeting_id=second.id,
        )
        if conflict_type == "ROOM":
            item.room_code = self.index.room_code(resource_id)
        elif conflict_type == "FACULTY":
            item.faculty_name = first_labels.faculty_name
        else:
            item.section_name = first_labels.section_name
        return item

    def detect(self, meetings: Iterable[ClassMeetingRecord]) -> list[ConflictItem]:
        meeting_list = list(meetings)
        conflicts = [
            *self._scan("ROOM", meeting_list, lambda meeting: meeting.room_id),
            *self._scan("FACULTY", meeting_list, self._faculty_of),
            *self._scan("SECTION", meeting_list, self._section_of),
        ]
        conflicts.sort(
            key=lambda item: (
                CONFLICT_TYPE_ORDER[item.type],
                item.day_of_week,
                parse_time_to_minutes(item.start_time),
                item.a_meeting_id,
                item.b_meeting_id,
            )
        )
        logger.debug("Detected %d conflict(s) across %d meeting(s)", len(conflicts), len(meeting_list))
        return conflicts


def detect_conflicts(
    offerings: Iterable[ClassOfferingRecord],
    meetings: Iterable[ClassMeetingRecord],
    subjects: Iterable[SubjectRecord],
    sections: Iterable[SectionRecord],
    faculty_users: Iterable[FacultyUserRecord],
    rooms: Iterable[RoomRecord],
    *,
    options: ConflictOptions | None = None,
) -> list[ConflictItem]:
    index = ResourceIndex.build(
        subjects=subjects,
        sections=sections,
        rooms=rooms,
        faculty_users=faculty_users,
        offerings=offerings,
    )
    return ConflictDetector(index, options).detect(meetings)
