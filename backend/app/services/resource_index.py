from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TypeVar

from app.schemas.entities import (
    ClassMeetingRecord,
    ClassOfferingRecord,
    FacultyProfileRecord,
    FacultyUserRecord,
    RoomRecord,
    SectionRecord,
    SubjectRecord,
)

SUBJECT_PLACEHOLDER = "SUBJ"
SECTION_PLACEHOLDER = "SEC"
FACULTY_PLACEHOLDER = "TBA"
EMPTY_CELL = "-"

T = TypeVar("T")


def index_by(items: Iterable[T], key: Callable[[T], str]) -> dict[str, T]:
    # Last write wins on duplicate keys; records without a key are skipped.
    mapping: dict[str, T] = {}
    for item in items:
        item_key = key(item)
        if item_key:
            mapping[item_key] = item
    return mapping


def build_class_label(subject_code: str, section_name: str, faculty_name: str) -> str:
    subject = subject_code or SUBJECT_PLACEHOLDER
    section = section_name or SECTION_PLACEHOLDER
    faculty = faculty_name or FACULTY_PLACEHOLDER
    return f"{subject} • {section} • {faculty}"


@dataclass(frozen=True)
class ClassLabels:
    subject_code: str = SUBJECT_PLACEHOLDER
    section_name: str = SECTION_PLACEHOLDER
    faculty_name: str = FACULTY_PLACEHOLDER

    @property
    def label(self) -> str:
        return build_class_label(self.subject_code, self.section_name, self.faculty_name)


@dataclass
class ResourceIndex:
    subjects: dict[str, SubjectRecord] = field(default_factory=dict)
    sections: dict[str, SectionRecord] = field(default_factory=dict)
    rooms: dict[str, RoomRecord] = field(default_factory=dict)
    faculty_users: dict[str, FacultyUserRecord] = field(default_factory=dict)
    faculty_profiles: dict[str, FacultyProfileRecord] = field(default_factory=dict)
    offerings: dict[str, ClassOfferingRecord] = field(default_factory=dict)
    meetings_by_class: dict[str, list[ClassMeetingRecord]] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        *,
        subjects: Iterable[SubjectRecord] = (),
        sections: Iterable[SectionRecord] = (),
        rooms: Iterable[RoomRecord] = (),
        faculty_users: Iterable[FacultyUserRecord] = (),
        faculty_profiles: Iterable[FacultyProfileRecord] = (),
        offerings: Iterable[ClassOfferingRecord] = (),
        meetings: Iterable[ClassMeetingRecord] = (),
    ) -> "ResourceIndex":
        meetings_by_class: dict[str, list[ClassMeetingRecord]] = defaultdict(list)
        for meeting in meetings:
            if meeting.class_id:
                meetings_by_class[meeting.class_id].append(meeting)

        return cls(
            subjects=index_by(subjects, lambda item: item.id),
            sections=index_by(sections, lambda item: item.id),
            rooms=index_by(rooms, lambda item: item.id),
            faculty_users=index_by(faculty_users, lambda item: item.user_id),
            faculty_profiles=index_by(faculty_profiles, lambda item: item.user_id),
            offerings=index_by(offerings, lambda item: item.id),
            meetings_by_class=dict(meetings_by_class),
        )

    def subject(self, subject_id: str | None) -> SubjectRecord | None:
        return self.subjects.get(subject_id or "")

    def section(self, section_id: str | None) -> SectionRecord | None:
        return self.sections.get(section_id or "")

    def room(self, room_id: str | None) -> RoomRecord | None:
        return self.rooms.get(room_id or "")

    def faculty_user(self, user_id: str | None) -> FacultyUserRecord | None:
        return self.faculty_users.get(user_id or "")

    def faculty_profile(self, user_id: str | None) -> FacultyProfileRecord | None:
        return self.faculty_profiles.get(user_id or "")

    def offering(self, class_id: str | None) -> ClassOfferingRecord | None:
        return self.offerings.get(class_id or "")

    def meetings_for(self, class_id: str) -> list[ClassMeetingRecord]:
        return self.meetings_by_class.get(class_id, [])

    def room_code(self, room_id: str | None) -> str:
        room = self.room(room_id)
        return room.code if room is not None and room.code else EMPTY_CELL

    def section_name(self, section_id: str | None) -> str | None:
        section = self.section(section_id)
        return section.display_name if section is not None else None

    def faculty_name(self, user_id: str | None) -> str | None:
        user = self.faculty_user(user_id)
        return user.name if user is not None and user.name else None

    def class_labels(self, class_id: str | None) -> ClassLabels:
        offering = self.offering(class_id)
        if offering is None:
            return ClassLabels()
        subject = self.subject(offering.subject_id)
        return ClassLabels(
            subject_code=(subject.code if subject is not None else "") or SUBJECT_PLACEHOLDER,
            section_name=self.section_name(offering.section_id) or SECTION_PLACEHOLDER,
            faculty_name=self.faculty_name(offering.faculty_user_id) or FACULTY_PLACEHOLDER,
        )
