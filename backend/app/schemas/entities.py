"""Typed snapshots of the documents held by the external store.

Store documents are loosely typed: numbers may arrive as strings, strings as
``None`` and enum members as plain values. All coercion happens here, once, so
the report services only ever see clean records.
"""
from __future__ import annotations

import math
from datetime import datetime
from enum import Enum
from typing import Any, get_args

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from app.models.change_request import ChangeRequestStatus
from app.models.schedule_version import ScheduleStatus


def safe_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    return str(value).strip()


def safe_number(value: Any) -> float:
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(safe_str(value) if not isinstance(value, (int, float)) else value)
    except (ValueError, OverflowError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def safe_bool(value: Any, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    return safe_str(value).lower() in {"true", "1", "yes"}


def _optional_of(annotation: Any) -> type | None:
    args = get_args(annotation)
    if len(args) == 2 and type(None) in args:
        return next(arg for arg in args if arg is not type(None))
    return None


class EntityRecord(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    @field_validator("*", mode="before")
    @classmethod
    def coerce_loose_value(cls, value: Any, info: ValidationInfo) -> Any:
        field = cls.model_fields[info.field_name]
        annotation = field.annotation
        inner = _optional_of(annotation)
        if inner is not None:
            if value is None or safe_str(value) == "":
                return None
            annotation = inner
        if annotation is str:
            return safe_str(value)
        if annotation is int:
            return int(safe_number(value))
        if annotation is float:
            return safe_number(value)
        if annotation is bool:
            return safe_bool(value, default=bool(field.default))
        if isinstance(value, str):
            return value.strip()
        return value


class TermRecord(EntityRecord):
    id: str = ""
    school_year: str = ""
    semester: str = ""
    is_active: bool = False

    @property
    def label(self) -> str:
        return " • ".join(part for part in (self.school_year, self.semester) if part) or self.id or "Academic Term"


class DepartmentRecord(EntityRecord):
    id: str = ""
    code: str = ""
    name: str = ""


class SubjectRecord(EntityRecord):
    id: str = ""
    department_id: str | None = None
    code: str = ""
    title: str = ""
    units: int = 0
    lecture_hours: float = 0.0
    lab_hours: float = 0.0


class SectionRecord(EntityRecord):
    id: str = ""
    term_id: str = ""
    department_id: str = ""
    program_id: str | None = None
    year_level: int = 0
    name: str = ""
    student_count: int | None = None

    @property
    def display_name(self) -> str:
        return f"{self.year_level}-{self.name}"


class FacultyUserRecord(EntityRecord):
    user_id: str = ""
    name: str = ""
    email: str = ""
    role: str = "FACULTY"

    @property
    def display_name(self) -> str:
        return self.name or self.email or "Faculty"


class FacultyProfileRecord(EntityRecord):
    user_id: str = ""
    department_id: str = ""
    employee_no: str | None = None
    rank: str | None = None
    max_units: int | None = None
    max_hours: float | None = None


class RoomRecord(EntityRecord):
    id: str = ""
    code: str = ""
    name: str | None = None
    type: str | None = None
    capacity: int = 0
    is_active: bool = True


class TimeBlockRecord(EntityRecord):
    id: str = ""
    term_id: str = ""
    day_of_week: str = ""
    start_time: str = ""
    end_time: str = ""
    is_active: bool = True


class ClassOfferingRecord(EntityRecord):
    id: str = ""
    term_id: str = ""
    department_id: str = ""
    version_id: str = ""
    section_id: str = ""
    subject_id: str = ""
    faculty_user_id: str | None = None


class ClassMeetingRecord(EntityRecord):
    id: str = ""
    class_id: str = ""
    version_id: str = ""
    day_of_week: str = ""
    start_time: str = ""
    end_time: str = ""
    room_id: str | None = None
    meeting_type: str = "LECTURE"
    notes: str | None = None

    @field_validator("meeting_type")
    @classmethod
    def normalize_meeting_type(cls, value: str) -> str:
        return value.upper() or "LECTURE"


class ScheduleVersionRecord(EntityRecord):
    id: str = ""
    term_id: str = ""
    department_id: str = ""
    version: int = 0
    label: str | None = None
    status: ScheduleStatus = ScheduleStatus.draft
    created_by: str = ""
    locked_by: str | None = None
    locked_at: datetime | None = None
    notes: str | None = None


class PolicyRecord(EntityRecord):
    id: str = ""
    term_id: str = ""
    key: str = ""
    value: str = ""
    description: str | None = None


class ChangeRequestRecord(EntityRecord):
    id: str = ""
    term_id: str = ""
    department_id: str = ""
    requested_by: str = ""
    class_id: str | None = None
    meeting_id: str | None = None
    type: str = ""
    details: str = ""
    status: ChangeRequestStatus = ChangeRequestStatus.pending
    reviewed_by: str | None = None
    reviewed_at: datetime | None = None
    resolution_notes: str | None = None
