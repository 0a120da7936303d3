from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

ConflictType = Literal["ROOM", "FACULTY", "SECTION"]
LoadStatus = Literal["OK", "Overload", "No Load"]


class ReportRow(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FacultyLoadRow(ReportRow):
    faculty_user_id: str
    name: str
    employee_no: str = "-"
    max_units: int = 0
    max_hours: float = 0.0
    classes_count: int = 0
    total_units: int = 0
    total_minutes: int = 0
    total_hours: float = 0.0
    load_pct: float = 0.0
    status: LoadStatus = "No Load"


class RoomUtilizationRow(ReportRow):
    room_id: str
    room_code: str
    type: str = "-"
    capacity: int = 0
    used_minutes: int = 0
    available_minutes: int = 0
    utilization_pct: float = 0.0


class ConflictItem(ReportRow):
    type: ConflictType
    day_of_week: str
    start_time: str
    end_time: str
    room_code: str | None = None
    faculty_name: str | None = None
    section_name: str | None = None
    a_class_label: str
    b_class_label: str
    resource_id: str = ""
    a_meeting_id: str = ""
    b_meeting_id: str = ""


class ScheduleRow(ReportRow):
    section_id: str
    section_name: str
    subject_code: str
    subject_title: str
    faculty_name: str
    day_of_week: str
    start_time: str
    end_time: str
    room_code: str
    meeting_type: str
    class_id: str


class ReportContext(ReportRow):
    term_id: str
    department_id: str
    version_id: str | None = None
    version_label: str | None = None
    term_label: str | None = None
    department_name: str | None = None
    version_status: str | None = None


class ConflictCounts(ReportRow):
    room: int = 0
    faculty: int = 0
    section: int = 0
    total: int = 0


class ReportSummary(ReportRow):
    context: ReportContext
    faculty_load: list[FacultyLoadRow]
    room_utilization: list[RoomUtilizationRow]
    conflicts: list[ConflictItem]
    conflict_counts: ConflictCounts
    schedule: list[ScheduleRow]
    overloaded_faculty: int = 0
