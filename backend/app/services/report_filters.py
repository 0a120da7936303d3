"""Search and filter helpers applied to finished report rows.

These never feed back into aggregation; they only narrow what is shown.
"""
from __future__ import annotations

from app.schemas.report import ConflictItem, FacultyLoadRow, RoomUtilizationRow, ScheduleRow

ALL_SECTIONS = "all"


def _normalize(query: str | None) -> str:
    return (query or "").strip().lower()


def filter_faculty_load(rows: list[FacultyLoadRow], query: str | None) -> list[FacultyLoadRow]:
    needle = _normalize(query)
    if not needle:
        return rows
    return [row for row in rows if needle in row.name.lower()]


def filter_room_utilization(rows: list[RoomUtilizationRow], query: str | None) -> list[RoomUtilizationRow]:
    needle = _normalize(query)
    if not needle:
        return rows
    return [row for row in rows if needle in row.room_code.lower()]


def filter_schedule_by_section(rows: list[ScheduleRow], section_id: str | None) -> list[ScheduleRow]:
    if not section_id or section_id == ALL_SECTIONS:
        return rows
    return [row for row in rows if row.section_id == section_id]


def filter_conflicts(rows: list[ConflictItem], query: str | None) -> list[ConflictItem]:
    needle = _normalize(query)
    if not needle:
        return rows

    def haystack(item: ConflictItem) -> str:
        parts = [
            item.type,
            item.day_of_week,
            item.start_time,
            item.end_time,
            item.room_code,
            item.faculty_name,
            item.section_name,
            item.a_class_label,
            item.b_class_label,
        ]
        return " ".join(part for part in parts if part).lower()

    return [item for item in rows if needle in haystack(item)]
