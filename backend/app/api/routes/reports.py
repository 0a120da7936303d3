from fastapi import APIRouter, Depends, Query

from app.api.deps import get_store
from app.schemas.report import ConflictItem, FacultyLoadRow, ReportSummary, RoomUtilizationRow, ScheduleRow
from app.services.document_store import DocumentStore
from app.services.report_filters import (
    filter_conflicts,
    filter_faculty_load,
    filter_room_utilization,
    filter_schedule_by_section,
)
from app.services.reports import (
    ReportSnapshot,
    build_report_summary,
    conflict_report,
    faculty_load_report,
    load_report_snapshot,
    room_utilization_report,
    schedule_report,
)

router = APIRouter()


def get_snapshot(
    term_id: str = Query(min_length=1, alias="termId"),
    department_id: str = Query(min_length=1, alias="departmentId"),
    version_id: str | None = Query(default=None, alias="versionId"),
    store: DocumentStore = Depends(get_store),
) -> ReportSnapshot:
    return load_report_snapshot(store, term_id=term_id, department_id=department_id, version_id=version_id)


@router.get("/faculty-load", response_model=list[FacultyLoadRow])
def get_faculty_load(
    q: str | None = None,
    snapshot: ReportSnapshot = Depends(get_snapshot),
) -> list[FacultyLoadRow]:
    return filter_faculty_load(faculty_load_report(snapshot), q)


@router.get("/room-utilization", response_model=list[RoomUtilizationRow])
def get_room_utilization(
    q: str | None = None,
    snapshot: ReportSnapshot = Depends(get_snapshot),
) -> list[RoomUtilizationRow]:
    return filter_room_utilization(room_utilization_report(snapshot), q)


@router.get("/conflicts", response_model=list[ConflictItem])
def get_conflicts(
    q: str | None = None,
    snapshot: ReportSnapshot = Depends(get_snapshot),
) -> list[ConflictItem]:
    return filter_conflicts(conflict_report(snapshot), q)


@router.get("/schedule", response_model=list[ScheduleRow])
def get_schedule(
    section_id: str | None = Query(default=None, alias="sectionId"),
    snapshot: ReportSnapshot = Depends(get_snapshot),
) -> list[ScheduleRow]:
    return filter_schedule_by_section(schedule_report(snapshot), section_id)


@router.get("/summary", response_model=ReportSummary)
def get_summary(snapshot: ReportSnapshot = Depends(get_snapshot)) -> ReportSummary:
    return build_report_summary(snapshot)
