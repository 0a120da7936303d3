from __future__ import annotations

import logging
from dataclasses import dataclass, field

from app.core.config import get_settings
from app.core.exceptions import ResourceNotFoundError
from app.models import (
    ClassMeeting,
    ClassOffering,
    Department,
    FacultyProfile,
    FacultyUser,
    Policy,
    Room,
    ScheduleVersion,
    Section,
    Subject,
    Term,
    TimeBlock,
)
from app.schemas.entities import (
    ClassMeetingRecord,
    ClassOfferingRecord,
    DepartmentRecord,
    FacultyProfileRecord,
    FacultyUserRecord,
    PolicyRecord,
    RoomRecord,
    ScheduleVersionRecord,
    SectionRecord,
    SubjectRecord,
    TermRecord,
    TimeBlockRecord,
)
from app.schemas.report import (
    ConflictCounts,
    ConflictItem,
    FacultyLoadRow,
    ReportContext,
    ReportSummary,
    RoomUtilizationRow,
    ScheduleRow,
)
from app.services.conflict_service import detect_conflicts
from app.services.document_store import DocumentStore
from app.services.policies import conflict_options_from_policies, resolve_policies
from app.services.room_utilization import compute_room_utilization
from app.services.schedule_report import build_schedule_report
from app.services.versions import select_report_version
from app.services.workload import compute_faculty_load

logger = logging.getLogger(__name__)


@dataclass
class ReportSnapshot:
    term_id: str
    department_id: str
    term: TermRecord | None = None
    department: DepartmentRecord | None = None
    version: ScheduleVersionRecord | None = None
    offerings: list[ClassOfferingRecord] = field(default_factory=list)
    meetings: list[ClassMeetingRecord] = field(default_factory=list)
    subjects: list[SubjectRecord] = field(default_factory=list)
    sections: list[SectionRecord] = field(default_factory=list)
    rooms: list[RoomRecord] = field(default_factory=list)
    time_blocks: list[TimeBlockRecord] = field(default_factory=list)
    faculty_users: list[FacultyUserRecord] = field(default_factory=list)
    faculty_profiles: list[FacultyProfileRecord] = field(default_factory=list)
    policies: list[PolicyRecord] = field(default_factory=list)

    @property
    def context(self) -> ReportContext:
        return ReportContext(
            term_id=self.term_id,
            department_id=self.department_id,
            version_id=self.version.id if self.version is not None else None,
            version_label=self.version.label if self.version is not None else None,
            version_status=self.version.status.value if self.version is not None else None,
            term_label=self.term.label if self.term is not None else None,
            department_name=self.department.name if self.department is not None else None,
        )


def _resolve_version(
    store: DocumentStore, term_id: str, department_id: str, version_id: str | None
) -> ScheduleVersionRecord | None:
    if version_id:
        version = store.get(ScheduleVersion, ScheduleVersionRecord, version_id)
        if version.term_id != term_id or version.department_id != department_id:
            raise ResourceNotFoundError("ScheduleVersion", version_id)
        return version
    versions = store.list(
        ScheduleVersion,
        ScheduleVersionRecord,
        filters={"term_id": term_id, "department_id": department_id},
        order_by=["-version"],
    )
    return select_report_version(versions)


def load_report_snapshot(
    store: DocumentStore,
    *,
    term_id: str,
    department_id: str,
    version_id: str | None = None,
) -> ReportSnapshot:
    snapshot = ReportSnapshot(term_id=term_id, department_id=department_id)
    snapshot.term = store.find(Term, TermRecord, term_id)
    snapshot.department = store.find(Department, DepartmentRecord, department_id)
    snapshot.version = _resolve_version(store, term_id, department_id, version_id)

    if snapshot.version is not None:
        snapshot.offerings = store.list(
            ClassOffering,
            ClassOfferingRecord,
            filters={"term_id": term_id, "department_id": department_id, "version_id": snapshot.version.id},
            order_by=["-updated_at"],
        )
        snapshot.meetings = store.list(
            ClassMeeting,
            ClassMeetingRecord,
            filters={"version_id": snapshot.version.id},
            order_by=["-updated_at"],
        )

    snapshot.subjects = store.list(
        Subject, SubjectRecord, filters={"department_id": department_id, "is_active": True}, order_by=["code"]
    )
    snapshot.sections = store.list(
        Section,
        SectionRecord,
        filters={"term_id": term_id, "department_id": department_id, "is_active": True},
        order_by=["year_level", "name"],
    )
    snapshot.rooms = store.list(Room, RoomRecord, filters={"is_active": True}, order_by=["code"])
    snapshot.time_blocks = store.list(TimeBlock, TimeBlockRecord, filters={"term_id": term_id})
    snapshot.faculty_users = store.list(
        FacultyUser, FacultyUserRecord, filters={"department_id": department_id}, order_by=["name"]
    )
    snapshot.faculty_profiles = store.list(
        FacultyProfile, FacultyProfileRecord, filters={"department_id": department_id}, order_by=["user_id"]
    )
    snapshot.policies = [
        *store.list(Policy, PolicyRecord, filters={"term_id": get_settings().global_policy_term_id}),
        *store.list(Policy, PolicyRecord, filters={"term_id": term_id}),
    ]

    logger.debug(
        "Loaded report snapshot for term %s / department %s: %d classes, %d meetings",
        term_id,
        department_id,
        len(snapshot.offerings),
        len(snapshot.meetings),
    )
    return snapshot


def faculty_load_report(snapshot: ReportSnapshot) -> list[FacultyLoadRow]:
    return compute_faculty_load(
        snapshot.offerings,
        snapshot.meetings,
        snapshot.faculty_users,
        snapshot.faculty_profiles,
        snapshot.subjects,
    )


def room_utilization_report(snapshot: ReportSnapshot) -> list[RoomUtilizationRow]:
    return compute_room_utilization(snapshot.rooms, snapshot.meetings, snapshot.time_blocks)


def conflict_report(snapshot: ReportSnapshot) -> list[ConflictItem]:
    options = conflict_options_from_policies(resolve_policies(snapshot.policies, snapshot.term_id))
    return detect_conflicts(
        snapshot.offerings,
        snapshot.meetings,
        snapshot.subjects,
        snapshot.sections,
        snapshot.faculty_users,
        snapshot.rooms,
        options=options,
    )


def schedule_report(snapshot: ReportSnapshot) -> list[ScheduleRow]:
    return build_schedule_report(
        snapshot.offerings,
        snapshot.meetings,
        snapshot.subjects,
        snapshot.sections,
        snapshot.faculty_users,
        snapshot.rooms,
    )


def count_conflicts(conflicts: list[ConflictItem]) -> ConflictCounts:
    counts = ConflictCounts(total=len(conflicts))
    for item in conflicts:
        if item.type == "ROOM":
            counts.room += 1
        elif item.type == "FACULTY":
            counts.faculty += 1
        else:
            counts.section += 1
    return counts


def build_report_summary(snapshot: ReportSnapshot) -> ReportSummary:
    faculty_load = faculty_load_report(snapshot)
    conflicts = conflict_report(snapshot)
    return ReportSummary(
        context=snapshot.context,
        faculty_load=faculty_load,
        room_utilization=room_utilization_report(snapshot),
        conflicts=conflicts,
        conflict_counts=count_conflicts(conflicts),
        schedule=schedule_report(snapshot),
        overloaded_faculty=sum(1 for row in faculty_load if row.status == "Overload"),
    )
