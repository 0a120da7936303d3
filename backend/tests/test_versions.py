from datetime import datetime, timezone

import pytest

from app.core.exceptions import InvalidTransitionError
from app.models.schedule_version import ScheduleStatus
from app.schemas.entities import ScheduleVersionRecord
from app.services.versions import select_report_version, transition_version


def version(id, number, status, term_id="t1", department_id="d1"):
    return ScheduleVersionRecord(
        id=id,
        term_id=term_id,
        department_id=department_id,
        version=number,
        status=status,
        created_by="admin",
    )


def test_report_version_prefers_active_then_newest():
    draft_1 = version("v1", 1, ScheduleStatus.draft)
    active_2 = version("v2", 2, ScheduleStatus.active)
    draft_3 = version("v3", 3, ScheduleStatus.draft)
    archived_4 = version("v4", 4, ScheduleStatus.archived)

    assert select_report_version([draft_1, active_2, draft_3]).id == "v2"
    assert select_report_version([draft_1, draft_3, archived_4]).id == "v3"
    assert select_report_version([archived_4]) is None
    assert select_report_version([]) is None


def test_activating_demotes_other_active_versions_in_same_scope():
    target = version("v3", 3, ScheduleStatus.draft)
    siblings = [
        version("v1", 1, ScheduleStatus.active),
        version("v2", 2, ScheduleStatus.locked),
        version("other-dept", 1, ScheduleStatus.active, department_id="d2"),
    ]

    updated = transition_version(target, ScheduleStatus.active, actor_id="admin", siblings=siblings)

    assert [(item.id, item.status) for item in updated] == [
        ("v3", ScheduleStatus.active),
        ("v1", ScheduleStatus.draft),
    ]
    assert target.status == ScheduleStatus.draft


def test_locking_records_actor_and_time():
    moment = datetime(2026, 3, 1, 8, 0, tzinfo=timezone.utc)
    [locked] = transition_version(version("v1", 1, ScheduleStatus.active), ScheduleStatus.locked, actor_id="chair-1", now=moment)
    assert locked.status == ScheduleStatus.locked
    assert locked.locked_by == "chair-1"
    assert locked.locked_at == moment


@pytest.mark.parametrize(
    ("current", "target"),
    [
        (ScheduleStatus.locked, ScheduleStatus.active),
        (ScheduleStatus.locked, ScheduleStatus.archived),
        (ScheduleStatus.archived, ScheduleStatus.active),
        (ScheduleStatus.draft, ScheduleStatus.draft),
    ],
)
def test_forbidden_transitions(current, target):
    with pytest.raises(InvalidTransitionError) as excinfo:
        transition_version(version("v1", 1, current), target, actor_id="admin")
    assert excinfo.value.status_code == 409


def test_archiving_a_draft_is_allowed():
    [archived] = transition_version(version("v1", 1, ScheduleStatus.draft), ScheduleStatus.archived, actor_id="admin")
    assert archived.status == ScheduleStatus.archived
    assert archived.locked_by is None
