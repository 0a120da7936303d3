from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timezone

from app.core.exceptions import InvalidTransitionError
from app.models.schedule_version import ScheduleStatus
from app.schemas.entities import ScheduleVersionRecord

logger = logging.getLogger(__name__)


def select_report_version(versions: Iterable[ScheduleVersionRecord]) -> ScheduleVersionRecord | None:
    """Pick the version reports should show: the Active one, else the newest."""
    candidates = [version for version in versions if version.status != ScheduleStatus.archived]
    for version in candidates:
        if version.status == ScheduleStatus.active:
            return version
    if not candidates:
        return None
    return max(candidates, key=lambda version: version.version)


def check_transition(current: ScheduleStatus, target: ScheduleStatus) -> None:
    if current == target:
        raise InvalidTransitionError("Schedule version", current.value, target.value, "already in that status")
    if current == ScheduleStatus.locked and target in {ScheduleStatus.active, ScheduleStatus.archived}:
        raise InvalidTransitionError("Schedule version", current.value, target.value, "locked versions are final")
    if current == ScheduleStatus.archived and target == ScheduleStatus.active:
        raise InvalidTransitionError("Schedule version", current.value, target.value, "archived versions are hidden")


def transition_version(
    version: ScheduleVersionRecord,
    target: ScheduleStatus,
    *,
    actor_id: str,
    siblings: Iterable[ScheduleVersionRecord] = (),
    now: datetime | None = None,
) -> list[ScheduleVersionRecord]:
    """Apply a status change and return every record that must be saved.

    Activating a version demotes any other Active version of the same term and
    department back to Draft. Locking stamps who locked it and when.
    """
    check_transition(version.status, target)

    changes: dict = {"status": target}
    if target == ScheduleStatus.locked:
        changes["locked_by"] = actor_id
        changes["locked_at"] = now or datetime.now(timezone.utc)

    updated = [version.model_copy(update=changes)]
    if target == ScheduleStatus.active:
        for sibling in siblings:
            if (
                sibling.id != version.id
                and sibling.term_id == version.term_id
                and sibling.department_id == version.department_id
                and sibling.status == ScheduleStatus.active
            ):
                updated.append(sibling.model_copy(update={"status": ScheduleStatus.draft}))

    logger.info(
        "Schedule version %s moved %s -> %s by %s (%d sibling(s) demoted)",
        version.id,
        version.status.value,
        target.value,
        actor_id,
        len(updated) - 1,
    )
    return updated
