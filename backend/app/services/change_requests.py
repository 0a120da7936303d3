from __future__ import annotations

import logging
from datetime import datetime, timezone

from app.core.exceptions import AppError, InvalidTransitionError
from app.models.change_request import ChangeRequestStatus
from app.schemas.entities import ChangeRequestRecord

logger = logging.getLogger(__name__)

REVIEW_DECISIONS = {ChangeRequestStatus.approved, ChangeRequestStatus.rejected}


def review_change_request(
    request: ChangeRequestRecord,
    decision: ChangeRequestStatus,
    *,
    reviewer_id: str,
    notes: str | None = None,
    now: datetime | None = None,
) -> ChangeRequestRecord:
    if decision not in REVIEW_DECISIONS:
        raise AppError(f"{decision.value} is not a review decision", status_code=422)
    if request.status != ChangeRequestStatus.pending:
        raise InvalidTransitionError(
            "Change request", request.status.value, decision.value, "only pending requests can be reviewed"
        )
    logger.info("Change request %s %s by %s", request.id, decision.value.lower(), reviewer_id)
    return request.model_copy(
        update={
            "status": decision,
            "reviewed_by": reviewer_id or None,
            "reviewed_at": now or datetime.now(timezone.utc),
            "resolution_notes": notes if notes is not None else request.resolution_notes,
        }
    )


def cancel_change_request(request: ChangeRequestRecord, *, requester_id: str) -> ChangeRequestRecord:
    if request.requested_by != requester_id:
        raise AppError("Only the requester can cancel this request", status_code=403)
    if request.status != ChangeRequestStatus.pending:
        raise InvalidTransitionError(
            "Change request",
            request.status.value,
            ChangeRequestStatus.cancelled.value,
            "only pending requests can be cancelled",
        )
    logger.info("Change request %s cancelled by requester", request.id)
    return request.model_copy(update={"status": ChangeRequestStatus.cancelled})
