from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session

from app.api.deps import get_actor_id, get_db, get_store
from app.models.change_request import ChangeRequest, ChangeRequestStatus
from app.schemas.entities import ChangeRequestRecord
from app.services.change_requests import cancel_change_request, review_change_request
from app.services.document_store import DocumentStore

router = APIRouter()

REVIEW_FIELDS = ["status", "reviewed_by", "reviewed_at", "resolution_notes"]


class ChangeRequestReview(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    decision: ChangeRequestStatus
    resolution_notes: str | None = None


@router.get("/", response_model=list[ChangeRequestRecord])
def list_change_requests(
    term_id: str = Query(min_length=1, alias="termId"),
    department_id: str | None = Query(default=None, alias="departmentId"),
    status: ChangeRequestStatus | None = None,
    store: DocumentStore = Depends(get_store),
) -> list[ChangeRequestRecord]:
    filters: dict = {"term_id": term_id}
    if department_id:
        filters["department_id"] = department_id
    if status is not None:
        filters["status"] = status
    return store.list(ChangeRequest, ChangeRequestRecord, filters=filters, order_by=["-created_at"])


@router.post("/{request_id}/review", response_model=ChangeRequestRecord)
def review_request(
    request_id: str,
    payload: ChangeRequestReview,
    actor_id: str = Depends(get_actor_id),
    db: Session = Depends(get_db),
    store: DocumentStore = Depends(get_store),
) -> ChangeRequestRecord:
    request = store.get(ChangeRequest, ChangeRequestRecord, request_id)
    reviewed = review_change_request(
        request,
        payload.decision,
        reviewer_id=actor_id,
        notes=payload.resolution_notes,
    )
    store.save(ChangeRequest, reviewed, fields=REVIEW_FIELDS)
    db.commit()
    return reviewed


@router.post("/{request_id}/cancel", response_model=ChangeRequestRecord)
def cancel_request(
    request_id: str,
    actor_id: str = Depends(get_actor_id),
    db: Session = Depends(get_db),
    store: DocumentStore = Depends(get_store),
) -> ChangeRequestRecord:
    request = store.get(ChangeRequest, ChangeRequestRecord, request_id)
    cancelled = cancel_change_request(request, requester_id=actor_id)
    store.save(ChangeRequest, cancelled, fields=["status"])
    db.commit()
    return cancelled
