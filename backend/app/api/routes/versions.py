from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.api.deps import get_actor_id, get_db, get_store
from app.models.schedule_version import ScheduleStatus, ScheduleVersion
from app.schemas.entities import ScheduleVersionRecord
from app.services.document_store import DocumentStore
from app.services.versions import transition_version

router = APIRouter()


class VersionStatusUpdate(BaseModel):
    status: ScheduleStatus


@router.get("/", response_model=list[ScheduleVersionRecord])
def list_versions(
    term_id: str = Query(min_length=1, alias="termId"),
    department_id: str = Query(min_length=1, alias="departmentId"),
    store: DocumentStore = Depends(get_store),
) -> list[ScheduleVersionRecord]:
    return store.list(
        ScheduleVersion,
        ScheduleVersionRecord,
        filters={"term_id": term_id, "department_id": department_id},
        order_by=["-version"],
    )


@router.post("/{version_id}/status", response_model=ScheduleVersionRecord)
def update_version_status(
    version_id: str,
    payload: VersionStatusUpdate,
    actor_id: str = Depends(get_actor_id),
    db: Session = Depends(get_db),
    store: DocumentStore = Depends(get_store),
) -> ScheduleVersionRecord:
    version = store.get(ScheduleVersion, ScheduleVersionRecord, version_id)
    siblings = store.list(
        ScheduleVersion,
        ScheduleVersionRecord,
        filters={"term_id": version.term_id, "department_id": version.department_id, "status": ScheduleStatus.active},
    )
    updated = transition_version(version, payload.status, actor_id=actor_id, siblings=siblings)
    for record in updated:
        store.save(ScheduleVersion, record, fields=["status", "locked_by", "locked_at"])
    db.commit()
    return updated[0]
