from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, TypeVar

from sqlalchemy import inspect, select
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.exceptions import ResourceNotFoundError
from app.db.base import Base
from app.schemas.entities import EntityRecord

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=EntityRecord)


def row_to_record(row: Base, record_type: type[RecordT]) -> RecordT:
    values = {attribute.key: getattr(row, attribute.key) for attribute in inspect(row).mapper.column_attrs}
    return record_type.model_validate(values)


class DocumentStore:
    """Read side of the document store: equality filters, ordering and a limit.

    Rows leave the store as validated records so callers never touch loosely
    typed values.
    """

    def __init__(self, db: Session, *, row_limit: int | None = None):
        self.db = db
        self.row_limit = row_limit or get_settings().report_row_limit

    def list(
        self,
        model: type[Base],
        record_type: type[RecordT],
        *,
        filters: dict[str, Any] | None = None,
        order_by: Sequence[str] = (),
        limit: int | None = None,
    ) -> list[RecordT]:
        statement = select(model)
        for field_name, value in (filters or {}).items():
            statement = statement.where(getattr(model, field_name) == value)
        for field_name in order_by:
            if field_name.startswith("-"):
                statement = statement.order_by(getattr(model, field_name[1:]).desc())
            else:
                statement = statement.order_by(getattr(model, field_name).asc())
        effective_limit = min(limit or self.row_limit, self.row_limit)
        rows = list(self.db.execute(statement.limit(effective_limit)).scalars())
        if len(rows) == effective_limit:
            logger.warning("Listing %s hit the row limit of %d", model.__tablename__, effective_limit)
        return [row_to_record(row, record_type) for row in rows]

    def find(self, model: type[Base], record_type: type[RecordT], record_id: str) -> RecordT | None:
        row = self.db.get(model, record_id)
        return row_to_record(row, record_type) if row is not None else None

    def get(self, model: type[Base], record_type: type[RecordT], record_id: str) -> RecordT:
        record = self.find(model, record_type, record_id)
        if record is None:
            raise ResourceNotFoundError(model.__name__, record_id)
        return record

    def save(self, model: type[Base], record: EntityRecord, *, fields: Sequence[str]) -> None:
        """Write selected fields of a record back onto its stored row."""
        identity = getattr(record, "id", None) or getattr(record, "user_id", None)
        row = self.db.get(model, identity)
        if row is None:
            raise ResourceNotFoundError(model.__name__, str(identity))
        for field_name in fields:
            setattr(row, field_name, getattr(record, field_name))
