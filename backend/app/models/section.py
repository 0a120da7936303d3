import uuid

from sqlalchemy import Boolean, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Section(Base):
    __tablename__ = "sections"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    term_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    department_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    program_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    year_level: Mapped[int] = mapped_column(Integer, nullable=False)
    # Single letter A-Z or "Others".
    name: Mapped[str] = mapped_column(String(20), nullable=False)
    student_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


Index(
    "uq_sections_term_department_year_name",
    Section.term_id,
    Section.department_id,
    Section.year_level,
    func.lower(Section.name),
    unique=True,
)
