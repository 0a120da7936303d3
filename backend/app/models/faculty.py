from enum import Enum

from sqlalchemy import Enum as SAEnum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class FacultyRole(str, Enum):
    faculty = "FACULTY"
    chair = "CHAIR"
    dean = "DEAN"


class FacultyUser(Base):
    __tablename__ = "faculty_users"

    user_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    role: Mapped[FacultyRole] = mapped_column(
        SAEnum(FacultyRole, name="faculty_role", values_callable=lambda items: [item.value for item in items]),
        nullable=False,
        default=FacultyRole.faculty,
    )
    department_id: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)


class FacultyProfile(Base):
    __tablename__ = "faculty_profiles"

    user_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    department_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    employee_no: Mapped[str | None] = mapped_column(String(50), nullable=True)
    rank: Mapped[str | None] = mapped_column(String(100), nullable=True)
    max_units: Mapped[int | None] = mapped_column(Integer, nullable=True)
    max_hours: Mapped[int | None] = mapped_column(Integer, nullable=True)
