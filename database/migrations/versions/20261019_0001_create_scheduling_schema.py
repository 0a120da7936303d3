"""create scheduling schema

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


schedule_status = sa.Enum("Draft", "Active", "Locked", "Archived", name="schedule_status")
change_request_status = sa.Enum("Pending", "Approved", "Rejected", "Cancelled", name="change_request_status")
faculty_role = sa.Enum("FACULTY", "CHAIR", "DEAN", name="faculty_role")


def upgrade() -> None:
    op.create_table(
        "academic_terms",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("school_year", sa.String(length=20), nullable=False),
        sa.Column("semester", sa.String(length=50), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_academic_terms_is_active", "academic_terms", ["is_active"])

    op.create_table(
        "time_blocks",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column(
            "term_id",
            sa.String(length=36),
            sa.ForeignKey("academic_terms.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("day_of_week", sa.String(length=20), nullable=False),
        sa.Column("start_time", sa.String(length=5), nullable=False),
        sa.Column("end_time", sa.String(length=5), nullable=False),
        sa.Column("label", sa.String(length=100), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_time_blocks_term_id", "time_blocks", ["term_id"])

    op.create_table(
        "departments",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("code", sa.String(length=20), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_departments_code", "departments", ["code"], unique=True)

    op.create_table(
        "programs",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column(
            "department_id",
            sa.String(length=36),
            sa.ForeignKey("departments.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("code", sa.String(length=20), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_programs_department_id", "programs", ["department_id"])

    op.create_table(
        "subjects",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("department_id", sa.String(length=36), nullable=True),
        sa.Column("code", sa.String(length=50), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("units", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("lecture_hours", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("lab_hours", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_subjects_department_id", "subjects", ["department_id"])
    op.create_index("ix_subjects_code", "subjects", ["code"])

    op.create_table(
        "sections",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("term_id", sa.String(length=36), nullable=False),
        sa.Column("department_id", sa.String(length=36), nullable=False),
        sa.Column("program_id", sa.String(length=36), nullable=True),
        sa.Column("year_level", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=20), nullable=False),
        sa.Column("student_count", sa.Integer(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_sections_term_id", "sections", ["term_id"])
    op.create_index("ix_sections_department_id", "sections", ["department_id"])
    op.create_index(
        "uq_sections_term_department_year_name",
        "sections",
        ["term_id", "department_id", "year_level", sa.text("lower(name)")],
        unique=True,
    )

    op.create_table(
        "faculty_users",
        sa.Column("user_id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("role", faculty_role, nullable=False),
        sa.Column("department_id", sa.String(length=36), nullable=True),
    )
    op.create_index("ix_faculty_users_email", "faculty_users", ["email"], unique=True)
    op.create_index("ix_faculty_users_department_id", "faculty_users", ["department_id"])

    op.create_table(
        "faculty_profiles",
        sa.Column("user_id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("department_id", sa.String(length=36), nullable=False),
        sa.Column("employee_no", sa.String(length=50), nullable=True),
        sa.Column("rank", sa.String(length=100), nullable=True),
        sa.Column("max_units", sa.Integer(), nullable=True),
        sa.Column("max_hours", sa.Integer(), nullable=True),
    )
    op.create_index("ix_faculty_profiles_department_id", "faculty_profiles", ["department_id"])

    op.create_table(
        "rooms",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("code", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=True),
        sa.Column("type", sa.String(length=50), nullable=True),
        sa.Column("capacity", sa.Integer(), nullable=False, server_default="30"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_rooms_code", "rooms", ["code"], unique=True)
    op.create_index("ix_rooms_is_active", "rooms", ["is_active"])

    op.create_table(
        "schedule_versions",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("term_id", sa.String(length=36), nullable=False),
        sa.Column("department_id", sa.String(length=36), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("label", sa.String(length=100), nullable=True),
        sa.Column("status", schedule_status, nullable=False),
        sa.Column("created_by", sa.String(length=36), nullable=False),
        sa.Column("locked_by", sa.String(length=36), nullable=True),
        sa.Column("locked_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint("term_id", "department_id", "version", name="uq_schedule_versions_number"),
    )
    op.create_index("ix_schedule_versions_term_id", "schedule_versions", ["term_id"])
    op.create_index("ix_schedule_versions_department_id", "schedule_versions", ["department_id"])

    op.create_table(
        "classes",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("term_id", sa.String(length=36), nullable=False),
        sa.Column("department_id", sa.String(length=36), nullable=False),
        sa.Column(
            "version_id",
            sa.String(length=36),
            sa.ForeignKey("schedule_versions.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("section_id", sa.String(length=36), nullable=False),
        sa.Column("subject_id", sa.String(length=36), nullable=False),
        sa.Column("faculty_user_id", sa.String(length=36), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_classes_term_id", "classes", ["term_id"])
    op.create_index("ix_classes_department_id", "classes", ["department_id"])
    op.create_index("ix_classes_version_id", "classes", ["version_id"])
    op.create_index("ix_classes_faculty_user_id", "classes", ["faculty_user_id"])

    op.create_table(
        "class_meetings",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column(
            "class_id",
            sa.String(length=36),
            sa.ForeignKey("classes.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("version_id", sa.String(length=36), nullable=False),
        sa.Column("day_of_week", sa.String(length=20), nullable=False),
        sa.Column("start_time", sa.String(length=5), nullable=False),
        sa.Column("end_time", sa.String(length=5), nullable=False),
        sa.Column("room_id", sa.String(length=36), nullable=True),
        sa.Column("meeting_type", sa.String(length=20), nullable=False, server_default="LECTURE"),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_class_meetings_class_id", "class_meetings", ["class_id"])
    op.create_index("ix_class_meetings_version_id", "class_meetings", ["version_id"])
    op.create_index("ix_class_meetings_room_id", "class_meetings", ["room_id"])

    op.create_table(
        "system_policies",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("term_id", sa.String(length=36), nullable=False),
        sa.Column("key", sa.String(length=100), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint("term_id", "key", name="uq_system_policies_term_key"),
    )
    op.create_index("ix_system_policies_term_id", "system_policies", ["term_id"])

    op.create_table(
        "change_requests",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("term_id", sa.String(length=36), nullable=False),
        sa.Column("department_id", sa.String(length=36), nullable=False),
        sa.Column("requested_by", sa.String(length=36), nullable=False),
        sa.Column("class_id", sa.String(length=36), nullable=True),
        sa.Column("meeting_id", sa.String(length=36), nullable=True),
        sa.Column("type", sa.String(length=50), nullable=False),
        sa.Column("details", sa.Text(), nullable=False),
        sa.Column("status", change_request_status, nullable=False),
        sa.Column("reviewed_by", sa.String(length=36), nullable=True),
        sa.Column("reviewed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("resolution_notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_change_requests_term_id", "change_requests", ["term_id"])
    op.create_index("ix_change_requests_department_id", "change_requests", ["department_id"])
    op.create_index("ix_change_requests_requested_by", "change_requests", ["requested_by"])


def downgrade() -> None:
    for table_name in (
        "change_requests",
        "system_policies",
        "class_meetings",
        "classes",
        "schedule_versions",
        "rooms",
        "faculty_profiles",
        "faculty_users",
        "sections",
        "subjects",
        "programs",
        "departments",
        "time_blocks",
        "academic_terms",
    ):
        op.drop_table(table_name)
    bind = op.get_bind()
    change_request_status.drop(bind, checkfirst=True)
    schedule_status.drop(bind, checkfirst=True)
    faculty_role.drop(bind, checkfirst=True)
