from app.schemas.entities import (
    ClassMeetingRecord,
    ClassOfferingRecord,
    FacultyProfileRecord,
    FacultyUserRecord,
    RoomRecord,
    SectionRecord,
    SubjectRecord,
    TimeBlockRecord,
)


def subject(id, code, units=3, title=None):
    return SubjectRecord(id=id, code=code, title=title or f"{code} title", units=units)


def section(id, year_level=1, name="A"):
    return SectionRecord(id=id, term_id="t1", department_id="d1", year_level=year_level, name=name)


def faculty(user_id, name, email=None):
    return FacultyUserRecord(user_id=user_id, name=name, email=email or f"{user_id}@example.edu")


def profile(user_id, max_units=None, max_hours=None, employee_no=None):
    return FacultyProfileRecord(
        user_id=user_id,
        department_id="d1",
        max_units=max_units,
        max_hours=max_hours,
        employee_no=employee_no,
    )


def room(id, code, capacity=40, type="LECTURE"):
    return RoomRecord(id=id, code=code, capacity=capacity, type=type)


def offering(id, subject_id="s1", section_id="sec1", faculty_user_id=None):
    return ClassOfferingRecord(
        id=id,
        term_id="t1",
        department_id="d1",
        version_id="v1",
        subject_id=subject_id,
        section_id=section_id,
        faculty_user_id=faculty_user_id,
    )


def meeting(id, class_id, day, start, end, room_id=None, meeting_type="LECTURE"):
    return ClassMeetingRecord(
        id=id,
        class_id=class_id,
        version_id="v1",
        day_of_week=day,
        start_time=start,
        end_time=end,
        room_id=room_id,
        meeting_type=meeting_type,
    )


def time_block(id, day, start, end, is_active=True):
    return TimeBlockRecord(id=id, term_id="t1", day_of_week=day, start_time=start, end_time=end, is_active=is_active)
