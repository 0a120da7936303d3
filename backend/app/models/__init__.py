from app.models.change_request import ChangeRequest, ChangeRequestStatus  # noqa: F401
from app.models.class_offering import ClassMeeting, ClassOffering, MeetingType  # noqa: F401
from app.models.department import Department, Program  # noqa: F401
from app.models.faculty import FacultyProfile, FacultyRole, FacultyUser  # noqa: F401
from app.models.policy import Policy  # noqa: F401
from app.models.room import Room  # noqa: F401
from app.models.schedule_version import ScheduleStatus, ScheduleVersion  # noqa: F401
from app.models.section import Section  # noqa: F401
from app.models.subject import Subject  # noqa: F401
from app.models.term import Term, TimeBlock  # noqa: F401
