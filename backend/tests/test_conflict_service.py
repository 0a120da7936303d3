import pytest
from factories import faculty, meeting, offering, room, section, subject

from app.services.conflict_service import ConflictOptions, detect_conflicts, overlapping_pairs


@pytest.fixture
def resources():
    return {
        "subjects": [subject("s1", "CS101"), subject("s2", "CS102"), subject("s3", "MATH1")],
        "sections": [section("sec1", 1, "A"), section("sec2", 1, "B")],
        "faculty_users": [faculty("f1", "Prof A"), faculty("f2", "Prof B")],
        "rooms": [room("r1", "RM-101"), room("r2", "RM-102")],
    }


def run(resources, offerings, meetings, options=None):
    return detect_conflicts(
        offerings,
        meetings,
        resources["subjects"],
        resources["sections"],
        resources["faculty_users"],
        resources["rooms"],
        options=options,
    )


def test_detect_room_conflict(resources):
    offerings = [offering("c1", "s1", "sec1", "f1"), offering("c2", "s2", "sec2", "f2")]
    meetings = [
        meeting("m2", "c2", "Monday", "09:00", "10:00", room_id="r1"),
        meeting("m1", "c1", "Monday", "08:00", "09:30", room_id="r1"),
    ]

    conflicts = run(resources, offerings, meetings)

    assert len(conflicts) == 1
    conflict = conflicts[0]
    assert conflict.type == "ROOM"
    assert conflict.day_of_week == "Monday"
    assert conflict.start_time == "08:00"
    assert conflict.end_time == "09:30"
    assert conflict.room_code == "RM-101"
    assert conflict.a_class_label == "CS101 • 1-A • Prof A"
    assert conflict.b_class_label == "CS102 • 1-B • Prof B"
    assert (conflict.a_meeting_id, conflict.b_meeting_id) == ("m1", "m2")


def test_back_to_back_meetings_do_not_conflict(resources):
    offerings = [offering("c1", "s1", "sec1", "f1"), offering("c2", "s2", "sec1", "f1")]
    meetings = [
        meeting("m1", "c1", "Monday", "08:00", "09:00", room_id="r1"),
        meeting("m2", "c2", "Monday", "09:00", "10:00", room_id="r1"),
    ]
    assert run(resources, offerings, meetings) == []


def test_detect_faculty_conflict_in_different_rooms(resources):
    offerings = [offering("c1", "s1", "sec1", "f1"), offering("c2", "s2", "sec2", "f1")]
    meetings = [
        meeting("m1", "c1", "Monday", "09:00", "10:00", room_id="r1"),
        meeting("m2", "c2", "Monday", "09:00", "10:00", room_id="r2"),
    ]

    conflicts = run(resources, offerings, meetings)

    assert [item.type for item in conflicts] == ["FACULTY"]
    assert conflicts[0].faculty_name == "Prof A"


def test_same_offering_is_not_a_faculty_or_section_conflict_but_room_still_is(resources):
    offerings = [offering("c1", "s1", "sec1", "f1")]
    meetings = [
        meeting("m1", "c1", "Tuesday", "08:00", "09:00", room_id="r1", meeting_type="LECTURE"),
        meeting("m2", "c1", "Tuesday", "08:30", "09:30", room_id="r1", meeting_type="LAB"),
    ]

    conflicts = run(resources, offerings, meetings)

    assert [item.type for item in conflicts] == ["ROOM"]


def test_same_offering_in_different_rooms_has_no_conflicts(resources):
    offerings = [offering("c1", "s1", "sec1", "f1")]
    meetings = [
        meeting("m1", "c1", "Tuesday", "08:00", "09:00", room_id="r1"),
        meeting("m2", "c1", "Tuesday", "08:30", "09:30", room_id="r2"),
    ]
    assert run(resources, offerings, meetings) == []


def test_non_adjacent_overlap_is_detected(resources):
    offerings = [
        offering("c1", "s1", "sec1", "f1"),
        offering("c2", "s2", "sec2", "f2"),
        offering("c3", "s3", "sec2", "f2"),
    ]
    meetings = [
        meeting("a", "c1", "Monday", "08:00", "11:00", room_id="r1"),
        meeting("b", "c2", "Monday", "08:30", "09:00", room_id="r1"),
        meeting("c", "c3", "Monday", "09:30", "10:30", room_id="r1"),
    ]

    room_pairs = {
        (item.a_meeting_id, item.b_meeting_id) for item in run(resources, offerings, meetings) if item.type == "ROOM"
    }

    assert room_pairs == {("a", "b"), ("a", "c")}


def test_every_pair_reported_once():
    meetings = [
        meeting("m1", "c1", "Monday", "08:00", "10:00"),
        meeting("m2", "c2", "Monday", "08:30", "10:00"),
        meeting("m3", "c3", "Monday", "09:00", "10:00"),
    ]
    pairs = [(first.id, second.id) for first, second in overlapping_pairs(meetings)]
    assert pairs == [("m1", "m2"), ("m1", "m3"), ("m2", "m3")]


def test_meetings_without_room_or_day_are_skipped_for_rooms(resources):
    offerings = [offering("c1", "s1", "sec1", "f1"), offering("c2", "s2", "sec2", "f2")]
    meetings = [
        meeting("m1", "c1", "Monday", "08:00", "09:00", room_id=None),
        meeting("m2", "c2", "Monday", "08:00", "09:00", room_id=None),
        meeting("m3", "c1", "", "08:00", "09:00", room_id="r1"),
        meeting("m4", "c2", "", "08:00", "09:00", room_id="r1"),
    ]
    assert run(resources, offerings, meetings) == []


def test_unresolved_offerings_skip_faculty_and_section_groups(resources):
    meetings = [
        meeting("m1", "ghost-1", "Monday", "08:00", "09:00", room_id="r1"),
        meeting("m2", "ghost-2", "Monday", "08:00", "09:00", room_id="r1"),
    ]

    conflicts = run(resources, [], meetings)

    assert [item.type for item in conflicts] == ["ROOM"]
    assert conflicts[0].a_class_label == "SUBJ • SEC • TBA"


def test_conflicts_ordered_by_type_day_then_start(resources):
    offerings = [
        offering("c1", "s1", "sec1", "f1"),
        offering("c2", "s2", "sec2", "f2"),
        offering("c3", "s3", "sec1", "f2"),
        offering("c4", "s1", "sec2", "f1"),
    ]
    meetings = [
        # SECTION conflict on Friday (sec1, different faculty and rooms)
        meeting("s-a", "c1", "Friday", "13:00", "14:00", room_id="r1"),
        meeting("s-b", "c3", "Friday", "13:30", "14:30", room_id="r2"),
        # FACULTY conflict on Wednesday (f1, different sections and rooms)
        meeting("f-a", "c1", "Wednesday", "10:00", "11:00", room_id="r1"),
        meeting("f-b", "c4", "Wednesday", "10:30", "11:30", room_id="r2"),
        # ROOM conflicts on Thursday and Monday (different faculty and sections)
        meeting("r-c", "c1", "Thursday", "07:00", "08:00", room_id="r2"),
        meeting("r-d", "c2", "Thursday", "07:30", "08:30", room_id="r2"),
        meeting("r-a", "c1", "Monday", "15:00", "16:00", room_id="r1"),
        meeting("r-b", "c2", "Monday", "15:30", "16:30", room_id="r1"),
    ]

    conflicts = run(resources, offerings, meetings)

    assert [(item.type, item.day_of_week) for item in conflicts] == [
        ("ROOM", "Monday"),
        ("ROOM", "Thursday"),
        ("FACULTY", "Wednesday"),
        ("SECTION", "Friday"),
    ]
    assert conflicts[-1].section_name == "1-A"


def test_same_day_conflicts_ordered_by_start(resources):
    offerings = [offering("c1", "s1", "sec1", "f1"), offering("c2", "s2", "sec2", "f2")]
    meetings = [
        meeting("late-a", "c1", "Monday", "13:00", "14:00", room_id="r1"),
        meeting("late-b", "c2", "Monday", "13:30", "14:30", room_id="r1"),
        meeting("early-a", "c1", "Monday", "08:00", "09:00", room_id="r2"),
        meeting("early-b", "c2", "Monday", "08:30", "09:30", room_id="r2"),
    ]

    conflicts = run(resources, offerings, meetings)

    assert [(item.type, item.start_time, item.room_code) for item in conflicts] == [
        ("ROOM", "08:00", "RM-102"),
        ("ROOM", "13:00", "RM-101"),
    ]


def test_same_start_pair_does_not_depend_on_input_order(resources):
    offerings = [offering("c1", "s1", "sec1", "f1"), offering("c2", "s2", "sec2", "f2")]
    first = meeting("m1", "c1", "Monday", "08:00", "09:00", room_id="r1")
    second = meeting("m2", "c2", "Monday", "08:00", "10:00", room_id="r1")

    forward = run(resources, offerings, [first, second])
    backward = run(resources, offerings, [second, first])

    assert forward == backward
    conflict = forward[0]
    assert (conflict.a_meeting_id, conflict.b_meeting_id) == ("m1", "m2")
    assert conflict.end_time == "09:00"
    assert conflict.a_class_label == "CS101 • 1-A • Prof A"


def test_policy_options_can_allow_conflict_types(resources):
    offerings = [offering("c1", "s1", "sec1", "f1"), offering("c2", "s2", "sec1", "f1")]
    meetings = [
        meeting("m1", "c1", "Monday", "08:00", "09:00", room_id="r1"),
        meeting("m2", "c2", "Monday", "08:30", "09:30", room_id="r1"),
    ]

    everything = run(resources, offerings, meetings)
    relaxed = run(
        resources,
        offerings,
        meetings,
        ConflictOptions(allow_room_conflict=True, allow_section_conflict=True),
    )

    assert [item.type for item in everything] == ["ROOM", "FACULTY", "SECTION"]
    assert [item.type for item in relaxed] == ["FACULTY"]


def test_grace_minutes_flag_tight_turnarounds(resources):
    offerings = [offering("c1", "s1", "sec1", "f1"), offering("c2", "s2", "sec2", "f2")]
    meetings = [
        meeting("m1", "c1", "Monday", "08:00", "09:00", room_id="r1"),
        meeting("m2", "c2", "Monday", "09:05", "10:00", room_id="r1"),
    ]

    assert run(resources, offerings, meetings) == []
    assert len(run(resources, offerings, meetings, ConflictOptions(grace_minutes=10))) == 1
    assert run(resources, offerings, meetings, ConflictOptions(grace_minutes=5)) == []


def test_no_meetings_means_no_conflicts(resources):
    assert run(resources, [], []) == []


def test_detection_is_idempotent(resources):
    offerings = [offering("c1", "s1", "sec1", "f1"), offering("c2", "s2", "sec2", "f1")]
    meetings = [
        meeting("m1", "c1", "Monday", "08:00", "09:30", room_id="r1"),
        meeting("m2", "c2", "Monday", "09:00", "10:00", room_id="r1"),
    ]
    assert run(resources, offerings, meetings) == run(resources, offerings, meetings)
