from factories import faculty, meeting, offering, profile, subject

from app.services.workload import classify_load, compute_faculty_load


def test_load_totals_units_and_classes():
    subjects = [subject("s1", "CS101", 3), subject("s2", "CS102", 3), subject("s3", "CS201", 4)]
    offerings = [
        offering("c1", "s1", faculty_user_id="f1"),
        offering("c2", "s2", faculty_user_id="f1"),
        offering("c3", "s3", faculty_user_id="f1"),
    ]
    meetings = [
        meeting("m1", "c1", "Monday", "08:00", "09:30"),
        meeting("m2", "c1", "Wednesday", "08:00", "09:30"),
        meeting("m3", "c3", "Tuesday", "13:00", "16:00"),
    ]

    rows = compute_faculty_load(offerings, meetings, [faculty("f1", "Ada")], [profile("f1", 24, 30, "E-1")], subjects)

    assert len(rows) == 1
    row = rows[0]
    assert row.total_units == 10
    assert row.classes_count == 3
    assert row.total_minutes == 360
    assert row.total_hours == 6
    assert row.employee_no == "E-1"
    assert row.status == "OK"
    assert row.load_pct == 20


def test_zero_load_faculty_is_listed_with_no_load_status():
    rows = compute_faculty_load([], [], [faculty("f1", "Ada")], [], [])
    assert len(rows) == 1
    assert rows[0].classes_count == 0
    assert rows[0].status == "No Load"
    assert rows[0].employee_no == "-"


def test_unknown_faculty_rows_are_added_for_offerings_outside_roster():
    rows = compute_faculty_load(
        [offering("c1", "s1", faculty_user_id="ghost"), offering("c2", "s1", faculty_user_id=None)],
        [],
        [faculty("f1", "Ada")],
        [],
        [subject("s1", "CS101", 3)],
    )
    names = [row.name for row in rows]
    assert names == ["Ada", "Unknown Faculty"]
    unknown = rows[1]
    assert unknown.faculty_user_id == "ghost"
    assert unknown.total_units == 3
    assert unknown.max_units == 0


def test_overload_by_units_or_hours():
    subjects = [subject("s1", "CS101", 5)]
    offerings = [offering("c1", "s1", faculty_user_id="f1"), offering("c2", "s1", faculty_user_id="f2")]
    meetings = [meeting("m1", "c2", "Monday", "07:00", "12:00")]
    rows = compute_faculty_load(
        offerings,
        meetings,
        [faculty("f1", "Ada"), faculty("f2", "Grace")],
        [profile("f1", max_units=3), profile("f2", max_units=10, max_hours=4)],
        subjects,
    )
    by_id = {row.faculty_user_id: row for row in rows}
    assert by_id["f1"].status == "Overload"
    assert by_id["f2"].status == "Overload"
    assert by_id["f2"].load_pct == 100


def test_classify_load_ignores_unset_limits():
    assert classify_load(classes_count=2, total_units=99, total_hours=99, max_units=0, max_hours=0) == "OK"
    assert classify_load(classes_count=0, total_units=0, total_hours=0, max_units=0, max_hours=0) == "No Load"


def test_rows_sorted_by_name_and_display_name_fallback():
    roster = [faculty("f2", "Zed"), faculty("f3", "", email="mo@example.edu"), faculty("f1", "Ada")]
    rows = compute_faculty_load([], [], roster, [], [])
    assert [row.name for row in rows] == ["Ada", "mo@example.edu", "Zed"]


def test_faculty_load_is_idempotent():
    args = (
        [offering("c1", "s1", faculty_user_id="f1")],
        [meeting("m1", "c1", "Monday", "08:00", "09:00")],
        [faculty("f1", "Ada")],
        [profile("f1", 6, 10)],
        [subject("s1", "CS101", 3)],
    )
    assert compute_faculty_load(*args) == compute_faculty_load(*args)


def test_names_differing_only_in_case_sort_uppercase_first():
    roster = [faculty("f2", "ada lovelace"), faculty("f3", "Bea"), faculty("f1", "Ada Lovelace")]
    rows = compute_faculty_load([], [], roster, [], [])
    assert [row.name for row in rows] == ["Ada Lovelace", "ada lovelace", "Bea"]
