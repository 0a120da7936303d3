import pytest

from app.services.time_utils import duration_minutes, overlaps, parse_time_to_minutes


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("08:00", 480),
        ("8:05", 485),
        ("23:59", 1439),
        ("", 0),
        (None, 0),
        ("ab:cd", 0),
        ("10", 600),
        ("10:xx", 600),
        ("1e308:00", 0),
        ("inf:30", 30),
    ],
)
def test_parse_time_to_minutes_never_raises(raw, expected):
    assert parse_time_to_minutes(raw) == expected


def test_duration_is_clamped_to_zero():
    assert duration_minutes("08:00", "09:30") == 90
    assert duration_minutes("10:00", "09:00") == 0
    assert duration_minutes("garbage", "") == 0
    assert duration_minutes("08:00", "1e308:00") == 0


def test_overlap_is_half_open_and_symmetric():
    assert overlaps(8 * 60, 9 * 60, 9 * 60, 10 * 60) is False
    assert overlaps(8 * 60, 10 * 60, 9 * 60, 9 * 60 + 30) is True
    cases = [(480, 540, 510, 600), (480, 540, 540, 600), (600, 660, 480, 700)]
    for a_start, a_end, b_start, b_end in cases:
        assert overlaps(a_start, a_end, b_start, b_end) == overlaps(b_start, b_end, a_start, a_end)
