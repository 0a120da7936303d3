from __future__ import annotations

import math
from typing import Any

from app.schemas.entities import safe_number, safe_str


def parse_time_to_minutes(value: Any) -> int:
    """Parse ``H:MM``/``HH:MM`` into minutes since midnight.

    Malformed segments count as zero instead of raising, so a bad value
    degrades the report rather than breaking it.
    """
    parts = safe_str(value).split(":")
    hours = safe_number(parts[0])
    minutes = safe_number(parts[1]) if len(parts) > 1 else 0.0
    total = hours * 60 + minutes
    return int(total) if math.isfinite(total) else 0


def duration_minutes(start: Any, end: Any) -> int:
    return max(0, parse_time_to_minutes(end) - parse_time_to_minutes(start))


def overlaps(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    # Half-open intervals: touching at a boundary is not an overlap.
    return max(a_start, b_start) < min(a_end, b_end)