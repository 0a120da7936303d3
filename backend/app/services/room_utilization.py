from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from app.schemas.entities import ClassMeetingRecord, RoomRecord, TimeBlockRecord
from app.schemas.report import RoomUtilizationRow
from app.services.resource_index import EMPTY_CELL, index_by
from app.services.time_utils import duration_minutes

UNKNOWN_ROOM = "Unknown Room"


def available_week_minutes(time_blocks: Iterable[TimeBlockRecord]) -> int:
    """Total open minutes per week across the term's active time blocks."""
    by_day: dict[str, int] = defaultdict(int)
    for block in time_blocks:
        if not block.is_active:
            continue
        by_day[block.day_of_week or EMPTY_CELL] += duration_minutes(block.start_time, block.end_time)
    return sum(by_day.values())


def utilization_pct(used_minutes: int, available_minutes: int) -> float:
    if available_minutes <= 0:
        return 0.0
    return min(100.0, used_minutes / available_minutes * 100)


def compute_room_utilization(
    rooms: Iterable[RoomRecord],
    meetings: Iterable[ClassMeetingRecord],
    time_blocks: Iterable[TimeBlockRecord],
) -> list[RoomUtilizationRow]:
    available = available_week_minutes(time_blocks)

    used_by_room: dict[str, int] = defaultdict(int)
    for meeting in meetings:
        if not meeting.room_id:
            continue
        used_by_room[meeting.room_id] += duration_minutes(meeting.start_time, meeting.end_time)

    room_by_id = index_by(rooms, lambda item: item.id)
    rows = [
        RoomUtilizationRow(
            room_id=room_id,
            room_code=room.code or "ROOM",
            type=room.type or EMPTY_CELL,
            capacity=room.capacity,
            used_minutes=used_by_room.get(room_id, 0),
            available_minutes=available,
            utilization_pct=utilization_pct(used_by_room.get(room_id, 0), available),
        )
        for room_id, room in room_by_id.items()
    ]
    rows.extend(
        RoomUtilizationRow(
            room_id=room_id,
            room_code=UNKNOWN_ROOM,
            used_minutes=used,
            available_minutes=available,
            utilization_pct=utilization_pct(used, available),
        )
        for room_id, used in used_by_room.items()
        if room_id not in room_by_id
    )

    rows.sort(key=lambda row: row.utilization_pct, reverse=True)
    return rows
