"""
Day Stats — busy time, free time and free blocks for the focused day.

Busy minutes are the plain sum of valid event durations (overlapping
meetings both count). Free blocks are gaps between busy time inside the
configured workday window, at least min_free_block_minutes long.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from briefing_layout.config import LayoutSettings, get_settings
from briefing_layout.interval import normalize_events
from briefing_layout.models import CalendarEvent
from briefing_layout.observability import LayoutContext


def format_minute(minute: int) -> str:
    """Minute of day -> 'HH:MM' (1440 -> '24:00')."""
    return f"{minute // 60:02d}:{minute % 60:02d}"


@dataclass(frozen=True)
class FreeBlock:
    start: int
    end: int

    @property
    def duration_minutes(self) -> int:
        return self.end - self.start

    def to_dict(self) -> dict:
        return {
            "start": format_minute(self.start),
            "end": format_minute(self.end),
            "duration_minutes": self.duration_minutes,
        }


@dataclass
class DayStats:
    total_events: int
    total_minutes: int
    total_hours: float
    free_hours: float
    free_blocks: list[FreeBlock] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "total_events": self.total_events,
            "total_minutes": self.total_minutes,
            "total_hours": self.total_hours,
            "free_hours": self.free_hours,
            "free_blocks": [block.to_dict() for block in self.free_blocks],
        }


def calculate_day_stats(
    events: Iterable[CalendarEvent | Mapping],
    settings: LayoutSettings | None = None,
) -> DayStats:
    """Summarize a day's load against the workday window."""
    settings = settings or get_settings()
    with LayoutContext():
        day = normalize_events(events)

    workday_start = settings.workday_start_minute
    workday_end = settings.workday_end_minute
    min_gap = settings.min_free_block_minutes

    total_minutes = sum(interval.duration for interval in day.intervals)

    free_blocks: list[FreeBlock] = []
    cursor = workday_start
    for interval in sorted(day.intervals, key=lambda iv: iv.start):
        slot_start = min(max(interval.start, workday_start), workday_end)
        slot_end = min(interval.end, workday_end)

        if slot_start - cursor >= min_gap:
            free_blocks.append(FreeBlock(cursor, slot_start))
        cursor = max(cursor, slot_end)

    if workday_end - cursor >= min_gap:
        free_blocks.append(FreeBlock(cursor, workday_end))

    workday_minutes = workday_end - workday_start
    return DayStats(
        total_events=len(day.events),
        total_minutes=total_minutes,
        total_hours=round(total_minutes / 60, 1),
        free_hours=round(max(0, workday_minutes - total_minutes) / 60, 1),
        free_blocks=free_blocks,
    )
