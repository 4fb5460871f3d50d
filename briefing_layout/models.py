"""
Layout Models — input events and derived layout structures.

CalendarEvent is the external, read-only input (pydantic, validated at the
boundary). Everything else is derived per call and never mutated afterwards:

- Interval     one event reduced to [start, end) minutes since local midnight
- Exclusion    diagnostic for an event that could not be laid out
- LayoutInfo   column placement of one event inside its cluster
- DayLayout    everything one layout pass produced
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

MINUTES_PER_DAY = 24 * 60


class CalendarEvent(BaseModel):
    """
    A concrete calendar event for one day.

    Timezones and recurrence are already resolved upstream. Fields beyond the
    ones declared here (location, attendees, ...) are opaque payload: kept on
    the model, never read by the engine.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    google_id: str = Field(min_length=1)
    title: str = ""
    start_time: datetime | str | None = None
    end_time: datetime | str | None = None
    all_day: bool = False


class ExclusionReason(StrEnum):
    MISSING_TIME = "missing_time"
    ALL_DAY = "all_day"
    UNPARSEABLE_TIME = "unparseable_time"
    NON_POSITIVE_DURATION = "non_positive_duration"


@dataclass(frozen=True)
class Exclusion:
    """An event left out of layout and conflicts, and why."""

    event_id: str
    reason: ExclusionReason
    detail: str | None = None


@dataclass(frozen=True)
class Interval:
    event_id: str
    start: int  # minutes since local midnight, inclusive
    end: int  # exclusive, always > start
    event: CalendarEvent = field(compare=False, repr=False)

    @property
    def duration(self) -> int:
        return self.end - self.start


Cluster = list[Interval]


@dataclass(frozen=True)
class LayoutInfo:
    """
    Column placement for one event.

    forced=True means the column cap was reached and this event shares a
    column with something it overlaps.
    """

    event_id: str
    column: int
    total_columns: int
    forced: bool = False

    def to_dict(self) -> dict:
        return {
            "event_id": self.event_id,
            "column": self.column,
            "total_columns": self.total_columns,
            "forced": self.forced,
        }


@dataclass
class DayLayout:
    """Result of one layout pass over a day's events."""

    layout: dict[str, LayoutInfo] = field(default_factory=dict)
    clusters: list[Cluster] = field(default_factory=list)
    exclusions: list[Exclusion] = field(default_factory=list)

    @property
    def forced_event_ids(self) -> list[str]:
        return [event_id for event_id, info in self.layout.items() if info.forced]
