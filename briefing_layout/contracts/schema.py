"""
Schema Module — Pydantic models for the day snapshot handed to the renderer.

The rendering layer turns column / total_columns into horizontal fractions
of the timeline and draws conflict badges. This is the shape it may rely on.
"""

from collections.abc import Iterable, Mapping
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from briefing_layout.conflicts import detect_conflicts, unique_pairs
from briefing_layout.layout import layout_day
from briefing_layout.models import CalendarEvent

SCHEMA_VERSION = "1.0.0"


class LayoutEntry(BaseModel):
    """Column placement of one event."""

    event_id: str
    column: int = Field(ge=0)
    total_columns: int = Field(ge=1)
    forced: bool = False

    @model_validator(mode="after")
    def column_within_total(self) -> "LayoutEntry":
        if self.column >= self.total_columns:
            raise ValueError(
                f"column {self.column} out of range for total_columns {self.total_columns}"
            )
        return self


class ConflictEntry(BaseModel):
    """Events one event directly overlaps."""

    event_id: str
    conflicts_with: list[str] = Field(min_length=1)


class ExclusionEntry(BaseModel):
    """An event that was not laid out."""

    event_id: str
    reason: Literal["missing_time", "all_day", "unparseable_time", "non_positive_duration"]
    detail: str | None = None


class DaySnapshot(BaseModel):
    """Everything the day timeline needs from the engine."""

    schema_version: str = SCHEMA_VERSION
    layout: list[LayoutEntry]
    conflicts: list[ConflictEntry] = Field(default_factory=list)
    conflict_count: int = Field(ge=0, default=0)
    exclusions: list[ExclusionEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def conflicts_are_laid_out(self) -> "DaySnapshot":
        laid_out = {entry.event_id for entry in self.layout}
        for entry in self.conflicts:
            unknown = [e for e in [entry.event_id, *entry.conflicts_with] if e not in laid_out]
            if unknown:
                raise ValueError(f"conflict references events with no layout: {unknown}")
        return self


def build_snapshot(
    events: Iterable[CalendarEvent | Mapping],
    column_cap: int | float | None = None,
) -> dict:
    """
    Lay out a day and package layout, conflicts and exclusions as a
    validated, JSON-ready dict.
    """
    events = list(events)
    day = layout_day(events, column_cap)
    conflicts = detect_conflicts(events)

    snapshot = DaySnapshot(
        layout=[LayoutEntry(**info.to_dict()) for info in day.layout.values()],
        conflicts=[
            ConflictEntry(event_id=event_id, conflicts_with=[o.google_id for o in others])
            for event_id, others in conflicts.items()
        ],
        conflict_count=len(unique_pairs(conflicts)),
        exclusions=[
            ExclusionEntry(event_id=x.event_id, reason=x.reason.value, detail=x.detail)
            for x in day.exclusions
        ],
    )
    return snapshot.model_dump(mode="json")
