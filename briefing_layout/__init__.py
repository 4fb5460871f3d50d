# Briefing Layout - Day timeline layout and conflict engine
"""
Exports for the calendar view and other consumers.

    layout = compute_layout(events)        # event_id -> LayoutInfo
    conflicts = detect_conflicts(events)   # event_id -> [CalendarEvent]
"""

from .clusters import build_clusters
from .columns import UNBOUNDED, assign_columns
from .config import LayoutSettings, get_settings, load_settings
from .contracts import InvariantViolation
from .conflicts import (
    conflict_pairs,
    count_conflicts,
    detect_conflicts,
    overlap_titles,
    unique_pairs,
)
from .day_stats import DayStats, FreeBlock, calculate_day_stats
from .errors import (
    ClusterIntegrityError,
    DuplicateEventError,
    InvalidEventError,
    LayoutError,
)
from .interval import normalize_events, to_interval
from .layout import compute_layout, layout_day
from .models import (
    CalendarEvent,
    Cluster,
    DayLayout,
    Exclusion,
    ExclusionReason,
    Interval,
    LayoutInfo,
)
from .overlap import overlaps

__all__ = [
    "compute_layout",
    "layout_day",
    "detect_conflicts",
    "conflict_pairs",
    "count_conflicts",
    "overlap_titles",
    "unique_pairs",
    "calculate_day_stats",
    "build_clusters",
    "assign_columns",
    "UNBOUNDED",
    "to_interval",
    "normalize_events",
    "overlaps",
    "CalendarEvent",
    "Interval",
    "Cluster",
    "LayoutInfo",
    "DayLayout",
    "Exclusion",
    "ExclusionReason",
    "DayStats",
    "FreeBlock",
    "LayoutSettings",
    "get_settings",
    "load_settings",
    "LayoutError",
    "InvalidEventError",
    "DuplicateEventError",
    "ClusterIntegrityError",
    "InvariantViolation",
]
