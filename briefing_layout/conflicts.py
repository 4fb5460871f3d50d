"""
Conflict Reporter — direct, pairwise overlaps per event.

Deliberately independent of clustering: a cluster of A-B-C chained overlaps
reports A<->B and B<->C as conflicts but not A<->C. Cluster size and conflict
count are different numbers and must not be conflated.
"""

import logging
from collections.abc import Iterable, Mapping

from briefing_layout.interval import normalize_events
from briefing_layout.models import CalendarEvent
from briefing_layout.observability import LayoutContext, log_fields
from briefing_layout.overlap import overlaps

logger = logging.getLogger(__name__)


def detect_conflicts(
    events: Iterable[CalendarEvent | Mapping],
) -> dict[str, list[CalendarEvent]]:
    """
    Map each conflicting event id to the events it directly overlaps.

    Events with no conflicts are absent. The map is symmetric: B is listed
    under A exactly when A is listed under B. Invalid events (all-day,
    missing or unparseable times, end <= start) never appear.
    """
    with LayoutContext():
        intervals = normalize_events(events).intervals
    conflicts: dict[str, list[CalendarEvent]] = {}

    for i, a in enumerate(intervals):
        for b in intervals[i + 1 :]:
            if overlaps(a, b):
                conflicts.setdefault(a.event_id, []).append(b.event)
                conflicts.setdefault(b.event_id, []).append(a.event)

    return conflicts


def unique_pairs(conflicts: dict[str, list[CalendarEvent]]) -> list[tuple[str, str]]:
    """Collapse a symmetric conflict map to sorted, unordered id pairs."""
    pairs = set()
    for event_id, others in conflicts.items():
        for other in others:
            pairs.add(tuple(sorted((event_id, other.google_id))))
    return sorted(pairs)


def conflict_pairs(events: Iterable[CalendarEvent | Mapping]) -> list[tuple[str, str]]:
    """Unique unordered conflicting id pairs, each pair sorted, list sorted."""
    return unique_pairs(detect_conflicts(events))


def count_conflicts(events: Iterable[CalendarEvent | Mapping]) -> int:
    """Number of distinct conflicting pairs (the 'N scheduling conflicts' banner)."""
    with LayoutContext():
        count = len(conflict_pairs(events))
        if count:
            logger.debug(
                "Detected %s scheduling conflicts", count, extra=log_fields(conflicts=count)
            )
    return count


def overlap_titles(events: Iterable[CalendarEvent | Mapping]) -> dict[str, list[str]]:
    """Titles of directly overlapping events, for the non-columnar mobile list."""
    return {
        event_id: [other.title for other in others]
        for event_id, others in detect_conflicts(events).items()
    }
