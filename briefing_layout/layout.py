"""
Day Layout — the public entry point for timeline column placement.

Pure: each call validates the input, reduces it to intervals, clusters them
and assigns columns from scratch. Nothing is cached or shared between calls.
"""

import logging
from collections.abc import Iterable, Mapping

from briefing_layout.clusters import build_clusters
from briefing_layout.columns import assign_columns, check_column_cap
from briefing_layout.config import get_settings
from briefing_layout.contracts.invariants import verify_day_layout
from briefing_layout.interval import normalize_events
from briefing_layout.models import CalendarEvent, DayLayout, LayoutInfo
from briefing_layout.observability import LayoutContext, log_fields

logger = logging.getLogger(__name__)


def layout_day(
    events: Iterable[CalendarEvent | Mapping],
    column_cap: int | float | None = None,
    verify: bool = False,
) -> DayLayout:
    """
    Lay out one day's events.

    Args:
        events: CalendarEvent instances or dicts of the same shape
        column_cap: per-cluster column limit; None uses the configured cap,
            columns.UNBOUNDED disables it
        verify: run layout invariants on the result

    Returns:
        DayLayout with layout, clusters and exclusion diagnostics

    Raises:
        ValueError: column_cap < 1
        InvalidEventError / DuplicateEventError: malformed day input
        InvariantViolation: verify=True and the result breaks an invariant
    """
    if column_cap is None:
        column_cap = get_settings().column_cap
    check_column_cap(column_cap)

    with LayoutContext():
        day = normalize_events(events)
        clusters = build_clusters(day.intervals)

        layout: dict[str, LayoutInfo] = {}
        for cluster in clusters:
            layout.update(assign_columns(cluster, column_cap))

        result = DayLayout(layout=layout, clusters=clusters, exclusions=day.exclusions)

        if verify:
            verify_day_layout(result)

        logger.debug(
            "Laid out %s events in %s clusters (%s excluded, %s forced)",
            len(layout),
            len(clusters),
            len(day.exclusions),
            len(result.forced_event_ids),
            extra=log_fields(events=len(layout), clusters=len(clusters)),
        )
    return result


def compute_layout(
    events: Iterable[CalendarEvent | Mapping],
    column_cap: int | float | None = None,
) -> dict[str, LayoutInfo]:
    """Map each valid event id to its column and its cluster's total_columns."""
    return layout_day(events, column_cap).layout
