"""
Column Assignor — greedy lane assignment inside one cluster.

Intervals are taken in layout order (start asc, longer first) and each goes
into the first column whose last occupant has already ended. With no cap this
is optimal for interval graphs: columns opened == the cluster's maximum
simultaneous overlap.

The cap bounds visual width on over-booked days. Once it is reached, an
interval with no free column shares the column whose occupant ends soonest
(lowest index on ties) and is marked forced. Later non-forced placements
still never overlap anything in their column.
"""

import logging
import math

from briefing_layout.config import DEFAULT_COLUMN_CAP
from briefing_layout.errors import ClusterIntegrityError
from briefing_layout.models import Cluster, Interval, LayoutInfo
from briefing_layout.observability import log_fields
from briefing_layout.overlap import layout_order

logger = logging.getLogger(__name__)

UNBOUNDED = math.inf


def _check_single_cluster(ordered: list[Interval]) -> None:
    """Intervals in layout order must form one overlap-connected, id-unique group."""
    seen: set[str] = set()
    reach = None
    for interval in ordered:
        if interval.event_id in seen:
            raise ClusterIntegrityError(f"Event {interval.event_id} appears twice in cluster")
        seen.add(interval.event_id)
        if reach is not None and interval.start >= reach:
            raise ClusterIntegrityError(
                f"Event {interval.event_id} starts at minute {interval.start}, after "
                f"everything before it ended (minute {reach}); not one cluster"
            )
        reach = interval.end if reach is None else max(reach, interval.end)


def check_column_cap(column_cap: int | float) -> None:
    if column_cap < 1:
        raise ValueError(f"column_cap must be >= 1, got {column_cap}")


def _first_free_column(last_end: list[int], start: int) -> int | None:
    for column, end in enumerate(last_end):
        if end <= start:
            return column
    return None


def assign_columns(
    cluster: Cluster, column_cap: int | float = DEFAULT_COLUMN_CAP
) -> dict[str, LayoutInfo]:
    """
    Assign a zero-based column to every interval of one cluster.

    Args:
        cluster: intervals forming exactly one overlap cluster (any order)
        column_cap: most columns the cluster may open; UNBOUNDED for no cap

    Returns:
        event_id -> LayoutInfo, total_columns identical for every entry

    Raises:
        ValueError: column_cap < 1
        ClusterIntegrityError: input is not a single cluster
    """
    check_column_cap(column_cap)

    ordered = sorted(cluster, key=layout_order)
    _check_single_cluster(ordered)

    # last_end[c] = end minute of whatever currently occupies column c
    last_end: list[int] = []
    placements: list[tuple[Interval, int, bool]] = []

    for interval in ordered:
        column = _first_free_column(last_end, interval.start)
        forced = False

        if column is not None:
            last_end[column] = interval.end
        elif len(last_end) < column_cap:
            column = len(last_end)
            last_end.append(interval.end)
        else:
            column = min(range(len(last_end)), key=last_end.__getitem__)
            last_end[column] = max(last_end[column], interval.end)
            forced = True
            logger.warning(
                "Column cap %s reached; event %s forced into column %s",
                column_cap,
                interval.event_id,
                column,
                extra=log_fields(event_id=interval.event_id, column=column),
            )

        placements.append((interval, column, forced))

    total_columns = len(last_end)
    return {
        interval.event_id: LayoutInfo(
            event_id=interval.event_id,
            column=column,
            total_columns=total_columns,
            forced=forced,
        )
        for interval, column, forced in placements
    }
