"""
Invariants Module — semantic correctness checks on a day layout.

These verify MEANING, not shape:
- clusters partition the laid-out events
- same-column events never overlap (forced placements excepted)
- total_columns == 1 + max(column), uniform per cluster
- conflict maps are symmetric

They run in tests and, with layout_day(verify=True), in production.
"""

from briefing_layout.errors import LayoutError
from briefing_layout.models import CalendarEvent, DayLayout
from briefing_layout.overlap import overlaps


class InvariantViolation(LayoutError):
    """Raised when a layout invariant is violated."""

    pass


def check_partition(day: DayLayout) -> None:
    """
    INVARIANT: every laid-out event sits in exactly one cluster, and
    no interval overlaps an interval of another cluster.

    Raises:
        InvariantViolation: If clusters and layout disagree
    """
    seen: dict[str, int] = {}
    for index, cluster in enumerate(day.clusters):
        for interval in cluster:
            if interval.event_id in seen:
                raise InvariantViolation(
                    f"Event {interval.event_id} in clusters {seen[interval.event_id]} and {index}"
                )
            seen[interval.event_id] = index

    if set(seen) != set(day.layout):
        missing = sorted(set(day.layout) - set(seen))
        extra = sorted(set(seen) - set(day.layout))
        raise InvariantViolation(
            f"Clusters do not cover layout: missing={missing}, unlaid={extra}"
        )

    for i, cluster in enumerate(day.clusters):
        for other in day.clusters[i + 1 :]:
            for a in cluster:
                for b in other:
                    if overlaps(a, b):
                        raise InvariantViolation(
                            f"Events {a.event_id} and {b.event_id} overlap across clusters"
                        )


def check_column_safety(day: DayLayout) -> None:
    """
    INVARIANT: two non-forced events of one cluster sharing a column never overlap.

    Raises:
        InvariantViolation: On the first overlapping pair found
    """
    for cluster in day.clusters:
        for i, a in enumerate(cluster):
            info_a = day.layout[a.event_id]
            if info_a.forced:
                continue
            for b in cluster[i + 1 :]:
                info_b = day.layout[b.event_id]
                if info_b.forced or info_a.column != info_b.column:
                    continue
                if overlaps(a, b):
                    raise InvariantViolation(
                        f"Events {a.event_id} and {b.event_id} overlap in column {info_a.column}"
                    )


def check_column_count(day: DayLayout) -> None:
    """
    INVARIANT: within a cluster total_columns is uniform and equals 1 + max(column).

    Raises:
        InvariantViolation: If any cluster disagrees
    """
    for cluster in day.clusters:
        if not cluster:
            raise InvariantViolation("Empty cluster")
        infos = [day.layout[interval.event_id] for interval in cluster]
        totals = {info.total_columns for info in infos}
        if len(totals) != 1:
            raise InvariantViolation(
                f"Cluster starting with {cluster[0].event_id} has mixed total_columns {sorted(totals)}"
            )
        expected = 1 + max(info.column for info in infos)
        if totals.pop() != expected:
            raise InvariantViolation(
                f"Cluster starting with {cluster[0].event_id}: total_columns != {expected}"
            )


def check_conflict_symmetry(conflicts: dict[str, list[CalendarEvent]]) -> None:
    """
    INVARIANT: B listed under A <=> A listed under B.

    Raises:
        InvariantViolation: On the first one-sided entry
    """
    for event_id, others in conflicts.items():
        for other in others:
            back = conflicts.get(other.google_id, [])
            if not any(e.google_id == event_id for e in back):
                raise InvariantViolation(
                    f"Conflict {event_id} -> {other.google_id} has no reverse entry"
                )


def verify_day_layout(day: DayLayout) -> None:
    """Run every layout invariant. Raises InvariantViolation on the first failure."""
    check_partition(day)
    check_column_safety(day)
    check_column_count(day)
