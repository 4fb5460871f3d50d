"""
Overlap Predicate — the one definition of a scheduling conflict.

Half-open [start, end): a meeting ending at 10:00 does not conflict with one
starting at 10:00. Clustering, column checks and conflict reporting all call
this; nothing else in the package compares interval bounds for overlap.
"""

from typing import Protocol


class Span(Protocol):
    start: int
    end: int


def overlaps(a: Span, b: Span) -> bool:
    return a.start < b.end and b.start < a.end


def layout_order(span) -> tuple:
    """Sort key shared by clustering and column assignment: start asc, longer first."""
    return (span.start, -(span.end - span.start), span.event_id)
