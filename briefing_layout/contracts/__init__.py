"""
Layout contracts: invariant checks (this package) and the renderer snapshot
schema (briefing_layout.contracts.schema).
"""

from .invariants import (
    InvariantViolation,
    check_column_count,
    check_column_safety,
    check_conflict_symmetry,
    check_partition,
    verify_day_layout,
)

__all__ = [
    "InvariantViolation",
    "check_partition",
    "check_column_safety",
    "check_column_count",
    "check_conflict_symmetry",
    "verify_day_layout",
]
