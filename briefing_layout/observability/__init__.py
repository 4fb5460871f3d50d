"""
Observability module: log formatters and layout run ids.

Usage:
    from briefing_layout.observability import LayoutContext, configure_logging

    configure_logging("DEBUG", json_format=True)

    with LayoutContext(run_id="req-abc123"):
        layout_day(events)  # engine logs carry req-abc123
"""

from .context import LayoutContext, generate_run_id, get_run_id, log_fields
from .logging import HumanFormatter, JSONFormatter, configure_logging

__all__ = [
    # Logging
    "configure_logging",
    "JSONFormatter",
    "HumanFormatter",
    # Context
    "LayoutContext",
    "generate_run_id",
    "get_run_id",
    "log_fields",
]
