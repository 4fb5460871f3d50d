"""
Log formatters for hosts embedding the layout engine.

Engine records carry their run id as a record attribute (see log_fields).
Records from host code fall back to whatever run id is bound when they are
formatted.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from .context import get_run_id

# LogRecord attributes that are not caller-supplied extras
_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "message",
        "taskName",
        "run_id",
    }
)


def record_run_id(record: logging.LogRecord) -> str | None:
    return getattr(record, "run_id", None) or get_run_id()


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    {"timestamp": "2026-10-19T09:15:02.114Z", "level": "WARNING",
     "logger": "briefing_layout.columns", "message": "Column cap 4 reached; ...",
     "run_id": "lay-3f9c0a1e2b7d4c55", "event_id": "evt-5", "column": 0}
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, UTC)
        log_obj: dict[str, Any] = {
            "timestamp": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        run_id = record_run_id(record)
        if run_id:
            log_obj["run_id"] = run_id

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_obj[key] = value

        return json.dumps(log_obj, default=str)


class HumanFormatter(logging.Formatter):
    """Single-line format for a terminal."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        run_id = record_run_id(record)
        rid_str = f"[{run_id[:12]}] " if run_id else ""
        return f"{timestamp} [{record.levelname}] {record.name}: {rid_str}{record.getMessage()}"


def configure_logging(level: str = "INFO", json_format: bool | None = None) -> None:
    """
    Install one stderr handler on the root logger.

    Args:
        level: Log level name, case-insensitive
        json_format: JSON lines if True; None picks JSON unless stderr is a TTY
    """
    if json_format is None:
        json_format = not sys.stderr.isatty()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter() if json_format else HumanFormatter())
    root_logger.addHandler(handler)
