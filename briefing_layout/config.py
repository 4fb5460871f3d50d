"""
Centralized configuration for the briefing layout engine.

Values load from config/layout.yaml and fall back to hardcoded defaults if
the file is missing or unreadable. Override via environment variables where
marked.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from briefing_layout import paths

logger = logging.getLogger(__name__)

# ============================================================
# Defaults
# ============================================================

DEFAULT_COLUMN_CAP = 4
DEFAULT_WORKDAY_START_HOUR = 7
DEFAULT_WORKDAY_END_HOUR = 20
DEFAULT_MIN_FREE_BLOCK_MINUTES = 15

ENV_COLUMN_CAP = "BRIEFING_LAYOUT_COLUMN_CAP"
"""Overrides column_cap from the YAML file."""


@dataclass(frozen=True)
class LayoutSettings:
    """Resolved layout settings."""

    column_cap: int = DEFAULT_COLUMN_CAP
    workday_start_hour: int = DEFAULT_WORKDAY_START_HOUR
    workday_end_hour: int = DEFAULT_WORKDAY_END_HOUR
    min_free_block_minutes: int = DEFAULT_MIN_FREE_BLOCK_MINUTES

    @property
    def workday_start_minute(self) -> int:
        return self.workday_start_hour * 60

    @property
    def workday_end_minute(self) -> int:
        return self.workday_end_hour * 60

    def __post_init__(self):
        if self.column_cap < 1:
            raise ValueError(f"column_cap must be >= 1, got {self.column_cap}")
        if not 0 <= self.workday_start_hour < self.workday_end_hour <= 24:
            raise ValueError(
                f"workday must satisfy 0 <= start < end <= 24, "
                f"got {self.workday_start_hour}-{self.workday_end_hour}"
            )


def _load_yaml(config_path: Path) -> dict:
    """Load YAML config, return empty dict on failure."""
    if not config_path.exists():
        logger.warning("Layout config not found at %s, using defaults", config_path)
        return {}
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as exc:
        logger.error("Failed to load layout config: %s", exc)
        return {}
    if not isinstance(data, dict):
        logger.error("Layout config at %s is not a mapping, using defaults", config_path)
        return {}
    return data


def _int_setting(value: object, default: int, key: str) -> int:
    """Coerce one config value to int. None or junk falls back to the default."""
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        logger.error("Invalid layout config value %s=%r, using default %s", key, value, default)
        return default


def load_settings(config_path: Path | None = None) -> LayoutSettings:
    """Build LayoutSettings from YAML plus environment overrides."""
    if config_path is None:
        config_path = paths.config_path()

    data = _load_yaml(config_path)
    workday = data.get("workday")
    if workday is None:
        workday = {}
    elif not isinstance(workday, dict):
        logger.error("Layout config workday is not a mapping (%r), using defaults", workday)
        workday = {}

    column_cap = _int_setting(data.get("column_cap"), DEFAULT_COLUMN_CAP, "column_cap")
    if os.environ.get(ENV_COLUMN_CAP):
        column_cap = _int_setting(os.environ[ENV_COLUMN_CAP], column_cap, ENV_COLUMN_CAP)

    try:
        return LayoutSettings(
            column_cap=column_cap,
            workday_start_hour=_int_setting(
                workday.get("start_hour"), DEFAULT_WORKDAY_START_HOUR, "workday.start_hour"
            ),
            workday_end_hour=_int_setting(
                workday.get("end_hour"), DEFAULT_WORKDAY_END_HOUR, "workday.end_hour"
            ),
            min_free_block_minutes=_int_setting(
                data.get("min_free_block_minutes"),
                DEFAULT_MIN_FREE_BLOCK_MINUTES,
                "min_free_block_minutes",
            ),
        )
    except ValueError as exc:
        logger.error("Invalid layout config: %s, using defaults", exc)
        return LayoutSettings()


_settings: LayoutSettings | None = None


def get_settings() -> LayoutSettings:
    """Process-wide settings, loaded on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
