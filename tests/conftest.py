"""
Test configuration — ensures repo root is in sys.path + settings isolation.

This allows tests to import briefing_layout and tests.fixtures directly.
Every test sees the repo's config/layout.yaml and no developer env overrides.
"""

import sys
from pathlib import Path

import pytest
from hypothesis import HealthCheck
from hypothesis import settings as hypothesis_settings

# Add repo root to sys.path so tests can import briefing_layout.*, tests.*
REPO_ROOT = Path(__file__).parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from briefing_layout import config, paths  # noqa: E402

# isolated_settings runs once per test, not once per example
hypothesis_settings.register_profile(
    "layout", suppress_health_check=[HealthCheck.function_scoped_fixture], deadline=None
)
hypothesis_settings.load_profile("layout")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Pin settings to the repo config and drop the process-wide cache."""
    monkeypatch.delenv(paths.APP_ENV_CONFIG, raising=False)
    monkeypatch.delenv(config.ENV_COLUMN_CAP, raising=False)
    config.reset_settings()
    yield
    config.reset_settings()
