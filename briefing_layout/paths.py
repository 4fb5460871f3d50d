from __future__ import annotations

import os
from pathlib import Path

APP_ENV_CONFIG = "BRIEFING_LAYOUT_CONFIG"


def project_root() -> Path:
    """
    Repository/project root directory.
    Contains briefing_layout/, config/, tests/.
    """
    return Path(__file__).parent.parent.resolve()


def config_path() -> Path:
    """
    Layout config file.

    Resolution order:
    1. BRIEFING_LAYOUT_CONFIG env var (explicit override)
    2. <project root>/config/layout.yaml (default)
    """
    if os.environ.get(APP_ENV_CONFIG):
        return Path(os.environ[APP_ENV_CONFIG]).expanduser().resolve()
    return project_root() / "config" / "layout.yaml"
