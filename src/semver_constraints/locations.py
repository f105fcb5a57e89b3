from __future__ import annotations

import os

from pathlib import Path

from platformdirs import user_config_path


_APP_NAME = "semver-constraints"

CONFIG_DIR = Path(
    os.getenv("SEMVER_CONSTRAINTS_CONFIG_DIR")
    or user_config_path(_APP_NAME, appauthor=False, roaming=True)
)
