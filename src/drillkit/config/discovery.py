"""Config file discovery.

Walk-up finder locates drillkit.toml from the working directory toward
the filesystem root. ``DRILLKIT_CONFIG`` short-circuits the walk.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "drillkit.toml"
CONFIG_ENV_VAR = "DRILLKIT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest drillkit.toml at or above *start* (default: cwd).

    When ``DRILLKIT_CONFIG`` is set it wins outright; a value that does
    not point at a file disables discovery.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None

