"""Locate ``graphctl.toml``.

The search starts in the working directory and climbs toward the
filesystem root, stopping at the first match. ``GRAPHCTL_CONFIG`` names a
file directly and disables the search.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "graphctl.toml"
CONFIG_ENV_VAR = "GRAPHCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``graphctl.toml`` at or above *start*, or None.

    When ``GRAPHCTL_CONFIG`` is set, only that path is considered.
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
