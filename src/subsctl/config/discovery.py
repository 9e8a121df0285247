"""Locate ``subsctl.toml``.

The search order is the ``SUBSCTL_CONFIG`` env var, then a walk up from
the starting directory to the filesystem root.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "subsctl.toml"
CONFIG_ENV_VAR = "SUBSCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``subsctl.toml`` at or above *start* (default: cwd).

    When ``SUBSCTL_CONFIG`` is set it wins outright; a dangling value
    yields None rather than falling back to the walk-up.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        explicit = Path(override)
        return explicit if explicit.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
