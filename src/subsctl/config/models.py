"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, subsctl.toml only contains
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

DEFAULT_DB_PATH = Path(".subsctl") / "subsctl.db"


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    path: Path = DEFAULT_DB_PATH
    echo: bool = False

    def resolve_path(self, root: Path) -> Path:
        """Absolute database path; relative paths are anchored at *root*."""
        return self.path if self.path.is_absolute() else root / self.path


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
