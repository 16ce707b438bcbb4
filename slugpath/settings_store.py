"""Persistence helpers for user configuration."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from .config import AppConfig

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "SLUGPATH_SETTINGS"


class SettingsStore:
    """Load and save application settings to a well-known path.

    A store created with ``required=True`` refuses to fall back to defaults
    when its file is missing; the CLI uses that for an explicit ``--config``.
    """

    def __init__(self, path: Path | None = None, *, required: bool = False) -> None:
        self._path = path or default_settings_path()
        self._required = required

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> AppConfig:
        if not self._path.exists():
            if self._required:
                raise FileNotFoundError(self._path)
            logger.debug("No settings at %s; using defaults", self._path)
            return AppConfig()
        return AppConfig.load(self._path)

    def save(self, config: AppConfig) -> None:
        config.save(self._path)
        logger.debug("Saved settings to %s", self._path)

    def update(self, **changes: Any) -> AppConfig:
        """Validate ``changes`` against the stored settings and persist the result."""
        current = self.load()
        try:
            updated = AppConfig.model_validate({**current.as_dict(), **changes})
        except ValueError as exc:
            raise ValueError(f"Invalid settings for {self._path}: {exc}") from exc
        self.save(updated)
        return updated


def default_settings_path() -> Path:
    override = os.getenv(SETTINGS_ENV_VAR)
    if override:
        return Path(override).expanduser()
    if os.name == "nt":
        base = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
    else:
        base = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base.expanduser() / "slugpath" / "settings.yaml"
