"""Top-level package for the slugpath helpers."""

from .config import AppConfig
from .errors import InvalidArgumentError
from .settings_store import SettingsStore
from .utils.paths import next_available_path
from .utils.text import slugify

__all__ = ["AppConfig", "InvalidArgumentError", "SettingsStore", "next_available_path", "slugify"]
