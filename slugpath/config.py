"""Application-wide configuration model and persistence helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .utils.text import SLUG_MAX_CHARS


class AppConfig(BaseModel):
    """Validates and stores the defaults used by the helpers and the CLI."""

    separator: str = Field(
        default="-",
        description="Character placed before the number appended to colliding file names.",
    )
    slug_max_chars: int = Field(
        default=SLUG_MAX_CHARS,
        ge=1,
        le=10_000,
        description="Index of the last input character examined when building a slug.",
    )
    byte_size_decimals: int = Field(
        default=1,
        ge=0,
        le=6,
        description="Number of decimals shown when formatting byte sizes.",
    )
    trim_byte_size_zeros: bool = Field(
        default=True,
        description="Drop trailing zeros from formatted byte sizes.",
    )
    create_missing_directories: bool = Field(
        default=True,
        description="Create the target directory of a move or copy when it is missing.",
    )

    @field_validator("separator")
    @classmethod
    def _validate_separator(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("Separator must be exactly one character.")
        if value in {"/", "\\"}:
            raise ValueError("Separator must not be a path delimiter.")
        return value

    def as_dict(self) -> dict[str, Any]:
        """Serialize the configuration to primitive Python types."""
        return self.model_dump(mode="json")

    @classmethod
    def load(cls, path: Path) -> AppConfig:
        """Load configuration from a YAML or JSON file."""
        data = _read_config_file(path)
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Invalid configuration file at {path}: {exc}") from exc

    def save(self, path: Path) -> None:
        """Persist configuration to a YAML or JSON file, chosen by suffix."""
        _write_config_file(path, self.as_dict())


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yaml", ".yml"}:
        return yaml.safe_load(text) or {}
    return json.loads(text)


def _write_config_file(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() in {".yaml", ".yml"}:
        yaml_text = yaml.safe_dump(
            data,
            allow_unicode=False,
            sort_keys=False,
        )
        path.write_text(yaml_text, encoding="utf-8")
    else:
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
