"""Persisted settings for the ``formgen`` command line tool.

The settings live in one JSON file (``~/.formgen/config.json`` unless
``FORMGEN_CONFIG`` or ``FORMGEN_CONFIG_DIR`` say otherwise) and hold the log
level plus the defaults used by ``formgen generate``. The library itself never
reads them.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator


def level_name(level: str | int) -> str:
    """Return the canonical name of a logging level.

    Raises
    ------
    ValueError
        If ``level`` is not a known level name or number.
    """

    if isinstance(level, int):
        name = logging.getLevelName(level)
        if isinstance(name, str) and not name.startswith("Level "):
            return name
    else:
        candidate = str(level).upper()
        if isinstance(logging.getLevelName(candidate), int):
            return candidate
    raise ValueError(f"Unknown logging level: {level!r}")


class Settings(BaseModel):
    log_level: str = "INFO"
    include_choices: bool = False
    indent: int = 2

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_level(cls, value: Any) -> str:
        return level_name(value)

    @field_validator("indent")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("indent must be >= 0")
        return value


def config_path(path: os.PathLike[str] | str | None = None) -> Path:
    """Resolve the settings file: explicit path, ``FORMGEN_CONFIG``, then the config dir."""

    if path is not None:
        return Path(path)
    raw = os.environ.get("FORMGEN_CONFIG", "").strip()
    if raw:
        return Path(raw).expanduser()
    raw_dir = os.environ.get("FORMGEN_CONFIG_DIR", "").strip()
    base = Path(raw_dir).expanduser() if raw_dir else Path.home() / ".formgen"
    return base / "config.json"


def load_settings(path: os.PathLike[str] | str | None = None) -> Settings:
    """Read the settings file; a missing, unreadable or invalid file yields defaults."""

    try:
        with config_path(path).open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError):
        return Settings()

    if not isinstance(data, dict):
        return Settings()
    try:
        return Settings.model_validate(data)
    except ValidationError:
        return Settings()


def save_settings(settings: Settings, path: os.PathLike[str] | str | None = None) -> Path:
    target = config_path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        json.dump(settings.model_dump(), handle, indent=2, sort_keys=True)
        handle.write("\n")
    return target


def update_settings(path: os.PathLike[str] | str | None = None, **changes: Any) -> Settings:
    """Validate ``changes`` against the stored settings and persist the result.

    String values are coerced the way pydantic coerces JSON input, so
    ``update_settings(indent="4")`` stores ``4``. Invalid values raise
    :class:`pydantic.ValidationError` and leave the file untouched.
    """

    current = load_settings(path)
    updated = Settings.model_validate({**current.model_dump(), **changes})
    save_settings(updated, path)
    return updated


__all__ = [
    "Settings",
    "config_path",
    "level_name",
    "load_settings",
    "save_settings",
    "update_settings",
]
