#!/usr/bin/env python3
"""Configuration loading and path resolution for rangecal."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from models import ValidationError
from paths import APP_NAME, app_data_dir, xdg_config_home


@dataclass
class Config:
    first_weekday: int
    future_only: bool
    disabled_dates_path: Path
    strict_bounds: bool
    log_path: Optional[Path]


DEFAULT_FIRST_WEEKDAY = 2  # Monday
DEFAULT_DISABLED_FILENAME = "disabled.parquet"
CONFIG_FILENAME = "config.json"


def config_path() -> Path:
    return (xdg_config_home() / APP_NAME / CONFIG_FILENAME).expanduser()


def load_config(path: Optional[Path] = None) -> Config:
    """Load config from the XDG path, falling back to defaults.

    A missing, unreadable or unparseable file yields the defaults; a parseable
    file with an out-of-range ``first_weekday`` or a non-boolean flag raises
    ValidationError.
    """

    path = path or config_path()
    raw: Dict[str, Any] = {}

    raw_text: Optional[str] = None
    if path.exists():
        try:
            raw_text = path.read_text()
        except (OSError, UnicodeDecodeError):
            raw_text = None
    if raw_text is not None:
        try:
            raw = json.loads(raw_text)
        except json.JSONDecodeError:
            try:
                raw = json.loads(_strip_trailing_commas(raw_text))
            except json.JSONDecodeError:
                raw = {}
    if not isinstance(raw, dict):
        raw = {}

    first_weekday = raw.get("first_weekday", DEFAULT_FIRST_WEEKDAY)
    if isinstance(first_weekday, bool) or not isinstance(first_weekday, int) or not 1 <= first_weekday <= 7:
        raise ValidationError(
            f"Invalid first_weekday {first_weekday!r} in {path}. Expected 1 (Sunday) to 7 (Saturday)"
        )

    disabled_path = Path(
        raw.get("disabled_dates_path") or app_data_dir() / DEFAULT_DISABLED_FILENAME
    ).expanduser()
    log_value = raw.get("log_path")

    return Config(
        first_weekday=first_weekday,
        future_only=_flag(raw, "future_only", True, path),
        disabled_dates_path=disabled_path,
        strict_bounds=_flag(raw, "strict_bounds", False, path),
        log_path=Path(log_value).expanduser() if log_value else None,
    )


def _flag(raw: Dict[str, Any], key: str, default: bool, path: Path) -> bool:
    value = raw.get(key, default)
    if not isinstance(value, bool):
        raise ValidationError(f"Invalid {key} {value!r} in {path}. Expected true or false")
    return value


def _strip_trailing_commas(text: str) -> str:
    """Remove trailing commas before closing braces/brackets."""
    return re.sub(r",(\s*[}\]])", r"\1", text)


__all__ = ["Config", "load_config", "config_path", "CONFIG_FILENAME"]
