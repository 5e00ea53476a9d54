#!/usr/bin/env python3
"""XDG path helpers for rangecal."""

from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "rangecal"


def xdg_config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME", "~/.config")).expanduser()


def app_data_dir() -> Path:
    xdg_data_env = os.environ.get("XDG_DATA_HOME")
    if xdg_data_env:
        return Path(xdg_data_env).expanduser() / APP_NAME
    return Path(f"~/.{APP_NAME}").expanduser()


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


__all__ = ["APP_NAME", "xdg_config_home", "app_data_dir", "ensure_dir"]
