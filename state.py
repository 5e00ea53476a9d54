#!/usr/bin/env python3
"""App state container for the rangecal TUI."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Literal

OverlayKind = Literal["none", "help", "error"]


@dataclass
class AppState:
    overlay: OverlayKind = "none"
    overlay_message: str = ""
    # Day under the cursor; the visible month follows it.
    cursor_date: date = field(default_factory=lambda: date.today())


__all__ = ["AppState", "OverlayKind"]
