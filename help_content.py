"""Help and cheatsheet content for the rangecal TUI."""

from __future__ import annotations

HELP_LINES: tuple[str, ...] = (
    "rangecal help",
    "",
    "Pick a start day, then an end day.",
    "A third pick starts a new range.",
    "Picking an end before the start clears the range.",
    "",
    "Shortcuts",
    "",
    "hjkl / arrows  move by day / week",
    "n / N          next / previous month",
    "Space, Enter   select day under cursor",
    "c              clear selection",
    "x              block / unblock day (saved)",
    "f              toggle future-only / past-only",
    "t              jump to today",
    "?              toggle this help",
    "Esc            dismiss overlays",
    "q              quit",
)

__all__ = ["HELP_LINES"]
