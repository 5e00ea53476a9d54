#!/usr/bin/env python3
"""Basic UI helpers for curses rendering."""

from __future__ import annotations

import curses
from typing import Dict, Iterable

from models import DayStyle


def style_attr(style: DayStyle) -> int:
    attrs: Dict[str, int] = {
        "disabled": curses.A_DIM,
        "selected": curses.A_REVERSE | curses.A_BOLD,
        "today": curses.A_BOLD,
        "between": curses.A_UNDERLINE,
        "normal": curses.A_NORMAL,
    }
    return attrs[style]


def draw_line(stdscr: "curses.window", y: int, text: str, attr: int = 0) -> None:  # type: ignore[name-defined]
    h, w = stdscr.getmaxyx()
    if w <= 0 or y < 0 or y >= h:
        return
    try:
        stdscr.addnstr(y, 0, text.ljust(max(1, w - 1)), max(0, w - 1), attr)
    except curses.error:
        pass


def draw_centered_box(stdscr: "curses.window", lines: Iterable[str]) -> None:  # type: ignore[name-defined]
    h, w = stdscr.getmaxyx()
    lines_list = list(lines)
    win_h = min(len(lines_list) + 2, h - 2)
    win_w = min(max(len(line) for line in lines_list) + 4, w - 2)
    if win_h < 3 or win_w < 5:
        return
    win = stdscr.derwin(win_h, win_w, (h - win_h) // 2, (w - win_w) // 2)
    win.erase()
    win.border()
    for idx, line in enumerate(lines_list[: win_h - 2], start=1):
        win.addnstr(idx, 2, line[: win_w - 4], win_w - 4)
    win.refresh()


def clamp(value: int, min_value: int, max_value: int) -> int:
    return max(min_value, min(value, max_value))


__all__ = ["style_attr", "draw_line", "draw_centered_box", "clamp"]
