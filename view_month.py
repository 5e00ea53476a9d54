#!/usr/bin/env python3
"""Month view rendering for the range picker."""

from __future__ import annotations

import curses
from datetime import date
from typing import List, Optional

from manager import CalendarManager
from models import DayState, formatted_date
from ui_base import draw_line, style_attr

CELL_W = 4

_MARKERS = {
    "selected": ("[", "]"),
    "between": ("(", ")"),
    "today": ("*", "*"),
    "disabled": ("-", "-"),
    "normal": (" ", " "),
}


def cell_text(state: Optional[DayState]) -> str:
    if state is None:
        return " " * CELL_W
    left, right = _MARKERS[state.style]
    return f"{left}{state.text:>2}{right}"


def header_cells(manager: CalendarManager) -> str:
    return "".join(f" {name[:2]:>2} " for name in manager.weekday_headers())


def selection_summary(manager: CalendarManager) -> str:
    names = manager.calendar.month_names()
    start = formatted_date(manager.start_date, names)
    end = formatted_date(manager.end_date, names)
    return f"Start date: {start}   End date: {end}"


def render_month_lines(manager: CalendarManager, month_offset: int) -> List[str]:
    """Plain-text rendering of one month: label, weekday header, then week rows."""
    lines = [manager.month_label(month_offset), header_cells(manager)]
    for row in manager.build_grid(month_offset):
        cells = [cell_text(manager.classify(day) if day is not None else None) for day in row]
        lines.append("".join(cells).rstrip())
    return lines


class MonthView:
    def __init__(self, manager: CalendarManager):
        self.manager = manager

    def render(
        self,
        stdscr: "curses.window",  # type: ignore[name-defined]
        month_offset: int,
        cursor_date: date,
    ) -> None:
        h, w = stdscr.getmaxyx()
        if h <= 0 or w <= 0:
            return

        manager = self.manager
        mode = "future only" if manager.is_future_selection_enabled else "past only"
        draw_line(stdscr, 1, selection_summary(manager))
        draw_line(stdscr, 3, f"{manager.month_label(month_offset)}  ({mode})", curses.A_BOLD)
        draw_line(stdscr, 4, header_cells(manager), curses.A_DIM)

        grid_top = 5
        for row_idx, row in enumerate(manager.build_grid(month_offset)):
            row_y = grid_top + row_idx
            if row_y >= h - 1:
                break
            for col_idx, day in enumerate(row):
                col_x = col_idx * CELL_W
                if col_x + CELL_W >= w:
                    break
                if day is None:
                    continue
                state = manager.classify(day)
                text = cell_text(state)
                attr = style_attr(state.style)
                if day == cursor_date:
                    text = f">{text[1:3]}<"
                    attr |= curses.A_BOLD
                try:
                    stdscr.addnstr(row_y, col_x, text, CELL_W, attr)
                except curses.error:
                    pass


__all__ = [
    "MonthView",
    "render_month_lines",
    "cell_text",
    "header_cells",
    "selection_summary",
    "CELL_W",
]
