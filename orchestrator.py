#!/usr/bin/env python3
"""Orchestrator for rangecal."""
from __future__ import annotations

import curses
import logging
from datetime import date, timedelta
from pathlib import Path
from typing import Optional

import calendar_policy
from calendar_system import GregorianCalendar
from clock import Clock
from config import Config, load_config
from help_content import HELP_LINES
from keys import (
    ARROW_KEYS,
    KEY_CAP_Q,
    KEY_CLEAR,
    KEY_ENTER,
    KEY_ESC,
    KEY_H,
    KEY_HELP,
    KEY_J,
    KEY_K,
    KEY_L,
    KEY_NEXT_MONTH,
    KEY_PREV_MONTH,
    KEY_Q,
    KEY_SPACE,
    KEY_TODAY,
    KEY_TOGGLE_DISABLED,
    KEY_TOGGLE_MODE,
)
from manager import CalendarManager
from paths import ensure_dir
from state import AppState
from store import StorageError, load_disabled_dates, toggle_disabled_date
from ui_base import clamp, draw_centered_box, draw_line
from view_month import MonthView, render_month_lines

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_MOVES = {KEY_H: -1, KEY_L: 1, KEY_K: -7, KEY_J: 7}


def configure_logging(log_path: Optional[Path]) -> None:
    """Send log records to ``log_path``; without one, logging stays unconfigured."""
    if log_path is None:
        return
    ensure_dir(log_path.parent)
    logging.basicConfig(filename=str(log_path), level=logging.DEBUG, format=LOG_FORMAT)


class Orchestrator:
    """Owns the calendar manager and the curses lifecycle."""

    def __init__(
        self,
        version: str = "0.0.0",
        *,
        config: Optional[Config] = None,
        future_only: Optional[bool] = None,
        first_weekday: Optional[int] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.version = version
        self.config = config or load_config()
        if future_only is None:
            future_only = self.config.future_only
        calendar_system = GregorianCalendar(first_weekday or self.config.first_weekday)
        self.manager = CalendarManager(
            future_only,
            calendar_system=calendar_system,
            strict_bounds=self.config.strict_bounds,
            clock=clock,
        )
        self.state = AppState(cursor_date=self.manager.today())
        self._needs_draw = True
        self.manager.subscribe(self._on_manager_change)

    def _on_manager_change(self, _manager: CalendarManager) -> None:
        self._needs_draw = True

    def load_disabled_dates(self) -> None:
        days = load_disabled_dates(self.config.disabled_dates_path)
        self.manager.set_disabled_dates(days)

    def print_month(self, month_offset: int) -> int:
        """Print one month to stdout; offset 0 is the month of the minimum date."""
        try:
            self.load_disabled_dates()
        except StorageError as exc:
            print(f"Storage error: {exc}")
            return 1
        count = self.manager.month_count()
        if not 0 <= month_offset < count:
            print(f"Month offset must be between 0 and {count - 1}")
            return 1
        for line in render_month_lines(self.manager, month_offset):
            print(line)
        return 0

    def run(self) -> int:
        configure_logging(self.config.log_path)
        try:
            curses.wrapper(self._curses_main)
        except curses.error:
            return 1
        return 0

    def _curses_main(self, stdscr: "curses.window") -> None:  # type: ignore[name-defined]
        curses.curs_set(0)
        stdscr.keypad(True)
        stdscr.timeout(100)

        try:
            self.load_disabled_dates()
        except StorageError as exc:
            self._show_overlay(f"Storage error: {exc}")

        while True:
            if self._needs_draw:
                self._draw(stdscr)
                self._needs_draw = False
            ch = stdscr.getch()
            if ch in (-1, curses.ERR):
                continue
            if ch in (KEY_Q, KEY_CAP_Q) and self.state.overlay == "none":
                break
            if self._handle_key(ch):
                self._needs_draw = True

    # Rendering
    def _month_offset(self) -> int:
        last = self.manager.month_count() - 1
        return clamp(self.manager.month_offset_for(self.state.cursor_date), 0, last)

    def _draw(self, stdscr: "curses.window") -> None:  # type: ignore[name-defined]
        stdscr.erase()
        h, _ = stdscr.getmaxyx()
        draw_line(stdscr, 0, f"rangecal {self.version}", curses.A_BOLD)
        MonthView(self.manager).render(stdscr, self._month_offset(), self.state.cursor_date)
        draw_line(
            stdscr,
            h - 1,
            "q: quit   ?: help   space: select   n/N: month   f: future/past   x: block day",
        )

        if self.state.overlay == "help":
            draw_centered_box(stdscr, list(HELP_LINES) + ["", "Esc to dismiss"])
        elif self.state.overlay == "error":
            draw_centered_box(stdscr, [self.state.overlay_message, "", "Press any key to dismiss"])

        stdscr.refresh()

    # Key handling
    def _handle_key(self, ch: int) -> bool:
        if self.state.overlay == "help":
            if ch in (KEY_ESC, KEY_HELP):
                self.state.overlay = "none"
                return True
        elif self.state.overlay == "error":
            self.state.overlay = "none"
            return True

        ch = ARROW_KEYS.get(ch, ch)

        if ch == KEY_HELP:
            self.state.overlay = "help"
            return True
        if ch == KEY_ESC:
            self.state.overlay = "none"
            return True
        if ch in _MOVES:
            return self._move_cursor(self.state.cursor_date + timedelta(days=_MOVES[ch]))
        if ch == KEY_NEXT_MONTH:
            return self._move_cursor(self.manager.calendar.add(self.state.cursor_date, months=1))
        if ch == KEY_PREV_MONTH:
            return self._move_cursor(self.manager.calendar.add(self.state.cursor_date, months=-1))
        if ch == KEY_TODAY:
            return self._move_cursor(self.manager.today())
        if ch == KEY_SPACE or ch in KEY_ENTER:
            if not self.manager.select_date(self.state.cursor_date):
                curses.beep()
            return True
        if ch == KEY_CLEAR:
            self.manager.clear_selection()
            return True
        if ch == KEY_TOGGLE_MODE:
            self.manager.toggle_future_only()
            self.state.cursor_date = self.manager.today()
            return True
        if ch == KEY_TOGGLE_DISABLED:
            return self._toggle_disabled()
        return False

    def _move_cursor(self, target: date) -> bool:
        cal = self.manager.calendar
        lo = self.manager.first_date_of_month()
        hi = calendar_policy.last_day_of_month(
            cal, self.manager.month_start(self.manager.month_count() - 1)
        )
        target = min(max(target, lo), hi)
        if target == self.state.cursor_date:
            return False
        self.state.cursor_date = target
        return True

    def _toggle_disabled(self) -> bool:
        try:
            updated = toggle_disabled_date(
                self.config.disabled_dates_path,
                set(self.manager.disabled_dates),
                self.state.cursor_date,
            )
        except StorageError as exc:
            self._show_overlay(f"Storage error: {exc}")
            return True
        self.manager.set_disabled_dates(updated)
        return True

    def _show_overlay(self, message: str) -> None:
        logger.error(message)
        self.state.overlay = "error"
        self.state.overlay_message = message
        self._needs_draw = True


__all__ = ["Orchestrator", "configure_logging"]
