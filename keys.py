#!/usr/bin/env python3
"""Key constants and mappings."""
from __future__ import annotations

import curses

# Key constants
KEY_Q = ord("q")
KEY_CAP_Q = ord("Q")
KEY_HELP = ord("?")
KEY_TODAY = ord("t")
KEY_ESC = 27
KEY_SPACE = ord(" ")
KEY_ENTER = (10, 13, curses.KEY_ENTER)

KEY_H = ord("h")
KEY_J = ord("j")
KEY_K = ord("k")
KEY_L = ord("l")

KEY_NEXT_MONTH = ord("n")
KEY_PREV_MONTH = ord("N")
KEY_TOGGLE_MODE = ord("f")
KEY_TOGGLE_DISABLED = ord("x")
KEY_CLEAR = ord("c")

# Arrow keys map onto hjkl
ARROW_KEYS = {
    curses.KEY_LEFT: KEY_H,
    curses.KEY_DOWN: KEY_J,
    curses.KEY_UP: KEY_K,
    curses.KEY_RIGHT: KEY_L,
}


__all__ = [
    "KEY_Q",
    "KEY_CAP_Q",
    "KEY_HELP",
    "KEY_TODAY",
    "KEY_ESC",
    "KEY_SPACE",
    "KEY_ENTER",
    "KEY_H",
    "KEY_J",
    "KEY_K",
    "KEY_L",
    "KEY_NEXT_MONTH",
    "KEY_PREV_MONTH",
    "KEY_TOGGLE_MODE",
    "KEY_TOGGLE_DISABLED",
    "KEY_CLEAR",
    "ARROW_KEYS",
]
