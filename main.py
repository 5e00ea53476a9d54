#!/usr/bin/env python3
"""Thin entrypoint for rangecal."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from models import ValidationError
from orchestrator import Orchestrator
from store import StorageError

__version__ = "0.1.0"


def _print_help() -> None:
    print(
        "rangecal - terminal date range picker\n\n"
        "Usage:\n"
        "  rangecal              Launch curses UI (future-only)\n"
        "  rangecal -p           Past-only selection\n"
        "  rangecal -f <1..7>    First weekday (1 = Sunday, 2 = Monday)\n"
        "  rangecal -m <offset>  Print a month and exit (0 = first month)\n"
        "  rangecal -h           Show this help\n"
        "  rangecal -v           Show installed version\n"
    )


def _parse_int(flag: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise ValidationError(f"{flag} expects an integer, got '{value}'") from exc


def parse_args(argv: Sequence[str]) -> tuple[dict[str, Optional[int]], bool, bool, bool]:
    flags: dict[str, Optional[int]] = {}
    show_version = False
    show_help = False
    past_only = False

    idx = 0
    while idx < len(argv):
        arg = argv[idx]
        if arg == "-h":
            show_help = True
            idx += 1
            continue
        if arg == "-v":
            show_version = True
            idx += 1
            continue
        if arg == "-p":
            past_only = True
            idx += 1
            continue
        if arg == "-f":
            idx += 1
            if idx >= len(argv):
                raise ValidationError("-f requires a weekday number")
            weekday = _parse_int("-f", argv[idx])
            if not 1 <= weekday <= 7:
                raise ValidationError("-f expects 1 (Sunday) to 7 (Saturday)")
            flags["first_weekday"] = weekday
            idx += 1
            continue
        if arg == "-m":
            idx += 1
            if idx >= len(argv):
                raise ValidationError("-m requires a month offset")
            flags["month"] = _parse_int("-m", argv[idx])
            idx += 1
            continue
        raise ValidationError(f"Unknown flag '{arg}'")
    return flags, show_version, show_help, past_only


def main(argv: list[str] | None = None) -> int:
    # Make ESC detection snappy inside curses.
    os.environ.setdefault("ESCDELAY", "25")

    if argv is None:
        argv = sys.argv[1:]

    try:
        flag_values, show_version, show_help, past_only = parse_args(argv)
    except ValidationError as exc:
        print(str(exc))
        return 1

    if show_version:
        print(__version__)
        return 0

    if show_help:
        _print_help()
        return 0

    try:
        orchestrator = Orchestrator(
            __version__,
            future_only=False if past_only else None,
            first_weekday=flag_values.get("first_weekday"),
        )
    except ValidationError as exc:
        print(str(exc))
        return 1

    month = flag_values.get("month")
    if month is not None:
        return orchestrator.print_month(month)

    try:
        return orchestrator.run()
    except (ValidationError, StorageError) as exc:
        print(str(exc))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
