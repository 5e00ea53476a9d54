#!/usr/bin/env python3
"""PyArrow-backed storage for the disabled-date blocklist."""
from __future__ import annotations

import logging
import os
import tempfile
from datetime import date
from pathlib import Path
from typing import Iterable, Set

import pyarrow as pa
import pyarrow.parquet as pq

logger = logging.getLogger(__name__)

_SCHEMA = pa.schema([("date", pa.date32())])


class StorageError(Exception):
    pass


def _dates_to_table(days: Iterable[date]) -> pa.Table:
    return pa.Table.from_pydict({"date": list(days)}, schema=_SCHEMA)


def _table_to_dates(table: pa.Table) -> Set[date]:
    if table.schema != _SCHEMA:
        raise StorageError("Parquet schema mismatch for disabled dates")
    return {d for d in table.column("date").to_pylist() if d is not None}


def load_disabled_dates(path: Path) -> Set[date]:
    if not path.exists():
        return set()
    try:
        table = pq.read_table(path)
        days = _table_to_dates(table)
    except StorageError:
        raise
    except Exception as exc:
        raise StorageError(f"Failed to read disabled dates from {path}: {exc}") from exc
    logger.info("Loaded %d disabled dates from %s", len(days), path)
    return days


def _write_atomic(path: Path, table: pa.Table) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(dir=str(path.parent), delete=False) as tmp:
        tmp_path = Path(tmp.name)
    try:
        pq.write_table(table, tmp_path)
        tmp_path.replace(path)
    finally:
        if tmp_path.exists():
            try:
                os.remove(tmp_path)
            except OSError:
                pass


def save_disabled_dates(path: Path, days: Iterable[date]) -> None:
    ordered = sorted(set(days))
    try:
        _write_atomic(path, _dates_to_table(ordered))
    except OSError as exc:
        raise StorageError(f"Failed to write disabled dates to {path}: {exc}") from exc


def toggle_disabled_date(path: Path, days: Set[date], day: date) -> Set[date]:
    """Add or remove ``day`` from the blocklist and persist the result."""
    updated = set(days)
    if day in updated:
        updated.remove(day)
    else:
        updated.add(day)
    save_disabled_dates(path, updated)
    return updated


__all__ = [
    "load_disabled_dates",
    "save_disabled_dates",
    "toggle_disabled_date",
    "StorageError",
]
