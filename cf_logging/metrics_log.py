"""Append-only CSV metrics logs backed by Polars."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import polars as pl

LOG_DIR = Path("logs")


def log_records(name: str, records: List[Dict[str, Any]]) -> Path:
    """Append rows to ``logs/<name>.csv``, creating the file on first use.

    Rows whose columns differ from the existing file are merged by column name; columns
    missing on either side are filled with nulls.

    Args:
        name: Base filename without extension.
        records: List of dict rows.
    Returns:
        Path to the CSV file.
    """
    assert isinstance(name, str) and len(name) > 0, "Invalid log name"
    assert isinstance(records, list), "records must be a list"
    out = LOG_DIR / f"{name}.csv"
    if not records:
        return out
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    df = pl.DataFrame(records)
    if out.exists():
        prev = pl.read_csv(out)
        df = pl.concat([prev, df], how="diagonal_relaxed")
    df.write_csv(out)
    return out


def log_record(name: str, record: Dict[str, Any]) -> Path:
    """Append a single record to a CSV file."""
    return log_records(name, [record])


def read_log(name: str) -> pl.DataFrame:
    """Load ``logs/<name>.csv``; an empty frame when nothing has been logged yet."""
    path = LOG_DIR / f"{name}.csv"
    if not path.exists():
        return pl.DataFrame()
    return pl.read_csv(path)
