"""
I/O utilities for batch scoring runs.

Responsibilities:
- write_csv:    flatten batch results into a tidy CSV (one row per guess).
- timestamp_id: stable UTC run ID string for default output names.

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "-GYY-" as formulas (which would display as #NAME?).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import datetime as dt

FIELDS = ["answer", "guess", "pattern", "decorated", "victory", "error"]


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "-GYY-" -> "'-GYY-"
    """
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize batch results (rows from harness.run_batch) to CSV.

    Columns: answer, guess, pattern, decorated, victory, error

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in results:
            row = {k: r.get(k, "") for k in FIELDS}
            row["pattern"] = _excel_safe_pattern(row["pattern"])
            w.writerow(row)

    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
