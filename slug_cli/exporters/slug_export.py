"""Writers for batch slug results."""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Dict, List

FIELDS = ["input", "slug"]


def write_json(path: Path, rows: List[Dict[str, str]]) -> Path:
    """Write rows as pretty JSON and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(rows, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return path


def write_csv(path: Path, rows: List[Dict[str, str]]) -> Path:
    """Write rows as CSV with an ``input,slug`` header and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow({field: row.get(field, "") for field in FIELDS})
    return path


def write_rows(path: Path, rows: List[Dict[str, str]], output_format: str) -> Path:
    if output_format == "csv":
        return write_csv(path, rows)
    return write_json(path, rows)
