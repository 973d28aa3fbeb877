"""Ingest utilities shared by CLI commands.

Exposes a single helper that loads :class:`RawMessage` records from an inbox
export, choosing the adapter by file suffix.
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from ..models import RawMessage

_JSON_LINES_SUFFIXES = {".jsonl", ".ndjson"}


def load_messages(path: str | PathLike[str]) -> list[RawMessage]:
    """Read an export file and return its messages in file order.

    Supported formats:
    - ``.jsonl``/``.ndjson``: one JSON object per line;
    - ``.json``: a JSON array of objects;
    - ``.csv``: header row plus one message per row.

    Raises ``ValueError`` for unsupported suffixes or malformed records and
    ``csv.Error`` for CSV header problems. ``FileNotFoundError`` and
    ``PermissionError`` propagate unchanged.
    """

    import csv

    from .adapters.csv_inbox import from_csv
    from .adapters.jsonl_inbox import from_json_array, from_json_lines

    p = Path(path)
    suffix = p.suffix.lower()
    if suffix in _JSON_LINES_SUFFIXES:
        with p.open(encoding="utf-8") as f:
            return list(from_json_lines(f))
    if suffix == ".json":
        return list(from_json_array(p.read_text(encoding="utf-8")))
    if suffix == ".csv":
        with p.open(encoding="utf-8", newline="") as f:
            return list(from_csv(csv.DictReader(f)))
    raise ValueError(f"unsupported export format {suffix or '(none)'!r}: {p}")


__all__ = ["load_messages"]
