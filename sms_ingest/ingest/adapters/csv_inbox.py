"""Adapter for CSV inbox exports.

The first row must be a header. At least one body column (``body``,
``message`` or ``text``) is required; sender and timestamp columns are
resolved through the aliases in :mod:`.records`. Numeric timestamps are
epoch milliseconds. Row numbers in error messages count the header as
row 1.
"""

from __future__ import annotations

import csv
from collections.abc import Iterator

from ...models import RawMessage
from .records import BODY_KEYS, is_blank, message_from_record


def from_csv(reader: csv.DictReader) -> Iterator[RawMessage]:
    headers = reader.fieldnames
    if not headers:
        raise csv.Error("CSV appears to have no header row")
    if not any(k in headers for k in BODY_KEYS):
        raise csv.Error(
            "CSV header has no message body column. Expected one of: " + ", ".join(BODY_KEYS)
        )
    for rowno, row in enumerate(reader, start=2):
        # DictReader stores surplus cells under a None key.
        record = {k: v for k, v in row.items() if k is not None}
        if is_blank(record):
            continue
        yield message_from_record(record, where=f"row {rowno}")


__all__ = ["from_csv"]
