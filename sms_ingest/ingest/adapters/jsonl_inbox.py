"""Adapters for JSON inbox exports.

- ``from_json_lines``: one JSON object per line (``.jsonl``/``.ndjson``).
  Blank lines are skipped.
- ``from_json_array``: a single JSON array of objects (``.json``).

Malformed JSON or a non-object entry raises ``ValueError`` naming the line
or array index.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator

from ...models import RawMessage
from .records import is_blank, message_from_record


def from_json_lines(lines: Iterable[str]) -> Iterator[RawMessage]:
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            record = json.loads(line)
        except json.JSONDecodeError as exc:
            raise ValueError(f"line {lineno}: invalid JSON: {exc.msg}") from exc
        if not isinstance(record, dict):
            raise ValueError(f"line {lineno}: expected a JSON object")
        if is_blank(record):
            continue
        yield message_from_record(record, where=f"line {lineno}")


def from_json_array(text: str) -> Iterator[RawMessage]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON at line {exc.lineno}: {exc.msg}") from exc
    if not isinstance(data, list):
        raise ValueError("expected a top-level JSON array of message objects")
    for i, record in enumerate(data):
        if not isinstance(record, dict):
            raise ValueError(f"item {i}: expected a JSON object")
        if is_blank(record):
            continue
        yield message_from_record(record, where=f"item {i}")


__all__ = ["from_json_array", "from_json_lines"]
