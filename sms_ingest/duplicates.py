"""At-most-once helpers for batches of parsed transactions.

The parser itself is stateless; callers that ingest many notifications at
once (an inbox export, a re-sync after the device was offline) use these
helpers to record each dedupe key once. Durable uniqueness still belongs to
the backend.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .models import ParsedTransaction


@dataclass(frozen=True, slots=True)
class DedupeResult:
    """First occurrences (``unique``) and later repeats (``duplicates``), in input order."""

    unique: tuple[ParsedTransaction, ...]
    duplicates: tuple[ParsedTransaction, ...]


def group_by_dedupe_key(items: Iterable[ParsedTransaction]) -> dict[str, list[int]]:
    """Map each dedupe key to the input positions that produced it."""

    by_key: dict[str, list[int]] = {}
    for i, tx in enumerate(items):
        by_key.setdefault(tx.dedupe_key, []).append(i)
    return by_key


def dedupe_transactions(items: Iterable[ParsedTransaction]) -> DedupeResult:
    """Keep the first transaction per dedupe key and set aside the rest."""

    seen: set[str] = set()
    unique: list[ParsedTransaction] = []
    duplicates: list[ParsedTransaction] = []
    for tx in items:
        if tx.dedupe_key in seen:
            duplicates.append(tx)
            continue
        seen.add(tx.dedupe_key)
        unique.append(tx)
    return DedupeResult(unique=tuple(unique), duplicates=tuple(duplicates))


__all__ = ["DedupeResult", "dedupe_transactions", "group_by_dedupe_key"]
