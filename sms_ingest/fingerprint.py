"""Dedupe key computation for parsed notifications.

The key is a 32-bit polynomial rolling hash (``h = h * 31 + c`` over UTF-16
code units, wrapped to signed 32 bits) of
``"<amount>-<description>-<YYYY-MM-DD>-<sender>"``, rendered as non-negative
lowercase hex. Keys produced here match the ones the mobile and web clients
already send, so records stay comparable across ingestion paths.

This is a best-effort fingerprint for re-delivered notifications, not a
uniqueness guarantee: the persistence layer owns uniqueness (e.g., a unique
index on user id plus key).
"""

from __future__ import annotations

from decimal import Decimal

from .normalizers import format_amount

_MASK_32 = 0xFFFFFFFF


def _to_signed_32(n: int) -> int:
    n &= _MASK_32
    return n - (1 << 32) if n & 0x80000000 else n


def rolling_hash(text: str) -> int:
    """Return the signed 32-bit polynomial hash of ``text``.

    Iterates UTF-16 code units, so characters outside the BMP contribute
    their surrogate pair.
    """

    h = 0
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = _to_signed_32((h << 5) - h + unit)
    return h


def compute_dedupe_key(
    *,
    amount: Decimal,
    description: str,
    date: str,
    sender: str,
) -> str:
    """Return the dedupe key for one transaction.

    ``date`` must already be truncated to the calendar day (``YYYY-MM-DD``);
    two messages for the same amount, description and sender on the same day
    share a key regardless of time of day.
    """

    payload = f"{format_amount(amount)}-{description}-{date}-{sender}"
    return format(abs(rolling_hash(payload)), "x")


__all__ = ["compute_dedupe_key", "rolling_hash"]
