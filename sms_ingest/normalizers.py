"""Text, amount and date normalization helpers for notification bodies.

Bodies arrive from arbitrary third-party senders, so normalization is
deliberately narrow: everything other than ASCII word characters, whitespace
and a handful of separators meaningful to bank formats (``. , ₹ - @ & : /``)
becomes a space, whitespace is collapsed, and case is preserved so merchant
names keep their original spelling.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime
from decimal import Decimal, InvalidOperation

_DISALLOWED_RE = re.compile(r"[^A-Za-z0-9_\s.,₹\-@&:/]")
_WS_RE = re.compile(r"\s+")

# First currency-marked number in document order. The look-behind keeps
# "yours 50" from reading as "rs 50".
AMOUNT_RE = re.compile(
    r"(?:(?<![A-Za-z])(?:rs\.?|inr)|₹)\s*(?P<num>\d[\d,]*(?:\.\d{1,2})?)",
    re.IGNORECASE,
)


def normalize_text(text: str) -> str:
    """Strip non-essential punctuation and collapse whitespace."""

    cleaned = _DISALLOWED_RE.sub(" ", text)
    return _WS_RE.sub(" ", cleaned).strip()


def parse_amount(raw: str) -> Decimal | None:
    """Parse a matched numeric token, returning ``None`` unless finite and > 0.

    Thousands separators are removed before parsing, so ``"1,250.50"`` reads
    as ``Decimal("1250.50")``.
    """

    s = raw.replace(",", "").strip()
    if not s:
        return None
    try:
        d = Decimal(s)
    except InvalidOperation:
        return None
    if not d.is_finite() or d <= 0:
        return None
    return d


def extract_amount(text: str) -> Decimal | None:
    """Return the first currency-marked amount in ``text`` or ``None``."""

    m = AMOUNT_RE.search(text)
    if m is None:
        return None
    return parse_amount(m.group("num"))


def format_amount(d: Decimal) -> str:
    """Render ``d`` in its shortest plain decimal form (``1250``, ``1250.5``)."""

    s = f"{d:f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def calendar_date(ts: datetime) -> str:
    """Return the UTC calendar date of ``ts`` as ``YYYY-MM-DD``."""

    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=UTC)
    return ts.astimezone(UTC).date().isoformat()


__all__ = [
    "AMOUNT_RE",
    "calendar_date",
    "extract_amount",
    "format_amount",
    "normalize_text",
    "parse_amount",
]
