"""SMS/notification transaction parser.

Turns one raw notification into a :class:`ParsedTransaction` or ``None``.
The pipeline is a single pass with early exits:

1. normalize the body (bounded length, narrow character set);
2. reject denylisted noise (OTPs, offers, balance/due reminders);
3. extract the first currency-marked amount, reject when absent or not > 0;
4. under the strict policy, require a directional verb;
5. classify direction, description and category;
6. compute the dedupe key from (amount, description, date, sender).

Rejection is an expected outcome and is reported as ``None``; nothing here
raises for ordinary input. Module state is limited to compiled patterns and
immutable tables, so concurrent calls need no synchronization.
"""

from __future__ import annotations

import re
from datetime import datetime
from decimal import Decimal

from .config import DEFAULT_CONFIG, ParserConfig
from .extractors import clean_description, first_match, is_upi_description
from .fingerprint import compute_dedupe_key
from .logging_setup import get_logger
from .models import Category, Direction, ParsedTransaction, RawMessage
from .normalizers import calendar_date, extract_amount, normalize_text
from .rules import (
    CATEGORY_TABLE,
    CREDIT_TERMS,
    FALLBACK_DESCRIPTION,
    IGNORE_KEYWORDS,
    INTENT_VERBS,
    SHORT_KEYWORD_MAX_LEN,
)

logger = get_logger("sms_ingest.parser")

_INTENT_RE = re.compile(r"\b(?:" + "|".join(INTENT_VERBS) + r")\b", re.IGNORECASE)


# Short keywords ("vi", "ola", "kfc") only match as whole words; longer ones
# match anywhere, so "dmart" and "instamart" still hit "mart".
_SHORT_KEYWORD_PATTERNS: dict[str, re.Pattern[str]] = {
    k: re.compile(r"(?<![a-z0-9])" + re.escape(k) + r"(?![a-z0-9])")
    for _, keywords in CATEGORY_TABLE
    for k in keywords
    if len(k) <= SHORT_KEYWORD_MAX_LEN
}


def keyword_hit(keyword: str, lower_text: str) -> bool:
    pattern = _SHORT_KEYWORD_PATTERNS.get(keyword)
    if pattern is None:
        return keyword in lower_text
    return pattern.search(lower_text) is not None


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------


def is_noise(lower_body: str) -> bool:
    """Return ``True`` when the lowercased body contains a denylisted term."""

    return any(k in lower_body for k in IGNORE_KEYWORDS)


def has_intent(text: str) -> bool:
    return _INTENT_RE.search(text) is not None


def classify_direction(lower_body: str) -> Direction:
    """Credit terms override the debit default unconditionally."""

    if any(t in lower_body for t in CREDIT_TERMS):
        return Direction.CREDIT
    return Direction.DEBIT


def extract_description(clean_body: str, sender: str, *, max_chars: int) -> str:
    """Run the ordered description rules, falling back to the sender."""

    hit = first_match(clean_body)
    if hit is not None:
        rule_name, raw = hit
        logger.debug("description matched rule %s", rule_name)
    else:
        raw = sender or FALLBACK_DESCRIPTION
        logger.debug("description fell back to sender")
    return clean_description(raw, max_chars=max_chars) or FALLBACK_DESCRIPTION


def categorize(
    *,
    direction: Direction,
    lower_body: str,
    description: str,
    amount: Decimal,
    transfer_threshold: Decimal,
) -> Category:
    """Assign exactly one category by first match over ``CATEGORY_TABLE``."""

    if direction is Direction.CREDIT:
        return Category.INCOME

    lower_desc = description.lower()
    for category, keywords in CATEGORY_TABLE:
        if any(keyword_hit(k, lower_body) or keyword_hit(k, lower_desc) for k in keywords):
            return category

    if is_upi_description(description) and amount > transfer_threshold:
        return Category.TRANSFER_RENT
    return Category.UNCATEGORIZED


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_sms(
    message: RawMessage,
    *,
    config: ParserConfig | None = None,
) -> ParsedTransaction | None:
    """Parse one notification into a transaction, or ``None`` when it is not one.

    Parameters
    ----------
    message:
        Validated input record.
    config:
        Optional :class:`ParserConfig`; defaults to the strict policy.
    """

    cfg = config or DEFAULT_CONFIG

    body = message.body
    if len(body) > cfg.max_body_chars:
        logger.debug("truncating body from %d to %d chars", len(body), cfg.max_body_chars)
        body = body[: cfg.max_body_chars]

    clean_body = normalize_text(body)
    lower_body = clean_body.lower()

    if is_noise(lower_body):
        logger.debug("rejected: denylisted term (sender=%r)", message.sender)
        return None

    amount = extract_amount(clean_body)
    if amount is None:
        logger.debug("rejected: no currency-marked amount (sender=%r)", message.sender)
        return None

    if cfg.require_intent_verb and not has_intent(clean_body):
        logger.debug("rejected: no directional verb (sender=%r)", message.sender)
        return None

    direction = classify_direction(lower_body)
    description = extract_description(
        clean_body, message.sender, max_chars=cfg.max_description_chars
    )
    category = categorize(
        direction=direction,
        lower_body=lower_body,
        description=description,
        amount=amount,
        transfer_threshold=cfg.transfer_threshold,
    )

    day = calendar_date(message.received_at)
    key = compute_dedupe_key(
        amount=amount,
        description=description,
        date=day,
        sender=message.sender,
    )

    return ParsedTransaction(
        amount=amount,
        direction=direction,
        category=category,
        description=description,
        dedupe_key=key,
        date=day,
        sender=message.sender,
    )


def parse_message(
    body: str,
    sender: str | None,
    received_at: datetime | str | int | float,
    *,
    config: ParserConfig | None = None,
) -> ParsedTransaction | None:
    """Build a :class:`RawMessage` from loose arguments and parse it.

    Raises ``pydantic.ValidationError`` when ``body`` is not a string or
    ``received_at`` is not a usable timestamp.
    """

    message = RawMessage(body=body, sender=sender, received_at=received_at)
    return parse_sms(message, config=config)


__all__ = [
    "categorize",
    "classify_direction",
    "extract_description",
    "has_intent",
    "is_noise",
    "keyword_hit",
    "parse_message",
    "parse_sms",
]
