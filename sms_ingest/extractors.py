"""Description (merchant/payee) extraction rules.

Rules are evaluated in a fixed order over the normalized body and the first
one that returns a value wins:

1. ``upi_handle``: a ``name@bank`` handle shortly after a ``vpa``/``upi``/
   ``ref`` marker, rendered as ``"UPI: <handle>"``.
2. ``at_to_info``: the name after ``at``/``to``/``info``.
3. ``labeled_field``: the value of an explicit ``Info:``/``Msg:`` field.

When none match, the caller falls back to the sender. All patterns are
bounded (fixed-width windows, no nested quantifiers) so matching stays linear
in practice on hostile input.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from .rules import UPI_PREFIX

# A name ends before an optional "." or "," followed by a marker word or the
# end of the body, or at a clause break (". " / ", ").
_NAME_END = r"(?:\s*[.,]?(?=\s+(?:on|ref|txn|is|via|using)\b|\s*$)|\s*[.,](?=\s))"

_UPI_RE = re.compile(
    r"\b(?:vpa|upi|ref)\b[^@]{0,40}?\b(?P<handle>[A-Za-z0-9._\-]+@[A-Za-z]+)",
    re.IGNORECASE,
)
_AT_TO_INFO_RE = re.compile(
    r"\b(?:at|to|info)\s+(?P<name>[A-Za-z0-9&][A-Za-z0-9 &]{0,59}?)" + _NAME_END,
    re.IGNORECASE,
)
_LABELED_RE = re.compile(
    r"\b(?:info|msg)\s*[:\-]\s*(?P<name>[A-Za-z0-9&/*][A-Za-z0-9 &/*\-]{0,59}?)" + _NAME_END,
    re.IGNORECASE,
)

_TRAILING_PUNCT = " \t.,:;-/*@"


@dataclass(frozen=True, slots=True)
class ExtractionRule:
    """A named pure function from normalized text to an optional description."""

    name: str
    extract: Callable[[str], str | None]


def _upi_handle(text: str) -> str | None:
    m = _UPI_RE.search(text)
    if m is None:
        return None
    return f"{UPI_PREFIX}{m.group('handle')}"


def _at_to_info(text: str) -> str | None:
    m = _AT_TO_INFO_RE.search(text)
    if m is None:
        return None
    return m.group("name").strip() or None


def _labeled_field(text: str) -> str | None:
    m = _LABELED_RE.search(text)
    if m is None:
        return None
    return m.group("name").strip() or None


DESCRIPTION_RULES: tuple[ExtractionRule, ...] = (
    ExtractionRule("upi_handle", _upi_handle),
    ExtractionRule("at_to_info", _at_to_info),
    ExtractionRule("labeled_field", _labeled_field),
)


def first_match(text: str) -> tuple[str, str] | None:
    """Return ``(rule_name, description)`` for the first matching rule."""

    for rule in DESCRIPTION_RULES:
        value = rule.extract(text)
        if value:
            return rule.name, value
    return None


def clean_description(description: str, *, max_chars: int) -> str:
    """Trim, truncate to ``max_chars`` and drop trailing punctuation.

    The ``"UPI: "`` prefix is never cut: a UPI description keeps its prefix
    and as much of the handle as fits.
    """

    s = description.strip()
    if len(s) > max_chars:
        s = s[:max_chars]
    trimmed = s.rstrip(_TRAILING_PUNCT)
    if s.startswith(UPI_PREFIX) and len(trimmed) <= len(UPI_PREFIX):
        # Only the prefix would survive; keep the raw slice instead.
        return s.rstrip()
    return trimmed


def is_upi_description(description: str) -> bool:
    return description.startswith(UPI_PREFIX)


__all__ = [
    "DESCRIPTION_RULES",
    "ExtractionRule",
    "clean_description",
    "first_match",
    "is_upi_description",
]
