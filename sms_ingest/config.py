"""Parser configuration with environment-variable overrides.

Defaults reproduce the strict web parser: a currency marker AND a
directional verb are both required, large UPI transfers become
``Transfer/Rent`` above 5000, and descriptions are capped at 30 characters.

Environment variables (read by :meth:`ParserConfig.from_env`):

- ``SMS_INGEST_REQUIRE_INTENT``: ``1/true/yes`` or ``0/false/no``.
- ``SMS_INGEST_TRANSFER_THRESHOLD``: decimal amount.
- ``SMS_INGEST_MAX_DESCRIPTION_CHARS``: positive integer.
- ``SMS_INGEST_MAX_BODY_CHARS``: positive integer.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (got {raw!r})")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer (got {raw!r})") from exc


def _env_decimal(name: str, default: Decimal) -> Decimal:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        d = Decimal(raw.strip().replace(",", ""))
    except InvalidOperation as exc:
        raise ValueError(f"{name} must be a decimal amount (got {raw!r})") from exc
    if not d.is_finite():
        raise ValueError(f"{name} must be finite (got {raw!r})")
    return d


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Tunable knobs of the parsing pipeline.

    Attributes
    ----------
    require_intent_verb:
        When ``True`` (strict policy) a directional verb such as ``debited``
        or ``paid`` must accompany the currency-marked amount. When ``False``
        the amount alone is enough, as in the lenient mobile parser.
    transfer_threshold:
        UPI debits that match no category and exceed this amount are
        categorized ``Transfer/Rent``.
    max_description_chars:
        Upper bound on the description length.
    max_body_chars:
        Bodies longer than this are truncated before any pattern matching.
    """

    require_intent_verb: bool = True
    transfer_threshold: Decimal = Decimal("5000")
    max_description_chars: int = 30
    max_body_chars: int = 4096

    def __post_init__(self) -> None:
        if self.transfer_threshold < 0:
            raise ValueError("transfer_threshold must be non-negative")
        # Room for the "UPI: " prefix plus at least one handle character.
        if self.max_description_chars < 6:
            raise ValueError("max_description_chars must be at least 6")
        if self.max_body_chars <= 0:
            raise ValueError("max_body_chars must be positive")

    @classmethod
    def from_env(cls) -> ParserConfig:
        """Build a config from ``SMS_INGEST_*`` variables, falling back to defaults."""

        defaults = cls()
        return cls(
            require_intent_verb=_env_bool(
                "SMS_INGEST_REQUIRE_INTENT", defaults.require_intent_verb
            ),
            transfer_threshold=_env_decimal(
                "SMS_INGEST_TRANSFER_THRESHOLD", defaults.transfer_threshold
            ),
            max_description_chars=_env_int(
                "SMS_INGEST_MAX_DESCRIPTION_CHARS", defaults.max_description_chars
            ),
            max_body_chars=_env_int("SMS_INGEST_MAX_BODY_CHARS", defaults.max_body_chars),
        )


DEFAULT_CONFIG = ParserConfig()


__all__ = ["DEFAULT_CONFIG", "ParserConfig"]
