"""Public interface for the ``sms_ingest`` package.

This module re-exports the parser entry points and public models/types as the
stable import surface. There is no runtime logic here, only symbol
re-exports.
"""

from .config import ParserConfig
from .duplicates import DedupeResult, dedupe_transactions
from .fingerprint import compute_dedupe_key
from .models import Category, Direction, ParsedTransaction, RawMessage
from .parser import parse_message, parse_sms

__all__ = [
    # API
    "parse_sms",
    "parse_message",
    "compute_dedupe_key",
    "dedupe_transactions",
    # Models / types
    "Category",
    "DedupeResult",
    "Direction",
    "ParsedTransaction",
    "ParserConfig",
    "RawMessage",
]
