"""Map loosely-shaped export records onto :class:`RawMessage`.

Inbox exports disagree on field names. The aliases below cover the mobile
app's own payloads (``body``/``from``/``receivedAt``), generic dumps
(``message``/``sender``/``timestamp``) and Android SMS backups
(``address``/``date`` with epoch milliseconds).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ...models import RawMessage

BODY_KEYS: tuple[str, ...] = ("body", "message", "text")
SENDER_KEYS: tuple[str, ...] = ("sender", "from", "address")
TIMESTAMP_KEYS: tuple[str, ...] = ("receivedAt", "received_at", "date", "timestamp")


def _first_present(record: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for k in keys:
        v = record.get(k)
        if v is None:
            continue
        if isinstance(v, str) and not v.strip():
            continue
        return v
    return None


def is_blank(record: Mapping[str, Any]) -> bool:
    return all(v is None or (isinstance(v, str) and not v.strip()) for v in record.values())


def message_from_record(record: Mapping[str, Any], *, where: str) -> RawMessage:
    """Build a :class:`RawMessage` from ``record``.

    ``where`` names the record's position (e.g. ``"line 3"``) for error
    messages. Raises ``ValueError`` when the body or timestamp is missing or
    invalid.
    """

    body = _first_present(record, BODY_KEYS)
    if body is None:
        raise ValueError(f"{where}: missing message body (expected one of {list(BODY_KEYS)})")
    received_at = _first_present(record, TIMESTAMP_KEYS)
    if received_at is None:
        raise ValueError(
            f"{where}: missing timestamp (expected one of {list(TIMESTAMP_KEYS)})"
        )
    sender = _first_present(record, SENDER_KEYS)
    try:
        return RawMessage(
            body=body,
            sender=str(sender) if sender is not None else "",
            received_at=received_at,
        )
    except ValidationError as exc:
        raise ValueError(f"{where}: invalid message record: {exc}") from exc


__all__ = ["BODY_KEYS", "SENDER_KEYS", "TIMESTAMP_KEYS", "is_blank", "message_from_record"]
