"""Data models for ``sms_ingest``.

``RawMessage`` is the validated input record (one notification as delivered
by the device or pasted by a user). ``ParsedTransaction`` is the immutable
result of a successful parse. Rejection is represented by ``None`` at the
parser boundary, so there is no "failed parse" model here.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime
from decimal import Decimal
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Direction(StrEnum):
    """Money leaving (``DEBIT``) or arriving (``CREDIT``)."""

    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class Category(StrEnum):
    """Closed set of semantic categories a parsed transaction can carry."""

    FOOD_AND_DINING = "Food & Dining"
    TRANSPORTATION = "Transportation"
    ENTERTAINMENT = "Entertainment"
    SHOPPING = "Shopping"
    UTILITIES = "Utilities"
    HEALTH = "Health"
    TRAVEL = "Travel"
    INCOME = "Income"
    UNCATEGORIZED = "Uncategorized"
    TRANSFER_RENT = "Transfer/Rent"


def _from_epoch_millis(value: int | float) -> datetime:
    try:
        return datetime.fromtimestamp(value / 1000, tz=UTC)
    except (OverflowError, OSError, ValueError) as exc:
        raise ValueError(f"epoch milliseconds out of range: {value!r}") from exc


class RawMessage(BaseModel):
    """A single notification as received.

    ``received_at`` accepts ISO-8601 strings (``Z`` suffix allowed),
    ``datetime``/``date`` objects and epoch milliseconds, which is how Android
    SMS inboxes timestamp messages. Naive values are taken as UTC. A missing
    body or an unparseable timestamp is a caller error and raises
    ``pydantic.ValidationError``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    body: str
    sender: str = Field(default="", alias="from")
    received_at: datetime = Field(alias="receivedAt")

    @field_validator("body", mode="before")
    @classmethod
    def _body_is_text(cls, v: Any) -> str:
        if not isinstance(v, str):
            raise ValueError("body must be a string")
        return v

    @field_validator("sender", mode="before")
    @classmethod
    def _sender_default(cls, v: Any) -> str:
        if v is None:
            return ""
        if not isinstance(v, str):
            raise ValueError("sender must be a string")
        return v

    @field_validator("received_at", mode="before")
    @classmethod
    def _coerce_timestamp(cls, v: Any) -> datetime:
        # bool is an int subclass; never a timestamp.
        if isinstance(v, bool):
            raise ValueError("received_at must be a timestamp")
        if isinstance(v, (int, float)):
            return _from_epoch_millis(v)
        if isinstance(v, datetime):
            return v if v.tzinfo else v.replace(tzinfo=UTC)
        if isinstance(v, date):
            return datetime(v.year, v.month, v.day, tzinfo=UTC)
        if isinstance(v, str):
            s = v.strip()
            if not s:
                raise ValueError("received_at is empty")
            if s.isdigit():
                return _from_epoch_millis(int(s))
            try:
                dt = datetime.fromisoformat(s)
            except ValueError as exc:
                raise ValueError(f"invalid ISO-8601 timestamp: {v!r}") from exc
            return dt if dt.tzinfo else dt.replace(tzinfo=UTC)
        raise ValueError("received_at must be a timestamp")


@dataclass(frozen=True, slots=True)
class ParsedTransaction:
    """A structured transaction extracted from one notification.

    ``amount`` is a positive ``Decimal`` with at most two fractional digits.
    ``date`` is the UTC calendar date (``YYYY-MM-DD``) of the message and,
    together with ``amount``, ``description`` and ``sender``, determines
    ``dedupe_key``.
    """

    amount: Decimal
    direction: Direction
    category: Category
    description: str
    dedupe_key: str
    date: str
    sender: str

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready record pushed to the backend."""

        return {
            "id": self.dedupe_key,
            "hash": self.dedupe_key,
            "type": str(self.direction),
            "amount": float(self.amount),
            "category": str(self.category),
            "description": self.description,
            "date": self.date,
            "firewallDecision": "ALLOW",
            "firewallReason": "Imported from SMS",
        }


__all__ = ["Category", "Direction", "ParsedTransaction", "RawMessage"]
