"""Charge and refund data models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from .base import StripeObject, card_or_raw
from .card import Card


class Refund(StripeObject):
    """Refund of all or part of a charge."""

    amount: int = Field(..., ge=0)
    charge: str | None = None
    created: datetime | None = None
    currency: str | None = None
    reason: str | None = None
    status: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class Charge(StripeObject):
    """Charge against a card or other payment source.

    ``source`` is a Card when the payment source is a card, otherwise the raw
    source payload.
    """

    amount: int = Field(..., ge=0)
    amount_refunded: int = 0
    balance_transaction: str | None = None
    captured: bool = False
    created: datetime | None = None
    currency: str | None = None
    customer: str | None = None
    description: str | None = None
    failure_code: str | None = None
    failure_message: str | None = None
    livemode: bool = False
    metadata: dict[str, Any] = Field(default_factory=dict)
    paid: bool = False
    receipt_email: str | None = None
    refunded: bool = False
    source: dict[str, Any] | Card | None = Field(default=None, union_mode="left_to_right")
    statement_descriptor: str | None = None
    status: str | None = None

    @field_validator("source", mode="before")
    @classmethod
    def parse_source(cls, v: Any) -> Any:
        return card_or_raw(v)

    @property
    def amount_refundable(self) -> int:
        """Amount still refundable on this charge."""
        return self.amount - self.amount_refunded
