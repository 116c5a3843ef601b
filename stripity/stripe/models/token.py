"""Token data model."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from .base import StripeObject
from .card import Card


class Token(StripeObject):
    """Single-use token representing a card or bank account."""

    card: Card | None = None
    bank_account: dict[str, Any] | None = None
    client_ip: str | None = None
    created: datetime | None = None
    livemode: bool = False
    type: str | None = None
    used: bool = False
