"""Card data model."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import StripeObject


class Card(StripeObject):
    """Card attached to a customer or recipient.

    Cards are never created from raw numbers here; create them from a token.
    """

    address_city: str | None = None
    address_country: str | None = None
    address_line1: str | None = None
    address_line1_check: str | None = None
    address_line2: str | None = None
    address_state: str | None = None
    address_zip: str | None = None
    address_zip_check: str | None = None
    brand: str | None = None
    country: str | None = None
    customer: str | None = None
    cvc_check: str | None = None
    dynamic_last4: str | None = None
    exp_month: int | None = Field(default=None, ge=1, le=12)
    exp_year: int | None = None
    fingerprint: str | None = None
    funding: str | None = None
    last4: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    name: str | None = None
    recipient: str | None = None
    tokenization_method: str | None = None
