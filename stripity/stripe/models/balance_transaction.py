"""Balance transaction data model."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .base import StripeObject


class FeeDetail(BaseModel):
    """One line of a balance transaction's fee breakdown."""

    amount: int
    application: str | None = None
    currency: str
    description: str | None = None
    type: str

    model_config = ConfigDict(frozen=True, extra="allow")


class BalanceTransaction(StripeObject):
    """Funds moving through the account balance.

    Amounts are in the smallest currency unit. ``net`` is ``amount - fee``.
    """

    amount: int
    available_on: datetime | None = None
    created: datetime | None = None
    currency: str
    description: str | None = None
    exchange_rate: float | None = None
    fee: int = 0
    fee_details: list[FeeDetail] = Field(default_factory=list)
    net: int
    reporting_category: str | None = None
    source: str | dict[str, Any] | None = None
    status: str | None = None
    type: str | None = None

    @property
    def is_available(self) -> bool:
        return self.status == "available"
