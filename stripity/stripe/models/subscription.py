"""Plan and subscription data models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from .base import StripeObject


class Plan(StripeObject):
    amount: int = Field(..., ge=0)
    created: datetime | None = None
    currency: str | None = None
    interval: str | None = None
    interval_count: int = 1
    livemode: bool = False
    metadata: dict[str, Any] = Field(default_factory=dict)
    name: str | None = None
    statement_descriptor: str | None = None
    trial_period_days: int | None = None


class Subscription(StripeObject):
    """Customer subscription to a plan."""

    application_fee_percent: float | None = None
    cancel_at_period_end: bool = False
    canceled_at: datetime | None = None
    created: datetime | None = None
    current_period_end: datetime | None = None
    current_period_start: datetime | None = None
    customer: str | None = None
    ended_at: datetime | None = None
    livemode: bool = False
    metadata: dict[str, Any] = Field(default_factory=dict)
    plan: Plan | None = None
    quantity: int | None = None
    start: datetime | None = None
    status: str | None = None
    tax_percent: float | None = None
    trial_end: datetime | None = None
    trial_start: datetime | None = None

    @property
    def is_active(self) -> bool:
        return self.status in ("active", "trialing")
