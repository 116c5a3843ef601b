"""Data models for API objects.

Architecture:
    This module exports the Pydantic v2 models used to represent API
    responses. Models are immutable (frozen=True) and tolerate fields they do
    not declare, so a newer API version adding fields never breaks parsing.

Design Decisions:
    - Pydantic v2: Type validation and serialization
    - Epoch timestamps parsed into timezone-aware datetimes
    - Nested objects typed where the relationship is fixed (Token.card, Subscription.plan)

Model Categories:
    - Payments: Charge, Refund, Card, Token
    - Files: FileUpload
    - Billing: Plan, Subscription
    - Balance: BalanceTransaction, FeeDetail
    - Results: Deleted
"""

from .balance_transaction import BalanceTransaction, FeeDetail
from .base import Deleted, StripeObject
from .card import Card
from .charge import Charge, Refund
from .file_upload import FileUpload
from .subscription import Plan, Subscription
from .token import Token

__all__ = [
    "BalanceTransaction",
    "Card",
    "Charge",
    "Deleted",
    "FeeDetail",
    "FileUpload",
    "Plan",
    "Refund",
    "StripeObject",
    "Subscription",
    "Token",
]
