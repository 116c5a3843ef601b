"""Unit tests for card, token, subscription and balance transaction models."""

from datetime import UTC, datetime

import pytest

from stripity.stripe.models import (
    BalanceTransaction,
    Card,
    Deleted,
    FeeDetail,
    Subscription,
    Token,
)


def test_card_exp_month_range():
    """Test expiry month must be 1..12."""
    assert Card(id="card_1", exp_month=12).exp_month == 12
    with pytest.raises(Exception):  # ValidationError
        Card(id="card_1", exp_month=13)


def test_token_nested_card():
    """Test token card is parsed into a Card."""
    token = Token.model_validate(
        {
            "id": "tok_1",
            "object": "token",
            "card": {"id": "card_1", "object": "card", "brand": "Visa"},
            "created": 1462492800,
            "type": "card",
        }
    )
    assert isinstance(token.card, Card)
    assert token.card.brand == "Visa"
    assert token.used is False
    assert token.created.tzinfo is not None


def test_subscription_plan_and_status():
    """Test subscription plan nesting and active status."""
    sub = Subscription.model_validate(
        {
            "id": "sub_1",
            "status": "trialing",
            "plan": {"id": "gold", "amount": 2000, "interval": "month"},
            "current_period_end": 1462492800,
        }
    )
    assert sub.plan is not None and sub.plan.amount == 2000
    assert sub.is_active is True
    assert sub.current_period_end == datetime(2016, 5, 6, tzinfo=UTC)
    assert Subscription(id="sub_2", status="canceled").is_active is False


def test_balance_transaction_fee_details():
    """Test balance transaction parses its fee breakdown."""
    txn = BalanceTransaction.model_validate(
        {
            "id": "txn_1",
            "object": "balance_transaction",
            "amount": 1000,
            "available_on": 1462492800,
            "currency": "usd",
            "fee": 59,
            "fee_details": [
                {"amount": 59, "currency": "usd", "type": "stripe_fee", "description": "Stripe processing fees"}
            ],
            "net": 941,
            "status": "available",
            "type": "charge",
        }
    )
    assert txn.net == txn.amount - txn.fee
    assert txn.fee_details == [
        FeeDetail(amount=59, currency="usd", type="stripe_fee", description="Stripe processing fees")
    ]
    assert txn.is_available is True


def test_balance_transaction_requires_net():
    """Test required fields are enforced."""
    with pytest.raises(Exception):  # ValidationError
        BalanceTransaction(id="txn_1", amount=1, currency="usd")


def test_deleted():
    """Test delete result parsing."""
    deleted = Deleted.model_validate({"id": "card_1", "deleted": True})
    assert deleted.deleted is True
    assert deleted.id == "card_1"
