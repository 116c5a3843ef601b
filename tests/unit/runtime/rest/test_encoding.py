"""Unit tests for form encoding."""

from __future__ import annotations

from datetime import UTC, datetime
from urllib.parse import unquote

from stripity.stripe.runtime.rest import encode_query, flatten_params


def test_flat_params():
    assert encode_query({"amount": 1000, "currency": "usd"}) == "amount=1000&currency=usd"


def test_nested_mapping():
    pairs = flatten_params({"card": {"number": "4242424242424242", "exp_month": 8}})
    assert pairs == [("card[number]", "4242424242424242"), ("card[exp_month]", "8")]


def test_brackets_are_percent_encoded():
    encoded = encode_query({"metadata": {"order": "42"}})
    assert encoded == "metadata%5Border%5D=42"
    assert unquote(encoded) == "metadata[order]=42"


def test_list_of_scalars():
    pairs = flatten_params({"expand": ["customer", "invoice"]})
    assert pairs == [("expand[]", "customer"), ("expand[]", "invoice")]


def test_list_of_mappings_is_indexed():
    pairs = flatten_params({"items": [{"plan": "gold"}, {"plan": "silver", "quantity": 2}]})
    assert pairs == [
        ("items[0][plan]", "gold"),
        ("items[1][plan]", "silver"),
        ("items[1][quantity]", "2"),
    ]


def test_deep_nesting():
    pairs = flatten_params({"shipping": {"address": {"city": "Oslo"}}})
    assert pairs == [("shipping[address][city]", "Oslo")]


def test_booleans_and_none():
    pairs = flatten_params({"capture": False, "paid": True, "description": None})
    assert pairs == [("capture", "false"), ("paid", "true"), ("description", "")]


def test_datetime_as_epoch_seconds():
    when = datetime(2024, 1, 1, tzinfo=UTC)
    assert flatten_params({"trial_end": when}) == [("trial_end", "1704067200")]


def test_empty():
    assert encode_query({}) == ""
    assert encode_query(None) == ""
