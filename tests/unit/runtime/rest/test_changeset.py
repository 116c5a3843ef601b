"""Unit tests for changeset casting."""

from __future__ import annotations

import pytest

from stripity.stripe.runtime.rest import cast


def test_create_drops_unknown_keys():
    changes = {"amount": 100, "currency": "usd", "amout": 5}
    assert cast(changes, ("amount", "currency"), "create") == {"amount": 100, "currency": "usd"}


def test_create_drops_none_values():
    assert cast({"description": None, "amount": 1}, ("amount", "description"), "create") == {
        "amount": 1
    }


def test_update_keeps_none_for_nullable_keys():
    changes = {"description": None, "metadata": None}
    result = cast(changes, ("description", "metadata"), "update", ("description",))
    assert result == {"description": None}


def test_nested_schema_filters_inner_keys():
    schema = {"card": ("number", "exp_month"), "customer": None}
    changes = {"card": {"number": "4242", "exp_month": 8, "bogus": 1}, "customer": "cus_1"}
    assert cast(changes, schema, "create") == {
        "card": {"number": "4242", "exp_month": 8},
        "customer": "cus_1",
    }


def test_preserves_caller_order():
    result = cast({"b": 1, "a": 2}, ("a", "b"), "create")
    assert list(result) == ["b", "a"]


def test_unknown_action():
    with pytest.raises(ValueError):
        cast({}, (), "delete")  # type: ignore[arg-type]
