"""Unit tests for the endpoint registry and endpoint specs."""

import pytest

from stripity.stripe.connector.config import clamp_limit, list_query
from stripity.stripe.connector.rest.endpoints import (
    get_endpoint_adapter,
    get_endpoint_spec,
    list_endpoints,
)
from stripity.stripe.runtime.rest import ListAdapter


class TestRegistry:
    def test_every_endpoint_has_matching_id(self):
        for endpoint_id in list_endpoints():
            assert get_endpoint_spec(endpoint_id).id == endpoint_id
            assert get_endpoint_adapter(endpoint_id) is not None

    def test_list_endpoints_use_page_adapters(self):
        paginated = list_endpoints(paginated=True)
        assert set(paginated) == {
            "list_charges",
            "list_cards",
            "list_subscriptions",
            "list_balance_transactions",
        }
        for endpoint_id in paginated:
            assert issubclass(get_endpoint_adapter(endpoint_id), ListAdapter)

    def test_non_list_endpoints(self):
        assert "retrieve_token" in list_endpoints(paginated=False)
        assert "list_charges" not in list_endpoints(paginated=False)

    def test_unknown_endpoint(self):
        assert get_endpoint_spec("list_widgets") is None
        assert get_endpoint_adapter("list_widgets") is None


class TestListQuery:
    def test_clamp_limit(self):
        assert clamp_limit(None) == 10
        assert clamp_limit(0) == 1
        assert clamp_limit(500) == 100
        assert clamp_limit(25) == 25

    def test_keeps_cursor_params_and_filters(self):
        query = list_query(
            {"limit": 3, "starting_after": "txn_2", "currency": "usd", "owner": "x", "expand": None},
            filters=("currency",),
        )
        assert query == {"limit": 3, "starting_after": "txn_2", "currency": "usd"}


class TestCharges:
    def test_create_drops_unknown_and_none(self):
        spec = get_endpoint_spec("create_charge")
        body = spec.build_body(
            {"changes": {"amount": 100, "currency": "usd", "description": None, "bogus": 1}}
        )
        assert body == {"amount": 100, "currency": "usd"}

    def test_update_keeps_nullable_none(self):
        spec = get_endpoint_spec("update_charge")
        body = spec.build_body(
            {"id": "ch_1", "changes": {"description": None, "metadata": None, "receipt_email": "a@b.c"}}
        )
        assert body == {"description": None, "receipt_email": "a@b.c"}
        assert spec.build_path({"id": "ch_1"}) == "charges/ch_1"

    def test_capture(self):
        spec = get_endpoint_spec("capture_charge")
        assert spec.build_path({"id": "ch_1"}) == "charges/ch_1/capture"
        assert spec.build_body({"id": "ch_1", "amount": None}) == {}
        assert spec.build_body({"id": "ch_1", "amount": 50}) == {"amount": 50}

    def test_refund_body(self):
        spec = get_endpoint_spec("create_refund")
        assert spec.build_body({"charge": "ch_1", "changes": {"amount": 10, "x": 1}}) == {
            "amount": 10,
            "charge": "ch_1",
        }


class TestCards:
    @pytest.mark.parametrize(
        ("owner_type", "path", "body_key"),
        [
            ("customer", "customers/cus_1/sources", "source"),
            ("recipient", "recipients/cus_1/cards", "external_account"),
        ],
    )
    def test_owner_paths(self, owner_type, path, body_key):
        params = {"owner_type": owner_type, "owner_id": "cus_1", "id": "card_1", "token": "tok_1"}
        assert get_endpoint_spec("create_card").build_path(params) == path
        assert get_endpoint_spec("create_card").build_body(params) == {body_key: "tok_1"}
        assert get_endpoint_spec("retrieve_card").build_path(params) == f"{path}/card_1"

    def test_unknown_owner_type(self):
        with pytest.raises(ValueError, match="owner_type"):
            get_endpoint_spec("retrieve_card").build_path(
                {"owner_type": "account", "owner_id": "acct_1", "id": "card_1"}
            )

    def test_customer_list_filters_cards(self):
        spec = get_endpoint_spec("list_cards")
        query = spec.build_query({"owner_type": "customer", "owner_id": "cus_1", "limit": 5})
        assert query == {"limit": 5, "object": "card"}
        query = spec.build_query({"owner_type": "recipient", "owner_id": "rp_1"})
        assert "object" not in query


class TestTokensAndSubscriptions:
    def test_token_nested_schema(self):
        spec = get_endpoint_spec("create_token")
        body = spec.build_body(
            {"changes": {"card": {"number": "4242424242424242", "cvc": "123", "brand": "Visa"}}}
        )
        assert body == {"card": {"number": "4242424242424242", "cvc": "123"}}

    def test_token_on_connect_body(self):
        spec = get_endpoint_spec("create_token_on_connect_account")
        assert spec.build_body({"customer_id": "cus_1", "card_id": "card_1"}) == {
            "card": "card_1",
            "customer": "cus_1",
        }

    def test_delete_subscription_at_period_end(self):
        spec = get_endpoint_spec("delete_subscription")
        assert spec.method == "DELETE"
        assert spec.build_query({"id": "sub_1", "at_period_end": True}) == {"at_period_end": True}
        assert spec.build_query({"id": "sub_1", "at_period_end": False}) == {}
