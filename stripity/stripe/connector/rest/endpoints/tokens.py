"""Token endpoint definitions and adapter.

Tokens are normally created client-side. Creating one server-side is
useful for Connect: a customer's card on the platform account is turned
into a token usable on a connected account.
"""

from __future__ import annotations

from typing import Any

from stripity.stripe.models import Token
from stripity.stripe.runtime.rest import ModelAdapter, RestEndpointSpec, cast

VALID_CREATE_KEYS = {
    "bank_account": (
        "account_holder_name",
        "account_holder_type",
        "account_number",
        "country",
        "currency",
        "routing_number",
    ),
    "card": (
        "address_city",
        "address_country",
        "address_line1",
        "address_line2",
        "address_state",
        "address_zip",
        "currency",
        "cvc",
        "exp_month",
        "exp_year",
        "name",
        "number",
    ),
    "customer": None,
    "pii": ("personal_id_number",),
}

CREATE_SPEC = RestEndpointSpec(
    id="create_token",
    method="POST",
    build_path=lambda params: "tokens",
    build_body=lambda params: cast(params["changes"], VALID_CREATE_KEYS, "create"),
)

RETRIEVE_SPEC = RestEndpointSpec(
    id="retrieve_token",
    method="GET",
    build_path=lambda params: f"tokens/{params['id']}",
)


def connect_body(params: dict[str, Any]) -> dict[str, Any]:
    """Body for tokenizing a platform customer's card for a connected account."""
    return {"card": params["card_id"], "customer": params["customer_id"]}


CREATE_ON_CONNECT_SPEC = RestEndpointSpec(
    id="create_token_on_connect_account",
    method="POST",
    build_path=lambda params: "tokens",
    build_body=connect_body,
)


class Adapter(ModelAdapter):
    model = Token
