"""Card endpoint definitions and adapters.

Every card request is scoped to an owner. ``owner_type`` is either
"customer" (``customers/{id}/sources``) or "recipient"
(``recipients/{id}/cards``).
"""

from __future__ import annotations

from typing import Any

from stripity.stripe.connector.config import CARD_OWNER_PATHS, list_query
from stripity.stripe.models import Card, Deleted
from stripity.stripe.runtime.rest import ListAdapter, ModelAdapter, RestEndpointSpec, cast

VALID_UPDATE_KEYS = (
    "address_city",
    "address_country",
    "address_line1",
    "address_line2",
    "address_state",
    "address_zip",
    "exp_month",
    "exp_year",
    "metadata",
    "name",
)
NULLABLE_UPDATE_KEYS = (
    "address_city",
    "address_country",
    "address_line1",
    "address_line2",
    "address_state",
    "address_zip",
    "name",
)


def owner_path(params: dict[str, Any]) -> str:
    """Build the collection path for the card owner."""
    owner_type = params["owner_type"]
    if owner_type not in CARD_OWNER_PATHS:
        raise ValueError(f"owner_type must be one of {sorted(CARD_OWNER_PATHS)}, got {owner_type!r}")
    return CARD_OWNER_PATHS[owner_type].format(owner_id=params["owner_id"])


def card_path(params: dict[str, Any]) -> str:
    return f"{owner_path(params)}/{params['id']}"


def create_body(params: dict[str, Any]) -> dict[str, Any]:
    """Customers take the token as ``source``, recipients as ``external_account``."""
    if params["owner_type"] == "customer":
        return {"source": params["token"]}
    return {"external_account": params["token"]}


def _list_query(params: dict[str, Any]) -> dict[str, Any]:
    query = list_query(params)
    if params["owner_type"] == "customer":
        query["object"] = "card"
    return query


CREATE_SPEC = RestEndpointSpec(
    id="create_card",
    method="POST",
    build_path=owner_path,
    build_body=create_body,
)

RETRIEVE_SPEC = RestEndpointSpec(
    id="retrieve_card",
    method="GET",
    build_path=card_path,
)

UPDATE_SPEC = RestEndpointSpec(
    id="update_card",
    method="POST",
    build_path=card_path,
    build_body=lambda params: cast(
        params["changes"], VALID_UPDATE_KEYS, "update", NULLABLE_UPDATE_KEYS
    ),
)

DELETE_SPEC = RestEndpointSpec(
    id="delete_card",
    method="DELETE",
    build_path=card_path,
)

LIST_SPEC = RestEndpointSpec(
    id="list_cards",
    method="GET",
    build_path=owner_path,
    build_query=_list_query,
    paginated=True,
)


class Adapter(ModelAdapter):
    model = Card


class DeletedAdapter(ModelAdapter):
    model = Deleted


class PageAdapter(ListAdapter):
    model = Card
