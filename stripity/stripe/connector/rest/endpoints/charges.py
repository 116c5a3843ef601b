"""Charge endpoint definitions and adapters.

Charges are created against a token, card or customer, optionally left
uncaptured and captured later.
"""

from __future__ import annotations

from typing import Any

from stripity.stripe.connector.config import list_query
from stripity.stripe.models import Charge
from stripity.stripe.runtime.rest import ListAdapter, ModelAdapter, RestEndpointSpec, cast

VALID_CREATE_KEYS = (
    "amount",
    "currency",
    "application_fee",
    "capture",
    "customer",
    "description",
    "destination",
    "metadata",
    "receipt_email",
    "shipping",
    "source",
    "statement_descriptor",
)
VALID_UPDATE_KEYS = (
    "description",
    "fraud_details",
    "metadata",
    "receipt_email",
    "shipping",
)
NULLABLE_UPDATE_KEYS = ("description", "receipt_email")
LIST_FILTERS = ("created", "customer", "source")


def _charge_path(params: dict[str, Any]) -> str:
    return f"charges/{params['id']}"


CREATE_SPEC = RestEndpointSpec(
    id="create_charge",
    method="POST",
    build_path=lambda params: "charges",
    build_body=lambda params: cast(params["changes"], VALID_CREATE_KEYS, "create"),
)

RETRIEVE_SPEC = RestEndpointSpec(
    id="retrieve_charge",
    method="GET",
    build_path=_charge_path,
)

UPDATE_SPEC = RestEndpointSpec(
    id="update_charge",
    method="POST",
    build_path=_charge_path,
    build_body=lambda params: cast(
        params["changes"], VALID_UPDATE_KEYS, "update", NULLABLE_UPDATE_KEYS
    ),
)


def _capture_body(params: dict[str, Any]) -> dict[str, Any]:
    body: dict[str, Any] = {}
    if params.get("amount") is not None:
        body["amount"] = int(params["amount"])
    return body


CAPTURE_SPEC = RestEndpointSpec(
    id="capture_charge",
    method="POST",
    build_path=lambda params: f"charges/{params['id']}/capture",
    build_body=_capture_body,
)

LIST_SPEC = RestEndpointSpec(
    id="list_charges",
    method="GET",
    build_path=lambda params: "charges",
    build_query=lambda params: list_query(params, LIST_FILTERS),
    paginated=True,
)


class Adapter(ModelAdapter):
    """Adapter for parsing a charge object."""

    model = Charge


class PageAdapter(ListAdapter):
    """Adapter for parsing a list of charges into a Page."""

    model = Charge
