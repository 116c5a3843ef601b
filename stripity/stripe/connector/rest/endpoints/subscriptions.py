"""Subscription endpoint definitions and adapters."""

from __future__ import annotations

from typing import Any

from stripity.stripe.connector.config import list_query
from stripity.stripe.models import Subscription
from stripity.stripe.runtime.rest import ListAdapter, ModelAdapter, RestEndpointSpec, cast

VALID_CREATE_KEYS = (
    "customer",
    "application_fee_percent",
    "coupon",
    "metadata",
    "plan",
    "quantity",
    "source",
    "tax_percent",
    "trial_end",
    "trial_period_days",
)
VALID_UPDATE_KEYS = (
    "application_fee_percent",
    "coupon",
    "metadata",
    "plan",
    "prorate",
    "quantity",
    "source",
    "tax_percent",
    "trial_end",
)
NULLABLE_UPDATE_KEYS = ("coupon", "tax_percent")
LIST_FILTERS = ("created", "customer", "plan", "status")


def _subscription_path(params: dict[str, Any]) -> str:
    return f"subscriptions/{params['id']}"


def _delete_query(params: dict[str, Any]) -> dict[str, Any]:
    if params.get("at_period_end"):
        return {"at_period_end": True}
    return {}


CREATE_SPEC = RestEndpointSpec(
    id="create_subscription",
    method="POST",
    build_path=lambda params: "subscriptions",
    build_body=lambda params: cast(params["changes"], VALID_CREATE_KEYS, "create"),
)

RETRIEVE_SPEC = RestEndpointSpec(
    id="retrieve_subscription",
    method="GET",
    build_path=_subscription_path,
)

UPDATE_SPEC = RestEndpointSpec(
    id="update_subscription",
    method="POST",
    build_path=_subscription_path,
    build_body=lambda params: cast(
        params["changes"], VALID_UPDATE_KEYS, "update", NULLABLE_UPDATE_KEYS
    ),
)

# Cancelling returns the subscription object, not a deleted stub
DELETE_SPEC = RestEndpointSpec(
    id="delete_subscription",
    method="DELETE",
    build_path=_subscription_path,
    build_query=_delete_query,
)

LIST_SPEC = RestEndpointSpec(
    id="list_subscriptions",
    method="GET",
    build_path=lambda params: "subscriptions",
    build_query=lambda params: list_query(params, LIST_FILTERS),
    paginated=True,
)


class Adapter(ModelAdapter):
    model = Subscription


class PageAdapter(ListAdapter):
    model = Subscription
