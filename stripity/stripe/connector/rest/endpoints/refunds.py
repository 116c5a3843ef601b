"""Refund endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from stripity.stripe.models import Refund
from stripity.stripe.runtime.rest import ModelAdapter, RestEndpointSpec, cast

VALID_CREATE_KEYS = ("amount", "metadata", "reason", "refund_application_fee")


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    """Build the refund body; omitting amount refunds the whole charge."""
    body = cast(params.get("changes") or {}, VALID_CREATE_KEYS, "create")
    body["charge"] = params["charge"]
    return body


CREATE_SPEC = RestEndpointSpec(
    id="create_refund",
    method="POST",
    build_path=lambda params: "refunds",
    build_body=build_body,
)


class Adapter(ModelAdapter):
    model = Refund
