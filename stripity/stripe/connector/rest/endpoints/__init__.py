"""Stripe REST endpoint registry.

This module collects the endpoint specifications and adapters of every
bound resource under a single id-keyed registry.
"""

from __future__ import annotations

from stripity.stripe.runtime.rest import ResponseAdapter, RestEndpointSpec

from . import balance_transactions, cards, charges, file_uploads, refunds, subscriptions, tokens

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    # charges
    "create_charge": (charges.CREATE_SPEC, charges.Adapter),
    "retrieve_charge": (charges.RETRIEVE_SPEC, charges.Adapter),
    "update_charge": (charges.UPDATE_SPEC, charges.Adapter),
    "capture_charge": (charges.CAPTURE_SPEC, charges.Adapter),
    "list_charges": (charges.LIST_SPEC, charges.PageAdapter),
    # refunds
    "create_refund": (refunds.CREATE_SPEC, refunds.Adapter),
    # tokens
    "create_token": (tokens.CREATE_SPEC, tokens.Adapter),
    "retrieve_token": (tokens.RETRIEVE_SPEC, tokens.Adapter),
    "create_token_on_connect_account": (tokens.CREATE_ON_CONNECT_SPEC, tokens.Adapter),
    # cards
    "create_card": (cards.CREATE_SPEC, cards.Adapter),
    "retrieve_card": (cards.RETRIEVE_SPEC, cards.Adapter),
    "update_card": (cards.UPDATE_SPEC, cards.Adapter),
    "delete_card": (cards.DELETE_SPEC, cards.DeletedAdapter),
    "list_cards": (cards.LIST_SPEC, cards.PageAdapter),
    # subscriptions
    "create_subscription": (subscriptions.CREATE_SPEC, subscriptions.Adapter),
    "retrieve_subscription": (subscriptions.RETRIEVE_SPEC, subscriptions.Adapter),
    "update_subscription": (subscriptions.UPDATE_SPEC, subscriptions.Adapter),
    "delete_subscription": (subscriptions.DELETE_SPEC, subscriptions.Adapter),
    "list_subscriptions": (subscriptions.LIST_SPEC, subscriptions.PageAdapter),
    # file uploads
    "create_file_upload": (file_uploads.CREATE_SPEC, file_uploads.Adapter),
    "retrieve_file_upload": (file_uploads.RETRIEVE_SPEC, file_uploads.Adapter),
    # balance transactions
    "retrieve_balance_transaction": (
        balance_transactions.RETRIEVE_SPEC,
        balance_transactions.Adapter,
    ),
    "list_balance_transactions": (
        balance_transactions.LIST_SPEC,
        balance_transactions.PageAdapter,
    ),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "retrieve_token", "list_charges")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "retrieve_token", "list_charges")

    Returns:
        Adapter class if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoints(*, paginated: bool | None = None) -> list[str]:
    """List endpoint IDs, optionally only list (or only non-list) endpoints."""
    if paginated is None:
        return list(_ENDPOINT_REGISTRY.keys())
    return [key for key, (spec, _) in _ENDPOINT_REGISTRY.items() if spec.paginated is paginated]


__all__ = [
    "get_endpoint_spec",
    "get_endpoint_adapter",
    "list_endpoints",
]
