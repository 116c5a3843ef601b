"""Stripe REST connector.

This connector is the entry point application code talks to. It resolves
endpoint specs and adapters from the registry, runs them through RestRunner
and wires list endpoints into the cursor paginator.

Architecture:
    - ``fetch`` runs any registered endpoint by id
    - ``list_page`` runs one list endpoint call and returns a Page
    - ``stream`` / ``retrieve_all`` walk every page of a list endpoint
    - Typed methods (``create_charge``, ``retrieve_token``, ...) are thin
      wrappers that build params and delegate to ``fetch``
"""

from __future__ import annotations

from pathlib import Path
from time import perf_counter
from typing import Any

from stripity.stripe.core import StripeConfig
from stripity.stripe.models import (
    BalanceTransaction,
    Card,
    Charge,
    Deleted,
    FileUpload,
    Refund,
    Subscription,
    Token,
)
from stripity.stripe.runtime.pagination import CursorPaginator, Page, PageFetcher
from stripity.stripe.runtime.pagination import retrieve_all as _retrieve_all
from stripity.stripe.runtime.pagination import stream as _stream
from stripity.stripe.runtime.rest import RestRunner, RESTTransport

from .endpoints import get_endpoint_adapter, get_endpoint_spec


class StripeRESTConnector:
    """Async client for the Stripe REST API.

    Example:
        >>> async with StripeRESTConnector(StripeConfig(api_key="sk_test_...")) as stripe:
        ...     async for txn in stripe.stream_balance_transactions(limit=100):
        ...         print(txn.id, txn.net)
    """

    def __init__(
        self,
        config: StripeConfig | None = None,
        *,
        transport: RESTTransport | None = None,
    ) -> None:
        """Initialize Stripe REST connector.

        Args:
            config: Client configuration (default: read from STRIPE_* environment variables)
            transport: Pre-built transport, mainly for tests
        """
        self.config = config or StripeConfig.from_env()
        self._transport = transport or RESTTransport(self.config)
        self._runner = RestRunner(self._transport)

    async def fetch_health(self) -> dict[str, object]:
        """Retrieve the account balance to verify connectivity and credentials."""
        path = "balance"
        start = perf_counter()
        await self._transport.get(path)
        latency_ms = (perf_counter() - start) * 1000.0
        return {
            "service": "stripe",
            "status": "ok",
            "latency_ms": latency_ms,
            "endpoint": path,
        }

    def _resolve(self, endpoint_id: str):
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")
        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")
        return spec, adapter_cls()

    async def fetch(
        self,
        endpoint_id: str,
        params: dict[str, Any] | None = None,
        *,
        connect_account: str | None = None,
    ) -> Any:
        """Run a registered endpoint.

        Args:
            endpoint_id: Endpoint identifier (e.g., "retrieve_token")
            params: Endpoint parameters
            connect_account: Act on behalf of this Connect account

        Returns:
            Parsed response from the endpoint adapter

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec, adapter = self._resolve(endpoint_id)
        return await self._runner.run(
            spec=spec, adapter=adapter, params=dict(params or {}), connect_account=connect_account
        )

    async def list_page(
        self,
        endpoint_id: str,
        params: dict[str, Any] | None = None,
        *,
        connect_account: str | None = None,
    ) -> Page[Any]:
        """Fetch a single page of a list endpoint."""
        spec, adapter = self._resolve(endpoint_id)
        return await self._runner.run_page(
            spec=spec, adapter=adapter, params=dict(params or {}), connect_account=connect_account
        )

    def page_fetcher(
        self, endpoint_id: str, *, connect_account: str | None = None
    ) -> PageFetcher[Any]:
        """Return a page fetcher bound to a list endpoint."""
        spec = get_endpoint_spec(endpoint_id)
        if spec is None or not spec.paginated:
            raise ValueError(f"Not a list endpoint: {endpoint_id}")

        async def fetch_page(options: dict[str, Any]) -> Page[Any]:
            return await self.list_page(endpoint_id, options, connect_account=connect_account)

        return fetch_page

    def stream(
        self,
        endpoint_id: str,
        params: dict[str, Any] | None = None,
        *,
        connect_account: str | None = None,
    ) -> CursorPaginator[Any]:
        """Lazily iterate every item of a list endpoint.

        ``params`` may carry ``starting_after``/``ending_before`` plus any
        filter or ``limit`` (page size) the endpoint accepts.
        """
        fetch_page = self.page_fetcher(endpoint_id, connect_account=connect_account)
        return _stream(fetch_page, params, listing=endpoint_id)

    async def retrieve_all(
        self,
        endpoint_id: str,
        params: dict[str, Any] | None = None,
        *,
        connect_account: str | None = None,
    ) -> list[Any]:
        """Fetch every item of a list endpoint. Raises on the first failed page."""
        fetch_page = self.page_fetcher(endpoint_id, connect_account=connect_account)
        return await _retrieve_all(fetch_page, params, listing=endpoint_id)

    # --- charges -----------------------------------------------------------

    async def create_charge(
        self,
        amount: int,
        changes: dict[str, Any] | None = None,
        *,
        currency: str = "usd",
        connect_account: str | None = None,
    ) -> Charge:
        """Create a charge of ``amount`` (smallest currency unit)."""
        body = {"currency": currency, **(changes or {}), "amount": amount}
        return await self.fetch(
            "create_charge", {"changes": body}, connect_account=connect_account
        )

    async def retrieve_charge(self, charge_id: str, **opts: Any) -> Charge:
        return await self.fetch("retrieve_charge", {"id": charge_id}, **opts)

    async def update_charge(self, charge_id: str, changes: dict[str, Any], **opts: Any) -> Charge:
        """Update a charge. Pass None for a nullable field to clear it."""
        return await self.fetch("update_charge", {"id": charge_id, "changes": changes}, **opts)

    async def capture_charge(
        self, charge_id: str, amount: int | None = None, **opts: Any
    ) -> Charge:
        """Capture an uncaptured charge, optionally for less than the authorized amount."""
        return await self.fetch("capture_charge", {"id": charge_id, "amount": amount}, **opts)

    async def refund_charge(
        self,
        charge_id: str,
        amount: int | None = None,
        changes: dict[str, Any] | None = None,
        **opts: Any,
    ) -> Refund:
        """Refund a charge in full, or partially when ``amount`` is given."""
        body = dict(changes or {})
        if amount is not None:
            body["amount"] = amount
        return await self.fetch("create_refund", {"charge": charge_id, "changes": body}, **opts)

    async def list_charges(self, **params: Any) -> Page[Charge]:
        return await self.list_page("list_charges", params)

    def stream_charges(self, **params: Any) -> CursorPaginator[Charge]:
        return self.stream("list_charges", params)

    # --- tokens ------------------------------------------------------------

    async def create_token(self, changes: dict[str, Any], **opts: Any) -> Token:
        """Create a card, bank account or PII token."""
        return await self.fetch("create_token", {"changes": changes}, **opts)

    async def retrieve_token(self, token_id: str, **opts: Any) -> Token:
        return await self.fetch("retrieve_token", {"id": token_id}, **opts)

    async def create_token_on_connect_account(
        self, customer_id: str, card_id: str, *, connect_account: str
    ) -> Token:
        """Tokenize a platform customer's card for use on a connected account."""
        if not connect_account:
            raise ValueError("connect_account is required to create a token on a connected account")
        return await self.fetch(
            "create_token_on_connect_account",
            {"customer_id": customer_id, "card_id": card_id},
            connect_account=connect_account,
        )

    # --- cards -------------------------------------------------------------

    async def create_card(self, owner_type: str, owner_id: str, token: str, **opts: Any) -> Card:
        """Attach a card to a customer or recipient from a token."""
        params = {"owner_type": owner_type, "owner_id": owner_id, "token": token}
        return await self.fetch("create_card", params, **opts)

    async def retrieve_card(
        self, owner_type: str, owner_id: str, card_id: str, **opts: Any
    ) -> Card:
        params = {"owner_type": owner_type, "owner_id": owner_id, "id": card_id}
        return await self.fetch("retrieve_card", params, **opts)

    async def update_card(
        self, owner_type: str, owner_id: str, card_id: str, changes: dict[str, Any], **opts: Any
    ) -> Card:
        params = {"owner_type": owner_type, "owner_id": owner_id, "id": card_id, "changes": changes}
        return await self.fetch("update_card", params, **opts)

    async def delete_card(
        self, owner_type: str, owner_id: str, card_id: str, **opts: Any
    ) -> Deleted:
        params = {"owner_type": owner_type, "owner_id": owner_id, "id": card_id}
        return await self.fetch("delete_card", params, **opts)

    def stream_cards(self, owner_type: str, owner_id: str, **params: Any) -> CursorPaginator[Card]:
        return self.stream("list_cards", {"owner_type": owner_type, "owner_id": owner_id, **params})

    # --- subscriptions -----------------------------------------------------

    async def create_subscription(self, changes: dict[str, Any], **opts: Any) -> Subscription:
        return await self.fetch("create_subscription", {"changes": changes}, **opts)

    async def retrieve_subscription(self, subscription_id: str, **opts: Any) -> Subscription:
        return await self.fetch("retrieve_subscription", {"id": subscription_id}, **opts)

    async def update_subscription(
        self, subscription_id: str, changes: dict[str, Any], **opts: Any
    ) -> Subscription:
        return await self.fetch(
            "update_subscription", {"id": subscription_id, "changes": changes}, **opts
        )

    async def delete_subscription(
        self, subscription_id: str, *, at_period_end: bool = False, **opts: Any
    ) -> Subscription:
        """Cancel a subscription now, or at the end of the current period."""
        return await self.fetch(
            "delete_subscription",
            {"id": subscription_id, "at_period_end": at_period_end},
            **opts,
        )

    async def list_subscriptions(self, **params: Any) -> Page[Subscription]:
        return await self.list_page("list_subscriptions", params)

    # --- balance transactions ---------------------------------------------

    async def retrieve_balance_transaction(
        self, transaction_id: str, **opts: Any
    ) -> BalanceTransaction:
        return await self.fetch("retrieve_balance_transaction", {"id": transaction_id}, **opts)

    async def list_balance_transactions(self, **params: Any) -> Page[BalanceTransaction]:
        return await self.list_page("list_balance_transactions", params)

    def stream_balance_transactions(self, **params: Any) -> CursorPaginator[BalanceTransaction]:
        return self.stream("list_balance_transactions", params)

    async def retrieve_all_balance_transactions(self, **params: Any) -> list[BalanceTransaction]:
        return await self.retrieve_all("list_balance_transactions", params)

    # --- file uploads ------------------------------------------------------

    async def create_file_upload(
        self,
        purpose: str,
        file: str | Path | bytes,
        *,
        filename: str | None = None,
        **opts: Any,
    ) -> FileUpload:
        """Upload a file (a path, or raw bytes plus ``filename``) for ``purpose``."""
        params = {"purpose": purpose, "file": file, "filename": filename}
        return await self.fetch("create_file_upload", params, **opts)

    async def retrieve_file_upload(self, file_id: str, **opts: Any) -> FileUpload:
        return await self.fetch("retrieve_file_upload", {"id": file_id}, **opts)

    # --- connect oauth -----------------------------------------------------

    async def oauth_token(self, code: str) -> dict[str, Any]:
        """Exchange an OAuth authorization code for a connected account's credentials."""
        return await self._transport.oauth_request(
            "POST", "token", {"grant_type": "authorization_code", "code": code}
        )

    async def close(self) -> None:
        """Close underlying HTTP resources."""
        await self._transport.close()

    async def __aenter__(self) -> StripeRESTConnector:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
