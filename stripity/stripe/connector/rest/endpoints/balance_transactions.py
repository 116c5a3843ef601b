"""Balance transaction endpoint definitions and adapters.

Balance transactions are read-only and listed most recent first.
"""

from __future__ import annotations

from stripity.stripe.connector.config import list_query
from stripity.stripe.models import BalanceTransaction
from stripity.stripe.runtime.rest import ListAdapter, ModelAdapter, RestEndpointSpec

LIST_FILTERS = ("created", "currency", "payout", "source", "type")

RETRIEVE_SPEC = RestEndpointSpec(
    id="retrieve_balance_transaction",
    method="GET",
    build_path=lambda params: f"balance_transactions/{params['id']}",
)

LIST_SPEC = RestEndpointSpec(
    id="list_balance_transactions",
    method="GET",
    build_path=lambda params: "balance_transactions",
    build_query=lambda params: list_query(params, LIST_FILTERS),
    paginated=True,
)


class Adapter(ModelAdapter):
    model = BalanceTransaction


class PageAdapter(ListAdapter):
    model = BalanceTransaction
