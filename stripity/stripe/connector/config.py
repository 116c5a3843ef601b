"""Shared Stripe connector constants.

This module centralizes URLs, the pinned API version and the parameter
schemas used by the endpoint modules.
"""

from __future__ import annotations

from stripity.stripe.core.config import DEFAULT_API_VERSION, DEFAULT_BASE_URL

BASE_URL = DEFAULT_BASE_URL
OAUTH_BASE_URL = "https://connect.stripe.com/oauth/"
# File uploads are served from their own host
FILES_BASE_URL = "https://files.stripe.com/v1/"
API_VERSION = DEFAULT_API_VERSION

# Stripe accepts 1..100 items per list page
DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100

# Card owners and the path their cards live under
CARD_OWNER_PATHS = {
    "customer": "customers/{owner_id}/sources",
    "recipient": "recipients/{owner_id}/cards",
}

# Parameters forwarded by list endpoints besides filters
LIST_PARAMS = ("limit", "starting_after", "ending_before", "expand")


def clamp_limit(limit: int | None) -> int:
    """Clamp a page size into the range the API accepts."""
    if limit is None:
        return DEFAULT_PAGE_LIMIT
    return max(1, min(int(limit), MAX_PAGE_LIMIT))


def list_query(params: dict, filters: tuple[str, ...] = ()) -> dict:
    """Build the query of a list endpoint from cursor params plus allowed filters."""
    query: dict = {"limit": clamp_limit(params.get("limit"))}
    for key in (*LIST_PARAMS[1:], *filters):
        if params.get(key) is not None:
            query[key] = params[key]
    return query
