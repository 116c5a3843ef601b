"""Structured logging for pagination.

Emits one event per fetched page, one on fetch failure and one when a
listing has been fully consumed.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    listing: str,
    page_index: int,
    item_count: int,
    has_more: bool,
    starting_after: str | None,
    latency_ms: float | None = None,
) -> None:
    """Log a successfully fetched page.

    Args:
        listing: Name of the listing being paginated
        page_index: Zero-based index of the page
        item_count: Number of items on the page
        has_more: Continuation flag reported by the page
        starting_after: Cursor sent with the request (None for the first page)
        latency_ms: Fetch latency in milliseconds
    """
    logger.info(
        "page_fetched",
        extra={
            "listing": listing,
            "page_index": page_index,
            "item_count": item_count,
            "has_more": has_more,
            "starting_after": starting_after,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(
    *,
    listing: str,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page fetch.

    Args:
        listing: Name of the listing being paginated
        page_index: Zero-based index of the page that failed
        error_type: Exception class name
        error_message: Exception message
    """
    logger.error(
        "page_error",
        extra={
            "listing": listing,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_pagination_complete(*, listing: str, pages_fetched: int, items_yielded: int) -> None:
    logger.info(
        "pagination_complete",
        extra={
            "listing": listing,
            "pages_fetched": pages_fetched,
            "items_yielded": items_yielded,
        },
    )
