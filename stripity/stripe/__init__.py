"""Stripity Stripe - async client for the Stripe payments API."""

from .connector import StripeRESTConnector
from .core import (
    APIError,
    AuthenticationError,
    HTTPError,
    MissingAPIKeyError,
    PaginationError,
    ProtocolInvariantError,
    RateLimitError,
    StripeConfig,
    StripeError,
    UpstreamFetchError,
)
from .models import (
    BalanceTransaction,
    Card,
    Charge,
    Deleted,
    FeeDetail,
    FileUpload,
    Plan,
    Refund,
    StripeObject,
    Subscription,
    Token,
)
from .runtime.pagination import CursorPaginator, Page, PageStep, StepKind, retrieve_all, stream

__version__ = "0.1.0"

__all__ = [
    # Connector
    "StripeRESTConnector",
    "StripeConfig",
    # Pagination
    "CursorPaginator",
    "Page",
    "PageStep",
    "StepKind",
    "stream",
    "retrieve_all",
    # Exceptions
    "StripeError",
    "MissingAPIKeyError",
    "HTTPError",
    "APIError",
    "AuthenticationError",
    "RateLimitError",
    "PaginationError",
    "UpstreamFetchError",
    "ProtocolInvariantError",
    # Models
    "BalanceTransaction",
    "Card",
    "Charge",
    "Deleted",
    "FeeDetail",
    "FileUpload",
    "Plan",
    "Refund",
    "StripeObject",
    "Subscription",
    "Token",
]
