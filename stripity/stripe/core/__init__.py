"""Core components."""

from .config import StripeConfig, resolve_value
from .exceptions import (
    APIError,
    AuthenticationError,
    HTTPError,
    MissingAPIKeyError,
    PaginationError,
    ProtocolInvariantError,
    RateLimitError,
    StripeError,
    UpstreamFetchError,
)

__all__ = [
    "StripeConfig",
    "resolve_value",
    "StripeError",
    "MissingAPIKeyError",
    "HTTPError",
    "APIError",
    "AuthenticationError",
    "RateLimitError",
    "PaginationError",
    "UpstreamFetchError",
    "ProtocolInvariantError",
]
