"""Client configuration.

Architecture:
    Configuration is an explicit, immutable value that is passed into the
    connector and from there into its transport. Nothing is read from global
    state after construction, so several clients (different keys, different
    Connect accounts) can live side by side and tests can build throwaway
    configs freely.

    Any field may be given as a zero-argument callable. It is evaluated each
    time the value is read through :func:`resolve_value`, which lets callers
    plug in secrets managers or rotating keys.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any, TypeVar

from .exceptions import MissingAPIKeyError

T = TypeVar("T")

DEFAULT_BASE_URL = "https://api.stripe.com/v1/"
DEFAULT_API_VERSION = "2016-07-06"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_CONNECTIONS = 10


def resolve_value(value: T | Callable[[], T]) -> T:
    """Return ``value``, calling it first if it is a zero-argument callable."""
    if callable(value):
        return value()
    return value


@dataclass(frozen=True)
class StripeConfig:
    """Settings for a Stripe client.

    Attributes:
        api_key: Secret key (or a callable returning it)
        base_url: API root, must end with a slash
        api_version: Value of the ``Stripe-Version`` header
        timeout: Total request timeout in seconds
        max_connections: Connection pool size
        use_connection_pool: Reuse connections between requests
        connect_account: Default ``Stripe-Account`` for Connect requests
    """

    api_key: str | Callable[[], str | None] | None = None
    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT
    max_connections: int = DEFAULT_MAX_CONNECTIONS
    use_connection_pool: bool = True
    connect_account: str | None = None

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.max_connections < 1:
            raise ValueError("max_connections must be at least 1")

    @classmethod
    def from_env(cls, **overrides: Any) -> StripeConfig:
        """Build a config from ``STRIPE_*`` environment variables.

        Explicit keyword overrides win over the environment.
        """
        values: dict[str, Any] = {}
        if api_key := os.environ.get("STRIPE_API_KEY"):
            values["api_key"] = api_key
        if base_url := os.environ.get("STRIPE_BASE_URL"):
            values["base_url"] = base_url
        if timeout := os.environ.get("STRIPE_TIMEOUT"):
            values["timeout"] = float(timeout)
        values.update(overrides)
        return cls(**values)

    def require_api_key(self) -> str:
        """Resolve the API key or raise MissingAPIKeyError."""
        key = resolve_value(self.api_key)
        if not key:
            raise MissingAPIKeyError()
        return key

    def with_overrides(self, **changes: Any) -> StripeConfig:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)
