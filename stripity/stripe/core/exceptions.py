"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class StripeError(Exception):
    """Base exception for all library errors."""

    pass


class MissingAPIKeyError(StripeError):
    """No API key is configured.

    Raised before any request is sent. Configure ``api_key`` on
    :class:`~stripity.stripe.core.config.StripeConfig` or set the
    ``STRIPE_API_KEY`` environment variable.
    """

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "An API key is required. Pass api_key to StripeConfig or set STRIPE_API_KEY."
        )


class HTTPError(StripeError):
    """The HTTP client could not communicate with the API (connection error, timeout)."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message or "The HTTP client encountered an error while communicating with Stripe."
        )


class APIError(StripeError):
    """Error response returned by the API.

    Attributes mirror the ``error`` object of the response body when one is
    present; ``status_code`` is always set.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        type: str | None = None,  # noqa: A002
        code: str | None = None,
        param: str | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.type = type
        self.code = code
        self.param = param
        self.body = body


class AuthenticationError(APIError):
    """The API key was rejected (HTTP 401)."""

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or "Stripe could not authenticate the request with the provided API key",
            status_code=401,
            **kwargs,
        )


class RateLimitError(APIError):
    """The API is limiting the request rate (HTTP 429)."""

    def __init__(
        self, message: str | None = None, retry_after: float | None = None, **kwargs: Any
    ) -> None:
        super().__init__(
            message or "Stripe is currently limiting the rate at which it accepts your requests",
            status_code=429,
            **kwargs,
        )
        self.retry_after = retry_after


class PaginationError(StripeError):
    """Base class for failures while walking a paginated listing."""

    pass


class UpstreamFetchError(PaginationError):
    """A page fetch failed.

    The original exception is kept as ``cause`` (and chained as
    ``__cause__``) so callers can inspect what the remote side said.
    """

    def __init__(self, cause: BaseException, page_index: int | None = None) -> None:
        message = f"Page fetch failed: {type(cause).__name__}: {cause}"
        if page_index is not None:
            message = f"Page {page_index} fetch failed: {type(cause).__name__}: {cause}"
        super().__init__(message)
        self.cause = cause
        self.page_index = page_index


class ProtocolInvariantError(PaginationError):
    """The page fetcher returned something its contract forbids.

    For example a page with ``has_more=True`` and no items. This is a defect
    in the fetcher, not a runtime condition of the remote service.
    """

    pass
