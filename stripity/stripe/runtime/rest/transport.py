"""REST transport: signing, encoding and response-to-error mapping.

Architecture:
    RESTTransport sits between the endpoint runner and the raw HTTPClient.
    It owns everything that is the same for every endpoint:
    - Default headers, Bearer authentication and the pinned API version
    - ``Stripe-Account`` header for requests made on behalf of a Connect account
    - Form encoding of query strings and bodies
    - Mapping of HTTP statuses to the library's exception hierarchy
    - Throttling after a 429 that carries ``Retry-After``
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

import aiohttp

from ...core.config import StripeConfig, resolve_value
from ...core.exceptions import APIError, AuthenticationError, HTTPError, RateLimitError
from .encoding import encode_query
from .http_client import HTTPClient

logger = logging.getLogger(__name__)

USER_AGENT = "Stripe/v1 stripity-stripe"
OAUTH_BASE_URL = "https://connect.stripe.com/oauth/"


def _parse_retry_after(headers: Mapping[str, str]) -> float | None:
    # Only the delay-seconds form is used; an HTTP-date is ignored.
    value = headers.get("Retry-After")
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def retry_after_hook(response: aiohttp.ClientResponse) -> float | None:
    """Return the Retry-After delay of a 429 response, if any."""
    if response.status != 429:
        return None
    return _parse_retry_after(response.headers)


def raise_for_response(status: int, headers: Mapping[str, str], body: Any) -> Any:
    """Return the body of a 2xx response or raise the matching error.

    Args:
        status: HTTP status code
        headers: Response headers
        body: Decoded response body

    Raises:
        AuthenticationError: 401
        RateLimitError: 429
        APIError: any other non-2xx status
    """
    if 200 <= status < 300:
        return body

    error: dict[str, Any] = {}
    message: str | None = None
    if isinstance(body, dict):
        raw = body.get("error")
        if isinstance(raw, dict):
            error = raw
            message = raw.get("message")
        elif isinstance(raw, str):
            # OAuth errors: {"error": "invalid_grant", "error_description": "..."}
            error = {"code": raw}
            message = body.get("error_description") or raw

    details = {
        "type": error.get("type"),
        "code": error.get("code"),
        "param": error.get("param"),
        "body": body,
    }
    if status == 401:
        raise AuthenticationError(message, **details)
    if status == 429:
        raise RateLimitError(
            message,
            retry_after=_parse_retry_after(headers),
            **details,
        )
    raise APIError(
        message or f"The Stripe HTTP client received an error response with status code {status}",
        status_code=status,
        **details,
    )


class RESTTransport:
    """Signed, form-encoded requests against the API root of a StripeConfig."""

    def __init__(self, config: StripeConfig, http: HTTPClient | None = None) -> None:
        self._config = config
        self._http = http or HTTPClient(
            base_url=config.base_url,
            timeout=config.timeout,
            max_connections=config.max_connections,
            use_connection_pool=config.use_connection_pool,
        )
        self._http.add_response_hook(retry_after_hook)

    @property
    def config(self) -> StripeConfig:
        return self._config

    def add_response_hook(self, hook) -> None:
        self._http.add_response_hook(hook)

    def build_headers(
        self,
        api_key: str,
        connect_account: str | None = None,
        extra: Mapping[str, str] | None = None,
    ) -> dict[str, str]:
        """Build request headers.

        Args:
            api_key: Secret key used for Bearer authentication
            connect_account: Connect account id to act on behalf of
            extra: Caller headers; defaults win over them
        """
        headers = dict(extra or {})
        headers.update(
            {
                "Accept": "application/json; charset=utf8",
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/x-www-form-urlencoded",
                "User-Agent": USER_AGENT,
                "Stripe-Version": self._config.api_version,
            }
        )
        if connect_account:
            headers["Stripe-Account"] = connect_account
        return headers

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
        form: aiohttp.FormData | None = None,
        connect_account: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a signed request and return the decoded body.

        Args:
            method: HTTP method
            endpoint: Path relative to the API root (e.g. "charges/ch_1") or absolute URL
            params: Query parameters
            body: Form body parameters
            form: Multipart body; takes the place of ``body`` for file uploads
            connect_account: Overrides the config's Connect account for this request
            headers: Extra headers

        Raises:
            MissingAPIKeyError: No API key configured
            HTTPError: Connection failure or timeout
            APIError: Non-2xx response (or a subclass)
        """
        api_key = self._config.require_api_key()
        req_headers = self.build_headers(
            api_key, connect_account or resolve_value(self._config.connect_account), headers
        )
        url = endpoint if endpoint.startswith("http") else endpoint.lstrip("/")
        if params:
            url = f"{url}?{encode_query(params)}"
        data: str | aiohttp.FormData | None
        if form is not None:
            # aiohttp sets the multipart Content-Type with its boundary
            req_headers.pop("Content-Type", None)
            data = form
        else:
            data = encode_query(body) if body else None

        logger.debug("stripe_request", extra={"method": method, "endpoint": endpoint})
        try:
            status, resp_headers, payload = await self._http.request(
                method, url, data=data, headers=req_headers
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.error(
                "stripe_http_error",
                extra={"method": method, "endpoint": endpoint, "error_type": type(exc).__name__},
            )
            raise HTTPError(str(exc) or None) from exc

        if not 200 <= status < 300:
            logger.warning(
                "stripe_api_error",
                extra={"method": method, "endpoint": endpoint, "status_code": status},
            )
        return raise_for_response(status, resp_headers, payload)

    async def get(self, endpoint: str, params: Mapping[str, Any] | None = None, **kwargs: Any) -> Any:
        return await self.request("GET", endpoint, params=params, **kwargs)

    async def post(self, endpoint: str, body: Mapping[str, Any] | None = None, **kwargs: Any) -> Any:
        return await self.request("POST", endpoint, body=body, **kwargs)

    async def delete(
        self, endpoint: str, params: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> Any:
        return await self.request("DELETE", endpoint, params=params, **kwargs)

    async def oauth_request(self, method: str, endpoint: str, body: Mapping[str, Any]) -> Any:
        """Send a request to the Connect OAuth service (connect.stripe.com)."""
        return await self.request(method, f"{OAUTH_BASE_URL}{endpoint}", body=body)

    async def close(self) -> None:
        await self._http.close()
