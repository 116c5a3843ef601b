"""HTTP client helper."""

from __future__ import annotations

import asyncio
import json
import time
from collections.abc import Callable, Mapping
from typing import Any

import aiohttp

# A hook sees every response and may return a delay (seconds) to wait
# before the next request.
ResponseHook = Callable[[aiohttp.ClientResponse], float | None]


class HTTPClient:
    """Async HTTP client wrapper with a lazily created pooled session."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        max_connections: int = 10,
        use_connection_pool: bool = True,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.max_connections = max_connections
        self.use_connection_pool = use_connection_pool
        self._session: aiohttp.ClientSession | None = None
        self._response_hooks: list[ResponseHook] = []
        self._throttle_until: float | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(
                limit=self.max_connections,
                force_close=not self.use_connection_pool,
            )
            self._session = aiohttp.ClientSession(timeout=self.timeout, connector=connector)
        return self._session

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._response_hooks.append(hook)

    def set_throttle(self, seconds: float) -> None:
        """Hold the next request back for ``seconds``. Never shortens an existing window."""
        if seconds <= 0:
            return
        until = time.time() + seconds
        if self._throttle_until is None or until > self._throttle_until:
            self._throttle_until = until

    async def _wait_for_throttle(self) -> None:
        if self._throttle_until is None:
            return
        delay = self._throttle_until - time.time()
        self._throttle_until = None
        if delay > 0:
            await asyncio.sleep(delay)

    def _resolve_url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def request(
        self,
        method: str,
        url: str,
        *,
        data: str | aiohttp.FormData | None = None,
        headers: dict[str, str] | None = None,
    ) -> tuple[int, Mapping[str, str], Any]:
        """Send a request.

        Returns:
            ``(status, headers, body)`` where body is decoded JSON, raw text when
            the payload is not JSON, or None when empty. Non-2xx statuses are
            returned, not raised.
        """
        await self._wait_for_throttle()
        url = self._resolve_url(url)

        async with self.session.request(method, url, data=data, headers=headers) as response:
            for hook in self._response_hooks:
                delay = hook(response)
                if delay:
                    self.set_throttle(delay)
            text = await response.text()
            # copy keeps the case-insensitive lookup of CIMultiDict
            return response.status, response.headers.copy(), _decode(text)

    async def get(self, url: str, headers: dict[str, str] | None = None) -> tuple[int, Mapping[str, str], Any]:
        """GET request."""
        return await self.request("GET", url, headers=headers)

    async def post(
        self, url: str, data: str | None = None, headers: dict[str, str] | None = None
    ) -> tuple[int, Mapping[str, str], Any]:
        """POST request."""
        return await self.request("POST", url, data=data, headers=headers)

    async def delete(self, url: str, headers: dict[str, str] | None = None) -> tuple[int, Mapping[str, str], Any]:
        """DELETE request."""
        return await self.request("DELETE", url, headers=headers)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def _decode(text: str) -> Any:
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text
