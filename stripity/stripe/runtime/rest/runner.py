"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import aiohttp
from pydantic import BaseModel

from ..pagination import Page
from .transport import RESTTransport


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST" | "DELETE"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_body: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    # Multipart endpoints (file uploads) build a FormData instead of a form-encoded body
    build_form: Callable[[dict[str, Any]], aiohttp.FormData] | None = None
    # List endpoints return {"data": [...], "has_more": bool} and accept cursor params
    paginated: bool = False


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class ModelAdapter(ResponseAdapter):
    """Parse a single API object into ``model``."""

    model: type[BaseModel]

    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return self.model.model_validate(response)


class ListAdapter(ResponseAdapter):
    """Parse a list object into a Page of ``model`` instances."""

    model: type[BaseModel]

    def parse(self, response: Any, params: dict[str, Any]) -> Page[Any]:
        if not isinstance(response, dict) or "data" not in response:
            raise ValueError("Malformed list response: expected an object with 'data'")
        items = [self.model.model_validate(row) for row in response["data"] or []]
        return Page(items=items, has_more=bool(response.get("has_more", False)))


class RestRunner:
    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    async def run(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        params: dict[str, Any],
        connect_account: str | None = None,
    ) -> Any:
        path = spec.build_path(params)
        query = spec.build_query(params) if spec.build_query else None
        body = spec.build_body(params) if spec.build_body else None

        method = spec.method.upper()
        if method == "GET":
            data = await self._t.get(path, params=query, connect_account=connect_account)
        elif method == "DELETE":
            data = await self._t.delete(path, params=query, connect_account=connect_account)
        elif spec.build_form:
            data = await self._t.post(
                path, form=spec.build_form(params), connect_account=connect_account
            )
        else:
            data = await self._t.post(path, body=body, connect_account=connect_account)

        return adapter.parse(data, params)

    async def run_page(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        params: dict[str, Any],
        connect_account: str | None = None,
    ) -> Page[Any]:
        """Run a list endpoint and return one Page."""
        if not spec.paginated:
            raise ValueError(f"Endpoint {spec.id} is not a list endpoint")
        page = await self.run(
            spec=spec, adapter=adapter, params=params, connect_account=connect_account
        )
        if not isinstance(page, Page):
            raise TypeError(f"Adapter for {spec.id} did not return a Page")
        return page
