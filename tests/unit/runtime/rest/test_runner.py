"""Unit tests for RestRunner dispatch and the list adapter."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest
from pydantic import BaseModel

from stripity.stripe.runtime.pagination import Page
from stripity.stripe.runtime.rest import (
    ListAdapter,
    ModelAdapter,
    ResponseAdapter,
    RestEndpointSpec,
    RestRunner,
)


class Thing(BaseModel):
    id: str


class ThingAdapter(ModelAdapter):
    model = Thing


class ThingPageAdapter(ListAdapter):
    model = Thing


def make_runner():
    transport = MagicMock()
    transport.get = AsyncMock(return_value={"id": "th_1"})
    transport.post = AsyncMock(return_value={"id": "th_1"})
    transport.delete = AsyncMock(return_value={"id": "th_1"})
    return RestRunner(transport), transport


RETRIEVE = RestEndpointSpec(
    id="retrieve_thing",
    method="GET",
    build_path=lambda p: f"things/{p['id']}",
    build_query=lambda p: {"expand": p.get("expand")} if p.get("expand") else {},
)
CREATE = RestEndpointSpec(
    id="create_thing",
    method="POST",
    build_path=lambda p: "things",
    build_body=lambda p: {"name": p["name"]},
)
DELETE = RestEndpointSpec(
    id="delete_thing",
    method="DELETE",
    build_path=lambda p: f"things/{p['id']}",
)
LIST = RestEndpointSpec(
    id="list_things",
    method="GET",
    build_path=lambda p: "things",
    build_query=lambda p: {"limit": p.get("limit", 10)},
    paginated=True,
)


class TestRun:
    @pytest.mark.asyncio
    async def test_get_uses_query(self):
        runner, transport = make_runner()

        result = await runner.run(
            spec=RETRIEVE, adapter=ThingAdapter(), params={"id": "th_1", "expand": ["owner"]}
        )

        assert result == Thing(id="th_1")
        transport.get.assert_awaited_once_with(
            "things/th_1", params={"expand": ["owner"]}, connect_account=None
        )

    @pytest.mark.asyncio
    async def test_post_uses_body(self):
        runner, transport = make_runner()

        await runner.run(
            spec=CREATE, adapter=ThingAdapter(), params={"name": "x"}, connect_account="acct_1"
        )

        transport.post.assert_awaited_once_with(
            "things", body={"name": "x"}, connect_account="acct_1"
        )
        transport.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_without_query(self):
        runner, transport = make_runner()

        await runner.run(spec=DELETE, adapter=ResponseAdapter(), params={"id": "th_9"})

        transport.delete.assert_awaited_once_with("things/th_9", params=None, connect_account=None)

    @pytest.mark.asyncio
    async def test_raw_adapter_returns_json(self):
        runner, _ = make_runner()
        result = await runner.run(spec=RETRIEVE, adapter=ResponseAdapter(), params={"id": "th_1"})
        assert result == {"id": "th_1"}


class TestRunPage:
    @pytest.mark.asyncio
    async def test_returns_page(self):
        runner, transport = make_runner()
        transport.get.return_value = {
            "object": "list",
            "data": [{"id": "th_1"}, {"id": "th_2"}],
            "has_more": True,
        }

        page = await runner.run_page(spec=LIST, adapter=ThingPageAdapter(), params={"limit": 2})

        assert isinstance(page, Page)
        assert [t.id for t in page.items] == ["th_1", "th_2"]
        assert page.has_more is True
        transport.get.assert_awaited_once_with("things", params={"limit": 2}, connect_account=None)

    @pytest.mark.asyncio
    async def test_rejects_non_list_spec(self):
        runner, transport = make_runner()
        with pytest.raises(ValueError, match="not a list endpoint"):
            await runner.run_page(spec=RETRIEVE, adapter=ThingPageAdapter(), params={"id": "x"})
        transport.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejects_adapter_without_page(self):
        runner, _ = make_runner()
        with pytest.raises(TypeError):
            await runner.run_page(spec=LIST, adapter=ResponseAdapter(), params={})


class TestListAdapter:
    def test_missing_data(self):
        with pytest.raises(ValueError, match="Malformed list response"):
            ThingPageAdapter().parse({"object": "list"}, {})

    def test_null_data_and_missing_has_more(self):
        page = ThingPageAdapter().parse({"data": None}, {})
        assert page.items == []
        assert page.has_more is False


class TestMultipart:
    @pytest.mark.asyncio
    async def test_post_with_form(self):
        runner, transport = make_runner()
        form = aiohttp.FormData()
        spec = RestEndpointSpec(
            id="upload_thing",
            method="POST",
            build_path=lambda p: "https://files.example.com/v1/things",
            build_form=lambda p: form,
        )

        await runner.run(spec=spec, adapter=ThingAdapter(), params={})

        transport.post.assert_awaited_once_with(
            "https://files.example.com/v1/things", form=form, connect_account=None
        )
