"""Unit tests for pagination data structures."""

from __future__ import annotations

import pytest

from stripity.stripe.runtime.pagination import Page, PageStep, StepKind, default_id_of
from stripity.stripe.runtime.pagination.definitions import initial_options, next_options


def test_page_defaults():
    page = Page()
    assert page.items == []
    assert page.has_more is False
    assert len(page) == 0


def test_page_is_frozen():
    page = Page(items=[1], has_more=True)
    with pytest.raises(AttributeError):
        page.has_more = False  # type: ignore[misc]


def test_page_step_shapes():
    assert PageStep.of("x").kind is StepKind.ITEM
    assert PageStep.end().item is None
    error = RuntimeError("x")
    assert PageStep.failed(error).error is error


def test_default_id_of_mapping_and_attribute():
    class Obj:
        id = "obj_1"

    assert default_id_of({"id": "m_1"}) == "m_1"
    assert default_id_of(Obj()) == "obj_1"


def test_initial_options_copies():
    options = {"starting_after": "a", "limit": 3}
    first = initial_options(options)
    assert first == options
    assert first is not options
    assert initial_options(None) == {}


def test_next_options_replaces_cursor_and_keeps_bounds():
    options = {"starting_after": "a", "ending_before": "z", "limit": 3}
    assert next_options(options, "m") == {"ending_before": "z", "limit": 3, "starting_after": "m"}
