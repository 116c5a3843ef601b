"""Pagination data structures.

This module defines the values exchanged between the cursor paginator,
its page fetcher and its consumer: pages, cursor state and the tagged
result of a single pull.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")

STARTING_AFTER = "starting_after"
ENDING_BEFORE = "ending_before"


@dataclass(frozen=True)
class Page(Generic[T]):
    """One batch of items returned by a single fetch.

    Attributes:
        items: Items in the order the API returned them
        has_more: Whether more items exist beyond this page
    """

    items: list[T] = field(default_factory=list)
    has_more: bool = False

    def __len__(self) -> int:
        return len(self.items)


class CursorState(Enum):
    """Where a paginator is in its traversal."""

    NOT_STARTED = "not_started"
    ACTIVE = "active"
    EXHAUSTED = "exhausted"


class StepKind(Enum):
    ITEM = "item"
    END = "end"
    ERROR = "error"


@dataclass(frozen=True)
class PageStep(Generic[T]):
    """Tagged outcome of one pull from a paginator.

    Exactly one of the three shapes is produced:
    ``ITEM`` carries ``item``, ``ERROR`` carries ``error``, ``END`` carries nothing.
    """

    kind: StepKind
    item: T | None = None
    error: BaseException | None = None

    @classmethod
    def of(cls, item: T) -> PageStep[T]:
        return cls(StepKind.ITEM, item=item)

    @classmethod
    def end(cls) -> PageStep[T]:
        return cls(StepKind.END)

    @classmethod
    def failed(cls, error: BaseException) -> PageStep[T]:
        return cls(StepKind.ERROR, error=error)


PageFetcher = Callable[[dict[str, Any]], Awaitable[Page[T]]]
IdExtractor = Callable[[Any], str]


def default_id_of(item: Any) -> str:
    """Read an item's identifier from ``item["id"]`` or ``item.id``."""
    if isinstance(item, Mapping):
        return item["id"]
    return item.id


def initial_options(options: Mapping[str, Any] | None) -> dict[str, Any]:
    """Options for the first fetch: the caller's options as given."""
    return dict(options or {})


def next_options(options: Mapping[str, Any] | None, starting_after: str) -> dict[str, Any]:
    """Options for every fetch after the first.

    The caller's ``starting_after`` is replaced by the cursor computed from
    the previous page. ``ending_before`` and all other keys are kept as given.
    """
    out = {k: v for k, v in (options or {}).items() if k != STARTING_AFTER}
    out[STARTING_AFTER] = starting_after
    return out
