"""Cursor-based lazy pagination over list endpoints.

Architecture:
    A :class:`CursorPaginator` turns a "fetch one page" coroutine into a
    single async iterator spanning every page of a listing. Pages are pulled
    on demand: the next page is requested only once the consumer has taken
    every item of the current one, and never ahead of time.

    Each pull goes through :meth:`CursorPaginator.step`, which returns a
    tagged :class:`PageStep` (item, end or error). The async-iterator protocol
    is a thin layer over it, so ordinary end-of-listing never travels as an
    exception inside the engine.

Cursor threading:
    - First fetch: the caller's options as given
    - Later fetches: the caller's options minus its ``starting_after``, plus
      ``starting_after`` set to the id of the last item of the previous page
    - ``ending_before`` (and every other key) is forwarded unchanged

Failure:
    Any exception raised by the fetcher is wrapped in UpstreamFetchError and
    ends the traversal. A page with ``has_more=True`` and no items raises
    ProtocolInvariantError instead of looping. Fetches are never retried here;
    retry policy belongs to the transport.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Mapping
from time import perf_counter
from typing import Any, Generic, TypeVar

from ...core.exceptions import PaginationError, ProtocolInvariantError, UpstreamFetchError
from .definitions import (
    STARTING_AFTER,
    CursorState,
    IdExtractor,
    Page,
    PageFetcher,
    PageStep,
    StepKind,
    default_id_of,
    initial_options,
    next_options,
)
from .telemetry import log_page_error, log_page_fetched, log_pagination_complete

T = TypeVar("T")


class CursorPaginator(Generic[T]):
    """Lazy, forward-only async iterator over every item of a listing.

    An instance performs exactly one traversal. Iterating it a second time
    yields nothing; build a new paginator (see :func:`stream`) to walk the
    listing again, since the remote data may have changed in between.

    Options reach the fetcher as given, every key included; only
    ``starting_after`` is rewritten between pages.

    Example:
        >>> async with stream(fetch_page, {"limit": 100}) as items:
        ...     async for item in items:
        ...         if item.id == wanted:
        ...             break
    """

    def __init__(
        self,
        fetch_page: PageFetcher[T],
        options: Mapping[str, Any] | None = None,
        *,
        id_of: IdExtractor | None = None,
        listing: str = "listing",
    ) -> None:
        """Initialize paginator.

        Args:
            fetch_page: Coroutine function taking request options and returning a Page
            options: Caller options (cursor keys plus anything the fetcher understands)
            id_of: Identity extractor used to derive the next cursor
            listing: Name used in log events
        """
        self._fetch_page = fetch_page
        self._options = dict(options or {})
        self._id_of = id_of or default_id_of
        self._listing = listing

        self._state = CursorState.NOT_STARTED
        self._cursor: str | None = None
        self._buffer: deque[T] = deque()
        self._pages_fetched = 0
        self._items_yielded = 0
        self._completion_logged = False

    @property
    def state(self) -> CursorState:
        return self._state

    @property
    def cursor(self) -> str | None:
        """Identifier of the last item of the last page fetched, if any."""
        return self._cursor

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    @property
    def items_yielded(self) -> int:
        return self._items_yielded

    async def step(self) -> PageStep[T]:
        """Pull the next item.

        Fetches a page only when the buffered page has been fully consumed.

        Returns:
            ``PageStep`` tagged ITEM, END or ERROR. After an ERROR every
            further step is END.
        """
        if not self._buffer and self._state is not CursorState.EXHAUSTED:
            try:
                await self._fetch_next()
            except PaginationError as exc:
                self._release()
                return PageStep.failed(exc)
            except BaseException:
                # Cancellation: stop without wrapping.
                self._release()
                raise

        if self._buffer:
            self._items_yielded += 1
            return PageStep.of(self._buffer.popleft())

        if not self._completion_logged:
            self._completion_logged = True
            log_pagination_complete(
                listing=self._listing,
                pages_fetched=self._pages_fetched,
                items_yielded=self._items_yielded,
            )
        return PageStep.end()

    async def _fetch_next(self) -> None:
        if self._cursor is None:
            options = initial_options(self._options)
        else:
            options = next_options(self._options, self._cursor)

        page_index = self._pages_fetched
        self._pages_fetched += 1
        start = perf_counter()
        try:
            page: Page[T] = await self._fetch_page(options)
        except Exception as exc:
            log_page_error(
                listing=self._listing,
                page_index=page_index,
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
            raise UpstreamFetchError(exc, page_index=page_index) from exc

        items = list(page.items)
        log_page_fetched(
            listing=self._listing,
            page_index=page_index,
            item_count=len(items),
            has_more=page.has_more,
            starting_after=options.get(STARTING_AFTER),
            latency_ms=(perf_counter() - start) * 1000.0,
        )

        if not page.has_more:
            self._buffer.extend(items)
            self._state = CursorState.EXHAUSTED
            return

        if not items:
            raise ProtocolInvariantError(
                f"Page {page_index} of {self._listing} reported has_more=True with no items"
            )
        try:
            cursor = self._id_of(items[-1])
        except (KeyError, AttributeError) as exc:
            raise ProtocolInvariantError(
                f"Last item of page {page_index} of {self._listing} has no identifier"
            ) from exc
        if not isinstance(cursor, str) or not cursor:
            raise ProtocolInvariantError(
                f"Last item of page {page_index} of {self._listing} has an unusable "
                f"identifier: {cursor!r}"
            )

        self._buffer.extend(items)
        self._cursor = cursor
        self._state = CursorState.ACTIVE

    def _release(self) -> None:
        self._buffer.clear()
        self._state = CursorState.EXHAUSTED
        # A failed or abandoned traversal is not "complete".
        self._completion_logged = True

    async def aclose(self) -> None:
        """Abandon the traversal. No further page is fetched."""
        self._release()

    def __aiter__(self) -> CursorPaginator[T]:
        return self

    async def __anext__(self) -> T:
        step = await self.step()
        if step.kind is StepKind.ITEM:
            return step.item  # type: ignore[return-value]
        if step.kind is StepKind.ERROR:
            assert step.error is not None
            raise step.error
        raise StopAsyncIteration

    async def __aenter__(self) -> CursorPaginator[T]:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


def stream(
    fetch_page: PageFetcher[T],
    options: Mapping[str, Any] | None = None,
    *,
    id_of: IdExtractor | None = None,
    listing: str = "listing",
) -> CursorPaginator[T]:
    """Create a fresh paginator over a listing.

    Args:
        fetch_page: Coroutine function taking request options and returning a Page
        options: Initial options; ``starting_after``/``ending_before`` are cursor keys
        id_of: Identity extractor (default reads ``id``)
        listing: Name used in log events

    Returns:
        A new CursorPaginator. Nothing is fetched until it is iterated.
    """
    return CursorPaginator(fetch_page, options, id_of=id_of, listing=listing)


async def retrieve_all(
    fetch_page: PageFetcher[T],
    options: Mapping[str, Any] | None = None,
    *,
    id_of: IdExtractor | None = None,
    listing: str = "listing",
) -> list[T]:
    """Fetch every page of a listing and return all items in order.

    All-or-nothing: if any page fails the error is raised and the items of
    earlier pages are discarded.

    Raises:
        UpstreamFetchError: A page fetch failed
        ProtocolInvariantError: The fetcher broke its contract
    """
    async with stream(fetch_page, options, id_of=id_of, listing=listing) as paginator:
        return [item async for item in paginator]
