"""Cursor pagination for list endpoints.

Architecture:
    The pagination layer consists of:
    - definitions.py: Page, cursor state and tagged pull results
    - paginator.py: CursorPaginator plus the ``stream``/``retrieve_all`` entry points
    - telemetry.py: Structured logging

Usage:
    The paginator knows nothing about HTTP. It is handed a coroutine function
    that fetches one page for a given set of options; the connector builds
    that function from a list endpoint spec.
"""

from __future__ import annotations

from .definitions import (
    ENDING_BEFORE,
    STARTING_AFTER,
    CursorState,
    Page,
    PageFetcher,
    PageStep,
    StepKind,
    default_id_of,
)
from .paginator import CursorPaginator, retrieve_all, stream

__all__ = [
    "Page",
    "PageStep",
    "PageFetcher",
    "StepKind",
    "CursorState",
    "CursorPaginator",
    "STARTING_AFTER",
    "ENDING_BEFORE",
    "default_id_of",
    "stream",
    "retrieve_all",
]
