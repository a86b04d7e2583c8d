"""Cursor pagination exposed as one lazy, forward-only iterator."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")

MAX_PAGE_SIZE = 100

PageFetcher = Callable[[str | None, int], tuple[Sequence[T], str | None]]


def page_size(remaining: int | None) -> int:
    if remaining is None:
        return MAX_PAGE_SIZE
    return min(remaining, MAX_PAGE_SIZE)


def cap_page_limit(limit: int | None) -> int | None:
    if limit is None:
        return None
    return min(limit, MAX_PAGE_SIZE)


def stream(fetch_page: PageFetcher[T], limit: int | None = None) -> Iterator[T]:
    """Yield entities page by page until the cursor runs out or ``limit`` is spent.

    A page is only requested once every entity of the previous page has been
    consumed. ``limit`` is decremented by the requested page size, so a short
    page with a non-empty cursor does not end the stream.
    """
    remaining = limit
    cursor: str | None = None
    while remaining is None or remaining > 0:
        size = page_size(remaining)
        entities, cursor = fetch_page(cursor, size)
        yield from entities
        if remaining is not None:
            remaining -= size
        if not cursor:
            return
