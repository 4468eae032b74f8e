"""Cursor pagination over timestamp-ordered pages.

The paginator requests one page at a time, advancing a timestamp watermark
until the upstream returns a page shorter than the page size. Pages are never
requested concurrently since every cursor depends on the previous page.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from time import perf_counter
from typing import Any

from ...core.exceptions import PaginationLimitError, TagsError, UnknownError
from .definitions import PaginationResult
from .telemetry import log_page_error, log_page_fetched, log_pagination_complete


class CursorPaginator:
    """Fetches pages by cursor and aggregates transformed items.

    A run either returns every page's items or raises; partial results are
    never handed back to the caller.
    """

    def __init__(
        self,
        *,
        page_size: int,
        cursor_of: Callable[[Any], int],
        endpoint_id: str = "unknown",
        max_pages: int | None = None,
    ) -> None:
        """Initialize paginator.

        Args:
            page_size: Number of records in a full page
            cursor_of: Returns the cursor value (timestamp) of a raw record
            endpoint_id: Endpoint identifier used in logs and error messages
            max_pages: Optional hard cap on requests; ``None`` keeps going
                for as long as the upstream returns full pages
        """
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        if max_pages is not None and max_pages <= 0:
            raise ValueError("max_pages must be positive")
        self._page_size = page_size
        self._cursor_of = cursor_of
        self._endpoint_id = endpoint_id
        self._max_pages = max_pages

    async def execute(
        self,
        *,
        fetch_page: Callable[[int], Awaitable[list[Any]]],
        transform: Callable[[list[Any]], list[Any]] | None = None,
    ) -> PaginationResult:
        """Run pagination from cursor 0 until a short page arrives.

        Args:
            fetch_page: Async function taking the cursor and returning raw records
            transform: Optional function mapping a raw page to output items

        Returns:
            PaginationResult with items from all pages in fetch order
        """
        result = PaginationResult()
        cursor = 0
        run_start = perf_counter()

        while True:
            page_index = result.pages_fetched
            page_start = perf_counter()
            try:
                raw = await fetch_page(cursor)
                kept = transform(raw) if transform else list(raw)
            except TagsError as e:
                log_page_error(
                    endpoint_id=self._endpoint_id,
                    page_index=page_index,
                    cursor=cursor,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                e.add_note(f"{self._endpoint_id} page {page_index} (cursor={cursor})")
                raise
            except Exception as e:
                log_page_error(
                    endpoint_id=self._endpoint_id,
                    page_index=page_index,
                    cursor=cursor,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise UnknownError(
                    f"Unexpected failure on {self._endpoint_id} page {page_index} "
                    f"(cursor={cursor}): {e}"
                ) from e

            result.pages_fetched += 1
            result.total_raw += len(raw)
            result.rejected += len(raw) - len(kept)
            result.final_cursor = cursor
            result.data.extend(kept)

            log_page_fetched(
                endpoint_id=self._endpoint_id,
                page_index=page_index,
                cursor=cursor,
                raw_count=len(raw),
                kept_count=len(kept),
                latency_ms=(perf_counter() - page_start) * 1000.0,
            )

            # Short page (including empty) means the upstream is exhausted
            if len(raw) < self._page_size:
                break

            # Rejected records still advance the watermark
            cursor = max(cursor, max(self._cursor_of(record) for record in raw))

            if self._max_pages is not None and result.pages_fetched >= self._max_pages:
                log_page_error(
                    endpoint_id=self._endpoint_id,
                    page_index=page_index,
                    cursor=cursor,
                    error_type=PaginationLimitError.__name__,
                    error_message="page limit reached",
                )
                raise PaginationLimitError(
                    f"{self._endpoint_id} still returned full pages after "
                    f"{self._max_pages} requests (cursor={cursor})",
                    max_pages=self._max_pages,
                )

        log_pagination_complete(
            endpoint_id=self._endpoint_id,
            result=result,
            total_latency_ms=(perf_counter() - run_start) * 1000.0,
        )
        return result
