"""Structured logging for pagination runs."""

from __future__ import annotations

import logging

from .definitions import PaginationResult

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    endpoint_id: str,
    page_index: int,
    cursor: int,
    raw_count: int,
    kept_count: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single page.

    Args:
        endpoint_id: Endpoint identifier
        page_index: Zero-based index of the page
        cursor: Cursor value the page was requested with
        raw_count: Records returned by the upstream
        kept_count: Records left after the transform step
        latency_ms: Request latency in milliseconds (optional)
    """
    logger.info(
        "page_fetched",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "cursor": cursor,
            "raw_count": raw_count,
            "kept_count": kept_count,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(
    *,
    endpoint_id: str,
    page_index: int,
    cursor: int,
    error_type: str,
    error_message: str,
) -> None:
    logger.error(
        "page_error",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "cursor": cursor,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_pagination_complete(
    *,
    endpoint_id: str,
    result: PaginationResult,
    total_latency_ms: float | None = None,
) -> None:
    logger.info(
        "pagination_complete",
        extra={
            "endpoint_id": endpoint_id,
            "pages_fetched": result.pages_fetched,
            "total_raw": result.total_raw,
            "total_kept": len(result.data),
            "rejected": result.rejected,
            "final_cursor": result.final_cursor,
            "total_latency_ms": total_latency_ms,
        },
    )
