"""Pagination result structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class PaginationResult:
    """Result of a cursor pagination run.

    Attributes:
        data: Transformed items from every page, in fetch order
        pages_fetched: Number of page requests issued
        total_raw: Raw records received across all pages (before filtering)
        rejected: Raw records dropped by the transform step
        final_cursor: Cursor value used for the last request
    """

    data: list[Any] = field(default_factory=list)
    pages_fetched: int = 0
    total_raw: int = 0
    rejected: int = 0
    final_cursor: int = 0
