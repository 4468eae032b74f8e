"""Cursor pagination layer.

Architecture:
    - definitions.py: Result structure returned by a pagination run
    - executors.py: CursorPaginator, the sequential page loop
    - telemetry.py: Structured logging for pages and runs
"""

from __future__ import annotations

from .definitions import PaginationResult
from .executors import CursorPaginator

__all__ = [
    "CursorPaginator",
    "PaginationResult",
]
