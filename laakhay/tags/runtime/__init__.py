"""Runtime orchestration components."""

from .pagination import CursorPaginator, PaginationResult
from .rest import PostTransport, ResponseAdapter, RestEndpointSpec, RestRunner

__all__ = [
    "CursorPaginator",
    "PaginationResult",
    "PostTransport",
    "ResponseAdapter",
    "RestEndpointSpec",
    "RestRunner",
]
