"""Core components."""

from .diagnostics import (
    CollectingDiagnostics,
    DiagnosticEvent,
    DiagnosticSink,
    LoggingDiagnostics,
)
from .exceptions import (
    GraphQLError,
    MalformedResponseError,
    PaginationLimitError,
    TagsError,
    TransportError,
    UnknownError,
    UnsupportedChainError,
)

__all__ = [
    # Exceptions
    "TagsError",
    "UnsupportedChainError",
    "TransportError",
    "GraphQLError",
    "MalformedResponseError",
    "UnknownError",
    "PaginationLimitError",
    # Diagnostics
    "DiagnosticSink",
    "DiagnosticEvent",
    "LoggingDiagnostics",
    "CollectingDiagnostics",
]
