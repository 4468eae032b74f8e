"""Laakhay Tags - contract tags built from subgraph liquidity pools."""

from .api import TagsAPI, return_tags
from .connectors.curve import (
    PROJECT_NAME,
    SUPPORTED_CHAINS,
    WEBSITE_URL,
    resolve_endpoint,
    supported_chain_ids,
)
from .core import (
    CollectingDiagnostics,
    DiagnosticSink,
    GraphQLError,
    LoggingDiagnostics,
    MalformedResponseError,
    PaginationLimitError,
    TagsError,
    TransportError,
    UnknownError,
    UnsupportedChainError,
)
from .models import ContractTag, OutputToken, PoolRecord
from .utils import HTTPClient, is_invalid, truncate

__version__ = "0.1.0"

__all__ = [
    # API
    "TagsAPI",
    "return_tags",
    "resolve_endpoint",
    "supported_chain_ids",
    "SUPPORTED_CHAINS",
    "PROJECT_NAME",
    "WEBSITE_URL",
    # Models
    "ContractTag",
    "OutputToken",
    "PoolRecord",
    # Utilities
    "HTTPClient",
    "is_invalid",
    "truncate",
    # Diagnostics
    "DiagnosticSink",
    "LoggingDiagnostics",
    "CollectingDiagnostics",
    # Exceptions
    "TagsError",
    "UnsupportedChainError",
    "TransportError",
    "GraphQLError",
    "MalformedResponseError",
    "UnknownError",
    "PaginationLimitError",
]
