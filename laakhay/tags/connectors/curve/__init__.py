"""Curve subgraph connector."""

from .config import (
    PAGE_SIZE,
    PROJECT_NAME,
    SUPPORTED_CHAINS,
    WEBSITE_URL,
    resolve_endpoint,
    supported_chain_ids,
)
from .transform import pool_to_tag, pools_to_tags

__all__ = [
    "PAGE_SIZE",
    "PROJECT_NAME",
    "SUPPORTED_CHAINS",
    "WEBSITE_URL",
    "resolve_endpoint",
    "supported_chain_ids",
    "pool_to_tag",
    "pools_to_tags",
]
