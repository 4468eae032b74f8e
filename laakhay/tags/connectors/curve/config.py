"""Curve subgraph configuration: endpoints per chain and tag constants."""

from __future__ import annotations

from types import MappingProxyType
from urllib.parse import quote

from ...core.exceptions import UnsupportedChainError

API_KEY_PLACEHOLDER = "[api-key]"

# Chain id -> subgraph gateway URL template
SUPPORTED_CHAINS = MappingProxyType(
    {
        "1": (
            "https://gateway.thegraph.com/api/[api-key]"
            "/subgraphs/id/3fy93eAT56UJsRCEht8iFhfi6wjHWXtZ9dnnbQmvFopF"
        ),
    }
)

PROJECT_NAME = "Curve"
WEBSITE_URL = "https://curve.fi"

PAGE_SIZE = 1000
NAME_TAG_MAX_LENGTH = 45
NAME_TAG_SUFFIX = " Token"


def supported_chain_ids() -> list[str]:
    return sorted(SUPPORTED_CHAINS, key=int)


def resolve_endpoint(chain_id: str, api_key: str) -> str:
    """Return the subgraph URL for ``chain_id`` with the API key filled in.

    Raises:
        UnsupportedChainError: chain id is not numeric or not configured
    """
    if not chain_id.isdigit() or chain_id not in SUPPORTED_CHAINS:
        raise UnsupportedChainError(chain_id, supported_chain_ids())
    return SUPPORTED_CHAINS[chain_id].replace(API_KEY_PLACEHOLDER, quote(api_key, safe=""))
