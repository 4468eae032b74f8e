"""TagsAPI facade for fetching contract tags from subgraph pools.

Architecture:
    TagsAPI wires the pieces of a fetch together:
    - Endpoint resolution (chain id + API key -> subgraph URL)
    - RestRunner + pools endpoint spec/adapter for each page request
    - CursorPaginator for the sequential timestamp-cursor loop
    - Record transform (pool -> ContractTag) applied to every page

Design Decisions:
    - Client injection allows sharing one aiohttp session across calls
      and testing with mock transports
    - Endpoint is resolved before any request is sent
    - Errors propagate to the caller; no partial tag list is returned
"""

from __future__ import annotations

import logging
from typing import Any

from ..connectors.curve.config import resolve_endpoint
from ..connectors.curve.rest.endpoints import pools as pools_endpoint
from ..connectors.curve.transform import pools_to_tags
from ..core import DiagnosticSink, LoggingDiagnostics
from ..models import ContractTag, PoolRecord
from ..runtime.pagination import CursorPaginator
from ..runtime.rest import PostTransport, RestRunner
from ..utils.http import HTTPClient

logger = logging.getLogger(__name__)


class TagsAPI:
    """High-level facade for building contract tags from a subgraph.

    Example:
        >>> async with TagsAPI() as api:
        ...     tags = await api.fetch_tags(chain_id="1", api_key="...")
        ...     print(tags[0].to_dict())
    """

    def __init__(
        self,
        *,
        client: PostTransport | None = None,
        diagnostics: DiagnosticSink | None = None,
        max_pages: int | None = None,
    ) -> None:
        """Initialize the TagsAPI.

        Args:
            client: Optional transport with an async ``post`` (creates an
                HTTPClient if not provided)
            diagnostics: Sink for rejected records and GraphQL error messages
            max_pages: Optional cap on page requests per fetch
        """
        self._owns_client = client is None
        self._client = client or HTTPClient()
        self._diagnostics = diagnostics or LoggingDiagnostics()
        self._max_pages = max_pages
        self._closed = False

    async def fetch_tags(self, chain_id: str, api_key: str) -> list[ContractTag]:
        """Fetch every pool on ``chain_id`` and return tags for the valid ones.

        Raises:
            UnsupportedChainError: before any request when the chain is unknown
            TransportError, GraphQLError, MalformedResponseError, UnknownError:
                when any page fails
        """
        # Fail fast on unsupported chains
        resolve_endpoint(chain_id, api_key)

        runner = RestRunner(self._client)
        adapter = pools_endpoint.Adapter(diagnostics=self._diagnostics)
        spec = pools_endpoint.SPEC

        async def fetch_page(cursor: int) -> list[PoolRecord]:
            params: dict[str, Any] = {
                "chain_id": chain_id,
                "api_key": api_key,
                "last_timestamp": cursor,
            }
            return await runner.run(spec=spec, adapter=adapter, params=params)

        def transform(pools: list[PoolRecord]) -> list[ContractTag]:
            return pools_to_tags(chain_id, pools, diagnostics=self._diagnostics)

        paginator = CursorPaginator(
            page_size=spec.page_size,
            cursor_of=lambda pool: pool.created_timestamp,
            endpoint_id=f"{spec.id}:{chain_id}",
            max_pages=self._max_pages,
        )
        logger.debug("Fetching tags", extra={"chain_id": chain_id})
        result = await paginator.execute(fetch_page=fetch_page, transform=transform)
        return result.data

    # --- Lifecycle -----------------------------------------------------------

    async def close(self) -> None:
        """Close the API and clean up resources."""
        if self._closed:
            return
        self._closed = True
        logger.debug("Closing TagsAPI")
        if self._owns_client and isinstance(self._client, HTTPClient):
            await self._client.close()

    async def __aenter__(self) -> TagsAPI:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()


async def return_tags(
    chain_id: str,
    api_key: str,
    *,
    client: PostTransport | None = None,
    diagnostics: DiagnosticSink | None = None,
    max_pages: int | None = None,
) -> list[ContractTag]:
    """Fetch all pools for ``chain_id`` and return their contract tags.

    A one-shot wrapper around ``TagsAPI.fetch_tags``. When ``client`` is not
    given, a fresh HTTP session is opened and closed around the call.
    """
    async with TagsAPI(client=client, diagnostics=diagnostics, max_pages=max_pages) as api:
        return await api.fetch_tags(chain_id, api_key)
