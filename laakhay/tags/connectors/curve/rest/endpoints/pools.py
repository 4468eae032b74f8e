"""Curve pools endpoint definition and adapter.

Pools are requested in ascending ``createdTimestamp`` order, strictly after
the cursor, one page of ``PAGE_SIZE`` at a time.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from laakhay.tags.core import (
    DiagnosticSink,
    GraphQLError,
    LoggingDiagnostics,
    MalformedResponseError,
)
from laakhay.tags.models import PoolRecord
from laakhay.tags.runtime.rest import ResponseAdapter, RestEndpointSpec

from ...config import PAGE_SIZE, resolve_endpoint

POOLS_QUERY = f"""
query GetPools($lastTimestamp: BigInt) {{
  pools(
    first: {PAGE_SIZE}
    orderBy: createdTimestamp
    orderDirection: asc
    where: {{ createdTimestamp_gt: $lastTimestamp }}
  ) {{
    outputToken {{
      id
      name
      symbol
    }}
    createdTimestamp
  }}
}}
"""

HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def build_url(params: dict[str, Any]) -> str:
    return resolve_endpoint(params["chain_id"], params["api_key"])


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    return {
        "query": POOLS_QUERY,
        "variables": {"lastTimestamp": int(params.get("last_timestamp", 0))},
    }


def build_headers(params: dict[str, Any]) -> dict[str, str]:
    return dict(HEADERS)


# Endpoint specification
SPEC = RestEndpointSpec(
    id="curve_pools",
    build_url=build_url,
    build_body=build_body,
    build_headers=build_headers,
    page_size=PAGE_SIZE,
)


def _error_messages(errors: Any) -> list[str]:
    if not isinstance(errors, list):
        return [str(errors)]
    messages = []
    for err in errors:
        if isinstance(err, dict) and "message" in err:
            messages.append(str(err["message"]))
        else:
            messages.append(str(err))
    return messages


class Adapter(ResponseAdapter):
    """Adapter for parsing the pools GraphQL response into PoolRecords."""

    def __init__(self, diagnostics: DiagnosticSink | None = None) -> None:
        self._diagnostics = diagnostics or LoggingDiagnostics()

    def parse(self, response: Any, params: dict[str, Any]) -> list[PoolRecord]:
        """Parse the pools response.

        Args:
            response: Decoded JSON document
            params: Request parameters containing chain_id and last_timestamp

        Returns:
            Pool records in upstream order
        """
        context = f"chain {params.get('chain_id')}, cursor {params.get('last_timestamp', 0)}"

        if not isinstance(response, dict):
            raise MalformedResponseError(
                f"Invalid response format ({context}): expected object, got "
                f"{type(response).__name__}"
            )

        errors = response.get("errors")
        if errors:
            messages = _error_messages(errors)
            for message in messages:
                self._diagnostics.emit(
                    "graphql_error",
                    chain_id=params.get("chain_id"),
                    cursor=params.get("last_timestamp", 0),
                    error_message=message,
                )
            raise GraphQLError(
                f"Subgraph returned {len(messages)} error(s) ({context}): "
                + "; ".join(messages),
                messages=messages,
            )

        data = response.get("data")
        pools = data.get("pools") if isinstance(data, dict) else None
        if not isinstance(pools, list):
            raise MalformedResponseError(f"Response missing 'data.pools' list ({context})")

        try:
            return [PoolRecord.model_validate(pool) for pool in pools]
        except ValidationError as e:
            raise MalformedResponseError(f"Malformed pool record ({context}): {e}") from e
