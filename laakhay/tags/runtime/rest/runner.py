"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol


class PostTransport(Protocol):
    async def post(
        self,
        url: str,
        json_body: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]: ...


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    build_url: Callable[[dict[str, Any]], str]
    build_body: Callable[[dict[str, Any]], dict[str, Any]]
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None
    page_size: int | None = None


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class RestRunner:
    def __init__(self, transport: PostTransport) -> None:
        self._t = transport

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        url = spec.build_url(params)
        body = spec.build_body(params)
        headers = spec.build_headers(params) if spec.build_headers else None

        data = await self._t.post(url, json_body=body, headers=headers)
        return adapter.parse(data, params)
