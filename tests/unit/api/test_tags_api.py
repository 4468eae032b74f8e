"""Unit tests for TagsAPI and return_tags."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from laakhay.tags import (
    CollectingDiagnostics,
    ContractTag,
    GraphQLError,
    HTTPClient,
    MalformedResponseError,
    PaginationLimitError,
    TagsAPI,
    TransportError,
    UnknownError,
    UnsupportedChainError,
    return_tags,
)


def _pools(start_ts: int, count: int, bad_every: int | None = None) -> list[dict]:
    pools = []
    for i in range(count):
        symbol = "<i>" if bad_every and i % bad_every == 0 else f"TK{start_ts + i}"
        pools.append(
            {
                "outputToken": {
                    "id": f"0x{start_ts + i:040x}",
                    "name": f"Token {start_ts + i}",
                    "symbol": symbol,
                },
                "createdTimestamp": str(start_ts + i),
            }
        )
    return pools


def _doc(pools: list[dict]) -> dict:
    return {"data": {"pools": pools}}


def _client(*responses) -> MagicMock:
    client = MagicMock()
    client.post = AsyncMock(side_effect=list(responses))
    return client


def _cursors(client: MagicMock) -> list[int]:
    return [c.kwargs["json_body"]["variables"]["lastTimestamp"] for c in client.post.call_args_list]


class TestReturnTags:
    @pytest.mark.asyncio
    async def test_single_page_filters_invalid_symbol(self):
        pools = [
            {"outputToken": {"id": "0xbad", "name": "Bad", "symbol": "<script>"}, "createdTimestamp": "1"},
            {"outputToken": {"id": "0xusdc", "name": "USD Coin", "symbol": "USDC"}, "createdTimestamp": "2"},
        ]
        client = _client(_doc(pools))
        sink = CollectingDiagnostics()

        tags = await return_tags("1", "key", client=client, diagnostics=sink)

        assert len(tags) == 1
        assert isinstance(tags[0], ContractTag)
        tag = tags[0].to_dict()
        assert tag["Contract Address"] == "eip155:1:0xusdc"
        assert tag["Public Name Tag"] == "USDC Token"
        assert "USDC" in tag["Public Note"]
        assert len(sink.of_type("record_rejected")) == 1
        assert client.post.call_count == 1

    @pytest.mark.asyncio
    async def test_multi_page_cursor_and_order(self):
        page1 = _pools(1_000, 1000, bad_every=100)
        page2 = _pools(5_000, 1000, bad_every=250)
        page3 = _pools(9_000, 400)
        client = _client(_doc(page1), _doc(page2), _doc(page3))

        tags = await return_tags("1", "key", client=client, diagnostics=CollectingDiagnostics())

        assert client.post.call_count == 3
        assert _cursors(client) == [0, 1_999, 5_999]
        # 10 rejected on page 1, 4 on page 2, none on page 3
        assert len(tags) == 990 + 996 + 400
        addresses = [t.contract_address for t in tags]
        assert addresses[0] == f"eip155:1:0x{1_001:040x}"
        assert addresses[-1] == f"eip155:1:0x{9_399:040x}"
        timestamps = [int(a.rsplit(":", 1)[1], 16) for a in addresses]
        assert timestamps == sorted(timestamps)

    @pytest.mark.asyncio
    async def test_request_shape(self):
        client = _client(_doc([]))

        await return_tags("1", "my key", client=client)

        args, kwargs = client.post.call_args
        assert "my%20key" in args[0]
        assert kwargs["headers"] == {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        assert "pools(" in kwargs["json_body"]["query"]
        assert kwargs["json_body"]["variables"] == {"lastTimestamp": 0}

    @pytest.mark.asyncio
    async def test_unsupported_chain_before_any_request(self):
        client = _client()

        with pytest.raises(UnsupportedChainError) as exc_info:
            await return_tags("999", "key", client=client)

        assert exc_info.value.supported == ["1"]
        client.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_failure_on_second_page_returns_nothing(self):
        client = _client(_doc(_pools(1, 1000)), TransportError("HTTP 500", status_code=500))

        with pytest.raises(TransportError) as exc_info:
            await return_tags("1", "key", client=client)

        assert exc_info.value.status_code == 500
        assert client.post.call_count == 2
        assert exc_info.value.__notes__ == ["curve_pools:1 page 1 (cursor=1000)"]

    @pytest.mark.asyncio
    async def test_graphql_error_on_page(self):
        sink = CollectingDiagnostics()
        client = _client({"errors": [{"message": "store error"}]})

        with pytest.raises(GraphQLError):
            await return_tags("1", "key", client=client, diagnostics=sink)

        assert sink.of_type("graphql_error")[0].fields["error_message"] == "store error"

    @pytest.mark.asyncio
    async def test_malformed_response(self):
        client = _client({"data": {"liquidityPools": []}})

        with pytest.raises(MalformedResponseError):
            await return_tags("1", "key", client=client)

    @pytest.mark.asyncio
    async def test_unexpected_error_wrapped(self):
        client = _client(ValueError("not json"))

        with pytest.raises(UnknownError) as exc_info:
            await return_tags("1", "key", client=client)

        assert "not json" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_max_pages(self):
        client = _client(_doc(_pools(1, 1000)), _doc(_pools(2000, 1000)))

        with pytest.raises(PaginationLimitError):
            await return_tags("1", "key", client=client, max_pages=2)

        assert client.post.call_count == 2


class TestTagsAPILifecycle:
    @pytest.mark.asyncio
    async def test_injected_client_not_closed(self):
        client = MagicMock(spec=HTTPClient)
        client.post = AsyncMock(return_value=_doc([]))

        async with TagsAPI(client=client) as api:
            assert await api.fetch_tags("1", "key") == []

        client.close.assert_not_called()

    @pytest.mark.asyncio
    async def test_owned_client_closed(self):
        api = TagsAPI()
        api._client.close = AsyncMock()

        await api.close()
        await api.close()

        api._client.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_http_500_on_second_page_through_http_client(self):
        def response(status: int, payload: dict | None = None) -> AsyncMock:
            r = AsyncMock()
            r.status = status
            r.json = AsyncMock(return_value=payload)
            r.__aenter__ = AsyncMock(return_value=r)
            r.__aexit__ = AsyncMock(return_value=None)
            return r

        client = HTTPClient()
        session = MagicMock()
        session.closed = False
        session.post = MagicMock(
            side_effect=[response(200, _doc(_pools(1, 1000))), response(500)]
        )
        client._session = session

        with pytest.raises(TransportError) as exc_info:
            await return_tags("1", "key", client=client)

        assert exc_info.value.status_code == 500
        assert session.post.call_count == 2
        assert str(exc_info.value) == "HTTP 500 from subgraph endpoint"
        assert "curve_pools:1 page 1 (cursor=1000)" in exc_info.value.__notes__
