"""Tests for the subgraph client using httpx.MockTransport."""

import asyncio
import json
from decimal import Decimal

import httpx
import pytest

from pool_router.errors import TransportFailure
from pool_router.subgraph.client import UniswapSubgraphClient
from pool_router.subgraph.queries import GET_POOLS_QUERY, OPERATION_NAME, PageVariables
from tests.helpers import USDC, WETH, make_page_payload, make_subgraph_pool

URL = "https://subgraph.test/uniswap-v3"


def make_client(handler) -> UniswapSubgraphClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return UniswapSubgraphClient(URL, http_client=http_client)


def fetch(handler, variables: PageVariables | None = None):
    """Run fetch_pool_page against a mocked endpoint."""

    async def run():
        async with make_client(handler) as client:
            return await client.fetch_pool_page(variables or PageVariables(skip=0, first=100))

    return asyncio.run(run())


class TestFetchPoolPage:
    def test_returns_records(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=make_page_payload([make_subgraph_pool(WETH, USDC)]))

        records = fetch(handler)

        assert records is not None
        assert len(records) == 1
        assert records[0].tokens == (WETH, USDC)
        assert records[0].fee_tier == Decimal("0.003")

    def test_request_body(self) -> None:
        seen: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(json.loads(request.content))
            return httpx.Response(200, json=make_page_payload([]))

        fetch(handler, PageVariables(skip=300, first=50))

        [body] = seen
        assert body["query"] == GET_POOLS_QUERY
        assert body["operationName"] == OPERATION_NAME
        assert body["variables"] == {"skip": 300, "first": 50}

    def test_query_orders_by_transaction_count(self) -> None:
        assert "orderBy: txCount" in GET_POOLS_QUERY
        assert "orderDirection: desc" in GET_POOLS_QUERY
        assert "liquidity_gt: 0" in GET_POOLS_QUERY

    def test_null_data_returns_none(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=make_page_payload(None))

        assert fetch(handler) is None

    def test_missing_data_returns_none(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={})

        assert fetch(handler) is None

    def test_http_error_status(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="bad gateway")

        with pytest.raises(TransportFailure, match="failed"):
            fetch(handler)

    def test_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportFailure):
            fetch(handler)

    def test_non_json_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>oops</html>")

        with pytest.raises(TransportFailure, match="not JSON"):
            fetch(handler)

    def test_unexpected_shape(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"data": {"pools": [{"token0": "WETH"}]}})

        with pytest.raises(TransportFailure, match="unexpected response shape"):
            fetch(handler)


class TestClientLifecycle:
    def test_injected_client_left_open(self) -> None:
        async def run() -> bool:
            http_client = httpx.AsyncClient(
                transport=httpx.MockTransport(lambda request: httpx.Response(200, json={}))
            )
            async with UniswapSubgraphClient(URL, http_client=http_client):
                pass
            closed = http_client.is_closed
            await http_client.aclose()
            return closed

        assert asyncio.run(run()) is False

    def test_owned_client_closed(self) -> None:
        async def run() -> bool:
            client = UniswapSubgraphClient(URL)
            await client.aclose()
            return client._client.is_closed

        assert asyncio.run(run()) is True
