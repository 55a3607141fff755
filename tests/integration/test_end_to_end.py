"""End-to-end: mocked subgraph -> fetch coordinator -> pool graph -> routes."""

import asyncio
import json

import httpx

from pool_router.pools.fetcher import PoolFetcher
from pool_router.snapshot import GraphHandle, refresh_graph
from pool_router.subgraph.client import UniswapSubgraphClient
from tests.helpers import DAI, LINK, USDC, WETH, make_page_payload, make_subgraph_pool

URL = "https://subgraph.test/uniswap-v3"

PAGES = {
    0: [
        make_subgraph_pool(WETH, USDC, "3000", "2000", "0.0005"),
        make_subgraph_pool(USDC, LINK, "3000", "10", "0.1"),
    ],
    2: [
        make_subgraph_pool(WETH, DAI, "500", "1990", "0.0005"),
    ],
    4: [
        make_subgraph_pool(DAI, LINK, "3000", "10.5", "0.095"),
    ],
}


def run_refresh(handler, n_pools: int = 6, batch_size: int = 2) -> GraphHandle:
    handle = GraphHandle()

    async def run() -> None:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        async with UniswapSubgraphClient(URL, http_client=http_client) as client:
            await refresh_graph(PoolFetcher(client, n_retries=3), handle, n_pools, batch_size)
        await http_client.aclose()

    asyncio.run(run())
    return handle


class TestEndToEnd:
    def test_full_refresh(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            skip = json.loads(request.content)["variables"]["skip"]
            return httpx.Response(200, json=make_page_payload(PAGES[skip]))

        graph = run_refresh(handler).current

        assert set(graph.tokens()) == {WETH, USDC, LINK, DAI}
        routes = graph.routes(WETH, LINK, 3)
        assert {route.path for route in routes} == {(WETH, USDC, LINK), (WETH, DAI, LINK)}
        best = graph.optimal_route(WETH, LINK)
        assert best == routes[0]

    def test_failing_page_is_left_out(self) -> None:
        attempts: dict[int, int] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            skip = json.loads(request.content)["variables"]["skip"]
            attempts[skip] = attempts.get(skip, 0) + 1
            if skip == 2:
                return httpx.Response(200, json=make_page_payload(None))
            if skip == 4:
                return httpx.Response(503, text="unavailable")
            return httpx.Response(200, json=make_page_payload(PAGES[skip]))

        graph = run_refresh(handler).current

        assert set(graph.tokens()) == {WETH, USDC, LINK}
        assert attempts == {0: 1, 2: 3, 4: 1}
        best = graph.optimal_route(WETH, LINK)
        assert best is not None
        assert best.path == (WETH, USDC, LINK)
