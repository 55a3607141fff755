"""Look up swap routes against live Uniswap v3 pool data.

Fetches the pool set from the subgraph, builds the pool graph and prints
the best routes between two tokens.

Usage:
    python -m scripts.find_routes WETH LINK --pools 1000 --depth 3 --top 5
"""

import argparse
import asyncio

import structlog

from pool_router.config import get_settings
from pool_router.pools.fetcher import PoolFetcher
from pool_router.routing.graph import PoolGraph
from pool_router.routing.types import Route
from pool_router.subgraph.client import UniswapSubgraphClient

logger = structlog.get_logger()


async def find_routes(
    token0: str,
    token1: str,
    n_pools: int,
    batch_size: int,
    depth: int,
) -> list[Route]:
    """Fetch pools and rank the routes from token0 to token1."""
    settings = get_settings()
    async with UniswapSubgraphClient(
        settings.subgraph_url, timeout_seconds=settings.request_timeout_seconds
    ) as client:
        fetcher = PoolFetcher(client, n_retries=settings.n_retries)
        pools = await fetcher.fetch_all_pools(n_pools, batch_size)

    graph = PoolGraph.from_records(pools)
    if not graph.has_token(token0) or not graph.has_token(token1):
        logger.warning("unknown_token", token0=token0, token1=token1)
    return graph.routes(token0, token1, depth)


def main() -> None:
    """Entry point for the route lookup script."""
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Find swap routes between two tokens")
    parser.add_argument("token0", help="Symbol of the token to sell")
    parser.add_argument("token1", help="Symbol of the token to buy")
    parser.add_argument(
        "--pools",
        type=int,
        default=settings.n_pools,
        help="Number of pools to fetch",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=settings.batch_size,
        help="Pools per subgraph request",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=settings.route_depth,
        help="Max intermediate tokens per route",
    )
    parser.add_argument("--top", type=int, default=5, help="Number of routes to print")

    args = parser.parse_args()

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ]
    )

    routes = asyncio.run(
        find_routes(args.token0, args.token1, args.pools, args.batch_size, args.depth)
    )

    if not routes:
        print(f"\nNo route from {args.token0} to {args.token1}")
        return

    best = routes[0]
    print(f"\n{len(routes)} routes from {best.source} to {best.destination}:")
    for route in routes[: args.top]:
        via = ", ".join(route.intermediates) or "direct"
        print(f"  {' -> '.join(route.path)}: {route.score:.12g} ({route.hops} hops, via {via})")


if __name__ == "__main__":
    main()
