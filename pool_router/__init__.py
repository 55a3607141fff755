"""Pool Router - optimal token swap routes over Uniswap v3 pools."""

from pool_router.pools.fetcher import PoolFetcher
from pool_router.routing.graph import PoolGraph, build_graph
from pool_router.snapshot import GraphHandle, refresh_graph

__version__ = "0.1.0"
__all__ = ["GraphHandle", "PoolFetcher", "PoolGraph", "build_graph", "refresh_graph", "__version__"]
