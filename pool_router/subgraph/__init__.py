"""Query layer for the Uniswap v3 subgraph."""

from pool_router.subgraph.client import UniswapSubgraphClient
from pool_router.subgraph.queries import GET_POOLS_QUERY, PageVariables, build_query

__all__ = ["GET_POOLS_QUERY", "PageVariables", "UniswapSubgraphClient", "build_query"]
