"""Pool retrieval package.

Provides PoolFetcher for assembling the pool set from the subgraph.
"""

from .fetcher import PoolFetcher, PoolPageSource, fetch_all_pools, page_windows

__all__ = ["PoolFetcher", "PoolPageSource", "fetch_all_pools", "page_windows"]
