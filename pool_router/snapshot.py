"""Live graph handle and the fetch-build-swap refresh cycle.

A new PoolGraph is built off to the side and published with a single
reference swap, so readers see either the previous graph or the new one.
"""

from __future__ import annotations

import asyncio
import threading

import structlog

from pool_router.errors import NoPoolData
from pool_router.pools.fetcher import PoolFetcher
from pool_router.routing.graph import PoolGraph

logger = structlog.get_logger()


class GraphHandle:
    """Holder of the currently published PoolGraph.

    Starts with an empty graph. ``ready`` turns True once a graph built
    from fetched data has been published.
    """

    def __init__(self, graph: PoolGraph | None = None) -> None:
        self._lock = threading.Lock()
        self._graph = graph if graph is not None else PoolGraph()
        self._ready = graph is not None
        self._version = 0

    @property
    def current(self) -> PoolGraph:
        """The published graph. Safe to query without further locking."""
        with self._lock:
            return self._graph

    @property
    def ready(self) -> bool:
        with self._lock:
            return self._ready

    @property
    def version(self) -> int:
        """Number of graphs published through ``replace``."""
        with self._lock:
            return self._version

    def replace(self, graph: PoolGraph) -> PoolGraph:
        """Publish ``graph`` and return the one it replaces."""
        with self._lock:
            previous = self._graph
            self._graph = graph
            self._ready = True
            self._version += 1
            version = self._version
        logger.info(
            "graph_replaced",
            version=version,
            tokens=graph.token_count,
            previous_tokens=previous.token_count,
        )
        return previous


async def refresh_graph(
    fetcher: PoolFetcher,
    handle: GraphHandle,
    n_pools: int | None = None,
    batch_size: int | None = None,
) -> PoolGraph:
    """Fetch pools, build a graph and publish it.

    The graph is built in a worker thread so the event loop keeps serving
    queries against the previous graph meanwhile.

    Returns:
        The graph now published (the previous one if nothing was fetched)

    Raises:
        NoPoolData: If nothing was fetched and no graph has been published yet
    """
    records = await fetcher.fetch_all_pools(n_pools, batch_size)
    if not records:
        if not handle.ready:
            raise NoPoolData("no pool data fetched for the initial graph build")
        logger.warning("refresh_empty_keeping_stale_graph", version=handle.version)
        return handle.current

    loop = asyncio.get_running_loop()
    graph = await loop.run_in_executor(None, PoolGraph.from_records, records)
    handle.replace(graph)
    return graph


__all__ = ["GraphHandle", "refresh_graph"]
