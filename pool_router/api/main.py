"""FastAPI application serving routes over the live pool graph.

On startup the pool set is fetched once and a scheduler keeps the graph
fresh. Set ROUTER_REFRESH_ON_STARTUP=false to start with an empty graph.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import Depends, FastAPI

from pool_router.api.endpoints import get_graph_handle, router
from pool_router.config import get_settings
from pool_router.errors import NoPoolData
from pool_router.models.api import HealthResponse
from pool_router.pools.fetcher import PoolFetcher
from pool_router.scheduler import RefreshScheduler
from pool_router.snapshot import GraphHandle, refresh_graph
from pool_router.subgraph.client import UniswapSubgraphClient

logger = structlog.get_logger()

SETTINGS = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initial graph build plus periodic refresh for the app's lifetime."""
    if not SETTINGS.refresh_on_startup:
        yield
        return

    handle = get_graph_handle()
    async with UniswapSubgraphClient(
        SETTINGS.subgraph_url, timeout_seconds=SETTINGS.request_timeout_seconds
    ) as client:
        fetcher = PoolFetcher(
            client,
            n_retries=SETTINGS.n_retries,
            retry_delay_seconds=SETTINGS.retry_delay_seconds,
        )
        try:
            await refresh_graph(fetcher, handle, SETTINGS.n_pools, SETTINGS.batch_size)
        except NoPoolData:
            logger.warning("initial_graph_empty", message="Serving an empty graph until refresh")

        scheduler = RefreshScheduler(
            fetcher,
            handle,
            SETTINGS.refresh_interval_seconds,
            n_pools=SETTINGS.n_pools,
            batch_size=SETTINGS.batch_size,
        )
        scheduler.start()
        try:
            yield
        finally:
            await scheduler.stop()


app = FastAPI(
    title="Pool Router",
    description="Optimal swap routes over Uniswap v3 pools",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(router)


@app.get("/health")
async def health(handle: GraphHandle = Depends(get_graph_handle)) -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        graph_ready=handle.ready,
        token_count=handle.current.token_count,
        graph_version=handle.version,
    )


def run() -> None:
    """Run the API server.

    Configuration via environment variables:
    - ROUTER_HOST: Host to bind to (default: 0.0.0.0)
    - ROUTER_PORT: Port to bind to (default: 8000)
    - ROUTER_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "pool_router.api.main:app",
        host=SETTINGS.host,
        port=SETTINGS.port,
        reload=SETTINGS.debug,
    )


if __name__ == "__main__":
    run()
