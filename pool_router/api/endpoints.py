"""API endpoints for token listing and route lookup."""

import asyncio

import structlog
from fastapi import APIRouter, Depends, Query

from pool_router.config import get_settings
from pool_router.models.api import RouteResponse, RoutesResponse, TokensResponse
from pool_router.routing.graph import PoolGraph
from pool_router.snapshot import GraphHandle

logger = structlog.get_logger()

router = APIRouter()

# Depth used by /route and the most /routes accepts; enumeration grows
# exponentially with depth
ROUTE_DEPTH = get_settings().route_depth

_graph_handle = GraphHandle()


def get_graph_handle() -> GraphHandle:
    """Dependency provider for the live graph handle.

    Override this in tests to inject a prepared graph:
        app.dependency_overrides[get_graph_handle] = lambda: GraphHandle(graph)
    """
    return _graph_handle


def get_graph(handle: GraphHandle = Depends(get_graph_handle)) -> PoolGraph:
    """Snapshot of the published graph for the duration of a request."""
    return handle.current


@router.get("/tokens")
async def list_tokens(graph: PoolGraph = Depends(get_graph)) -> TokensResponse:
    """List the tokens that can be routed, sorted by symbol."""
    return TokensResponse(tokens=sorted(graph.tokens()))


@router.get("/route")
async def optimal_route(
    token0: str,
    token1: str,
    graph: PoolGraph = Depends(get_graph),
) -> RouteResponse:
    """Get the optimal swap route from token0 to token1.

    Unknown tokens and unreachable pairs return an empty route.
    """
    loop = asyncio.get_running_loop()
    route = await loop.run_in_executor(None, graph.optimal_route, token0, token1, ROUTE_DEPTH)
    logger.debug(
        "optimal_route",
        token0=token0,
        token1=token1,
        found=route is not None,
    )
    return RouteResponse.from_route(route)


@router.get("/routes")
async def ranked_routes(
    token0: str,
    token1: str,
    max_intermediate_nodes: int = Query(default=ROUTE_DEPTH, ge=0, le=ROUTE_DEPTH),
    limit: int = Query(default=20, ge=1, le=1000),
    graph: PoolGraph = Depends(get_graph),
) -> RoutesResponse:
    """Get routes from token0 to token1 ranked by compounded rate."""
    loop = asyncio.get_running_loop()
    found = await loop.run_in_executor(
        None, graph.routes, token0, token1, max_intermediate_nodes
    )
    return RoutesResponse(routes=[RouteResponse.from_route(r) for r in found[:limit]])
