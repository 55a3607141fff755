"""Response models for the routing API."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from pool_router.routing.types import Route


class TokensResponse(BaseModel):
    """Tokens that can be routed."""

    tokens: list[str] = Field(default_factory=list)


class RouteResponse(BaseModel):
    """A route and its compounded rate.

    ``route`` is empty and ``rate`` is null when no route exists.
    """

    route: list[str] = Field(default_factory=list)
    rate: Decimal | None = Field(
        default=None,
        description="Units of the last token obtained per unit of the first.",
    )

    @classmethod
    def from_route(cls, route: Route | None) -> RouteResponse:
        if route is None:
            return cls()
        return cls(route=list(route.path), rate=route.score)


class RoutesResponse(BaseModel):
    """Ranked routes, best first."""

    routes: list[RouteResponse] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str = "ok"
    graph_ready: bool
    token_count: int
    graph_version: int


__all__ = ["HealthResponse", "RouteResponse", "RoutesResponse", "TokensResponse"]
