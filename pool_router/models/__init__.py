"""Pydantic models for pool data and API responses."""

from pool_router.models.pool import PoolRecord
from pool_router.models.subgraph import GetPoolsResponse, SubgraphPool, SubgraphToken
from pool_router.models.types import FeeFraction, PositiveDecimal, TokenSymbol, parse_decimal

__all__ = [
    # Types
    "FeeFraction",
    "PositiveDecimal",
    "TokenSymbol",
    "parse_decimal",
    # Pool data
    "PoolRecord",
    # Subgraph wire models
    "GetPoolsResponse",
    "SubgraphPool",
    "SubgraphToken",
]
