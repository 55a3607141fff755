"""Pydantic models for the Uniswap v3 subgraph GetPools response.

Only the fields selected by ``pool_router.subgraph.queries.GET_POOLS_QUERY``
are modelled. Conversion to ``PoolRecord`` happens here so the rest of the
package never sees wire units (feeTier in hundredths of a basis point).
"""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import BaseModel, Field, ValidationError

from pool_router.constants import FEE_TIER_SCALE
from pool_router.models.pool import PoolRecord
from pool_router.models.types import WireDecimal

logger = structlog.get_logger()


class SubgraphToken(BaseModel):
    """Token reference nested in a pool."""

    symbol: str


class SubgraphPool(BaseModel):
    """A pool entry as returned by the subgraph."""

    token0: SubgraphToken
    token1: SubgraphToken
    fee_tier: int = Field(alias="feeTier", ge=0)
    token0_price: WireDecimal = Field(alias="token0Price")
    token1_price: WireDecimal = Field(alias="token1Price")

    model_config = {"populate_by_name": True}

    def to_record(self) -> PoolRecord:
        """Convert to a PoolRecord with a fractional fee tier.

        Raises:
            ValidationError: If prices are not positive or the fee is >= 100%
        """
        return PoolRecord(
            token0=self.token0.symbol,
            token1=self.token1.symbol,
            fee_tier=self.fee_tier / FEE_TIER_SCALE,
            token0_price=self.token0_price,
            token1_price=self.token1_price,
        )


class GetPoolsData(BaseModel):
    pools: list[SubgraphPool]


class GraphQLError(BaseModel):
    """A GraphQL error entry. Only the message is relied upon."""

    message: str
    locations: list[dict[str, Any]] | None = None
    path: list[str | int] | None = None

    model_config = {"extra": "allow"}


class GetPoolsResponse(BaseModel):
    """Top-level GraphQL response envelope."""

    data: GetPoolsData | None = None
    errors: list[GraphQLError] | None = None

    def pool_records(self) -> list[PoolRecord] | None:
        """Convert the page to pool records.

        Returns:
            None when the response carries no data, otherwise the records.
            Pools with unusable prices (zero, as reported for drained pools)
            are skipped.
        """
        if self.data is None:
            return None

        records: list[PoolRecord] = []
        for pool in self.data.pools:
            try:
                records.append(pool.to_record())
            except ValidationError as err:
                logger.debug(
                    "pool_skipped",
                    token0=pool.token0.symbol,
                    token1=pool.token1.symbol,
                    error_count=err.error_count(),
                )
        return records


__all__ = [
    "SubgraphToken",
    "SubgraphPool",
    "GetPoolsData",
    "GraphQLError",
    "GetPoolsResponse",
]
