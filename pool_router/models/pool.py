"""Pool record model consumed by the pool graph."""

from decimal import Decimal

from pydantic import BaseModel, Field

from pool_router.models.types import FeeFraction, PositiveDecimal, TokenSymbol


class PoolRecord(BaseModel):
    """A liquidity pool between two tokens.

    Immutable once created. ``token0_price`` is the price of token0 quoted
    in token1 and ``token1_price`` the reverse, both as reported upstream.
    """

    token0: TokenSymbol
    token1: TokenSymbol
    fee_tier: FeeFraction = Field(alias="feeTier")
    token0_price: PositiveDecimal = Field(alias="token0Price")
    token1_price: PositiveDecimal = Field(alias="token1Price")

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def net_multiplier(self) -> Decimal:
        """Fraction of the input left after the pool fee (1 - fee_tier)."""
        return 1 - self.fee_tier

    @property
    def tokens(self) -> tuple[str, str]:
        return self.token0, self.token1


__all__ = ["PoolRecord"]
