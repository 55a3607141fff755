"""Type definitions for the routing module."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pool_router.models.pool import PoolRecord
from pool_router.routing.decimal_utils import net_rate


@dataclass(frozen=True)
class Swap:
    """A single-hop exchange into ``token`` at ``rate`` (net of fee)."""

    token: str
    rate: Decimal


@dataclass(frozen=True)
class SwapPair:
    """Both directions of a pool.

    ``forward`` swaps token0 into token1 and ``backward`` token1 into token0.
    """

    token0: str
    token1: str
    forward: Swap
    backward: Swap

    @classmethod
    def from_pool(cls, pool: PoolRecord) -> SwapPair:
        token0, token1 = pool.tokens
        net = pool.net_multiplier
        return cls(
            token0=token0,
            token1=token1,
            forward=Swap(token=token1, rate=net_rate(net, pool.token0_price)),
            backward=Swap(token=token0, rate=net_rate(net, pool.token1_price)),
        )


@dataclass(frozen=True)
class Route:
    """A simple path of tokens and its compounded exchange rate."""

    path: tuple[str, ...]
    score: Decimal

    @property
    def source(self) -> str:
        return self.path[0]

    @property
    def destination(self) -> str:
        return self.path[-1]

    @property
    def hops(self) -> int:
        """Number of swaps along the route."""
        return len(self.path) - 1

    @property
    def intermediates(self) -> tuple[str, ...]:
        return self.path[1:-1]


__all__ = ["Route", "Swap", "SwapPair"]
