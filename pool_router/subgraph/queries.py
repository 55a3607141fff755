"""GraphQL documents sent to the Uniswap v3 subgraph."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

OPERATION_NAME = "GetPools"

# A page of pools with liquidity, busiest first, so that dropped pages
# cost the least relevant pools.
GET_POOLS_QUERY = """
query GetPools($first: Int!, $skip: Int!) {
  pools(
    skip: $skip
    first: $first
    orderBy: txCount
    orderDirection: desc
    where: { liquidity_gt: 0 }
  ) {
    token0 {
      symbol
    }
    token1 {
      symbol
    }
    feeTier
    token0Price
    token1Price
  }
}
"""


@dataclass(frozen=True)
class PageVariables:
    """Pagination window: ``first`` pools after skipping ``skip``."""

    skip: int
    first: int

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


def build_query(variables: PageVariables) -> dict[str, Any]:
    """Build the JSON request body for a GetPools page."""
    return {
        "query": GET_POOLS_QUERY,
        "variables": variables.as_dict(),
        "operationName": OPERATION_NAME,
    }


__all__ = ["GET_POOLS_QUERY", "OPERATION_NAME", "PageVariables", "build_query"]
