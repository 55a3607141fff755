"""Pytest configuration and fixtures."""

import pytest

from pool_router.models.pool import PoolRecord
from pool_router.routing.graph import PoolGraph
from tests.helpers import LINK, USDC, WETH, make_pool


@pytest.fixture
def weth_usdc_link_pools() -> list[PoolRecord]:
    """WETH/USDC and USDC/LINK pools; WETH reaches LINK only through USDC."""
    return [
        make_pool(WETH, USDC, fee="0.003", price0="2000", price1="0.0005"),
        make_pool(USDC, LINK, fee="0.003", price0="10", price1="0.1"),
    ]


@pytest.fixture
def weth_usdc_link_graph(weth_usdc_link_pools) -> PoolGraph:
    """Graph built from ``weth_usdc_link_pools``."""
    return PoolGraph.from_records(weth_usdc_link_pools)
