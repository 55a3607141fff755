"""Test helpers module for shared test utilities.

- constants: Token symbols
- factories: Pool record and subgraph payload factories
- fakes: Scripted page source for the fetch coordinator
"""

from tests.helpers.constants import DAI, LINK, UNI, UNKNOWN, USDC, USDT, WBTC, WETH
from tests.helpers.factories import (
    make_flat_pool,
    make_page_payload,
    make_pool,
    make_subgraph_pool,
)
from tests.helpers.fakes import ALWAYS, FakePageSource

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "USDT",
    "DAI",
    "WBTC",
    "LINK",
    "UNI",
    "UNKNOWN",
    # Factories
    "make_pool",
    "make_flat_pool",
    "make_subgraph_pool",
    "make_page_payload",
    # Fakes
    "ALWAYS",
    "FakePageSource",
]
