"""Route discovery over pool data.

Module structure:
- types.py: Swap, SwapPair and Route
- decimal_utils.py: high-precision rate arithmetic
- pathfinding.py: depth-bounded simple path enumeration
- graph.py: PoolGraph construction and route queries
"""

from pool_router.routing.graph import PoolGraph, build_graph
from pool_router.routing.pathfinding import all_simple_paths
from pool_router.routing.types import Route, Swap, SwapPair

__all__ = [
    "PoolGraph",
    "Route",
    "Swap",
    "SwapPair",
    "all_simple_paths",
    "build_graph",
]
