"""Defaults for fetching pool data and routing.

Centralizes the subgraph endpoint and the numeric parameters consumed by
the fetch coordinator and the pool graph.
"""

from decimal import Decimal

# Uniswap v3 subgraph (hosted service)
UNISWAP_V3_SUBGRAPH_URL = "https://api.thegraph.com/subgraphs/name/uniswap/uniswap-v3"

# Number of pools to fetch per refresh cycle
N_POOLS = 2000

# Pools requested per page
POOL_BATCH_SIZE = 100

# Attempts per page while the subgraph keeps returning no data
N_RETRIES = 3

# Max intermediate tokens considered when looking for the optimal route
OPTIMAL_ROUTE_DEPTH = 3

# The subgraph reports feeTier in hundredths of a basis point (3000 = 0.3%)
FEE_TIER_SCALE = Decimal(1_000_000)

# Decimal digits used for rate arithmetic
RATE_PRECISION = 78
