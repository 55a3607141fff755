"""Directed graph of tokens built from pool records.

Nodes are token symbols and each edge carries the best ``Swap`` offered
by any pool for that ordered pair. A graph is built once per refresh and
never modified afterwards, so concurrent readers need no locking.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from decimal import Decimal

import structlog

from pool_router.constants import OPTIMAL_ROUTE_DEPTH
from pool_router.models.pool import PoolRecord
from pool_router.routing.decimal_utils import compound
from pool_router.routing.pathfinding import all_simple_paths
from pool_router.routing.types import Route, Swap, SwapPair

logger = structlog.get_logger()


class PoolGraph:
    """Graph of tokens connected by directional swaps.

    Stored as an adjacency map ``source -> {destination: Swap}``; the outer
    keys double as the symbol index, so token identity is the symbol itself.

    Usage:
        graph = PoolGraph.from_records(pools)
        best = graph.optimal_route("WETH", "LINK")
    """

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self._adjacency: dict[str, dict[str, Swap]] = {}

    @classmethod
    def from_records(cls, records: Iterable[PoolRecord]) -> PoolGraph:
        """Build a graph from pool records.

        For each ordered token pair only the highest rate is kept, so the
        result does not depend on record order.

        Args:
            records: Pools fetched from the subgraph

        Returns:
            PoolGraph with two directed edges per distinct token pair
        """
        graph = cls()
        n_records = 0
        for record in records:
            graph._add_pool(record)
            n_records += 1
        logger.info(
            "graph_built",
            pools=n_records,
            tokens=graph.token_count,
            edges=graph.edge_count,
        )
        return graph

    def _add_pool(self, pool: PoolRecord) -> None:
        pair = SwapPair.from_pool(pool)
        self._add_node(pair.token0)
        self._add_node(pair.token1)
        self._merge_edge(pair.token0, pair.forward)
        self._merge_edge(pair.token1, pair.backward)

    def _add_node(self, token: str) -> None:
        if token not in self._adjacency:
            self._adjacency[token] = {}

    def _merge_edge(self, source: str, swap: Swap) -> None:
        """Insert the edge, or replace the existing one if ``swap`` is strictly better."""
        edges = self._adjacency[source]
        current = edges.get(swap.token)
        if current is None or swap.rate > current.rate:
            edges[swap.token] = swap

    def tokens(self) -> list[str]:
        """All known token symbols, in no guaranteed order."""
        return list(self._adjacency)

    def has_token(self, token: str) -> bool:
        return token in self._adjacency

    @property
    def token_count(self) -> int:
        """Number of unique tokens in the graph."""
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        """Number of directed edges in the graph."""
        return sum(len(edges) for edges in self._adjacency.values())

    def rate(self, source: str, destination: str) -> Decimal | None:
        """Exchange rate of the direct edge, or None if there is no such edge."""
        swap = self._adjacency.get(source, {}).get(destination)
        return swap.rate if swap is not None else None

    def edges(self) -> Iterator[tuple[str, str, Swap]]:
        """Iterate over ``(source, destination, swap)`` for every edge."""
        for source, edges in self._adjacency.items():
            for destination, swap in edges.items():
                yield source, destination, swap

    def route_rate(self, path: list[str] | tuple[str, ...]) -> Decimal:
        """Compounded exchange rate along a path of adjacent tokens.

        Raises:
            KeyError: If two consecutive tokens are not connected
        """
        return compound(self._adjacency[a][b].rate for a, b in zip(path, path[1:]))

    def routes(
        self,
        token0: str,
        token1: str,
        max_intermediate_nodes: int,
    ) -> list[Route]:
        """Get all swap routes between two tokens, best rate first.

        Routes with equal scores are ordered by number of hops, then by
        their token sequence.

        Args:
            token0: Token to sell
            token1: Token to buy
            max_intermediate_nodes: Max tokens between the endpoints

        Returns:
            Ranked routes. Empty if either token is unknown or nothing
            connects them within the bound. For ``token0 == token1`` these
            are the round trips through other tokens.

        Raises:
            ValueError: If max_intermediate_nodes is negative
        """
        found = [
            Route(path=tuple(path), score=self.route_rate(path))
            for path in all_simple_paths(self._adjacency, token0, token1, max_intermediate_nodes)
        ]
        found.sort(key=lambda route: (route.hops, route.path))
        found.sort(key=lambda route: route.score, reverse=True)
        return found

    def optimal_route(
        self,
        token0: str,
        token1: str,
        max_intermediate_nodes: int = OPTIMAL_ROUTE_DEPTH,
    ) -> Route | None:
        """Get the best route between two tokens, if any.

        Equivalent to the first entry of ``routes`` with a default bound of
        ``OPTIMAL_ROUTE_DEPTH`` intermediate tokens.
        """
        ranked = self.routes(token0, token1, max_intermediate_nodes)
        return ranked[0] if ranked else None

    def __repr__(self) -> str:
        return f"PoolGraph(tokens={self.token_count}, edges={self.edge_count})"


def build_graph(records: Iterable[PoolRecord]) -> PoolGraph:
    """Build a PoolGraph from pool records."""
    return PoolGraph.from_records(records)


__all__ = ["PoolGraph", "build_graph"]
