"""Depth-bounded simple path enumeration.

Works on any adjacency mapping ``token -> iterable of neighbour tokens``,
so it can be exercised without building a full PoolGraph.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping


def all_simple_paths(
    adjacency: Mapping[str, Iterable[str]],
    source: str,
    target: str,
    max_intermediate_nodes: int,
) -> Iterator[list[str]]:
    """Enumerate every simple path from ``source`` to ``target``.

    A path visits no interior token twice and has at most ``max_intermediate_nodes``
    tokens between its endpoints (at most ``max_intermediate_nodes + 1``
    swaps). Tokens missing from the mapping yield nothing. When
    ``source == target`` the results are the cycles that leave ``source``
    and come back to it within the bound; the empty path is never yielded.

    Args:
        adjacency: Directed neighbour lists
        source: Starting token
        target: Destination token
        max_intermediate_nodes: Interior tokens allowed per path

    Returns:
        Iterator over paths, each a list of tokens from source to target

    Raises:
        ValueError: If max_intermediate_nodes is negative
    """
    if max_intermediate_nodes < 0:
        raise ValueError(f"max_intermediate_nodes cannot be negative: {max_intermediate_nodes}")
    if source not in adjacency or target not in adjacency:
        return iter(())
    return _walk(adjacency, source, target, max_intermediate_nodes + 2)


def _walk(
    adjacency: Mapping[str, Iterable[str]],
    source: str,
    target: str,
    max_nodes: int,
) -> Iterator[list[str]]:
    """Iterative DFS with an explicit stack of neighbour iterators.

    Invariant: ``len(path) < max_nodes``, so appending ``target`` always
    yields a path within bounds. ``target`` is checked before ``on_path``
    so a walk from a token can close back onto it.
    """
    path = [source]
    on_path = {source}
    stack = [iter(adjacency[source])]

    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            on_path.discard(path.pop())
            continue
        if child == target:
            yield path + [target]
        elif child not in on_path and len(path) + 1 < max_nodes:
            path.append(child)
            on_path.add(child)
            stack.append(iter(adjacency.get(child, ())))


__all__ = ["all_simple_paths"]
