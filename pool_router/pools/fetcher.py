"""Batched, concurrent retrieval of the full pool set.

The pool set is split into fixed-size pages that are requested
concurrently. Each page retries on its own while the subgraph returns
empty responses; pages that still fail are dropped, so the result can be
shorter than requested.
"""

from __future__ import annotations

import asyncio
from typing import Protocol

import structlog

from pool_router.constants import N_POOLS, N_RETRIES, POOL_BATCH_SIZE
from pool_router.errors import RetriesExhausted
from pool_router.models.pool import PoolRecord
from pool_router.subgraph.queries import PageVariables

logger = structlog.get_logger()


class PoolPageSource(Protocol):
    """Anything that can fetch one page of pools.

    Returns None for a data-less response and raises ``TransportFailure``
    for transport errors. ``UniswapSubgraphClient`` is the production
    implementation.
    """

    async def fetch_pool_page(self, variables: PageVariables) -> list[PoolRecord] | None: ...


def page_windows(n_pools: int, batch_size: int) -> list[PageVariables]:
    """Split ``[0, n_pools)`` into pages of ``batch_size``.

    The last page always requests a full batch, so it may extend past
    ``n_pools``.

    Raises:
        ValueError: If batch_size is not positive or n_pools is negative
    """
    if batch_size <= 0:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    if n_pools < 0:
        raise ValueError(f"n_pools cannot be negative, got {n_pools}")
    return [PageVariables(skip=skip, first=batch_size) for skip in range(0, n_pools, batch_size)]


class PoolFetcher:
    """Fetch all pools from a page source in concurrent batches.

    Usage:
        async with UniswapSubgraphClient() as client:
            pools = await PoolFetcher(client).fetch_all_pools()

    Args:
        source: Page source (the subgraph client)
        n_retries: Attempts per page while responses are empty
        retry_delay_seconds: Pause between attempts of the same page
    """

    def __init__(
        self,
        source: PoolPageSource,
        *,
        n_retries: int = N_RETRIES,
        retry_delay_seconds: float = 0.0,
    ) -> None:
        if n_retries < 1:
            raise ValueError(f"n_retries must be at least 1, got {n_retries}")
        self.source = source
        self.n_retries = n_retries
        self.retry_delay_seconds = retry_delay_seconds

    async def fetch_page(self, variables: PageVariables) -> list[PoolRecord]:
        """Fetch one page, retrying while the response has no data.

        Raises:
            TransportFailure: Propagated immediately from the source
            RetriesExhausted: If every attempt returned no data
        """
        attempts_left = self.n_retries
        while attempts_left > 0:
            logger.debug(
                "fetching_page",
                skip=variables.skip,
                first=variables.first,
                attempts_left=attempts_left,
            )
            records = await self.source.fetch_pool_page(variables)
            if records is not None:
                return records
            attempts_left -= 1
            if attempts_left > 0 and self.retry_delay_seconds > 0:
                await asyncio.sleep(self.retry_delay_seconds)
        raise RetriesExhausted(variables.skip, variables.first, self.n_retries)

    async def fetch_all_pools(
        self,
        n_pools: int | None = None,
        batch_size: int | None = None,
    ) -> list[PoolRecord]:
        """Fetch up to ``n_pools`` pools in pages of ``batch_size``.

        All pages are dispatched at once and collected as they finish.
        Failed pages are logged and left out; the whole call only fails on
        invalid arguments.

        Args:
            n_pools: Number of pools wanted (default 2000)
            batch_size: Pools per page (default 100)

        Returns:
            Records from every successful page, in no particular order.
            May hold fewer than ``n_pools`` records.
        """
        n_pools = N_POOLS if n_pools is None else n_pools
        batch_size = POOL_BATCH_SIZE if batch_size is None else batch_size
        windows = page_windows(n_pools, batch_size)
        if not windows:
            return []

        tasks = [asyncio.create_task(self.fetch_page(window)) for window in windows]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        pools: list[PoolRecord] = []
        failed = 0
        for window, result in zip(windows, results, strict=True):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    # Cancellation and interpreter exits are not page failures
                    raise result
                failed += 1
                logger.warning(
                    "page_dropped",
                    skip=window.skip,
                    first=window.first,
                    error_type=type(result).__name__,
                    error=str(result),
                )
                continue
            pools.extend(result)

        logger.info(
            "pools_fetched",
            requested=n_pools,
            pages=len(windows),
            failed_pages=failed,
            pools=len(pools),
        )
        return pools


async def fetch_all_pools(
    source: PoolPageSource,
    n_pools: int | None = None,
    batch_size: int | None = None,
    *,
    n_retries: int = N_RETRIES,
) -> list[PoolRecord]:
    """Convenience wrapper around ``PoolFetcher.fetch_all_pools``."""
    fetcher = PoolFetcher(source, n_retries=n_retries)
    return await fetcher.fetch_all_pools(n_pools, batch_size)


__all__ = ["PoolFetcher", "PoolPageSource", "fetch_all_pools", "page_windows"]
