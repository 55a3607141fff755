"""Periodic graph refresh.

The scheduler owns the timer; each cycle is a ``refresh_graph`` call.
"""

from __future__ import annotations

import asyncio
import contextlib

import structlog

from pool_router.pools.fetcher import PoolFetcher
from pool_router.snapshot import GraphHandle, refresh_graph

logger = structlog.get_logger()


class RefreshScheduler:
    """Refresh the published graph on a fixed interval.

    A failed cycle is logged and the next one runs on schedule.

    Args:
        fetcher: Pool fetcher used for each cycle
        handle: Graph handle to publish into
        interval_seconds: Pause between the end of one cycle and the next
        n_pools: Pools per cycle (fetcher default if None)
        batch_size: Page size (fetcher default if None)
    """

    def __init__(
        self,
        fetcher: PoolFetcher,
        handle: GraphHandle,
        interval_seconds: float,
        n_pools: int | None = None,
        batch_size: int | None = None,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be positive, got {interval_seconds}")
        self.fetcher = fetcher
        self.handle = handle
        self.interval_seconds = interval_seconds
        self.n_pools = n_pools
        self.batch_size = batch_size
        self._task: asyncio.Task[None] | None = None
        self.cycles = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_once(self) -> None:
        """Run a single refresh cycle, logging instead of raising."""
        self.cycles += 1
        try:
            await refresh_graph(self.fetcher, self.handle, self.n_pools, self.batch_size)
        except Exception:
            logger.exception("refresh_failed", cycle=self.cycles)

    async def _loop(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            await self.run_once()

    def start(self) -> None:
        """Start the background loop on the running event loop."""
        if self.running:
            return
        self._task = asyncio.create_task(self._loop())
        logger.info("refresh_scheduler_started", interval_seconds=self.interval_seconds)

    async def stop(self) -> None:
        """Cancel the background loop and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("refresh_scheduler_stopped", cycles=self.cycles)


__all__ = ["RefreshScheduler"]
