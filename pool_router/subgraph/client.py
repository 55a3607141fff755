"""Async client for the Uniswap v3 subgraph.

The client does one thing: fetch a single page of pools. Retries and
pagination live in ``pool_router.pools.fetcher``.
"""

from __future__ import annotations

from types import TracebackType

import httpx
import structlog
from pydantic import ValidationError

from pool_router.constants import UNISWAP_V3_SUBGRAPH_URL
from pool_router.errors import TransportFailure
from pool_router.models.pool import PoolRecord
from pool_router.models.subgraph import GetPoolsResponse
from pool_router.subgraph.queries import PageVariables, build_query

logger = structlog.get_logger()


class UniswapSubgraphClient:
    """Fetch pool pages from a GraphQL endpoint.

    Usage:
        async with UniswapSubgraphClient() as client:
            records = await client.fetch_pool_page(PageVariables(skip=0, first=100))

    Args:
        url: GraphQL endpoint
        timeout_seconds: Per-request timeout
        http_client: Optional pre-built client (tests inject one backed by
            ``httpx.MockTransport``). An injected client is not closed by
            ``aclose``.
    """

    def __init__(
        self,
        url: str = UNISWAP_V3_SUBGRAPH_URL,
        timeout_seconds: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.url = url
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout_seconds)

    async def __aenter__(self) -> UniswapSubgraphClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def fetch_pool_page(self, variables: PageVariables) -> list[PoolRecord] | None:
        """Fetch one page of pools.

        Args:
            variables: Pagination window

        Returns:
            The page's pool records, or None if the subgraph returned no data
            (the caller decides whether to retry).

        Raises:
            TransportFailure: On network errors, non-2xx statuses, or bodies
                that are not a valid GetPools response
        """
        try:
            response = await self._client.post(self.url, json=build_query(variables))
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as err:
            raise TransportFailure(f"request to {self.url} failed: {err}") from err
        except ValueError as err:
            raise TransportFailure(f"response from {self.url} is not JSON: {err}") from err

        try:
            parsed = GetPoolsResponse.model_validate(body)
        except ValidationError as err:
            raise TransportFailure(f"unexpected response shape: {err}") from err

        if parsed.errors:
            logger.debug(
                "subgraph_errors",
                skip=variables.skip,
                first=variables.first,
                errors=[e.message for e in parsed.errors],
            )

        return parsed.pool_records()


__all__ = ["UniswapSubgraphClient"]
