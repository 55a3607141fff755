"""Runtime configuration read from environment variables.

All settings are optional and fall back to the defaults in
``pool_router.constants``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from pool_router.constants import (
    N_POOLS,
    N_RETRIES,
    OPTIMAL_ROUTE_DEPTH,
    POOL_BATCH_SIZE,
    UNISWAP_V3_SUBGRAPH_URL,
)

_TRUTHY = ("true", "1", "yes")


def _env(name: str, default: str) -> str:
    return os.environ.get(name, default)


def _int(name: str, default: int, *, minimum: int = 0) -> int:
    raw = _env(name, str(default))
    try:
        value = int(raw)
    except ValueError as err:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from err
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def _float(name: str, default: float, *, positive: bool = False) -> float:
    raw = _env(name, str(default))
    try:
        value = float(raw)
    except ValueError as err:
        raise ValueError(f"{name} must be a number, got '{raw}'") from err
    if value < 0:
        raise ValueError(f"{name} cannot be negative, got {value}")
    if positive and value == 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _bool(name: str, default: bool) -> bool:
    return _env(name, "true" if default else "false").lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """Configuration for the fetcher, the graph and the API server."""

    subgraph_url: str = UNISWAP_V3_SUBGRAPH_URL
    n_pools: int = N_POOLS
    batch_size: int = POOL_BATCH_SIZE
    n_retries: int = N_RETRIES
    retry_delay_seconds: float = 0.0
    request_timeout_seconds: float = 30.0
    route_depth: int = OPTIMAL_ROUTE_DEPTH
    refresh_interval_seconds: float = 300.0
    refresh_on_startup: bool = True
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False


def get_settings() -> Settings:
    """Build settings from ``ROUTER_*`` environment variables.

    Raises:
        ValueError: If a numeric variable cannot be parsed or is out of range
    """
    return Settings(
        subgraph_url=_env("ROUTER_SUBGRAPH_URL", UNISWAP_V3_SUBGRAPH_URL),
        n_pools=_int("ROUTER_N_POOLS", N_POOLS),
        batch_size=_int("ROUTER_BATCH_SIZE", POOL_BATCH_SIZE, minimum=1),
        n_retries=_int("ROUTER_N_RETRIES", N_RETRIES, minimum=1),
        retry_delay_seconds=_float("ROUTER_RETRY_DELAY_SECONDS", 0.0),
        request_timeout_seconds=_float("ROUTER_REQUEST_TIMEOUT_SECONDS", 30.0),
        route_depth=_int("ROUTER_ROUTE_DEPTH", OPTIMAL_ROUTE_DEPTH),
        refresh_interval_seconds=_float("ROUTER_REFRESH_INTERVAL_SECONDS", 300.0, positive=True),
        refresh_on_startup=_bool("ROUTER_REFRESH_ON_STARTUP", True),
        host=_env("ROUTER_HOST", "0.0.0.0"),
        port=_int("ROUTER_PORT", 8000, minimum=1),
        debug=_bool("ROUTER_DEBUG", False),
    )


__all__ = ["Settings", "get_settings"]
