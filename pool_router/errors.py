"""Error classes for pool fetching and graph refresh.

Route queries never raise for unknown tokens or missing paths; they
return empty results instead. Everything here concerns the upstream data.
"""


class PoolRouterError(Exception):
    """Base error for the pool router."""

    pass


class PoolFetchError(PoolRouterError):
    """A page of pools could not be retrieved."""

    pass


class TransportFailure(PoolFetchError):
    """Network or protocol level failure talking to the subgraph.

    Raised for connection errors, timeouts, non-2xx responses and bodies
    that cannot be decoded. Pages failing this way are not retried.
    """

    pass


class EmptyResponse(PoolFetchError):
    """The subgraph answered with a well-formed response carrying no data."""

    pass


class RetriesExhausted(EmptyResponse):
    """A page kept returning empty responses until its retry budget ran out."""

    def __init__(self, skip: int, first: int, attempts: int) -> None:
        super().__init__(
            f"max number of retries reached for page skip={skip} first={first} "
            f"after {attempts} attempts"
        )
        self.skip = skip
        self.first = first
        self.attempts = attempts


class NoPoolData(PoolRouterError):
    """A refresh produced no pool records at all."""

    pass


__all__ = [
    "PoolRouterError",
    "PoolFetchError",
    "TransportFailure",
    "EmptyResponse",
    "RetriesExhausted",
    "NoPoolData",
]
