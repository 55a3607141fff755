"""Fake collaborators for the fetch coordinator."""

from dataclasses import dataclass, field

from pool_router.models.pool import PoolRecord
from pool_router.subgraph.queries import PageVariables

# Attempts a page can answer with no data before giving up on it
ALWAYS = 10**9


@dataclass
class FakePageSource:
    """Scripted stand-in for the subgraph client.

    Pages are keyed by ``skip``. A page listed in ``empty_attempts`` answers
    with no data that many times before returning its records; a page in
    ``failures`` raises the given exception on every call.

    Usage:
        source = FakePageSource(pages={0: [pool]}, empty_attempts={100: ALWAYS})
    """

    pages: dict[int, list[PoolRecord]] = field(default_factory=dict)
    empty_attempts: dict[int, int] = field(default_factory=dict)
    failures: dict[int, Exception] = field(default_factory=dict)
    calls: list[PageVariables] = field(default_factory=list)

    async def fetch_pool_page(self, variables: PageVariables) -> list[PoolRecord] | None:
        self.calls.append(variables)
        if variables.skip in self.failures:
            raise self.failures[variables.skip]
        remaining = self.empty_attempts.get(variables.skip, 0)
        if remaining > 0:
            self.empty_attempts[variables.skip] = remaining - 1
            return None
        return list(self.pages.get(variables.skip, []))

    def calls_for(self, skip: int) -> int:
        """Number of requests made for the page at ``skip``."""
        return sum(1 for call in self.calls if call.skip == skip)
