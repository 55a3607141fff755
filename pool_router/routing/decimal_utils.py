"""High-precision Decimal helpers for exchange rates.

Rates are quotients of pool prices and route scores are products of many
rates; both are evaluated in a 78-digit context so compounding does not
drift with the default 28-digit precision.
"""

from __future__ import annotations

import decimal
from collections.abc import Iterable
from decimal import Decimal

from pool_router.constants import RATE_PRECISION

DECIMAL_HIGH_PREC_CONTEXT = decimal.Context(prec=RATE_PRECISION)


def net_rate(net_multiplier: Decimal, price: Decimal) -> Decimal:
    """Units of output per unit of input: ``net_multiplier / price``."""
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        return net_multiplier / price


def compound(rates: Iterable[Decimal]) -> Decimal:
    """Product of the rates (1 for an empty sequence)."""
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        result = Decimal(1)
        for rate in rates:
            result *= rate
        return result


__all__ = ["DECIMAL_HIGH_PREC_CONTEXT", "compound", "net_rate"]
