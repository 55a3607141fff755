"""Shared type definitions for pool models.

Prices and fees are kept as ``Decimal`` end to end; values coming from
JSON are parsed from their string form so they never pass through float.
"""

from decimal import Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator, Field


def parse_decimal(value: Any) -> Decimal:
    """Parse a value into a finite Decimal.

    Args:
        value: Decimal, int, float or numeric string

    Returns:
        The parsed Decimal

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValueError(f"Expected a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(value)
        except InvalidOperation as err:
            raise ValueError(f"Not a decimal number: '{value}'") from err
    elif isinstance(value, float):
        # repr of a float is its shortest round-tripping form
        result = Decimal(repr(value))
    else:
        raise ValueError(f"Expected a number, got {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Decimal must be finite: {value}")
    return result


def _check_positive(value: Decimal) -> Decimal:
    if value <= 0:
        raise ValueError(f"Price must be positive: {value}")
    return value


def _check_fee_fraction(value: Decimal) -> Decimal:
    if not 0 <= value < 1:
        raise ValueError(f"Fee tier must be in [0, 1): {value}")
    return value


# Token symbol as reported by the subgraph; compared case-sensitively
TokenSymbol = Annotated[str, Field(description="Token symbol (case-sensitive)")]

# Strictly positive decimal price
PositiveDecimal = Annotated[
    Decimal,
    BeforeValidator(parse_decimal),
    AfterValidator(_check_positive),
]

# Fractional fee, e.g. 0.003 for a 0.3% pool
FeeFraction = Annotated[
    Decimal,
    BeforeValidator(parse_decimal),
    AfterValidator(_check_fee_fraction),
]

# Any finite decimal (wire values before domain validation)
WireDecimal = Annotated[Decimal, BeforeValidator(parse_decimal)]
