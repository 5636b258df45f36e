from __future__ import annotations

from decimal import Context, Decimal, ROUND_HALF_EVEN
from typing import TypeAlias


DecimalLike: TypeAlias = Decimal | str | int | float

# Context for all monetary arithmetic; entered locally, never installed globally
MONEY_CONTEXT = Context(prec=64, rounding=ROUND_HALF_EVEN)


def as_decimal(value: DecimalLike) -> Decimal:
    """Convert supported scalar types into Decimal.

    Floats are converted via `str` so that the shortest repr is used
    (e.g. 2.135 becomes Decimal("2.135"), not its binary expansion).

    Args:
        value: Input value as Decimal, string, int or float.

    Returns:
        Value converted to Decimal.

    Raises:
        TypeError: If $value is a bool or not a supported scalar type.
    """
    # Raise: bool is an int subclass but never a meaningful number here
    if isinstance(value, bool) or not isinstance(value, (Decimal, str, int, float)):
        raise TypeError(f"$value must be Decimal, str, int or float, but provided value is: {value!r}")

    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def sized_context(*operands: Decimal) -> Context:
    """Return `MONEY_CONTEXT` widened so arithmetic over $operands keeps every digit.

    Python ints have no upper bound, so a fixed precision would round (or fail
    to quantize) large amounts. Each operand adds its coefficient length and
    exponent magnitude on top of the base precision.

    Args:
        operands: Finite Decimals taking part in the computation.

    Returns:
        New Context; `MONEY_CONTEXT` itself is never modified.
    """
    extra = 0
    for operand in operands:
        sign, digits, exponent = operand.as_tuple()
        extra += len(digits) + abs(exponent)

    return Context(prec=MONEY_CONTEXT.prec + extra, rounding=MONEY_CONTEXT.rounding)
