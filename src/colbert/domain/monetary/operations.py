"""Arithmetic over Money values.

Addition and subtraction work on integer minor units and are exact. Scalar
operations (multiply, divide, percent) compute the major-unit result in
Decimal, round it with `round_half_even` at the currency's decimal places,
and convert back to minor units.
"""
from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation, localcontext

from colbert.domain.monetary.errors import MoneyError
from colbert.domain.monetary.money import Money
from colbert.utils.decimal_tools import DecimalLike, as_decimal, sized_context
from colbert.utils.rounding import round_half_even

logger = logging.getLogger(__name__)

_HUNDRED = Decimal(100)


def assert_compatible(lhs: Money, rhs: Money, operation: str = "operate") -> None:
    """Ensure both Money values use the same currency.

    Args:
        lhs: Left-hand operand.
        rhs: Right-hand operand.
        operation: Name of the calling operation, used in the error message.

    Raises:
        MoneyError: With kind INCOMPATIBLE_CURRENCIES if currencies differ.
    """
    if lhs.currency != rhs.currency:
        raise MoneyError.incompatible_currencies(lhs.currency, rhs.currency, operation)


def add(lhs: Money, rhs: Money) -> Money:
    """Add two Money values of the same currency."""
    _require_money(lhs, "lhs", "add")
    _require_money(rhs, "rhs", "add")
    assert_compatible(lhs, rhs, operation="add")
    return Money(lhs.amount + rhs.amount, lhs.currency)


def subtract(lhs: Money, rhs: Money) -> Money:
    """Subtract $rhs from $lhs; both must share a currency."""
    _require_money(lhs, "lhs", "subtract")
    _require_money(rhs, "rhs", "subtract")
    assert_compatible(lhs, rhs, operation="subtract")
    return Money(lhs.amount - rhs.amount, lhs.currency)


def multiply(money: Money, factor: DecimalLike) -> Money:
    """Multiply $money by a scalar $factor.

    Example: 3827932 USD cents * 0.25 is 956983 cents, and 1000 cents * 2.5
    is 2500 cents. Inexact results are rounded half-to-even to whole minor
    units.

    Raises:
        ValueError: If $factor is not a finite number.
        TypeError: If $money is not Money or $factor is not a scalar.
    """
    _require_money(money, "money", "multiply")
    factor_value = _as_finite_decimal(factor, "factor", "multiply")

    major = money.major_value
    with localcontext(sized_context(major, factor_value)):
        result = major * factor_value

    return _rounded_money(result, money, "multiply")


def divide(money: Money, divisor: DecimalLike) -> Money:
    """Divide $money by a scalar $divisor.

    Raises:
        MoneyError: With kind DIVISION_BY_ZERO if $divisor is zero.
        ValueError: If $divisor is not a finite number.
        TypeError: If $money is not Money or $divisor is not a scalar.
    """
    _require_money(money, "money", "divide")
    divisor_value = _as_finite_decimal(divisor, "divisor", "divide")

    # Raise: dividing by zero has no monetary result
    if divisor_value == 0:
        raise MoneyError.division_by_zero("divide")

    major = money.major_value
    with localcontext(sized_context(major, divisor_value)):
        result = major / divisor_value

    return _rounded_money(result, money, "divide")


def percent(money: Money, percent: DecimalLike) -> Money:
    """Return $percent percent of $money, e.g. 33% of 1000 cents is 330 cents.

    Raises:
        MoneyError: With kind OUT_OF_RANGE if $percent is outside [0, 100].
        ValueError: If $percent is not a finite number.
        TypeError: If $money is not Money or $percent is not a scalar.
    """
    _require_money(money, "money", "percent")
    percent_value = _as_finite_decimal(percent, "percent", "percent")

    # Raise: percentage must lie within [0, 100]
    if percent_value < 0 or percent_value > _HUNDRED:
        raise MoneyError.out_of_range("percent", percent, 0, 100, "percent")

    major = money.major_value
    with localcontext(sized_context(major, percent_value, _HUNDRED)):
        result = major * (percent_value / _HUNDRED)

    return _rounded_money(result, money, "percent")


def _rounded_money(major_result: Decimal, money: Money, operation: str) -> Money:
    decimal_places = money.currency.decimal_places
    rounded = round_half_even(major_result, decimal_places)

    if rounded != major_result:
        logger.debug(f"`{operation}` rounded {major_result} to {rounded} {money.currency}")

    with localcontext(sized_context(rounded)):
        amount = int(rounded.scaleb(decimal_places))

    return Money(amount, money.currency)


def _as_finite_decimal(value: DecimalLike, name: str, operation: str) -> Decimal:
    # Raise: Money is not a scalar operand
    if isinstance(value, Money):
        raise TypeError(f"Cannot call `{operation}` because ${name} must be a number, but provided value is Money: {value!r}")

    try:
        decimal_value = as_decimal(value)
    except InvalidOperation as e:
        raise ValueError(f"Cannot call `{operation}` because ${name} ({value!r}) cannot be converted to Decimal") from e

    # Raise: NaN and infinities cannot produce a monetary amount
    if not decimal_value.is_finite():
        raise ValueError(f"Cannot call `{operation}` because ${name} ({value!r}) is not finite")

    return decimal_value


def _require_money(value: object, name: str, operation: str) -> None:
    if not isinstance(value, Money):
        raise TypeError(f"Cannot call `{operation}` because ${name} must be a Money instance, but provided value is: {value!r}")
