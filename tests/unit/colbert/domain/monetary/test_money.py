from decimal import Context, Decimal

import pytest

from colbert.domain.monetary.currency_registry import BHD, EUR, JPY, USD
from colbert.domain.monetary.errors import MoneyError, MoneyErrorKind
from colbert.domain.monetary.money import Money, MoneyParts


# region Construction


def test_creates_money_with_integer_amount():
    m = Money(100, USD)

    assert m.amount == 100
    assert m.currency is USD


def test_integral_float_and_decimal_amounts_are_converted_to_int():
    assert Money(100.0, USD).amount == 100
    assert type(Money(100.0, USD).amount) is int
    assert Money(Decimal("250"), USD).amount == 250


@pytest.mark.parametrize(
    "amount",
    [100.5, float("nan"), float("inf"), float("-inf"), Decimal("1.5"), Decimal("NaN"), "100", None, True],
)
def test_non_integer_amount_raises_invalid_amount(amount):
    with pytest.raises(MoneyError) as exc_info:
        Money(amount, USD)

    assert exc_info.value.kind is MoneyErrorKind.INVALID_AMOUNT


def test_currency_must_be_currency_instance():
    with pytest.raises(TypeError):
        Money(100, "USD")


def test_zero():
    assert Money.zero(JPY) == Money(0, JPY)


# endregion

# region Accessors


def test_as_float_converts_minor_units_to_major_units():
    assert Money(10025, USD).as_float == 100.25
    assert Money(100, USD).as_float == 1
    assert Money(1000, JPY).as_float == 1000
    assert Money(1234, BHD).as_float == 1.234


def test_major_value_is_exact_decimal():
    assert Money(10025, USD).major_value == Decimal("100.25")
    assert str(Money(1000, USD).major_value) == "10.00"
    assert str(Money(-5, USD).major_value) == "-0.05"


def test_as_decimal_splits_integer_and_decimal_parts():
    assert Money(10025, USD).as_decimal == MoneyParts(False, 100, 25)
    assert Money(1234, BHD).as_decimal == MoneyParts(False, 1, 234)
    assert Money(1000, JPY).as_decimal == MoneyParts(False, 1000, 0)


def test_as_decimal_keeps_sign_out_of_the_parts():
    parts = Money(-150, USD).as_decimal

    assert parts.is_negative is True
    assert parts.integer == 1
    assert parts.decimal == 50
    assert Money(-5, USD).as_decimal == MoneyParts(True, 0, 5)


# endregion

# region Operators


def test_equality_requires_same_currency_and_amount():
    assert Money(100, USD) == Money(100, USD)
    assert Money(100, USD) != Money(101, USD)
    assert Money(100, USD) != Money(100, EUR)
    assert Money(100, USD) != 100


def test_hash_is_consistent_with_equality():
    assert hash(Money(100, USD)) == hash(Money(100, USD))
    assert len({Money(100, USD), Money(100, USD), Money(100, EUR)}) == 2


def test_ordering_within_a_currency():
    assert Money(100, USD) < Money(200, USD)
    assert Money(200, USD) >= Money(200, USD)
    assert max(Money(5, USD), Money(7, USD)) == Money(7, USD)


def test_ordering_across_currencies_raises():
    with pytest.raises(MoneyError) as exc_info:
        Money(100, USD) < Money(100, EUR)

    assert exc_info.value.kind is MoneyErrorKind.INCOMPATIBLE_CURRENCIES


def test_arithmetic_operators():
    assert Money(100, USD) + Money(50, USD) == Money(150, USD)
    assert Money(100, USD) - Money(150, USD) == Money(-50, USD)
    assert Money(1000, USD) * 2.5 == Money(2500, USD)
    assert 3 * Money(10, USD) == Money(30, USD)
    assert Money(100, USD) / 5 == Money(20, USD)


def test_money_divided_by_money_is_a_ratio():
    assert Money(300, USD) / Money(200, USD) == Decimal("1.5")


def test_money_divided_by_zero_money_raises():
    with pytest.raises(MoneyError) as exc_info:
        Money(300, USD) / Money(0, USD)

    assert exc_info.value.kind is MoneyErrorKind.DIVISION_BY_ZERO


def test_unsupported_operands_raise_type_error():
    with pytest.raises(TypeError):
        Money(100, USD) + 1
    with pytest.raises(TypeError):
        Money(100, USD) * Money(2, USD)
    with pytest.raises(TypeError):
        Money(100, USD) * "2"


def test_unary_operators():
    assert -Money(100, USD) == Money(-100, USD)
    assert +Money(100, USD) == Money(100, USD)
    assert abs(Money(-100, USD)) == Money(100, USD)


def test_percent_method():
    assert Money(100, USD).percent(50).amount == 50
    assert Money(1000, USD).percent(33).amount == 330


def test_string_representations():
    assert str(Money(10025, USD)) == "100.25 USD"
    assert str(Money(1000, JPY)) == "1000 JPY"
    assert repr(Money(10025, USD)) == "Money(10025, USD)"


# endregion

# region Large amounts


def test_large_amounts_keep_every_digit():
    m = Money(10**70 + 1, USD)

    assert m.major_value == Decimal(10**70 + 1).scaleb(-2, context=Context(prec=100))
    assert str(m) == "1" + "0" * 68 + ".01 USD"
    assert m / Money(1, USD) == Decimal(10**70 + 1)


# endregion
