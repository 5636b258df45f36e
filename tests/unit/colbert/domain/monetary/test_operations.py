import pytest

from colbert.domain.monetary.currency_registry import BHD, EUR, JPY, USD
from colbert.domain.monetary.errors import MoneyError, MoneyErrorKind
from colbert.domain.monetary.money import Money
from colbert.domain.monetary.operations import add, assert_compatible, divide, multiply, percent, subtract


# region add / subtract


def test_add_same_currency():
    total = add(Money(100, USD), Money(50, USD))

    assert total.amount == 150
    assert total.currency is USD


def test_subtract_same_currency():
    difference = subtract(Money(100, USD), Money(50, USD))

    assert difference.amount == 50
    assert difference.currency is USD


@pytest.mark.parametrize("operation", [add, subtract])
def test_different_currencies_raise_incompatible_currencies(operation):
    with pytest.raises(MoneyError) as exc_info:
        operation(Money(100, USD), Money(50, EUR))

    error = exc_info.value
    assert error.kind is MoneyErrorKind.INCOMPATIBLE_CURRENCIES
    assert error.currencies == (USD.code, EUR.code)
    assert f"`{operation.__name__}`" in error.message


@pytest.mark.parametrize("amount", [0, 1, 999, -250, 3827932])
@pytest.mark.parametrize("n", [0, 7, -13, 10**12])
def test_subtract_undoes_add(amount, n):
    m = Money(amount, USD)

    assert subtract(add(m, Money(n, USD)), Money(n, USD)).amount == m.amount


def test_operations_do_not_mutate_inputs():
    lhs = Money(100, USD)
    rhs = Money(50, USD)

    add(lhs, rhs)
    multiply(lhs, 3)

    assert lhs == Money(100, USD)
    assert rhs == Money(50, USD)


def test_assert_compatible():
    assert_compatible(Money(1, USD), Money(2, USD))

    with pytest.raises(MoneyError) as exc_info:
        assert_compatible(Money(1, USD), Money(2, JPY), operation="transfer")

    assert "Cannot call `transfer`" in str(exc_info.value)


def test_non_money_operand_raises_type_error():
    with pytest.raises(TypeError):
        add(Money(1, USD), 1)
    with pytest.raises(TypeError):
        multiply(100, 2)


# endregion

# region multiply


def test_multiply_by_integer():
    product = multiply(Money(100, USD), 5)

    assert product.amount == 500
    assert product.currency is USD


def test_multiply_by_float():
    assert multiply(Money(1000, USD), 2.5).amount == 2500
    assert multiply(Money(3827932, USD), 0.25).amount == 956983


def test_multiply_rounds_half_to_even_minor_unit():
    # 0.05 USD * 0.5 = 0.025 -> 0.02; 0.15 USD * 0.5 = 0.075 -> 0.08
    assert multiply(Money(5, USD), 0.5).amount == 2
    assert multiply(Money(15, USD), 0.5).amount == 8
    assert multiply(Money(-5, USD), 0.5).amount == -2


def test_multiply_uses_currency_decimal_places():
    # JPY has no minor units below the yen
    assert multiply(Money(25, JPY), 0.1).amount == 2
    assert multiply(Money(35, JPY), 0.1).amount == 4
    # BHD keeps three digits
    assert multiply(Money(1001, BHD), 0.5).amount == 500


@pytest.mark.parametrize("factor", [float("nan"), float("inf"), "abc"])
def test_multiply_by_non_finite_factor_raises(factor):
    with pytest.raises(ValueError):
        multiply(Money(100, USD), factor)


def test_multiply_by_money_raises_type_error():
    with pytest.raises(TypeError):
        multiply(Money(100, USD), Money(2, USD))


# endregion

# region divide


def test_divide_by_number():
    quotient = divide(Money(100, USD), 5)

    assert quotient.amount == 20
    assert quotient.currency is USD


def test_divide_rounds_half_to_even():
    assert divide(Money(100, USD), 3).amount == 33
    assert divide(Money(200, USD), 3).amount == 67
    assert divide(Money(5, USD), 2).amount == 2
    assert divide(Money(7, USD), 2).amount == 4
    assert divide(Money(100, USD), -8).amount == -12


@pytest.mark.parametrize("divisor", [0, 0.0, -0.0])
def test_divide_by_zero_raises(divisor):
    with pytest.raises(MoneyError) as exc_info:
        divide(Money(100, USD), divisor)

    assert exc_info.value.kind is MoneyErrorKind.DIVISION_BY_ZERO


# endregion

# region percent


def test_percent():
    assert percent(Money(100, USD), 50).amount == 50
    assert percent(Money(1000, USD), 33).amount == 330
    assert percent(Money(1000, USD), 0).amount == 0
    assert percent(Money(1000, USD), 100).amount == 1000


def test_percent_rounds_half_to_even():
    # 12.5% of 0.20 USD = 0.025 -> 0.02
    assert percent(Money(20, USD), 12.5).amount == 2
    # 12.5% of 0.60 USD = 0.075 -> 0.08
    assert percent(Money(60, USD), 12.5).amount == 8


@pytest.mark.parametrize("value", [101, -1, 100.0001])
def test_percent_outside_range_raises(value):
    with pytest.raises(MoneyError) as exc_info:
        percent(Money(100, USD), value)

    assert exc_info.value.kind is MoneyErrorKind.OUT_OF_RANGE


def test_percent_nan_raises_value_error():
    with pytest.raises(ValueError):
        percent(Money(100, USD), float("nan"))


# endregion

# region Large amounts


def test_scalar_operations_on_amounts_beyond_base_precision():
    big = 10**70 + 1

    assert multiply(Money(10**57, USD), 1).amount == 10**57
    assert multiply(Money(big, USD), 2).amount == 2 * big
    assert divide(Money(big + 1, USD), 2).amount == (big + 1) // 2
    assert percent(Money(big + 1, USD), 50).amount == (big + 1) // 2
    # Half of an odd cent count is a tie and goes to the even neighbour
    assert multiply(Money(big, USD), 0.5).amount == (big - 1) // 2


# endregion
