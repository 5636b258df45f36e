from decimal import Decimal

import pytest

from colbert.utils.decimal_tools import MONEY_CONTEXT, as_decimal, sized_context


def test_float_is_converted_via_shortest_repr():
    assert as_decimal(2.135) == Decimal("2.135")
    assert as_decimal(0.1) == Decimal("0.1")


def test_decimal_is_returned_unchanged():
    value = Decimal("1.10")
    assert as_decimal(value) is value


@pytest.mark.parametrize("value", [True, None, [1]])
def test_unsupported_types_raise_type_error(value):
    with pytest.raises(TypeError):
        as_decimal(value)


def test_sized_context_grows_with_operands():
    base = sized_context().prec
    wide = sized_context(Decimal(10**70), Decimal("0.25"))

    assert base == MONEY_CONTEXT.prec
    assert wide.prec == MONEY_CONTEXT.prec + 71 + 2 + 2
