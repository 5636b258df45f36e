from decimal import Decimal

import colbert
from colbert import Money, MoneyError, MoneyErrorKind, add, divide, multiply, percent, subtract
from colbert.domain.monetary.currency_registry import EUR, JPY, USD


def test_end_to_end_usd_scenario():
    assert add(Money(100, USD), Money(50, USD)) == Money(150, USD)
    assert divide(Money(100, USD), 5) == Money(20, USD)
    assert multiply(Money(1000, USD), 2.5) == Money(2500, USD)


def test_invoice_with_tax_and_discount():
    unit_price = Money(1999, USD)
    subtotal = multiply(unit_price, 3)
    discount = percent(subtotal, 10)
    taxable = subtract(subtotal, discount)
    tax = percent(taxable, 8.25)
    total = add(taxable, tax)

    assert subtotal == Money(5997, USD)
    # 59.97 * 0.10 = 5.997 -> 6.00
    assert discount == Money(600, USD)
    # 53.97 * 0.0825 = 4.452525 -> 4.45
    assert tax == Money(445, USD)
    assert total == Money(5842, USD)
    assert str(total) == "58.42 USD"
    assert total.as_decimal == colbert.MoneyParts(False, 58, 42)


def test_splitting_a_bill_keeps_whole_yen():
    share = divide(Money(10000, JPY), 3)

    assert share == Money(3333, JPY)
    assert share.major_value == Decimal("3333")


def test_mixing_currencies_is_reported_by_kind():
    try:
        add(Money(100, USD), Money(100, EUR))
    except MoneyError as e:
        kind = e.kind
    else:
        kind = None

    assert kind is MoneyErrorKind.INCOMPATIBLE_CURRENCIES


def test_package_exports():
    assert colbert.get_currency("usd") is USD
    assert colbert.round_half_even(2.135, 2) == Decimal("2.14")
    assert colbert.CURRENCIES[colbert.CurrencyCode.EUR] is EUR
