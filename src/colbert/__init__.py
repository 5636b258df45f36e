__version__ = "0.1.0"

from colbert.domain.monetary.currency import Currency, CurrencyCode
from colbert.domain.monetary.currency_registry import CURRENCIES, get_currency
from colbert.domain.monetary.errors import MoneyError, MoneyErrorKind
from colbert.domain.monetary.money import Money, MoneyParts
from colbert.domain.monetary.operations import add, assert_compatible, divide, multiply, percent, subtract
from colbert.utils.formatting import format_money
from colbert.utils.rounding import round_half_even

__all__ = [
    "CURRENCIES",
    "Currency",
    "CurrencyCode",
    "Money",
    "MoneyError",
    "MoneyErrorKind",
    "MoneyParts",
    "add",
    "assert_compatible",
    "divide",
    "format_money",
    "get_currency",
    "multiply",
    "percent",
    "round_half_even",
    "subtract",
]
