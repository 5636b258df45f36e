from __future__ import annotations

import math
from decimal import Decimal, localcontext
from typing import NamedTuple

from colbert.domain.monetary.currency import Currency
from colbert.domain.monetary.errors import MoneyError
from colbert.utils.decimal_tools import sized_context

_SCALAR_TYPES = (int, float, Decimal)


class MoneyParts(NamedTuple):
    """Sign and magnitude split of a Money amount.

    $integer and $decimal are always non-negative; the sign lives in
    $is_negative only. For -1.50 USD this is (True, 1, 50).
    """

    is_negative: bool
    integer: int
    decimal: int


def _coerce_amount(amount: object) -> int:
    # Raise: bool is an int subclass but not an amount
    if isinstance(amount, bool):
        raise MoneyError.invalid_amount(amount)

    if isinstance(amount, int):
        return amount

    if isinstance(amount, float) and math.isfinite(amount) and amount.is_integer():
        return int(amount)

    if isinstance(amount, Decimal) and amount.is_finite() and amount == amount.to_integral_value():
        return int(amount)

    raise MoneyError.invalid_amount(amount)


class Money:
    """Represents a monetary amount as an integer number of minor units.

    $amount counts the currency's smallest unit (cents for USD, yen for JPY,
    fils for BHD), so 10025 with USD is 100.25 USD. Instances are immutable;
    every operation returns a new Money.
    """

    def __init__(self, amount: int, currency: Currency):
        """Initialize Money with minor-unit amount and currency.

        Args:
            amount: Integer amount in minor units. Integral floats and
                Decimals (e.g. 100.0) are accepted and converted to int.
            currency (Currency): Currency object.

        Raises:
            MoneyError: With kind INVALID_AMOUNT if $amount is not a finite integer.
            TypeError: If currency is not Currency instance.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency!r}")

        self._amount = _coerce_amount(amount)
        self._currency = currency

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        """Create a zero amount in $currency."""
        return cls(0, currency)

    @property
    def amount(self) -> int:
        """Get the amount in minor units."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    @property
    def major_value(self) -> Decimal:
        """Get the exact amount in major units, e.g. Decimal("100.25") for 10025 USD cents.

        Built from sign, digits and exponent, so no context precision applies
        and amounts of any size keep every digit.
        """
        sign = 1 if self._amount < 0 else 0
        digits = tuple(int(digit) for digit in str(abs(self._amount)))
        return Decimal((sign, digits, -self._currency.decimal_places))

    @property
    def as_float(self) -> float:
        """Get the amount in major units as float.

        Intended for display and interop only; arithmetic never goes through it.
        """
        return self._amount / self._currency.minor_units_per_major

    @property
    def as_decimal(self) -> MoneyParts:
        """Split the amount into sign, major-unit part and minor-unit remainder.

        Both parts are magnitudes of abs($amount), so -5 USD cents becomes
        (True, 0, 5) rather than a floor/mod pair like (-1, 95).
        """
        integer, decimal = divmod(abs(self._amount), self._currency.minor_units_per_major)
        return MoneyParts(self._amount < 0, integer, decimal)

    def percent(self, percent) -> Money:
        """Return $percent percent of this amount, see `operations.percent`."""
        from colbert.domain.monetary import operations

        return operations.percent(self, percent)

    def format(self, locale: str = "en_US") -> str:
        """Format for display in $locale, see `formatting.format_money`."""
        from colbert.utils.formatting import format_money

        return format_money(self, locale)

    # Comparison operators (same currency required)
    def __eq__(self, other) -> bool:
        """Check equality with another Money object."""
        if not isinstance(other, Money):
            return False
        if self.currency != other.currency:
            return False
        return self.amount == other.amount

    def __lt__(self, other) -> bool:
        """Check if this Money is less than another Money object."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other) -> bool:
        """Check if this Money is less than or equal to another Money object."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other) -> bool:
        """Check if this Money is greater than another Money object."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other) -> bool:
        """Check if this Money is greater than or equal to another Money object."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount >= other.amount

    def _check_same_currency(self, other: Money) -> None:
        from colbert.domain.monetary import operations

        operations.assert_compatible(self, other, operation="compare")

    # Arithmetic operations
    def __add__(self, other):
        """Add two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        from colbert.domain.monetary import operations

        return operations.add(self, other)

    def __sub__(self, other):
        """Subtract two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        from colbert.domain.monetary import operations

        return operations.subtract(self, other)

    def __mul__(self, other):
        """Multiply Money by number (returns Money)."""
        # Money * Money doesn't make sense
        if isinstance(other, bool) or not isinstance(other, _SCALAR_TYPES):
            return NotImplemented
        from colbert.domain.monetary import operations

        return operations.multiply(self, other)

    def __rmul__(self, other):
        """Right multiplication: number * Money."""
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide Money by number (returns Money) or Money by Money (returns Decimal)."""
        from colbert.domain.monetary import operations

        if isinstance(other, Money):
            operations.assert_compatible(self, other, operation="divide")
            if other.amount == 0:
                raise MoneyError.division_by_zero()
            numerator = Decimal(self.amount)
            denominator = Decimal(other.amount)
            with localcontext(sized_context(numerator, denominator)):
                return numerator / denominator

        if isinstance(other, bool) or not isinstance(other, _SCALAR_TYPES):
            return NotImplemented

        return operations.divide(self, other)

    def __neg__(self):
        return Money(-self.amount, self.currency)

    def __pos__(self):
        return Money(self.amount, self.currency)

    def __abs__(self):
        return Money(abs(self.amount), self.currency)

    # String representations
    def __str__(self) -> str:
        """Return string like '1000.50 USD'."""
        return f"{self.major_value} {self.currency}"

    def __repr__(self) -> str:
        """Return string like 'Money(100050, USD)'."""
        return f"{self.__class__.__name__}({self.amount}, {self.currency})"

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self.amount, self.currency.code))
