from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from colbert.domain.monetary.currency import Currency, CurrencyCode


class MoneyErrorKind(Enum):
    """Enumeration of monetary precondition failures."""

    INVALID_AMOUNT = "INVALID_AMOUNT"
    INCOMPATIBLE_CURRENCIES = "INCOMPATIBLE_CURRENCIES"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    OUT_OF_RANGE = "OUT_OF_RANGE"


class MoneyError(ValueError):
    """Precondition failure raised by Money construction and arithmetic.

    A single exception type tagged with a `MoneyErrorKind`, so callers can
    branch on $kind instead of catching several classes. Errors are never
    transient; they signal a caller logic error.

    Attributes:
        kind (MoneyErrorKind): Which precondition was violated.
        currencies (tuple[CurrencyCode, CurrencyCode] | None): Codes of both
            operands, only for `INCOMPATIBLE_CURRENCIES`.
    """

    def __init__(
        self,
        kind: MoneyErrorKind,
        message: str,
        currencies: tuple[CurrencyCode, CurrencyCode] | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.currencies = currencies

    @property
    def message(self) -> str:
        return self.args[0]

    @classmethod
    def invalid_amount(cls, amount: object) -> MoneyError:
        return cls(
            MoneyErrorKind.INVALID_AMOUNT,
            f"$amount must be a finite integer number of minor units, but provided value is: {amount!r}",
        )

    @classmethod
    def incompatible_currencies(cls, lhs: Currency, rhs: Currency, operation: str) -> MoneyError:
        return cls(
            MoneyErrorKind.INCOMPATIBLE_CURRENCIES,
            f"Cannot call `{operation}` because $lhs.currency ({lhs}) differs from $rhs.currency ({rhs})",
            currencies=(lhs.code, rhs.code),
        )

    @classmethod
    def division_by_zero(cls, operation: str = "divide") -> MoneyError:
        return cls(MoneyErrorKind.DIVISION_BY_ZERO, f"Cannot call `{operation}` because $divisor is zero")

    @classmethod
    def out_of_range(cls, name: str, value: object, lower: object, upper: object, operation: str) -> MoneyError:
        return cls(
            MoneyErrorKind.OUT_OF_RANGE,
            f"Cannot call `{operation}` because ${name} ({value}) is not between {lower} and {upper}",
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.kind.name}, {self.message!r})"
