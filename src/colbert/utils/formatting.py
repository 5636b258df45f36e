"""Locale-aware display of Money values.

All locale rules (symbols, separators, digit grouping, symbol placement)
come from Unicode CLDR via Babel; this module only feeds Babel the exact
major-unit amount, the ISO 4217 code and the fraction-digit bounds.
"""
from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING

from babel import Locale, UnknownLocaleError

if TYPE_CHECKING:
    from colbert.domain.monetary.money import Money

logger = logging.getLogger(__name__)


def format_money(money: Money, locale: str = "en_US") -> str:
    """Format $money for display in $locale with as few decimals as needed.

    The locale's standard currency pattern is used, but trailing zero
    fraction digits are dropped: 10.00 USD renders as "10 $US" and 10.20 USD
    as "10,2 $US" in "fr-FR". At most the currency's `decimal_places` digits
    are shown.

    Accepts both POSIX ("fr_FR") and BCP 47 ("fr-FR") locale identifiers.

    Examples:
        >>> format_money(Money(123456, USD), "en_US")
        '$1,234.56'

    Raises:
        ValueError: If $locale is not a known locale identifier.
    """
    try:
        babel_locale = Locale.parse(locale.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as e:
        raise ValueError(f"Cannot call `format_money` because $locale ('{locale}') is not a known locale") from e

    # Copy, as Babel shares pattern objects across calls for the same locale
    pattern = copy.copy(babel_locale.currency_formats["standard"])
    pattern.frac_prec = (0, money.currency.decimal_places)

    code = money.currency.code.value
    logger.debug(f"Formatting {money!r} for locale '{babel_locale}'")
    return pattern.apply(money.major_value, babel_locale, currency=code, currency_digits=False)
