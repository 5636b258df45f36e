from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN, localcontext

from colbert.utils.decimal_tools import DecimalLike, as_decimal, sized_context

# Scaled values are snapped to this many fractional digits before the final rounding
SCALE_DIGITS = 8

_SNAP_QUANTUM = Decimal(1).scaleb(-SCALE_DIGITS)
_UNIT = Decimal(1)


def round_half_even(value: DecimalLike, decimal_places: int) -> Decimal:
    """Round $value to $decimal_places using round-half-to-even (banker's rounding).

    Halfway cases go to the even neighbour, so 2.125 rounds to 2.12 and 2.135
    rounds to 2.14. Any other value rounds to the nearest neighbour.

    The value is first scaled by 10**$decimal_places and snapped to
    `SCALE_DIGITS` fractional digits. This absorbs binary floating-point noise
    in float inputs, so 2.1250000000000004 is still treated as the halfway
    case 212.5 at two places.

    The result always carries exactly $decimal_places fractional digits:
    `round_half_even(2.1, 3)` is Decimal("2.100").

    Args:
        value: Number to round (Decimal-like scalar).
        decimal_places: Number of fractional digits to keep (>= 0).

    Returns:
        Rounded value as Decimal with exponent -$decimal_places.

    Raises:
        ValueError: If $decimal_places is not a non-negative int, or $value
            is not a finite number.
    """
    # Raise: precision must be a non-negative integer
    if isinstance(decimal_places, bool) or not isinstance(decimal_places, int) or decimal_places < 0:
        raise ValueError(f"$decimal_places must be a non-negative integer, but provided value is: {decimal_places!r}")

    try:
        decimal_value = as_decimal(value)
    except (TypeError, InvalidOperation) as e:
        raise ValueError(f"Cannot call `round_half_even` because $value ({value!r}) cannot be converted to Decimal") from e

    # Raise: NaN and infinities have no rounded representation
    if not decimal_value.is_finite():
        raise ValueError(f"Cannot call `round_half_even` because $value ({value!r}) is not finite")

    with localcontext(sized_context(decimal_value)):
        scaled = decimal_value.scaleb(decimal_places)
        snapped = scaled.quantize(_SNAP_QUANTUM, rounding=ROUND_HALF_EVEN)
        rounded = snapped.quantize(_UNIT, rounding=ROUND_HALF_EVEN)
        result = rounded.scaleb(-decimal_places)

    return result
