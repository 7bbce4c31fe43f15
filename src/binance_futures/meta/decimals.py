"""Exact decimal helpers for venue filter values.

Binance encodes tick sizes, step sizes and bounds as strings such as
"0.00010000". Everything here works on Decimal without touching float, and
without a decimal context, so no value is ever rounded on the way in.
"""

import re
from decimal import Decimal, InvalidOperation

from binance_futures.exceptions import MalformedDecimal

_DECIMAL_LITERAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_INTEGER_LITERAL = re.compile(r"[+-]?\d+", re.ASCII)


def parse_decimal(value: object, field: str | None = None) -> Decimal:
    """Parse a string/int/Decimal into an exact, finite Decimal.

    Floats are rejected rather than converted: a float has already lost
    the venue's exact value.

    Raises:
        MalformedDecimal: If the value is not a finite decimal literal.
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, Decimal)):
        raise MalformedDecimal(value, field)
    # Decimal() also takes underscores, whitespace and non-ASCII digits
    if isinstance(value, str) and not _DECIMAL_LITERAL.fullmatch(value):
        raise MalformedDecimal(value, field)
    try:
        result = Decimal(value)
    except (InvalidOperation, ValueError) as exc:
        raise MalformedDecimal(value, field) from exc
    if not result.is_finite():
        raise MalformedDecimal(value, field)
    return result


def strip_trailing_zeros(value: Decimal) -> Decimal:
    """Remove trailing zeros from the coefficient, keeping the exact value.

    Unlike ``Decimal.normalize`` this never rounds to the context precision.
    Zero collapses to ``Decimal("0")``.
    """
    sign, digits, exponent = value.as_tuple()
    if not any(digits):
        return Decimal(0)
    digits = list(digits)
    while digits[-1] == 0:
        digits.pop()
        exponent += 1  # type: ignore[operator]
    return Decimal((sign, tuple(digits), exponent))


def decimal_places(value: object, field: str | None = None) -> int:
    """Return the number of decimal places of a value once trailing zeros are gone.

    "0.00010000" -> 4, "0.001" -> 3, "1" -> 0. Whole multiples of ten give a
    negative scale ("10" -> -1).
    """
    exponent = strip_trailing_zeros(parse_decimal(value, field)).as_tuple().exponent
    return -exponent  # type: ignore[operator]


def parse_exact(value: object, field: str | None = None) -> Decimal:
    """Parse and strip trailing zeros in one go."""
    return strip_trailing_zeros(parse_decimal(value, field))


def parse_precision(value: object, field: str | None = None) -> int:
    """Parse an integer precision field (JSON int or digit string)."""
    if isinstance(value, bool):
        raise MalformedDecimal(value, field)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_LITERAL.fullmatch(value):
        return int(value)
    raise MalformedDecimal(value, field)


def round_to_step(value: Decimal, step: Decimal) -> Decimal:
    """Round a value down to the nearest step increment.

    Uses integer division to ensure we always round DOWN (never up),
    which keeps an order inside the venue's LOT_SIZE grid.

    Args:
        value: The raw quantity to round.
        step: The minimum increment (e.g., 0.001 for BTC).

    Returns:
        The value rounded down to the nearest step.
    """
    return (value // step) * step
