"""
Conversions between litoshi integers and 8-decimal litecoin amounts.

All arithmetic is `decimal.Decimal`; floats are read through `repr()` so
`1.1` means exactly `Decimal("1.1")`. Excess digits are truncated toward
zero, never rounded:

    >>> truncate_to_fixed(1.123456789)
    '1.12345678'
    >>> to_minor_units("0.5")
    50000000
    >>> to_decimal(150000000)
    '1.50000000'
"""

from __future__ import annotations

from decimal import ROUND_DOWN, Context, Decimal, InvalidOperation
from typing import Union

__all__ = [
    "COIN",
    "DECIMALS",
    "to_minor_units",
    "to_decimal",
    "truncate_to_fixed",
    "to_satoshi",
    "to_ltc",
    "to_fixed",
]

Amount = Union[int, float, str, Decimal]

DECIMALS = 8
COIN = 10**DECIMALS  # litoshis per litecoin

# Large enough that quantize and scaleb are exact for any realistic amount
_CTX = Context(prec=64, rounding=ROUND_DOWN)


def _as_decimal(value: Amount) -> Decimal:
    if isinstance(value, bool):
        raise TypeError("amount must be a number, not bool")
    if isinstance(value, float):
        value = repr(value)
    try:
        d = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ValueError(f"invalid amount: {value!r}") from e
    if not d.is_finite():
        raise ValueError(f"amount must be finite: {value!r}")
    return d


def _truncate(value: Decimal, precision: int) -> Decimal:
    if precision < 0:
        raise ValueError("precision must be >= 0")
    try:
        d = value.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_DOWN, context=_CTX)
    except InvalidOperation as e:
        raise ValueError(f"amount out of range: {value!r}") from e
    # no "-0.00000000"
    return d.copy_abs() if d.is_zero() else d


def truncate_to_fixed(number: Amount, precision: int = DECIMALS) -> str:
    """Fixed-point string with exactly `precision` digits, truncated toward zero."""
    return format(_truncate(_as_decimal(number), precision), "f")


def to_minor_units(amount: Amount) -> int:
    """Litecoin amount -> integer litoshis (truncated at 8 decimals)."""
    return int(_truncate(_as_decimal(amount), DECIMALS).scaleb(DECIMALS, context=_CTX))


def to_decimal(amount: Union[int, str, Decimal]) -> str:
    """Integer litoshis -> 8-decimal litecoin string."""
    litoshis = int(_as_decimal(amount))
    return format(_truncate(Decimal(litoshis).scaleb(-DECIMALS, context=_CTX), DECIMALS), "f")


# Short aliases
to_satoshi = to_minor_units
to_ltc = to_decimal
to_fixed = truncate_to_fixed
