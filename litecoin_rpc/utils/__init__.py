"""
Utility helpers.

Re-exports:
- amount: litoshi <-> litecoin conversions with truncation
"""

from .amount import (COIN, DECIMALS, to_decimal, to_fixed, to_ltc,
                     to_minor_units, to_satoshi, truncate_to_fixed)

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
