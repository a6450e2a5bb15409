"""Coordinate rounding and number-to-text formatting."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_coordinate(value: float, decimals: int) -> float:
    """Round ``value`` to the nearest 1/decimals, halves away from zero.

    The decimal representation of the float is rounded, not its binary
    value, so round_coordinate(1.00005, 10000) == 1.0001.
    """
    scaled = Decimal(repr(float(value))) * decimals
    # ROUND_HALF_UP rounds away from zero for negative values as well
    return float(scaled.to_integral_value(rounding=ROUND_HALF_UP)) / decimals


def format_number(value: float) -> str:
    """Render a number for SVG text: ``10`` not ``10.0``, never ``-0`` or exponents."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")
