"""
Kitchen-friendly rendering of decimal quantities.

2.5 -> "2 ½", 0.333 -> "⅓", 3.0 -> "3", 0.3 -> "0.3".
"""
from __future__ import annotations
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import NamedTuple, Optional

from .amounts import UnitFamily
from .config import FRACTION_TOLERANCE


class KitchenFraction(NamedTuple):
    value: float
    glyph: str
    text: str


# Sorted by value. Remainders are snapped to the nearest entry within tolerance.
KITCHEN_FRACTIONS = (
    KitchenFraction(1 / 8, "⅛", "1/8"),
    KitchenFraction(1 / 4, "¼", "1/4"),
    KitchenFraction(1 / 3, "⅓", "1/3"),
    KitchenFraction(3 / 8, "⅜", "3/8"),
    KitchenFraction(1 / 2, "½", "1/2"),
    KitchenFraction(5 / 8, "⅝", "5/8"),
    KitchenFraction(2 / 3, "⅔", "2/3"),
    KitchenFraction(3 / 4, "¾", "3/4"),
    KitchenFraction(7 / 8, "⅞", "7/8"),
)

# Count-like amounts at or above this are shown as whole numbers
WHOLE_COUNT_THRESHOLD = 10


def match_fraction(remainder: float, tolerance: float = FRACTION_TOLERANCE) -> Optional[KitchenFraction]:
    best: Optional[KitchenFraction] = None
    best_diff = tolerance
    for fraction in KITCHEN_FRACTIONS:
        diff = abs(remainder - fraction.value)
        if diff <= best_diff:
            best, best_diff = fraction, diff
    return best


def round_half_up(value: float, places: int) -> Decimal:
    exp = Decimal(1).scaleb(-places)
    return Decimal(repr(value)).quantize(exp, rounding=ROUND_HALF_UP)


def _decimal_text(value: float) -> str:
    rounded = round_half_up(value, 1)
    if rounded == 0 and value > 0:
        rounded = round_half_up(value, 2)
    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_quantity(amount: float, tolerance: float = FRACTION_TOLERANCE, ascii: bool = False) -> str:
    """
    Render a non-negative amount as a whole number, kitchen fraction,
    mixed number ("2 ½") or short decimal.

    Args:
      amount: value to render, must be finite and >= 0.
      tolerance: absolute distance allowed when snapping to a fraction.
      ascii: render fractions as "1/2" instead of Unicode glyphs.
    """
    if not math.isfinite(amount) or amount < 0:
        raise ValueError(f"cannot format quantity {amount!r}")

    whole = math.floor(amount)
    remainder = amount - whole
    if remainder <= tolerance:
        if whole == 0 and amount > 0:
            return _decimal_text(amount)
        return str(whole)
    if remainder >= 1 - tolerance:
        return str(whole + 1)

    fraction = match_fraction(remainder, tolerance)
    if fraction is None:
        return _decimal_text(amount)

    symbol = fraction.text if ascii else fraction.glyph
    return f"{whole} {symbol}" if whole > 0 else symbol


def format_amount(amount: float, family: UnitFamily, ascii: bool = False) -> str:
    """Like format_quantity, but large counts ("12 eggs") are never fractional."""
    if family in (UnitFamily.COUNT, UnitFamily.UNITLESS) and amount >= WHOLE_COUNT_THRESHOLD:
        return str(int(round_half_up(amount, 0)))
    return format_quantity(amount, ascii=ascii)
