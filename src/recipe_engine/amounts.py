from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union

from .models import Ingredient


class UnitFamily(str, Enum):
    VOLUME = "volume"
    WEIGHT = "weight"
    COUNT = "count"
    UNITLESS = "unitless"


_VOLUME_UNITS = (
    "cup", "cups", "c",
    "tbsp", "tbs", "tbl", "tablespoon", "tablespoons",
    "tsp", "teaspoon", "teaspoons",
    "ml", "milliliter", "milliliters", "millilitre", "millilitres",
    "cl", "dl",
    "l", "liter", "liters", "litre", "litres",
    "fl oz", "fluid ounce", "fluid ounces",
    "pint", "pints", "pt",
    "quart", "quarts", "qt",
    "gallon", "gallons", "gal",
)

_WEIGHT_UNITS = (
    "g", "gr", "gram", "grams", "gramme", "grammes",
    "mg", "milligram", "milligrams",
    "kg", "kilo", "kilos", "kilogram", "kilograms",
    "oz", "ounce", "ounces",
    "lb", "lbs", "pound", "pounds",
)

_COUNT_UNITS = (
    "whole", "entire", "large", "medium", "small",
    "piece", "pieces", "pc", "pcs", "item", "items",
    "clove", "cloves", "slice", "slices", "strip", "strips",
    "leaf", "leaves", "sprig", "sprigs", "stalk", "stalks",
    "can", "cans", "jar", "jars", "package", "packages", "pkg",
    "bag", "bags", "box", "boxes", "head", "heads", "bunch", "bunches",
)

UNIT_FAMILIES: Dict[str, UnitFamily] = {
    **{u: UnitFamily.VOLUME for u in _VOLUME_UNITS},
    **{u: UnitFamily.WEIGHT for u in _WEIGHT_UNITS},
    **{u: UnitFamily.COUNT for u in _COUNT_UNITS},
}


@dataclass(frozen=True)
class NumericAmount:
    value: float
    unit: Optional[str]
    family: UnitFamily


@dataclass(frozen=True)
class DescriptiveAmount:
    text: str


Amount = Union[NumericAmount, DescriptiveAmount]


def unit_family(unit: Optional[str]) -> UnitFamily:
    """Look up the rounding family of a unit; unknown units count as discrete items."""
    if unit is None:
        return UnitFamily.UNITLESS
    key = " ".join(unit.lower().split()).rstrip(".")
    if not key:
        return UnitFamily.UNITLESS
    return UNIT_FAMILIES.get(key, UnitFamily.COUNT)


def classify_amount(ingredient: Ingredient) -> Amount:
    amount = ingredient.amount
    # NaN never gets here: Ingredient.amount is validated ge=0
    if amount is not None and not math.isinf(amount):
        return NumericAmount(value=amount, unit=ingredient.unit, family=unit_family(ingredient.unit))
    text = (ingredient.original or "").strip() or ingredient.name
    return DescriptiveAmount(text=text)
