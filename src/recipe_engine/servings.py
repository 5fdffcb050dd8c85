from __future__ import annotations
import math
from typing import List, Union

from .config import MAX_SERVINGS, MIN_SERVINGS
from .models import ServingValidation

Number = Union[int, float]

COMMON_SERVINGS = (1, 2, 4, 6, 8)


def _display_number(value: float) -> Number:
    return int(value) if float(value).is_integer() else value


def validate_serving_size(
    value: Number,
    min_servings: Number = MIN_SERVINGS,
    max_servings: Number = MAX_SERVINGS,
) -> ServingValidation:
    """
    Check a requested serving count against [min_servings, max_servings].

    Never raises: an unusable value comes back as is_valid=False with a
    message that can be shown next to the serving stepper.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        return ServingValidation(is_valid=False, error="Please enter a valid number")
    if value < min_servings:
        return ServingValidation(is_valid=False, error=f"Minimum serving size is {_display_number(min_servings)}")
    if value > max_servings:
        return ServingValidation(is_valid=False, error=f"Maximum serving size is {_display_number(max_servings)}")
    return ServingValidation(is_valid=True)


def get_serving_suggestions(
    original: Number,
    limit: int = 4,
    min_servings: Number = MIN_SERVINGS,
    max_servings: Number = MAX_SERVINGS,
) -> List[Number]:
    """Alternative serving counts, closest to the original first."""
    if isinstance(original, bool) or not isinstance(original, (int, float)):
        return []
    if not math.isfinite(original) or original <= 0:
        return []
    candidates = [original / 2, original * 2, *COMMON_SERVINGS]

    seen = set()
    pool: List[Number] = []
    for candidate in candidates:
        if candidate == original or candidate in seen:
            continue
        seen.add(candidate)
        if validate_serving_size(candidate, min_servings, max_servings).is_valid:
            pool.append(_display_number(candidate))

    pool.sort(key=lambda c: (abs(c - original), c))
    return pool[:limit]
