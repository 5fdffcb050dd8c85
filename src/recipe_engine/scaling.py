from __future__ import annotations
import logging
import math
from typing import Iterable, List, Optional

from .amounts import DescriptiveAmount, classify_amount
from .formatting import format_amount, round_half_up
from .models import Ingredient, NutritionPerServing, Recipe, ScaledIngredient, ScaledRecipe

logger = logging.getLogger(__name__)

_MACRO_FIELDS = ("protein", "carbs", "fats", "fiber", "sugar", "sodium")


class ScaleFactorError(ValueError):
    """Raised for a scale factor (or serving count) that is not a finite positive number."""


def _check_factor(factor: float) -> None:
    if not isinstance(factor, (int, float)) or not math.isfinite(factor) or factor <= 0:
        raise ScaleFactorError(f"scale factor must be a finite number greater than 0, got {factor!r}")


def scale_factor(original_servings: Optional[float], target_servings: Optional[float]) -> float:
    """Ratio target/original. Both serving counts must be finite and > 0."""
    for label, value in (("original", original_servings), ("target", target_servings)):
        if value is None or not math.isfinite(value) or value <= 0:
            raise ScaleFactorError(f"{label} servings must be a finite number greater than 0, got {value!r}")
    return target_servings / original_servings


def _base_fields(ingredient: Ingredient) -> dict:
    return ingredient.model_dump(include=set(Ingredient.model_fields))


def scale_ingredient(ingredient: Ingredient, factor: float) -> ScaledIngredient:
    _check_factor(factor)
    # exact comparison: a factor of 1.0000001 is still a scale request
    is_scaled = factor != 1
    amount = classify_amount(ingredient)

    if isinstance(amount, DescriptiveAmount):
        return ScaledIngredient(
            **_base_fields(ingredient),
            scaled_amount=None,
            display_amount=amount.text,
            is_scaled=is_scaled,
            original_amount=None,
        )

    scaled = amount.value * factor
    return ScaledIngredient(
        **_base_fields(ingredient),
        scaled_amount=scaled,
        display_amount=format_amount(scaled, amount.family),
        is_scaled=is_scaled,
        original_amount=amount.value,
    )


def scale_ingredients(ingredients: Iterable[Ingredient], factor: float) -> List[ScaledIngredient]:
    _check_factor(factor)
    return [scale_ingredient(i, factor) for i in ingredients]


def format_ingredient_display(ingredient: ScaledIngredient) -> str:
    """Single display line, e.g. "1 ½ cups flour" or "to taste pepper (optional)"."""
    parts: List[str] = []
    if ingredient.display_amount and ingredient.display_amount != ingredient.name:
        parts.append(ingredient.display_amount)
    if ingredient.scaled_amount is not None and ingredient.unit:
        parts.append(ingredient.unit)
    parts.append(ingredient.name)
    line = " ".join(parts)
    if ingredient.optional:
        line += " (optional)"
    return line


def scale_nutrition(nutrition: Optional[NutritionPerServing], factor: float) -> Optional[NutritionPerServing]:
    if nutrition is None:
        return None
    _check_factor(factor)

    scaled = {}
    if nutrition.calories is not None:
        scaled["calories"] = float(round_half_up(nutrition.calories * factor, 0))
    for field in _MACRO_FIELDS:
        value = getattr(nutrition, field)
        if value is not None:
            scaled[field] = float(round_half_up(value * factor, 1))
    return NutritionPerServing(**scaled)


def scale_recipe(recipe: Recipe, target_servings: float) -> ScaledRecipe:
    """Scale every ingredient and the nutrition of a recipe to target_servings."""
    factor = scale_factor(recipe.servings, target_servings)
    logger.debug("scaling recipe=%s servings %s -> %s (factor %.4f)",
                 recipe.id or recipe.title, recipe.servings, target_servings, factor)
    return ScaledRecipe(
        recipe_id=recipe.id,
        title=recipe.title,
        original_servings=recipe.servings,
        target_servings=target_servings,
        scale_factor=factor,
        ingredients=scale_ingredients(recipe.ingredients, factor),
        nutrition=scale_nutrition(recipe.nutrition_per_serving, factor),
    )
