from __future__ import annotations
import logging
from datetime import date
from typing import List, Optional
from mcp.server.fastmcp import FastMCP
from pydantic import BaseModel
from .config import MAX_SERVINGS, MIN_SERVINGS, configure_logging
from .models import (
    MissingIngredientTotal,
    PantryItem,
    Recipe,
    RecipeAvailability,
    RecipeWithAvailability,
    ScaledRecipe,
    ServingValidation,
)
from .availability import (
    calculate_multiple_recipe_availability,
    calculate_recipe_availability,
    filter_recipes_by_availability,
    find_recipes_for_ingredients,
    rank_recipes_by_availability,
    total_missing_ingredients,
)
from .scaling import scale_recipe
from .servings import get_serving_suggestions, validate_serving_size

logger = logging.getLogger(__name__)

mcp = FastMCP("recipe-engine")


class ScaleRecipeResult(BaseModel):
    validation: ServingValidation
    recipe: Optional[ScaledRecipe] = None


@mcp.tool()
def recipe_scale(
    recipe: Recipe,
    target_servings: float,
    min_servings: float = MIN_SERVINGS,
    max_servings: float = MAX_SERVINGS,
) -> ScaleRecipeResult:
    """
    Rescale a recipe's ingredients and per-serving nutrition to a new serving count.

    Use this tool when the user wants to cook a recipe for more or fewer people,
    e.g. "make this for 6" or "halve the recipe".

    This is a READ-ONLY operation (no state changes).

    Args:
      recipe: Recipe (canonical format). `servings` must be set.
      target_servings: Desired number of servings, e.g. 6 or 1.5.
      min_servings / max_servings: Allowed range for target_servings.

    Returns:
      - validation: {is_valid, error}. If is_valid is false, tell the user the error.
      - recipe: the scaled recipe (null when validation failed). Each ingredient has a
        display_amount such as "1 ½" ready to show next to its unit and name.

    Notes:
      - Descriptive amounts like "to taste" are kept as written.
      - Units are never converted (cups stay cups).
    """
    validation = validate_serving_size(target_servings, min_servings, max_servings)
    logger.info("recipe_scale recipe=%s target=%s valid=%s", recipe.id or recipe.title, target_servings, validation.is_valid)
    if not validation.is_valid:
        return ScaleRecipeResult(validation=validation)
    return ScaleRecipeResult(validation=validation, recipe=scale_recipe(recipe, target_servings))


@mcp.tool()
def servings_validate(
    servings: float,
    min_servings: float = MIN_SERVINGS,
    max_servings: float = MAX_SERVINGS,
) -> ServingValidation:
    """
    Check whether a serving count is usable before scaling.

    Returns:
      {is_valid, error}. error is a short user-facing message when is_valid is false.
    """
    return validate_serving_size(servings, min_servings, max_servings)


@mcp.tool()
def servings_suggest(original_servings: float) -> List[float]:
    """
    Suggest up to 4 alternative serving counts for a recipe (half, double, common sizes).

    Use this when the user is unsure how many servings to make.

    Returns:
      A list of numbers, closest to original_servings first. Never contains original_servings.
    """
    return get_serving_suggestions(original_servings)


@mcp.tool()
def recipe_availability(recipe: Recipe, pantry: List[PantryItem], today: Optional[date] = None) -> RecipeAvailability:
    """
    Check how much of a recipe can be made from the pantry.

    Call the pantry listing tool first and pass its items here.

    This is a READ-ONLY operation (no state changes).

    Args:
      recipe: Recipe (canonical format).
      pantry: Current pantry items.
      today: Optional ISO date to evaluate expiry against (defaults to the server's date).

    Returns:
      RecipeAvailability with:
      - availability_percentage (0-100) over non-optional ingredients
      - missing_ingredients: ingredients not found in the pantry
      - expiring_ingredients: pantry items this recipe would use that expire within a few days
      - can_cook_now: true when nothing is missing

    Notes:
      - Names match loosely ("tomato" matches "Tomatoes, diced"); quantities are not compared.
      - Optional ingredients never count as missing.
    """
    logger.info("recipe_availability recipe=%s pantry_items=%d", recipe.id or recipe.title, len(pantry))
    return calculate_recipe_availability(recipe, pantry, today=today)


@mcp.tool()
def recipes_rank_by_pantry(
    recipes: List[Recipe],
    pantry: List[PantryItem],
    only: str = "all",
    max_missing: int = 3,
    sort_by: str = "availability",
    today: Optional[date] = None,
) -> List[RecipeWithAvailability]:
    """
    Rank candidate recipes by how much of each the pantry already covers.

    Use this when the user asks "what can I cook with what I have?".

    Args:
      recipes: Candidate recipes (e.g. fetched with recipes_get).
      pantry: Current pantry items.
      only: "all", "can_cook_now" (nothing missing) or "missing_few" (1..max_missing missing).
      max_missing: Threshold for "missing_few".
      sort_by: "availability" (default), "expiring" (uses up soon-to-expire items first),
               "prep_time" (quickest first) or "name".

    Returns:
      Recipes paired with their availability, in the requested order. The default
      puts the highest availability first and quicker recipes first among equals.
    """
    logger.info("recipes_rank_by_pantry recipes=%d pantry_items=%d only=%s sort_by=%s", len(recipes), len(pantry), only, sort_by)
    results = calculate_multiple_recipe_availability(recipes, pantry, today=today)
    results = filter_recipes_by_availability(results, only, max_missing=max_missing)
    return rank_recipes_by_availability(results, sort_by=sort_by)


@mcp.tool()
def recipes_find_by_ingredients(ingredients: List[str], recipes: List[Recipe]) -> List[Recipe]:
    """
    Find recipes that use any of the given ingredients.

    Use this when the user asks "what can I make with chicken and rice?".

    This is a READ-ONLY operation (no state changes).

    Args:
      ingredients: Ingredient names, e.g. ["chicken", "rice"]. Plurals and
                   capitalization do not matter.
      recipes: Candidate recipes to search.

    Returns:
      The matching recipes, those using the most of the given ingredients first.
      Recipes that use none of them are left out.
    """
    logger.info("recipes_find_by_ingredients ingredients=%s recipes=%d", ingredients, len(recipes))
    return find_recipes_for_ingredients(ingredients, recipes)


@mcp.tool()
def shopping_list_missing(
    recipes: List[Recipe],
    pantry: List[PantryItem],
    today: Optional[date] = None,
) -> List[MissingIngredientTotal]:
    """
    Build a combined shopping list of what is missing for one or more recipes.

    Returns:
      One line per ingredient/unit with the summed amount (null for descriptive
      amounts) and the titles of the recipes that need it.
    """
    logger.info("shopping_list_missing recipes=%d pantry_items=%d", len(recipes), len(pantry))
    results = calculate_multiple_recipe_availability(recipes, pantry, today=today)
    return total_missing_ingredients(results)


def main() -> None:
    configure_logging()
    mcp.run()  # stdio transport


if __name__ == "__main__":
    main()
