from __future__ import annotations
import logging
from datetime import date
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .config import EXPIRY_WINDOW_DAYS
from .formatting import round_half_up
from .models import (
    Ingredient,
    IngredientMatch,
    MissingIngredientTotal,
    PantryItem,
    Recipe,
    RecipeAvailability,
    RecipeWithAvailability,
)
from .names import names_match, normalize_name

logger = logging.getLogger(__name__)


class PantryIndex:
    """
    Pantry snapshot indexed by normalized item name.

    Exact name hits are a dict lookup; containment matches ("tomato" vs
    "tomato diced") scan the distinct names only, not every item.
    """

    def __init__(self, items: Iterable[PantryItem]):
        self._by_name: Dict[str, List[Tuple[int, PantryItem]]] = {}
        self.size = 0
        for position, item in enumerate(items):
            self.size += 1
            key = normalize_name(item.name)
            if key:
                self._by_name.setdefault(key, []).append((position, item))

    def candidates(self, name: str) -> List[PantryItem]:
        """Items covering `name`, exact matches only if there are any, else containment matches, in pantry order."""
        key = normalize_name(name)
        if not key:
            return []
        exact = self._by_name.get(key)
        if exact:
            return [item for _, item in exact]
        hits = [
            entry
            for other, entries in self._by_name.items()
            if names_match(key, other)
            for entry in entries
        ]
        hits.sort(key=lambda entry: entry[0])
        return [item for _, item in hits]


PantryLike = Union[PantryIndex, Sequence[PantryItem]]


def _as_index(inventory: PantryLike) -> PantryIndex:
    return inventory if isinstance(inventory, PantryIndex) else PantryIndex(inventory)


def _covering_item(items: List[PantryItem], today: date) -> PantryItem:
    """Soonest expiry among items still good today; expired and undated items only as a fallback."""
    def key(item: PantryItem):
        expiry = item.expiry_date
        if expiry is not None and expiry >= today:
            return (0, expiry)
        if expiry is None:
            return (1, date.max)
        return (2, expiry)

    # min() keeps the first of equal keys, so ties fall back to pantry order
    return min(items, key=key)


def match_ingredient(
    ingredient: Ingredient,
    inventory: PantryLike,
    today: Optional[date] = None,
    window_days: int = EXPIRY_WINDOW_DAYS,
) -> IngredientMatch:
    index = _as_index(inventory)
    today = today or date.today()

    candidates = index.candidates(ingredient.name)
    covering = _covering_item(candidates, today) if candidates else None

    days_until_expiry: Optional[int] = None
    is_expiring = False
    if covering is not None and covering.expiry_date is not None:
        days_until_expiry = (covering.expiry_date - today).days
        is_expiring = 0 <= days_until_expiry <= window_days

    return IngredientMatch(
        satisfied=ingredient.optional or covering is not None,
        covering_item=covering,
        is_expiring=is_expiring,
        days_until_expiry=days_until_expiry,
    )


def calculate_recipe_availability(
    recipe: Recipe,
    inventory: PantryLike,
    today: Optional[date] = None,
    window_days: int = EXPIRY_WINDOW_DAYS,
) -> RecipeAvailability:
    index = _as_index(inventory)
    today = today or date.today()

    required = [i for i in recipe.ingredients if not i.optional]
    missing: List[Ingredient] = []
    expiring: Dict[str, PantryItem] = {}

    for ingredient in required:
        match = match_ingredient(ingredient, index, today=today, window_days=window_days)
        if not match.satisfied:
            missing.append(ingredient)
        elif match.is_expiring and match.covering_item.id not in expiring:
            expiring[match.covering_item.id] = match.covering_item

    total = len(required)
    available = total - len(missing)
    # an empty requirement set is trivially satisfied
    percentage = 100.0 if total == 0 else float(round_half_up(100 * available / total, 1))

    return RecipeAvailability(
        recipe_id=recipe.id,
        availability_percentage=percentage,
        available_count=available,
        required_count=total,
        can_cook_now=not missing,
        missing_ingredients=missing,
        expiring_ingredients=list(expiring.values()),
    )


def calculate_multiple_recipe_availability(
    recipes: Iterable[Recipe],
    inventory: PantryLike,
    today: Optional[date] = None,
    window_days: int = EXPIRY_WINDOW_DAYS,
) -> List[RecipeWithAvailability]:
    index = _as_index(inventory)
    today = today or date.today()
    results = [
        RecipeWithAvailability(
            recipe=recipe,
            availability=calculate_recipe_availability(recipe, index, today=today, window_days=window_days),
        )
        for recipe in recipes
    ]
    logger.debug("availability computed for %d recipe(s) against %d pantry item(s)", len(results), index.size)
    return results


class RecipeSort(str, Enum):
    AVAILABILITY = "availability"
    EXPIRING = "expiring"
    PREP_TIME = "prep_time"
    NAME = "name"


def _time_key(entry: RecipeWithAvailability):
    minutes = entry.recipe.total_time()
    return (minutes is None, minutes or 0)


def rank_recipes_by_availability(
    results: Iterable[RecipeWithAvailability],
    sort_by: Union[RecipeSort, str] = RecipeSort.AVAILABILITY,
) -> List[RecipeWithAvailability]:
    """
    Stable sort of availability results.

    availability: most available first, then quickest (unknown time last).
    expiring: most soon-to-expire pantry items used first, then by availability.
    prep_time: quickest first, unknown time last.
    name: recipe title, case-insensitive.
    """
    sort_by = RecipeSort(sort_by)
    if sort_by is RecipeSort.EXPIRING:
        def key(entry):
            return (-len(entry.availability.expiring_ingredients), -entry.availability.availability_percentage)
    elif sort_by is RecipeSort.PREP_TIME:
        key = _time_key
    elif sort_by is RecipeSort.NAME:
        def key(entry):
            return entry.recipe.title.casefold()
    else:
        def key(entry):
            return (-entry.availability.availability_percentage, *_time_key(entry))

    return sorted(results, key=key)


def find_recipes_for_ingredients(names: Iterable[str], recipes: Iterable[Recipe]) -> List[Recipe]:
    """
    Recipes using at least one of `names` ("what can I make with chicken and rice?"),
    those matching the most ingredients first.
    """
    wanted = [key for key in (normalize_name(n) for n in names) if key]
    if not wanted:
        return []

    scored = []
    for recipe in recipes:
        hits = sum(
            1 for ingredient in recipe.ingredients
            if any(names_match(normalize_name(ingredient.name), key) for key in wanted)
        )
        if hits:
            scored.append((hits, recipe))
    scored.sort(key=lambda pair: -pair[0])
    return [recipe for _, recipe in scored]


class AvailabilityFilter(str, Enum):
    ALL = "all"
    CAN_COOK_NOW = "can_cook_now"
    MISSING_FEW = "missing_few"


def filter_recipes_by_availability(
    results: Iterable[RecipeWithAvailability],
    mode: Union[AvailabilityFilter, str] = AvailabilityFilter.ALL,
    max_missing: int = 3,
) -> List[RecipeWithAvailability]:
    mode = AvailabilityFilter(mode)
    if mode is AvailabilityFilter.CAN_COOK_NOW:
        return [r for r in results if r.availability.can_cook_now]
    if mode is AvailabilityFilter.MISSING_FEW:
        return [
            r for r in results
            if 0 < len(r.availability.missing_ingredients) <= max_missing
        ]
    return list(results)


def recipes_using_expiring_items(results: Iterable[RecipeWithAvailability]) -> List[RecipeWithAvailability]:
    """Recipes that would use up soon-to-expire pantry items, most such items first."""
    using = [r for r in results if r.availability.expiring_ingredients]
    return sorted(using, key=lambda r: -len(r.availability.expiring_ingredients))


def total_missing_ingredients(results: Iterable[RecipeWithAvailability]) -> List[MissingIngredientTotal]:
    """
    Merge the missing ingredients of several recipes into shopping-list lines.

    Lines are keyed by normalized name and unit; numeric amounts are summed,
    descriptive ones ("to taste") contribute no amount.
    """
    lines: Dict[Tuple[str, str], dict] = {}
    for entry in results:
        for ingredient in entry.availability.missing_ingredients:
            unit_key = (ingredient.unit or "").strip().lower()
            key = (normalize_name(ingredient.name), unit_key)
            line = lines.setdefault(key, {
                "name": ingredient.name,
                "unit": ingredient.unit,
                "amount": None,
                "recipes": [],
            })
            if ingredient.amount is not None:
                line["amount"] = (line["amount"] or 0) + ingredient.amount
            if entry.recipe.title not in line["recipes"]:
                line["recipes"].append(entry.recipe.title)
    return [MissingIngredientTotal(**line) for line in lines.values()]


def format_availability_status(availability: RecipeAvailability) -> str:
    if availability.can_cook_now:
        return "Ready to cook!"
    missing = len(availability.missing_ingredients)
    noun = "ingredient" if missing == 1 else "ingredients"
    percentage = round_half_up(availability.availability_percentage, 0)
    return f"{percentage}% available ({missing} {noun} needed)"
