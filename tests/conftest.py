from __future__ import annotations
from datetime import date, timedelta

import pytest

from recipe_engine.models import Ingredient, NutritionPerServing, PantryItem, Recipe

TODAY = date(2026, 10, 18)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def pantry() -> list[PantryItem]:
    return [
        PantryItem(id="p1", name="Tomatoes", quantity=4, unit="pcs", category="Produce",
                   expiry_date=TODAY + timedelta(days=2)),
        PantryItem(id="p2", name="All-purpose flour", quantity=1, unit="kg", category="Pantry"),
        PantryItem(id="p3", name="Eggs", quantity=12, unit="pcs", category="Dairy",
                   expiry_date=TODAY + timedelta(days=10)),
        PantryItem(id="p4", name="Milk", quantity=1, unit="l", category="Dairy",
                   expiry_date=TODAY - timedelta(days=1)),
        PantryItem(id="p5", name="olive oil", quantity=500, unit="ml", category="Pantry"),
    ]


@pytest.fixture
def recipe() -> Recipe:
    return Recipe(
        id="shakshuka-bake",
        title="Shakshuka bake",
        servings=4,
        prep_time_minutes=10,
        cook_time_minutes=25,
        ingredients=[
            Ingredient(name="tomatoes, diced", amount=2, unit="cups"),
            Ingredient(name="flour", amount=2, unit="cups"),
            Ingredient(name="eggs", amount=3, unit="large"),
            Ingredient(name="butter", amount=1, unit="cup"),
            Ingredient(name="vanilla", amount=1, unit="tsp", optional=True),
            Ingredient(name="salt", original="to taste"),
        ],
        nutrition_per_serving=NutritionPerServing(calories=250, protein=12, carbs=30, fats=8),
    )
