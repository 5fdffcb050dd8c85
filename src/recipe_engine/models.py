from __future__ import annotations
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, HttpUrl


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Ingredient(_Frozen):
    name: str = Field(..., min_length=1)
    amount: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = None
    optional: bool = False
    original: Optional[str] = None  # as-authored text, e.g. "to taste"


class ScaledIngredient(Ingredient):
    scaled_amount: Optional[float] = None
    display_amount: str = Field(..., min_length=1)
    is_scaled: bool
    original_amount: Optional[float] = None


class NutritionPerServing(_Frozen):
    calories: Optional[float] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fats: Optional[float] = None
    fiber: Optional[float] = None
    sugar: Optional[float] = None
    sodium: Optional[float] = None


class Recipe(_Frozen):
    id: Optional[str] = None
    title: str
    servings: Optional[float] = None
    prep_time_minutes: Optional[int] = None
    cook_time_minutes: Optional[int] = None
    total_time_minutes: Optional[int] = None
    ingredients: List[Ingredient] = []
    steps: List[str] = []
    tags: List[str] = []
    nutrition_per_serving: Optional[NutritionPerServing] = None
    source_url: Optional[HttpUrl] = None

    def total_time(self) -> Optional[int]:
        if self.total_time_minutes is not None:
            return self.total_time_minutes
        if self.prep_time_minutes is None and self.cook_time_minutes is None:
            return None
        return (self.prep_time_minutes or 0) + (self.cook_time_minutes or 0)


class PantryItem(_Frozen):
    id: str
    name: str = Field(..., min_length=1)
    quantity: Optional[float] = None
    unit: Optional[str] = None
    category: Optional[str] = None
    expiry_date: Optional[date] = None


class ServingValidation(_Frozen):
    is_valid: bool
    error: Optional[str] = None


class IngredientMatch(_Frozen):
    satisfied: bool
    covering_item: Optional[PantryItem] = None
    is_expiring: bool = False
    days_until_expiry: Optional[int] = None


class RecipeAvailability(_Frozen):
    recipe_id: Optional[str] = None
    availability_percentage: float = Field(..., ge=0, le=100)
    available_count: int = 0
    required_count: int = 0
    can_cook_now: bool = False
    missing_ingredients: List[Ingredient] = []
    expiring_ingredients: List[PantryItem] = []


class RecipeWithAvailability(_Frozen):
    recipe: Recipe
    availability: RecipeAvailability


class ScaledRecipe(_Frozen):
    recipe_id: Optional[str] = None
    title: str
    original_servings: float
    target_servings: float
    scale_factor: float
    ingredients: List[ScaledIngredient] = []
    nutrition: Optional[NutritionPerServing] = None


class MissingIngredientTotal(_Frozen):
    name: str
    unit: Optional[str] = None
    amount: Optional[float] = Field(None, ge=0)
    recipes: List[str] = []
