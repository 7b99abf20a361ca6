from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

_REQUEST_CONFIG = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


class DishPreferences(BaseModel):
    model_config = _REQUEST_CONFIG

    cuisine: str = Field(..., min_length=1)
    cooking_time: str = Field(..., min_length=1, alias="cookingTime")
    meal_type: str = Field(..., min_length=1, alias="mealType")
    diet_type: str = Field(..., min_length=1, alias="dietType")
    dietary_restrictions: str | None = Field(default=None, alias="dietaryRestrictions")
    flavor_profiles: str | None = Field(default=None, alias="flavorProfiles")
    allergies: str | None = None
    protein_content: str | None = Field(default=None, alias="proteinContent")
    carbohydrate_content: str | None = Field(default=None, alias="carbohydrateContent")
    fat_content: str | None = Field(default=None, alias="fatContent")
    available_ingredients: str | None = Field(
        default=None,
        alias="availableIngredients",
        description="Ingredients the dish should be built around",
    )


class LegacyDishRequest(BaseModel):
    """Body accepted by the legacy ``POST /`` endpoint."""

    model_config = _REQUEST_CONFIG

    cuisine: str = Field(..., min_length=1)
    cooking_time: str = Field(..., min_length=1, alias="cookingTime")
    meal_type: str = Field(..., min_length=1, alias="mealType")


class RecipeRequest(BaseModel):
    model_config = _REQUEST_CONFIG

    dish_name: str = Field(..., min_length=1, alias="dishName")
    servings: str | None = None
    dietary_restrictions: str | None = Field(default=None, alias="dietaryRestrictions")
    allergies: str | None = None
    available_ingredients: str | None = Field(default=None, alias="availableIngredients")


class DishRecommendationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    dish_recommendation: str = Field(..., alias="dishRecommendation")


class RecipeResponse(BaseModel):
    recipe: str
