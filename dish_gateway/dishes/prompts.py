from __future__ import annotations

from datetime import datetime

from .models import DishPreferences, LegacyDishRequest, RecipeRequest

DISH_SYSTEM_PROMPT = (
    "You are a culinary assistant that recommends a single dish. "
    "Reply with the dish name only, without any descriptions, "
    "punctuation or extra text."
)

RECIPE_SYSTEM_PROMPT = (
    "You are a helpful chef. Given a dish name and optional constraints, "
    "write a concise recipe: a short ingredient list followed by numbered "
    "preparation steps. Do not add an introduction or closing remarks."
)

# Dish names are short; keep the completion budget tight.
DISH_MAX_TOKENS = 20

# (attribute, clause template) in the order clauses are appended
_DISH_CLAUSES: tuple[tuple[str, str], ...] = (
    ("dietary_restrictions", " with dietary restrictions of {},"),
    ("flavor_profiles", " with a {} flavor profile,"),
    ("allergies", " safe for someone allergic to {},"),
    ("protein_content", " with {} protein content,"),
    ("carbohydrate_content", " with {} carbohydrate content,"),
    ("fat_content", " with {} fat content,"),
    ("available_ingredients", " using these available ingredients: {},"),
)

_RECIPE_SENTENCES: tuple[tuple[str, str], ...] = (
    ("servings", " It should serve {}."),
    ("dietary_restrictions", " It must respect these dietary restrictions: {}."),
    ("allergies", " It must not contain {}."),
    ("available_ingredients", " Prefer these available ingredients: {}."),
)


def build_dish_prompt(
    preferences: DishPreferences,
    timestamp: datetime | None = None,
) -> str:
    """Build the dish recommendation instruction.

    Optional fields contribute a clause only when they are non-empty. A
    timestamp, when given, is appended last so repeated identical requests
    do not send byte-identical prompts.
    """
    parts = [
        f"Please recommend a dish that is {preferences.cuisine} cuisine, "
        f"can be prepared in {preferences.cooking_time}, "
        f"suitable for {preferences.meal_type} and {preferences.diet_type} diet,"
    ]
    for attr, template in _DISH_CLAUSES:
        value = getattr(preferences, attr)
        if value:
            parts.append(template.format(value))
    if timestamp is not None:
        parts.append(f" {timestamp.isoformat(timespec='seconds')}")
    return "".join(parts)


def build_legacy_prompt(request: LegacyDishRequest) -> str:
    return (
        f"Suggest a dish for {request.meal_type} - Cuisine: {request.cuisine}, "
        f"Cooking Time: {request.cooking_time}. "
        "I just need the dish name without any descriptions or extra text."
    )


def build_recipe_prompt(request: RecipeRequest) -> str:
    parts = [f"Please write a recipe for {request.dish_name}."]
    for attr, template in _RECIPE_SENTENCES:
        value = getattr(request, attr)
        if value:
            parts.append(template.format(value))
    return "".join(parts)
