import pytest

from dish_gateway.dishes.formatting import format_recipe, sanitize_dish_name, strip_line_breaks


def test_strip_line_breaks_handles_all_styles():
    assert strip_line_breaks("\n\nPaella\r\n") == "Paella"
    assert strip_line_breaks("a\rb\nc") == "abc"


def test_strip_line_breaks_replacement():
    assert strip_line_breaks("one\ntwo", " ") == "one two"


def test_sanitize_removes_punctuation():
    assert sanitize_dish_name('\n\n"Spaghetti Carbonara!"\n') == "Spaghetti Carbonara"


def test_sanitize_keeps_digits_and_accents():
    assert sanitize_dish_name("Crème brûlée (2 servings)") == "Crème brûlée 2 servings"


def test_sanitize_drops_underscores():
    assert sanitize_dish_name("tofu_stir_fry") == "tofustirfry"


@pytest.mark.parametrize("raw", [
    "\n\nChicken Tikka Masala.",
    "  Bibimbap -- Korean rice bowl!  ",
    "Crème brûlée\r\n",
    "",
    "***",
])
def test_sanitize_is_idempotent(raw):
    once = sanitize_dish_name(raw)
    assert sanitize_dish_name(once) == once


def test_format_recipe_flattens_lines():
    raw = "Ingredients:\n- 2 eggs\n- 1 cup flour\n\nSteps:\r\n1. Mix.\n"

    assert format_recipe(raw) == "Ingredients: - 2 eggs - 1 cup flour Steps: 1. Mix."
