from __future__ import annotations

from recipetype.domain import ParsedRecipe, parse_recipe, serialize_recipe


def test_serialize_round_trip(carbonara_text: str, salad_text: str) -> None:
    texts = (
        carbonara_text,
        salad_text,
        "= Only title",
        "+ Part\n# Step",
        "",
        "=\n+\n# s\n-",
        "---\ncategory: Uncategorized\n---\n= T\n# s",
        "---\nnotes: keep me\n---\n= T\n> a note\n# s",
        "---\nsource:\n---\n= T",
    )
    for text in texts:
        recipe, errors = parse_recipe(text)
        assert errors == []
        assert parse_recipe(serialize_recipe(recipe)) == (recipe, [])


def test_serialize_layout(carbonara_text: str) -> None:
    recipe, _ = parse_recipe(carbonara_text)
    text = serialize_recipe(recipe)
    assert text.startswith("---\ncategory:  Dinner\ncook_time: 30\n")
    assert "\n---\n\n= Classic Spaghetti Carbonara\n\n> A classic Roman pasta dish.\n" in text
    assert "+ Prepare Ingredients\n\n# Cook the pasta\n\n- 1 lb spaghetti\n- Salt for water\n\n# Prepare" in text
    assert text.endswith("# Combine everything\n")


def test_serialize_keeps_default_category() -> None:
    recipe = ParsedRecipe(title="T", metadata={"category": "Uncategorized"})
    assert serialize_recipe(recipe) == "---\ncategory: Uncategorized\n---\n\n= T\n"


def test_serialize_keeps_notes_key() -> None:
    recipe = ParsedRecipe(title="T", notes=("a",), metadata={"notes": "x"})
    assert serialize_recipe(recipe) == "---\nnotes: x\n---\n\n= T\n\n> a\n"


def test_serialize_empty() -> None:
    assert serialize_recipe(ParsedRecipe()) == "\n"
