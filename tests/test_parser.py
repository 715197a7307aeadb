from __future__ import annotations

from recipetype.domain import Component, ParsedRecipe, Step, parse_recipe, storage_metadata


# Purpose: verify a full recipe with metadata, notes and components.
def test_parse_full_recipe(carbonara_text: str) -> None:
    recipe, errors = parse_recipe(carbonara_text)

    assert errors == []
    assert recipe.title == "Classic Spaghetti Carbonara"
    assert recipe.notes == (
        "A classic Roman pasta dish.",
        "Use guanciale for the most authentic flavor.",
    )
    assert recipe.metadata == {
        "category": "Dinner",
        "cook_time": "30",
        "cuisine": "Italian",
        "favorite": "true",
        "prep_time": "15",
        "source": "Grandma's cookbook",
        "yields": "4 servings",
    }
    assert recipe.metadata["category"] == "Dinner"

    assert len(recipe.components) == 2
    first, second = recipe.components
    assert first.name == "Prepare Ingredients"
    assert len(first.steps) == 2
    assert first.steps[0] == Step("Cook the pasta", ("1 lb spaghetti", "Salt for water"))
    assert second.name == "Cook"
    assert len(second.steps) == 2
    assert second.steps[1].text == "Combine everything"
    assert second.steps[1].ingredients == ()


def test_parse_simple_recipe(salad_text: str) -> None:
    recipe, errors = parse_recipe(salad_text)

    assert errors == []
    assert recipe.title == "Simple Salad"
    assert recipe.metadata == {}
    assert recipe.components == (
        Component(
            name=None,
            steps=(
                Step(
                    "Combine greens and dressing",
                    ("1 bag mixed greens", "2 tbsp olive oil", "1 tbsp lemon juice"),
                ),
            ),
        ),
    )


def test_parse_empty_input() -> None:
    for text in ("", "   \n   ", "\n\n"):
        recipe, errors = parse_recipe(text)
        assert errors == []
        assert recipe == ParsedRecipe(title=None, notes=(), metadata={}, components=())


def test_parse_no_title() -> None:
    recipe, errors = parse_recipe("+ My Component\n# Step 1")
    assert errors == []
    assert recipe.title is None
    assert recipe.components == (Component(name="My Component", steps=(Step("Step 1"),)),)


def test_parse_title_only() -> None:
    recipe, errors = parse_recipe("= My Title")
    assert errors == []
    assert recipe.title == "My Title"
    assert recipe.components == ()


def test_parse_orphan_ingredient() -> None:
    recipe, errors = parse_recipe("= Bad Recipe\n- 1 cup flour")
    assert recipe.title == "Bad Recipe"
    assert recipe.components == ()
    assert errors == ['Ingredient "1 cup flour" must belong to a step.']


def test_parse_continues_after_errors() -> None:
    text = "- salt\n# Season\n- pepper\n+ Next\n- oil"
    recipe, errors = parse_recipe(text)
    assert errors == [
        'Ingredient "salt" must belong to a step.',
        'Ingredient "oil" must belong to a step.',
    ]
    assert recipe.components == (Component(name=None, steps=(Step("Season", ("pepper",)),)),)


def test_parse_last_title_wins() -> None:
    recipe, _ = parse_recipe("= First\n= Second")
    assert recipe.title == "Second"


def test_parse_drops_empty_component() -> None:
    recipe, errors = parse_recipe("+ Empty\n+ Full\n# Mix")
    assert errors == []
    assert [component.name for component in recipe.components] == ["Full"]


def test_parse_ignores_unknown_lines_and_indentation() -> None:
    text = "Some prose\n   = Indented Title\n\t# Step\n      -   flour  \n* not a prefix"
    recipe, errors = parse_recipe(text)
    assert errors == []
    assert recipe.title == "Indented Title"
    assert recipe.components[0].steps == (Step("Step", ("flour",)),)


def test_parse_prefix_without_space() -> None:
    recipe, _ = parse_recipe("=Title\n#Step\n-egg")
    assert recipe.title == "Title"
    assert recipe.components[0].steps == (Step("Step", ("egg",)),)


def test_parse_windows_line_endings() -> None:
    recipe, errors = parse_recipe("---\r\ncategory: Lunch\r\n---\r\n= Soup\r\n# Simmer\r\n- water\r\n")
    assert errors == []
    assert recipe.metadata == {"category": "Lunch"}
    assert recipe.title == "Soup"
    assert recipe.components[0].steps == (Step("Simmer", ("water",)),)


def test_parse_metadata_value_keeps_extra_colons() -> None:
    recipe, _ = parse_recipe("---\nsource: https://example.com/a:b\n---\n= T")
    assert recipe.metadata == {"source": "https://example.com/a:b"}


def test_parse_unterminated_metadata_is_content() -> None:
    recipe, errors = parse_recipe("---\ncategory: Dinner\n= Title\n# Step")
    assert recipe.metadata == {}
    assert errors == ['Ingredient "--" must belong to a step.']
    assert recipe.title == "Title"
    assert len(recipe.components) == 1


def test_parse_empty_step_text_collects_but_is_dropped() -> None:
    recipe, errors = parse_recipe("#\n- flour\n# Real")
    assert errors == []
    assert recipe.components == (Component(name=None, steps=(Step("Real"),)),)


def test_notes_are_first_class() -> None:
    recipe, _ = parse_recipe("> one\n> two\n# Step")
    assert recipe.notes == ("one", "two")
    assert "notes" not in recipe.metadata
    assert storage_metadata(recipe) == {"notes": "one\ntwo"}


def test_storage_metadata_without_notes() -> None:
    recipe, _ = parse_recipe("---\ncuisine: Thai\n---\n# Step")
    assert storage_metadata(recipe) == {"cuisine": "Thai"}


def test_to_dict(carbonara_text: str) -> None:
    recipe, _ = parse_recipe(carbonara_text)
    data = recipe.to_dict()
    assert data["title"] == "Classic Spaghetti Carbonara"
    assert data["components"][1]["steps"][1] == {"text": "Combine everything", "ingredients": []}
    assert data["notes"][0] == "A classic Roman pasta dish."
