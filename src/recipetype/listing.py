from __future__ import annotations

from pathlib import Path

from .config import EffectiveConfig
from .domain import RecipeSummary, is_favorite, parse_recipe
from .paths import iter_recipe_paths, recipe_name


def list_recipes(cfg: EffectiveConfig) -> list[RecipeSummary]:
    recipes: list[RecipeSummary] = []
    for path in iter_recipe_paths(cfg):
        text = _read_text(path)
        if text is None:
            continue
        recipe, diagnostics = parse_recipe(text)
        recipes.append(
            RecipeSummary(
                name=recipe_name(path, cfg),
                title=recipe.title,
                path=path,
                category=recipe.meta("category") or None,
                cuisine=recipe.meta("cuisine") or None,
                favorite=is_favorite(recipe),
                diagnostics=len(diagnostics),
            )
        )
    return recipes


def _read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except OSError:
        return None
