from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


NOTES_KEY = "notes"
SUMMARY_KEYS = ("yield", "prep_time", "cook_time", "category", "cuisine")
DEFAULT_CATEGORY = "Uncategorized"


@dataclass(frozen=True)
class Step:
    text: str
    ingredients: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "ingredients": list(self.ingredients)}


@dataclass(frozen=True)
class Component:
    name: str | None
    steps: tuple[Step, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "steps": [step.to_dict() for step in self.steps]}


@dataclass(frozen=True)
class ParsedRecipe:
    title: str | None = None
    notes: tuple[str, ...] = ()
    metadata: dict[str, str] = field(default_factory=dict)
    components: tuple[Component, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "notes": list(self.notes),
            "metadata": dict(self.metadata),
            "components": [component.to_dict() for component in self.components],
        }

    def meta(self, key: str) -> str:
        """Return the trimmed metadata value for ``key``, or ``""`` when absent."""
        return (self.metadata.get(key) or "").strip()


def storage_metadata(recipe: ParsedRecipe) -> dict[str, str]:
    """Metadata with the notes mirrored under ``notes``, one line per note."""
    data = dict(recipe.metadata)
    if recipe.notes:
        data[NOTES_KEY] = "\n".join(recipe.notes)
    return data


def is_favorite(recipe: ParsedRecipe) -> bool:
    return recipe.meta("favorite").lower() == "true"


@dataclass(frozen=True)
class RecipeSummary:
    name: str
    title: str | None
    path: Path
    category: str | None
    cuisine: str | None
    favorite: bool
    diagnostics: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "path": str(self.path),
            "category": self.category,
            "cuisine": self.cuisine,
            "favorite": self.favorite,
            "diagnostics": self.diagnostics,
        }
