from __future__ import annotations

from .models import ParsedRecipe


def serialize_recipe(recipe: ParsedRecipe) -> str:
    """Write ``recipe`` back out as canonical markup.

    Metadata keys are sorted and their values aligned. Every key is written,
    including ``notes`` and a default ``category``, so a rewrite never loses
    what the source block held.
    """
    lines: list[str] = []

    if recipe.metadata:
        items = sorted(recipe.metadata.items())
        width = max(len(key) for key, _ in items)
        lines.append("---")
        for key, value in items:
            padding = " " * (width - len(key))
            lines.append(f"{key}:{padding} {value}".rstrip())
        lines.extend(["---", ""])

    if recipe.title is not None:
        lines.append(f"= {recipe.title}".rstrip())

    if recipe.notes:
        lines.append("")
        lines.extend(f"> {note}".rstrip() for note in recipe.notes)

    for component in recipe.components:
        if lines and lines[-1] != "":
            lines.append("")

        if component.name is not None:
            lines.append(f"+ {component.name}".rstrip())
            lines.append("")

        for idx, step in enumerate(component.steps):
            lines.append(f"# {step.text}")
            if step.ingredients:
                lines.append("")
                lines.extend(f"- {ingredient}".rstrip() for ingredient in step.ingredients)
            if idx < len(component.steps) - 1:
                lines.append("")

    return "\n".join(lines) + "\n"
