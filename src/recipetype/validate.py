from __future__ import annotations

from .domain import ParsedRecipe, parse_recipe
from .errors import ValidationError


def validate_recipe(text: str, source_path: str) -> ParsedRecipe:
    recipe, diagnostics = parse_recipe(text)
    if diagnostics:
        details = "; ".join(diagnostics)
        raise ValidationError(
            f"{source_path}: {details}",
            diagnostics=diagnostics,
            source_path=source_path,
        )
    return recipe


__all__ = ["validate_recipe"]
