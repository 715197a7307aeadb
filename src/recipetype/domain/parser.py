from __future__ import annotations

from .builder import build_document
from .lines import classify_lines
from .metadata import split_metadata
from .models import ParsedRecipe


def parse_recipe(text: str) -> tuple[ParsedRecipe, list[str]]:
    """Parse recipe markup into a document and a list of diagnostics.

    Malformed constructs never raise; each one adds a message to the returned
    diagnostics and the best-effort document is still produced.
    """
    if not text or not text.strip():
        return ParsedRecipe(), []

    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = normalized.strip().split("\n")

    block = split_metadata(lines)
    state = build_document(classify_lines(block.content))

    recipe = ParsedRecipe(
        title=state.title,
        notes=state.notes,
        metadata=block.metadata,
        components=state.components,
    )
    return recipe, list(state.errors)
