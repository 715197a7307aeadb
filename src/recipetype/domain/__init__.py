from .builder import BuilderState, apply_line, build_document, finalize_component, finalize_step
from .lines import ClassifiedLine, classify_line, classify_lines
from .metadata import MetadataBlock, split_metadata
from .models import (
    DEFAULT_CATEGORY,
    NOTES_KEY,
    SUMMARY_KEYS,
    Component,
    ParsedRecipe,
    RecipeSummary,
    Step,
    is_favorite,
    storage_metadata,
)
from .parser import parse_recipe
from .serialize import serialize_recipe

__all__ = [
    "BuilderState",
    "ClassifiedLine",
    "Component",
    "DEFAULT_CATEGORY",
    "MetadataBlock",
    "NOTES_KEY",
    "ParsedRecipe",
    "RecipeSummary",
    "SUMMARY_KEYS",
    "Step",
    "apply_line",
    "build_document",
    "classify_line",
    "classify_lines",
    "finalize_component",
    "finalize_step",
    "is_favorite",
    "parse_recipe",
    "serialize_recipe",
    "split_metadata",
    "storage_metadata",
]
