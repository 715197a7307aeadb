from .cookbook import render_cookbook
from .domain import Component, ParsedRecipe, Step, parse_recipe, serialize_recipe
from .render import render_recipe, render_single
from .typography import fancy

__all__ = [
    "Component",
    "ParsedRecipe",
    "Step",
    "fancy",
    "parse_recipe",
    "render_cookbook",
    "render_recipe",
    "render_single",
    "serialize_recipe",
]
