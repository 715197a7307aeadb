from __future__ import annotations

from collections.abc import Sequence

from .config import StyleConfig
from .domain import DEFAULT_CATEGORY, ParsedRecipe
from .render import document_header, render_single


PAGE_BREAK = "#pagebreak()"


def group_by_category(recipes: Sequence[ParsedRecipe]) -> list[tuple[str, list[ParsedRecipe]]]:
    """Group recipes by category, sorted by name, keeping input order inside each group."""
    groups: dict[str, list[ParsedRecipe]] = {}
    for recipe in recipes:
        category = recipe.meta("category") or DEFAULT_CATEGORY
        groups.setdefault(category, []).append(recipe)
    return sorted(groups.items(), key=lambda item: item[0])


def render_cookbook(
    recipes: Sequence[ParsedRecipe],
    title: str | None = None,
    subtitle: str | None = None,
    style: StyleConfig | None = None,
) -> str:
    body: list[str] = []

    has_title = bool(title and title.strip())
    has_subtitle = bool(subtitle and subtitle.strip())
    if has_title or has_subtitle:
        body.append("#v(5cm)")
        body.append(f"#align(center)[#text(size: 22pt)[#heading(level: 1, outlined: false)[{title or ''}]]]")
        if has_subtitle:
            body.append("#v(1cm)")
            body.append(f"#align(center)[#heading(level: 2, outlined: false)[{subtitle}]]")
        body.append(PAGE_BREAK)

    body.extend(
        [
            "#align(center)[#heading(level: 1, outlined: false)[Contents]]",
            "#v(1cm)",
            "#outline(title: none, depth: 2)",
            PAGE_BREAK,
            "#counter(page).update(1)",
        ]
    )

    groups = group_by_category(recipes)
    for group_idx, (category, members) in enumerate(groups):
        body.extend(["#v(5cm)", f"#align(center)[#heading(level: 1)[{category}]]", PAGE_BREAK])
        for idx, recipe in enumerate(members):
            body.append(render_single(recipe, 2))
            is_last = group_idx == len(groups) - 1 and idx == len(members) - 1
            if not is_last:
                body.append(PAGE_BREAK)

    return "\n\n".join([document_header(style), "\n\n".join(body)])
