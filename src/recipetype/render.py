from __future__ import annotations

from .config import StyleConfig
from .domain import SUMMARY_KEYS, ParsedRecipe, Step
from .typography import fancy


UNTITLED = "Untitled Recipe"
SUMMARY_LABELS = {
    "yield": "Yield",
    "prep_time": "Prep Time",
    "cook_time": "Cook Time",
    "category": "Category",
    "cuisine": "Cuisine",
}
PAGE_COUNTER = "#text(8pt, [#counter(page).display() / #counter(page).final().at(0)])"


def document_header(style: StyleConfig | None = None) -> str:
    style = style or StyleConfig()
    return "\n".join(
        [
            "#set list(spacing: 0.65em)",
            f'#set text(font: "{_escape(style.font)}", size: {style.font_size})',
            f'#set page("{_escape(style.paper)}", margin: (top: 0.75in, bottom: 1in, left: 0.75in, right: 0.75in))',
            "#set enum(spacing: 1.5em)",
        ]
    )


def render_recipe(recipe: ParsedRecipe, style: StyleConfig | None = None) -> str:
    """Standalone Typst document for a single recipe."""
    return "\n\n".join([document_header(style), render_single(recipe)])


def render_single(recipe: ParsedRecipe, heading_level: int = 1) -> str:
    parts: list[str] = [render_footer(recipe)]

    title = recipe.title if recipe.title and recipe.title.strip() else UNTITLED
    if any(recipe.meta(key) for key in SUMMARY_KEYS):
        parts.append(render_title_with_summary(title, recipe.metadata, heading_level))
    else:
        parts.append(f"#heading(level: {heading_level})[{title}]")

    parts.append("#v(1.5em)\n#line(length: 100%, stroke: 0.5pt)\n#v(1.5em)")

    for idx, component in enumerate(recipe.components):
        if component.name and component.name.strip():
            parts.append(f"=== {component.name}\n#v(1em)")

        for step_idx, step in enumerate(component.steps):
            parts.append(render_step(step, step_idx))
            if step_idx < len(component.steps) - 1:
                parts.append("#v(1em)")

        if idx < len(recipe.components) - 1:
            parts.append("#v(3em)")

    return "\n\n".join(parts)


def render_footer(recipe: ParsedRecipe) -> str:
    source = recipe.meta("source")
    if source:
        content = f"#text(8pt)[{fancy(source)}] #h(1fr) {PAGE_COUNTER}"
    else:
        content = f"#h(1fr) {PAGE_COUNTER} #h(1fr)"
    return f"#set page(footer: context [{content}])"


def render_step(step: Step, index: int) -> str:
    has_ingredients = "true" if step.ingredients else "false"
    ingredient_list = ", ".join(f"[{fancy(item)}]" for item in step.ingredients)
    return f"""#grid(
  columns: (2fr, 1fr),
  gutter: 3em,
  [
    #enum.item({index + 1})[{fancy(step.text)}]
  ],
  [
    #if {has_ingredients} {{
      block(
        breakable: false,
        list(
          spacing: 1em,
          {ingredient_list}
        )
      )
    }}
  ]
)"""


def render_summary_grid(metadata: dict[str, str]) -> str:
    labels = [f'  [#align(center)[#text(weight: "bold")[{SUMMARY_LABELS[key]}]]],' for key in SUMMARY_KEYS]
    values = [f"  [#align(center)[{_escape(metadata.get(key) or '')}]]," for key in SUMMARY_KEYS]
    cells = labels + values
    cells[-1] = cells[-1].rstrip(",")
    return "\n".join(
        [
            "#grid(",
            "  columns: (auto, auto, auto, auto, auto),",
            "  column-gutter: 1.5em,",
            "  row-gutter: 0.75em,",
            *cells,
            ")",
        ]
    )


def render_title_with_summary(title: str, metadata: dict[str, str], level: int) -> str:
    grid = render_summary_grid(metadata).replace("\n", "\n        ")
    return f"""#grid(
  columns: (1fr, auto),
  gutter: 2em,
  align: horizon,
  [#heading(level: {level})[{title}]],
  [
    #align(right)[
      #block[
        #set text(size: 9pt)
        {grid}
      ]
    ]
  ]
)"""


def _escape(value: str) -> str:
    return value.replace('"', '\\"')
