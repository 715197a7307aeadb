from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


RECIPE_KEYS = ("category", "cuisine", "yield", "prep_time", "cook_time", "source", "favorite")


def render_recipe_template(title: str, **kwargs: Any) -> str:
    meta = [(key, str(kwargs[key])) for key in RECIPE_KEYS if kwargs.get(key)]
    lines: list[str] = []
    if meta:
        width = max(len(key) for key, _ in meta)
        lines.append("---")
        for key, value in meta:
            lines.append(f"{key}:{' ' * (width - len(key))} {value}")
        lines.extend(["---", ""])
    lines.append(f"= {title}")
    lines.append("")
    lines.append("> ")
    lines.append("")
    lines.append("# ")
    lines.append("")
    lines.append("- ")
    return "\n".join(lines) + "\n"


def render_cookbook_template(title: str, subtitle: str | None = None, recipes: list[str] | None = None) -> str:
    data: dict[str, Any] = {"title": title}
    if subtitle:
        data["subtitle"] = subtitle
    data["recipes"] = list(recipes or [])
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)


def write_template_file(content: str, filename: str, cwd: str) -> str:
    path = Path(cwd) / filename
    if path.exists():
        raise FileExistsError(f"File already exists: {path}")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return str(path)
