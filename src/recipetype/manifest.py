from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError, MissingFileError


@dataclass(frozen=True)
class CookbookManifest:
    title: str | None = None
    subtitle: str | None = None
    recipes: list[str] = field(default_factory=list)


def load_manifest(path: Path) -> CookbookManifest:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MissingFileError(f"Cookbook not found: {path}") from exc
    return parse_manifest(text, str(path))


def parse_manifest(text: str, source_path: str) -> CookbookManifest:
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"{source_path}: invalid YAML in cookbook manifest") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{source_path}: cookbook manifest must be a mapping")

    recipes = data.get("recipes") or []
    if isinstance(recipes, str):
        recipes = [recipes]
    if not isinstance(recipes, list):
        raise ConfigError(f"{source_path}: 'recipes' must be a list")

    return CookbookManifest(
        title=_optional_text(data.get("title")),
        subtitle=_optional_text(data.get("subtitle")),
        recipes=[str(item).strip() for item in recipes if item is not None and str(item).strip()],
    )


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
