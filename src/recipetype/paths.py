from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import EffectiveConfig
from .errors import MissingFileError


MANIFEST_SUFFIXES = (".yaml", ".yml")


@dataclass(frozen=True)
class LibraryPaths:
    recipes_dir: Path
    cookbooks_dir: Path


@dataclass(frozen=True)
class ProjectPaths:
    root: Path
    build_dir: Path


def resolve_library_paths(cfg: EffectiveConfig) -> LibraryPaths:
    root = Path(cfg.library_path)
    return LibraryPaths(
        recipes_dir=root / cfg.recipes_dir,
        cookbooks_dir=root / cfg.cookbooks_dir,
    )


def resolve_project_paths(cfg: EffectiveConfig) -> ProjectPaths:
    root = Path(cfg.project_dir)
    return ProjectPaths(root=root, build_dir=root / cfg.build_dir)


def resolve_recipe_path(name: str, cfg: EffectiveConfig) -> Path:
    """Find a recipe by library-relative name (suffix optional) or by direct path."""
    direct = Path(name)
    if direct.is_file():
        return direct

    library = resolve_library_paths(cfg)
    candidate = library.recipes_dir / name
    if not candidate.name.endswith(cfg.recipe_suffix):
        candidate = candidate.with_name(candidate.name + cfg.recipe_suffix)
    if not candidate.is_file():
        raise MissingFileError(f"Recipe not found: {candidate}")
    return candidate


def resolve_manifest_path(name: str, cfg: EffectiveConfig) -> Path:
    library = resolve_library_paths(cfg)
    direct = library.cookbooks_dir / name
    if direct.suffix in MANIFEST_SUFFIXES and direct.is_file():
        return direct
    for suffix in MANIFEST_SUFFIXES:
        candidate = library.cookbooks_dir / f"{name}{suffix}"
        if candidate.is_file():
            return candidate
    raise MissingFileError(f"Cookbook not found: {library.cookbooks_dir / name}")


def recipe_name(path: Path, cfg: EffectiveConfig) -> str:
    """Library-relative name of a recipe file, without the suffix."""
    library = resolve_library_paths(cfg)
    try:
        rel = path.relative_to(library.recipes_dir)
    except ValueError:
        rel = Path(path.name)
    text = rel.as_posix()
    if text.endswith(cfg.recipe_suffix):
        text = text[: -len(cfg.recipe_suffix)]
    return text


def iter_recipe_paths(cfg: EffectiveConfig) -> list[Path]:
    library = resolve_library_paths(cfg)
    if not library.recipes_dir.exists():
        return []
    return sorted(library.recipes_dir.rglob(f"*{cfg.recipe_suffix}"))
