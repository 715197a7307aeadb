from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import sys

from .config import EffectiveConfig
from .cookbook import render_cookbook
from .domain import ParsedRecipe, parse_recipe
from .errors import MissingFileError
from .manifest import load_manifest
from .paths import (
    MANIFEST_SUFFIXES,
    iter_recipe_paths,
    resolve_manifest_path,
    resolve_project_paths,
    resolve_recipe_path,
)
from .render import render_recipe
from .typst import run_typst
from .validate import validate_recipe


@dataclass(frozen=True)
class BuildResult:
    source: Path
    pdf: Path
    recipes: int
    diagnostics: list[str] = field(default_factory=list)


def build_recipe(recipe_ref: str, cfg: EffectiveConfig, dry_run: bool, verbose: bool) -> BuildResult:
    path = resolve_recipe_path(recipe_ref, cfg)
    recipe, diagnostics = load_recipe(path, cfg)
    source = render_recipe(recipe, cfg.style)
    return _write_and_compile(path.stem, source, cfg, dry_run, verbose, recipes=1, diagnostics=diagnostics)


def build_cookbook(cookbook_name: str, cfg: EffectiveConfig, dry_run: bool, verbose: bool) -> BuildResult:
    manifest = load_manifest(resolve_manifest_path(cookbook_name, cfg))

    if manifest.recipes:
        paths = [resolve_recipe_path(ref, cfg) for ref in manifest.recipes]
    else:
        paths = iter_recipe_paths(cfg)

    recipes: list[ParsedRecipe] = []
    diagnostics: list[str] = []
    for path in paths:
        recipe, problems = load_recipe(path, cfg)
        recipes.append(recipe)
        diagnostics.extend(problems)

    stem = _output_stem(cookbook_name)
    title = manifest.title or stem
    source = render_cookbook(recipes, title=title, subtitle=manifest.subtitle, style=cfg.style)
    return _write_and_compile(
        stem,
        source,
        cfg,
        dry_run,
        verbose,
        recipes=len(recipes),
        diagnostics=diagnostics,
    )


def load_recipe(path: Path, cfg: EffectiveConfig) -> tuple[ParsedRecipe, list[str]]:
    """Parse a recipe file, rejecting it in strict mode and warning otherwise."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MissingFileError(f"Recipe not found: {path}") from exc

    if cfg.strict:
        return validate_recipe(text, str(path)), []

    recipe, diagnostics = parse_recipe(text)
    problems = [f"{path}: {message}" for message in diagnostics]
    for line in problems:
        print(f"warning: {line}", file=sys.stderr)
    return recipe, problems


def _output_stem(cookbook_name: str) -> str:
    path = Path(cookbook_name)
    if path.suffix in MANIFEST_SUFFIXES:
        return path.stem
    return path.name


def _write_and_compile(
    stem: str,
    source: str,
    cfg: EffectiveConfig,
    dry_run: bool,
    verbose: bool,
    recipes: int,
    diagnostics: list[str],
) -> BuildResult:
    project = resolve_project_paths(cfg)
    project.build_dir.mkdir(parents=True, exist_ok=True)
    source_path = project.build_dir / f"{stem}.typ"
    source_path.write_text(source, encoding="utf-8")

    pdf_path = project.build_dir / f"{stem}.pdf"
    if not dry_run:
        run_typst(str(source_path), str(pdf_path), cfg, verbose)

    return BuildResult(source=source_path, pdf=pdf_path, recipes=recipes, diagnostics=diagnostics)
