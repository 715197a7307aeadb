from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import os
import tomllib
from typing import Any, Optional

from .errors import ConfigError


@dataclass(frozen=True)
class TypstConfig:
    typst_path: str = "typst"
    font_paths: tuple[str, ...] = ()


@dataclass(frozen=True)
class StyleConfig:
    paper: str = "us-letter"
    font: str = "Libertinus Serif"
    font_size: str = "11pt"


@dataclass(frozen=True)
class EffectiveConfig:
    library_path: str
    recipes_dir: str
    cookbooks_dir: str
    recipe_suffix: str
    default_project: Optional[str]
    build_dir: str
    strict: bool
    project_dir: str
    typst: TypstConfig = field(default_factory=TypstConfig)
    style: StyleConfig = field(default_factory=StyleConfig)


def _config_root() -> Path:
    return Path(os.path.expanduser("~/.config/recipetype"))


def load_global_config() -> dict[str, Any]:
    path = _config_root() / "config.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def load_profile(profile: str) -> Optional[str]:
    path = _config_root() / "projects.d" / f"{profile}.toml"
    if not path.exists():
        return None
    data = _load_toml(path)
    project = data.get("project")
    if not project:
        raise ConfigError(f"Profile {profile!r} missing 'project' key")
    return str(project)


def load_project_config(project_dir: str) -> dict[str, Any]:
    path = Path(project_dir) / "recipetype.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"Failed to read config: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config: {path}") from exc


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_config(cli: dict[str, Any], project: dict[str, Any], global_cfg: dict[str, Any]) -> dict[str, Any]:
    merged = _deep_merge(global_cfg, project)
    return _deep_merge(merged, cli)


def resolve_config(cli_args: dict[str, Any]) -> EffectiveConfig:
    project_dir, merged = _merged_config(cli_args)

    library_path = merged.get("library_path")
    if not library_path:
        raise ConfigError("library_path is required (set in config or via --library)")

    typst_cfg = _section(merged, "typst")

    return EffectiveConfig(
        library_path=str(library_path),
        recipes_dir=str(merged.get("recipes_dir", "Recipes")),
        cookbooks_dir=str(merged.get("cookbooks_dir", "Cookbooks")),
        recipe_suffix=_normalize_suffix(merged.get("recipe_suffix", ".recipe")),
        default_project=merged.get("default_project"),
        build_dir=str(merged.get("build_dir", "build")),
        strict=bool(merged.get("strict", False)),
        project_dir=str(project_dir),
        typst=TypstConfig(
            typst_path=str(typst_cfg.get("typst_path", "typst")),
            font_paths=_normalize_font_paths(typst_cfg.get("font_paths", [])),
        ),
        style=_style_from(merged),
    )


def resolve_style(cli_args: dict[str, Any]) -> StyleConfig:
    """Page style from the same config layers, without requiring a library."""
    _, merged = _merged_config(cli_args)
    return _style_from(merged)


def _merged_config(cli_args: dict[str, Any]) -> tuple[str, dict[str, Any]]:
    global_cfg = load_global_config()
    profile = cli_args.get("profile")
    project_dir = cli_args.get("project")
    if not project_dir and profile:
        project_dir = load_profile(profile)
    if not project_dir:
        project_dir = global_cfg.get("default_project") or os.getcwd()

    project_cfg = load_project_config(project_dir)
    return project_dir, merge_config(_cli_to_dict(cli_args), project_cfg, global_cfg)


def _style_from(merged: dict[str, Any]) -> StyleConfig:
    style_cfg = _section(merged, "style")
    return StyleConfig(
        paper=str(style_cfg.get("paper", "us-letter")),
        font=str(style_cfg.get("font", "Libertinus Serif")),
        font_size=str(style_cfg.get("font_size", "11pt")),
    )


def _section(merged: dict[str, Any], name: str) -> dict[str, Any]:
    value = merged.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{name}] must be a table")
    return value


def _cli_to_dict(cli_args: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in (
        "library_path",
        "recipes_dir",
        "cookbooks_dir",
        "recipe_suffix",
        "default_project",
        "build_dir",
    ):
        if cli_args.get(key) is not None:
            out[key] = cli_args[key]

    if cli_args.get("strict"):
        out["strict"] = True

    if cli_args.get("typst_path") is not None:
        out["typst"] = {"typst_path": cli_args["typst_path"]}

    style: dict[str, Any] = {}
    for key in ("paper", "font", "font_size"):
        if cli_args.get(key) is not None:
            style[key] = cli_args[key]
    if style:
        out["style"] = style

    return out


def config_to_toml(cfg: EffectiveConfig) -> str:
    lines = [
        f"library_path = {cfg.library_path!r}",
        f"recipes_dir = {cfg.recipes_dir!r}",
        f"cookbooks_dir = {cfg.cookbooks_dir!r}",
        f"recipe_suffix = {cfg.recipe_suffix!r}",
    ]
    if cfg.default_project:
        lines.append(f"default_project = {cfg.default_project!r}")
    lines.append(f"build_dir = {cfg.build_dir!r}")
    lines.append(f"strict = {'true' if cfg.strict else 'false'}")
    lines.append("")
    lines.append("[typst]")
    lines.append(f"typst_path = {cfg.typst.typst_path!r}")
    lines.append(f"font_paths = [{', '.join(repr(path) for path in cfg.typst.font_paths)}]")
    lines.append("")
    lines.append("[style]")
    lines.append(f"paper = {cfg.style.paper!r}")
    lines.append(f"font = {cfg.style.font!r}")
    lines.append(f"font_size = {cfg.style.font_size!r}")
    return "\n".join(lines) + "\n"


def _normalize_suffix(value: Any) -> str:
    text = str(value or "").strip()
    if not text:
        return ".recipe"
    if not text.startswith("."):
        return f".{text}"
    return text


def _normalize_font_paths(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,) if value.strip() else ()
    if isinstance(value, list):
        return tuple(str(item) for item in value if str(item).strip())
    return ()
