from __future__ import annotations

import argparse
import json
import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

from .build import build_cookbook, build_recipe
from .config import EffectiveConfig, config_to_toml, resolve_config, resolve_style
from .domain import parse_recipe, serialize_recipe
from .errors import (
    ConfigError,
    MissingFileError,
    RecipetypeError,
    TypstError,
    ValidationError,
)
from .listing import list_recipes
from .render import render_recipe
from .templates import (
    render_cookbook_template,
    render_recipe_template,
    write_template_file,
)
from .validate import validate_recipe


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    handlers: dict[str, Callable[[argparse.Namespace], int]] = {
        "parse": _cmd_parse,
        "check": _cmd_check,
        "render": _cmd_render,
        "format": _cmd_format,
        "build": _cmd_build,
        "cookbook": _cmd_cookbook,
        "list": _cmd_list,
        "new-recipe": _cmd_new_recipe,
        "new-cookbook": _cmd_new_cookbook,
        "init": _cmd_init,
        "config": _cmd_config,
    }

    handler = handlers.get(args.command)
    if handler is None:  # pragma: no cover
        return 1  # pragma: no cover

    try:
        return handler(args)
    except RecipetypeError as exc:
        print(str(exc), file=sys.stderr)
        return _exit_code(exc)
    except FileExistsError as exc:
        print(str(exc), file=sys.stderr)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False, argument_default=argparse.SUPPRESS)
    common.add_argument("--library", dest="library_path")
    common.add_argument("--project")
    common.add_argument("--profile")
    common.add_argument("--typst", dest="typst_path")
    common.add_argument("--recipes-dir")
    common.add_argument("--cookbooks-dir")
    common.add_argument("--build-dir")
    common.add_argument("--strict", action="store_true")

    parser = argparse.ArgumentParser(prog="recipetype", parents=[common])
    sub = parser.add_subparsers(dest="command")

    parse = sub.add_parser("parse")
    parse.add_argument("file")
    parse.add_argument("--json", action="store_true")

    check = sub.add_parser("check")
    check.add_argument("files", nargs="+")

    render = sub.add_parser("render", parents=[common])
    render.add_argument("file")
    render.add_argument("-o", "--output")

    fmt = sub.add_parser("format")
    fmt.add_argument("file")
    fmt.add_argument("--write", action="store_true")

    for name in ("build", "cookbook"):
        cmd = sub.add_parser(name, parents=[common])
        cmd.add_argument("name")
        cmd.add_argument("--open", action="store_true")
        cmd.add_argument("--dry-run", action="store_true")
        cmd.add_argument("--verbose", action="store_true")

    listing = sub.add_parser("list", parents=[common])
    listing.add_argument("--json", action="store_true")

    new_recipe = sub.add_parser("new-recipe")
    new_recipe.add_argument("--title", required=True)
    new_recipe.add_argument("--category")
    new_recipe.add_argument("--cuisine")
    new_recipe.add_argument("--yield", dest="yield_")
    new_recipe.add_argument("--prep-time")
    new_recipe.add_argument("--cook-time")
    new_recipe.add_argument("--source")
    new_recipe.add_argument("--suffix", default=".recipe")

    new_cookbook = sub.add_parser("new-cookbook")
    new_cookbook.add_argument("--title", required=True)
    new_cookbook.add_argument("--subtitle")
    new_cookbook.add_argument("--recipe", dest="recipes", action="append")

    init = sub.add_parser("init")
    init.add_argument("path", nargs="?", default=".")
    init.add_argument("--force", action="store_true")

    sub.add_parser("config", parents=[common])

    return parser


def _cmd_parse(args: argparse.Namespace) -> int:
    recipe, diagnostics = parse_recipe(_read_input(args.file))
    for message in diagnostics:
        print(f"{args.file}: {message}", file=sys.stderr)

    if args.json:
        print(json.dumps({"recipe": recipe.to_dict(), "diagnostics": diagnostics}, indent=2, ensure_ascii=False))
        return 0

    print(f"title: {recipe.title or '-'}")
    for key, value in recipe.metadata.items():
        print(f"{key}: {value}")
    print(f"notes: {len(recipe.notes)}")
    for component in recipe.components:
        print(f"component: {component.name or '-'} ({len(component.steps)} steps)")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    failed = 0
    for name in args.files:
        try:
            validate_recipe(_read_input(name), name)
        except ValidationError as exc:
            failed += 1
            for message in exc.diagnostics:
                print(f"{name}: {message}", file=sys.stderr)
            continue
        print(f"{name}: ok")
    if failed:
        return _exit_code(ValidationError(f"{failed} recipe(s) failed validation"))
    return 0


def _cmd_render(args: argparse.Namespace) -> int:
    recipe, diagnostics = parse_recipe(_read_input(args.file))
    for message in diagnostics:
        print(f"warning: {args.file}: {message}", file=sys.stderr)

    source = render_recipe(recipe, resolve_style(_cli_args_dict(args)))
    if args.output:
        Path(args.output).write_text(source, encoding="utf-8")
        print(args.output)
    else:
        print(source)
    return 0


def _cmd_format(args: argparse.Namespace) -> int:
    recipe, diagnostics = parse_recipe(_read_input(args.file))
    if diagnostics:
        # Orphan lines would be dropped by a rewrite.
        raise ValidationError(
            f"{args.file}: {'; '.join(diagnostics)}",
            diagnostics=diagnostics,
            source_path=args.file,
        )

    text = serialize_recipe(recipe)
    if args.write:
        Path(args.file).write_text(text, encoding="utf-8")
        print(args.file)
    else:
        sys.stdout.write(text)
    return 0


def _cmd_build(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    result = build_recipe(args.name, cfg, dry_run=args.dry_run, verbose=args.verbose)
    _report_build(result.source, result.pdf, args)
    return 0


def _cmd_cookbook(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    result = build_cookbook(args.name, cfg, dry_run=args.dry_run, verbose=args.verbose)
    _report_build(result.source, result.pdf, args)
    return 0


def _report_build(source: Path, pdf: Path, args: argparse.Namespace) -> None:
    if args.dry_run:
        print(source)
        return
    print(pdf)
    if args.open:
        _open_file(str(pdf))


def _cmd_list(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    recipes = list_recipes(cfg)
    if args.json:
        print(json.dumps([rec.to_dict() for rec in recipes], indent=2, ensure_ascii=False))
    else:
        for rec in recipes:
            marker = " *" if rec.favorite else ""
            print(f"{rec.name}: {rec.title or '-'} [{rec.category or '-'}]{marker}")
    return 0


def _cmd_new_recipe(args: argparse.Namespace) -> int:
    content = render_recipe_template(
        args.title,
        category=args.category,
        cuisine=args.cuisine,
        prep_time=args.prep_time,
        cook_time=args.cook_time,
        source=args.source,
        **{"yield": args.yield_},
    )
    suffix = args.suffix if args.suffix.startswith(".") else f".{args.suffix}"
    path = write_template_file(content, f"{args.title}{suffix}", os.getcwd())
    print(path)
    return 0


def _cmd_new_cookbook(args: argparse.Namespace) -> int:
    content = render_cookbook_template(args.title, subtitle=args.subtitle, recipes=args.recipes)
    path = write_template_file(content, f"{args.title}.yaml", os.getcwd())
    print(path)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    root = os.path.abspath(args.path)
    os.makedirs(root, exist_ok=True)
    _ensure_dir(root, "Recipes")
    _ensure_dir(root, "Cookbooks")
    _ensure_dir(root, "build")
    config_path = os.path.join(root, "recipetype.toml")
    if os.path.exists(config_path) and not args.force:
        raise ConfigError(f"{config_path} already exists (use --force to overwrite)")
    with open(config_path, "w", encoding="utf-8") as fh:
        fh.write(
            f"""library_path = {root!r}\nbuild_dir = \"build\"\n# strict = true\n\n[typst]\n# typst_path = \"typst\"\n# font_paths = [\"fonts\"]\n\n[style]\n# paper = \"a4\"\n# font = \"Libertinus Serif\"\n"""
        )
    print(config_path)
    return 0


def _cmd_config(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    print(config_to_toml(cfg), end="")
    return 0


def _resolve_cfg(args: argparse.Namespace) -> EffectiveConfig:
    return resolve_config(_cli_args_dict(args))


def _cli_args_dict(args: argparse.Namespace) -> dict[str, object]:
    return vars(args).copy()


def _read_input(name: str) -> str:
    if name == "-":
        return sys.stdin.read()
    try:
        return Path(name).read_text(encoding="utf-8")
    except OSError as exc:
        raise MissingFileError(f"Recipe not found: {name}") from exc


def _ensure_dir(root: str, name: str) -> None:
    os.makedirs(os.path.join(root, name), exist_ok=True)


def _open_file(path: str) -> None:
    try:
        subprocess.run(["xdg-open", path], check=False)
    except OSError as exc:
        raise ConfigError("Failed to open PDF") from exc


def _exit_code(exc: RecipetypeError) -> int:
    if isinstance(exc, ConfigError):
        return 2
    if isinstance(exc, MissingFileError):
        return 3
    if isinstance(exc, ValidationError):
        return 4
    if isinstance(exc, TypstError):
        return 5
    return 1
