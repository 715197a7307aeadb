from __future__ import annotations

from pathlib import Path
import subprocess

from .config import EffectiveConfig
from .errors import TypstError
from .infra import run_process


def run_typst(source_path: str, output_path: str, cfg: EffectiveConfig, verbose: bool) -> None:
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    cmd = build_typst_command(source_path, output_path, cfg)

    if verbose:
        print(" ".join(cmd))

    try:
        run_process(cmd, capture_output=not verbose)
    except FileNotFoundError as exc:
        raise TypstError(f"typst not found: {cfg.typst.typst_path}") from exc
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or exc.stdout or "").strip()
        message = f"typst failed with exit code {exc.returncode}"
        if detail:
            message = f"{message}: {detail}"
        raise TypstError(message) from exc


def build_typst_command(source_path: str, output_path: str, cfg: EffectiveConfig) -> list[str]:
    cmd: list[str] = [cfg.typst.typst_path, "compile"]
    for font_path in cfg.typst.font_paths:
        cmd.extend(["--font-path", font_path])
    cmd.extend([str(source_path), str(output_path)])
    return cmd
