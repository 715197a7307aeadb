from __future__ import annotations

import subprocess


def run_process(cmd: list[str], *, capture_output: bool = True) -> subprocess.CompletedProcess[str]:
    return subprocess.run(cmd, check=True, capture_output=capture_output, text=True)
