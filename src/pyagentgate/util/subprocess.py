from __future__ import annotations
import os
import shutil
import subprocess
from dataclasses import dataclass
from typing import Sequence, Optional

@dataclass
class CmdResult:
    returncode: int
    stdout: str
    stderr: str

def shell_argv(command: str) -> list[str]:
    # Use a real shell so built-ins like `cd`, pipes, &&, env expansion work.
    if os.name == "nt":
        return ["cmd.exe", "/c", command]
    shell = "bash" if shutil.which("bash") else "sh"
    return [shell, "-lc", command]

def run_cmd(cmd: Sequence[str], cwd: str, timeout: Optional[int] = None) -> CmdResult:
    p = subprocess.run(
        list(cmd),
        cwd=cwd,
        encoding="utf-8",
        errors="replace",
        capture_output=True,
        timeout=timeout,
        shell=False,
    )
    return CmdResult(p.returncode, p.stdout, p.stderr)
