from __future__ import annotations
from pathlib import Path

from ..tools.errors import ExecutionError


class FsError(ExecutionError):
    pass


def resolve_path(cwd: Path, path_str: str, *, restrict: bool = False) -> Path:
    p = Path(path_str).expanduser()
    if not p.is_absolute():
        p = (cwd / p).resolve()
    else:
        p = p.resolve()
    if restrict:
        try:
            p.relative_to(cwd.resolve())
        except ValueError:
            raise FsError(f"Path escapes working directory: {path_str}")
    return p


def read_text(path: Path, errors: str = "replace") -> str:
    # newline="" keeps \r\n intact so a write followed by a read is exact
    with path.open("r", encoding="utf-8", errors=errors, newline="") as f:
        return f.read()


def write_text(path: Path, text: str, errors: str = "strict") -> None:
    with path.open("w", encoding="utf-8", errors=errors, newline="") as f:
        f.write(text)
