from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..base import ActionCategory, ParamSpec, ToolSpec, ToolResult, ToolContext
from ...util.fs import resolve_path, FsError


def _sort_key(p: Path):
    return (not p.is_dir(), p.name.lower())


def _entry(p: Path, name: str) -> dict[str, Any]:
    is_dir = p.is_dir()
    try:
        size = p.stat().st_size
    except OSError:
        # dangling symlink
        size = p.lstat().st_size
    return {"name": name, "type": "directory" if is_dir else "file", "size": size}


@dataclass
class ListDirTool:
    spec: ToolSpec = ToolSpec(
        name="list_directory",
        description="List contents of a directory",
        category=ActionCategory.READ,
        parameters={
            "path": ParamSpec("string", required=True, description="Path to the directory"),
            "recursive": ParamSpec("boolean", description="List recursively", default=False),
        },
    )

    def describe(self, ctx: ToolContext, args: dict[str, Any]) -> tuple[str, str]:
        suffix = " (recursive)" if args.get("recursive") else ""
        return "List directory", f"Path: {args['path']}{suffix}"

    def execute(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        path = args["path"]
        recursive = bool(args.get("recursive", False))
        try:
            p = resolve_path(Path(ctx.cwd), path, restrict=ctx.restrict_to_cwd)
        except FsError as e:
            return ToolResult.error(str(e))
        if not p.exists():
            return ToolResult.error(f"Path not found: {path}")
        if not p.is_dir():
            return ToolResult.error(f"Not a directory: {path}")

        items: list[dict[str, Any]] = []
        if recursive:
            for root, dirs, files in os.walk(p):
                rootp = Path(root)
                dirs.sort(key=str.lower)
                children = [rootp / d for d in dirs] + [rootp / f for f in sorted(files, key=str.lower)]
                for child in children:
                    items.append(_entry(child, child.relative_to(p).as_posix()))
        else:
            for child in sorted(p.iterdir(), key=_sort_key):
                items.append(_entry(child, child.name))

        return ToolResult.success({"items": items})
