from __future__ import annotations
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..base import ActionCategory, ParamSpec, ToolSpec, ToolResult, ToolContext
from ...util.fs import resolve_path, FsError

@dataclass
class DeleteFileTool:
    spec: ToolSpec = ToolSpec(
        name="delete_file",
        description="Delete a file or directory",
        category=ActionCategory.FILESYSTEM,
        parameters={
            "path": ParamSpec("string", required=True, description="Path to delete"),
        },
    )

    def describe(self, ctx: ToolContext, args: dict[str, Any]) -> tuple[str, str]:
        return "Delete file/directory", f"Path: {args['path']}\n⚠️ This action cannot be undone!"

    def execute(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        path = args["path"]
        if not path.strip():
            return ToolResult.error("Path must not be empty.")
        # Resolve the parent only: a symlink is removed itself, not its target.
        raw = Path(path).expanduser()
        try:
            if raw.name in {"", ".", ".."}:
                p = resolve_path(Path(ctx.cwd), path, restrict=ctx.restrict_to_cwd)
            else:
                parent = resolve_path(Path(ctx.cwd), str(raw.parent), restrict=ctx.restrict_to_cwd)
                p = parent / raw.name
        except FsError as e:
            return ToolResult.error(str(e))

        if not p.is_symlink():
            target = p.resolve()
            if target == Path(ctx.cwd).resolve():
                return ToolResult.error(f"Refusing to delete the working directory: {path}")
            if target == Path(target.anchor):
                return ToolResult.error(f"Refusing to delete a filesystem root: {path}")

        if p.is_symlink() or p.is_file():
            p.unlink()
        elif p.is_dir():
            shutil.rmtree(p)
        # a missing path is already deleted
        return ToolResult.success({"success": True, "deleted": path})
