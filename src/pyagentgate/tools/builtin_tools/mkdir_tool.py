from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..base import ActionCategory, ParamSpec, ToolSpec, ToolResult, ToolContext
from ...util.fs import resolve_path, FsError

@dataclass
class CreateDirectoryTool:
    spec: ToolSpec = ToolSpec(
        name="create_directory",
        description="Create a new directory",
        category=ActionCategory.FILESYSTEM,
        parameters={
            "path": ParamSpec("string", required=True, description="Path for the new directory"),
        },
    )

    def describe(self, ctx: ToolContext, args: dict[str, Any]) -> tuple[str, str]:
        return "Create directory", f"Path: {args['path']}"

    def execute(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        path = args["path"]
        try:
            p = resolve_path(Path(ctx.cwd), path, restrict=ctx.restrict_to_cwd)
        except FsError as e:
            return ToolResult.error(str(e))
        if p.exists() and not p.is_dir():
            return ToolResult.error(f"Path exists and is not a directory: {path}")
        p.mkdir(parents=True, exist_ok=True)
        return ToolResult.success({"success": True, "path": path})
