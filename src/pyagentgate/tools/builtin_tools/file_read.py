from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..base import ActionCategory, ParamSpec, ToolSpec, ToolResult, ToolContext
from ...util.fs import resolve_path, read_text, FsError

@dataclass
class ReadFileTool:
    spec: ToolSpec = ToolSpec(
        name="read_file",
        description="Read contents of a file",
        category=ActionCategory.READ,
        parameters={
            "path": ParamSpec("string", required=True, description="Path to the file"),
        },
    )

    def describe(self, ctx: ToolContext, args: dict[str, Any]) -> tuple[str, str]:
        return "Read file", f"Path: {args['path']}"

    def execute(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        path = args["path"]
        try:
            p = resolve_path(Path(ctx.cwd), path, restrict=ctx.restrict_to_cwd)
        except FsError as e:
            return ToolResult.error(str(e))
        if not p.exists():
            return ToolResult.error(f"File not found: {path}")
        if not p.is_file():
            return ToolResult.error(f"Not a file: {path}")

        content = read_text(p)
        return ToolResult.success({"content": content, "lines": len(content.split("\n"))})
