from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..base import ActionCategory, ParamSpec, ToolSpec, ToolResult, ToolContext
from ...util.fs import resolve_path, write_text, FsError

@dataclass
class WriteFileTool:
    spec: ToolSpec = ToolSpec(
        name="write_file",
        description="Write content to a file",
        category=ActionCategory.EDIT,
        parameters={
            "path": ParamSpec("string", required=True, description="Path to the file"),
            "content": ParamSpec("string", required=True, description="Content to write"),
        },
    )

    def describe(self, ctx: ToolContext, args: dict[str, Any]) -> tuple[str, str]:
        return "Write file", f"Path: {args['path']}\nSize: {len(args['content'])} chars"

    def execute(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        path = args["path"]
        content = args["content"]
        try:
            p = resolve_path(Path(ctx.cwd), path, restrict=ctx.restrict_to_cwd)
        except FsError as e:
            return ToolResult.error(str(e))
        if p.is_dir():
            return ToolResult.error(f"Is a directory: {path}")
        p.parent.mkdir(parents=True, exist_ok=True)
        write_text(p, content)
        return ToolResult.success({"success": True, "path": path})
