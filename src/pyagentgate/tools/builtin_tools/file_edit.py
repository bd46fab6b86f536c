from __future__ import annotations
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..base import ActionCategory, ParamSpec, ToolSpec, ToolResult, ToolContext
from ...util.fs import resolve_path, read_text, write_text, FsError

PREVIEW_CHARS = 50


def _preview(text: str, limit: int = PREVIEW_CHARS) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


@dataclass
class EditFileTool:
    """Search-and-replace inside a file.

    `search` is a literal substring unless `regex` is true, in which case it is
    a Python `re` pattern and `replace` may use group references such as \\1.
    Every occurrence is replaced. Zero matches is not an error and leaves the
    file untouched.
    """

    spec: ToolSpec = ToolSpec(
        name="edit_file",
        description="Edit a file by replacing text",
        category=ActionCategory.EDIT,
        parameters={
            "path": ParamSpec("string", required=True, description="Path to the file"),
            "search": ParamSpec("string", required=True, description="Text to search for"),
            "replace": ParamSpec("string", required=True, description="Text to replace with"),
            "regex": ParamSpec(
                "boolean",
                description="Treat search as a regular expression instead of literal text",
                default=False,
            ),
        },
    )

    def describe(self, ctx: ToolContext, args: dict[str, Any]) -> tuple[str, str]:
        mode = "pattern" if args.get("regex") else "text"
        return "Edit file", f'Path: {args["path"]}\nReplace {mode}: "{_preview(args["search"])}"'

    def execute(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        path = args["path"]
        search = args["search"]
        replace = args["replace"]
        use_regex = bool(args.get("regex", False))
        if search == "":
            return ToolResult.error("search must not be empty")

        try:
            p = resolve_path(Path(ctx.cwd), path, restrict=ctx.restrict_to_cwd)
        except FsError as e:
            return ToolResult.error(str(e))
        if not p.exists() or not p.is_file():
            return ToolResult.error(f"File not found: {path}")

        # undecodable bytes outside the match are written back unchanged
        text = read_text(p, errors="surrogateescape")
        if use_regex:
            try:
                new_text, count = re.subn(search, replace, text)
            except re.error as e:
                return ToolResult.error(f"Invalid pattern: {e}")
        else:
            count = text.count(search)
            new_text = text.replace(search, replace)

        if count:
            write_text(p, new_text, errors="surrogateescape")
        return ToolResult.success({"success": True, "replacements": count})
