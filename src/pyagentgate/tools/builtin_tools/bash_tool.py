from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..base import ActionCategory, ParamSpec, ToolSpec, ToolResult, ToolContext
from ...util.fs import resolve_path, FsError
from ...util.subprocess import run_cmd, shell_argv

@dataclass
class RunCommandTool:
    spec: ToolSpec = ToolSpec(
        name="run_command",
        description="Execute a shell command",
        category=ActionCategory.EXECUTE,
        parameters={
            "command": ParamSpec("string", required=True, description="Command to execute"),
            "cwd": ParamSpec("string", description="Working directory"),
        },
    )

    def describe(self, ctx: ToolContext, args: dict[str, Any]) -> tuple[str, str]:
        return "Run shell command", f"Command: {args['command']}\nDirectory: {args.get('cwd') or ctx.cwd}"

    def execute(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        cmd = args["command"].strip()
        if not cmd:
            return ToolResult.error("Empty command.")

        workdir = Path(ctx.cwd)
        if args.get("cwd"):
            try:
                workdir = resolve_path(workdir, args["cwd"], restrict=ctx.restrict_to_cwd)
            except FsError as e:
                return ToolResult.error(str(e))
            if not workdir.is_dir():
                return ToolResult.error(f"Working directory not found: {args['cwd']}")

        # No timeout here: stopping a runaway command belongs to the caller.
        res = run_cmd(shell_argv(cmd), cwd=str(workdir), timeout=None)
        if res.returncode != 0:
            msg = f"Command failed with exit code {res.returncode}: {cmd}"
            if res.stderr:
                msg += f"\n{res.stderr}"
            return ToolResult.error(msg)
        return ToolResult.success({"stdout": res.stdout, "stderr": res.stderr})
