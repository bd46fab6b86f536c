from __future__ import annotations

import os
import platform
import sys
from typing import Any

from ..base import ActionCategory, ToolContext, ToolResult, ToolSpec

# Only these are ever reported; the rest of the environment stays private.
# Each entry lists fallbacks tried in order (POSIX name first, Windows second).
BASE_ENV_ALLOWLIST: dict[str, tuple[str, ...]] = {
    "USER": ("USER", "USERNAME"),
    "HOME": ("HOME", "USERPROFILE"),
}


class EnvironmentInfoTool:
    spec = ToolSpec(
        name="get_environment_info",
        description="Get system and environment information",
        category=ActionCategory.INFO,
        parameters={},
    )

    def describe(self, ctx: ToolContext, args: dict[str, Any]) -> tuple[str, str]:
        return "Read environment info", "Platform, Python version, working directory, allow-listed variables"

    def execute(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        env: dict[str, str | None] = {}
        for key, candidates in BASE_ENV_ALLOWLIST.items():
            env[key] = next((os.environ[c] for c in candidates if os.environ.get(c)), None)
        for key in ctx.env_allowlist:
            env.setdefault(key, os.environ.get(key))
        return ToolResult.success({
            "platform": sys.platform,
            "python_version": platform.python_version(),
            "cwd": ctx.cwd,
            "env": env,
        })
