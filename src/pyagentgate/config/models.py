from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..tools.permissions import TrustPolicy


@dataclass
class GatewayConfig:
    """Gateway config loaded from JSON or YAML.

    mode: trust policy for the session (interactive / auto-edit / full-auto)
    restrict_to_cwd: reject tool paths that resolve outside the working directory
    env_allowlist: extra variable names get_environment_info may report
    record_events: append a jsonl trace of tool calls under the user data dir
    """

    mode: TrustPolicy = TrustPolicy.INTERACTIVE
    restrict_to_cwd: bool = False
    env_allowlist: list[str] = field(default_factory=list)
    record_events: bool = False

    loaded_from: Path | None = None

    def apply_obj(self, obj: dict[str, Any]) -> None:
        """Overlay recognised keys from a parsed config mapping; bad values are ignored."""
        mode = obj.get("mode")
        if isinstance(mode, str):
            try:
                self.mode = TrustPolicy.parse(mode)
            except ValueError:
                pass

        rc = obj.get("restrict_to_cwd")
        if isinstance(rc, bool):
            self.restrict_to_cwd = rc

        allow = obj.get("env_allowlist")
        if isinstance(allow, list):
            self.env_allowlist = [str(x).strip() for x in allow if isinstance(x, str) and x.strip()]

        rec = obj.get("record_events")
        if isinstance(rec, bool):
            self.record_events = rec
