from __future__ import annotations

import json
import time
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from platformdirs import user_data_dir

from ..tools.base import ToolResult
from ..tools.errors import ToolError

APP_NAME = "pyagentgate"

MAX_ARG_CHARS = 2000
MAX_RESULT_CHARS = 4000


def _events_dir() -> Path:
    return Path(user_data_dir(APP_NAME)) / "events"


def _clip(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "... (truncated)"


def _clip_arguments(arguments: dict[str, Any]) -> dict[str, Any]:
    return {k: _clip(v, MAX_ARG_CHARS) if isinstance(v, str) else v for k, v in arguments.items()}


@dataclass(frozen=True)
class TraceEvent:
    ts: float
    type: str
    tool: str
    data: dict[str, Any] = field(default_factory=dict)


@dataclass
class ToolTrace:
    """Per-session JSONL record of what the gateway did with each tool call.

    One line per event: tool.rejected, tool.call, tool.cancelled, tool.result.
    The gateway only writes it; read() exists for the `events` command.
    """

    session_id: str
    path: Path

    @staticmethod
    def open(session_id: str | None = None, directory: Path | None = None) -> "ToolTrace":
        sid = session_id or uuid.uuid4().hex[:12]
        d = directory if directory is not None else _events_dir()
        d.mkdir(parents=True, exist_ok=True)
        return ToolTrace(session_id=sid, path=d / f"{sid}.jsonl")

    def rejected(self, tool: str, error: ToolError) -> None:
        self._write(
            "tool.rejected",
            tool,
            {
                "kind": getattr(error, "kind", "unknown_tool"),
                "field": getattr(error, "field", None),
                "reason": str(error),
            },
        )

    def call(self, tool: str, arguments: dict[str, Any]) -> None:
        self._write("tool.call", tool, {"arguments": _clip_arguments(arguments)})

    def cancelled(self, tool: str, action: str) -> None:
        self._write("tool.cancelled", tool, {"action": action})

    def result(self, tool: str, res: ToolResult) -> None:
        self._write("tool.result", tool, {"kind": res.kind, "result": _clip(res.to_content(), MAX_RESULT_CHARS)})

    def _write(self, event_type: str, tool: str, data: dict[str, Any]) -> None:
        line = {"ts": time.time(), "type": event_type, "tool": tool, **data}
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(line, ensure_ascii=False, default=str) + "\n")

    def read(self) -> list[TraceEvent]:
        """Parse the trace back, skipping lines that are not JSON objects."""
        if not self.path.exists():
            return []
        out: list[TraceEvent] = []
        with self.path.open("r", encoding="utf-8", errors="replace") as f:
            for line in f:
                try:
                    obj = json.loads(line)
                except ValueError:
                    continue
                if not isinstance(obj, dict):
                    continue
                ts = obj.pop("ts", 0.0)
                out.append(
                    TraceEvent(
                        ts=float(ts) if isinstance(ts, (int, float)) else 0.0,
                        type=str(obj.pop("type", "")),
                        tool=str(obj.pop("tool", "")),
                        data=obj,
                    )
                )
        return out
