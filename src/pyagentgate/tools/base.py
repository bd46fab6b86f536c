from __future__ import annotations
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, Mapping, Protocol

ParamType = Literal["string", "integer", "number", "boolean", "object", "array"]
ResultKind = Literal["success", "cancelled", "error"]


class ActionCategory(str, Enum):
    READ = "read"
    EDIT = "edit"              # write_file / edit_file only
    FILESYSTEM = "filesystem"  # directory creation, deletion
    EXECUTE = "execute"
    NETWORK = "network"
    INFO = "info"


@dataclass(frozen=True)
class ParamSpec:
    type: ParamType
    required: bool = False
    enum: tuple[Any, ...] | None = None
    description: str = ""
    default: Any = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"type": self.type, "required": self.required}
        if self.enum is not None:
            d["enum"] = list(self.enum)
        return d

    def to_json_schema(self) -> dict[str, Any]:
        d: dict[str, Any] = {"type": self.type}
        if self.description:
            d["description"] = self.description
        if self.enum is not None:
            d["enum"] = list(self.enum)
        if self.default is not None:
            d["default"] = self.default
        return d


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    category: ActionCategory
    parameters: Mapping[str, ParamSpec] = field(default_factory=dict)

    def required(self) -> list[str]:
        return [k for k, p in self.parameters.items() if p.required]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "parameters": {k: p.to_dict() for k, p in self.parameters.items()},
        }

    def to_openai(self) -> dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": {
                    "type": "object",
                    "properties": {k: p.to_json_schema() for k, p in self.parameters.items()},
                    "required": self.required(),
                },
            },
        }


@dataclass(frozen=True)
class ToolResult:
    """Outcome handed back to the agent loop.

    Exactly one of success / cancelled / error. The payload of a success is
    operation specific; an error carries {"error": message}.
    """

    kind: ResultKind
    payload: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def success(payload: dict[str, Any]) -> "ToolResult":
        return ToolResult("success", dict(payload))

    @staticmethod
    def cancelled() -> "ToolResult":
        return ToolResult("cancelled", {"cancelled": True})

    @staticmethod
    def error(message: str) -> "ToolResult":
        return ToolResult("error", {"error": str(message)})

    @property
    def ok(self) -> bool:
        return self.kind == "success"

    @property
    def is_error(self) -> bool:
        return self.kind == "error"

    @property
    def is_cancelled(self) -> bool:
        return self.kind == "cancelled"

    @property
    def message(self) -> str | None:
        return self.payload.get("error") if self.is_error else None

    def to_dict(self) -> dict[str, Any]:
        return dict(self.payload)

    def to_content(self) -> str:
        # http payloads may hold arbitrary JSON; fall back to str() for the rest
        return json.dumps(self.payload, ensure_ascii=False, default=str)


@dataclass
class ToolContext:
    cwd: str
    restrict_to_cwd: bool = False
    env_allowlist: tuple[str, ...] = ()


@dataclass
class ToolCall:
    name: str
    arguments: dict[str, Any] = field(default_factory=dict)


class Tool(Protocol):
    spec: ToolSpec
    def describe(self, ctx: ToolContext, args: dict[str, Any]) -> tuple[str, str]: ...
    def execute(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult: ...
