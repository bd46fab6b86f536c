from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from .base import ParamSpec, Tool, ToolSpec
from .errors import ToolError, ToolValidationError, UnknownToolError

ValidationKind = str  # "unknown_tool" | "missing_parameter" | "type_mismatch"


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def _matches(expected: str, value: Any) -> bool:
    actual = _type_name(value)
    if expected == "number":
        return actual in {"integer", "number"}
    return actual == expected


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    kind: ValidationKind | None = None
    field: str | None = None
    expected: str | None = None
    actual: str | None = None
    message: str = ""

    def to_exception(self) -> ToolError:
        if self.kind == "unknown_tool":
            return UnknownToolError(self.message.removeprefix("Unknown tool: "))
        return ToolValidationError(self.message, kind=self.kind or "", field=self.field)

    @staticmethod
    def valid() -> "ValidationResult":
        return ValidationResult(ok=True)

    @staticmethod
    def unknown_tool(name: str) -> "ValidationResult":
        return ValidationResult(ok=False, kind="unknown_tool", message=f"Unknown tool: {name}")

    @staticmethod
    def missing_parameter(tool: str, field: str) -> "ValidationResult":
        return ValidationResult(
            ok=False,
            kind="missing_parameter",
            field=field,
            message=f"Missing required parameter '{field}' for tool {tool}",
        )

    @staticmethod
    def type_mismatch(tool: str, field: str, expected: str, actual: str) -> "ValidationResult":
        return ValidationResult(
            ok=False,
            kind="type_mismatch",
            field=field,
            expected=expected,
            actual=actual,
            message=f"Invalid parameter '{field}' for tool {tool}: expected {expected}, got {actual}",
        )


def _check_param(tool: str, field: str, spec: ParamSpec, value: Any) -> ValidationResult | None:
    if not _matches(spec.type, value):
        return ValidationResult.type_mismatch(tool, field, spec.type, _type_name(value))
    if spec.enum is not None and value not in spec.enum:
        expected = "one of " + ", ".join(repr(v) for v in spec.enum)
        return ValidationResult.type_mismatch(tool, field, expected, repr(value))
    return None


@dataclass
class ToolCatalog:
    _tools: Dict[str, Tool] = None  # type: ignore

    def __post_init__(self):
        if self._tools is None:
            self._tools = {}

    def register(self, tool: Tool) -> None:
        name = tool.spec.name
        if name in self._tools:
            raise ValueError(f"Tool already registered: {name}")
        self._tools[name] = tool

    def get(self, name: str) -> Tool:
        if name not in self._tools:
            raise KeyError(f"Unknown tool: {name}")
        return self._tools[name]

    def list_specs(self) -> list[ToolSpec]:
        return [t.spec for t in self._tools.values()]

    def validate(self, name: str, arguments: Any) -> ValidationResult:
        """Check a proposed call against the registered schema.

        Pure: never touches the tool itself. Checks run in order (name, required
        fields, then types/enums of every present field) and the first failure wins.
        """
        tool = self._tools.get(name) if isinstance(name, str) else None
        if tool is None:
            return ValidationResult.unknown_tool(name)
        spec = tool.spec
        if not isinstance(arguments, Mapping):
            return ValidationResult.type_mismatch(name, "arguments", "object", _type_name(arguments))

        for field in spec.required():
            if arguments.get(field) is None:
                return ValidationResult.missing_parameter(name, field)

        for field, pspec in spec.parameters.items():
            if field not in arguments or arguments[field] is None:
                continue
            bad = _check_param(name, field, pspec, arguments[field])
            if bad is not None:
                return bad
        return ValidationResult.valid()

    def to_schema(self) -> list[dict[str, Any]]:
        return [s.to_dict() for s in self.list_specs()]

    def to_openai_tools(self) -> list[dict[str, Any]]:
        return [s.to_openai() for s in self.list_specs()]
