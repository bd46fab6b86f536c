from __future__ import annotations


class ToolError(RuntimeError):
    """Base class for failures raised while mediating a tool call."""


class UnknownToolError(ToolError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ToolValidationError(ToolError):
    def __init__(self, message: str, kind: str, field: str | None = None):
        super().__init__(message)
        self.kind = kind
        self.field = field


class PermissionDenied(ToolError):
    """Operator withheld approval. Reported as a cancelled result, never as an error."""


class ExecutionError(ToolError):
    """I/O, subprocess or network failure inside a handler."""
