from __future__ import annotations

import threading
from typing import Any, Callable

from rich.console import Console
from rich.markup import escape

from .base import Tool, ToolCall, ToolContext, ToolResult
from .catalog import ToolCatalog
from .errors import PermissionDenied, ToolValidationError, UnknownToolError
from .permissions import ApprovalGate
from ..events.trace import ToolTrace

console = Console()


class ExecutionGateway:
    """Single entry point between the agent loop and the side-effecting tools.

    execute() always returns a ToolResult: validation failures and handler
    exceptions become errors, a withheld approval becomes cancelled. Approval is
    asked only after validation passes and before the handler runs, at most
    once per call. Calls are processed one at a time.
    """

    def __init__(
        self,
        catalog: ToolCatalog,
        gate: ApprovalGate,
        ctx: ToolContext,
        events: ToolTrace | None = None,
        output: Console | None = None,
    ):
        self.catalog = catalog
        self.gate = gate
        self.ctx = ctx
        self.events = events
        self._console = output or console
        self._lock = threading.Lock()

    def execute_call(self, call: ToolCall) -> ToolResult:
        return self.execute(call.name, call.arguments)

    def execute(self, name: str, arguments: Any) -> ToolResult:
        with self._lock:
            return self._execute_locked(name, arguments)

    def _record(self, write: Callable[..., None], *args: Any) -> None:
        if self.events is None:
            return
        try:
            write(self.events, *args)
        except OSError as e:
            self._console.print(f"[dim]event trace unavailable: {escape(str(e))}[/dim]")

    def _validated(self, name: Any, arguments: Any) -> tuple[Tool, dict[str, Any]]:
        check = self.catalog.validate(name, arguments)
        if not check.ok:
            raise check.to_exception()
        return self.catalog.get(name), dict(arguments)

    def _authorize(self, tool: Tool, args: dict[str, Any]) -> None:
        action, details = tool.describe(self.ctx, args)
        if not self.gate.request_approval(action, details, tool.spec.category):
            raise PermissionDenied(action)

    def _execute_locked(self, name: str, arguments: Any) -> ToolResult:
        try:
            tool, args = self._validated(name, arguments)
        except (UnknownToolError, ToolValidationError) as e:
            self._console.print(f"[dim]Rejected tool call: {escape(str(e))}[/dim]")
            self._record(ToolTrace.rejected, str(name), e)
            return ToolResult.error(str(e))

        self._record(ToolTrace.call, name, args)
        try:
            self._authorize(tool, args)
            res = tool.execute(self.ctx, args)
        except PermissionDenied as e:
            self._console.print(f"[dim]Cancelled: {escape(str(e))}[/dim]")
            self._record(ToolTrace.cancelled, name, str(e))
            return ToolResult.cancelled()
        except Exception as e:
            res = ToolResult.error(str(e) or type(e).__name__)

        if res.is_error:
            self._console.print(f"[red]{escape(name)} failed:[/red] {escape(res.message or '')}")
        self._record(ToolTrace.result, name, res)
        return res
