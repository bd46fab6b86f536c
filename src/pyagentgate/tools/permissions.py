from __future__ import annotations

from enum import Enum
from typing import Callable

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm

from .base import ActionCategory

console = Console()

ConfirmFn = Callable[[str, str], bool]


class TrustPolicy(str, Enum):
    INTERACTIVE = "interactive"
    AUTO_EDIT = "auto-edit"
    FULL_AUTO = "full-auto"

    @staticmethod
    def parse(value: "str | TrustPolicy") -> "TrustPolicy":
        if isinstance(value, TrustPolicy):
            return value
        v = str(value or "").strip().lower().replace("_", "-")
        # "suggest" is the older name of interactive mode
        if v == "suggest":
            return TrustPolicy.INTERACTIVE
        for p in TrustPolicy:
            if p.value == v:
                return p
        known = ", ".join(p.value for p in TrustPolicy)
        raise ValueError(f"Unknown trust policy '{value}'. Known policies: {known}")


class ApprovalGate:
    """Decides whether one action may run under a fixed trust policy.

    The policy is set at construction and never mutated; use with_policy() to
    get a gate for a different mode. Each call yields a fresh decision: nothing
    is remembered between calls, even for identical actions.
    """

    def __init__(
        self,
        policy: TrustPolicy | str = TrustPolicy.INTERACTIVE,
        output: Console | None = None,
        confirm: ConfirmFn | None = None,
    ):
        self._policy = TrustPolicy.parse(policy)
        self._console = output or console
        self._confirm = confirm

    @property
    def policy(self) -> TrustPolicy:
        return self._policy

    def with_policy(self, policy: TrustPolicy | str) -> "ApprovalGate":
        return ApprovalGate(policy, output=self._console, confirm=self._confirm)

    def auto_grants(self, category: ActionCategory | str) -> bool:
        if self._policy is TrustPolicy.FULL_AUTO:
            return True
        if self._policy is TrustPolicy.AUTO_EDIT:
            return ActionCategory(category) is ActionCategory.EDIT
        return False

    def request_approval(self, action: str, details: str, category: ActionCategory | str) -> bool:
        if self.auto_grants(category):
            self._console.print(f"[dim]Auto-approved: {escape(action)}[/dim]")
            return True

        # No timeout: an unanswered prompt holds the pipeline.
        if self._confirm is not None:
            return bool(self._confirm(action, details))

        self._console.print(f"\n[yellow]Tool requires approval[/yellow]: [bold]{escape(action)}[/bold]")
        if details:
            self._console.print(f"[dim]{escape(details)}[/dim]", highlight=False)
        return Confirm.ask(f"Allow: {escape(action)}?", default=True, console=self._console)
