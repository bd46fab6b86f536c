from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config.loader import load_gateway_config
from .config.models import GatewayConfig
from .events.trace import ToolTrace
from .tools.base import ToolContext
from .tools.builtin import register_builtin_tools
from .tools.catalog import ToolCatalog
from .tools.gateway import ExecutionGateway
from .tools.permissions import ApprovalGate, ConfirmFn, TrustPolicy


@dataclass
class AppContext:
    cwd: Path
    config: GatewayConfig
    catalog: ToolCatalog
    gate: ApprovalGate
    gateway: ExecutionGateway
    events: ToolTrace | None = None

    @property
    def mode(self) -> TrustPolicy:
        return self.gate.policy

    @staticmethod
    def from_env(
        cwd: Path,
        mode: str | TrustPolicy | None = None,
        config_path: Optional[Path] = None,
        restrict_to_cwd: bool | None = None,
        record_events: bool | None = None,
        session_id: str | None = None,
        confirm: ConfirmFn | None = None,
    ) -> "AppContext":
        cwd = cwd.expanduser().resolve()

        # Start with file config (global < project < explicit), then CLI overrides.
        config = load_gateway_config(cwd=cwd, explicit_path=config_path)
        if mode is not None:
            config.mode = TrustPolicy.parse(mode)
        if restrict_to_cwd is not None:
            config.restrict_to_cwd = restrict_to_cwd
        if record_events is not None:
            config.record_events = record_events

        catalog = ToolCatalog()
        register_builtin_tools(catalog)

        gate = ApprovalGate(config.mode, confirm=confirm)
        events = ToolTrace.open(session_id) if config.record_events else None
        ctx = ToolContext(
            cwd=str(cwd),
            restrict_to_cwd=config.restrict_to_cwd,
            env_allowlist=tuple(config.env_allowlist),
        )
        gateway = ExecutionGateway(catalog, gate, ctx, events=events)

        return AppContext(
            cwd=cwd,
            config=config,
            catalog=catalog,
            gate=gate,
            gateway=gateway,
            events=events,
        )
