from __future__ import annotations

from pathlib import Path
import json
from datetime import datetime

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.markup import escape

from .app_context import AppContext
from .events.trace import ToolTrace
from .tools.builtin import builtin_catalog
from .tools.permissions import TrustPolicy


app = typer.Typer(add_completion=False, help="pyagentgate: approval-gated tool execution for local agents.")
console = Console()


def _resolve_cwd(cwd: Path | None) -> Path:
    cwd = Path(str(cwd or Path.cwd())).expanduser()
    if not cwd.is_absolute():
        cwd = (Path.cwd() / cwd).resolve()
    else:
        cwd = cwd.resolve()
    if not cwd.is_dir():
        raise typer.BadParameter(f"--cwd must be an existing directory, got: {cwd}")
    return cwd


def _parse_mode(mode: str | None) -> TrustPolicy | None:
    if mode is None:
        return None
    try:
        return TrustPolicy.parse(mode)
    except ValueError as e:
        raise typer.BadParameter(str(e))


@app.command()
def tools():
    """List the tools an agent may request."""
    catalog = builtin_catalog()
    table = Table(title="Tool catalog")
    table.add_column("name", style="bold")
    table.add_column("category")
    table.add_column("required")
    table.add_column("description")
    for spec in catalog.list_specs():
        table.add_row(spec.name, spec.category.value, ", ".join(spec.required()) or "-", spec.description)
    console.print(table)


@app.command()
def schema(
    openai: bool = typer.Option(False, "--openai", help="Emit OpenAI function-calling tool entries."),
):
    """Print the catalog schema as JSON."""
    catalog = builtin_catalog()
    data = catalog.to_openai_tools() if openai else catalog.to_schema()
    typer.echo(json.dumps(data, ensure_ascii=False, indent=2))


@app.command("exec")
def exec_tool(
    name: str = typer.Argument(..., help="Tool name, e.g. read_file."),
    args: str = typer.Option("{}", "--args", "-a", help="Tool arguments as a JSON object."),
    mode: str = typer.Option(None, "--mode", "-m", help="Trust policy: interactive / auto-edit / full-auto."),
    cwd: Path = typer.Option(None, "--cwd", help="Working directory. Defaults to current directory."),
    config: Path = typer.Option(None, "--config", help="Gateway config (JSON or YAML) path."),
    restrict: bool = typer.Option(None, "--restrict/--no-restrict", help="Reject paths outside --cwd."),
    record: bool = typer.Option(None, "--record/--no-record", help="Record an event trace for this call."),
    session: str = typer.Option(None, "--session", help="Event trace session id (default creates new)."),
):
    """Run one tool call through validation, approval and execution."""
    try:
        arguments = json.loads(args)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"--args is not valid JSON: {e}")

    try:
        ctx = AppContext.from_env(
            cwd=_resolve_cwd(cwd),
            mode=_parse_mode(mode),
            config_path=config,
            restrict_to_cwd=restrict,
            record_events=record,
            session_id=session,
        )
    except (FileNotFoundError, ValueError) as e:
        raise typer.BadParameter(str(e))

    table = Table.grid(padding=(0, 2))
    table.add_row("📁 [bold green]cwd[/bold green]", f"[bright_cyan]{escape(str(ctx.cwd))}[/bright_cyan]")
    table.add_row("🛡️ [bold green]mode[/bold green]", f"[bright_cyan]{ctx.mode.value}[/bright_cyan]")
    table.add_row("⚙️ [bold green]config[/bold green]", f"[bright_cyan]{escape(str(ctx.config.loaded_from or '(none)'))}[/bright_cyan]")
    if ctx.events:
        table.add_row("🆔 [bold green]session[/bold green]", f"[bright_cyan]{ctx.events.session_id}[/bright_cyan]")
    console.print(Panel(table, title="[bold magenta]pyagentgate[/bold magenta]", border_style="bright_blue"))

    res = ctx.gateway.execute(name, arguments)
    border = "green" if res.ok else ("yellow" if res.is_cancelled else "red")
    console.print(
        Panel.fit(
            escape(json.dumps(res.to_dict(), ensure_ascii=False, indent=2, default=str)[:4000]),
            title=f"result: {escape(name)} ({res.kind})",
            border_style=border,
        )
    )
    if res.is_error:
        raise typer.Exit(code=1)


@app.command()
def events(
    session: str = typer.Option(..., "--session", help="Session id to inspect events."),
    tail: int = typer.Option(200, "--tail", help="Show last N events."),
):
    """Show tool call events recorded for a session."""
    es = ToolTrace.open(session)
    evs = es.read()
    evs = evs[-tail:] if tail and tail > 0 else evs
    console.print(Panel.fit(f"session: {session}\nfile: {es.path}\nevents: {len(evs)}", title="Events"))
    for e in evs:
        ts = datetime.fromtimestamp(e.ts).strftime("%Y-%m-%d %H:%M:%S")
        console.print(Panel.fit(escape(json.dumps(e.data, ensure_ascii=False, indent=2)[:4000]), title=f"{ts}  {e.type}  {escape(e.tool)}"))


if __name__ == "__main__":
    app()
