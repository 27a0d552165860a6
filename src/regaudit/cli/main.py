"""
Registration audit CLI.

Commands:
    regaudit record  - Record a single audit event
    regaudit config  - Show the effective audit configuration
    regaudit host    - Show the host identity stamped on records
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from regaudit import __version__
from regaudit.audit.model import AuditRecord, EventDescriptor, ModuleDescriptor
from regaudit.core.config import AuditConfig, config_path, load_config
from regaudit.emitter import AuditEmitter, HostIdentity, resolve_local_host
from regaudit.ports.errors import AuditError
from regaudit.ports.sink import AuditSink
from regaudit.session import StaticSession
from regaudit.sinks import InMemoryAuditSink, create_sink

app = typer.Typer(
    name="regaudit",
    help="Registration audit event recording",
    no_args_is_help=True,
)

console = Console()


def _load(path: Optional[Path]) -> tuple[Path, AuditConfig]:
    """Load config for the project, exiting on errors."""
    project_path = (path or Path.cwd()).resolve()
    try:
        return project_path, load_config(project_path)
    except AuditError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(1)


def _print_json(data: dict) -> None:
    console.print(json.dumps(data, indent=2), markup=False, highlight=False, soft_wrap=True)


def _display(value: Optional[str]) -> str:
    return value if value else "[dim]not set[/dim]"


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"regaudit {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Registration audit event recording."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# =============================================================================
# RECORD COMMAND
# =============================================================================


@app.command("record")
def record_event(
    event_id: str = typer.Argument(..., help="Event id (e.g. EVT01)"),
    event_name: str = typer.Argument(..., help="Event name (e.g. LOGIN)"),
    event_type: str = typer.Argument(..., help="Event type (e.g. USER)"),
    module_id: str = typer.Argument(..., help="Module id (e.g. MOD01)"),
    module_name: str = typer.Argument(..., help="Module name (e.g. LOGIN_MODULE)"),
    description: str = typer.Option(
        "",
        "--description",
        "-d",
        help="Description of the event",
    ),
    ref_id: str = typer.Option(
        "",
        "--ref-id",
        help="Identifier of the entity the event concerns",
    ),
    ref_id_type: str = typer.Option(
        "",
        "--ref-id-type",
        help="Type of the reference identifier (e.g. USER_ID)",
    ),
    user_id: Optional[str] = typer.Option(
        None,
        "--user-id",
        help="Session user id (recorded as NA if omitted)",
    ),
    user_name: Optional[str] = typer.Option(
        None,
        "--user-name",
        help="Session user name (recorded as NA if omitted)",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON",
    ),
    path: Optional[Path] = typer.Option(
        None,
        "--path",
        "-p",
        help="Project path (default: current directory)",
    ),
):
    """
    Record a single audit event.

    Writes the record to the sink configured in .regaudit/config.yaml
    (a JSON Lines file by default).
    """
    project_path, config = _load(path)

    try:
        sink = create_sink(config, base_path=project_path)
    except AuditError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(1)

    recorded = _RecordingSink(sink)
    emitter = AuditEmitter(
        session=StaticSession(user_id=user_id, name=user_name),
        config=config,
        sink=recorded,
    )

    try:
        emitter.record(
            EventDescriptor(id=event_id, name=event_name, type=event_type),
            ModuleDescriptor(id=module_id, name=module_name),
            description,
            ref_id,
            ref_id_type,
        )
    except AuditError as e:
        if json_output:
            _print_json({"success": False, "error": e.message})
        else:
            console.print(f"[red]Failed to record audit event: {escape(e.message)}[/red]")
        raise typer.Exit(1)

    record = recorded.last
    if json_output:
        _print_json({"success": True, "record": record.to_dict()})
        return

    console.print(Panel.fit(
        _record_table(record),
        title=f"[bold green]Recorded {escape(record.event_name)}[/bold green]",
        border_style="green",
    ))


class _RecordingSink(AuditSink):
    """Passes records through to another sink, remembering the last one."""

    def __init__(self, inner: AuditSink) -> None:
        self.inner = inner
        self.last: AuditRecord | None = None

    def write(self, record: AuditRecord) -> None:
        self.inner.write(record)
        self.last = record


def _record_table(record: AuditRecord) -> Table:
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for key, value in record.to_dict().items():
        table.add_row(key, escape(str(value)))
    return table


# =============================================================================
# CONFIG COMMAND
# =============================================================================


@app.command("config")
def show_config(
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON",
    ),
    path: Optional[Path] = typer.Option(
        None,
        "--path",
        "-p",
        help="Project path (default: current directory)",
    ),
):
    """Show the effective audit configuration (file plus environment)."""
    project_path, config = _load(path)

    if json_output:
        _print_json(config.to_dict())
        return

    source = config_path(project_path)
    table = Table(
        title="Audit Configuration",
        caption=f"{source}" if source.exists() else "defaults (no config file)",
        box=box.ROUNDED,
    )
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Application ID", _display(config.application_id))
    table.add_row("Application name", _display(config.application_name))
    table.add_row("Fallback host IP", _display(config.fallback_host_ip))
    table.add_row("Fallback host name", _display(config.fallback_host_name))
    table.add_row("Sink backend", config.sink_backend)
    if config.sink_backend == "jsonl":
        table.add_row("Sink path", config.sink_path)

    console.print(table)


# =============================================================================
# HOST COMMAND
# =============================================================================


@app.command("host")
def show_host(
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON",
    ),
    path: Optional[Path] = typer.Option(
        None,
        "--path",
        "-p",
        help="Project path (default: current directory)",
    ),
):
    """Show the host identity that would be stamped on records."""
    _, config = _load(path)
    failures: list[OSError] = []

    def lookup() -> HostIdentity:
        try:
            return resolve_local_host()
        except OSError as e:
            failures.append(e)
            raise

    emitter = AuditEmitter(
        session=StaticSession(),
        config=config,
        sink=InMemoryAuditSink(),
        host_resolver=lookup,
    )
    host = emitter.resolve_host()
    resolved = not failures

    if failures and not json_output:
        console.print(f"[yellow]Host lookup failed ({escape(str(failures[0]))}), using configured fallback[/yellow]")

    if json_output:
        _print_json({"resolved": resolved, "host_ip": host.ip, "host_name": host.name})
        return

    console.print(f"Host IP:   {_display(host.ip)}")
    console.print(f"Host name: {_display(host.name)}")


def main():
    """Main entry point."""
    app()
