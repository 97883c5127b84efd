"""Presenters – format monitor state and diagnostics for the terminal or JSON."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from uptime_toolkit.application.ports import Renderer
from uptime_toolkit.application.use_cases.doctor_checks import DoctorResponse
from uptime_toolkit.domain.entities import MonitorSnapshot

console = Console()


def _json_out(data: Any) -> None:
    print(json.dumps(data, indent=2, default=str))


def format_ms(value: float) -> str:
    """Milliseconds without a trailing ``.0`` for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.3f}".rstrip("0").rstrip(".")


# ---------------------------------------------------------------------------
# Monitor
# ---------------------------------------------------------------------------
class ConsoleReportRenderer(Renderer):
    """Repaints the whole monitoring report on every tick."""

    def __init__(self, out: Console | None = None) -> None:
        self._console = out or console

    def render_started(self, target: str) -> None:
        self._console.print(f"[blue]Starting monitoring of {escape(target)}[/blue]")
        self._console.print("[yellow]Press Ctrl+C to stop monitoring[/yellow]\n")

    def render(self, snapshot: MonitorSnapshot) -> None:
        latest = snapshot.latest
        agg = snapshot.aggregate
        out = self._console

        out.clear()
        out.print(f"[blue]Monitoring {escape(snapshot.target)}[/blue]")
        out.print("[yellow]Press Ctrl+C to stop monitoring[/yellow]\n")

        state = "[bold green]UP[/bold green]" if latest.is_up else "[bold red]DOWN[/bold red]"
        out.print(f"[green]Status[/green]: {state}")
        out.print(f"[green]Response Time[/green]: {format_ms(latest.response_time)}ms")
        out.print(f"[green]Availability[/green]: {agg.availability:.1f}%")
        out.print(f"[green]Avg Response Time[/green]: {agg.avg_response_time:.1f}ms\n")
        if latest.error:
            out.print(f"[red]Last error[/red]: {escape(latest.error)}\n")

        out.print("[yellow]Recent checks:[/yellow]")
        for r in snapshot.history:
            color = "green" if r.is_up else "red"
            out.print(
                f"[{color}]{r.timestamp.iso()} - Status: {r.status}, "
                f"Response Time: {format_ms(r.response_time)}ms[/{color}]"
            )

    def render_error(self, target: str, message: str) -> None:
        self._console.clear()
        self._console.print(f"[red]Error monitoring {escape(target)}:[/red]")
        self._console.print(f"[red]{escape(message)}[/red]")

    def render_stopped(self, target: str) -> None:
        self._console.print("\n[yellow]Monitoring stopped[/yellow]")


# ---------------------------------------------------------------------------
# Doctor
# ---------------------------------------------------------------------------
def present_doctor(resp: DoctorResponse, *, as_json: bool = False) -> None:
    if as_json:
        _json_out({"checks": [{"name": c.name, "passed": c.passed, "message": c.message} for c in resp.checks]})
        return

    table = Table(title="Doctor Checks", show_lines=True)
    table.add_column("Check", style="bold")
    table.add_column("Status")
    table.add_column("Details")
    for c in resp.checks:
        status = "[green]PASS[/green]" if c.passed else "[red]FAIL[/red]"
        table.add_row(c.name, status, escape(c.message))
    console.print(table)
    if resp.all_passed:
        console.print("\n[bold green]All checks passed![/bold green]")
    else:
        console.print("\n[bold red]Some checks failed. See above.[/bold red]")
