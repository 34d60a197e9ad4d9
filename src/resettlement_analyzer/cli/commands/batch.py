"""Batch command: detect resettlement across a JSON array of inputs."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from resettlement_analyzer.cli.input_loader import load_json, resolve_locale
from resettlement_analyzer.detection.batch import batch_detect
from resettlement_analyzer.ingestion.classifier import is_sequence
from resettlement_analyzer.reporting.report_generator import render_short

console = Console()


def batch(
    source: str = typer.Argument(
        "-", help="JSON file holding an array of transaction logs / ticket details ('-' reads stdin)"
    ),
    locale: str = typer.Option("", help="Summary language: zh or en. Env: RESETTLE_LOCALE"),
    only_resettled: bool = typer.Option(
        False, "--only-resettled", help="Show only inputs with a resettlement"
    ),
) -> None:
    """Run detection on every element of a JSON array."""
    try:
        effective_locale = resolve_locale(locale)
        data = load_json(source)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if not is_sequence(data):
        console.print("[red]Error: batch input must be a JSON array[/red]")
        raise typer.Exit(1)

    entries = batch_detect(data)
    resettled = sum(1 for e in entries if e.has_resettlement)
    shown = [e for e in entries if e.has_resettlement] if only_resettled else entries

    if shown:
        table = Table(title=f"Resettlement Check ({len(shown)})")
        table.add_column("#", justify="right")
        table.add_column("Result", style="bold")
        table.add_column("Method")
        table.add_column("Count", justify="right")
        table.add_column("Ticket / Purchase")

        for entry in shown:
            result = entry.result
            color = "red" if result.is_resettlement else "green"
            table.add_row(
                str(entry.index),
                f"[{color}]{render_short(result, effective_locale)}[/{color}]",
                result.method,
                str(result.event_count or result.input_count or 0),
                str(result.ticket_id or result.purchase_id or ""),
            )
        console.print(table)

    console.print(f"{resettled} of {len(entries)} inputs resettled")
