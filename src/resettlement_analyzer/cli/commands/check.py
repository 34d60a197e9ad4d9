"""Check command: detect resettlement in one JSON document."""

from __future__ import annotations

import typer
from rich.console import Console

from resettlement_analyzer.cli.input_loader import load_json, resolve_locale
from resettlement_analyzer.detection.dispatcher import detect
from resettlement_analyzer.reporting.report_generator import render_full, render_short

console = Console()


def check(
    source: str = typer.Argument(
        "-", help="JSON file with a transaction log or ticket detail ('-' reads stdin)"
    ),
    locale: str = typer.Option("", help="Report language: zh or en. Env: RESETTLE_LOCALE"),
    short: bool = typer.Option(False, "--short", help="Print only the one-line summary"),
    as_json: bool = typer.Option(False, "--json", help="Print the detection result as JSON"),
) -> None:
    """Detect whether a bet was resettled and print the report."""
    try:
        effective_locale = resolve_locale(locale)
        data = load_json(source)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    result = detect(data)
    if result.error:
        console.print(f"[red]{result.method}: {result.error}[/red]")
        raise typer.Exit(1)

    if as_json:
        console.print_json(data=result.to_dict())
    elif short:
        console.print(render_short(result, effective_locale), markup=False, highlight=False)
    else:
        console.print(
            render_full(result, effective_locale),
            markup=False, highlight=False, soft_wrap=True,
        )
