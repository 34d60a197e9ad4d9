"""Sample command: run detection on the built-in reference inputs."""

from __future__ import annotations

import typer
from rich.console import Console

from resettlement_analyzer.cli.input_loader import resolve_locale
from resettlement_analyzer.detection.dispatcher import detect
from resettlement_analyzer.reporting.report_generator import render_full, render_short
from resettlement_analyzer.samples import SAMPLES

console = Console()


def sample(
    locale: str = typer.Option("", help="Report language: zh or en. Env: RESETTLE_LOCALE"),
) -> None:
    """Self-test: detect and report on a sample transaction log and ticket detail."""
    try:
        effective_locale = resolve_locale(locale)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    for name, data in SAMPLES.items():
        console.rule(f"[bold]{name}[/bold]")
        result = detect(data)
        console.print_json(data=result.to_dict())
        console.print()
        console.print(
            render_full(result, effective_locale),
            markup=False, highlight=False, soft_wrap=True,
        )
        console.print()
        console.print(f"Summary: {render_short(result, effective_locale)}", markup=False)
