"""Typer CLI application."""

import logging
import sys

import typer

from resettlement_analyzer.cli.commands.batch import batch
from resettlement_analyzer.cli.commands.check import check
from resettlement_analyzer.cli.commands.sample import sample
from resettlement_analyzer.cli.config import CliConfig

app = typer.Typer(
    name="resettle",
    help="Bet resettlement detection and reporting",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Bet resettlement detection and reporting."""
    config = CliConfig.from_env()
    level = "DEBUG" if verbose else config.log_level
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


app.command()(check)
app.command()(batch)
app.command()(sample)
