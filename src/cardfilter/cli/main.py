#!/usr/bin/env python3
"""
CardFilter CLI Main Application

Typer-based command-line interface with rich formatting.
"""

import sys
from typing import Optional

import typer

from cardfilter.cli import __version__
from cardfilter.cli.commands import select
from cardfilter.cli.utils import console

# Create main Typer application
app = typer.Typer(
    name="cardfilter",
    help="Composable card filters",
    context_settings={"help_option_names": ["-h", "--help"]},
    rich_markup_mode="rich",
    no_args_is_help=True,
)

app.command("filter", help="Filter cards and print the matches")(select.filter_command)
app.command("filters", help="List available filter types")(select.list_filters_command)


def version_callback(value: bool):
    """Show version information."""
    if value:
        console.print(f"[bold cyan]CardFilter[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def app_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information and exit"
    ),
):
    """
    CardFilter - composable card filters

    [bold]Quick Start:[/bold]

    • Filter the sample cards: [cyan]cardfilter filter -V 1 -V 3 --max-cost 50[/cyan]
    • List filter types: [cyan]cardfilter filters[/cyan]
    """


def main():
    """Entry point for the cardfilter console script."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(1)


if __name__ == "__main__":
    main()
