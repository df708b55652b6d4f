"""
Filter Commands

Commands for running the composed card filter over the configured cards and
for listing the available filter types.
"""

from typing import Annotated, List, Optional

import typer
from rich.table import Table
from rich.text import Text

from cardfilter.cli.utils import (
    console,
    handle_error,
    load_config_from_cli,
    print_cards,
    print_warnings,
    setup_logging,
)
from cardfilter.core.exceptions import CardFilterError
from cardfilter.filters import FilterFactory
from cardfilter.selection import get_cards


def filter_command(
    config: Annotated[Optional[str], typer.Option("--config", "-c", help="Configuration file path")] = None,
    min_cost: Annotated[Optional[float], typer.Option("--min-cost", help="Exclusive lower cost bound")] = None,
    max_cost: Annotated[Optional[float], typer.Option("--max-cost", help="Exclusive upper cost bound")] = None,
    versions: Annotated[Optional[List[int]], typer.Option("--card-version", "-V", help="Accepted card version (repeatable)")] = None,
    leaders: Annotated[Optional[List[int]], typer.Option("--leader", "-L", help="Accepted leader id (repeatable)")] = None,
    explain: Annotated[bool, typer.Option("--explain", help="Show why each card was accepted or rejected")] = False,
    verbose: Annotated[Optional[bool], typer.Option("--verbose", help="Enable verbose output")] = None,
    debug: Annotated[Optional[bool], typer.Option("--debug", help="Enable debug logging")] = None,
):
    """
    Filter the configured cards and print the ones that match.

    [bold]Examples:[/bold]

    • Sample data, versions 1 or 3 below cost 50:
      [cyan]cardfilter filter -V 1 -V 3 --max-cost 50[/cyan]
    • Use a configuration file:
      [cyan]cardfilter filter --config cards.yaml[/cyan]
    """
    cli_args = {
        'min_cost': min_cost,
        'max_cost': max_cost,
        'versions': list(versions) if versions else None,
        'leaders': list(leaders) if leaders else None,
        'verbose': verbose,
        'debug': debug,
    }
    app_config, warnings = load_config_from_cli(config, cli_args)
    setup_logging(verbose=app_config.verbose, debug=app_config.debug)
    print_warnings(warnings)

    try:
        card_filter = FilterFactory.create_from_config(app_config.filters)
    except CardFilterError as e:
        handle_error(e)

    cards = app_config.build_cards()
    out_cards = []
    matched = get_cards(cards, card_filter, out_cards)

    if explain:
        table = Table(title=card_filter.name)
        table.add_column("Card", style="cyan")
        table.add_column("Result")
        table.add_column("Reason")
        for card in cards:
            result = card_filter.apply(card)
            table.add_row(
                Text(str(card)),
                "[green]pass[/green]" if result.passed else "[red]fail[/red]",
                Text(result.reason),
            )
        console.print(table)

    print_cards(out_cards)
    if app_config.verbose:
        console.print(f"[dim]{matched} of {len(cards)} cards matched[/dim]")


def list_filters_command():
    """List the available filter types and their options."""
    table = Table(title="Available Filters")
    table.add_column("Type", style="cyan")
    table.add_column("Name")
    table.add_column("Builders", style="green")
    table.add_column("Options")

    for filter_type, info in FilterFactory.get_available_filters().items():
        table.add_row(
            filter_type,
            info['name'],
            ", ".join(info['builders']) or "-",
            ", ".join(info['options']) or "-",
        )

    console.print(table)
