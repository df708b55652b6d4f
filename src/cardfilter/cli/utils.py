"""
CLI Utilities

Shared helpers for CLI commands: logging setup, configuration loading and
output formatting.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from cardfilter.cards import Card
from cardfilter.core.config import AppConfig, ConfigManager
from cardfilter.core.exceptions import CardFilterError

console = Console()


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Set up logging configuration for the application."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        force=True
    )


def load_config_from_cli(
    config_file: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None
) -> Tuple[AppConfig, List[str]]:
    """
    Load configuration from CLI arguments with error reporting.

    Args:
        config_file: Optional path to configuration file
        cli_args: Dictionary of CLI arguments to override config

    Returns:
        Validated AppConfig and the list of configuration warnings

    Raises:
        typer.Exit: If configuration is invalid
    """
    try:
        config_manager = ConfigManager(config_file=config_file)
        app_config = config_manager.load_config(cli_args=cli_args or {})
    except CardFilterError as e:
        handle_error(e)

    return app_config, config_manager.validate_config(app_config)


def print_warnings(warnings: List[str]) -> None:
    if not warnings:
        return
    console.print("[yellow]Configuration warnings:[/yellow]")
    for warning in warnings:
        console.print(f"  • {warning}", style="yellow", markup=False)


def print_cards(cards: List[Card]) -> None:
    """Print the filtered cards in their fixed text rendering."""
    console.print("These are the filtered cards:", markup=False, highlight=False, emoji=False, soft_wrap=True)
    for card in cards:
        console.print(str(card), markup=False, highlight=False, emoji=False, soft_wrap=True)


def handle_error(error: CardFilterError) -> None:
    """Report a CardFilter error and exit with status 1."""
    logging.getLogger(__name__).debug("Error details: %s", error.get_debug_info())
    console.print(Panel(
        Text(error.get_user_message()),
        title="[red]Error[/red]",
        border_style="red"
    ))
    raise typer.Exit(1)
