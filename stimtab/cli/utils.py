"""CLI utility functions for stimtab.

This module provides utility functions for the CLI including configuration
loading, option parsing, and output formatting.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from stimtab.config import StimtabConfig

console = Console()


def load_config_for_cli(
    config_file: Path | None,
    profile: str,
    verbose: bool,
) -> StimtabConfig:
    """Load configuration with CLI options.

    Parameters
    ----------
    config_file : Path | None
        Path to configuration file (None to use profile defaults).
    profile : str
        Configuration profile name (default, dev, test).
    verbose : bool
        Whether to enable verbose output.

    Returns
    -------
    StimtabConfig
        Loaded configuration object.
    """
    # Lazy import to avoid circular import
    from stimtab.config import load_config  # noqa: PLC0415

    try:
        config = load_config(config_path=config_file, profile=profile)
    except FileNotFoundError:
        print_error(f"Configuration file not found: {config_file}", exit_code=1)
        raise  # For type checking
    except Exception as e:
        print_error(f"Failed to load configuration: {e}", exit_code=1)
        raise  # For type checking

    if verbose:
        console.print(f"[green]✓[/green] Loaded configuration from profile: {profile}")
        if config_file:
            console.print(f"[green]✓[/green] Applied overrides from: {config_file}")

    return config


def parse_assignments(values: Sequence[str], option: str) -> dict[str, str]:
    """Parse repeated ``key=value`` options into an ordered mapping.

    Parameters
    ----------
    values : Sequence[str]
        Raw option values.
    option : str
        Option name, for error messages.

    Returns
    -------
    dict[str, str]
        Parsed pairs in the order given.

    Raises
    ------
    click.BadParameter
        If a value has no ``=`` or an empty key.

    Examples
    --------
    >>> parse_assignments(["font_size=font-size"], "--style")
    {'font_size': 'font-size'}
    """
    result: dict[str, str] = {}
    for value in values:
        key, sep, rest = value.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(
                f"Expected KEY=VALUE, got '{value}'", param_hint=option
            )
        result[key.strip()] = rest.strip()
    return result


def print_error(message: str, exit_code: int = 1) -> None:
    """Print error message and exit.

    Parameters
    ----------
    message : str
        Error message to display.
    exit_code : int
        Exit code (default: 1). Pass 0 to not exit.
    """
    console.print(f"[red]✗ Error:[/red] {escape(message)}")
    if exit_code != 0:
        sys.exit(exit_code)


def print_success(message: str) -> None:
    """Print success message.

    Parameters
    ----------
    message : str
        Success message to display.
    """
    console.print(f"[green]✓ {escape(message)}[/green]")


def print_info(message: str) -> None:
    """Print info message.

    Parameters
    ----------
    message : str
        Info message to display.
    """
    console.print(f"[blue]ℹ Info:[/blue] {escape(message)}")
