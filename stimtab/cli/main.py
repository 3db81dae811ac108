"""Main CLI entry point for stimtab.

This module provides the main CLI command group and registers the stimulus
and configuration commands.
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from stimtab import __version__
from stimtab.cli.stimuli import markup, page, serialize, strings
from stimtab.cli.utils import (
    load_config_for_cli,
    print_error,
    print_info,
    print_success,
)
from stimtab.config import (
    StimtabConfig,
    configure_logging,
    list_profiles,
    save_yaml,
    to_yaml,
)


@click.group()
@click.version_option(version=__version__, prog_name="stimtab")
@click.option(
    "--config-file",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to configuration file (default: use profile defaults)",
)
@click.option(
    "--profile",
    "-p",
    type=click.Choice(["default", "dev", "test"], case_sensitive=False),
    default="default",
    help="Configuration profile to use",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Suppress all output except errors",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: Path | None,
    profile: str,
    verbose: bool,
    quiet: bool,
) -> None:
    r"""Build jsPsych stimuli from stimulus tables.

    Generates random string stimuli, adds styled HTML markup to stimulus
    tables, serializes them as timeline variables, and writes jsPsych pages.

    \b
    Examples:
        $ stimtab strings 20 strings.csv --set font_size=15pt --set phase=encode
        $ stimtab markup strings.csv styled.csv --style font_size=font-size
        $ stimtab serialize styled.csv stimuli.js --data string --data phase --script
        $ stimtab page styled.csv experiment/ --data string --block-column phase
    """
    ctx.ensure_object(dict)
    config = load_config_for_cli(config_file, profile.lower(), verbose)

    if verbose:
        config.logging.level = "DEBUG"
    elif quiet:
        config.logging.level = "ERROR"
    configure_logging(config.logging)

    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


@click.group(name="config")
def config_group() -> None:
    r"""Inspect configuration.

    \b
    Examples:
        $ stimtab config show
        $ stimtab --profile dev config show --format json
    """


@config_group.command()
@click.option(
    "--format",
    "-f",
    "format_type",
    type=click.Choice(["yaml", "json"], case_sensitive=False),
    default="yaml",
    help="Output format (default: yaml)",
)
@click.pass_context
def show(ctx: click.Context, format_type: str) -> None:
    """Show the effective configuration."""
    config: StimtabConfig = ctx.obj["config"]
    if format_type.lower() == "json":
        click.echo(json.dumps(config.model_dump(mode="json"), indent=2))
    else:
        click.echo(to_yaml(config, include_defaults=True))


@config_group.command()
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--all",
    "include_defaults",
    is_flag=True,
    default=False,
    help="Include values that match the defaults",
)
@click.pass_context
def export(ctx: click.Context, output: Path, include_defaults: bool) -> None:
    r"""Save the effective configuration to a YAML file.

    \b
    Examples:
        $ stimtab --profile dev config export stimtab.yaml
        $ stimtab config export full.yaml --all
    """
    config: StimtabConfig = ctx.obj["config"]
    try:
        save_yaml(config, output, include_defaults=include_defaults)
    except OSError as e:
        print_error(str(e))
        return
    print_success(f"Configuration exported to: {output}")


@config_group.command()
def profiles() -> None:
    r"""List available configuration profiles.

    \b
    Examples:
        $ stimtab config profiles
    """
    print_info("Available configuration profiles:")
    for profile_name in list_profiles():
        click.echo(f"  • {profile_name}")
    print_info("Use --profile to select a profile:")
    click.echo("  $ stimtab --profile dev config show")


cli.add_command(strings)
cli.add_command(markup)
cli.add_command(serialize)
cli.add_command(page)
cli.add_command(config_group)

__all__ = ["cli"]
