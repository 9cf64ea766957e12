"""Main CLI entry point for lineup package.

This module provides the main CLI command group and registers the schedule
and configuration commands.
"""

from __future__ import annotations

from pathlib import Path

import click

from lineup import __version__
from lineup.cli.config import config
from lineup.cli.generate import check, generate
from lineup.config import list_profiles


@click.group()
@click.version_option(version=__version__, prog_name="lineup")
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
    type=click.Choice(list_profiles(), case_sensitive=False),
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
    help="Suppress all output except errors and the schedule",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: Path | None,
    profile: str,
    verbose: bool,
    quiet: bool,
) -> None:
    r"""Generate presentation orders for multi-round events.

    Assigns presenters to numbered rounds of equal size so that every
    presenter's placement constraint holds.

    \b
    Examples:
        # Show version
        $ lineup --version

        # Check a roster file
        $ lineup check roster.yaml

        # Generate an order with the default settings
        $ lineup generate roster.yaml

        # Use a custom config file
        $ lineup --config-file lineup.yaml generate roster.yaml

        # Show current configuration
        $ lineup config show
    """
    # store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file
    ctx.obj["profile"] = profile.lower()
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


cli.add_command(generate)
cli.add_command(check)
cli.add_command(config)


def main() -> None:
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
