"""Configuration commands for lineup CLI.

This module provides commands for viewing and validating configuration.
"""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError

from lineup.cli.utils import (
    format_output,
    get_nested_value,
    load_config_for_cli,
    print_error,
    print_info,
    print_success,
)
from lineup.config import list_profiles, load_config, validate_config


@click.group()
def config() -> None:
    r"""Manage configuration commands.

    \b
    Examples:
        $ lineup config show
        $ lineup config show --format json
        $ lineup config show --key schedule.timeout
        $ lineup config validate
        $ lineup config profiles
    """


@config.command()
@click.option(
    "--format",
    "-f",
    "format_type",
    type=click.Choice(["yaml", "json", "table"], case_sensitive=False),
    default="yaml",
    help="Output format (default: yaml)",
)
@click.option(
    "--key",
    "-k",
    type=str,
    default=None,
    help="Show specific config value (e.g., schedule.timeout)",
)
@click.pass_context
def show(ctx: click.Context, format_type: str, key: str | None) -> None:
    r"""Display current configuration.

    Shows the merged configuration from profile, file, and environment variables.

    \b
    Examples:
        $ lineup config show
        $ lineup config show --format json
        $ lineup config show --key schedule.group_size
    """
    cfg = load_config_for_cli(ctx.obj)
    config_dict = cfg.model_dump(mode="json")

    if key:
        try:
            click.echo(get_nested_value(config_dict, key))
        except KeyError as e:
            print_error(f"Configuration key not found: {e}")
        return

    try:
        click.echo(format_output(config_dict, format_type))  # type: ignore[arg-type]
    except ValueError as e:
        print_error(f"Failed to format output: {e}")


@config.command()
@click.option(
    "--config-file",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file to validate",
)
@click.pass_context
def validate(ctx: click.Context, config_file: Path | None) -> None:
    r"""Validate configuration file.

    Checks YAML syntax and validates against the lineup configuration schema.

    \b
    Examples:
        $ lineup config validate --config-file lineup.yaml

    \b
    Exit codes:
        0 - Configuration is valid
        1 - Configuration is invalid
    """
    # use CLI context config-file if not explicitly provided
    if config_file is None:
        config_file = ctx.obj.get("config_file")

    if config_file is None:
        print_error("No configuration file specified. Use --config-file or -c.")
        return

    try:
        cfg = load_config(
            config_path=config_file, profile=ctx.obj.get("profile", "default")
        )
    except ValidationError as e:
        lines = ["Configuration validation failed:"]
        for error in e.errors():
            location = " → ".join(str(loc) for loc in error["loc"])
            lines.append(f"  • {location}: {error['msg']}")
        print_error("\n".join(lines))
        return
    except Exception as e:
        print_error(f"Failed to validate configuration: {e}")
        return

    errors = validate_config(cfg)
    if errors:
        lines = ["Configuration validation failed:"] + [f"  • {e}" for e in errors]
        print_error("\n".join(lines))
        return

    print_success(f"Configuration is valid: {config_file}")


@config.command()
def profiles() -> None:
    r"""List available configuration profiles.

    \b
    Examples:
        $ lineup config profiles
    """
    print_info("Available configuration profiles:")
    click.echo()
    for profile_name in list_profiles():
        click.echo(f"  • {profile_name}")
    click.echo()
    print_info("Use --profile to select a profile:")
    click.echo("  $ lineup --profile dev config show")
