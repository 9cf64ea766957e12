"""Shared helpers for lineup commands.

Commands load configuration through `load_config_for_cli`, set up logging
with `configure_logging`, and report problems with `print_error`, which
ends the process with a non-zero status. Status messages use the shared
rich `console` on stdout; log records go to stderr.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from lineup.config import LineupConfig, LoggingConfig, load_config

console = Console(soft_wrap=True)


def load_config_for_cli(options: Mapping[str, Any]) -> LineupConfig:
    """Load configuration from the options given to the `lineup` group.

    Parameters
    ----------
    options : Mapping[str, Any]
        The click context object: `config_file`, `profile` and `verbose`.

    Returns
    -------
    LineupConfig
        Effective configuration. On any loading error the message is
        printed and the process exits with status 1.
    """
    config_file: Path | None = options.get("config_file")
    profile: str = options.get("profile", "default")

    try:
        config = load_config(config_path=config_file, profile=profile)
    except FileNotFoundError:
        print_error(f"Configuration file not found: {config_file}")
        raise  # for type checking
    except Exception as e:
        print_error(f"Failed to load configuration: {e}")
        raise  # for type checking

    if options.get("verbose", False):
        source = f"{config_file} over profile {profile}" if config_file else profile
        print_info(f"Using configuration: {source}")
    return config


def configure_logging(
    config: LoggingConfig, verbose: bool = False, quiet: bool = False
) -> None:
    """Attach handlers to the `lineup` logger according to configuration.

    Console records go to stderr through rich so they never mix with a
    schedule printed on stdout.

    Parameters
    ----------
    config : LoggingConfig
        Logging configuration.
    verbose : bool
        Lower the level to DEBUG.
    quiet : bool
        Raise the level to ERROR. Takes precedence over verbose.
    """
    logger = logging.getLogger("lineup")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    level = config.level
    if verbose:
        level = "DEBUG"
    if quiet:
        level = "ERROR"
    logger.setLevel(level)

    if config.console:
        console_handler = RichHandler(
            console=Console(stderr=True), show_path=False, markup=False
        )
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(console_handler)

    if config.file is not None:
        file_handler = logging.FileHandler(config.file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(config.format))
        logger.addHandler(file_handler)


def format_output(
    data: dict[str, Any] | list[Any],
    format_type: Literal["yaml", "json", "table"],
) -> str:
    """Format data for CLI output.

    Parameters
    ----------
    data : dict[str, Any] | list[Any]
        Data to format.
    format_type : {"yaml", "json", "table"}
        Output format type.

    Returns
    -------
    str
        Formatted output string.

    Raises
    ------
    ValueError
        If format_type is invalid or data cannot be formatted.
    """
    if format_type == "yaml":
        return yaml.dump(
            _convert_paths(data), default_flow_style=False, sort_keys=False
        )
    elif format_type == "json":
        return json.dumps(_convert_paths(data), indent=2, ensure_ascii=False)
    elif format_type == "table":
        if not isinstance(data, dict):
            raise ValueError("Table format requires dict data")
        return _dict_to_table(data)
    else:
        raise ValueError(f"Invalid format type: {format_type}")


def _convert_paths(obj: Any) -> Any:
    """Convert Path objects to strings, recursively."""
    if isinstance(obj, Path):
        return str(obj)
    if isinstance(obj, dict):
        return {str(k): _convert_paths(v) for k, v in obj.items()}
    if isinstance(obj, list | tuple):
        return [_convert_paths(item) for item in obj]
    return obj


def _dict_to_table(data: dict[str, Any], title: str | None = None) -> str:
    """Render a (possibly nested) dictionary as a two-column rich table."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")

    for key, value in _flatten(data):
        table.add_row(key, str(value))

    capture_console = Console(width=100)
    with capture_console.capture() as capture:
        capture_console.print(table)
    return capture.get()


def _flatten(data: dict[str, Any], prefix: str = "") -> list[tuple[str, Any]]:
    rows: list[tuple[str, Any]] = []
    for key, value in data.items():
        path = f"{prefix}{key}"
        if isinstance(value, dict):
            rows.extend(_flatten(value, prefix=f"{path}."))
        else:
            rows.append((path, value))
    return rows


def get_nested_value(data: dict[str, Any], key_path: str) -> Any:
    """Get nested dictionary value using dot notation.

    Parameters
    ----------
    data : dict[str, Any]
        Dictionary to search.
    key_path : str
        Dot-separated key path (e.g., "schedule.timeout").

    Returns
    -------
    Any
        Value at the key path.

    Raises
    ------
    KeyError
        If key path doesn't exist.

    Examples
    --------
    >>> get_nested_value({"schedule": {"timeout": 5.0}}, "schedule.timeout")
    5.0
    """
    current: Any = data
    for key in key_path.split("."):
        if not isinstance(current, dict) or key not in current:
            raise KeyError(key_path)
        current = current[key]
    return current


def print_error(message: str, exit_code: int = 1) -> None:
    """Report an error; exit with `exit_code` unless it is 0."""
    console.print(f"[red]✗ Error:[/red] {escape(message)}", highlight=False)
    if exit_code != 0:
        sys.exit(exit_code)


def print_success(message: str) -> None:
    console.print(f"[green]✓ {escape(message)}[/green]")


def print_info(message: str) -> None:
    console.print(f"[blue]ℹ[/blue] {escape(message)}")


def echo_lines(text: str, output: Path | None = None) -> None:
    """Write text to a file, or to stdout if no file is given."""
    if output is None:
        click.echo(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
