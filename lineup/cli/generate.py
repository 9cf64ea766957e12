"""Schedule commands for lineup CLI.

This module provides the `generate` command, which searches for a
presentation order satisfying a roster's constraints, and the `check`
command, which validates a roster file without generating anything.
"""

from __future__ import annotations

import json
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from lineup.cli.display import (
    create_constraint_table,
    create_schedule_table,
    create_summary_table,
    format_schedule,
    schedule_to_dict,
)
from lineup.cli.utils import (
    configure_logging,
    console,
    echo_lines,
    load_config_for_cli,
    print_error,
    print_info,
    print_success,
)
from lineup.errors import (
    ConfigurationError,
    ScheduleNotFoundError,
    ScheduleTimeoutError,
)
from lineup.roster import Roster, load_roster
from lineup.scheduling import ScheduleGenerator, run_with_timeout


def _load_roster_for_cli(roster_file: Path) -> Roster:
    """Load a roster, exiting with a readable message if it is invalid."""
    try:
        return load_roster(roster_file)
    except ValidationError as e:
        lines = ["Invalid roster file:"]
        for error in e.errors():
            location = " → ".join(str(loc) for loc in error["loc"])
            lines.append(f"  • {location}: {error['msg']}")
        print_error("\n".join(lines))
        raise  # for type checking
    except (FileNotFoundError, yaml.YAMLError) as e:
        print_error(str(e))
        raise  # for type checking


@click.command()
@click.argument(
    "roster_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--group-size",
    "-g",
    type=int,
    default=None,
    help="Participants per round (default: roster, then configuration)",
)
@click.option(
    "--timeout",
    "-t",
    type=float,
    default=None,
    help="Seconds to search before giving up (default: configuration)",
)
@click.option(
    "--max-attempts",
    type=int,
    default=None,
    help="Maximum candidate orders to try",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Random seed for a reproducible order",
)
@click.option(
    "--format",
    "-f",
    "format_type",
    type=click.Choice(["text", "json", "table"], case_sensitive=False),
    default="text",
    help="Output format (default: text)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file (default: stdout)",
)
@click.pass_context
def generate(
    ctx: click.Context,
    roster_file: Path,
    group_size: int | None,
    timeout: float | None,
    max_attempts: int | None,
    seed: int | None,
    format_type: str,
    output: Path | None,
) -> None:
    r"""Generate a presentation order for a roster.

    Shuffles the roster into rounds until every participant's constraint
    holds, or the timeout expires. Nothing is printed unless a complete
    order is found.

    \b
    Examples:
        $ lineup generate roster.yaml
        $ lineup generate roster.yaml --group-size 6 --timeout 10
        $ lineup generate roster.yaml --format json -o order.json

    \b
    Exit codes:
        0 - Order found
        1 - Invalid input, or no order found in time
    """
    verbose = ctx.obj.get("verbose", False)
    quiet = ctx.obj.get("quiet", False)

    cfg = load_config_for_cli(ctx.obj)
    configure_logging(cfg.logging, verbose=verbose, quiet=quiet)

    if output is not None and format_type == "table":
        print_error("--output requires text or json format")

    roster = _load_roster_for_cli(roster_file)

    if group_size is None:
        group_size = roster.group_size or cfg.schedule.group_size
    if timeout is None:
        timeout = cfg.schedule.timeout
    if max_attempts is None:
        max_attempts = cfg.schedule.max_attempts
    if seed is None:
        seed = cfg.schedule.random_seed

    try:
        schedule = run_with_timeout(
            roster.participants,
            roster.constraint_map(),
            group_size,
            timeout=timeout,
            max_attempts=max_attempts,
            generator=ScheduleGenerator(random_seed=seed),
        )
    except ConfigurationError as e:
        print_error(f"Invalid configuration: {e}")
        return
    except ScheduleTimeoutError as e:
        print_error(str(e))
        return
    except ScheduleNotFoundError as e:
        print_error(f"{e}. Are there constraints that cannot be satisfied together?")
        return

    if verbose:
        print_info(
            f"Found order for {len(roster.participants)} participants "
            f"in {len(schedule)} rounds after {schedule.attempts} attempt(s)"
        )

    if format_type == "table":
        console.print(create_schedule_table(schedule, title=roster.name))
    elif format_type == "json":
        echo_lines(
            json.dumps(schedule_to_dict(schedule), indent=2, ensure_ascii=False),
            output,
        )
    else:
        echo_lines(
            format_schedule(
                schedule, header=cfg.schedule.header, indent=cfg.schedule.indent
            ),
            output,
        )

    if output is not None and not quiet:
        print_success(f"Wrote schedule to: {output}")


@click.command()
@click.argument(
    "roster_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.pass_context
def check(ctx: click.Context, roster_file: Path) -> None:
    r"""Validate a roster file.

    Checks participant names and constraint declarations without
    generating an order.

    \b
    Examples:
        $ lineup check roster.yaml
    """
    roster = _load_roster_for_cli(roster_file)

    if ctx.obj.get("quiet", False):
        return

    group_size = roster.group_size
    summary = {
        "Event": roster.name or "-",
        "Participants": str(len(roster.participants)),
        "Constrained": str(len(roster.constraints)),
        "Group size": str(group_size) if group_size else "(configuration)",
    }
    if group_size:
        rounds = -(-len(roster.participants) // group_size)
        summary["Rounds"] = str(rounds)

    console.print(create_summary_table(summary, title="Roster"))
    if roster.constraints:
        console.print(create_constraint_table(roster))
    print_success(f"Roster is valid: {roster_file}")
