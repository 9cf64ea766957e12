"""Schedule rendering for CLI output.

Plain text is the primary format: one header line per group followed by one
indented line per participant, e.g.::

    round 1
        sqm8(Example Corp)
        mzp

JSON and rich tables are available for other consumers.
"""

from __future__ import annotations

from typing import Any

from rich.table import Table

from lineup.roster.models import Schedule
from lineup.roster.roster import Roster


def format_schedule(
    schedule: Schedule, header: str = "round {index}", indent: int = 4
) -> str:
    """Render a schedule as plain text.

    Lines are joined with "\\n"; text-mode streams translate that to the
    platform's line separator when written.

    Parameters
    ----------
    schedule : Schedule
        Schedule to render.
    header : str
        Header template; `{index}` is replaced by the group number.
    indent : int
        Spaces before each participant line.

    Returns
    -------
    str
        Rendered schedule without a trailing newline.
    """
    pad = " " * indent
    lines: list[str] = []
    for group in schedule.groups:
        lines.append(header.format(index=group.index))
        lines.extend(f"{pad}{p.display_name}" for p in group.participants)
    return "\n".join(lines)


def schedule_to_dict(schedule: Schedule) -> dict[str, Any]:
    """Convert a schedule to a JSON-compatible dictionary."""
    return {
        "id": str(schedule.id),
        "created_at": schedule.created_at.isoformat(),
        "group_size": schedule.group_size,
        "attempts": schedule.attempts,
        "groups": [
            {
                "index": group.index,
                "participants": [
                    p.model_dump(mode="json") for p in group.participants
                ],
            }
            for group in schedule.groups
        ],
    }


def create_schedule_table(schedule: Schedule, title: str | None = None) -> Table:
    """Create a rich table with one row per participant."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Round", justify="right", style="cyan")
    table.add_column("#", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Affiliation")

    for group in schedule.groups:
        for position, participant in enumerate(group.participants, start=1):
            table.add_row(
                str(group.index) if position == 1 else "",
                str(position),
                participant.name,
                participant.affiliation or "",
            )
        if not group.is_last_group:
            table.add_section()
    return table


def create_summary_table(
    data: dict[str, str],
    title: str | None = None,
    show_header: bool = False,
) -> Table:
    """Create formatted summary table.

    Parameters
    ----------
    data : dict[str, str]
        Dictionary mapping metric names to values.
    title : str | None, optional
        Table title. Default is None.
    show_header : bool, optional
        Whether to show table header. Default is False.

    Returns
    -------
    Table
        Two-column rich table.
    """
    table = Table(title=title, show_header=show_header, box=None)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    for key, value in data.items():
        table.add_row(key, value)
    return table


def create_constraint_table(roster: Roster) -> Table:
    """Create a table listing each constrained participant."""
    table = Table(title="Constraints", show_header=True, header_style="bold magenta")
    table.add_column("Participant", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Parameters")

    for name, constraint in roster.constraints.items():
        params = constraint.model_dump(mode="json", exclude={"constraint_type"})
        table.add_row(name, constraint.constraint_type, _format_params(params))
    return table


def _format_params(params: dict[str, Any]) -> str:
    return ", ".join(f"{k}={v}" for k, v in params.items() if v is not None)
