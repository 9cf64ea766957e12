"""Roster module: participants, groups, schedules and roster files.

- Participant: An immutable presenter record
- Group: One numbered round of presenters
- Schedule: An accepted assignment of every participant to one group
- Roster: Participants of an event with their placement constraints
"""

from lineup.roster.models import Group, Participant, Schedule
from lineup.roster.roster import Roster
from lineup.roster.loader import dump_roster, load_roster

__all__ = [
    "Participant",
    "Group",
    "Schedule",
    "Roster",
    "load_roster",
    "dump_roster",
]
