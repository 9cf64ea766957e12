"""Partitioning of an ordered participant sequence into numbered groups.

This module provides the deterministic half of schedule generation: slicing
an already shuffled participant sequence into consecutive groups, and
evaluating per-participant constraints against the result.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from lineup.constraints import UNCONSTRAINED, Predicate
from lineup.errors import ConfigurationError
from lineup.roster.models import Group, Participant

type ConstraintMap = Mapping[str, Predicate]


@dataclass(frozen=True)
class Violation:
    """A participant whose constraint rejected its group."""

    participant: Participant
    group_index: int


def validate_group_size(group_size: int) -> None:
    """Raise ConfigurationError unless group_size is a positive integer."""
    if isinstance(group_size, bool) or not isinstance(group_size, int):
        raise ConfigurationError(f"group_size must be an integer, got {group_size!r}")
    if group_size <= 0:
        raise ConfigurationError(f"group_size must be > 0, got {group_size}")


def partition(participants: Sequence[Participant], group_size: int) -> list[Group]:
    """Slice participants into consecutive groups of `group_size`.

    Groups are numbered from 1 in slice order. When the participant count is
    not a multiple of `group_size` the last group holds the remainder; when
    `group_size` exceeds the count there is exactly one group.

    Parameters
    ----------
    participants : Sequence[Participant]
        Participants in the order they should be sliced.
    group_size : int
        Maximum participants per group (must be > 0).

    Returns
    -------
    list[Group]
        Groups in presentation order.

    Raises
    ------
    ConfigurationError
        If group_size <= 0 or participants is empty.

    Examples
    --------
    >>> people = [Participant(name=n) for n in "abcde"]
    >>> [len(g) for g in partition(people, 2)]
    [2, 2, 1]
    >>> [g.index for g in partition(people, 2)]
    [1, 2, 3]
    """
    validate_group_size(group_size)
    if not participants:
        raise ConfigurationError("participants must be non-empty")

    chunks = [
        tuple(participants[start : start + group_size])
        for start in range(0, len(participants), group_size)
    ]
    return [
        Group(index=i, participants=chunk, group_count=len(chunks))
        for i, chunk in enumerate(chunks, start=1)
    ]


def find_violations(
    groups: Sequence[Group], constraints: ConstraintMap
) -> list[Violation]:
    """Evaluate every participant's constraint against its own group.

    Participants without an entry in `constraints` are unconstrained.
    Exceptions raised by a predicate propagate to the caller.

    Parameters
    ----------
    groups : Sequence[Group]
        Candidate assignment.
    constraints : Mapping[str, Predicate]
        Predicates keyed by participant name.

    Returns
    -------
    list[Violation]
        Every rejected placement; empty if the assignment is acceptable.
    """
    violations: list[Violation] = []
    for group in groups:
        for participant in group.participants:
            constraint = constraints.get(participant.name, UNCONSTRAINED)
            if not constraint(participant, group):
                violations.append(Violation(participant, group.index))
    return violations


def satisfies(groups: Sequence[Group], constraints: ConstraintMap) -> bool:
    """Return True if every participant's constraint holds for its group.

    Stops at the first rejected placement.
    """
    return all(
        constraints.get(participant.name, UNCONSTRAINED)(participant, group)
        for group in groups
        for participant in group.participants
    )
