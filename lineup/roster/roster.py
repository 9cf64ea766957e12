"""Roster model: the participants of one event and their constraints."""

from __future__ import annotations

from pydantic import Field, field_validator, model_validator

from lineup.constraints import Constraint, Predicate
from lineup.data.base import LineupBaseModel
from lineup.roster.models import Participant


class Roster(LineupBaseModel):
    """Participants of one event together with their placement constraints.

    Attributes
    ----------
    name : str | None
        Event name, used only for display.
    group_size : int | None
        Participants per group. If None, the configured default is used.
    participants : list[Participant]
        Participants to schedule (unique names).
    constraints : dict[str, Constraint]
        Declarative constraints keyed by participant name.

    Examples
    --------
    >>> from lineup.constraints import LastRoundConstraint
    >>> roster = Roster(
    ...     participants=[Participant(name="a"), Participant(name="b")],
    ...     constraints={"a": LastRoundConstraint()},
    ... )
    >>> sorted(roster.constraint_map())
    ['a']
    """

    name: str | None = Field(default=None, description="Event name")
    group_size: int | None = Field(default=None, gt=0, description="Group size")
    participants: list[Participant] = Field(
        ..., min_length=1, description="Participants to schedule"
    )
    constraints: dict[str, Constraint] = Field(
        default_factory=dict, description="Constraints keyed by participant name"
    )

    @field_validator("participants")
    @classmethod
    def validate_unique_names(cls, v: list[Participant]) -> list[Participant]:
        """Validate participant names are unique."""
        seen: set[str] = set()
        duplicates: list[str] = []
        for participant in v:
            if participant.name in seen:
                duplicates.append(participant.name)
            seen.add(participant.name)
        if duplicates:
            raise ValueError(f"duplicate participant names: {', '.join(duplicates)}")
        return v

    @model_validator(mode="after")
    def validate_constraint_names(self) -> Roster:
        """Validate every constraint is keyed by a roster participant."""
        unknown = sorted(set(self.constraints) - set(self.names))
        if unknown:
            raise ValueError(
                f"constraints reference unknown participants: {', '.join(unknown)}"
            )
        return self

    @property
    def names(self) -> list[str]:
        """Participant names in roster order."""
        return [participant.name for participant in self.participants]

    def constraint_map(self) -> dict[str, Predicate]:
        """Return the constraints as a name-to-predicate mapping."""
        return dict(self.constraints)
