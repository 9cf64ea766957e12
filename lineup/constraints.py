"""Placement constraints for scheduled participants.

A constraint is a predicate over (participant, group): it is called with a
participant and the group that participant landed in, and returns whether the
placement is acceptable. Any callable with that signature works; the models
in this module are the declarative forms that can be written in a roster file:

- always: No restriction (the default for unconstrained participants)
- round: Group index must be one of the listed rounds
- round_range: Group index within an inclusive range
- last_round: Participant must be in the final group
- position: Participant's position inside its group (optionally per round)
- all_of / any_of / not: Composition of other constraints

All constraints inherit from LineupBaseModel and use Pydantic discriminated
unions for type-safe deserialization.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Literal, Protocol

from pydantic import Field, field_validator, model_validator

from lineup.data.base import LineupBaseModel

if TYPE_CHECKING:
    from lineup.roster.models import Group, Participant

ConstraintType = Literal[
    "always",
    "round",
    "round_range",
    "last_round",
    "position",
    "all_of",
    "any_of",
    "not",
]


class Predicate(Protocol):
    """Callable deciding whether a participant may sit in a group."""

    def __call__(self, participant: Participant, group: Group) -> bool: ...


def _validate_rounds(v: list[int]) -> list[int]:
    if any(r < 1 for r in v):
        raise ValueError(f"rounds must be >= 1, got {v}")
    return v


class Unconstrained(LineupBaseModel):
    """Constraint that accepts every placement.

    Examples
    --------
    >>> UNCONSTRAINED.constraint_type
    'always'
    """

    constraint_type: Literal["always"] = "always"

    def __call__(self, participant: Participant, group: Group) -> bool:
        return True


class RoundConstraint(LineupBaseModel):
    """Constraint requiring the participant's group to be one of `rounds`.

    Attributes
    ----------
    constraint_type : Literal["round"]
        Discriminator field for constraint type (always "round").
    rounds : list[int]
        Acceptable 1-based group indices.

    Examples
    --------
    >>> # present in the sixth (last of six) round
    >>> constraint = RoundConstraint(rounds=[6])
    >>> constraint.rounds
    [6]
    """

    constraint_type: Literal["round"] = "round"
    rounds: list[int] = Field(..., min_length=1, description="Allowed rounds")

    @field_validator("rounds")
    @classmethod
    def validate_rounds(cls, v: list[int]) -> list[int]:
        """Validate all rounds are 1-based."""
        return _validate_rounds(v)

    def __call__(self, participant: Participant, group: Group) -> bool:
        return group.index in self.rounds


class RoundRangeConstraint(LineupBaseModel):
    """Constraint on an inclusive range of group indices.

    Attributes
    ----------
    constraint_type : Literal["round_range"]
        Discriminator field for constraint type.
    min_round : int | None
        Earliest acceptable round.
    max_round : int | None
        Latest acceptable round.

    Examples
    --------
    >>> # not before round 3
    >>> constraint = RoundRangeConstraint(min_round=3)
    >>> constraint.max_round is None
    True
    """

    constraint_type: Literal["round_range"] = "round_range"
    min_round: int | None = Field(default=None, ge=1, description="Earliest round")
    max_round: int | None = Field(default=None, ge=1, description="Latest round")

    @model_validator(mode="after")
    def validate_bounds(self) -> RoundRangeConstraint:
        """Validate at least one bound is set and bounds are ordered."""
        if self.min_round is None and self.max_round is None:
            raise ValueError("min_round or max_round must be set")
        if (
            self.min_round is not None
            and self.max_round is not None
            and self.min_round > self.max_round
        ):
            raise ValueError("min_round must be <= max_round")
        return self

    def __call__(self, participant: Participant, group: Group) -> bool:
        if self.min_round is not None and group.index < self.min_round:
            return False
        if self.max_round is not None and group.index > self.max_round:
            return False
        return True


class LastRoundConstraint(LineupBaseModel):
    """Constraint requiring the participant to be in the final group."""

    constraint_type: Literal["last_round"] = "last_round"

    def __call__(self, participant: Participant, group: Group) -> bool:
        return group.is_last_group


class PositionConstraint(LineupBaseModel):
    """Constraint on the participant's position within its group.

    Attributes
    ----------
    constraint_type : Literal["position"]
        Discriminator field for constraint type.
    position : int | Literal["first", "last"]
        Required 1-based position, or "first"/"last".
    rounds : list[int] | None
        If set, the group must also be one of these rounds.

    Examples
    --------
    >>> # open the third round
    >>> constraint = PositionConstraint(position="first", rounds=[3])
    >>> constraint.position
    'first'
    """

    constraint_type: Literal["position"] = "position"
    position: Literal["first", "last"] | int = Field(
        ..., description="Required position within the group"
    )
    rounds: list[int] | None = Field(default=None, description="Allowed rounds")

    @field_validator("position")
    @classmethod
    def validate_position(cls, v: int | str) -> int | str:
        """Validate numeric positions are 1-based."""
        if isinstance(v, int) and v < 1:
            raise ValueError(f"position must be >= 1, got {v}")
        return v

    @field_validator("rounds")
    @classmethod
    def validate_rounds(cls, v: list[int] | None) -> list[int] | None:
        """Validate all rounds are 1-based."""
        return None if v is None else _validate_rounds(v)

    def __call__(self, participant: Participant, group: Group) -> bool:
        if self.rounds is not None and group.index not in self.rounds:
            return False
        position = group.position_of(participant)
        if self.position == "first":
            return position == 1
        if self.position == "last":
            return position == len(group)
        return position == self.position


class AllOfConstraint(LineupBaseModel):
    """Constraint satisfied when every nested constraint is satisfied."""

    constraint_type: Literal["all_of"] = "all_of"
    constraints: list[Constraint] = Field(..., min_length=1)

    def __call__(self, participant: Participant, group: Group) -> bool:
        return all(c(participant, group) for c in self.constraints)


class AnyOfConstraint(LineupBaseModel):
    """Constraint satisfied when at least one nested constraint is satisfied."""

    constraint_type: Literal["any_of"] = "any_of"
    constraints: list[Constraint] = Field(..., min_length=1)

    def __call__(self, participant: Participant, group: Group) -> bool:
        return any(c(participant, group) for c in self.constraints)


class NotConstraint(LineupBaseModel):
    """Constraint satisfied when the nested constraint is not.

    Examples
    --------
    >>> # anything but the first round
    >>> constraint = NotConstraint(constraint=RoundConstraint(rounds=[1]))
    >>> constraint.constraint.rounds
    [1]
    """

    constraint_type: Literal["not"] = "not"
    constraint: Constraint

    def __call__(self, participant: Participant, group: Group) -> bool:
        return not self.constraint(participant, group)


# Discriminated union for all declarative constraints
Constraint = Annotated[
    Unconstrained
    | RoundConstraint
    | RoundRangeConstraint
    | LastRoundConstraint
    | PositionConstraint
    | AllOfConstraint
    | AnyOfConstraint
    | NotConstraint,
    Field(discriminator="constraint_type"),
]

AllOfConstraint.model_rebuild()
AnyOfConstraint.model_rebuild()
NotConstraint.model_rebuild()

UNCONSTRAINED = Unconstrained()
"""Default predicate for participants without a registered constraint."""
