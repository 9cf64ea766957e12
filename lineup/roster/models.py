"""Participant, group and schedule data models.

A Participant is an immutable presenter record. A Group is one round of the
event: an ordered run of participants plus its 1-based position in the
schedule. A Schedule is an accepted assignment of every participant to
exactly one group.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from lineup.data.base import LineupBaseModel
from lineup.data.identifiers import generate_uuid
from lineup.data.timestamps import now_iso8601


class Participant(LineupBaseModel):
    """A presenter to be scheduled.

    Attributes
    ----------
    name : str
        Unique presenter name (whitespace stripped).
    affiliation : str | None
        Optional display annotation, e.g. a sponsoring company.

    Examples
    --------
    >>> Participant(name="sqm8", affiliation="Example Corp").display_name
    'sqm8(Example Corp)'
    >>> Participant(name="mzp").display_name
    'mzp'
    """

    name: str = Field(..., description="Unique participant name")
    affiliation: str | None = Field(default=None, description="Display annotation")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is non-empty.

        Parameters
        ----------
        v : str
            Name to validate.

        Returns
        -------
        str
            Validated name (whitespace stripped).

        Raises
        ------
        ValueError
            If name is empty or contains only whitespace.
        """
        if not v or not v.strip():
            raise ValueError("name must be non-empty")
        return v.strip()

    @property
    def display_name(self) -> str:
        """Name followed by the affiliation in parentheses, if there is one."""
        if self.affiliation is None:
            return self.name
        return f"{self.name}({self.affiliation})"


class Group(LineupBaseModel):
    """One round of the schedule.

    Attributes
    ----------
    index : int
        1-based position of this group in the schedule.
    participants : tuple[Participant, ...]
        Members in presentation order within the round.
    group_count : int
        Total number of groups in the same assignment.

    Examples
    --------
    >>> a, b = Participant(name="a"), Participant(name="b")
    >>> group = Group(index=2, participants=(a, b), group_count=2)
    >>> group.first.name
    'a'
    >>> group.position_of(b)
    2
    >>> group.is_last_group
    True
    """

    index: int = Field(..., ge=1, description="1-based group position")
    participants: tuple[Participant, ...] = Field(
        ..., min_length=1, description="Members in presentation order"
    )
    group_count: int = Field(..., ge=1, description="Groups in the assignment")

    @model_validator(mode="after")
    def validate_index(self) -> Group:
        """Validate index does not exceed group_count."""
        if self.index > self.group_count:
            raise ValueError(
                f"index ({self.index}) must be <= group_count ({self.group_count})"
            )
        return self

    def __len__(self) -> int:
        return len(self.participants)

    def __contains__(self, participant: object) -> bool:
        return participant in self.participants

    @property
    def first(self) -> Participant:
        """First participant to present in this group."""
        return self.participants[0]

    @property
    def last(self) -> Participant:
        """Last participant to present in this group."""
        return self.participants[-1]

    @property
    def is_last_group(self) -> bool:
        """Whether this is the final group of the schedule."""
        return self.index == self.group_count

    def position_of(self, participant: Participant) -> int:
        """Return the 1-based position of a participant within this group.

        Raises
        ------
        ValueError
            If the participant is not a member of this group.
        """
        try:
            return self.participants.index(participant) + 1
        except ValueError:
            raise ValueError(
                f"{participant.name!r} is not in group {self.index}"
            ) from None


class Schedule(LineupBaseModel):
    """An accepted assignment of participants to numbered groups.

    The validator enforces the structural invariants: groups are numbered
    1..G without gaps, every group but the last holds exactly `group_size`
    participants, and no participant appears twice.

    Attributes
    ----------
    id : UUID
        Time-ordered identifier of this schedule.
    created_at : datetime
        UTC time the schedule was generated.
    groups : tuple[Group, ...]
        Groups in presentation order.
    group_size : int
        Configured group size.
    attempts : int
        Number of candidates drawn, including the accepted one.
    """

    id: UUID = Field(default_factory=generate_uuid)
    created_at: datetime = Field(default_factory=now_iso8601)
    groups: tuple[Group, ...] = Field(..., min_length=1)
    group_size: int = Field(..., gt=0)
    attempts: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def validate_groups(self) -> Schedule:
        """Validate numbering, sizes and membership of the groups."""
        group_count = len(self.groups)
        indices = [group.index for group in self.groups]
        if indices != list(range(1, group_count + 1)):
            raise ValueError(f"group indices must be 1..{group_count}, got {indices}")

        for group in self.groups:
            if group.group_count != group_count:
                raise ValueError(
                    f"group {group.index} records group_count "
                    f"{group.group_count}, expected {group_count}"
                )
            if len(group) > self.group_size:
                raise ValueError(
                    f"group {group.index} has {len(group)} members, "
                    f"more than group_size {self.group_size}"
                )
            if not group.is_last_group and len(group) != self.group_size:
                raise ValueError(
                    f"group {group.index} has {len(group)} members, "
                    f"expected {self.group_size}"
                )

        names = [participant.name for participant in self.participants]
        if len(names) != len(set(names)):
            raise ValueError("a participant appears in more than one group")
        return self

    def __len__(self) -> int:
        return len(self.groups)

    @property
    def participants(self) -> list[Participant]:
        """All participants in presentation order."""
        return [
            participant for group in self.groups for participant in group.participants
        ]

    def group_of(self, name: str) -> Group:
        """Return the group a participant was assigned to.

        Raises
        ------
        KeyError
            If no participant with that name is scheduled.
        """
        for group in self.groups:
            for participant in group.participants:
                if participant.name == name:
                    return group
        raise KeyError(name)
