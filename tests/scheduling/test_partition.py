"""Tests for partitioning and constraint evaluation."""

from __future__ import annotations

import pytest

from lineup.constraints import LastRoundConstraint, RoundConstraint
from lineup.errors import ConfigurationError
from lineup.roster.models import Group, Participant
from lineup.scheduling.partition import (
    Violation,
    find_violations,
    partition,
    satisfies,
    validate_group_size,
)


class TestPartition:
    """Tests for partition."""

    def test_exact_multiple(self, participants: list[Participant]) -> None:
        """Test equal groups when the count divides evenly."""
        groups = partition(participants, 5)
        assert [len(g) for g in groups] == [5, 5]
        assert [g.index for g in groups] == [1, 2]
        assert all(g.group_count == 2 for g in groups)

    def test_remainder_in_last_group(self, participants: list[Participant]) -> None:
        """Test the last group holds the remainder."""
        groups = partition(participants, 4)
        assert [len(g) for g in groups] == [4, 4, 2]
        assert groups[-1].is_last_group

    def test_preserves_order(self, participants: list[Participant]) -> None:
        """Test slicing keeps the input order."""
        groups = partition(participants, 3)
        flattened = [p for g in groups for p in g.participants]
        assert flattened == participants

    def test_group_size_larger_than_count(
        self, participants: list[Participant]
    ) -> None:
        """Test a single group when group_size exceeds the count."""
        groups = partition(participants, 50)
        assert len(groups) == 1
        assert len(groups[0]) == 10
        assert groups[0].is_last_group

    def test_group_size_one(self, participants: list[Participant]) -> None:
        """Test singleton groups."""
        groups = partition(participants, 1)
        assert len(groups) == 10
        assert [g.index for g in groups] == list(range(1, 11))

    @pytest.mark.parametrize("group_size", [0, -1])
    def test_non_positive_group_size(
        self, participants: list[Participant], group_size: int
    ) -> None:
        """Test non-positive group sizes are rejected."""
        with pytest.raises(ConfigurationError, match="group_size must be > 0"):
            partition(participants, group_size)

    def test_empty_participants(self) -> None:
        """Test an empty sequence is rejected."""
        with pytest.raises(ConfigurationError, match="non-empty"):
            partition([], 3)


class TestValidateGroupSize:
    """Tests for validate_group_size."""

    def test_accepts_positive(self) -> None:
        """Test positive integers pass."""
        validate_group_size(5)

    @pytest.mark.parametrize("group_size", [True, 2.5, "5"])
    def test_rejects_non_integers(self, group_size: object) -> None:
        """Test non-integer values are rejected."""
        with pytest.raises(ConfigurationError, match="must be an integer"):
            validate_group_size(group_size)  # type: ignore[arg-type]

    def test_is_value_error(self) -> None:
        """Test ConfigurationError is catchable as ValueError."""
        with pytest.raises(ValueError):
            validate_group_size(0)


class TestFindViolations:
    """Tests for find_violations and satisfies."""

    def test_unconstrained_is_satisfied(self, participants: list[Participant]) -> None:
        """Test participants without constraints never violate."""
        groups = partition(participants, 3)
        assert find_violations(groups, {}) == []
        assert satisfies(groups, {})

    def test_reports_violations(self, participants: list[Participant]) -> None:
        """Test violated placements are listed with their group index."""
        groups = partition(participants, 5)
        constraints = {"p0": LastRoundConstraint(), "p9": LastRoundConstraint()}
        violations = find_violations(groups, constraints)
        assert violations == [Violation(participants[0], 1)]
        assert not satisfies(groups, constraints)

    def test_callable_constraints(self, participants: list[Participant]) -> None:
        """Test plain callables work as constraints."""
        groups = partition(participants, 5)
        seen: list[tuple[str, int]] = []

        def record(participant: Participant, group: Group) -> bool:
            seen.append((participant.name, group.index))
            return True

        assert satisfies(groups, {"p7": record})
        assert seen == [("p7", 2)]

    def test_satisfies_short_circuits(self, participants: list[Participant]) -> None:
        """Test evaluation stops at the first rejection."""
        groups = partition(participants, 5)
        calls: list[str] = []

        def reject(participant: Participant, group: Group) -> bool:
            calls.append(participant.name)
            return False

        assert not satisfies(groups, {"p0": reject, "p1": reject})
        assert calls == ["p0"]

    def test_predicate_exception_propagates(
        self, participants: list[Participant]
    ) -> None:
        """Test exceptions from predicates are not swallowed."""
        groups = partition(participants, 5)

        def broken(participant: Participant, group: Group) -> bool:
            raise RuntimeError("broken predicate")

        with pytest.raises(RuntimeError, match="broken predicate"):
            find_violations(groups, {"p3": broken})

    def test_round_constraint(self, participants: list[Participant]) -> None:
        """Test a declarative constraint through find_violations."""
        groups = partition(participants, 5)
        assert satisfies(groups, {"p6": RoundConstraint(rounds=[2])})
        assert not satisfies(groups, {"p6": RoundConstraint(rounds=[1])})
