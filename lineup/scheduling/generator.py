"""Rejection-sampling schedule generator.

This module provides the ScheduleGenerator class, which searches for a
schedule satisfying every participant's constraint by drawing a uniformly
random permutation, partitioning it into groups, and accepting the first
candidate whose placements all pass. Rejected candidates are discarded whole;
nothing carries over between attempts.

The search itself has no natural end when constraints are contradictory, so
every call can be bounded by an attempt cap, a monotonic deadline, and a
cancellation event. All three are checked once per attempt.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Mapping, Sequence

import numpy as np

from lineup.constraints import Predicate
from lineup.errors import ConfigurationError, ScheduleNotFoundError
from lineup.roster.models import Participant, Schedule
from lineup.scheduling.partition import (
    ConstraintMap,
    find_violations,
    partition,
    satisfies,
    validate_group_size,
)

logger = logging.getLogger(__name__)

# attempts between progress messages at DEBUG level
_PROGRESS_INTERVAL = 10_000


def check_inputs(
    participants: Sequence[Participant],
    constraints: Mapping[str, Predicate],
    group_size: int,
    max_attempts: int | None = None,
) -> None:
    """Validate generation inputs before any random draw.

    Raises
    ------
    ConfigurationError
        If group_size <= 0, participants is empty or has duplicate names,
        or max_attempts < 1.
    """
    validate_group_size(group_size)
    if not participants:
        raise ConfigurationError("participants must be non-empty")

    names = [participant.name for participant in participants]
    if len(names) != len(set(names)):
        raise ConfigurationError("participant names must be unique")

    if max_attempts is not None and max_attempts < 1:
        raise ConfigurationError(f"max_attempts must be >= 1, got {max_attempts}")


class ScheduleGenerator:
    """Generates schedules by constraint-checked rejection sampling.

    Each generator owns its own random source. Without a seed, NumPy seeds
    the generator from the operating system's entropy pool, so shuffles are
    not reproducible across runs or processes.

    Parameters
    ----------
    random_seed : int | None, default=None
        Random seed for reproducibility.
    rng : np.random.Generator | None, default=None
        Random generator to draw permutations from. Overrides random_seed.

    Attributes
    ----------
    random_seed : int | None
        Random seed for reproducibility.

    Examples
    --------
    >>> from lineup.constraints import LastRoundConstraint
    >>> people = [Participant(name=f"p{i}") for i in range(10)]
    >>> generator = ScheduleGenerator(random_seed=42)
    >>> schedule = generator.generate(people, {"p0": LastRoundConstraint()}, 5)
    >>> schedule.group_of("p0").index
    2
    """

    def __init__(
        self, random_seed: int | None = None, rng: np.random.Generator | None = None
    ) -> None:
        self.random_seed = random_seed
        self._rng = rng if rng is not None else np.random.default_rng(random_seed)

    def generate(
        self,
        participants: Sequence[Participant],
        constraints: ConstraintMap | None = None,
        group_size: int = 5,
        *,
        max_attempts: int | None = None,
        deadline: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> Schedule:
        """Search for a schedule satisfying every participant's constraint.

        Parameters
        ----------
        participants : Sequence[Participant]
            Participants to schedule (unique names).
        constraints : Mapping[str, Predicate] | None, default=None
            Predicates keyed by participant name. Unlisted participants are
            unconstrained; entries for names not in participants are ignored.
        group_size : int, default=5
            Participants per group (must be > 0).
        max_attempts : int | None, default=None
            Maximum number of candidates to draw. None means unbounded.
        deadline : float | None, default=None
            `time.monotonic()` value after which the search stops.
        cancel_event : threading.Event | None, default=None
            When set, the search stops before its next attempt.

        Returns
        -------
        Schedule
            The first accepted assignment.

        Raises
        ------
        ConfigurationError
            If the inputs are invalid. Raised before any random draw.
        ScheduleNotFoundError
            If a budget runs out before a schedule is accepted.
        """
        constraints = constraints or {}
        check_inputs(participants, constraints, group_size, max_attempts)

        unknown = sorted(set(constraints) - {p.name for p in participants})
        if unknown:
            logger.warning(
                f"Ignoring constraints for unknown participants: {', '.join(unknown)}"
            )

        pool = list(participants)
        attempts = 0
        while True:
            self._check_budget(attempts, max_attempts, deadline, cancel_event)
            attempts += 1

            order = self._rng.permutation(len(pool))
            groups = partition([pool[i] for i in order], group_size)

            if satisfies(groups, constraints):
                logger.info(
                    f"Accepted schedule of {len(groups)} groups "
                    f"after {attempts} attempt(s)"
                )
                return Schedule(
                    groups=tuple(groups), group_size=group_size, attempts=attempts
                )

            if attempts % _PROGRESS_INTERVAL != 0:
                continue
            if logger.isEnabledFor(logging.DEBUG):
                rejected = ", ".join(
                    f"{v.participant.name}@{v.group_index}"
                    for v in find_violations(groups, constraints)
                )
                logger.debug(f"{attempts} attempts rejected so far; last: {rejected}")

    def _check_budget(
        self,
        attempts: int,
        max_attempts: int | None,
        deadline: float | None,
        cancel_event: threading.Event | None,
    ) -> None:
        """Raise ScheduleNotFoundError if any search budget is exhausted."""
        if cancel_event is not None and cancel_event.is_set():
            raise ScheduleNotFoundError(attempts=attempts, reason="cancelled")
        if deadline is not None and time.monotonic() >= deadline:
            raise ScheduleNotFoundError(attempts=attempts, reason="deadline")
        if max_attempts is not None and attempts >= max_attempts:
            raise ScheduleNotFoundError(attempts=attempts, reason="max_attempts")


def generate(
    participants: Sequence[Participant],
    constraints: ConstraintMap | None = None,
    group_size: int = 5,
    *,
    random_seed: int | None = None,
    max_attempts: int | None = None,
    deadline: float | None = None,
) -> Schedule:
    """Generate a schedule with a fresh ScheduleGenerator.

    See ScheduleGenerator.generate for parameters and errors.
    """
    generator = ScheduleGenerator(random_seed=random_seed)
    return generator.generate(
        participants,
        constraints,
        group_size,
        max_attempts=max_attempts,
        deadline=deadline,
    )
