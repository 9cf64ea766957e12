"""Schedule generation: partitioning, rejection sampling and timeouts."""

from lineup.scheduling.generator import ScheduleGenerator, check_inputs, generate
from lineup.scheduling.partition import (
    ConstraintMap,
    Violation,
    find_violations,
    partition,
    satisfies,
    validate_group_size,
)
from lineup.scheduling.runner import DEFAULT_TIMEOUT, generate_async, run_with_timeout

__all__ = [
    "ScheduleGenerator",
    "generate",
    "check_inputs",
    "generate_async",
    "run_with_timeout",
    "DEFAULT_TIMEOUT",
    "partition",
    "find_violations",
    "satisfies",
    "validate_group_size",
    "Violation",
    "ConstraintMap",
]
