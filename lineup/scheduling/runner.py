"""Time-bounded asynchronous schedule generation.

The sampler is CPU-bound and has no suspension points, so it runs in the
event loop's default executor. The awaiting side applies the timeout; the
worker receives the same deadline plus a cancellation event, so an abandoned
search stops at its next attempt boundary instead of running on in the
background.
"""

from __future__ import annotations

import asyncio
import functools
import logging
import threading
import time
from collections.abc import Sequence

from lineup.errors import ScheduleNotFoundError, ScheduleTimeoutError
from lineup.roster.models import Participant, Schedule
from lineup.scheduling.generator import ScheduleGenerator, check_inputs
from lineup.scheduling.partition import ConstraintMap

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0


async def generate_async(
    participants: Sequence[Participant],
    constraints: ConstraintMap | None = None,
    group_size: int = 5,
    *,
    timeout: float | None = DEFAULT_TIMEOUT,
    max_attempts: int | None = None,
    generator: ScheduleGenerator | None = None,
) -> Schedule:
    """Generate a schedule in the default executor under a timeout.

    Parameters
    ----------
    participants : Sequence[Participant]
        Participants to schedule.
    constraints : Mapping[str, Predicate] | None, default=None
        Predicates keyed by participant name.
    group_size : int, default=5
        Participants per group (must be > 0).
    timeout : float | None, default=5.0
        Seconds to wait for a schedule. None waits indefinitely.
    max_attempts : int | None, default=None
        Maximum number of candidates to draw.
    generator : ScheduleGenerator | None, default=None
        Generator to use; a fresh one is created if None.

    Returns
    -------
    Schedule
        The accepted schedule.

    Raises
    ------
    ConfigurationError
        If the inputs are invalid. Raised before any work is scheduled.
    ScheduleTimeoutError
        If no schedule was accepted within `timeout` seconds.
    ScheduleNotFoundError
        If `max_attempts` candidates were all rejected.
    """
    constraints = constraints or {}
    check_inputs(participants, constraints, group_size, max_attempts)
    generator = generator if generator is not None else ScheduleGenerator()

    cancel_event = threading.Event()
    deadline = None if timeout is None else time.monotonic() + timeout
    loop = asyncio.get_running_loop()
    future = loop.run_in_executor(
        None,
        functools.partial(
            generator.generate,
            participants,
            constraints,
            group_size,
            max_attempts=max_attempts,
            deadline=deadline,
            cancel_event=cancel_event,
        ),
    )

    try:
        return await asyncio.wait_for(future, timeout=timeout)
    except TimeoutError as e:
        cancel_event.set()
        raise _timed_out(timeout, attempts=None) from e
    except ScheduleNotFoundError as e:
        if e.reason != "deadline":
            raise
        raise _timed_out(timeout, attempts=e.attempts) from e
    finally:
        cancel_event.set()


def _timed_out(timeout: float | None, attempts: int | None) -> ScheduleTimeoutError:
    error = ScheduleTimeoutError(timeout=timeout or 0.0, attempts=attempts)
    logger.warning(str(error))
    return error


def run_with_timeout(
    participants: Sequence[Participant],
    constraints: ConstraintMap | None = None,
    group_size: int = 5,
    *,
    timeout: float | None = DEFAULT_TIMEOUT,
    max_attempts: int | None = None,
    generator: ScheduleGenerator | None = None,
) -> Schedule:
    """Run generate_async to completion from synchronous code.

    Returns only after the worker thread has stopped.
    """
    return asyncio.run(
        generate_async(
            participants,
            constraints,
            group_size,
            timeout=timeout,
            max_attempts=max_attempts,
            generator=generator,
        )
    )
