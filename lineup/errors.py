"""Exceptions raised by schedule generation."""

from __future__ import annotations


class LineupError(Exception):
    """Base exception for lineup errors."""

    pass


class ConfigurationError(LineupError, ValueError):
    """Exception raised when generation inputs are invalid.

    Raised synchronously, before any random draw, for a non-positive group
    size, an empty roster, duplicate participant names, or constraints keyed
    by a name that is not on the roster.

    Examples
    --------
    >>> try:
    ...     raise ConfigurationError("group_size must be > 0, got 0")
    ... except ValueError as e:
    ...     print(e)
    group_size must be > 0, got 0
    """

    pass


class ScheduleNotFoundError(LineupError):
    """Exception raised when the search budget runs out without a schedule.

    Parameters
    ----------
    attempts
        Number of candidate assignments drawn before giving up. None if the
        count is not known to the caller.
    reason
        Which budget ran out: "max_attempts", "deadline" or "cancelled".

    Attributes
    ----------
    attempts : int | None
        Number of candidates drawn.
    reason : str
        Exhausted budget.

    Examples
    --------
    >>> err = ScheduleNotFoundError(attempts=100, reason="max_attempts")
    >>> err.attempts
    100
    >>> str(err)
    'No schedule satisfying all constraints found (max_attempts, 100 attempts)'
    """

    def __init__(self, attempts: int | None = None, reason: str = "") -> None:
        self.attempts = attempts
        self.reason = reason
        super().__init__(self._message())

    def _message(self) -> str:
        details = [self.reason] if self.reason else []
        if self.attempts is not None:
            details.append(f"{self.attempts} attempts")
        suffix = f" ({', '.join(details)})" if details else ""
        return f"No schedule satisfying all constraints found{suffix}"


class ScheduleTimeoutError(ScheduleNotFoundError):
    """Exception raised when no schedule is found before the timeout fires.

    Distinct from the generic TimeoutError so callers can tell a search that
    did not converge apart from other timeouts. The message points at
    contradictory constraints as the likely cause.

    Parameters
    ----------
    timeout
        The time budget in seconds.
    attempts
        Number of candidates drawn, if known.

    Examples
    --------
    >>> err = ScheduleTimeoutError(timeout=5.0)
    >>> isinstance(err, ScheduleNotFoundError)
    True
    >>> err.reason
    'deadline'
    """

    def __init__(self, timeout: float, attempts: int | None = None) -> None:
        self.timeout = timeout
        super().__init__(attempts=attempts, reason="deadline")

    def _message(self) -> str:
        count = f" after {self.attempts} attempts" if self.attempts is not None else ""
        return (
            f"No presentation order satisfying all constraints was found within "
            f"{self.timeout:g}s{count}. Are there constraints that cannot be "
            f"satisfied at the same time?"
        )
