"""UTC timestamp helper for lineup records."""

from __future__ import annotations

from datetime import UTC, datetime


def now_iso8601() -> datetime:
    """Get current UTC datetime with timezone information.

    Returns
    -------
    datetime
        Current UTC datetime with timezone information.

    Examples
    --------
    >>> dt = now_iso8601()
    >>> dt.tzinfo is not None
    True
    """
    return datetime.now(UTC)
