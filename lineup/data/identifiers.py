"""UUIDv7 identifiers for generated schedules.

Schedules are stamped with time-ordered UUIDv7 identifiers so that a set of
saved schedules sorts in the order they were generated.
"""

from __future__ import annotations

from uuid import UUID

import uuid_utils


def generate_uuid() -> UUID:
    """Generate a time-ordered UUIDv7.

    Returns
    -------
    UUID
        A newly generated UUIDv7 with embedded timestamp.

    Examples
    --------
    >>> uuid1 = generate_uuid()
    >>> uuid2 = generate_uuid()
    >>> uuid1 < uuid2
    True
    """
    # convert uuid_utils.UUID to standard Python UUID for Pydantic compatibility
    return UUID(str(uuid_utils.uuid7()))
