"""Base Pydantic model for all lineup objects.

This module provides LineupBaseModel, the Pydantic v2 model that lineup data
models and constraint declarations inherit from. Models are immutable: a
participant never changes during generation, and groups are created fresh on
every sampling attempt rather than edited in place.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class LineupBaseModel(BaseModel):
    """Base Pydantic model for all lineup objects.

    Examples
    --------
    >>> class Speaker(LineupBaseModel):
    ...     name: str
    >>> speaker = Speaker(name="mzp")
    >>> speaker.name
    'mzp'
    >>> speaker.name = "other"  # doctest: +SKIP
    Traceback (most recent call last):
    ...
    ValidationError: ...
    """

    model_config = ConfigDict(
        extra="forbid",  # disallow extra fields not defined in model
        frozen=True,
    )
