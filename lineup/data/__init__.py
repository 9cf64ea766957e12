"""Base models and identifier/timestamp helpers shared by lineup models."""

from __future__ import annotations

from lineup.data.base import LineupBaseModel
from lineup.data.identifiers import generate_uuid
from lineup.data.timestamps import now_iso8601

__all__ = ["LineupBaseModel", "generate_uuid", "now_iso8601"]
