"""Logging configuration for lineup.

Records from the sampler and runner go to the `lineup` logger. The CLI
attaches a rich console handler on stderr, so log output never interleaves
with a schedule printed on stdout, and optionally a plain file handler.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Where and how verbosely lineup logs.

    At the default WARNING level a successful run logs nothing; INFO adds the
    attempt count of each accepted schedule and DEBUG adds periodic progress
    while a search is rejecting candidates.

    Parameters
    ----------
    level : LogLevel
        Threshold for the `lineup` logger. Case-insensitive on input.
    format : str
        `logging.Formatter` format for the log file. The console handler
        renders its own time and level columns.
    file : Path | None
        Append records to this file as well.
    console : bool
        Emit records on stderr.

    Examples
    --------
    >>> LoggingConfig().level
    'WARNING'
    >>> LoggingConfig(level="debug").level
    'DEBUG'
    """

    level: LogLevel = Field(default="WARNING", description="Log level")
    format: str = Field(
        default="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        description="Log file record format",
    )
    file: Path | None = Field(default=None, description="Log file path")
    console: bool = Field(default=True, description="Log to stderr")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept level names in any case, e.g. from environment variables."""
        return v.upper() if isinstance(v, str) else v
