"""Main configuration model for the lineup package."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from lineup.config.logging import LoggingConfig
from lineup.config.schedule import ScheduleConfig


class LineupConfig(BaseModel):
    """Main configuration for the lineup package.

    Parameters
    ----------
    profile : str
        Configuration profile name.
    schedule : ScheduleConfig
        Schedule generation configuration.
    logging : LoggingConfig
        Logging configuration.

    Examples
    --------
    >>> config = LineupConfig()
    >>> config.profile
    'default'
    >>> config.schedule.group_size
    5
    """

    profile: str = Field(default="default", description="Configuration profile name")
    schedule: ScheduleConfig = Field(
        default_factory=ScheduleConfig, description="Schedule configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary.

        Returns
        -------
        dict[str, Any]
            Configuration as a dictionary.
        """
        return self.model_dump()

    def to_yaml(self) -> str:
        """Convert configuration to YAML string.

        Returns
        -------
        str
            Configuration as YAML string, non-default values only.

        Examples
        --------
        >>> config = LineupConfig(profile="dev")
        >>> 'profile: dev' in config.to_yaml()
        True
        """
        from lineup.config.serialization import to_yaml  # noqa: PLC0415

        return to_yaml(self, include_defaults=False)
