"""Default configuration for the lineup package."""

from __future__ import annotations

from lineup.config.config import LineupConfig
from lineup.config.logging import LoggingConfig
from lineup.config.schedule import ScheduleConfig

DEFAULT_CONFIG = LineupConfig(
    profile="default",
    schedule=ScheduleConfig(),
    logging=LoggingConfig(),
)
"""Default configuration instance.

Used when no config file is provided.

Examples
--------
>>> DEFAULT_CONFIG.schedule.timeout
5.0
"""


def get_default_config() -> LineupConfig:
    """Get a copy of the default configuration.

    Returns
    -------
    LineupConfig
        A deep copy of the default configuration.

    Examples
    --------
    >>> config = get_default_config()
    >>> config.profile
    'default'
    """
    return DEFAULT_CONFIG.model_copy(deep=True)
