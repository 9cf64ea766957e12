"""Configuration profiles for the lineup package.

This module provides pre-configured profiles for interactive debugging and
for tests.
"""

from __future__ import annotations

from lineup.config.config import LineupConfig
from lineup.config.logging import LoggingConfig
from lineup.config.schedule import ScheduleConfig

# development profile: verbose logging, generous search budget
DEV_CONFIG = LineupConfig(
    profile="dev",
    schedule=ScheduleConfig(
        timeout=30.0,  # leave room to watch progress at DEBUG level
    ),
    logging=LoggingConfig(
        level="DEBUG",
        console=True,
    ),
)
"""Development configuration profile.

Optimized for:
- Verbose logging (DEBUG level), including periodic search progress
- A longer timeout for investigating hard constraint sets
"""

# test profile: quiet, short, reproducible
TEST_CONFIG = LineupConfig(
    profile="test",
    schedule=ScheduleConfig(
        timeout=1.0,
        random_seed=42,
    ),
    logging=LoggingConfig(
        level="WARNING",
        console=False,
    ),
)
"""Test configuration profile.

Optimized for:
- Fast failure on contradictory constraints (1 second timeout)
- Reproducible shuffles (fixed seed)
- No console logging

Examples
--------
>>> TEST_CONFIG.schedule.random_seed
42
"""

# profile registry
PROFILES: dict[str, LineupConfig] = {
    "default": LineupConfig(),  # default from models
    "dev": DEV_CONFIG,
    "test": TEST_CONFIG,
}
"""Registry of all available configuration profiles.

Examples
--------
>>> list(PROFILES.keys())
['default', 'dev', 'test']
>>> PROFILES["dev"].logging.level
'DEBUG'
"""


def get_profile(name: str) -> LineupConfig:
    """Get configuration profile by name.

    Parameters
    ----------
    name : str
        Profile name. Must be one of: 'default', 'dev', 'test'.

    Returns
    -------
    LineupConfig
        Configuration for the specified profile.

    Raises
    ------
    ValueError
        If profile name is not found in the registry.

    Examples
    --------
    >>> get_profile("dev").logging.level
    'DEBUG'

    >>> try:
    ...     get_profile("invalid")
    ... except ValueError as e:
    ...     print(str(e))
    Profile 'invalid' not found. Available profiles: default, dev, test
    """
    if name not in PROFILES:
        available = ", ".join(sorted(PROFILES.keys()))
        msg = f"Profile {name!r} not found. Available profiles: {available}"
        raise ValueError(msg)

    return PROFILES[name].model_copy(deep=True)


def list_profiles() -> list[str]:
    """Return list of available profile names.

    Returns
    -------
    list[str]
        List of available profile names, sorted alphabetically.

    Examples
    --------
    >>> list_profiles()
    ['default', 'dev', 'test']
    """
    return sorted(PROFILES.keys())
