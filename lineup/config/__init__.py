"""Configuration system for lineup package.

This module provides configuration models, default settings, and profiles.

Examples
--------
>>> from lineup.config import LineupConfig, get_default_config, get_profile
>>> config = get_default_config()
>>> config.profile
'default'
>>> get_profile("dev").logging.level
'DEBUG'
"""

from __future__ import annotations

from lineup.config.config import LineupConfig
from lineup.config.defaults import DEFAULT_CONFIG, get_default_config
from lineup.config.env import load_from_env
from lineup.config.loader import load_config, load_yaml_file, merge_configs
from lineup.config.logging import LoggingConfig
from lineup.config.profiles import (
    DEV_CONFIG,
    PROFILES,
    TEST_CONFIG,
    get_profile,
    list_profiles,
)
from lineup.config.schedule import ScheduleConfig
from lineup.config.serialization import save_yaml, to_yaml
from lineup.config.validation import validate_config

__all__ = [
    # Main config
    "LineupConfig",
    # Config sections
    "ScheduleConfig",
    "LoggingConfig",
    # Defaults
    "DEFAULT_CONFIG",
    "get_default_config",
    # Profiles
    "DEV_CONFIG",
    "TEST_CONFIG",
    "PROFILES",
    "get_profile",
    "list_profiles",
    # Loading
    "load_config",
    "load_yaml_file",
    "merge_configs",
    # Environment
    "load_from_env",
    # Validation
    "validate_config",
    # Serialization
    "to_yaml",
    "save_yaml",
]
