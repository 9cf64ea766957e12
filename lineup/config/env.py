"""Environment variable support for configuration.

Variables named `LINEUP_<SECTION>__<FIELD>` override configuration values,
e.g. `LINEUP_SCHEDULE__TIMEOUT=10` or `LINEUP_LOGGING__LEVEL=DEBUG`.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

import yaml

ENV_PREFIX = "LINEUP_"


def parse_env_value(value: str) -> Any:
    """Parse an environment variable value as a YAML scalar.

    Parameters
    ----------
    value : str
        Raw environment variable value.

    Returns
    -------
    Any
        Parsed value: bool, int, float or None where the text reads as one,
        otherwise the string unchanged.

    Examples
    --------
    >>> parse_env_value("true")
    True
    >>> parse_env_value("1")
    1
    >>> parse_env_value("2.5")
    2.5
    >>> parse_env_value("null") is None
    True
    >>> parse_env_value("round {index}")
    'round {index}'
    """
    try:
        parsed = yaml.safe_load(value)
    except yaml.YAMLError:
        return value
    # only scalars; "[1, 2]" or "a: b" stay strings
    if parsed is None or isinstance(parsed, bool | int | float):
        return parsed
    return value


def env_to_nested_dict(env_vars: Mapping[str, str], prefix: str) -> dict[str, Any]:
    """Convert flat environment variables to a nested dictionary.

    Parameters
    ----------
    env_vars : Mapping[str, str]
        Environment variables to convert.
    prefix : str
        Prefix to strip from variable names. Other variables are ignored.

    Returns
    -------
    dict[str, Any]
        Nested configuration dictionary.

    Examples
    --------
    >>> env_to_nested_dict({"LINEUP_SCHEDULE__GROUP_SIZE": "6"}, "LINEUP_")
    {'schedule': {'group_size': 6}}
    """
    result: dict[str, Any] = {}

    for key, value in env_vars.items():
        if not key.startswith(prefix):
            continue

        *sections, field = key[len(prefix) :].lower().split("__")
        current = result
        for section in sections:
            current = current.setdefault(section, {})
        current[field] = parse_env_value(value)

    return result


def load_from_env(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Load configuration values from environment variables.

    Parameters
    ----------
    prefix : str
        Environment variable prefix to filter on.

    Returns
    -------
    dict[str, Any]
        Nested configuration dictionary from environment.

    Examples
    --------
    >>> # with LINEUP_LOGGING__LEVEL=DEBUG set
    >>> load_from_env()  # doctest: +SKIP
    {'logging': {'level': 'DEBUG'}}
    """
    return env_to_nested_dict(os.environ, prefix)
