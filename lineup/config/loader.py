"""Layered configuration loading.

A configuration is built from up to four layers, each a nested dictionary
merged over the previous one and validated once at the end:

1. the selected profile
2. a YAML file
3. `LINEUP_*` environment variables
4. keyword overrides such as `schedule__timeout=10`
"""

from __future__ import annotations

from functools import reduce
from pathlib import Path
from typing import Any

import yaml

from lineup.config.config import LineupConfig
from lineup.config.env import load_from_env
from lineup.config.profiles import get_profile


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return `base` with `override` merged in, section by section.

    Neither argument is modified.

    Examples
    --------
    >>> merge_configs({"schedule": {"timeout": 5.0, "indent": 4}},
    ...               {"schedule": {"timeout": 1.0}})
    {'schedule': {'timeout': 1.0, 'indent': 4}}
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_configs(current, value)
        else:
            merged[key] = value
    return merged


def load_yaml_file(path: Path | str) -> dict[str, Any]:
    """Read a configuration file.

    Parameters
    ----------
    path : Path | str
        YAML file whose top level is a mapping of sections.

    Returns
    -------
    dict[str, Any]
        File contents; empty for an empty file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    yaml.YAMLError
        If the file is not valid YAML or its top level is not a mapping.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        content = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Failed to parse YAML file {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise yaml.YAMLError(f"Configuration file {path} must contain a mapping")
    return content


def _overrides_to_dict(overrides: dict[str, Any]) -> dict[str, Any]:
    """Nest `section__field` keyword overrides."""
    nested: dict[str, Any] = {}
    for key, value in overrides.items():
        *sections, field = key.split("__")
        target = nested
        for section in sections:
            target = target.setdefault(section, {})
        target[field] = value
    return nested


def load_config(
    config_path: Path | str | None = None,
    profile: str = "default",
    use_env: bool = True,
    **overrides: Any,
) -> LineupConfig:
    """Build the effective configuration.

    Parameters
    ----------
    config_path : Path | str | None
        Optional YAML file layered over the profile.
    profile : str
        Base profile: "default", "dev" or "test".
    use_env : bool
        Whether `LINEUP_*` environment variables are applied. Variables that
        do not name a configuration section are ignored.
    **overrides : Any
        Highest-precedence values, addressed as `section__field`.

    Returns
    -------
    LineupConfig
        Validated configuration.

    Raises
    ------
    FileNotFoundError
        If `config_path` does not exist.
    yaml.YAMLError
        If the file is malformed.
    ValueError
        If the profile is unknown.
    ValidationError
        If the merged values are invalid.

    Examples
    --------
    >>> load_config(profile="test", use_env=False).schedule.random_seed
    42
    >>> load_config(schedule__group_size=6, use_env=False).schedule.group_size
    6
    """
    layers: list[dict[str, Any]] = [get_profile(profile).model_dump()]
    if config_path is not None:
        layers.append(load_yaml_file(config_path))
    if use_env:
        # unrelated LINEUP_* variables such as LINEUP_HOME are not sections
        env = load_from_env()
        sections = LineupConfig.model_fields
        layers.append({key: env[key] for key in env if key in sections})
    if overrides:
        layers.append(_overrides_to_dict(overrides))

    return LineupConfig.model_validate(reduce(merge_configs, layers))
