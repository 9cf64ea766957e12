"""Writing configurations back to YAML.

By default only values that differ from the built-in defaults are written,
so a saved file records what was customized and keeps picking up new
defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from lineup.config.config import LineupConfig
from lineup.config.defaults import get_default_config


def config_to_dict(
    config: LineupConfig, include_defaults: bool = False
) -> dict[str, Any]:
    """Dump a configuration to plain, YAML-safe values.

    Parameters
    ----------
    config : LineupConfig
        Configuration to dump.
    include_defaults : bool
        Keep values equal to the defaults.

    Returns
    -------
    dict[str, Any]
        Nested dictionary with paths as strings. Sections left entirely at
        their defaults are omitted unless `include_defaults` is set.

    Examples
    --------
    >>> config_to_dict(LineupConfig(profile="dev"))
    {'profile': 'dev'}
    """
    dumped: dict[str, Any] = config.model_dump(mode="json")
    if include_defaults:
        return dumped
    return _remove_defaults(dumped, get_default_config().model_dump(mode="json"))


def _remove_defaults(
    values: dict[str, Any], defaults: dict[str, Any]
) -> dict[str, Any]:
    changed: dict[str, Any] = {}
    for key, value in values.items():
        default = defaults.get(key)
        if isinstance(value, dict) and isinstance(default, dict):
            section = _remove_defaults(value, default)
            if section:
                changed[key] = section
        elif key not in defaults or value != default:
            changed[key] = value
    return changed


def to_yaml(config: LineupConfig, include_defaults: bool = False) -> str:
    """Render a configuration as a YAML document.

    Keys are sorted and non-ASCII text (e.g. a localized header) is written
    as-is.
    """
    return yaml.safe_dump(
        config_to_dict(config, include_defaults=include_defaults),
        default_flow_style=False,
        sort_keys=True,
        allow_unicode=True,
    )


def save_yaml(
    config: LineupConfig,
    path: Path | str,
    include_defaults: bool = False,
    create_dirs: bool = True,
) -> None:
    """Write a configuration file that `load_config` reads back.

    Parameters
    ----------
    config : LineupConfig
        Configuration to save.
    path : Path | str
        Destination file.
    include_defaults : bool
        Write every value, not only customized ones.
    create_dirs : bool
        Create missing parent directories.

    Raises
    ------
    FileNotFoundError
        If the parent directory is missing and `create_dirs` is False.
    """
    path = Path(path)
    if not path.parent.exists():
        if not create_dirs:
            raise FileNotFoundError(
                f"Parent directory does not exist: {path.parent}. "
                f"Pass create_dirs=True to create it."
            )
        path.parent.mkdir(parents=True)

    text = to_yaml(config, include_defaults=include_defaults)
    path.write_text(text, encoding="utf-8")
