"""Roster loading from YAML files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from lineup.roster.roster import Roster


def load_roster(path: Path | str) -> Roster:
    """Load and validate a roster file.

    Parameters
    ----------
    path : Path | str
        Path to YAML roster file.

    Returns
    -------
    Roster
        Validated roster.

    Raises
    ------
    FileNotFoundError
        If file doesn't exist.
    yaml.YAMLError
        If YAML is malformed.
    ValidationError
        If the roster is invalid (duplicate names, unknown constraint keys,
        malformed constraints).

    Examples
    --------
    >>> roster = load_roster("gallery/ngk2017b/roster.yaml")  # doctest: +SKIP
    >>> len(roster.participants)  # doctest: +SKIP
    30
    """
    path = Path(path) if isinstance(path, str) else path

    if not path.exists():
        raise FileNotFoundError(f"Roster file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            content: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Failed to parse YAML file {path}: {e}") from e

    return Roster.model_validate(content if content is not None else {})


def dump_roster(roster: Roster) -> str:
    """Serialize a roster to YAML.

    Parameters
    ----------
    roster : Roster
        Roster to serialize.

    Returns
    -------
    str
        YAML document that `load_roster` reads back.
    """
    data = roster.model_dump(mode="json", exclude_none=True)
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
