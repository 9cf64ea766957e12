"""Root pytest configuration for lineup package tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from lineup.roster.models import Participant

ROSTER_YAML = """
name: Test Night
group_size: 2
participants:
  - name: alice
    affiliation: Example Corp
  - name: bob
  - name: carol
  - name: dave
  - name: erin
constraints:
  erin:
    constraint_type: last_round
"""


@pytest.fixture(autouse=True)
def clean_lineup_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove LINEUP_* variables so tests see only their own configuration.

    Parameters
    ----------
    monkeypatch : pytest.MonkeyPatch
        Pytest monkeypatch fixture.
    """
    for key in list(os.environ):
        if key.startswith("LINEUP_"):
            monkeypatch.delenv(key)


@pytest.fixture(scope="session")
def tests_dir() -> Path:
    """Get tests directory path.

    Returns
    -------
    Path
        Path to tests directory
    """
    return Path(__file__).parent


@pytest.fixture
def participants() -> list[Participant]:
    """Ten unconstrained participants named p0..p9.

    Returns
    -------
    list[Participant]
        Participants in name order.
    """
    return [Participant(name=f"p{i}") for i in range(10)]


@pytest.fixture
def roster_file(tmp_path: Path) -> Path:
    """Write a small roster with one last-round constraint.

    Parameters
    ----------
    tmp_path : Path
        Pytest's tmp_path fixture

    Returns
    -------
    Path
        Path to the roster YAML file.
    """
    path = tmp_path / "roster.yaml"
    path.write_text(ROSTER_YAML, encoding="utf-8")
    return path
