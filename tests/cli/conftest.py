"""Test fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide Click CLI test runner.

    Returns
    -------
    CliRunner
        Click test runner.
    """
    return CliRunner()


@pytest.fixture
def mock_config_file(tmp_path: Path) -> Path:
    """Create mock lineup.yaml config file.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory.

    Returns
    -------
    Path
        Path to mock config file.
    """
    config_file = tmp_path / "lineup.yaml"
    config_file.write_text(
        """
profile: test

schedule:
  timeout: 2.0
  header: "LT#{index}"
  indent: 2

logging:
  level: WARNING
  console: false
""",
        encoding="utf-8",
    )
    return config_file


@pytest.fixture
def contradictory_roster_file(tmp_path: Path) -> Path:
    """Create a roster whose constraints can never hold together.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory.

    Returns
    -------
    Path
        Path to the roster file.
    """
    path = tmp_path / "contradictory.yaml"
    path.write_text(
        """
group_size: 2
participants:
  - name: a
  - name: b
  - name: c
  - name: d
constraints:
  a:
    constraint_type: position
    position: first
    rounds: [1]
  b:
    constraint_type: position
    position: first
    rounds: [1]
""",
        encoding="utf-8",
    )
    return path
