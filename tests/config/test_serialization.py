"""Tests for configuration serialization."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from lineup.config import LineupConfig, ScheduleConfig, load_config, save_yaml, to_yaml
from lineup.config.serialization import config_to_dict


class TestConfigToDict:
    """Tests for config_to_dict."""

    def test_defaults_removed(self) -> None:
        """Test only non-default values remain."""
        config = LineupConfig(schedule=ScheduleConfig(group_size=6))
        assert config_to_dict(config) == {"schedule": {"group_size": 6}}

    def test_include_defaults(self) -> None:
        """Test every field is present when requested."""
        data = config_to_dict(LineupConfig(), include_defaults=True)
        assert data["schedule"]["timeout"] == 5.0
        assert data["logging"]["file"] is None

    def test_paths_as_strings(self, tmp_path: Path) -> None:
        """Test paths are converted to strings."""
        config = load_config(logging__file=tmp_path / "lineup.log")
        assert config_to_dict(config)["logging"]["file"] == str(
            tmp_path / "lineup.log"
        )


class TestToDict:
    """Tests for LineupConfig.to_dict."""

    def test_to_dict(self) -> None:
        """Test every section is present as a dictionary."""
        data = LineupConfig().to_dict()
        assert set(data) == {"profile", "schedule", "logging"}
        assert data["schedule"]["header"] == "round {index}"


class TestToYaml:
    """Tests for to_yaml and save_yaml."""

    def test_to_yaml(self) -> None:
        """Test YAML output of non-default values."""
        text = to_yaml(LineupConfig(profile="dev"))
        assert yaml.safe_load(text) == {"profile": "dev"}

    def test_method(self) -> None:
        """Test LineupConfig.to_yaml delegates to to_yaml."""
        config = LineupConfig(schedule=ScheduleConfig(header="LT#{index}"))
        assert "LT#{index}" in config.to_yaml()

    def test_save_and_reload(self, tmp_path: Path) -> None:
        """Test a saved configuration loads back."""
        config = LineupConfig(schedule=ScheduleConfig(timeout=2.5, indent=2))
        path = tmp_path / "nested" / "lineup.yaml"
        save_yaml(config, path)
        reloaded = load_config(config_path=path, use_env=False)
        assert reloaded.schedule.timeout == 2.5
        assert reloaded.schedule.indent == 2

    def test_save_without_parent(self, tmp_path: Path) -> None:
        """Test create_dirs=False requires the parent directory."""
        with pytest.raises(FileNotFoundError, match="Parent directory"):
            save_yaml(
                LineupConfig(), tmp_path / "missing" / "x.yaml", create_dirs=False
            )
