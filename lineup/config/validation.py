"""Configuration validation utilities.

Pre-flight checks for values that pass field validation but would fail
once used.
"""

from __future__ import annotations

from lineup.config.config import LineupConfig


def check_header_template(config: LineupConfig) -> list[str]:
    """Check that the group header template numbers its groups.

    Malformed templates already fail `ScheduleConfig` validation; a header
    without `{index}` is valid but prints the same line for every group.

    Examples
    --------
    >>> from lineup.config.schedule import ScheduleConfig
    >>> check_header_template(LineupConfig(schedule=ScheduleConfig(header="LT")))
    ['header template does not include {index}']
    """
    if "{index" not in config.schedule.header:
        return ["header template does not include {index}"]
    return []


def check_paths_exist(config: LineupConfig) -> list[str]:
    """Check that the log file's directory exists."""
    log_file = config.logging.file
    if log_file is not None and not log_file.parent.exists():
        return [f"logging file parent directory does not exist: {log_file.parent}"]
    return []


def validate_config(config: LineupConfig) -> list[str]:
    """Run all pre-flight checks.

    Parameters
    ----------
    config : LineupConfig
        Configuration to check.

    Returns
    -------
    list[str]
        Validation errors. Empty if the configuration is usable.

    Examples
    --------
    >>> validate_config(LineupConfig())
    []
    """
    return check_header_template(config) + check_paths_exist(config)
