"""CLI module for lineup package.

This module provides the command-line interface for lineup: schedule
generation, roster checking, and configuration management.
"""

from __future__ import annotations

from lineup.cli.main import cli

__all__ = ["cli"]
