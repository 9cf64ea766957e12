"""CLI entry point for lineup package.

Allows running via: python -m lineup
"""

from __future__ import annotations

from lineup.cli.main import cli

if __name__ == "__main__":
    cli()
