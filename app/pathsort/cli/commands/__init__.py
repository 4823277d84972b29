"""CLI commands for pathsort.

This package contains all subcommand implementations.
"""

from pathsort.cli.commands import config, sort

__all__ = ["config", "sort"]
