"""CLI package for pathsort.

This package contains the Typer application and all subcommands.
"""

from pathsort.cli.main import app

__all__ = ["app"]
