"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import locale
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def c_collation() -> Iterator[None]:
    """Pin LC_COLLATE to the C locale so the default collation is code point order."""
    previous = locale.setlocale(locale.LC_COLLATE)
    locale.setlocale(locale.LC_COLLATE, "C")
    yield
    locale.setlocale(locale.LC_COLLATE, previous)


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def options_file(isolated_config_home: Path) -> Path:
    """Path of the default options file inside the isolated config home."""
    return isolated_config_home / "pathsort" / "options.toml"
