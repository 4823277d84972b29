"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum
from pathlib import Path
from typing import Any

from pathsort.config import OptionsFileNotFoundError, load_sort_options
from pathsort.flavors import POSIX, WINDOWS, PathFlavor, host_flavor
from pathsort.options import COLLATIONS, SortOptions, resolve_options


class PlatformChoice(str, Enum):
    """Path grammars selectable from the command line."""

    HOST = "host"
    POSIX = "posix"
    WINDOWS = "windows"


class CollationChoice(str, Enum):
    """Built-in segment collations."""

    LOCALE = "locale"
    ORDINAL = "ordinal"
    CASEFOLD = "casefold"


def get_flavor(choice: PlatformChoice = PlatformChoice.HOST) -> PathFlavor:
    """Get the flavor for a platform choice.

    Args:
        choice: The platform choice (host, posix or windows).

    Returns:
        PathFlavor instance.
    """
    if choice == PlatformChoice.POSIX:
        return POSIX
    if choice == PlatformChoice.WINDOWS:
        return WINDOWS
    return host_flavor()


def parse_order(value: str | None) -> list[str] | None:
    """Split a comma-separated path type order.

    Args:
        value: Order such as "abs,rel,home", or None.

    Returns:
        List of type tags, or None if no order was given.
    """
    if value is None:
        return None
    return [tag.strip() for tag in value.split(",") if tag.strip()]


def collect_overrides(
    *,
    shallow_first: bool = False,
    deep_first: bool = False,
    home: bool = False,
    posix_order: str | None = None,
    windows_order: str | None = None,
    collation: CollationChoice | None = None,
) -> dict[str, Any]:
    """Collect the options explicitly given on the command line.

    Flags that were not set are left out so that values from the
    options file stay in effect.

    Returns:
        Dictionary of option names to values.
    """
    overrides: dict[str, Any] = {}
    if shallow_first:
        overrides["shallow_first"] = True
    if deep_first:
        overrides["deep_first"] = True
    if home:
        overrides["home_paths_supported"] = True
    if posix_order is not None:
        overrides["posix_order"] = parse_order(posix_order)
    if windows_order is not None:
        overrides["windows_order"] = parse_order(windows_order)
    if collation is not None:
        overrides["segment_compare_fn"] = COLLATIONS[collation.value]
    return overrides


def load_effective_options(config_path: Path | None, overrides: dict[str, Any]) -> SortOptions:
    """Combine the options file with command line overrides.

    An explicitly given options file must exist; the default options
    file is used only when present.

    Args:
        config_path: Options file given with --config, or None.
        overrides: Options given on the command line.

    Returns:
        Validated SortOptions.

    Raises:
        OptionsFileError: If the options file cannot be loaded.
        SortOptionsError: If the combined options are invalid.
    """
    try:
        base = load_sort_options(config_path)
    except OptionsFileNotFoundError:
        if config_path is not None:
            raise
        base = None
    if base is None:
        return resolve_options(overrides)
    return resolve_options(base, **overrides)
