"""Options file support.

Sort options can be kept in a TOML file, by default
``~/.config/pathsort/options.toml``. Keys are the option names of
``SortOptions``; the segment comparator is selected by name through the
``collation`` key:

    shallow_first = true
    home_paths_supported = true
    posix_order = ["abs", "rel", "home"]
    collation = "casefold"
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import tomli_w

from pathsort.models import PathType
from pathsort.options import COLLATIONS, SortOptions, resolve_options
from pathsort.paths import get_options_path

logger = logging.getLogger(__name__)


class OptionsFileError(Exception):
    """Base exception for options file errors."""


class OptionsFileNotFoundError(OptionsFileError):
    """Raised when the options file is not found."""


class OptionsFileParseError(OptionsFileError):
    """Raised when the options file cannot be parsed."""


def options_from_dict(data: dict[str, Any]) -> SortOptions:
    """Build SortOptions from options file content.

    Args:
        data: Parsed TOML table.

    Returns:
        Validated SortOptions.

    Raises:
        OptionsFileParseError: If the collation name is unknown.
        SortOptionsError: If any option is invalid.
    """
    values = dict(data)
    collation = values.pop("collation", None)
    if collation is not None:
        if collation not in COLLATIONS:
            raise OptionsFileParseError(
                f"Unknown collation {collation!r}, expected one of {sorted(COLLATIONS)}"
            )
        values["segment_compare_fn"] = COLLATIONS[collation]
    return resolve_options(values)


def load_sort_options(path: Path | None = None) -> SortOptions:
    """Load sort options from a TOML file.

    Args:
        path: Path to the options file. If None, uses the default location.

    Returns:
        Validated SortOptions.

    Raises:
        OptionsFileNotFoundError: If the file doesn't exist.
        OptionsFileParseError: If the TOML syntax or collation is invalid.
        OptionsFileError: If the file cannot be read.
        SortOptionsError: If the content doesn't describe valid options.
    """
    options_path = path or get_options_path()

    if not options_path.exists():
        raise OptionsFileNotFoundError(f"Options file not found: {options_path}")

    try:
        with open(options_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise OptionsFileParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise OptionsFileError(f"Failed to read options file: {e}") from e

    logger.debug("Loaded options from %s", options_path)
    return options_from_dict(data)


def options_to_dict(options: SortOptions) -> dict[str, object]:
    """Convert SortOptions to a dictionary for TOML serialization.

    Only non-default values are included. A segment comparator that is
    not a built-in collation cannot be stored and is left out.

    Args:
        options: The options to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    result: dict[str, object] = {}

    if options.path_key is not None:
        result["path_key"] = options.path_key
    for flag in ("shallow_first", "deep_first", "home_paths_supported"):
        if getattr(options, flag):
            result[flag] = True
    if options.posix_order is not None:
        result["posix_order"] = [PathType(tag).value for tag in options.posix_order]
    if options.windows_order is not None:
        result["windows_order"] = [PathType(tag).value for tag in options.windows_order]

    collation = options.collation
    if collation is None:
        logger.warning(
            "Custom segment_compare_fn %r cannot be saved to an options file",
            options.segment_compare_fn,
        )
    elif collation != "locale":
        result["collation"] = collation

    return result


def save_sort_options(options: SortOptions, path: Path | None = None) -> Path:
    """Save sort options to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        options: The options to save.
        path: Path to save the options. If None, uses the default location.

    Returns:
        Path where the options were saved.

    Raises:
        OptionsFileError: If the file cannot be written.
    """
    options_path = path or get_options_path()
    data = options_to_dict(options)

    tmp_path: Path | None = None
    try:
        options_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=options_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(options_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise OptionsFileError(f"Failed to write options file: {e}") from e

    logger.debug("Saved options to %s", options_path)
    return options_path
