"""Sort command implementation.

Reads newline-separated paths from a file or standard input and prints
them in sorted order.
"""

import json
import sys
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from pathsort.classifier import classify
from pathsort.cli.types import (
    CollationChoice,
    PlatformChoice,
    collect_overrides,
    get_flavor,
    load_effective_options,
)
from pathsort.config import OptionsFileError
from pathsort.flavors import PathFlavor
from pathsort.models import ClassifiedPath, Platform
from pathsort.options import SortOptions, SortOptionsError
from pathsort.sorter import sort_paths
from pathsort.utils.formatting import (
    console,
    create_paths_table,
    format_path_type,
    print_error,
    print_info,
    print_warning,
)


class OutputFormat(str, Enum):
    """Output format options for sorted paths."""

    PLAIN = "plain"
    JSON = "json"
    TABLE = "table"


def _read_paths(source: Path | None) -> list[str]:
    """Read non-blank lines from a file or stdin.

    Raises:
        OSError: If the file cannot be read.
    """
    text = source.read_text(encoding="utf-8") if source is not None else sys.stdin.read()
    return [line for line in text.splitlines() if line.strip()]


def _print_table(paths: list[str], flavor: PathFlavor, options: SortOptions) -> None:
    table = create_paths_table()
    for position, path in enumerate(paths, start=1):
        descriptor = classify(flavor, path, options)
        if not isinstance(descriptor, ClassifiedPath):
            continue
        table.add_row(
            str(position),
            format_path_type(descriptor.path_type),
            str(descriptor.depth),
            escape(path),
        )
    console.print(table)


def sort_command(
    source: Annotated[
        Path | None,
        typer.Argument(
            help="File with one path per line. Reads stdin when omitted.",
            show_default=False,
        ),
    ] = None,
    platform: Annotated[
        PlatformChoice,
        typer.Option(
            "--platform",
            "-p",
            help="Path grammar to use.",
            case_sensitive=False,
        ),
    ] = PlatformChoice.HOST,
    shallow_first: Annotated[
        bool,
        typer.Option("--shallow-first", help="Put directory content before subdirectories."),
    ] = False,
    deep_first: Annotated[
        bool,
        typer.Option("--deep-first", help="Put directory content after subdirectories."),
    ] = False,
    home: Annotated[
        bool,
        typer.Option("--home", help="Treat paths starting with '~' as home paths."),
    ] = False,
    posix_order: Annotated[
        str | None,
        typer.Option("--posix-order", help="POSIX type order, e.g. 'abs,rel,home'."),
    ] = None,
    windows_order: Annotated[
        str | None,
        typer.Option(
            "--windows-order",
            help="Windows type order, e.g. 'dabs,unc,nms,abs,drel,rel,home'.",
        ),
    ] = None,
    collation: Annotated[
        CollationChoice | None,
        typer.Option(
            "--collation",
            "-c",
            help="Segment comparison.",
            case_sensitive=False,
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Options file (default: ~/.config/pathsort/options.toml if present).",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.PLAIN,
) -> None:
    """Sort file paths by type, directory hierarchy and name."""
    overrides = collect_overrides(
        shallow_first=shallow_first,
        deep_first=deep_first,
        home=home,
        posix_order=posix_order,
        windows_order=windows_order,
        collation=collation,
    )
    try:
        options = load_effective_options(config_path, overrides)
    except SortOptionsError as e:
        for violation in e.violations:
            print_error(violation)
        raise typer.Exit(code=1) from e
    except OptionsFileError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    try:
        paths = _read_paths(source)
    except OSError as e:
        print_error(f"Cannot read {source}: {e}")
        raise typer.Exit(code=1) from e

    flavor = get_flavor(platform)
    if posix_order is not None and flavor.platform is not Platform.POSIX:
        print_warning("--posix-order has no effect with the Windows grammar")
    if windows_order is not None and flavor.platform is not Platform.WINDOWS:
        print_warning("--windows-order has no effect with the POSIX grammar")

    sorted_paths: list[str] = sort_paths(flavor, paths, options)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(sorted_paths))
        return

    if output_format == OutputFormat.TABLE:
        if not sorted_paths:
            print_info("No paths to sort.")
            return
        _print_table(sorted_paths, flavor, options)
        return

    for path in sorted_paths:
        typer.echo(path)
