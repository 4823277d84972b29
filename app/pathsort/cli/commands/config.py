"""Options file commands.

Provides commands to show the effective sort options and to create an
options file.
"""

from pathlib import Path
from typing import Annotated

import tomli_w
import typer

from pathsort.cli.types import CollationChoice, collect_overrides, load_effective_options
from pathsort.config import OptionsFileError, options_to_dict, save_sort_options
from pathsort.options import SortOptionsError, resolve_options
from pathsort.paths import get_options_path
from pathsort.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create the options file.",
    no_args_is_help=True,
)


@app.command()
def show(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Options file to read."),
    ] = None,
) -> None:
    """Show the effective sort options."""
    try:
        options = load_effective_options(config_path, {})
    except SortOptionsError as e:
        for violation in e.violations:
            print_error(violation)
        raise typer.Exit(code=1) from e
    except OptionsFileError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    data = options_to_dict(options)
    if not data:
        print_info("All options are at their defaults.")
        return
    console.print(tomli_w.dumps(data), markup=False, highlight=False)


@app.command()
def init(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Where to write the options file."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing options file."),
    ] = False,
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
    collation: Annotated[
        CollationChoice | None,
        typer.Option("--collation", "-c", help="Segment comparison.", case_sensitive=False),
    ] = None,
) -> None:
    """Create an options file."""
    target = config_path or get_options_path()
    if target.exists() and not force:
        print_error(f"Options file already exists: {target} (use --force to overwrite)")
        raise typer.Exit(code=1)

    overrides = collect_overrides(
        shallow_first=shallow_first,
        deep_first=deep_first,
        home=home,
        collation=collation,
    )
    try:
        options = resolve_options(overrides)
        saved = save_sort_options(options, target)
    except SortOptionsError as e:
        for violation in e.violations:
            print_error(violation)
        raise typer.Exit(code=1) from e
    except OptionsFileError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Options written to {saved}")
