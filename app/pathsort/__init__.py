"""pathsort - cross-platform file path sorting.

Paths are grouped by structural type (relative, home, absolute, drive,
UNC, device namespace) and ordered by directory hierarchy before file
name, following POSIX or Windows path grammar.
"""

from pathsort.flavors import PathFlavor, PosixFlavor, WindowsFlavor, host_flavor
from pathsort.models import MISSING, HierarchyPolicy, ParsedPath, PathType, Platform
from pathsort.options import COLLATIONS, SortOptions, SortOptionsError, locale_compare
from pathsort.sorter import posix_sort, sort, sort_paths, windows_sort

__version__ = "1.0.0"

__all__ = [
    "COLLATIONS",
    "MISSING",
    "HierarchyPolicy",
    "ParsedPath",
    "PathFlavor",
    "PathType",
    "Platform",
    "PosixFlavor",
    "SortOptions",
    "SortOptionsError",
    "WindowsFlavor",
    "__version__",
    "host_flavor",
    "locale_compare",
    "posix_sort",
    "sort",
    "sort_paths",
    "windows_sort",
]
