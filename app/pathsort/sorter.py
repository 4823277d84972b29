"""Sort entry points.

``sort_paths`` is the engine shared by the public functions: it validates
the options, classifies every element once, sorts the descriptors with a
hierarchical comparator and projects them back to the original elements.
"""

import logging
from collections.abc import Sequence
from functools import cmp_to_key
from typing import Any

from pathsort.classifier import classify
from pathsort.comparator import HierarchicalComparator
from pathsort.flavors import POSIX, WINDOWS, PathFlavor, host_flavor
from pathsort.models import MISSING, PathDescriptor
from pathsort.options import resolve_options

logger = logging.getLogger(__name__)


def _is_sortable(paths: Any) -> bool:
    return isinstance(paths, Sequence) and not isinstance(paths, str | bytes | bytearray)


def sort_paths(flavor: PathFlavor, paths: Any, options: Any = None, /, **overrides: Any) -> Any:
    """Sort paths using the grammar of the given flavor.

    Args:
        flavor: Platform path services.
        paths: Sequence of path strings, or of objects carrying a path
            string under ``path_key``. Any other value is returned as-is.
        options: SortOptions, a mapping of option names, or None.
        **overrides: Individual options, taking precedence over ``options``.

    Returns:
        A new list with readable elements in order, then unreadable
        elements, then MISSING slots. Non-sequence ``paths`` unchanged.

    Raises:
        SortOptionsError: If the options are invalid. Raised before
            ``paths`` is examined.
    """
    resolved = resolve_options(options, **overrides)
    if not _is_sortable(paths):
        return paths

    comparator = HierarchicalComparator.for_options(flavor.platform, resolved)
    descriptors: list[PathDescriptor] = []
    missing: list[Any] = []
    for element in paths:
        if element is MISSING:
            missing.append(element)
        else:
            descriptors.append(classify(flavor, element, resolved))

    logger.debug(
        "Sorting %d paths (%d missing) with %s grammar, policy=%s",
        len(descriptors),
        len(missing),
        flavor.platform.value,
        comparator.policy.value,
    )
    descriptors.sort(key=cmp_to_key(comparator))
    return [descriptor.original for descriptor in descriptors] + missing


def sort(paths: Any, options: Any = None, /, **overrides: Any) -> Any:
    """Sort paths using the grammar of the running platform.

    Example:
        >>> sort(["b", "d", "c", "a"])
        ['a', 'b', 'c', 'd']
    """
    return sort_paths(host_flavor(), paths, options, **overrides)


def posix_sort(paths: Any, options: Any = None, /, **overrides: Any) -> Any:
    """Sort paths using the POSIX grammar regardless of the platform."""
    return sort_paths(POSIX, paths, options, **overrides)


def windows_sort(paths: Any, options: Any = None, /, **overrides: Any) -> Any:
    """Sort paths using the Windows grammar regardless of the platform."""
    return sort_paths(WINDOWS, paths, options, **overrides)
