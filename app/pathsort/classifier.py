"""Path classification.

Turns an arbitrary sort element into a descriptor: the path string is
extracted, normalized and parsed with the platform flavor, tagged with a
path type and split into directory segments. Root content is kept as
leading segments so that drives, servers and shares compare like
ordinary top-level directories.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pathsort.flavors import PathFlavor
from pathsort.models import (
    ClassifiedPath,
    PathDescriptor,
    PathType,
    Platform,
    UnreadablePath,
)
from pathsort.options import SortOptions

logger = logging.getLogger(__name__)


def extract_path_string(element: Any, path_key: str | None) -> str | None:
    """Find the path string carried by a sort element.

    Args:
        element: Any value.
        path_key: Mapping key or attribute name used for non-string elements.

    Returns:
        The path string, or None if the element is unreadable.
    """
    if isinstance(element, str):
        return element
    if path_key is None or element is None:
        return None
    try:
        if isinstance(element, Mapping):
            value = element.get(path_key)
        else:
            value = getattr(element, path_key, None)
    except Exception:
        logger.debug("Cannot read %r from %s", path_key, type(element).__name__, exc_info=True)
        return None
    return value if isinstance(value, str) else None


def _classify_rootless(path_string: str, options: SortOptions) -> PathType:
    if options.home_paths_supported and path_string.startswith("~"):
        return PathType.HOME
    return PathType.REL


def _classify_posix(path_string: str, root: str, dir_: str, options: SortOptions) -> tuple[PathType, str]:
    if not root:
        return _classify_rootless(path_string, options), dir_
    if root == "/":
        # Without stripping, entries of / would sit in an empty-named directory
        return PathType.ABS, dir_[1:]
    return PathType.UNRECOGNIZED, dir_


def _classify_windows(path_string: str, root: str, dir_: str, options: SortOptions) -> tuple[PathType, str]:
    if not root:
        return _classify_rootless(path_string, options), dir_

    if root.startswith("\\\\"):
        # Server and share (or device) names stay as the leading segments
        path_type = PathType.NMS if root[2:3] in ("?", ".") else PathType.UNC
        if dir_.endswith("\\"):
            return path_type, dir_[2:-1]
        return path_type, dir_[2:]

    if root.startswith("\\"):
        return PathType.ABS, dir_[1:]

    if root.endswith(":\\"):
        drive = dir_[: len(root) - 2]
        if dir_.endswith("\\"):
            # Only the root itself ends with a separator
            return PathType.DABS, drive + dir_[len(root) - 1 : -1]
        return PathType.DABS, drive + dir_[len(root) - 1 :]

    if root.endswith(":"):
        if len(dir_) == len(root):
            return PathType.DREL, dir_[:-1]
        # Drive and first subdirectory are compared as separate segments
        return PathType.DREL, dir_[: len(root) - 1] + "\\" + dir_[len(root) :]

    return PathType.UNRECOGNIZED, dir_


def classify(flavor: PathFlavor, element: Any, options: SortOptions) -> PathDescriptor:
    """Classify a sort element.

    Never raises: elements without a usable path string become
    UnreadablePath, and roots the platform rules do not cover are tagged
    UNRECOGNIZED.

    Args:
        flavor: Platform path services.
        element: The element to classify.
        options: Validated sort options.

    Returns:
        ClassifiedPath or UnreadablePath.
    """
    path_string = extract_path_string(element, options.path_key)
    if path_string is None:
        return UnreadablePath(original=element)

    normalized = flavor.normalize(path_string)
    parsed = flavor.parse(normalized)
    platform = flavor.platform

    if platform is Platform.POSIX:
        path_type, dir_ = _classify_posix(path_string, parsed.root, parsed.dir, options)
    elif platform is Platform.WINDOWS:
        path_type, dir_ = _classify_windows(path_string, parsed.root, parsed.dir, options)
    elif parsed.root:
        path_type, dir_ = PathType.UNRECOGNIZED, parsed.dir
    else:
        path_type, dir_ = PathType.NONROOT, parsed.dir

    if path_type is PathType.UNRECOGNIZED:
        logger.debug("Unrecognized root %r in path %r", parsed.root, path_string)

    dirs = tuple(dir_.split(flavor.sep)) if dir_ else ()
    return ClassifiedPath(
        original=element,
        path_string=path_string,
        normalized=normalized,
        path_type=path_type,
        dirs=dirs,
        base=parsed.base,
    )
