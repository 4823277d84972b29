"""Domain models for path classification and sorting.

This module defines the path type tags, the per-platform type spaces
with their default precedence, and the immutable descriptors produced
by the classifier for every element of a sort call.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class PathType(str, Enum):
    """Structural type of a path string, derived from its root.

    Attributes:
        REL: Relative path (``a/b``).
        HOME: Home-relative path (``~/a``), only with home support enabled.
        ABS: Absolute path (``/a`` or ``\\a``).
        DREL: Drive-relative Windows path (``C:a``).
        DABS: Drive-absolute Windows path (``C:\\a``).
        UNC: Windows network path (``\\\\server\\share\\a``).
        NMS: Windows device namespace path (``\\\\?\\C:\\a``, ``\\\\.\\C:\\a``).
        NONROOT: Path without a root on an unknown platform.
        UNRECOGNIZED: Path whose parsed root matches none of the above.
    """

    REL = "rel"
    HOME = "home"
    ABS = "abs"
    DREL = "drel"
    DABS = "dabs"
    UNC = "unc"
    NMS = "nms"
    NONROOT = "nonroot"
    UNRECOGNIZED = "unrecognized"


class Platform(str, Enum):
    """Path grammar a flavor implements."""

    POSIX = "posix"
    WINDOWS = "windows"
    OTHER = "other"


# Type spaces. Tuple order is the default precedence order.
POSIX_PATH_TYPES: tuple[PathType, ...] = (PathType.REL, PathType.HOME, PathType.ABS)
WINDOWS_PATH_TYPES: tuple[PathType, ...] = (
    PathType.REL,
    PathType.HOME,
    PathType.ABS,
    PathType.DREL,
    PathType.DABS,
    PathType.UNC,
    PathType.NMS,
)
OTHER_PATH_TYPES: tuple[PathType, ...] = (PathType.NONROOT,)

PATH_TYPES: dict[Platform, tuple[PathType, ...]] = {
    Platform.POSIX: POSIX_PATH_TYPES,
    Platform.WINDOWS: WINDOWS_PATH_TYPES,
    Platform.OTHER: OTHER_PATH_TYPES,
}


class HierarchyPolicy(str, Enum):
    """How a directory's own entries are placed relative to its subdirectories.

    Attributes:
        INTERLEAVED: Entries and subdirectories interleave by name.
        SHALLOW_FIRST: A directory's entries come before its subdirectories' entries.
        DEEP_FIRST: A directory's entries come after its subdirectories' entries.
    """

    INTERLEAVED = "interleaved"
    SHALLOW_FIRST = "shallow_first"
    DEEP_FIRST = "deep_first"


@dataclass(frozen=True, slots=True)
class ParsedPath:
    """Root, directory and base name of a path string.

    ``dir`` includes the root. It equals the root when the path has no
    parent component, and is empty for a bare relative name.
    """

    root: str
    dir: str
    base: str


@dataclass(frozen=True, slots=True)
class ClassifiedPath:
    """Descriptor of an element whose path string could be read.

    Attributes:
        original: The input element, returned as-is after sorting.
        path_string: The path string extracted from the element.
        normalized: Platform-normalized form of ``path_string``.
        path_type: Type tag from the active platform's type space.
        dirs: Directory segments, including segments derived from the root.
        base: Final path component (may be empty).
    """

    original: Any
    path_string: str
    normalized: str
    path_type: PathType
    dirs: tuple[str, ...]
    base: str

    @property
    def depth(self) -> int:
        """Number of directory segments."""
        return len(self.dirs)


@dataclass(frozen=True, slots=True)
class UnreadablePath:
    """Descriptor of an element that yields no usable path string."""

    original: Any


PathDescriptor = ClassifiedPath | UnreadablePath


class _MissingType:
    """Type of the :data:`MISSING` sentinel."""

    _instance: "_MissingType | None" = None

    def __new__(cls) -> "_MissingType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __reduce__(self) -> str:
        return "MISSING"


# Marks an empty slot in an input sequence. Never classified or compared;
# always moved to the end of the sorted output.
MISSING = _MissingType()
