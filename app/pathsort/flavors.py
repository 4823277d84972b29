"""Platform path services used by the classifier.

A flavor supplies the three things the sorter needs from a platform:
a separator character identifying the grammar, a ``normalize`` function
and a ``parse`` function splitting a path into root, dir and base. The
POSIX and Windows flavors are thin adapters over ``posixpath`` and
``ntpath``; other grammars can be plugged in by subclassing
:class:`PathFlavor`.
"""

import ntpath
import os
import posixpath
import re
from abc import ABC, abstractmethod

from pathsort.models import ParsedPath, Platform

# Leading separators, server, separators, share
_NETWORK_ROOT = re.compile(r"[\\/]{2}([^\\/]+)[\\/]+([^\\/]+)")


class PathFlavor(ABC):
    """Abstract base class for platform path services.

    Implementations must be total: ``normalize`` and ``parse`` may not
    raise for any ``str`` input.

    Example:
        >>> flavor = PosixFlavor()
        >>> flavor.parse(flavor.normalize("a//b/./c"))
        ParsedPath(root='', dir='a/b', base='c')
    """

    @property
    @abstractmethod
    def sep(self) -> str:
        """Return the path separator of this grammar."""

    @abstractmethod
    def normalize(self, path: str) -> str:
        """Return the normalized form of a path string."""

    @abstractmethod
    def parse(self, path: str) -> ParsedPath:
        """Split a path string into root, dir and base."""

    @property
    def platform(self) -> Platform:
        """Return the grammar identified by the separator.

        Returns:
            POSIX for ``/``, WINDOWS for ``\\``, OTHER for anything else.
        """
        if self.sep == "/":
            return Platform.POSIX
        if self.sep == "\\":
            return Platform.WINDOWS
        return Platform.OTHER

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sep={self.sep!r})"


def _parse_tail(path: str, root: str, separators: str) -> ParsedPath:
    """Build a ParsedPath from a path and its already-determined root."""
    tail = path[len(root) :].rstrip(separators)
    index = max(tail.rfind(sep) for sep in separators)
    if index < 0:
        head, base = "", tail
    else:
        head, base = tail[:index].rstrip(separators), tail[index + 1 :]
    if head:
        return ParsedPath(root=root, dir=root + head, base=base)
    return ParsedPath(root=root, dir=root, base=base)


class PosixFlavor(PathFlavor):
    """POSIX path grammar (``/`` separated, single ``/`` root)."""

    @property
    def sep(self) -> str:
        return "/"

    def normalize(self, path: str) -> str:
        normalized = posixpath.normpath(path)
        # normpath keeps exactly two leading slashes; treat them as the root
        if normalized.startswith("//"):
            normalized = normalized[1:]
        return normalized

    def parse(self, path: str) -> ParsedPath:
        _, root, _ = posixpath.splitroot(path)
        return _parse_tail(path, root, "/")


class WindowsFlavor(PathFlavor):
    """Windows path grammar (drives, UNC shares and device namespaces).

    Both ``\\`` and ``/`` are accepted as separators. The reported root
    is the drive followed by the root separator, if any, for example
    ``C:\\``, ``C:``, ``\\``, ``\\\\server\\share\\`` or ``\\\\?\\C:\\``.

    Normalization reads a leading double separator as a network root only
    when both a server and a share follow; otherwise the path is rooted at
    ``\\``. A bare drive such as ``C:`` normalizes to ``C:.``.
    """

    @property
    def sep(self) -> str:
        return "\\"

    def normalize(self, path: str) -> str:
        if path[:1] in ("\\", "/") and path[1:2] in ("\\", "/"):
            match = _NETWORK_ROOT.match(path)
            if match is None:
                # Without both a server and a share this is a rooted path
                path = "\\" + path.lstrip("\\/")
            else:
                path = "\\\\" + match[1] + "\\" + match[2] + path[match.end() :]
        normalized = ntpath.normpath(path)
        # A bare drive names the current directory of that drive
        if len(normalized) == 2 and normalized[1] == ":":
            normalized += "."
        return normalized

    def parse(self, path: str) -> ParsedPath:
        drive, root, _ = ntpath.splitroot(path)
        return _parse_tail(path, drive + root, "\\/")


POSIX = PosixFlavor()
WINDOWS = WindowsFlavor()


def host_flavor() -> PathFlavor:
    """Get the flavor matching the grammar of the running platform.

    Returns:
        WINDOWS when ``os.sep`` is a backslash, POSIX otherwise.
    """
    if os.sep == "\\":
        return WINDOWS
    return POSIX
