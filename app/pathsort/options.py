"""Sort options and their validation.

This module provides the ``SortOptions`` model describing one sort call,
the built-in segment collations, and ``resolve_options`` which turns the
loosely-typed arguments of the public sort functions into a validated,
immutable options object.
"""

import locale
from collections.abc import Callable, Mapping
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from pathsort.models import (
    POSIX_PATH_TYPES,
    WINDOWS_PATH_TYPES,
    HierarchyPolicy,
    PathType,
)

SegmentCompareFn = Callable[[str, str], int]


def ordinal_compare(left: str, right: str) -> int:
    """Compare two strings by code point."""
    return (left > right) - (left < right)


def locale_compare(left: str, right: str) -> int:
    """Compare two strings using the current LC_COLLATE locale.

    Falls back to code point order for strings with embedded NUL
    characters, which ``strcoll`` rejects.
    """
    if "\0" in left or "\0" in right:
        return ordinal_compare(left, right)
    return locale.strcoll(left, right)


def casefold_compare(left: str, right: str) -> int:
    """Compare two strings case-insensitively, then by code point."""
    return ordinal_compare(left.casefold(), right.casefold()) or ordinal_compare(left, right)


# Named segment comparators, usable from options files and the CLI
COLLATIONS: dict[str, SegmentCompareFn] = {
    "locale": locale_compare,
    "ordinal": ordinal_compare,
    "casefold": casefold_compare,
}


class SortOptionsError(ValueError):
    """Raised when sort options are invalid.

    Attributes:
        violations: One human-readable message per invalid option.
    """

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__("Invalid sort options: " + "; ".join(violations))


def _check_order(
    order: tuple[str, ...] | None, required: tuple[PathType, ...], name: str
) -> tuple[PathType, ...] | None:
    """Check that an order is an exact permutation of a type space."""
    if order is None:
        return None
    expected = [path_type.value for path_type in required]
    tags = [tag.value if isinstance(tag, PathType) else tag for tag in order]
    if sorted(tags) != sorted(expected):
        msg = f"{name} must be a permutation of {expected}"
        raise ValueError(msg)
    return tuple(PathType(tag) for tag in order)


class SortOptions(BaseModel):
    """Options controlling a single sort call.

    Attributes:
        path_key: Key (or attribute name) holding the path string of
            non-string elements.
        shallow_first: Put a directory's entries before its subdirectories' entries.
        deep_first: Put a directory's entries after its subdirectories' entries.
        home_paths_supported: Treat rootless paths starting with ``~`` as home paths.
        posix_order: Custom precedence of POSIX path types.
        windows_order: Custom precedence of Windows path types.
        segment_compare_fn: Three-way comparison used for every string comparison.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    path_key: Annotated[
        StrictStr | None,
        Field(description="Key holding the path string of non-string elements"),
    ] = None
    shallow_first: bool = False
    deep_first: bool = False
    home_paths_supported: bool = False
    posix_order: Annotated[
        tuple[str, ...] | None,
        Field(description="Permutation of ['rel', 'home', 'abs']"),
    ] = None
    windows_order: Annotated[
        tuple[str, ...] | None,
        Field(description="Permutation of ['rel', 'home', 'abs', 'drel', 'dabs', 'unc', 'nms']"),
    ] = None
    segment_compare_fn: SegmentCompareFn = locale_compare

    @field_validator("deep_first")
    @classmethod
    def validate_single_policy(cls, v: bool, info: ValidationInfo) -> bool:
        """Reject enabling both shallow_first and deep_first."""
        if v and info.data.get("shallow_first"):
            msg = "only one of shallow_first and deep_first can be enabled"
            raise ValueError(msg)
        return v

    @field_validator("posix_order", "windows_order", mode="before")
    @classmethod
    def validate_order_type(cls, v: Any, info: ValidationInfo) -> Any:
        """Reject unordered collections such as sets before coercion."""
        if v is not None and not isinstance(v, list | tuple):
            msg = f"{info.field_name} must be a list or tuple"
            raise ValueError(msg)
        return v

    @field_validator("posix_order")
    @classmethod
    def validate_posix_order(cls, v: tuple[str, ...] | None) -> tuple[PathType, ...] | None:
        """Check posix_order is a permutation of the POSIX path types."""
        return _check_order(v, POSIX_PATH_TYPES, "posix_order")

    @field_validator("windows_order")
    @classmethod
    def validate_windows_order(cls, v: tuple[str, ...] | None) -> tuple[PathType, ...] | None:
        """Check windows_order is a permutation of the Windows path types."""
        return _check_order(v, WINDOWS_PATH_TYPES, "windows_order")

    @property
    def policy(self) -> HierarchyPolicy:
        """Get the hierarchy policy selected by the boolean flags."""
        if self.shallow_first:
            return HierarchyPolicy.SHALLOW_FIRST
        if self.deep_first:
            return HierarchyPolicy.DEEP_FIRST
        return HierarchyPolicy.INTERLEAVED

    @property
    def collation(self) -> str | None:
        """Get the name of the segment comparator, if it is a built-in collation."""
        for name, fn in COLLATIONS.items():
            if fn is self.segment_compare_fn:
                return name
        return None


def _format_violation(error: Mapping[str, Any]) -> str:
    location = ".".join(str(part) for part in error["loc"]) or "options"
    return f"{location}: {error['msg']}"


def resolve_options(options: Any = None, **overrides: Any) -> SortOptions:
    """Build validated sort options from call arguments.

    Args:
        options: A SortOptions instance, a mapping of option names to
            values, or None.
        **overrides: Individual options; these take precedence over
            ``options``.

    Returns:
        Validated SortOptions.

    Raises:
        SortOptionsError: If any option is invalid. All violations are
            reported together.
    """
    if isinstance(options, SortOptions):
        if not overrides:
            return options
        data: dict[str, Any] = dict(options)
    elif options is None:
        data = {}
    elif isinstance(options, Mapping):
        data = dict(options)
    else:
        raise SortOptionsError(
            [f"options must be a SortOptions, a mapping or None, got {type(options).__name__}"]
        )
    data.update(overrides)

    try:
        return SortOptions.model_validate(data)
    except ValidationError as e:
        raise SortOptionsError([_format_violation(err) for err in e.errors()]) from e
