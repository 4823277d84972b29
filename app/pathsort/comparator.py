"""Hierarchical comparison of classified paths.

The comparator orders paths first by type precedence, then directory by
directory, and finally by base name. How a directory's own entries are
placed relative to its subdirectories is decided by the hierarchy policy.
"""

from dataclasses import dataclass, field

from pathsort.models import (
    PATH_TYPES,
    ClassifiedPath,
    HierarchyPolicy,
    PathDescriptor,
    PathType,
    Platform,
    UnreadablePath,
)
from pathsort.options import SegmentCompareFn, SortOptions


def build_precedence(platform: Platform, options: SortOptions) -> tuple[PathType, ...]:
    """Build the effective path type precedence for a platform.

    Args:
        platform: Grammar of the flavor in use.
        options: Validated sort options.

    Returns:
        The full type space of the platform, in default or custom order,
        followed by UNRECOGNIZED.
    """
    custom: tuple[str, ...] | None = None
    if platform is Platform.POSIX:
        custom = options.posix_order
    elif platform is Platform.WINDOWS:
        custom = options.windows_order
    if custom is None:
        return (*PATH_TYPES[platform], PathType.UNRECOGNIZED)
    return (*(PathType(tag) for tag in custom), PathType.UNRECOGNIZED)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class HierarchicalComparator:
    """Three-way comparison of path descriptors.

    Instances are callable and can be passed to ``functools.cmp_to_key``.

    Attributes:
        precedence: Path types in sort order; must contain every type compared.
        policy: Placement of directory entries relative to subdirectories.
        segment_compare: Three-way comparison used for all string comparisons.
    """

    precedence: tuple[PathType, ...]
    policy: HierarchyPolicy
    segment_compare: SegmentCompareFn
    _ranks: dict[PathType, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        ranks = {path_type: rank for rank, path_type in enumerate(self.precedence)}
        object.__setattr__(self, "_ranks", ranks)

    @classmethod
    def for_options(cls, platform: Platform, options: SortOptions) -> "HierarchicalComparator":
        """Create the comparator for one sort call."""
        return cls(
            precedence=build_precedence(platform, options),
            policy=options.policy,
            segment_compare=options.segment_compare_fn,
        )

    def __call__(self, left: PathDescriptor, right: PathDescriptor) -> int:
        """Compare two descriptors.

        Returns:
            Negative if left sorts first, positive if right sorts first,
            zero if they are equivalent.
        """
        if isinstance(left, UnreadablePath) or isinstance(right, UnreadablePath):
            return isinstance(left, UnreadablePath) - isinstance(right, UnreadablePath)
        return self.compare_paths(left, right)

    def compare_paths(self, left: ClassifiedPath, right: ClassifiedPath) -> int:
        """Compare two classified paths."""
        # Paths of different types are never compared by content
        if left.path_type is not right.path_type:
            if self._ranks[left.path_type] < self._ranks[right.path_type]:
                return -1
            return 1

        compare = self.segment_compare
        for left_segment, right_segment in zip(left.dirs, right.dirs):
            result = _sign(compare(left_segment, right_segment))
            if result:
                return result

        if left.depth == right.depth:
            result = _sign(compare(left.base, right.base))
            if result:
                return result
            # Same normalized path, fall back to the strings as given
            return _sign(compare(left.path_string, right.path_string))

        if self.policy is HierarchyPolicy.INTERLEAVED:
            # Base name of the shallower path against the deeper path's next directory
            if left.depth < right.depth:
                result = _sign(compare(left.base, right.dirs[left.depth]))
            else:
                result = _sign(compare(left.dirs[right.depth], right.base))
            if result:
                return result
            return _sign(compare(left.normalized, right.normalized))

        shallower_first = -1 if left.depth < right.depth else 1
        if self.policy is HierarchyPolicy.DEEP_FIRST:
            return -shallower_first
        return shallower_first
