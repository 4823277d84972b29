"""Unit tests for sort options.

Tests for SortOptions validation, resolve_options and the built-in
collations.
"""

from itertools import permutations

import pytest
from pathsort import sort
from pathsort.models import HierarchyPolicy, PathType
from pathsort.options import (
    COLLATIONS,
    SortOptions,
    SortOptionsError,
    casefold_compare,
    locale_compare,
    ordinal_compare,
    resolve_options,
)
from pydantic import ValidationError

WINDOWS_TYPES = ["rel", "home", "abs", "drel", "dabs", "unc", "nms"]


class TestCollations:
    """Tests for the built-in segment comparisons."""

    def test_ordinal_compare(self) -> None:
        """Code point comparison returns -1, 0 or 1."""
        assert ordinal_compare("a", "b") == -1
        assert ordinal_compare("b", "a") == 1
        assert ordinal_compare("a", "a") == 0
        assert ordinal_compare("B", "a") == -1

    def test_casefold_compare(self) -> None:
        """Case is ignored except to break ties."""
        assert casefold_compare("a", "B") == -1
        assert casefold_compare("A", "a") == -1
        assert casefold_compare("a", "a") == 0
        assert casefold_compare("straße", "STRASSE") > 0

    def test_locale_compare_c_locale(self) -> None:
        """The C locale collates by code point."""
        assert locale_compare("B", "a") < 0
        assert locale_compare("a", "a") == 0

    def test_locale_compare_nul(self) -> None:
        """Strings with NUL characters fall back to code point order."""
        assert locale_compare("a\0b", "a\0c") == -1

    def test_collation_names(self) -> None:
        """Collations are registered by name."""
        assert COLLATIONS == {
            "locale": locale_compare,
            "ordinal": ordinal_compare,
            "casefold": casefold_compare,
        }


class TestSortOptions:
    """Tests for the SortOptions model."""

    def test_defaults(self) -> None:
        """Defaults are interleaved, no home paths, default orders, locale collation."""
        options = SortOptions()
        assert options.path_key is None
        assert options.policy == HierarchyPolicy.INTERLEAVED
        assert options.home_paths_supported is False
        assert options.posix_order is None
        assert options.windows_order is None
        assert options.segment_compare_fn is locale_compare
        assert options.collation == "locale"

    def test_policy(self) -> None:
        """The boolean flags select the policy."""
        assert SortOptions(shallow_first=True).policy == HierarchyPolicy.SHALLOW_FIRST
        assert SortOptions(deep_first=True).policy == HierarchyPolicy.DEEP_FIRST

    def test_orders_become_path_types(self) -> None:
        """Valid orders are stored as path types."""
        options = SortOptions(posix_order=["abs", "rel", "home"])
        assert options.posix_order == (PathType.ABS, PathType.REL, PathType.HOME)

    def test_custom_collation_has_no_name(self) -> None:
        """A custom comparison is not a named collation."""
        options = SortOptions(segment_compare_fn=lambda a, b: 0)
        assert options.collation is None

    def test_frozen(self) -> None:
        """SortOptions is immutable."""
        options = SortOptions()
        with pytest.raises(ValidationError):
            options.shallow_first = True  # type: ignore[misc]

    def test_unknown_option_rejected(self) -> None:
        """Unknown option names are rejected."""
        with pytest.raises(ValidationError):
            SortOptions(shallowFirst=True)  # type: ignore[call-arg]


class TestValidation:
    """Tests for option validation through sort()."""

    @pytest.mark.parametrize("path_key", [True, 5, {}, ["bar"]])
    def test_path_key_must_be_string(self, path_key: object) -> None:
        """path_key must be a string."""
        with pytest.raises(SortOptionsError):
            sort(["foo"], path_key=path_key)

    def test_shallow_and_deep_exclusive(self) -> None:
        """shallow_first and deep_first cannot both be enabled."""
        with pytest.raises(SortOptionsError, match="only one of shallow_first and deep_first"):
            sort(["foo"], shallow_first=True, deep_first=True)

    @pytest.mark.parametrize("order", [True, 5, "bar"])
    def test_posix_order_must_be_sequence(self, order: object) -> None:
        """posix_order must be a sequence."""
        with pytest.raises(SortOptionsError):
            sort(["foo"], posix_order=order)

    @pytest.mark.parametrize(
        "order",
        [
            [],
            ["bar"],
            ["rel"],
            ["rel", "home"],
            ["home", "abs"],
            ["bar", "bar", "bar", "bar"],
            ["bar", "rel", "home", "abs"],
            ["rel", "home", "abs", "bar"],
            ["rel", "rel", "home", "abs"],
            ["rel", "home", "abs", "abs"],
            ["bar", "home", "abs"],
            ["rel", "home", "bar"],
            ["rel", "rel", "abs"],
            ["rel", "home", "home"],
            ["rel", "home", "abs", "nms"],
            ["REL", "HOME", "ABS"],
        ],
    )
    def test_posix_order_must_be_permutation(self, order: list[str]) -> None:
        """posix_order must hold each POSIX type exactly once."""
        with pytest.raises(SortOptionsError, match="posix_order"):
            sort(["foo"], posix_order=order)

    @pytest.mark.parametrize("order", [True, 5, "bar"])
    def test_windows_order_must_be_sequence(self, order: object) -> None:
        """windows_order must be a sequence."""
        with pytest.raises(SortOptionsError):
            sort(["foo"], windows_order=order)

    @pytest.mark.parametrize("order", [{"rel", "home", "abs"}, frozenset({"rel", "home", "abs"})])
    def test_posix_order_rejects_sets(self, order: object) -> None:
        """A set has no order, even when it holds every POSIX type."""
        with pytest.raises(SortOptionsError, match="posix_order must be a list or tuple"):
            sort(["foo"], posix_order=order)

    @pytest.mark.parametrize(
        "order",
        [set(WINDOWS_TYPES), frozenset(WINDOWS_TYPES), dict.fromkeys(WINDOWS_TYPES)],
    )
    def test_windows_order_rejects_unordered(self, order: object) -> None:
        """windows_order must be a list or tuple."""
        with pytest.raises(SortOptionsError, match="windows_order must be a list or tuple"):
            sort(["foo"], windows_order=order)

    def test_order_accepts_tuple(self) -> None:
        """Tuples are accepted like lists."""
        options = SortOptions(posix_order=("abs", "rel", "home"))
        assert options.posix_order == (PathType.ABS, PathType.REL, PathType.HOME)

    @pytest.mark.parametrize(
        "order",
        [
            [],
            ["rel"],
            ["rel", "home", "abs", "drel", "dabs", "unc"],
            ["bar1", "bar2", "bar3", "bar4", "bar5", "bar6", "bar7", "bar8"],
            ["bar", *WINDOWS_TYPES],
            [*WINDOWS_TYPES, "nms"],
            ["bar", "home", "abs", "drel", "dabs", "unc", "nms"],
            ["rel"] * 7,
            ["rel", "rel", "abs", "drel", "dabs", "unc", "nms"],
        ],
    )
    def test_windows_order_must_be_permutation(self, order: list[str]) -> None:
        """windows_order must hold each Windows type exactly once."""
        with pytest.raises(SortOptionsError, match="windows_order"):
            sort(["foo"], windows_order=order)

    @pytest.mark.parametrize("order", list(permutations(["rel", "home", "abs"])))
    def test_every_posix_permutation_accepted(self, order: tuple[str, ...]) -> None:
        """Every permutation is a valid posix_order."""
        assert sort(["foo"], posix_order=order) == ["foo"]

    @pytest.mark.parametrize("compare_fn", [True, None, {}, "bar", ["bar"]])
    def test_segment_compare_fn_must_be_callable(self, compare_fn: object) -> None:
        """segment_compare_fn must be callable."""
        with pytest.raises(SortOptionsError):
            sort(["foo"], segment_compare_fn=compare_fn)

    def test_all_violations_reported(self) -> None:
        """Every invalid option is reported at once."""
        with pytest.raises(SortOptionsError) as exc_info:
            sort(
                ["foo"],
                path_key=5,
                shallow_first=True,
                deep_first=True,
                posix_order=["rel"],
                windows_order=["rel"],
            )

        violations = exc_info.value.violations
        assert len(violations) == 4
        assert any(v.startswith("path_key") for v in violations)
        assert any(v.startswith("deep_first") for v in violations)
        assert any(v.startswith("posix_order") for v in violations)
        assert any(v.startswith("windows_order") for v in violations)

    def test_error_is_value_error(self) -> None:
        """SortOptionsError is a ValueError."""
        with pytest.raises(ValueError, match="Invalid sort options"):
            sort(["foo"], deep_first=True, shallow_first=True)


class TestResolveOptions:
    """Tests for resolve_options()."""

    def test_none(self) -> None:
        """No options gives the defaults."""
        assert resolve_options() == SortOptions()

    def test_instance_returned_as_is(self) -> None:
        """An instance without overrides is used directly."""
        options = SortOptions(shallow_first=True)
        assert resolve_options(options) is options

    def test_instance_with_overrides(self) -> None:
        """Overrides replace values of an instance."""
        options = SortOptions(shallow_first=True, posix_order=["abs", "rel", "home"])
        resolved = resolve_options(options, shallow_first=False, deep_first=True)
        assert resolved.policy == HierarchyPolicy.DEEP_FIRST
        assert resolved.posix_order == (PathType.ABS, PathType.REL, PathType.HOME)
        assert options.shallow_first is True

    def test_mapping_with_overrides(self) -> None:
        """Overrides replace values of a mapping."""
        resolved = resolve_options({"shallow_first": True}, home_paths_supported=True)
        assert resolved.shallow_first is True
        assert resolved.home_paths_supported is True

    @pytest.mark.parametrize("options", [5, "shallow_first", ["shallow_first"]])
    def test_invalid_options_argument(self, options: object) -> None:
        """Anything but an instance, a mapping or None is rejected."""
        with pytest.raises(SortOptionsError, match="options must be"):
            resolve_options(options)

    def test_unknown_key_is_violation(self) -> None:
        """Unknown option names are reported."""
        with pytest.raises(SortOptionsError) as exc_info:
            resolve_options({"shallowFirst": True})
        assert exc_info.value.violations[0].startswith("shallowFirst")
