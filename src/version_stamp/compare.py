# SPDX-License-Identifier: MIT
"""Version comparison following Semantic Versioning precedence.

Precedence is decided in order by:
1. major, minor and patch, numerically
2. the pre-release identifier; a missing one sorts highest (1.0.0-rc.1 < 1.0.0)
3. the build identifier; a missing one sorts lowest (1.0.0 < 1.0.0+build)

Step 3 makes the order total over every distinct stamp. Pass
``include_build=False`` to stop after step 2 and get canonical SemVer
precedence, where build metadata is not significant.
"""

from __future__ import annotations

import enum
from typing import Iterable, Optional, Union

from .semver import ElementList, Element, VersionStamp, parse_version


class Ordering(enum.IntEnum):
    """Three-way comparison result."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, left, right) -> "Ordering":
        """Compare two natively ordered values."""
        if left < right:
            return cls.LESS
        if left > right:
            return cls.GREATER
        return cls.EQUAL


class NullPriority(enum.Enum):
    """How an absent element list ranks against a present one."""

    NULL_LOWER = "lower"
    NULL_HIGHER = "higher"


class ElementKind(enum.Enum):
    NUMERIC = "numeric"
    STRING = "string"


# Result when the left list is absent and the right one present
_ABSENT_LEFT = {
    NullPriority.NULL_LOWER: Ordering.LESS,
    NullPriority.NULL_HIGHER: Ordering.GREATER,
}

VersionLike = Union[str, VersionStamp]


def element_kind(element: Element) -> ElementKind:
    """Return the tag fixed for an element when it was parsed."""
    return ElementKind.NUMERIC if isinstance(element, int) else ElementKind.STRING


def compare_elements(left: Element, right: Element) -> Ordering:
    """Compare two identifier elements.

    Numeric elements compare numerically and string elements compare by code
    point. A numeric element always has lower precedence than a string
    element, whichever side it is on.

    Examples:
        >>> compare_elements(2, 10)
        <Ordering.LESS: -1>
        >>> compare_elements("rc", 1)
        <Ordering.GREATER: 1>
    """
    kinds = (element_kind(left), element_kind(right))
    if kinds == (ElementKind.NUMERIC, ElementKind.STRING):
        return Ordering.LESS
    if kinds == (ElementKind.STRING, ElementKind.NUMERIC):
        return Ordering.GREATER
    return Ordering.of(left, right)


def compare_element_lists(
    left: Optional[ElementList],
    right: Optional[ElementList],
    null_priority: NullPriority,
) -> Ordering:
    """Compare two optional element lists.

    Args:
        left: Elements of the left version, or None if absent
        right: Elements of the right version, or None if absent
        null_priority: Whether an absent list ranks above or below a present one

    Returns:
        The ordering of ``left`` relative to ``right``. A shorter list ranks
        lower than a longer one; equal-length lists are compared element by
        element.
    """
    if left is None and right is None:
        return Ordering.EQUAL
    if left is None:
        return _ABSENT_LEFT[null_priority]
    if right is None:
        return Ordering(-_ABSENT_LEFT[null_priority])

    if len(left) != len(right):
        return Ordering.of(len(left), len(right))

    for left_element, right_element in zip(left, right):
        result = compare_elements(left_element, right_element)
        if result != Ordering.EQUAL:
            return result

    return Ordering.EQUAL


def _coerce(version: VersionLike) -> VersionStamp:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(
    version1: VersionLike, version2: VersionLike, *, include_build: bool = True
) -> Ordering:
    """Compare two semantic versions.

    Args:
        version1: First version (string or VersionStamp)
        version2: Second version (string or VersionStamp)
        include_build: Break ties on the build identifier (default). When
            False, build metadata is ignored as in canonical SemVer.

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER, which compare
        equal to -1, 0 and 1

    Raises:
        FormatError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "1.0.1")
        <Ordering.LESS: -1>
        >>> compare_versions("1.0.0-rc1", "1.0.0")
        <Ordering.LESS: -1>
        >>> compare_versions("1.0.0+buildId", "1.0.0")
        <Ordering.GREATER: 1>
        >>> compare_versions("1.0.0+buildId", "1.0.0", include_build=False)
        <Ordering.EQUAL: 0>
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    for attr in ("major", "minor", "patch"):
        result = Ordering.of(getattr(v1, attr), getattr(v2, attr))
        if result != Ordering.EQUAL:
            return result

    # A release outranks any pre-release of the same core
    result = compare_element_lists(v1.pre_release_id, v2.pre_release_id, NullPriority.NULL_HIGHER)
    if result != Ordering.EQUAL or not include_build:
        return result

    # A build identifier outranks a missing one
    return compare_element_lists(v1.build_id, v2.build_id, NullPriority.NULL_LOWER)


def _element_list_key(elements: Optional[ElementList], null_priority: NullPriority) -> tuple:
    if elements is None:
        return (1,) if null_priority is NullPriority.NULL_HIGHER else (0,)
    rank = 0 if null_priority is NullPriority.NULL_HIGHER else 1
    parts = tuple(
        (0, element) if element_kind(element) is ElementKind.NUMERIC else (1, element)
        for element in elements
    )
    return (rank, len(elements), parts)


def version_key(version: VersionLike, *, include_build: bool = True) -> tuple:
    """Return a sort key for a version that agrees with :func:`compare_versions`.

    Examples:
        >>> sorted(["1.0.0", "1.0.0+b", "1.0.0-rc.1"], key=version_key)
        ['1.0.0-rc.1', '1.0.0', '1.0.0+b']
    """
    v = _coerce(version)
    key = (
        v.major,
        v.minor,
        v.patch,
        _element_list_key(v.pre_release_id, NullPriority.NULL_HIGHER),
    )
    if include_build:
        key += (_element_list_key(v.build_id, NullPriority.NULL_LOWER),)
    return key


def sort_versions(
    versions: Iterable[VersionLike], *, reverse: bool = False, include_build: bool = True
) -> list[VersionStamp]:
    """Parse and sort versions in ascending precedence (descending if ``reverse``)."""
    return sorted(
        (_coerce(v) for v in versions),
        key=lambda v: version_key(v, include_build=include_build),
        reverse=reverse,
    )


def max_version(versions: Iterable[VersionLike], *, include_build: bool = True) -> VersionStamp:
    """Return the version with the highest precedence.

    Raises:
        ValueError: If ``versions`` is empty
    """
    stamps = [_coerce(v) for v in versions]
    if not stamps:
        raise ValueError("max_version() arg is an empty sequence")
    return max(stamps, key=lambda v: version_key(v, include_build=include_build))
