# SPDX-License-Identifier: MIT
"""Semantic version parsing for version stamps.

Accepts MAJOR.MINOR.PATCH with optional pre-release and build identifiers:
- Pre-release: -rc, -rc.1, -alpha.1.beta, -rc-1
- Build identifier: +build, +build.1.0, +20240101

Each dot-separated identifier becomes an element: an ``int`` when it consists
only of digits, a ``str`` otherwise. An absent identifier is ``None``, never an
empty tuple.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

# Characters allowed in a segment, and in the last position of a segment
SEGMENT_CHARS = "0-9A-Za-z."
ELEMENT_CHARS = "0-9A-Za-z"

_SEGMENT = f"[{SEGMENT_CHARS}]*[{ELEMENT_CHARS}]"

# Whole-string grammar: version core, then any number of hyphen-prefixed
# segments, then any number of plus-prefixed segments
FORMAT_PATTERN = re.compile(
    rf"\A(?P<core>{_SEGMENT})"
    rf"(?P<prerelease>(?:-{_SEGMENT})*)"
    rf"(?P<build>(?:\+{_SEGMENT})*)\Z"
)

# ASCII digits only; \d would also accept other Unicode digits
CORE_PATTERN = re.compile(r"\A(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)\Z")
NUMERIC_ELEMENT_PATTERN = re.compile(r"\A[0-9]+\Z")

# A whole pre-release or build identifier, delimiter included
PRERELEASE_RUN_PATTERN = re.compile(rf"(?:-{_SEGMENT})+")
BUILD_RUN_PATTERN = re.compile(rf"(?:\+{_SEGMENT})+")

CORE_FIELDS = ("major", "minor", "patch")
PRERELEASE_KEY = "preReleaseId"
BUILD_KEY = "buildId"

Element = Union[int, str]
ElementList = tuple[Element, ...]


class FormatRule(enum.Enum):
    """The validation rule a rejected input violated."""

    GRAMMAR = "grammar"
    NUMERIC_CORE = "numeric-core"
    NUMERIC_FIELD = "numeric-field"
    MISSING_FIELD = "missing-field"
    EMPTY_ELEMENT = "empty-element"
    INVALID_ELEMENT = "invalid-element"
    LEADING_ZERO = "leading-zero"
    NOT_A_STRING = "not-a-string"
    UNKNOWN_ELEMENT = "unknown-element"
    MALFORMED_DOCUMENT = "malformed-document"


class FormatError(Exception):
    """Raised when an input does not describe a valid version stamp."""

    def __init__(self, value: Any, message: str = "", rule: FormatRule = FormatRule.GRAMMAR):
        self.value = value
        self.rule = rule
        self.message = message or f"{value!r} is not a valid semantic version string"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True, eq=False)
class VersionStamp:
    """A parsed semantic version.

    Instances are ordered by the precedence rules in :mod:`version_stamp.compare`;
    two stamps are equal exactly when that comparison returns ``EQUAL``, build
    identifier included.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        pre_release_id: Pre-release elements (e.g. ``("rc", 1)``), or None
        build_id: Build elements (e.g. ``("build", 1, 0)``), or None
    """

    major: int
    minor: int
    patch: int
    pre_release_id: Optional[ElementList] = None
    build_id: Optional[ElementList] = None

    def __post_init__(self) -> None:
        """Reject field values that no version string could produce."""
        for name in CORE_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise FormatError(
                    value,
                    f"The {name} version must be a non-negative integer, got {value!r}",
                    FormatRule.NUMERIC_FIELD,
                )
        _check_elements(PRERELEASE_KEY, self.pre_release_id, "-", PRERELEASE_RUN_PATTERN)
        _check_elements(BUILD_KEY, self.build_id, "+", BUILD_RUN_PATTERN)

    @classmethod
    def parse(cls, text: str) -> "VersionStamp":
        return parse_version(text)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.pre_release_id is not None:
            version += "-" + join_elements(self.pre_release_id)
        if self.build_id is not None:
            version += "+" + join_elements(self.build_id)
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.pre_release_id is not None

    @property
    def base_version(self) -> str:
        """Return the version core without pre-release or build identifiers."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def to_dict(self) -> dict[str, Any]:
        """Return the minimal attribute set accepted by :func:`from_mapping`."""
        data: dict[str, Any] = {"major": self.major, "minor": self.minor, "patch": self.patch}
        if self.pre_release_id is not None:
            data[PRERELEASE_KEY] = join_elements(self.pre_release_id)
        if self.build_id is not None:
            data[BUILD_KEY] = join_elements(self.build_id)
        return data

    def _compare(self, other: "VersionStamp") -> int:
        from .compare import compare_versions

        return compare_versions(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionStamp):
            return NotImplemented
        return self._compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VersionStamp):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, VersionStamp):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, VersionStamp):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, VersionStamp):
            return NotImplemented
        return self._compare(other) >= 0

    def __hash__(self) -> int:
        # Comparing EQUAL implies identical fields and element tags
        return hash((self.major, self.minor, self.patch, self.pre_release_id, self.build_id))


def join_elements(elements: ElementList) -> str:
    """Join elements back into their dotted string form."""
    return ".".join(str(element) for element in elements)


def _check_elements(
    name: str, elements: Optional[ElementList], delimiter: str, run_pattern: re.Pattern[str]
) -> None:
    if elements is None:
        return
    if not isinstance(elements, tuple):
        raise FormatError(
            elements,
            f"The {name} field must be a tuple of elements, got {elements!r}",
            FormatRule.INVALID_ELEMENT,
        )
    if not elements:
        raise FormatError(
            elements, f"The {name} field must not be an empty tuple", FormatRule.EMPTY_ELEMENT
        )

    for element in elements:
        if element == "":
            raise FormatError(
                elements, f"The {name} field contains an empty element", FormatRule.EMPTY_ELEMENT
            )
        if isinstance(element, bool) or not isinstance(element, (int, str)):
            valid = False
        elif isinstance(element, int):
            valid = element >= 0
        else:
            # A digit-only string would be read back as a numeric element
            valid = "." not in element and not NUMERIC_ELEMENT_PATTERN.match(element)
        if not valid:
            raise FormatError(
                elements,
                f"The {name} field has an invalid element {element!r}",
                FormatRule.INVALID_ELEMENT,
            )

    # The serialized identifier must parse back into the same elements
    if not run_pattern.fullmatch(delimiter + join_elements(elements)):
        raise FormatError(
            elements,
            f"The {name} field {join_elements(elements)!r} is not a valid identifier",
            FormatRule.INVALID_ELEMENT,
        )


def parse_elements(text: str, source: Optional[str] = None) -> ElementList:
    """Split a dotted identifier into numeric and string elements.

    Args:
        text: A dotted identifier such as ``"rc.1"``
        source: The full input being parsed, reported in errors

    Returns:
        A non-empty tuple of elements

    Raises:
        FormatError: If any dot-separated piece is empty

    Examples:
        >>> parse_elements("rc.1")
        ('rc', 1)
        >>> parse_elements("build.1.0")
        ('build', 1, 0)
    """
    elements: list[Element] = []
    for piece in text.split("."):
        if not piece:
            raise FormatError(
                source if source is not None else text,
                f"The identifier {text!r} contains an empty element",
                FormatRule.EMPTY_ELEMENT,
            )
        elements.append(int(piece) if NUMERIC_ELEMENT_PATTERN.match(piece) else piece)
    return tuple(elements)


def _parse_core(core: str, source: str, allow_leading_zeros: bool) -> tuple[int, int, int]:
    match = CORE_PATTERN.match(core)
    if not match:
        raise FormatError(
            source, f"The version ID {core!r} is not valid (X.Y.Z)", FormatRule.NUMERIC_CORE
        )
    groups = [match.group(name) for name in CORE_FIELDS]
    if not allow_leading_zeros:
        for name, digits in zip(CORE_FIELDS, groups):
            if len(digits) > 1 and digits.startswith("0"):
                raise FormatError(
                    source,
                    f"The {name} version {digits!r} has a leading zero",
                    FormatRule.LEADING_ZERO,
                )
    major, minor, patch = (int(digits) for digits in groups)
    return major, minor, patch


def _build(
    core: str,
    pre_release: Optional[str],
    build: Optional[str],
    source: str,
    allow_leading_zeros: bool,
) -> VersionStamp:
    """Validate the three captured pieces and assemble a VersionStamp.

    Shared by string parsing and structured construction so both apply the
    same numeric-core and element-list rules.
    """
    major, minor, patch = _parse_core(core, source, allow_leading_zeros)
    return VersionStamp(
        major=major,
        minor=minor,
        patch=patch,
        pre_release_id=parse_elements(pre_release, source) if pre_release else None,
        build_id=parse_elements(build, source) if build else None,
    )


def parse_version(text: str, *, allow_leading_zeros: bool = True) -> VersionStamp:
    """Parse a semantic version string into a VersionStamp.

    Args:
        text: A string of the form MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]
        allow_leading_zeros: Accept version cores such as ``01.0.0``

    Returns:
        A VersionStamp with parsed components

    Raises:
        FormatError: If the string does not match the version grammar

    Examples:
        >>> parse_version("1.0.0-rc.1")
        VersionStamp(major=1, minor=0, patch=0, pre_release_id=('rc', 1), build_id=None)

        >>> str(parse_version("1.0.0-rc.1+build.1.0"))
        '1.0.0-rc.1+build.1.0'
    """
    if not isinstance(text, str):
        raise FormatError(
            text, f"Version must be a string, got {type(text).__name__}", FormatRule.NOT_A_STRING
        )

    match = FORMAT_PATTERN.match(text)
    if not match:
        raise FormatError(text)

    # Strip the leading delimiter; later delimiters stay inside their element
    return _build(
        match.group("core"),
        match.group("prerelease")[1:],
        match.group("build")[1:],
        text,
        allow_leading_zeros,
    )


def _field_digits(name: str, value: Any, source: str) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise FormatError(
            source, f"The {name} field must be an integer, got {value!r}", FormatRule.NUMERIC_FIELD
        )
    digits = str(value)
    if not NUMERIC_ELEMENT_PATTERN.match(digits):
        raise FormatError(
            source,
            f"The {name} field must be a non-negative integer, got {value!r}",
            FormatRule.NUMERIC_FIELD,
        )
    return digits


def from_fields(
    major: Union[int, str],
    minor: Union[int, str],
    patch: Union[int, str],
    pre_release_id: Optional[str] = None,
    build_id: Optional[str] = None,
    *,
    allow_leading_zeros: bool = True,
) -> VersionStamp:
    """Build a VersionStamp from individual fields.

    Args:
        major: Major version as an int or a string of digits
        minor: Minor version as an int or a string of digits
        patch: Patch version as an int or a string of digits
        pre_release_id: Dotted pre-release identifier, e.g. ``"rc.2"``
        build_id: Dotted build identifier, e.g. ``"build.1.2"``
        allow_leading_zeros: Accept fields such as ``"01"``

    Returns:
        A VersionStamp; empty or missing identifiers are absent

    Raises:
        FormatError: If a field is not a non-negative integer, or an
            identifier contains an empty element or a character that a
            version string could not carry
    """
    fields = {"major": major, "minor": minor, "patch": patch}
    source = repr({**fields, PRERELEASE_KEY: pre_release_id, BUILD_KEY: build_id})
    core = ".".join(_field_digits(name, value, source) for name, value in fields.items())

    for name, value in ((PRERELEASE_KEY, pre_release_id), (BUILD_KEY, build_id)):
        if value is not None and not isinstance(value, str):
            raise FormatError(
                source, f"The {name} field must be a string, got {value!r}", FormatRule.NOT_A_STRING
            )

    return _build(core, pre_release_id, build_id, source, allow_leading_zeros)


def from_mapping(mapping: Mapping[str, Any], *, allow_leading_zeros: bool = True) -> VersionStamp:
    """Build a VersionStamp from a structured attribute mapping.

    The mapping must carry ``major``, ``minor`` and ``patch``; ``preReleaseId``
    and ``buildId`` are optional dotted strings. This is the shape produced by
    :meth:`VersionStamp.to_dict` and by :func:`version_stamp.xml_reader.from_xml`.

    Raises:
        FormatError: If a mandatory key is missing or any field is invalid

    Examples:
        >>> str(from_mapping({"major": "1", "minor": "0", "patch": "0", "preReleaseId": "rc.2"}))
        '1.0.0-rc.2'
    """
    missing = [name for name in CORE_FIELDS if name not in mapping]
    if missing:
        raise FormatError(
            dict(mapping),
            f"Mapping must contain all of major, minor, patch (missing: {', '.join(missing)})",
            FormatRule.MISSING_FIELD,
        )
    return from_fields(
        mapping["major"],
        mapping["minor"],
        mapping["patch"],
        mapping.get(PRERELEASE_KEY) or None,
        mapping.get(BUILD_KEY) or None,
        allow_leading_zeros=allow_leading_zeros,
    )


def is_valid_semver(text: str, *, allow_leading_zeros: bool = True) -> bool:
    """Check if a string is a valid version stamp.

    Examples:
        >>> is_valid_semver("1.0.0-rc.1")
        True
        >>> is_valid_semver("1.0")
        False
    """
    try:
        parse_version(text, allow_leading_zeros=allow_leading_zeros)
    except FormatError:
        return False
    return True
