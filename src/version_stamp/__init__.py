# SPDX-License-Identifier: MIT
"""Semantic version stamps: parsing and total ordering.

This package parses MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD] strings and orders
them by Semantic Versioning 2.0.0 precedence, using the build identifier as a
final tie-breaker so that distinct stamps never compare equal.

Example:
    >>> from version_stamp import parse_version, compare_versions
    >>>
    >>> version = parse_version("1.0.0-rc.1+build.1.0")
    >>> version.pre_release_id
    ('rc', 1)
    >>> version.build_id
    ('build', 1, 0)
    >>>
    >>> compare_versions("1.0.0-rc.1", "1.0.0")
    <Ordering.LESS: -1>
"""

__version__ = "0.1.0"

from .semver import (
    VersionStamp,
    Element,
    ElementList,
    parse_version,
    parse_elements,
    from_fields,
    from_mapping,
    is_valid_semver,
    FormatError,
    FormatRule,
    FORMAT_PATTERN,
)
from .compare import (
    Ordering,
    NullPriority,
    compare_versions,
    compare_elements,
    compare_element_lists,
    version_key,
    sort_versions,
    max_version,
)
from .xml_reader import from_xml

__all__ = [
    # Parsing
    "VersionStamp",
    "Element",
    "ElementList",
    "parse_version",
    "parse_elements",
    "from_fields",
    "from_mapping",
    "is_valid_semver",
    "FormatError",
    "FormatRule",
    "FORMAT_PATTERN",
    # Comparison
    "Ordering",
    "NullPriority",
    "compare_versions",
    "compare_elements",
    "compare_element_lists",
    "version_key",
    "sort_versions",
    "max_version",
    # Structured documents
    "from_xml",
]
