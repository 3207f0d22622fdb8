# SPDX-License-Identifier: MIT
"""Read a version stamp from an XML document.

The document root is a single element carrying the structured attributes::

    <version-stamp major="1" minor="0" patch="0" preReleaseId="rc.2" buildId="build.1.2"/>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import IO, Union

from .semver import FormatError, FormatRule, VersionStamp, from_mapping

ROOT_TAG = "version-stamp"

XmlSource = Union[str, bytes, Path, IO[str], IO[bytes]]


def _read_root(source: XmlSource) -> ET.Element:
    try:
        # Plain strings are document text, never file names
        if isinstance(source, (str, bytes)):
            return ET.fromstring(source)
        return ET.parse(source).getroot()
    except ET.ParseError as e:
        raise FormatError(
            str(source), f"Invalid XML document: {e}", FormatRule.MALFORMED_DOCUMENT
        ) from e


def from_xml(source: XmlSource, *, allow_leading_zeros: bool = True) -> VersionStamp:
    """Parse a ``<version-stamp>`` element into a VersionStamp.

    Args:
        source: XML text or bytes, a Path to an XML file, or an open file
        allow_leading_zeros: Accept fields such as ``major="01"``

    Returns:
        A VersionStamp built from the element's attributes

    Raises:
        FormatError: If the document is malformed, the root element is not
            ``version-stamp``, or its attributes are invalid
        FileNotFoundError: If a Path is given that does not exist
    """
    root = _read_root(source)
    if root.tag != ROOT_TAG:
        raise FormatError(root.tag, f"Unknown element: {root.tag}", FormatRule.UNKNOWN_ELEMENT)
    return from_mapping(root.attrib, allow_leading_zeros=allow_leading_zeros)
