"""Classify a located tag snippet."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from sentry_docs_ls.core.errors import DefinitionError
from sentry_docs_ls.definition.models import Include, Other, PlatformContent, Tag

INCLUDE_TAG = "Include"
INCLUDE_ATTR = "name"
PLATFORM_CONTENT_TAG = "PlatformContent"
PLATFORM_CONTENT_ATTR = "includePath"


def parse_element(snippet: str) -> ET.Element:
    """Parse snippet as exactly one element.

    A bare opening tag such as ``<X a="b">`` is closed in place so it
    parses the same as ``<X a="b" />``.
    """
    if not snippet.endswith(">"):
        raise DefinitionError.malformed_tag(snippet, "tag is not terminated")
    document = snippet if snippet.endswith("/>") else f"{snippet[:-1]}/>"
    try:
        return ET.fromstring(document)
    except ET.ParseError as e:
        raise DefinitionError.malformed_tag(snippet, str(e)) from e


def classify(snippet: str) -> Tag:
    """Map a tag snippet to Include, PlatformContent or Other.

    Raises:
        DefinitionError: MALFORMED_TAG when the snippet is not one element.
    """
    element = parse_element(snippet)
    if element.tag == INCLUDE_TAG:
        return Include(element.get(INCLUDE_ATTR, ""))
    if element.tag == PLATFORM_CONTENT_TAG:
        return PlatformContent(element.get(PLATFORM_CONTENT_ATTR, ""))
    return Other(element.tag)
