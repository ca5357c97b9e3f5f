"""Definition models - tag spans, tag kinds and links."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Point:
    """Zero-based (line, byte column) inside a document."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class TagSpan:
    """A located tag from its ``<`` to its matching ``>``, both inclusive.

    ``text`` is the raw tag with each line break collapsed to one space.
    """

    start: Point
    end: Point
    text: str


@dataclass(frozen=True, slots=True)
class Include:
    """``<Include name="..."/>``."""

    path: str


@dataclass(frozen=True, slots=True)
class PlatformContent:
    """``<PlatformContent includePath="..."/>``."""

    path: str


@dataclass(frozen=True, slots=True)
class Other:
    """Any element that does not reference a file."""

    name: str


Tag = Include | PlatformContent | Other


@dataclass(frozen=True, slots=True)
class DefinitionLink:
    """Resolved go-to-definition target for a tag.

    origin_start and origin_end (exclusive) bound the tag in the client's
    position encoding; the span itself keeps byte columns.
    """

    target: Path
    origin: TagSpan
    tag: Include | PlatformContent
    origin_start: Point
    origin_end: Point
