"""Find the tag that encloses a cursor.

Two scans run outward from the cursor: backward for the ``<`` that opens
the tag and forward for the ``>`` that closes it. A scan gives up as soon
as it meets the opposite bracket anywhere other than on the cursor
itself, since that means the cursor sits after one tag or before the
next rather than inside either. Brackets inside attribute values are not
special-cased.
"""

from __future__ import annotations

from collections.abc import Sequence

from sentry_docs_ls.core.errors import DefinitionError
from sentry_docs_ls.definition.models import Point, TagSpan

_OPEN = ord("<")
_CLOSE = ord(">")

BACKWARD = -1
FORWARD = 1


def _scan(lines: Sequence[bytes], cursor: Point, step: int) -> Point | None:
    """Walk from cursor in direction step looking for the tag bracket."""
    target, stop = (_OPEN, _CLOSE) if step == BACKWARD else (_CLOSE, _OPEN)

    line_no = cursor.line
    line = lines[line_no]
    column = min(cursor.column, len(line) - 1) if step == BACKWARD else cursor.column

    while True:
        while 0 <= column < len(line):
            byte = line[column]
            if byte == target:
                return Point(line_no, column)
            if byte == stop and (line_no != cursor.line or column != cursor.column):
                return None
            column += step

        line_no += step
        if not 0 <= line_no < len(lines):
            return None
        line = lines[line_no]
        column = len(line) - 1 if step == BACKWARD else 0


def _join_span(lines: Sequence[bytes], start: Point, end: Point) -> bytes:
    if start.line == end.line:
        return lines[start.line][start.column : end.column + 1]
    parts = [lines[start.line][start.column :]]
    parts.extend(lines[start.line + 1 : end.line])
    parts.append(lines[end.line][: end.column + 1])
    return b" ".join(parts)


def find_enclosing_tag(lines: Sequence[bytes], line: int, column: int) -> TagSpan:
    """Locate the tag around (line, column), a byte position.

    Raises:
        DefinitionError: NO_ENCLOSING_TAG when the cursor is outside every
            tag, between two tags, or outside the buffer.
    """
    if not 0 <= line < len(lines):
        raise DefinitionError.no_enclosing_tag(line, column)

    cursor = Point(line, max(column, 0))
    start = _scan(lines, cursor, BACKWARD)
    if start is None:
        raise DefinitionError.no_enclosing_tag(line, column)
    end = _scan(lines, cursor, FORWARD)
    if end is None:
        raise DefinitionError.no_enclosing_tag(line, column)

    raw = _join_span(lines, start, end)
    return TagSpan(start=start, end=end, text=raw.decode("utf-8", errors="replace"))
