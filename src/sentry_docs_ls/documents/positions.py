"""Conversion between LSP character offsets and byte columns.

Lines are stored as UTF-8 bytes and scanned by byte, while clients send
character offsets in the negotiated position encoding. pygls'
PositionCodec maps client units to code points; this module only adds
the code point to byte step.
"""

from __future__ import annotations

from lsprotocol import types
from pygls.workspace import PositionCodec

UTF8 = types.PositionEncodingKind.Utf8
UTF16 = types.PositionEncodingKind.Utf16
UTF32 = types.PositionEncodingKind.Utf32

_CODECS = {encoding: PositionCodec(encoding) for encoding in (UTF8, UTF16, UTF32)}

# Undecodable bytes survive as one escape code point each, so byte
# lengths are preserved in both directions.
_ERRORS = "surrogateescape"


def _codec(encoding: str) -> PositionCodec:
    try:
        return _CODECS[types.PositionEncodingKind(encoding)]
    except ValueError:
        raise ValueError(f"Unsupported position encoding: {encoding}") from None


def to_byte_column(line: bytes, character: int, encoding: str = UTF16) -> int:
    """Map a character offset in ``encoding`` units to a byte column.

    Offsets past the end of the line clamp to len(line). An offset that
    falls inside a multi-unit character maps to the character after it.
    """
    codec = _codec(encoding)
    if character <= 0:
        return 0
    if encoding == UTF8:
        return min(character, len(line))

    text = line.decode("utf-8", errors=_ERRORS)
    if character >= codec.client_num_units(text):
        return len(line)
    position = codec.position_from_client_units(
        [text], types.Position(line=0, character=character)
    )
    return len(text[: position.character].encode("utf-8", errors=_ERRORS))


def to_character(line: bytes, byte_column: int, encoding: str = UTF16) -> int:
    """Inverse of to_byte_column for a column on a character boundary."""
    codec = _codec(encoding)
    byte_column = max(0, min(byte_column, len(line)))
    if encoding == UTF8:
        return byte_column

    text = line.decode("utf-8", errors=_ERRORS)
    code_points = len(line[:byte_column].decode("utf-8", errors=_ERRORS))
    position = codec.position_to_client_units(
        [text], types.Position(line=0, character=code_points)
    )
    return position.character
