"""Decompressor for the LC-RLE1 format."""

from __future__ import annotations

from enum import IntEnum

from smwkit.errors import LcRle1Error

_TERMINATOR = 0xFF


class _Command(IntEnum):
    DIRECT_COPY = 0
    BYTE_FILL = 1


def decompress(data: bytes) -> bytes:
    """Decompress an LC-RLE1 stream, stopping at 0xFF 0xFF, a trailing 0xFF or the end."""
    if not data:
        raise ValueError("cannot decompress empty input")
    Kind = LcRle1Error.Kind
    out = bytearray()
    pos = 0
    end = len(data)

    while pos < end:
        header = data[pos]
        if header == _TERMINATOR and (pos + 1 == end or data[pos + 1] == _TERMINATOR):
            break
        pos += 1
        bits = header >> 7
        try:
            command = _Command(bits)
        except ValueError:
            raise LcRle1Error(Kind.COMMAND, bits) from None
        length = (header & 0b1111111) + 1

        if command is _Command.DIRECT_COPY:
            if length > end - pos:
                raise LcRle1Error(Kind.DIRECT_COPY, length)
            out += data[pos:pos + length]
            pos += length
        else:
            if pos >= end:
                raise LcRle1Error(Kind.BYTE_FILL)
            out += bytes([data[pos]]) * length
            pos += 1

    return bytes(out)