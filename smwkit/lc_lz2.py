"""Decompressor for the LC-LZ2 format used by graphics data."""

from __future__ import annotations

from enum import IntEnum

from smwkit.errors import LcLz2Error

_TERMINATOR = 0xFF


class _Command(IntEnum):
    DIRECT_COPY = 0b000
    BYTE_FILL = 0b001
    WORD_FILL = 0b010
    INCREASING_FILL = 0b011
    REPEAT = 0b100
    LONG_LENGTH = 0b111


def _command(bits: int, kind: LcLz2Error.Kind) -> _Command:
    try:
        return _Command(bits)
    except ValueError:
        raise LcLz2Error(kind, bits) from None


def decompress(data: bytes) -> bytes:
    """Decompress an LC-LZ2 stream, stopping at a 0xFF header or the end of input."""
    if not data:
        raise ValueError("cannot decompress empty input")
    Kind = LcLz2Error.Kind
    out = bytearray()
    pos = 0
    end = len(data)

    while pos < end:
        header = data[pos]
        if header == _TERMINATOR:
            break
        pos += 1
        command = _command(header >> 5, Kind.COMMAND)
        length = (header & 0b11111) + 1

        if command is _Command.LONG_LENGTH:
            command = _command((header >> 2) & 0b111, Kind.LONG_LENGTH_COMMAND)
            if pos >= end:
                raise LcLz2Error(Kind.LONG_LENGTH)
            length = (((header & 0b11) << 8) | data[pos]) + 1
            pos += 1

        if command is _Command.DIRECT_COPY:
            if length > end - pos:
                raise LcLz2Error(Kind.DIRECT_COPY, length)
            out += data[pos:pos + length]
            pos += length
        elif command is _Command.BYTE_FILL:
            if pos >= end:
                raise LcLz2Error(Kind.BYTE_FILL)
            out += bytes([data[pos]]) * length
            pos += 1
        elif command is _Command.WORD_FILL:
            if end - pos < 2:
                raise LcLz2Error(Kind.WORD_FILL)
            word = bytes(data[pos:pos + 2])
            out += (word * ((length + 1) // 2))[:length]
            pos += 2
        elif command is _Command.INCREASING_FILL:
            if pos >= end:
                raise LcLz2Error(Kind.INCREASING_FILL)
            first = data[pos]
            out += bytes((first + i) & 0xFF for i in range(length))
            pos += 1
        elif command is _Command.REPEAT:
            if end - pos < 2:
                raise LcLz2Error(Kind.REPEAT_INCOMPLETE)
            read_start = (data[pos] << 8) | data[pos + 1]
            read_end = read_start + length
            if read_start >= len(out):
                raise LcLz2Error(Kind.REPEAT_RANGE_OUT_OF_BOUNDS, read_start, read_end, len(out))
            write_start = len(out)
            # The buffer is grown with zeros first, then the range is copied as a block.
            out += bytes(length)
            out[write_start:write_start + length] = out[read_start:read_end]
            pos += 2
        else:
            raise LcLz2Error(Kind.DOUBLE_LONG_LENGTH)

    return bytes(out)