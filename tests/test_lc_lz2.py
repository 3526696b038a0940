import pytest

from smwkit.errors import DecompressionError, LcLz2Error
from smwkit.lc_lz2 import decompress

Kind = LcLz2Error.Kind
END = b"\xff"


def header(command, length):
    return bytes([(command << 5) | (length - 1)])


def long_header(command, length):
    value = length - 1
    return bytes([0xE0 | (command << 2) | (value >> 8), value & 0xFF])


def test_direct_copy():
    assert decompress(header(0, 3) + b"abc" + END) == b"abc"


def test_byte_fill():
    assert decompress(header(1, 4) + b"z" + END) == b"z" * 4


def test_word_fill_odd_length():
    assert decompress(header(2, 5) + b"ab" + END) == b"ababa"


def test_increasing_fill_wraps():
    assert decompress(header(3, 4) + b"\xfe" + END) == b"\xfe\xff\x00\x01"


def test_repeat_copies_from_output():
    data = header(0, 4) + b"abcd" + header(4, 3) + b"\x00\x01" + END
    assert decompress(data) == b"abcd" + b"abcd"[1:4]


def test_repeat_overlapping_reads_fresh_zeros():
    data = header(0, 1) + b"a" + header(4, 3) + b"\x00\x00" + END
    assert decompress(data) == b"aa\x00\x00"


def test_long_length_byte_fill():
    result = decompress(long_header(1, 300) + b"q" + END)
    assert len(result) == 300
    assert set(result) == {ord("q")}


def test_long_length_direct_copy():
    payload = bytes(range(40))
    assert decompress(long_header(0, len(payload)) + payload + END) == payload


def test_missing_terminator_stops_at_end():
    assert decompress(header(0, 2) + b"xy") == b"xy"


def test_terminator_first_gives_empty():
    assert decompress(END + b"garbage") == b""


def test_sequence_of_commands():
    data = header(0, 2) + b"hi" + header(1, 2) + b"!" + END
    assert decompress(data) == b"hi!!"


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        decompress(b"")


@pytest.mark.parametrize("bits", [5, 6])
def test_invalid_command(bits):
    with pytest.raises(LcLz2Error) as info:
        decompress(bytes([bits << 5]))
    assert info.value.kind is Kind.COMMAND
    assert info.value.details == (bits,)


def test_invalid_long_length_command():
    with pytest.raises(LcLz2Error) as info:
        decompress(bytes([0xE0 | (5 << 2), 0x00]))
    assert info.value.kind is Kind.LONG_LENGTH_COMMAND


def test_long_length_missing_second_byte():
    with pytest.raises(LcLz2Error) as info:
        decompress(bytes([0xE0]))
    assert info.value.kind is Kind.LONG_LENGTH


def test_double_long_length():
    with pytest.raises(LcLz2Error) as info:
        decompress(bytes([0xE0 | (7 << 2), 0x00, 0x00]))
    assert info.value.kind is Kind.DOUBLE_LONG_LENGTH


def test_direct_copy_too_short():
    with pytest.raises(LcLz2Error) as info:
        decompress(header(0, 4) + b"ab")
    assert info.value.kind is Kind.DIRECT_COPY
    assert info.value.details == (4,)


def test_byte_fill_missing_byte():
    with pytest.raises(LcLz2Error) as info:
        decompress(header(1, 1))
    assert info.value.kind is Kind.BYTE_FILL


def test_word_fill_missing_word():
    with pytest.raises(LcLz2Error) as info:
        decompress(header(2, 1) + b"a")
    assert info.value.kind is Kind.WORD_FILL


def test_increasing_fill_missing_byte():
    with pytest.raises(LcLz2Error) as info:
        decompress(header(3, 1))
    assert info.value.kind is Kind.INCREASING_FILL


def test_repeat_incomplete():
    with pytest.raises(LcLz2Error) as info:
        decompress(header(4, 1) + b"\x00")
    assert info.value.kind is Kind.REPEAT_INCOMPLETE


def test_repeat_out_of_bounds():
    with pytest.raises(DecompressionError) as info:
        decompress(header(4, 2) + b"\x00\x00")
    assert info.value.kind is Kind.REPEAT_RANGE_OUT_OF_BOUNDS
    assert info.value.details == (0, 2, 0)