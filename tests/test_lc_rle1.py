import pytest

from smwkit.errors import DecompressionError, LcRle1Error
from smwkit.lc_rle1 import decompress

Kind = LcRle1Error.Kind
END = b"\xff\xff"


def copy_header(length):
    return bytes([length - 1])


def fill_header(length):
    return bytes([0x80 | (length - 1)])


def test_direct_copy():
    assert decompress(copy_header(3) + b"abc" + END) == b"abc"


def test_byte_fill():
    assert decompress(fill_header(4) + b"A" + END) == b"A" * 4


def test_trailing_single_ff_terminates():
    assert decompress(copy_header(1) + b"x" + b"\xff") == b"x"


def test_ff_followed_by_data_is_a_fill():
    result = decompress(b"\xff\x07" + END)
    assert len(result) == 128
    assert set(result) == {7}


def test_mixed_commands():
    data = copy_header(2) + b"ok" + fill_header(3) + b"." + END
    assert decompress(data) == b"ok..."


def test_end_of_input_without_terminator():
    assert decompress(fill_header(2) + b"z") == b"zz"


def test_terminator_first_gives_empty():
    assert decompress(END) == b""


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        decompress(b"")


def test_direct_copy_too_short():
    with pytest.raises(LcRle1Error) as info:
        decompress(copy_header(5) + b"ab")
    assert info.value.kind is Kind.DIRECT_COPY
    assert info.value.details == (5,)


def test_byte_fill_missing_byte():
    with pytest.raises(DecompressionError) as info:
        decompress(fill_header(1))
    assert info.value.kind is Kind.BYTE_FILL