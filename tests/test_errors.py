import pytest

from smwkit.errors import (
    ColorPaletteError,
    DecompressionError,
    DisassemblyError,
    GfxTileError,
    InstructionParseError,
    LcLz2Error,
    LcRle1Error,
)


def test_lz2_error_is_decompression_error():
    err = LcLz2Error(LcLz2Error.Kind.WORD_FILL)
    assert isinstance(err, DecompressionError)
    assert err.message == "Word Fill - Cannot read word"
    with pytest.raises(DecompressionError) as info:
        raise err
    assert info.value is err


def test_rle1_error_is_decompression_error():
    err = LcRle1Error(LcRle1Error.Kind.BYTE_FILL)
    assert isinstance(err, DecompressionError)
    assert err.message == "Byte Fill - Cannot read byte"
    with pytest.raises(DecompressionError) as info:
        raise err
    assert info.value is err


def test_lz2_command_message_in_binary():
    err = LcLz2Error(LcLz2Error.Kind.COMMAND, 5)
    assert err.message == "Wrong command: 101"
    assert str(err) == "Decompression with LC-LZ2:\n- Wrong command: 101"


def test_rle1_direct_copy_message():
    err = LcRle1Error(LcRle1Error.Kind.DIRECT_COPY, 4)
    assert err.message == "Direct Copy - Cannot read 4 bytes"
    assert str(err).startswith("Decompression with LC-RLE1:\n- ")


def test_repeat_range_message_uses_buffer_size():
    err = LcLz2Error(LcLz2Error.Kind.REPEAT_RANGE_OUT_OF_BOUNDS, 1, 3, 0)
    assert err.message == "Repeat - Range (1..3) out of bounds (out buffer size: 0)"
    assert err.details == (1, 3, 0)


def test_kind_is_kept():
    err = LcLz2Error(LcLz2Error.Kind.DOUBLE_LONG_LENGTH)
    assert err.kind is LcLz2Error.Kind.DOUBLE_LONG_LENGTH
    assert err.message == "Double Long Length"


def test_instruction_parse_error_messages():
    assert (
        str(InstructionParseError(InstructionParseError.Kind.INPUT_EMPTY))
        == "No bytes provided to parse instruction from"
    )
    err = InstructionParseError(InstructionParseError.Kind.INPUT_TOO_SHORT, 0xA9)
    assert str(err).endswith("000000a9")


def test_color_palette_error_message():
    err = ColorPaletteError(ColorPaletteError.Kind.OW_LAYER2)
    assert str(err) == "Failed to construct an overworld submap's layer 2 palette."


def test_gfx_tile_error_message():
    err = GfxTileError(GfxTileError.Kind.TO_RGBA32)
    assert str(err) == "Failed to convert an indexed tile to Rgba32"


def test_disassembly_error_message_contains_address():
    err = DisassemblyError(DisassemblyError.Kind.SUBROUTINE_WITHOUT_RETURN, 0x8000)
    assert err.message.startswith("Cannot find a block that returns from subroutine")
    assert "8000" in err.message


def test_disassembly_errors_are_not_decompression_errors():
    err = DisassemblyError(DisassemblyError.Kind.INVALID_ADDR_IN_CODE_BLOCK, 0x10, "JMP")
    assert not isinstance(err, DecompressionError)
    assert "'JMP'" in str(err)