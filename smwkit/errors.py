"""Exceptions raised while decoding ROM data."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, ClassVar


class _KindedError(Exception):
    """An error whose variant is one member of the class's ``Kind`` enum."""

    _TEMPLATES: ClassVar[dict[Any, str]] = {}

    def __init__(self, kind: Enum, *details: Any) -> None:
        self.kind = kind
        self.details = details
        self.message = self._TEMPLATES[kind].format(*details)
        super().__init__(self._render())

    def _render(self) -> str:
        return self.message


class DecompressionError(Exception):
    """Base class for failures while decompressing ROM data."""

    algorithm: ClassVar[str] = "unknown"

    def _render(self) -> str:
        return f"Decompression with {self.algorithm}:\n- {self.message}"


class LcRle1Error(DecompressionError, _KindedError):
    """Malformed LC-RLE1 stream."""

    algorithm = "LC-RLE1"

    class Kind(Enum):
        COMMAND = auto()
        DIRECT_COPY = auto()
        BYTE_FILL = auto()

    _TEMPLATES = {
        Kind.COMMAND: "Wrong command: {0:03b}",
        Kind.DIRECT_COPY: "Direct Copy - Cannot read {0} bytes",
        Kind.BYTE_FILL: "Byte Fill - Cannot read byte",
    }


class LcLz2Error(DecompressionError, _KindedError):
    """Malformed LC-LZ2 stream."""

    algorithm = "LC-LZ2"

    class Kind(Enum):
        COMMAND = auto()
        LONG_LENGTH_COMMAND = auto()
        LONG_LENGTH = auto()
        DIRECT_COPY = auto()
        BYTE_FILL = auto()
        WORD_FILL = auto()
        INCREASING_FILL = auto()
        REPEAT_INCOMPLETE = auto()
        REPEAT_RANGE_OUT_OF_BOUNDS = auto()
        DOUBLE_LONG_LENGTH = auto()

    _TEMPLATES = {
        Kind.COMMAND: "Wrong command: {0:03b}",
        Kind.LONG_LENGTH_COMMAND: "Long Length - Wrong command: {0:03b}",
        Kind.LONG_LENGTH: "Long Length - Cannot read second byte of header",
        Kind.DIRECT_COPY: "Direct Copy - Cannot read {0} bytes",
        Kind.BYTE_FILL: "Byte Fill - Cannot read byte",
        Kind.WORD_FILL: "Word Fill - Cannot read word",
        Kind.INCREASING_FILL: "Increasing Fill - Cannot read byte",
        Kind.REPEAT_INCOMPLETE: "Repeat - Cannot read offset",
        Kind.REPEAT_RANGE_OUT_OF_BOUNDS: (
            "Repeat - Range ({0}..{1}) out of bounds (out buffer size: {2})"
        ),
        Kind.DOUBLE_LONG_LENGTH: "Double Long Length",
    }


class DisassemblyError(_KindedError):
    """Code flow analysis could not make sense of the ROM."""

    class Kind(Enum):
        SUBROUTINE_WITHOUT_RETURN = auto()
        INVALID_ADDR_IN_CODE_BLOCK = auto()

    _TEMPLATES = {
        Kind.SUBROUTINE_WITHOUT_RETURN: (
            "Cannot find a block that returns from subroutine starting at ${0:06X}"
        ),
        Kind.INVALID_ADDR_IN_CODE_BLOCK: (
            "Invalid next PC encountered when parsing basic code block starting at "
            "{0:#x}, at final instruction {1!r}"
        ),
    }


class InstructionParseError(_KindedError):
    """Bytes could not be decoded as a 65816 instruction."""

    class Kind(Enum):
        INPUT_EMPTY = auto()
        INPUT_TOO_SHORT = auto()

    _TEMPLATES = {
        Kind.INPUT_EMPTY: "No bytes provided to parse instruction from",
        Kind.INPUT_TOO_SHORT: "Not enough bytes to read operands for instruction {0:08x}",
    }


class GfxTileError(_KindedError):
    """An indexed tile could not be converted to colours."""

    class Kind(Enum):
        TO_ABGR1555 = auto()
        TO_RGBA32 = auto()

    _TEMPLATES = {
        Kind.TO_ABGR1555: "Failed to convert an indexed tile to Abgr1555",
        Kind.TO_RGBA32: "Failed to convert an indexed tile to Rgba32",
    }


class ColorPaletteError(_KindedError):
    """A level or overworld palette could not be assembled."""

    class Kind(Enum):
        LV_BACK_AREA_COLOR = auto()
        LV_BACKGROUND = auto()
        LV_FOREGROUND = auto()
        LV_SPRITE = auto()
        OW_LAYER2 = auto()

    _TEMPLATES = {
        Kind.LV_BACK_AREA_COLOR: "Failed to construct a level's back area color.",
        Kind.LV_BACKGROUND: "Failed to construct a level's background palette.",
        Kind.LV_FOREGROUND: "Failed to construct a level's foreground palette.",
        Kind.LV_SPRITE: "Failed to construct a level's sprite palette.",
        Kind.OW_LAYER2: "Failed to construct an overworld submap's layer 2 palette.",
    }