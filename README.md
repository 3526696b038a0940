# smwkit

A pure-Python library of building blocks for working with Super Mario World
ROM data. It has no dependencies outside the standard library.

## What it provides

- **Decompression** of the game's two compression formats:
  `smwkit.lc_lz2.decompress` and `smwkit.lc_rle1.decompress`. Both take
  `bytes` and return `bytes`; malformed input raises `LcLz2Error` or
  `LcRle1Error`, both subclasses of `smwkit.errors.DecompressionError`.
  Empty input raises `ValueError`.
- **Colours** (`smwkit.color`): packed SNES colours `Abgr1555` and
  floating-point `Rgba32`, with `Abgr1555.from_rgba32` and
  `Rgba32.from_abgr1555` for conversion, plus named constants such as
  `Abgr1555.WHITE` and `Rgba32.TRANSPARENT`.
- **Tiles and graphics files** (`smwkit.gfx_file`): `Tile.from_2bpp`,
  `from_3bpp`, `from_4bpp`, `from_8bpp` and `from_mode7` decode one 8×8 tile;
  `Tile.to_bgr555` and `Tile.to_rgba` apply a palette (missing entries become
  magenta). `GfxFile.from_decompressed(tile_format, data)` decodes every
  complete tile of already-decompressed data. `GFX_FILES_META` lists the
  format, SNES address and compressed size of each of the game's GFX files.
- **Palettes** (`smwkit.palette`): `SpecificLevelColorPalette` and
  `SpecificOverworldColorPalette` present their sub-palettes as a 16×16 grid
  (`get_color_at`, `set_color_at`, `set_colors`, `get_row`).
  `ColorPalettes` holds the shared palettes together with a
  `LevelColorPaletteSet` and an `OverworldColorPaletteSet`, and assembles a
  level palette (`get_level_palette_from_indices`) or a submap palette
  (`get_submap_palette`, with an `OverworldState`). A missing entry raises
  `smwkit.errors.ColorPaletteError`.
- **65816 instruction decoding**:
  - `smwkit.opcodes`: `Mnemonic`, `AddressingMode`, `Opcode` and the
    256-entry `SNES_OPCODES` table.
  - `smwkit.registers.PRegister`: the processor status register and its flags.
  - `smwkit.instruction.Instruction`: `parse` decodes one instruction,
    resolving flag-dependent immediates from the M and X flags; `display`,
    `display_with_flags`, `intermediate_address`, `next_instructions` and
    `uses_jump_table` take the instruction's SNES address. Bad input raises
    `smwkit.errors.InstructionParseError`.
  - `smwkit.processor.Processor`: tracks the status register through `SEP`,
    `REP`, `PHP` and `PLP`.
  - `smwkit.binary_block`: `CodeBlock.from_bytes` decodes a basic block up to
    the first instruction that can change the program counter;
    `BinaryBlock` labels a region as code, data, unused, unknown or end of ROM.
  - `smwkit.jump_tables`: the game's known pointer tables (`JUMP_TABLES`,
    `find_jump_table`), `JumpTableView.parse_pointers` to decode one from its
    bytes, and the trampoline addresses that use them.

## Installation

```
pip install .
```

## Examples

Decompress LC-LZ2 data:

```python
from smwkit import lc_lz2

data = bytes([0x22, 0xAB, 0xFF])  # byte fill: 0xAB three times
assert lc_lz2.decompress(data) == b"\xab\xab\xab"
```

Convert colours:

```python
from smwkit.color import Abgr1555, Rgba32

white = Rgba32.from_abgr1555(Abgr1555.WHITE)
assert white.as_tuple() == (1.0, 1.0, 1.0, 1.0)
assert Abgr1555.from_rgba32(white) == Abgr1555.WHITE
```

Parse and display an instruction:

```python
from smwkit.instruction import Instruction
from smwkit.registers import PRegister

insn = Instruction.parse(bytes([0xA9, 0x10]), 0x0000, PRegister(0x30))
assert insn.display(0x008000) == "LDA #$10"
assert insn.opcode.instruction_size() == 2
```

Decode a basic block and track processor state:

```python
from smwkit.binary_block import CodeBlock
from smwkit.processor import Processor

block, next_addr = CodeBlock.from_bytes(0x0000, bytes([0xC2, 0x20, 0x60]), Processor())
assert next_addr == 3
assert not block.final_processor_state.p_reg.m_flag()
```

## What it does not do

smwkit works on bytes you hand it. It does not open or validate ROM files,
read the internal ROM header, or map between PC and SNES addresses. It does
not walk a whole ROM to disassemble it, parse levels, overworld or Map16
data, or read palettes and graphics straight out of a ROM: palette lists,
compressed data and tile data must be supplied by the caller. It has no
command-line tool and no graphical interface.

## Running the tests

```
pip install ".[test]"
pytest
```