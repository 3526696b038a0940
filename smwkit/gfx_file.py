"""Decoding of bitplane graphics tiles and GFX files."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from smwkit.color import Abgr1555, Rgba32

N_PIXELS_IN_TILE = 8 * 8


class TileFormat(Enum):
    """Bit depth and layout of tiles in a graphics file."""

    TILE_2BPP = "2BPP"
    TILE_3BPP = "3BPP"
    TILE_4BPP = "4BPP"
    TILE_8BPP = "8BPP"
    TILE_MODE7 = "Mode7"

    def __str__(self) -> str:
        return self.value

    def tile_size_bytes(self) -> int:
        """Number of bytes one tile occupies."""
        return _TILE_SIZES[self]


_TILE_SIZES = {
    TileFormat.TILE_2BPP: 2 * 8,
    TileFormat.TILE_3BPP: 3 * 8,
    TileFormat.TILE_4BPP: 4 * 8,
    TileFormat.TILE_8BPP: 8 * 8,
    TileFormat.TILE_MODE7: 8 * 8,
}


def _take(data: bytes, size: int) -> bytes:
    if len(data) < size:
        raise ValueError(f"tile needs {size} bytes, got {len(data)}")
    return bytes(data[:size])


@dataclass(frozen=True)
class Tile:
    """An 8x8 tile of palette indices, row by row."""

    color_indices: bytes

    def __post_init__(self) -> None:
        if len(self.color_indices) != N_PIXELS_IN_TILE:
            raise ValueError(
                f"tile must hold {N_PIXELS_IN_TILE} pixels, got {len(self.color_indices)}"
            )

    @classmethod
    def from_2bpp(cls, data: bytes) -> Tile:
        return cls._from_planar(data, 2)

    @classmethod
    def from_3bpp(cls, data: bytes) -> Tile:
        raw = _take(data, 24)
        indices = bytearray(N_PIXELS_IN_TILE)
        for i in range(N_PIXELS_IN_TILE):
            row, col = divmod(i, 8)
            shift = 7 - col
            bit1 = (raw[2 * row] >> shift) & 1
            bit2 = (raw[2 * row + 1] >> shift) & 1
            bit3 = (raw[16 + row] >> shift) & 1
            indices[i] = (bit1 << 2) | (bit2 << 1) | bit3
        return cls(bytes(indices))

    @classmethod
    def from_4bpp(cls, data: bytes) -> Tile:
        return cls._from_planar(data, 4)

    @classmethod
    def from_8bpp(cls, data: bytes) -> Tile:
        return cls._from_planar(data, 8)

    @classmethod
    def _from_planar(cls, data: bytes, depth: int) -> Tile:
        raw = _take(data, depth * 8)
        indices = bytearray(N_PIXELS_IN_TILE)
        for i in range(N_PIXELS_IN_TILE):
            row, col = divmod(i, 8)
            shift = 7 - col
            color = 0
            for bit in range(depth):
                byte_idx = 2 * row + 16 * (bit // 2) + bit % 2
                color |= ((raw[byte_idx] >> shift) & 1) << bit
            indices[i] = color
        return cls(bytes(indices))

    @classmethod
    def from_mode7(cls, data: bytes) -> Tile:
        return cls(_take(data, 64))

    def to_bgr555(self, palette: list[Abgr1555]) -> list[Abgr1555]:
        """Look up each pixel in the palette; missing entries become magenta."""
        return [
            palette[index] if index < len(palette) else Abgr1555.MAGENTA
            for index in self.color_indices
        ]

    def to_rgba(self, palette: list[Abgr1555]) -> list[Rgba32]:
        return [Rgba32.from_abgr1555(color) for color in self.to_bgr555(palette)]


_PARSERS = {
    TileFormat.TILE_2BPP: Tile.from_2bpp,
    TileFormat.TILE_3BPP: Tile.from_3bpp,
    TileFormat.TILE_4BPP: Tile.from_4bpp,
    TileFormat.TILE_8BPP: Tile.from_8bpp,
    TileFormat.TILE_MODE7: Tile.from_mode7,
}


@dataclass
class GfxFile:
    """A decoded graphics file."""

    tile_format: TileFormat
    tiles: list[Tile]

    @classmethod
    def from_decompressed(cls, tile_format: TileFormat, data: bytes) -> GfxFile:
        """Decode every complete tile in decompressed data; a trailing partial tile is dropped."""
        size = tile_format.tile_size_bytes()
        parser = _PARSERS[tile_format]
        tiles = [
            parser(data[start:start + size])
            for start in range(0, len(data) - size + 1, size)
        ]
        if not tiles:
            raise ValueError("graphics data holds no complete tile")
        return cls(tile_format, tiles)

    def n_pixels(self) -> int:
        return len(self.tiles) * N_PIXELS_IN_TILE


_T2, _T3, _T4 = TileFormat.TILE_2BPP, TileFormat.TILE_3BPP, TileFormat.TILE_4BPP

GFX_FILES_META: tuple[tuple[TileFormat, int, int], ...] = (
    (_T3, 0x08D9F9, 2104),
    (_T3, 0x08E231, 2698),
    (_T3, 0x08ECBB, 2199),
    (_T3, 0x08F552, 2603),
    (_T3, 0x08FF7D, 2534),
    (_T3, 0x098963, 2569),
    (_T3, 0x09936C, 2468),
    (_T3, 0x099D10, 2375),
    (_T3, 0x09A657, 2378),
    (_T3, 0x09AFA1, 2676),
    (_T3, 0x09BA15, 2439),
    (_T3, 0x09C39C, 2503),
    (_T3, 0x09CD63, 2159),
    (_T3, 0x09D5D2, 2041),
    (_T3, 0x09DDCB, 2330),
    (_T3, 0x09E6E5, 2105),
    (_T3, 0x09EF1E, 2193),
    (_T3, 0x09F7AF, 2062),
    (_T3, 0x09FFBD, 2387),
    (_T3, 0x0A8910, 2616),
    (_T3, 0x0A9348, 1952),
    (_T3, 0x0A9AE8, 2188),
    (_T3, 0x0AA374, 1600),
    (_T3, 0x0AA9B4, 2297),
    (_T3, 0x0AB2AD, 2359),
    (_T3, 0x0ABBE4, 1948),
    (_T3, 0x0AC380, 2278),
    (_T3, 0x0ACC66, 2072),
    (_T3, 0x0AD47E, 2058),
    (_T3, 0x0ADC88, 2551),
    (_T3, 0x0AE67F, 1988),
    (_T3, 0x0AEE43, 2142),
    (_T3, 0x0AF6A1, 2244),
    (_T3, 0x0AFF65, 2408),
    (_T3, 0x0B88CD, 2301),
    (_T3, 0x0B91CA, 2331),
    (_T3, 0x0B9AE5, 2256),
    (_T3, 0x0BA3B5, 2668),
    (_T3, 0x0BAE21, 2339),
    (_T4, 0x0BB744, 2344),
    (_T2, 0x0BC06C, 1591),
    (_T2, 0x0BC6A3, 1240),
    (_T2, 0x0BCB7B, 1397),
    (_T2, 0x0BD0F0, 1737),
    (_T3, 0x0BD7B9, 2125),
    (_T3, 0x0BE006, 2352),
    (_T3, 0x0BE936, 2127),
    (_T2, 0x0BF185, 566),
    (_T3, 0x0BF3BB, 1093),
    (_T3, 0x0BF800, 1293),
    (_T4, 0x088000, 16320),
    (_T3, 0x08BFC0, 6713),
)
"""Tile format, SNES address and compressed size of each GFX file."""