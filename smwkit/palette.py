"""Colour palettes for levels and overworld submaps."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, Sequence

from smwkit.color import Abgr1555
from smwkit.errors import ColorPaletteError

_PALETTE_DIM = 0x10


@dataclass(frozen=True)
class _Region:
    """A rectangle of the 16x16 colour grid backed by one colour list."""

    rows: range
    cols: range
    field: str

    def index_of(self, row: int, col: int) -> int | None:
        if row in self.rows and col in self.cols:
            return (row - self.rows.start) * len(self.cols) + (col - self.cols.start)
        return None


def _region(first_row: int, last_row: int, first_col: int, last_col: int, name: str) -> _Region:
    return _Region(range(first_row, last_row + 1), range(first_col, last_col + 1), name)


def _in_grid(value: int) -> bool:
    return 0 <= value < _PALETTE_DIM


class ColorPalette:
    """A 16x16 grid of colours assembled from several sub-palettes.

    Subclasses describe which rectangles of the grid map onto which of their
    colour lists; the first matching rectangle wins.
    """

    _REGIONS: ClassVar[tuple[_Region, ...]] = ()
    _DEFAULT_COLOR_1: ClassVar[Abgr1555 | None] = None

    def _locate(self, row: int, col: int) -> tuple[list[Abgr1555], int] | None:
        for region in self._REGIONS:
            index = region.index_of(row, col)
            if index is not None:
                return getattr(self, region.field), index
        return None

    def set_colors(self, subpalette: Sequence[Abgr1555], rows: range, cols: range) -> None:
        """Write colours row by row into the rectangle spanned by ``rows`` and ``cols``."""
        n_cols = len(cols)
        if n_cols == 0:
            raise ValueError("column range is empty")
        for idx, color in enumerate(subpalette):
            row = rows.start + idx // n_cols
            col = cols.start + idx % n_cols
            if row not in rows:
                raise ValueError(f"Row {row} not between {rows.start}-{rows.stop - 1}")
            if col not in cols:
                raise ValueError(f"Col {col} not between {cols.start}-{cols.stop - 1}")
            self.set_color_at(row, col, color)

    def get_row(self, r: int) -> list[Abgr1555]:
        """All 16 colours of a row; positions without a colour read as magenta."""
        row = []
        for c in range(_PALETTE_DIM):
            color = self.get_color_at(r, c)
            row.append(Abgr1555.MAGENTA if color is None else color)
        return row

    def set_color_at(self, row: int, col: int, color: Abgr1555) -> None:
        """Store a colour; positions not backed by a sub-palette are ignored."""
        if not _in_grid(row):
            raise ValueError(f"row out of range: {row}")
        if not _in_grid(col):
            raise ValueError(f"column out of range: {col}")
        located = self._locate(row, col)
        if located is not None:
            colors, index = located
            colors[index] = color

    def get_color_at(self, row: int, col: int) -> Abgr1555 | None:
        """The colour at a grid position, or None outside the 16x16 grid."""
        if not (_in_grid(row) and _in_grid(col)):
            return None
        located = self._locate(row, col)
        if located is not None:
            colors, index = located
            return colors[index]
        if self._DEFAULT_COLOR_1 is not None and col == 1:
            return self._DEFAULT_COLOR_1
        return Abgr1555.TRANSPARENT


class OverworldState(Enum):
    """Whether the special world has been completed."""

    PRE_SPECIAL = auto()
    POST_SPECIAL = auto()


@dataclass
class SpecificLevelColorPalette(ColorPalette):
    """The full palette of one level."""

    back_area_color: Abgr1555
    background: list[Abgr1555]
    foreground: list[Abgr1555]
    sprite: list[Abgr1555]
    players: list[Abgr1555]
    wtf: list[Abgr1555]
    layer3: list[Abgr1555]
    berry: list[Abgr1555]
    animated: list[Abgr1555]

    _REGIONS: ClassVar[tuple[_Region, ...]] = (
        _region(0x0, 0x1, 0x2, 0x7, "background"),
        _region(0x2, 0x3, 0x2, 0x7, "foreground"),
        _region(0xE, 0xF, 0x2, 0x7, "sprite"),
        _region(0x4, 0xD, 0x2, 0x7, "wtf"),
        _region(0x0, 0x1, 0x8, 0xF, "layer3"),
        _region(0x2, 0x4, 0x9, 0xF, "berry"),
        _region(0x9, 0xB, 0x9, 0xF, "berry"),
        _region(0x8, 0x8, 0x6, 0xF, "players"),
    )
    _DEFAULT_COLOR_1: ClassVar[Abgr1555 | None] = Abgr1555.WHITE


@dataclass
class SpecificOverworldColorPalette(ColorPalette):
    """The full palette of one overworld submap."""

    layer1: list[Abgr1555]
    layer2: list[Abgr1555]
    layer3: list[Abgr1555]
    sprite: list[Abgr1555]
    players: list[Abgr1555]
    wtf: list[Abgr1555]

    _REGIONS: ClassVar[tuple[_Region, ...]] = (
        _region(0x2, 0x7, 0x9, 0xF, "layer1"),
        _region(0x4, 0x7, 0x1, 0x7, "layer2"),
        _region(0x0, 0x1, 0x8, 0xF, "layer3"),
        _region(0x9, 0xF, 0x1, 0x7, "sprite"),
        _region(0x8, 0x8, 0x6, 0xF, "players"),
        _region(0x8, 0x8, 0x1, 0x5, "wtf"),
    )


def _pick(items: Sequence, index: int, kind: ColorPaletteError.Kind):
    if not 0 <= index < len(items):
        raise ColorPaletteError(kind)
    return items[index]


@dataclass
class LevelColorPaletteSet:
    """Level palettes that vary with the level header's palette indices."""

    back_area_colors: list[Abgr1555] = field(default_factory=list)
    bg_palettes: list[list[Abgr1555]] = field(default_factory=list)
    fg_palettes: list[list[Abgr1555]] = field(default_factory=list)
    sprite_palettes: list[list[Abgr1555]] = field(default_factory=list)

    def palette_from_indices(
        self,
        i_back_area_color: int,
        i_background: int,
        i_foreground: int,
        i_sprite: int,
        palettes: ColorPalettes,
    ) -> SpecificLevelColorPalette:
        """Assemble a level palette from the selected entries and the shared palettes."""
        Kind = ColorPaletteError.Kind
        return SpecificLevelColorPalette(
            back_area_color=_pick(self.back_area_colors, i_back_area_color, Kind.LV_BACK_AREA_COLOR),
            background=list(_pick(self.bg_palettes, i_background, Kind.LV_BACKGROUND)),
            foreground=list(_pick(self.fg_palettes, i_foreground, Kind.LV_FOREGROUND)),
            sprite=list(_pick(self.sprite_palettes, i_sprite, Kind.LV_SPRITE)),
            players=list(palettes.players),
            wtf=list(palettes.wtf),
            layer3=list(palettes.lv_layer3),
            berry=list(palettes.lv_berry),
            animated=list(palettes.lv_animated),
        )


_OW_WTF_SLICE = slice(23, 28)


@dataclass
class OverworldColorPaletteSet:
    """Layer 2 palettes of the overworld submaps, before and after the special world."""

    layer2_pre_special: list[list[Abgr1555]] = field(default_factory=list)
    layer2_post_special: list[list[Abgr1555]] = field(default_factory=list)
    layer2_indices: list[int] = field(default_factory=list)

    def get_submap_palette(
        self, submap: int, ow_state: OverworldState, palettes: ColorPalettes
    ) -> SpecificOverworldColorPalette:
        """Assemble the palette of a submap, looking up its layer 2 palette index."""
        index = _pick(self.layer2_indices, submap, ColorPaletteError.Kind.OW_LAYER2)
        return self.get_submap_palette_from_indices(index, ow_state, palettes)

    def get_submap_palette_from_indices(
        self, i_submap_palette: int, ow_state: OverworldState, palettes: ColorPalettes
    ) -> SpecificOverworldColorPalette:
        """Assemble a submap palette from a layer 2 palette index."""
        layer2_pal = (
            self.layer2_pre_special
            if ow_state is OverworldState.PRE_SPECIAL
            else self.layer2_post_special
        )
        layer2 = list(_pick(layer2_pal, i_submap_palette, ColorPaletteError.Kind.OW_LAYER2))
        wtf = list(palettes.wtf[_OW_WTF_SLICE])
        if len(wtf) != _OW_WTF_SLICE.stop - _OW_WTF_SLICE.start:
            raise ValueError(f"misc. palette too short: {len(palettes.wtf)} colours")
        wtf[0] = Abgr1555.WHITE
        return SpecificOverworldColorPalette(
            layer1=list(palettes.ow_layer1),
            layer2=layer2,
            layer3=list(palettes.ow_layer3),
            sprite=list(palettes.ow_sprite),
            players=list(palettes.players),
            wtf=wtf,
        )


@dataclass
class ColorPalettes:
    """Every colour palette of the game."""

    players: list[Abgr1555]
    ow_layer1: list[Abgr1555]
    ow_layer3: list[Abgr1555]
    ow_sprite: list[Abgr1555]
    wtf: list[Abgr1555]
    lv_layer3: list[Abgr1555]
    lv_berry: list[Abgr1555]
    lv_animated: list[Abgr1555]
    ow_specific_set: OverworldColorPaletteSet
    lv_specific_set: LevelColorPaletteSet

    def get_level_palette_from_indices(
        self, i_back_area_color: int, i_background: int, i_foreground: int, i_sprite: int
    ) -> SpecificLevelColorPalette:
        """The palette of a level with the given header palette indices."""
        return self.lv_specific_set.palette_from_indices(
            i_back_area_color, i_background, i_foreground, i_sprite, self
        )

    def get_submap_palette(
        self, submap: int, ow_state: OverworldState
    ) -> SpecificOverworldColorPalette:
        """The palette of an overworld submap."""
        return self.ow_specific_set.get_submap_palette(submap, ow_state, self)