"""SNES 15-bit colours and floating-point RGBA colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

ABGR1555_SIZE = 2

_CHANNEL_MAX = 0b11111
_U16_MAX = 0xFFFF


def _to_u16(x: float) -> int:
    """Convert like a saturating float-to-u16 cast, truncating toward zero."""
    if math.isnan(x):
        return 0
    if x <= 0:
        return 0
    if x >= _U16_MAX:
        return _U16_MAX
    return int(x)


def _round_half_away(x: float) -> float:
    if math.isnan(x) or math.isinf(x):
        return x
    return math.copysign(math.floor(abs(x) + 0.5), x)


@dataclass(frozen=True, order=True)
class Abgr1555:
    """A colour packed as 0bABBBBBGGGGGRRRRR; a set A bit means transparent."""

    value: int = 0b1_00000_00000_00000

    TRANSPARENT: ClassVar[Abgr1555]
    BLACK: ClassVar[Abgr1555]
    WHITE: ClassVar[Abgr1555]
    RED: ClassVar[Abgr1555]
    GREEN: ClassVar[Abgr1555]
    BLUE: ClassVar[Abgr1555]
    MAGENTA: ClassVar[Abgr1555]

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _U16_MAX:
            raise ValueError(f"colour value out of range: {self.value:#x}")

    @classmethod
    def from_rgba32(cls, color: Rgba32) -> Abgr1555:
        """Quantise a floating-point colour to 5 bits per channel."""
        r = _to_u16(_round_half_away(color.r * _CHANNEL_MAX)) & _CHANNEL_MAX
        g = _to_u16(_round_half_away(color.g * _CHANNEL_MAX)) & _CHANNEL_MAX
        b = _to_u16(_round_half_away(color.b * _CHANNEL_MAX)) & _CHANNEL_MAX
        a = _to_u16(color.a) & 1
        return cls(((1 - a) << 0xF) | (b << 0xA) | (g << 0x5) | r)


Abgr1555.TRANSPARENT = Abgr1555(0b1_00000_00000_00000)
Abgr1555.BLACK = Abgr1555(0b0_00000_00000_00000)
Abgr1555.WHITE = Abgr1555(0b0_11111_11111_11111)
Abgr1555.RED = Abgr1555(0b0_00000_00000_11111)
Abgr1555.GREEN = Abgr1555(0b0_00000_11111_00000)
Abgr1555.BLUE = Abgr1555(0b0_11111_00000_00000)
Abgr1555.MAGENTA = Abgr1555(0b0_11111_00000_11111)


@dataclass(frozen=True)
class Rgba32:
    """A colour with channels in the range 0.0 to 1.0."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    TRANSPARENT: ClassVar[Rgba32]
    BLACK: ClassVar[Rgba32]
    WHITE: ClassVar[Rgba32]
    RED: ClassVar[Rgba32]
    GREEN: ClassVar[Rgba32]
    BLUE: ClassVar[Rgba32]

    @classmethod
    def from_abgr1555(cls, color: Abgr1555) -> Rgba32:
        """Expand a packed SNES colour to floating-point channels."""
        v = color.value
        return cls(
            r=((v >> 0x0) & _CHANNEL_MAX) / _CHANNEL_MAX,
            g=((v >> 0x5) & _CHANNEL_MAX) / _CHANNEL_MAX,
            b=((v >> 0xA) & _CHANNEL_MAX) / _CHANNEL_MAX,
            a=1.0 - ((v >> 0xF) & 1),
        )

    def as_array(self) -> list[float]:
        return [self.r, self.g, self.b, self.a]

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)


Rgba32.TRANSPARENT = Rgba32(0.0, 0.0, 0.0, 0.0)
Rgba32.BLACK = Rgba32(0.0, 0.0, 0.0, 1.0)
Rgba32.WHITE = Rgba32(1.0, 1.0, 1.0, 1.0)
Rgba32.RED = Rgba32(1.0, 0.0, 0.0, 1.0)
Rgba32.GREEN = Rgba32(0.0, 1.0, 0.0, 1.0)
Rgba32.BLUE = Rgba32(0.0, 0.0, 1.0, 1.0)