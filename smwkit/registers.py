"""65816 processor registers needed for disassembly."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class PRegister:
    """Processor status register."""

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFF:
            raise ValueError(f"status register value out of range: {self.value:#x}")

    def n_flag(self) -> bool:
        """Negative."""
        return bool(self.value & 0b1000_0000)

    def v_flag(self) -> bool:
        """Overflow."""
        return bool(self.value & 0b0100_0000)

    def m_flag(self) -> bool:
        """Accumulator size: set means 8-bit, clear means 16-bit."""
        return bool(self.value & 0b0010_0000)

    def x_flag(self) -> bool:
        """Index register size: set means 8-bit, clear means 16-bit."""
        return bool(self.value & 0b0001_0000)

    def d_flag(self) -> bool:
        """Decimal."""
        return bool(self.value & 0b0000_1000)

    def i_flag(self) -> bool:
        """IRQ disable."""
        return bool(self.value & 0b0000_0100)

    def z_flag(self) -> bool:
        """Zero."""
        return bool(self.value & 0b0000_0010)

    def c_flag(self) -> bool:
        """Carry."""
        return bool(self.value & 0b0000_0001)