"""Known jump tables in the ROM and decoding of their pointer lists."""

from __future__ import annotations

from dataclasses import dataclass

EXECUTE_PTR_TRAMPOLINE_ADDR = 0x0086DF
"""SNES address of the trampoline that dispatches through a 16-bit pointer table."""

EXECUTE_PTR_LONG_TRAMPOLINE_ADDR = 0x0086FA
"""SNES address of the trampoline that dispatches through a 24-bit pointer table."""


@dataclass(frozen=True)
class JumpTableView:
    """Location and shape of a pointer table that follows a trampoline call."""

    begin: int
    length: int
    """Number of pointers (16-bit or 24-bit), not bytes."""
    long_ptrs: bool = False

    @property
    def pointer_size(self) -> int:
        return 3 if self.long_ptrs else 2

    def byte_size(self) -> int:
        """Size of the table in bytes."""
        return self.length * self.pointer_size

    def parse_pointers(self, data: bytes) -> list[int]:
        """Decode the table's pointers from the bytes found at its location.

        Short pointers take the bank of the table itself.
        """
        size = self.byte_size()
        if size == 0:
            raise ValueError("jump table holds no pointers")
        if len(data) < size:
            raise ValueError(
                f"jump table at ${self.begin:06X} needs {size} bytes, got {len(data)}"
            )
        step = self.pointer_size
        bank = self.begin & 0xFF0000
        pointers = [
            int.from_bytes(data[start:start + step], "little")
            for start in range(0, size, step)
        ]
        if self.long_ptrs:
            return pointers
        return [pointer | bank for pointer in pointers]


JUMP_TABLES: tuple[JumpTableView, ...] = (
    JumpTableView(0x009329, 0x2A, False),  # Game mode loaders
    JumpTableView(0x009B8D, 0x02, False),
    JumpTableView(0x00BFC9, 0x1B, False),  # Tile generators
    JumpTableView(0x00C599, 0x0E, False),  # Animation sequences
    JumpTableView(0x018137, 0x0D, False),  # Sprite statuses
    JumpTableView(0x01817D, 0xC9, False),  # Sprite inits
    JumpTableView(0x0185CC, 0xC9, False),  # Sprite mains
    JumpTableView(0x01AEBD, 0x03, False),  # Thwomp states
    JumpTableView(0x01BDEA, 0x04, False),  # Magikoopa states
    JumpTableView(0x01C554, 0x06, False),  # Power up handlers
    JumpTableView(0x01CE12, 0x06, False),  # Morton 1
    JumpTableView(0x01CE65, 0x03, False),  # Morton 2
    JumpTableView(0x01CE72, 0x03, False),
    JumpTableView(0x01D11D, 0x02, False),  # Morton 3
    JumpTableView(0x01D762, 0x03, False),
    JumpTableView(0x01E2D8, 0x04, False),
    JumpTableView(0x01F0CB, 0x04, False),
    JumpTableView(0x01FAC7, 0x07, False),  # Koopa kids
    JumpTableView(0x028B98, 0x0C, False),
    JumpTableView(0x029062, 0x08, False),  # Bounce sprite
    JumpTableView(0x0296CB, 0x06, False),
    JumpTableView(0x029B2B, 0x13, False),  # Extended sprites
    JumpTableView(0x02B00C, 0x0F, False),  # Generator sprites
    JumpTableView(0x02B3B0, 0x03, False),  # Shooter sprites
    JumpTableView(0x02BD64, 0x02, False),  # Urchin pointers (maybe)
    JumpTableView(0x02C02A, 0x02, False),  # Rip Van Fish
    JumpTableView(0x02C33C, 0x0D, False),  # Chuck pointers
    JumpTableView(0x02CDF8, 0x03, False),  # Green peas
    JumpTableView(0x02D40F, 0x05, False),  # Layer3 smash
    JumpTableView(0x02DCE1, 0x04, False),  # Sumo Bro
    JumpTableView(0x02DFC2, 0x03, False),  # Volcano Lotus
    JumpTableView(0x02E136, 0x03, False),  # Jumping Piranha
    JumpTableView(0x02E747, 0x02, False),  # Fish
    JumpTableView(0x02E963, 0x05, False),  # Pipe Lakitu
    JumpTableView(0x02EB83, 0x03, False),  # Super Koopa
    JumpTableView(0x02F337, 0x02, False),  # Birds
    JumpTableView(0x02F825, 0x09, False),
    JumpTableView(0x0380B0, 0x07, False),  # Boo Boss
    JumpTableView(0x0388D9, 0x03, False),  # Swooper (bat)
    JumpTableView(0x038A4C, 0x04, False),  # Bowser Statue
    JumpTableView(0x039248, 0x02, False),  # Falling Spike
    JumpTableView(0x039438, 0x04, False),  # Wooden Spike
    JumpTableView(0x039726, 0x02, False),  # Fishbone
    JumpTableView(0x039C66, 0x04, False),  # Rhino state
    JumpTableView(0x039F4C, 0x05, False),  # Blargg
    JumpTableView(0x03A32C, 0x0A, False),  # Bowser boss fight
    JumpTableView(0x03AD27, 0x08, False),  # Princess Peach
    JumpTableView(0x03C81C, 0x04, False),  # Fireworks
    JumpTableView(0x03CC29, 0x07, False),  # Pipe Koopa
    JumpTableView(0x04857D, 0x0D, True),
    JumpTableView(0x04DAF8, 0x08, False),
    JumpTableView(0x04E577, 0x08, False),
    JumpTableView(0x04F3EA, 0x08, False),
    JumpTableView(0x04F85F, 0x0B, False),  # Overworld sprites (?)
    JumpTableView(0x058823, 0x20, True),
    JumpTableView(0x05888C, 0x20, True),
    JumpTableView(0x0588F5, 0x20, True),
    JumpTableView(0x05895E, 0x20, True),
    JumpTableView(0x05BC87, 0x0F, False),  # Screen scrolling modes, Layer2 behaviour
    JumpTableView(0x05BCB8, 0x0F, False),
    JumpTableView(0x05BCF0, 0x0F, False),  # Screen scrolling modes, Layer2 behaviour
    JumpTableView(0x05BD17, 0x0F, False),
    JumpTableView(0x05CC0E, 0x04, False),
    JumpTableView(0x05DAFF, 0x03, True),
    JumpTableView(0x0CA1DE, 0x05, True),
    JumpTableView(0x0CC9A5, 0x07, False),
    JumpTableView(0x0CC9C0, 0x06, False),
    JumpTableView(0x0CC9D6, 0x05, False),
    JumpTableView(0x0CC9F0, 0x0A, False),
    JumpTableView(0x0CCA1F, 0x08, False),
    JumpTableView(0x0CCA49, 0x04, False),
    JumpTableView(0x0CCA6E, 0x02, False),
    JumpTableView(0x0CCA79, 0x05, False),
    JumpTableView(0x0DA10F, 0x100, True),  # Non-tileset-specific object loaders
    JumpTableView(0x0DA41E, 0x0F, True),  # Object loaders per tileset
    JumpTableView(0x0DA455, 0x3F, True),  # Tileset 0 (Normal or Cloud/Forest)
    JumpTableView(0x0DAB50, 0x0A, True),  # Slope objects
    JumpTableView(0x0DC19A, 0x3F, True),  # Tileset 1 (Castle)
    JumpTableView(0x0DC34A, 0x02, True),  # Conveyor objects
    JumpTableView(0x0DCD9A, 0x3F, True),  # Tileset 2 (Rope)
    JumpTableView(0x0DCF5C, 0x06, True),  # Track objects
    JumpTableView(0x0DD07A, 0x02, True),  # Very steep track objects
    JumpTableView(0x0DD99A, 0x3F, True),  # Tileset 3 (Underground)
    JumpTableView(0x0DDAFA, 0x04, True),  # Mud/lava slope objects
    JumpTableView(0x0DDD93, 0x02, True),  # Very steep slope objects
    JumpTableView(0x0DE89A, 0x3F, True),  # Tileset 4 (Ghost House or Switch Palace)
)

NON_CODE_JUMP_ADDRESSES: frozenset[int] = frozenset({0x01E41F})
"""Jump table targets that are known not to be code."""


def find_jump_table(begin: int) -> JumpTableView | None:
    """Return the known jump table starting at the SNES address, if any."""
    return next((table for table in JUMP_TABLES if table.begin == begin), None)