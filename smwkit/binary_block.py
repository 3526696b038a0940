"""Classified regions of a ROM: code, data and the rest."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum, auto

from smwkit.errors import InstructionParseError
from smwkit.instruction import Instruction
from smwkit.processor import Processor


class DataKind(Enum):
    """What a data region holds."""

    EMPTY = auto()
    GRAPHICS = auto()
    INTERNAL_ROM_HEADER = auto()
    JUMP_TABLE = auto()
    LEVEL_BACKGROUND_LAYER = auto()
    LEVEL_OBJECT_LAYER = auto()
    LEVEL_SPRITE_LAYER = auto()
    MUSIC = auto()
    OVERWORLD_LAYER1 = auto()
    OVERWORLD_LAYER2 = auto()
    OVERWORLD_SPRITE_LAYER = auto()
    SOUND_SAMPLE = auto()
    TEXT = auto()
    UNKNOWN = auto()


@dataclass
class DataBlock:
    """A region of non-code bytes."""


@dataclass
class CodeBlock:
    """A straight run of instructions ending at the first flow change."""

    instructions: list[Instruction] = field(default_factory=list)
    exits: list[int] = field(default_factory=list)
    entrances: list[int] = field(default_factory=list)
    entry_processor_state: Processor = field(default_factory=Processor)
    final_processor_state: Processor = field(default_factory=Processor)

    @classmethod
    def from_bytes(
        cls, base: int, data: bytes, processor: Processor
    ) -> tuple[CodeBlock, int]:
        """Decode a block starting at PC address ``base``.

        ``processor`` is advanced through the block. Returns the block and the
        address of the first byte after it.
        """
        entry_state = copy.deepcopy(processor)
        view = memoryview(bytes(data))
        instructions: list[Instruction] = []
        addr = base
        pos = 0
        while True:
            try:
                instr = Instruction.parse(view[pos:], addr, processor.p_reg)
            except InstructionParseError:
                break
            instructions.append(instr)
            size = instr.opcode.instruction_size()
            pos += size
            addr += size
            processor.execute(instr)
            if instr.can_change_program_counter():
                break
        block = cls(
            instructions=instructions,
            entry_processor_state=entry_state,
            final_processor_state=copy.deepcopy(processor),
        )
        return block, addr

    def recalculate_final_processor_state(self) -> None:
        """Replay the instructions from the entry state to refresh the final state."""
        processor = copy.deepcopy(self.entry_processor_state)
        for instr in self.instructions:
            processor.execute(instr)
        self.final_processor_state = processor


@dataclass
class BinaryBlock:
    """A classified ROM region; code and data regions carry their contents."""

    class Kind(Enum):
        CODE = "Code"
        DATA = "Data"
        UNUSED = "Unused"
        UNKNOWN = "Unknown"
        END_OF_ROM = "End of ROM"

    kind: BinaryBlock.Kind
    content: CodeBlock | DataBlock | None = None

    def __post_init__(self) -> None:
        expected = {
            BinaryBlock.Kind.CODE: CodeBlock,
            BinaryBlock.Kind.DATA: DataBlock,
        }.get(self.kind)
        if expected is None:
            if self.content is not None:
                raise ValueError(f"{self.kind.value} block carries no content")
        elif not isinstance(self.content, expected):
            raise ValueError(f"{self.kind.value} block needs a {expected.__name__}")

    def type_name(self) -> str:
        return self.kind.value

    def code_block(self) -> CodeBlock | None:
        return self.content if self.kind is BinaryBlock.Kind.CODE else None

    def data_block(self) -> DataBlock | None:
        return self.content if self.kind is BinaryBlock.Kind.DATA else None