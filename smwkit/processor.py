"""The slice of processor state tracked during disassembly."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from smwkit.instruction import Instruction
from smwkit.opcodes import Mnemonic
from smwkit.registers import PRegister

_log = logging.getLogger(__name__)


@dataclass
class Processor:
    """Status register and the stack of pushed status values."""

    p_reg: PRegister = field(default_factory=lambda: PRegister(0b0011_0000))
    stack: list[int] = field(default_factory=list)

    def execute(self, instr: Instruction) -> None:
        """Apply the instruction's effect on the status register."""
        mnemonic = instr.opcode.mnemonic
        if mnemonic is Mnemonic.SEP:
            self.p_reg = PRegister(self.p_reg.value | instr.operands()[0])
        elif mnemonic is Mnemonic.REP:
            self.p_reg = PRegister(self.p_reg.value & ~instr.operands()[0] & 0xFF)
        elif mnemonic is Mnemonic.PHP:
            self.stack.append(self.p_reg.value)
        elif mnemonic is Mnemonic.PLP:
            if self.stack:
                self.p_reg = PRegister(self.stack.pop())
            else:
                _log.error("Stack underflow at %#x (%s)", instr.offset, mnemonic)