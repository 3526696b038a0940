"""Decoding and rendering of single 65816 instructions."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from smwkit.errors import InstructionParseError
from smwkit.jump_tables import (
    EXECUTE_PTR_LONG_TRAMPOLINE_ADDR,
    EXECUTE_PTR_TRAMPOLINE_ADDR,
)
from smwkit.opcodes import SNES_OPCODES, AddressingMode, Mnemonic, Opcode
from smwkit.registers import PRegister

_log = logging.getLogger(__name__)

_A = AddressingMode
_M = Mnemonic

_IMMEDIATE_JUMP_MODES = frozenset({_A.ADDRESS, _A.LONG, _A.RELATIVE8, _A.RELATIVE16})
_UNCONDITIONAL = frozenset({_M.BRA, _M.BRL, _M.JMP, _M.JML, _M.JSR, _M.JSL})
_CONDITIONAL = frozenset({_M.BCC, _M.BCS, _M.BEQ, _M.BMI, _M.BNE, _M.BPL, _M.BVC, _M.BVS})
_RETURNS_AND_INTERRUPTS = frozenset({_M.RTS, _M.RTL, _M.RTI, _M.BRK, _M.COP})
_RETURNING_CALLS = frozenset({_M.JSR, _M.JSL, _M.BRK, _M.COP})
_TRAMPOLINES = frozenset({EXECUTE_PTR_TRAMPOLINE_ADDR, EXECUTE_PTR_LONG_TRAMPOLINE_ADDR})


def _signed(value: int, bits: int) -> int:
    sign = 1 << (bits - 1)
    return (value ^ sign) - sign


@dataclass(frozen=True)
class Instruction:
    """A decoded instruction together with the M and X flags it was decoded under."""

    offset: int
    opcode: Opcode
    m_flag: bool
    x_flag: bool
    operand_bytes: bytes = b""

    @classmethod
    def parse(cls, data: bytes, offset: int, p_reg: PRegister) -> Instruction:
        """Decode the instruction at the start of ``data``.

        Flag-dependent immediate modes are resolved from ``p_reg``. The number of
        bytes consumed is ``opcode.instruction_size()`` of the result.
        """
        Kind = InstructionParseError.Kind
        if len(data) == 0:
            raise InstructionParseError(Kind.INPUT_EMPTY)
        raw = data[0]
        opcode = SNES_OPCODES[raw]
        if opcode.mode is _A.IMMEDIATE_M_FLAG_DEPENDENT:
            mode = _A.IMMEDIATE8 if p_reg.m_flag() else _A.IMMEDIATE16
            opcode = Opcode(opcode.mnemonic, mode)
        elif opcode.mode is _A.IMMEDIATE_X_FLAG_DEPENDENT:
            mode = _A.IMMEDIATE8 if p_reg.x_flag() else _A.IMMEDIATE16
            opcode = Opcode(opcode.mnemonic, mode)

        size = opcode.mode.operands_size()
        if len(data) - 1 < size:
            raise InstructionParseError(Kind.INPUT_TOO_SHORT, raw)
        return cls(
            offset=offset,
            opcode=opcode,
            m_flag=p_reg.m_flag(),
            x_flag=p_reg.x_flag(),
            operand_bytes=bytes(data[1:1 + size]),
        )

    def operands(self) -> bytes:
        """The operand bytes following the opcode byte."""
        return self.operand_bytes

    def _byte(self, index: int) -> int:
        return self.operand_bytes[index] if index < len(self.operand_bytes) else 0

    def _word(self) -> int:
        return self._byte(0) | (self._byte(1) << 8)

    def intermediate_address(self, offset_snes: int) -> int:
        """The address the operand refers to, given the instruction's SNES address."""
        mode = self.opcode.mode
        if _A.DIRECT_PAGE <= mode <= _A.DIRECT_PAGE_Y_INDEX or mode in (
            _A.DIRECT_PAGE_S_INDEX,
            _A.DIRECT_PAGE_S_INDEX_INDIRECT_Y_INDEX,
        ):
            return self._byte(0)
        if mode in (
            _A.ADDRESS,
            _A.ADDRESS_X_INDEX,
            _A.ADDRESS_Y_INDEX,
            _A.ADDRESS_X_INDEX_INDIRECT,
        ):
            bank = (offset_snes >> 16) & 0xFF
            return (bank << 16) | self._word()
        if mode in (_A.ADDRESS_INDIRECT, _A.ADDRESS_LONG_INDIRECT):
            return self._word()
        if mode in (_A.LONG, _A.LONG_X_INDEX):
            return self._word() | (self._byte(2) << 16)
        if mode in (_A.RELATIVE8, _A.RELATIVE16):
            operand_size = self.opcode.instruction_size() - 1
            program_counter = offset_snes + 1 + operand_size
            bank = program_counter >> 16
            if operand_size == 1:
                jump = _signed(self._byte(0), 8)
            else:
                jump = _signed(self._word(), 16)
            return ((bank << 16) | ((program_counter + jump) & 0xFFFF)) & 0xFFFFFFFF
        return 0

    def next_instructions(self, offset_snes: int) -> list[int]:
        """SNES addresses where execution may continue after this instruction."""
        mnemonic = self.opcode.mnemonic
        is_immediate = self.opcode.mode in _IMMEDIATE_JUMP_MODES
        next_instruction = offset_snes + self.opcode.instruction_size()

        if mnemonic in _UNCONDITIONAL:
            return [self.intermediate_address(offset_snes)] if is_immediate else []
        if mnemonic in _CONDITIONAL:
            if is_immediate:
                return [self.intermediate_address(offset_snes), next_instruction]
            return [next_instruction]
        if mnemonic in _RETURNS_AND_INTERRUPTS:
            # Interrupt handler destinations come from the internal header instead.
            return []
        if self.can_change_program_counter():
            _log.error("Unhandled branching instruction %r at $%06X", self, offset_snes)
            return []
        return [next_instruction]

    def return_instruction(self, offset: int) -> int | None:
        """Where control returns after a called subroutine or interrupt, if it does."""
        if self.opcode.mnemonic in _RETURNING_CALLS:
            return offset + self.opcode.instruction_size()
        return None

    def can_change_program_counter(self) -> bool:
        return self.opcode.mnemonic.can_change_program_counter()

    def is_single_path_leap(self) -> bool:
        return self.opcode.mnemonic.is_single_path_leap()

    def is_double_path(self) -> bool:
        return self.opcode.mnemonic.is_double_path()

    def is_branch_or_jump(self) -> bool:
        return self.opcode.mnemonic.is_branch_or_jump()

    def is_subroutine_call(self) -> bool:
        return self.opcode.mnemonic.is_subroutine_call()

    def is_subroutine_return(self) -> bool:
        return self.opcode.mnemonic.is_subroutine_return()

    def uses_jump_table(self, offset_snes: int) -> bool:
        """Whether the instruction jumps to one of the pointer-table trampolines."""
        return any(target in _TRAMPOLINES for target in self.next_instructions(offset_snes))

    def display_with_flags(self, offset_snes: int) -> str:
        """Assembly text prefixed with the M and X flags, upper case when set."""
        m = "M" if self.m_flag else "m"
        x = "X" if self.x_flag else "x"
        return f"[{m}{x}] {self.display(offset_snes)}"

    def display(self, offset_snes: int) -> str:
        """Assembly text of the instruction."""
        address = self.intermediate_address(offset_snes)
        long_ = address
        short = address & 0xFFFF
        dp = address & 0xFF
        mode = self.opcode.mode

        if mode is _A.IMPLIED:
            operand = ""
        elif mode is _A.ACCUMULATOR:
            operand = " A"
        elif mode in (_A.CONSTANT8, _A.IMMEDIATE8):
            operand = f" #${self._byte(0):02X}"
        elif mode is _A.IMMEDIATE16:
            operand = f" #${self._word():04X}"
        elif mode in (_A.IMMEDIATE_X_FLAG_DEPENDENT, _A.IMMEDIATE_M_FLAG_DEPENDENT):
            narrow = (mode is _A.IMMEDIATE_X_FLAG_DEPENDENT and self.x_flag) or (
                mode is _A.IMMEDIATE_M_FLAG_DEPENDENT and self.m_flag
            )
            operand = f" #${self._byte(0):02X}" if narrow else f" #${self._word():04X}"
        elif mode is _A.DIRECT_PAGE:
            operand = f" ${dp:02X}"
        elif mode is _A.RELATIVE8:
            operand = f" ${self._byte(0):02X}"
        elif mode is _A.RELATIVE16:
            operand = f" ${self._word():04X}"
        elif mode is _A.ADDRESS:
            operand = f" ${short:04X}"
        elif mode is _A.LONG:
            operand = f" ${long_:06X}"
        elif mode in (_A.DIRECT_PAGE_X_INDEX, _A.ADDRESS_X_INDEX, _A.LONG_X_INDEX):
            operand = f" ${dp:02X}, X"
        elif mode in (_A.DIRECT_PAGE_Y_INDEX, _A.ADDRESS_Y_INDEX):
            operand = f" ${dp:02X}, Y"
        elif mode is _A.DIRECT_PAGE_S_INDEX:
            operand = f" ${dp:02X}, S"
        elif mode is _A.DIRECT_PAGE_INDIRECT:
            operand = f" (${dp:02X})"
        elif mode is _A.ADDRESS_INDIRECT:
            operand = f" (${short:04X})"
        elif mode is _A.DIRECT_PAGE_X_INDEX_INDIRECT:
            operand = f" (${dp:02X}, X)"
        elif mode is _A.ADDRESS_X_INDEX_INDIRECT:
            operand = f" (${short:04X}, X)"
        elif mode is _A.DIRECT_PAGE_INDIRECT_Y_INDEX:
            operand = f" (${dp:02X}), Y"
        elif mode is _A.DIRECT_PAGE_S_INDEX_INDIRECT_Y_INDEX:
            operand = f" (${dp:02X}, S), Y"
        elif mode is _A.DIRECT_PAGE_LONG_INDIRECT:
            operand = f" [${dp:02X}]"
        elif mode is _A.ADDRESS_LONG_INDIRECT:
            operand = f" [${short:04X}]"
        elif mode is _A.DIRECT_PAGE_LONG_INDIRECT_Y_INDEX:
            operand = f" [${dp:02X}], Y"
        else:  # BLOCK_MOVE
            operand = f" ${self._byte(0):02X}, ${self._byte(1):02X}"
        return f"{self.opcode.mnemonic}{operand}"