"""65816 mnemonics, addressing modes and the opcode table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto


class AddressingMode(IntEnum):
    """Operand addressing modes, ordered so that related modes form ranges."""

    ACCUMULATOR = auto()
    ADDRESS = auto()
    ADDRESS_INDIRECT = auto()
    ADDRESS_LONG_INDIRECT = auto()
    ADDRESS_X_INDEX = auto()
    ADDRESS_Y_INDEX = auto()
    ADDRESS_X_INDEX_INDIRECT = auto()
    BLOCK_MOVE = auto()
    CONSTANT8 = auto()
    DIRECT_PAGE = auto()
    DIRECT_PAGE_INDIRECT = auto()
    DIRECT_PAGE_INDIRECT_Y_INDEX = auto()
    DIRECT_PAGE_LONG_INDIRECT = auto()
    DIRECT_PAGE_LONG_INDIRECT_Y_INDEX = auto()
    DIRECT_PAGE_X_INDEX = auto()
    DIRECT_PAGE_X_INDEX_INDIRECT = auto()
    DIRECT_PAGE_Y_INDEX = auto()
    DIRECT_PAGE_S_INDEX = auto()
    DIRECT_PAGE_S_INDEX_INDIRECT_Y_INDEX = auto()
    IMPLIED = auto()
    IMMEDIATE8 = auto()
    IMMEDIATE16 = auto()
    IMMEDIATE_X_FLAG_DEPENDENT = auto()
    IMMEDIATE_M_FLAG_DEPENDENT = auto()
    LONG = auto()
    LONG_X_INDEX = auto()
    RELATIVE8 = auto()
    RELATIVE16 = auto()

    def operands_size(self) -> int:
        """Number of operand bytes that follow the opcode byte."""
        A = AddressingMode
        if self in (A.ACCUMULATOR, A.IMPLIED):
            return 0
        if self in (A.LONG, A.LONG_X_INDEX):
            return 3
        if self in (A.IMMEDIATE16, A.RELATIVE16, A.BLOCK_MOVE):
            return 2
        if A.ADDRESS <= self <= A.ADDRESS_X_INDEX_INDIRECT:
            return 2
        if self in (A.IMMEDIATE_X_FLAG_DEPENDENT, A.IMMEDIATE_M_FLAG_DEPENDENT):
            raise ValueError(
                f"{self.name} must be resolved to IMMEDIATE8 or IMMEDIATE16 "
                "from the processor flags first"
            )
        return 1


class Mnemonic(Enum):
    """65816 instruction mnemonics."""

    ADC = auto()
    AND = auto()
    ASL = auto()
    BCC = auto()
    BCS = auto()
    BEQ = auto()
    BIT = auto()
    BMI = auto()
    BNE = auto()
    BPL = auto()
    BRA = auto()
    BRK = auto()
    BRL = auto()
    BVC = auto()
    BVS = auto()
    CLC = auto()
    CLD = auto()
    CLI = auto()
    CLV = auto()
    CMP = auto()
    CPX = auto()
    CPY = auto()
    COP = auto()
    DEC = auto()
    DEX = auto()
    DEY = auto()
    EOR = auto()
    INC = auto()
    INX = auto()
    INY = auto()
    JMP = auto()
    JML = auto()
    JSR = auto()
    JSL = auto()
    LDA = auto()
    LDX = auto()
    LDY = auto()
    LSR = auto()
    MVN = auto()
    MVP = auto()
    NOP = auto()
    ORA = auto()
    PEA = auto()
    PEI = auto()
    PER = auto()
    PHA = auto()
    PHB = auto()
    PHD = auto()
    PHK = auto()
    PHP = auto()
    PHX = auto()
    PHY = auto()
    PLA = auto()
    PLB = auto()
    PLD = auto()
    PLP = auto()
    PLX = auto()
    PLY = auto()
    REP = auto()
    ROL = auto()
    ROR = auto()
    RTI = auto()
    RTS = auto()
    RTL = auto()
    SBC = auto()
    SEC = auto()
    SED = auto()
    SEI = auto()
    SEP = auto()
    STA = auto()
    STX = auto()
    STY = auto()
    STP = auto()
    STZ = auto()
    TAX = auto()
    TAY = auto()
    TCD = auto()
    TCS = auto()
    TDC = auto()
    TSC = auto()
    TSX = auto()
    TXA = auto()
    TXS = auto()
    TXY = auto()
    TYA = auto()
    TYX = auto()
    TRB = auto()
    TSB = auto()
    WAI = auto()
    WDM = auto()
    XBA = auto()
    XCE = auto()

    def __str__(self) -> str:
        return self.name

    def can_change_program_counter(self) -> bool:
        return self in _PC_CHANGING

    def is_single_path_leap(self) -> bool:
        return self in _SINGLE_PATH_LEAPS

    def is_double_path(self) -> bool:
        return self in _DOUBLE_PATHS

    def is_branch_or_jump(self) -> bool:
        return self in _BRANCHES_AND_JUMPS

    def is_subroutine_call(self) -> bool:
        return self in (Mnemonic.JSR, Mnemonic.JSL)

    def is_subroutine_return(self) -> bool:
        return self in (Mnemonic.RTS, Mnemonic.RTL)


_M = Mnemonic

_PC_CHANGING = frozenset({
    _M.BCC, _M.BCS, _M.BEQ, _M.BMI, _M.BNE, _M.BRK, _M.BPL, _M.BRA, _M.BRL,
    _M.BVC, _M.BVS, _M.COP, _M.JMP, _M.JML, _M.JSR, _M.JSL, _M.RTI, _M.RTS, _M.RTL,
})
_SINGLE_PATH_LEAPS = frozenset({_M.BRA, _M.BRL, _M.JMP, _M.JML, _M.RTS, _M.RTL})
_DOUBLE_PATHS = frozenset({
    _M.BCC, _M.BCS, _M.BEQ, _M.BMI, _M.BNE, _M.BRK, _M.BPL, _M.BVC, _M.JSR, _M.JSL,
})
_BRANCHES_AND_JUMPS = frozenset({
    _M.BCC, _M.BCS, _M.BEQ, _M.BMI, _M.BNE, _M.BRK, _M.BPL, _M.BRA, _M.BRL,
    _M.BVC, _M.BVS, _M.JMP, _M.JML,
})


@dataclass(frozen=True)
class Opcode:
    """A mnemonic paired with its addressing mode."""

    mnemonic: Mnemonic
    mode: AddressingMode

    def instruction_size(self) -> int:
        """Total instruction length in bytes, opcode included."""
        return 1 + self.mode.operands_size()


def _build_opcode_table() -> tuple[Opcode, ...]:
    A = AddressingMode
    M = Mnemonic
    ACC = A.ACCUMULATOR
    ADDR = A.ADDRESS
    ADDR_IND = A.ADDRESS_INDIRECT
    ADDR_LONG_IND = A.ADDRESS_LONG_INDIRECT
    ADDR_X = A.ADDRESS_X_INDEX
    ADDR_Y = A.ADDRESS_Y_INDEX
    ADDR_X_IND = A.ADDRESS_X_INDEX_INDIRECT
    BLOCK = A.BLOCK_MOVE
    CONST8 = A.CONSTANT8
    DP = A.DIRECT_PAGE
    DP_IND = A.DIRECT_PAGE_INDIRECT
    DP_IND_Y = A.DIRECT_PAGE_INDIRECT_Y_INDEX
    DP_LONG_IND = A.DIRECT_PAGE_LONG_INDIRECT
    DP_LONG_IND_Y = A.DIRECT_PAGE_LONG_INDIRECT_Y_INDEX
    DP_X = A.DIRECT_PAGE_X_INDEX
    DP_X_IND = A.DIRECT_PAGE_X_INDEX_INDIRECT
    DP_Y = A.DIRECT_PAGE_Y_INDEX
    DP_S = A.DIRECT_PAGE_S_INDEX
    DP_S_IND_Y = A.DIRECT_PAGE_S_INDEX_INDIRECT_Y_INDEX
    IMP = A.IMPLIED
    IMM_X = A.IMMEDIATE_X_FLAG_DEPENDENT
    IMM_M = A.IMMEDIATE_M_FLAG_DEPENDENT
    LONG = A.LONG
    LONG_X = A.LONG_X_INDEX
    REL8 = A.RELATIVE8
    REL16 = A.RELATIVE16

    rows = [
        # 0x00
        (M.BRK, CONST8), (M.ORA, DP_X_IND), (M.COP, CONST8), (M.ORA, DP_S),
        (M.TSB, DP), (M.ORA, DP), (M.ASL, DP), (M.ORA, DP_LONG_IND),
        (M.PHP, IMP), (M.ORA, IMM_M), (M.ASL, ACC), (M.PHD, IMP),
        (M.TSB, ADDR), (M.ORA, ADDR), (M.ASL, ADDR), (M.ORA, LONG),
        # 0x10
        (M.BPL, REL8), (M.ORA, DP_IND_Y), (M.ORA, DP_IND), (M.ORA, DP_S_IND_Y),
        (M.TRB, DP), (M.ORA, DP_X), (M.ASL, DP_X), (M.ORA, DP_LONG_IND_Y),
        (M.CLC, IMP), (M.ORA, ADDR_Y), (M.INC, ACC), (M.TCS, IMP),
        (M.TRB, ADDR), (M.ORA, ADDR_X), (M.ASL, ADDR_X), (M.ORA, LONG_X),
        # 0x20
        (M.JSR, ADDR), (M.AND, DP_X_IND), (M.JSL, LONG), (M.AND, DP_S),
        (M.BIT, DP), (M.AND, DP), (M.ROL, DP), (M.AND, DP_LONG_IND),
        (M.PLP, IMP), (M.AND, IMM_M), (M.ROL, ACC), (M.PLD, IMP),
        (M.BIT, ADDR), (M.AND, ADDR), (M.ROL, ADDR), (M.AND, LONG),
        # 0x30
        (M.BMI, REL8), (M.AND, DP_IND_Y), (M.AND, DP_IND), (M.AND, DP_S_IND_Y),
        (M.BIT, DP_X), (M.AND, DP_X), (M.ROL, DP_X), (M.AND, DP_LONG_IND_Y),
        (M.SEC, IMP), (M.AND, ADDR_Y), (M.DEC, ACC), (M.TSC, IMP),
        (M.BIT, ADDR_X), (M.AND, ADDR_X), (M.ROL, ADDR_X), (M.AND, LONG_X),
        # 0x40
        (M.RTI, IMP), (M.EOR, DP_X_IND), (M.WDM, CONST8), (M.EOR, DP_S),
        (M.MVP, BLOCK), (M.EOR, DP), (M.LSR, DP), (M.EOR, DP_LONG_IND),
        (M.PHA, IMP), (M.EOR, IMM_M), (M.LSR, ACC), (M.PHK, IMP),
        (M.JMP, ADDR), (M.EOR, ADDR), (M.LSR, ADDR), (M.EOR, LONG),
        # 0x50
        (M.BVC, REL8), (M.EOR, DP_IND_Y), (M.EOR, DP_IND), (M.EOR, DP_S_IND_Y),
        (M.MVN, BLOCK), (M.EOR, DP_X), (M.LSR, DP_X), (M.EOR, DP_LONG_IND_Y),
        (M.CLI, IMP), (M.EOR, ADDR_Y), (M.PHY, IMP), (M.TCD, IMP),
        (M.JML, LONG), (M.EOR, ADDR_X), (M.LSR, ADDR_X), (M.EOR, LONG_X),
        # 0x60
        (M.RTS, IMP), (M.ADC, DP_X_IND), (M.PER, REL16), (M.ADC, DP_S),
        (M.STZ, DP), (M.ADC, DP), (M.ROR, DP), (M.ADC, DP_LONG_IND),
        (M.PLA, IMP), (M.ADC, IMM_M), (M.ROR, ACC), (M.RTL, IMP),
        (M.JMP, ADDR_IND), (M.ADC, ADDR), (M.ROR, ADDR), (M.ADC, LONG),
        # 0x70
        (M.BVS, REL8), (M.ADC, DP_IND_Y), (M.ADC, DP_IND), (M.ADC, DP_S_IND_Y),
        (M.STZ, DP_X), (M.ADC, DP_X), (M.ROR, DP_X), (M.ADC, DP_LONG_IND_Y),
        (M.SEI, IMP), (M.ADC, ADDR_Y), (M.PLY, IMP), (M.TDC, IMP),
        (M.JMP, ADDR_X_IND), (M.ADC, ADDR_X), (M.ROR, ADDR_X), (M.ADC, LONG_X),
        # 0x80
        (M.BRA, REL8), (M.STA, DP_X_IND), (M.BRL, REL16), (M.STA, DP_S),
        (M.STY, DP), (M.STA, DP), (M.STX, DP), (M.STA, DP_LONG_IND),
        (M.DEY, IMP), (M.BIT, IMM_M), (M.TXA, IMP), (M.PHB, IMP),
        (M.STY, ADDR), (M.STA, ADDR), (M.STX, ADDR), (M.STA, LONG),
        # 0x90
        (M.BCC, REL8), (M.STA, DP_IND_Y), (M.STA, DP_IND), (M.STA, DP_S_IND_Y),
        (M.STY, DP_X), (M.STA, DP_X), (M.STX, DP_Y), (M.STA, DP_LONG_IND_Y),
        (M.TYA, IMP), (M.STA, ADDR_Y), (M.TXS, IMP), (M.TXY, IMP),
        (M.STZ, ADDR), (M.STA, ADDR_X), (M.STZ, ADDR_X), (M.STA, LONG_X),
        # 0xA0
        (M.LDY, IMM_X), (M.LDA, DP_X_IND), (M.LDX, IMM_X), (M.LDA, DP_S),
        (M.LDY, DP), (M.LDA, DP), (M.LDX, DP), (M.LDA, DP_LONG_IND),
        (M.TAY, IMP), (M.LDA, IMM_M), (M.TAX, IMP), (M.PLB, IMP),
        (M.LDY, ADDR), (M.LDA, ADDR), (M.LDX, ADDR), (M.LDA, LONG),
        # 0xB0
        (M.BCS, REL8), (M.LDA, DP_IND_Y), (M.LDA, DP_IND), (M.LDA, DP_S_IND_Y),
        (M.LDY, DP_X), (M.LDA, DP_X), (M.LDX, DP_Y), (M.LDA, DP_LONG_IND_Y),
        (M.CLV, IMP), (M.LDA, ADDR_Y), (M.TSX, IMP), (M.TYX, IMP),
        (M.LDY, ADDR_X), (M.LDA, ADDR_X), (M.LDX, ADDR_Y), (M.LDA, LONG_X),
        # 0xC0
        (M.CPY, IMM_X), (M.CMP, DP_X_IND), (M.REP, CONST8), (M.CMP, DP_S),
        (M.CPY, DP), (M.CMP, DP), (M.DEC, DP), (M.CMP, DP_LONG_IND),
        (M.INY, IMP), (M.CMP, IMM_M), (M.DEX, IMP), (M.WAI, IMP),
        (M.CPY, ADDR), (M.CMP, ADDR), (M.DEC, ADDR), (M.CMP, LONG),
        # 0xD0
        (M.BNE, REL8), (M.CMP, DP_IND_Y), (M.CMP, DP_IND), (M.CMP, DP_S_IND_Y),
        (M.PEI, DP_IND), (M.CMP, DP_X), (M.DEC, DP_X), (M.CMP, DP_LONG_IND_Y),
        (M.CLD, IMP), (M.CMP, ADDR_Y), (M.PHX, IMP), (M.STP, IMP),
        (M.JML, ADDR_LONG_IND), (M.CMP, ADDR_X), (M.DEC, ADDR_X), (M.CMP, LONG_X),
        # 0xE0
        (M.CPX, IMM_X), (M.SBC, DP_X_IND), (M.SEP, CONST8), (M.SBC, DP_S),
        (M.CPX, DP), (M.SBC, DP), (M.INC, DP), (M.SBC, DP_LONG_IND),
        (M.INX, IMP), (M.SBC, IMM_M), (M.NOP, IMP), (M.XBA, IMP),
        (M.CPX, ADDR), (M.SBC, ADDR), (M.INC, ADDR), (M.SBC, LONG),
        # 0xF0
        (M.BEQ, REL8), (M.SBC, DP_IND_Y), (M.SBC, DP_IND), (M.SBC, DP_S_IND_Y),
        (M.PEA, ADDR), (M.SBC, DP_X), (M.INC, DP_X), (M.SBC, DP_LONG_IND_Y),
        (M.SED, IMP), (M.SBC, ADDR_Y), (M.PLX, IMP), (M.XCE, IMP),
        (M.JSR, ADDR_X_IND), (M.SBC, ADDR_X), (M.INC, ADDR_X), (M.SBC, LONG_X),
    ]
    table = tuple(Opcode(mnemonic, mode) for mnemonic, mode in rows)
    if len(table) != 0x100:
        raise RuntimeError(f"opcode table has {len(table)} entries")
    return table


SNES_OPCODES: tuple[Opcode, ...] = _build_opcode_table()
"""All 256 opcodes, indexed by opcode byte."""