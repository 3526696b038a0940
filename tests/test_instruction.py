import pytest

from smwkit.errors import InstructionParseError
from smwkit.instruction import Instruction
from smwkit.jump_tables import EXECUTE_PTR_LONG_TRAMPOLINE_ADDR
from smwkit.opcodes import AddressingMode, Mnemonic
from smwkit.registers import PRegister

FLAGS_8BIT = PRegister(0x30)
FLAGS_16BIT = PRegister(0x00)
BANK0 = 0x008000


def test_parse_immediate_8bit_when_m_set():
    instr = Instruction.parse(bytes([0xA9, 0x12, 0xFF]), 0, FLAGS_8BIT)
    assert instr.opcode.mnemonic is Mnemonic.LDA
    assert instr.opcode.mode is AddressingMode.IMMEDIATE8
    assert instr.operands() == b"\x12"
    assert instr.opcode.instruction_size() == 2
    assert instr.display(BANK0) == "LDA #$12"


def test_parse_immediate_16bit_when_m_clear():
    instr = Instruction.parse(bytes([0xA9, 0x34, 0x12]), 0, FLAGS_16BIT)
    assert instr.opcode.mode is AddressingMode.IMMEDIATE16
    assert instr.operands() == b"\x34\x12"
    assert instr.display(BANK0) == "LDA #$1234"


def test_index_immediate_depends_on_x_flag():
    narrow = Instruction.parse(bytes([0xA2, 0x05]), 0, PRegister(0x10))
    wide = Instruction.parse(bytes([0xA2, 0x05, 0x00]), 0, PRegister(0x20))
    assert narrow.opcode.mode is AddressingMode.IMMEDIATE8
    assert wide.opcode.mode is AddressingMode.IMMEDIATE16


def test_flags_are_recorded():
    instr = Instruction.parse(bytes([0xEA]), 7, PRegister(0x20))
    assert instr.m_flag is True
    assert instr.x_flag is False
    assert instr.offset == 7


def test_parse_empty_raises():
    with pytest.raises(InstructionParseError) as info:
        Instruction.parse(b"", 0, FLAGS_8BIT)
    assert info.value.kind is InstructionParseError.Kind.INPUT_EMPTY


def test_parse_too_short_raises():
    with pytest.raises(InstructionParseError) as info:
        Instruction.parse(bytes([0xA9, 0x01]), 0, FLAGS_16BIT)
    assert info.value.kind is InstructionParseError.Kind.INPUT_TOO_SHORT
    assert info.value.details == (0xA9,)


def test_jsr_target_in_current_bank():
    instr = Instruction.parse(bytes([0x20, 0x34, 0x12]), 0, FLAGS_8BIT)
    assert instr.next_instructions(BANK0) == [0x1234]
    assert instr.is_subroutine_call()
    assert instr.return_instruction(BANK0) == BANK0 + instr.opcode.instruction_size()


def test_branch_to_itself():
    instr = Instruction.parse(bytes([0xD0, 0xFE]), 0, FLAGS_8BIT)
    targets = instr.next_instructions(BANK0)
    assert targets[0] == BANK0
    assert targets[1] == BANK0 + 2


def test_branch_forward_displacement():
    instr = Instruction.parse(bytes([0xF0, 0x02]), 0, FLAGS_8BIT)
    taken, fallthrough = instr.next_instructions(BANK0)
    assert taken - fallthrough == 2


def test_long_branch_to_itself():
    instr = Instruction.parse(bytes([0x82, 0xFD, 0xFF]), 0, FLAGS_8BIT)
    assert instr.next_instructions(BANK0) == [BANK0]
    assert instr.is_single_path_leap()


def test_returns_have_no_successors():
    instr = Instruction.parse(bytes([0x60]), 0, FLAGS_8BIT)
    assert instr.next_instructions(BANK0) == []
    assert instr.is_subroutine_return()
    assert instr.return_instruction(BANK0) is None


def test_plain_instruction_falls_through():
    instr = Instruction.parse(bytes([0xA5, 0x42]), 0, FLAGS_8BIT)
    assert instr.next_instructions(BANK0) == [BANK0 + instr.opcode.instruction_size()]
    assert not instr.can_change_program_counter()
    assert instr.intermediate_address(BANK0) == 0x42


def test_indirect_jump_has_no_known_target():
    instr = Instruction.parse(bytes([0x6C, 0x00, 0x10]), 0, FLAGS_8BIT)
    assert instr.next_instructions(BANK0) == []


def test_uses_jump_table_for_trampoline_calls():
    target = EXECUTE_PTR_LONG_TRAMPOLINE_ADDR.to_bytes(3, "little")
    jsl = Instruction.parse(bytes([0x22]) + target, 0, FLAGS_8BIT)
    assert jsl.uses_jump_table(BANK0)
    plain = Instruction.parse(bytes([0x20, 0x00, 0x90]), 0, FLAGS_8BIT)
    assert not plain.uses_jump_table(BANK0)


@pytest.mark.parametrize(
    "data, text",
    [
        (bytes([0x60]), "RTS"),
        (bytes([0x0A]), "ASL A"),
        (bytes([0x8D, 0x34, 0x12]), "STA $1234"),
        (bytes([0xAF, 0x56, 0x34, 0x12]), "LDA $123456"),
        (bytes([0x54, 0x7E, 0x7F]), "MVN $7E, $7F"),
        (bytes([0xB1, 0x10]), "LDA ($10), Y"),
        (bytes([0xB7, 0x10]), "LDA [$10], Y"),
    ],
)
def test_display(data, text):
    instr = Instruction.parse(data, 0, FLAGS_8BIT)
    assert instr.display(BANK0) == text


def test_display_with_flags():
    upper = Instruction.parse(bytes([0xEA]), 0, FLAGS_8BIT)
    lower = Instruction.parse(bytes([0xEA]), 0, FLAGS_16BIT)
    assert upper.display_with_flags(BANK0) == "[MX] NOP"
    assert lower.display_with_flags(BANK0) == "[mx] NOP"