import pytest

from smwkit.registers import PRegister

FLAGS = ["c_flag", "z_flag", "i_flag", "d_flag", "x_flag", "m_flag", "v_flag", "n_flag"]


def _states(reg):
    return [
        reg.c_flag(),
        reg.z_flag(),
        reg.i_flag(),
        reg.d_flag(),
        reg.x_flag(),
        reg.m_flag(),
        reg.v_flag(),
        reg.n_flag(),
    ]


@pytest.mark.parametrize("bit", range(8))
def test_each_bit_sets_only_its_flag(bit):
    reg = PRegister(1 << bit)
    states = [getattr(reg, name)() for name in FLAGS]
    assert states == [i == bit for i in range(8)]


def test_default_power_on_state_sets_m_and_x():
    reg = PRegister(0b0011_0000)
    assert reg.m_flag() is True
    assert reg.x_flag() is True
    assert reg.n_flag() is False
    assert reg.c_flag() is False


def test_all_bits_set():
    reg = PRegister(0xFF)
    assert reg.n_flag() is True
    assert reg.c_flag() is True
    assert _states(reg) == [True] * 8


def test_no_bits_set():
    reg = PRegister()
    assert reg.n_flag() is False
    assert reg.c_flag() is False
    assert _states(reg) == [False] * 8


def test_ordering_follows_value():
    assert PRegister(0x10) < PRegister(0x20)
    assert sorted([PRegister(3), PRegister(1)]) == [PRegister(1), PRegister(3)]


@pytest.mark.parametrize("value", [-1, 0x100])
def test_out_of_range_rejected(value):
    with pytest.raises(ValueError):
        PRegister(value)