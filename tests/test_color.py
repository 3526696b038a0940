import pytest

from smwkit.color import ABGR1555_SIZE, Abgr1555, Rgba32


def test_named_constants_match_bit_layout():
    white = Abgr1555.from_rgba32(Rgba32(1.0, 1.0, 1.0, 1.0))
    magenta = Abgr1555.from_rgba32(Rgba32(1.0, 0.0, 1.0, 1.0))
    assert white.value == 0b0_11111_11111_11111
    assert magenta.value == 0b0_11111_00000_11111
    assert white == Abgr1555.WHITE
    assert magenta == Abgr1555.MAGENTA


def test_defaults_are_transparent():
    assert Abgr1555() == Abgr1555.TRANSPARENT
    assert Rgba32() == Rgba32.TRANSPARENT


@pytest.mark.parametrize("name", ["TRANSPARENT", "BLACK", "WHITE", "RED", "GREEN", "BLUE"])
def test_named_colours_correspond(name):
    packed = getattr(Abgr1555, name)
    floating = getattr(Rgba32, name)
    assert Rgba32.from_abgr1555(packed) == floating
    assert Abgr1555.from_rgba32(floating) == packed


def test_round_trip_every_packed_value():
    for value in range(0x10000):
        colour = Abgr1555(value)
        assert Abgr1555.from_rgba32(Rgba32.from_abgr1555(colour)) == colour


def test_channels_stay_in_unit_range():
    for value in range(0, 0x10000, 97):
        rgba = Rgba32.from_abgr1555(Abgr1555(value))
        assert all(0.0 <= c <= 1.0 for c in rgba.as_tuple())


def test_negative_channel_saturates_to_zero():
    assert Abgr1555.from_rgba32(Rgba32(-1.0, 0.0, 0.0, 1.0)) == Abgr1555.BLACK


def test_partial_alpha_truncates_to_transparent():
    assert Abgr1555.from_rgba32(Rgba32(0.0, 0.0, 0.0, 0.5)) == Abgr1555.TRANSPARENT


def test_as_array_and_tuple():
    colour = Rgba32(0.25, 0.5, 0.75, 1.0)
    assert colour.as_array() == [0.25, 0.5, 0.75, 1.0]
    assert colour.as_tuple() == (0.25, 0.5, 0.75, 1.0)
    assert Rgba32(*colour.as_array()) == colour


def test_out_of_range_value_rejected():
    with pytest.raises(ValueError):
        Abgr1555(0x10000)


def test_packed_size_fits_two_bytes():
    assert Abgr1555.WHITE.value.to_bytes(ABGR1555_SIZE, "little") == b"\xff\x7f"