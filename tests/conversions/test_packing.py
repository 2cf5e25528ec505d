import pytest

from colorspace.conversions.packing import (
    round_half_up, unit_to_int, rgba_to_int, int_to_rgba, unit_to_hex, hex_to_unit_rgb,
)
from colorspace.errors import UnparseableColorError

def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -3
    assert round_half_up(0.49) == 0
    assert round_half_up(127.5) == 128

def test_unit_to_int():
    assert unit_to_int(0.5) == 128
    assert unit_to_int(1.0) == 255
    assert unit_to_int(0.0) == 0

def test_rgba_to_int():
    assert rgba_to_int() == 0xff000000
    assert rgba_to_int(0, 0, 0, 0) == 0
    assert rgba_to_int(0.5, 0.5, 0.5, 0.5) == 0x80808080
    assert rgba_to_int(1, 1, 1, 1) == 0xffffffff
    assert rgba_to_int(1.0, 0.0, 0.0, 0.0) == 0x00ff0000

def test_int_to_rgba():
    assert int_to_rgba(0x80ff0010) == (255, 0, 16, 128)
    assert int_to_rgba(0xff00ff7f) == (0, 255, 127, 255)
    assert int_to_rgba(0) == (0, 0, 0, 0)

def test_unit_to_hex_truncates():
    assert unit_to_hex(0.505) == '80'
    assert unit_to_hex(64 / 255) == '40'
    assert unit_to_hex(1.0) == 'ff'
    assert unit_to_hex(0.0) == '00'
    assert unit_to_hex(0.999) == 'fe'

def test_hex_to_unit_rgb():
    assert hex_to_unit_rgb('#ffffff') == (1.0, 1.0, 1.0)
    assert hex_to_unit_rgb('#abc') == (0xaa / 255, 0xbb / 255, 0xcc / 255)
    assert hex_to_unit_rgb('202020') == (32 / 255, 32 / 255, 32 / 255)
    assert hex_to_unit_rgb('#00FF7F') == (0.0, 1.0, 127 / 255)

def test_hex_ignores_non_hex_characters():
    assert hex_to_unit_rgb('# 20-20-20') == (32 / 255, 32 / 255, 32 / 255)

def test_hex_bad_length():
    for bad in ('#abcd', '#12', '', 'xyz', '#1234567'):
        with pytest.raises(UnparseableColorError):
            hex_to_unit_rgb(bad)
