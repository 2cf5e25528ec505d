import pytest

from colorspace import Cmyk, Rgb
from colorspace.errors import InvalidArgumentsError, InvalidValueError
from ..samples import samples_rgb_cmyk


def test_from_rgb_samples():
    for rgb, expected in samples_rgb_cmyk.items():
        cmyk = Cmyk(Rgb(*rgb))
        result = (cmyk.cyan, cmyk.magenta, cmyk.yellow, cmyk.black)
        assert all(abs(x - y) < 1e-9 for x, y in zip(result, expected))

def test_black_is_computed_first():
    cmyk = Cmyk(Rgb(0.0, 0.0, 0.0))
    assert (cmyk.cyan, cmyk.magenta, cmyk.yellow, cmyk.black) == (0.0, 0.0, 0.0, 1.0)

def test_full_black_ignores_inks():
    cmyk = Cmyk(0.3, 0.6, 0.9, 1.0)
    assert cmyk.rgba == (0.0, 0.0, 0.0, 1.0)

def test_components_are_unit_values():
    cmyk = Cmyk('0.5', '25%', 0.0, 0.1)
    assert cmyk.cyan == 0.5
    assert cmyk.magenta == 0.25
    assert cmyk.black == 0.1
    cmyk = Cmyk(255, 0, 0, 0)
    assert cmyk.cyan == 1.0
    assert cmyk.rgba == (0.0, 1.0, 1.0, 1.0)

def test_setters():
    cmyk = Cmyk()
    assert cmyk.rgba == (1.0, 1.0, 1.0, 1.0)
    cmyk.set_cyan(1.0)
    assert cmyk.rgba == (0.0, 1.0, 1.0, 1.0)
    cmyk.set_black(0.5)
    assert cmyk.rgba == (0.0, 0.5, 0.5, 1.0)
    cmyk.set_yellow('none')
    cmyk.set_magenta(0.0)
    assert cmyk.cyan == 1.0 and cmyk.black == 0.5
    cmyk.black = 0.0
    assert cmyk.rgba == (0.0, 1.0, 1.0, 1.0)

def test_set_cmyka_sequences():
    cmyk = Cmyk()
    cmyk.set_cmyka([0.0, 1.0, 1.0, 0.0, 0.5])
    assert cmyk.rgba == (1.0, 0.0, 0.0, 0.5)
    cmyk.set_cmyk((0.0, 0.0, 0.0, 0.5))
    assert cmyk.rgba == (0.5, 0.5, 0.5, 0.5)
    with pytest.raises(InvalidArgumentsError):
        cmyk.set_cmyk([0.1, 0.2, 0.3])
    with pytest.raises(InvalidArgumentsError):
        Cmyk([0.1, 0.2, 0.3, 0.4, 0.5, 0.6])

def test_failed_setter_changes_nothing():
    cmyk = Cmyk(0.1, 0.2, 0.3, 0.4)
    before = cmyk.rgba
    with pytest.raises(InvalidValueError):
        cmyk.set_cmyk(0.5, 0.5, 'bad', 0.5)
    assert cmyk.rgba == before
    assert cmyk.cyan == 0.1

def test_percent_strings():
    cmyk = Cmyk(Rgb(0.2, 0.4, 0.8))
    assert cmyk.cyan_percent() == '75%'
    assert cmyk.magenta_percent() == '50%'
    assert cmyk.yellow_percent() == '0%'
    assert cmyk.black_percent() == '20%'
    assert cmyk.black_percent(0, ' pct') == '20 pct'
    assert Cmyk(1 / 3, 0, 0, 0).cyan_percent(3) == '33.333%'

def test_to_string():
    assert Cmyk(0.5, 0.25, 0.0, 0.1).to_string() == '50%, 25%, 0%, 10%'
    assert Cmyk(0.0, 0.0, 0.0, 0.5, 0.25).to_string() == '0%, 0%, 0%, 50% / 25%'

def test_round_trip_through_model(random_rgb):
    for r, g, b in random_rgb:
        cmyk = Cmyk(Rgb(float(r), float(g), float(b)))
        copy = Cmyk(cmyk.cyan, cmyk.magenta, cmyk.yellow, cmyk.black)
        assert all(abs(x - y) < 1e-6 for x, y in zip(copy.rgba, cmyk.rgba))
