import numpy as np
import pytest

from colorspace import Color, Rgb, Hsl, Hsb, Cmyk
from colorspace.conversions.hue_human import human_hue_distance
from colorspace.errors import (
    InvalidQuantumError, UnknownNamedColorError, UnparseableColorError,
)
from colorspace.types.color_types import ModelState


def close(a, b, tol=1e-9):
    return all(abs(x - y) < tol for x, y in zip(a, b))


## Arithmetic

def test_add_clamps():
    color = Rgb(0.5, 0.25, 0.0, 0.5)
    color.add(Rgb(0.75, 0.25, 0.5, 0.25))
    assert color.rgba == (1.0, 0.5, 0.5, 0.75)

def test_blend_with_transparent_mix():
    red = Rgb(1.0, 0.0, 0.0)
    clear_blue = Rgb(0.0, 0.0, 1.0, 0.0)
    mixed = red.blend(clear_blue, 0.5)
    assert mixed.rgba == (0.5, 0.0, 0.5, 1.0)

def test_blend_with_opaque_mix_is_unchanged():
    red = Rgb(1.0, 0.0, 0.0)
    blue = Rgb(0.0, 0.0, 1.0)
    assert red.blend(blue, 0.5).rgba == red.rgba

def test_blend_alpha():
    red = Rgb(1.0, 0.0, 0.0)
    assert red.blend(Rgb(0.0, 0.0, 1.0), 0.25, True).rgba == (0.75, 0.0, 0.25, 1.0)
    assert red.blend(Rgb(0.0, 0.0, 1.0, 0.0), 0.5, True).rgba == (0.5, 0.0, 0.5, 0.5)

def test_blend_ratio_is_absolute_and_capped():
    red = Rgb(1.0, 0.0, 0.0)
    clear_blue = Rgb(0.0, 0.0, 1.0, 0.0)
    assert red.blend(clear_blue, -0.5).rgba == red.blend(clear_blue, 0.5).rgba
    assert red.blend(clear_blue, 2).rgba == (0.0, 0.0, 1.0, 1.0)

def test_blend_keeps_class_and_operands():
    hsl = Hsl(Rgb(1.0, 0.0, 0.0))
    mix = Rgb(0.0, 0.0, 1.0, 0.0)
    result = hsl.blend(mix, 0.5)
    assert isinstance(result, Hsl)
    assert result is not hsl
    assert hsl.rgba == (1.0, 0.0, 0.0, 1.0)
    assert mix.rgba == (0.0, 0.0, 1.0, 0.0)

def test_delta():
    start = Rgb(0.2, 0.4, 0.6, 1.0)
    end = Rgb(0.6, 0.8, 1.0, 1.0)
    step = start.delta(end, 4)
    assert isinstance(step, Rgb)
    assert close(step.rgba, (0.1, 0.1, 0.1, 0.0))
    assert start.rgba == (0.2, 0.4, 0.6, 1.0)

def test_delta_clamps_negative_steps():
    step = Rgb(0.6, 0.8, 1.0).delta(Rgb(0.2, 0.4, 0.6))
    assert step.rgba == (0.0, 0.0, 0.0, 0.0)

def test_posterize():
    assert Rgb(0.75, 0.25, 1.0).posterize(2).rgba == (1.0, 0.0, 1.0, 1.0)
    result = Rgb(0.3, 0.6, 0.9, 0.5).posterize(4)
    assert close(result.rgba, (1 / 3, 2 / 3, 1.0, 0.5))
    assert Rgb(0.75, 0.25, 1.0).posterize(0.5).rgba == (1.0, 0.0, 1.0, 1.0)

def test_posterize_single_band_is_gray():
    result = Hsb(0.2, 1.0, 1.0, 0.3).posterize(1)
    assert isinstance(result, Hsb)
    assert result.rgba == (0.5, 0.5, 0.5, 0.3)

def test_posterize_invalid_quantum():
    for quantum in (0, -1, -0.5):
        with pytest.raises(InvalidQuantumError):
            Rgb(0.5, 0.5, 0.5).posterize(quantum)

def test_hue_distance():
    red = Rgb(1.0, 0.0, 0.0)
    cyan = Rgb(0.0, 1.0, 1.0)
    assert red.hue_distance(red) == 0.0
    distance = red.hue_distance(cyan)
    assert 0.0 < distance <= 1.0
    assert distance == cyan.hue_distance(red)
    assert distance == human_hue_distance(red.hue, cyan.hue)

def test_running_sum():
    color = Rgb(1.0, 0.5, 0.0, 0.5)
    total = [0.0, 0.0, 0.0, 0.0]
    assert color.running_sum(total, 2) is total
    color.running_sum(total)
    assert total == [3.0, 1.5, 0.0, 1.5]

    array = np.zeros(4)
    color.running_sum(array, 0.5)
    assert np.allclose(array, [0.5, 0.25, 0.0, 0.25])


## Packed integers and hex

def test_rgba_to_int():
    assert Color.rgba_to_int(1.0, 0.0, 0.0, 1.0) == 0xFFFF0000
    assert Rgb.rgba_to_int(0.0, 0.5, 0.0, 0.0) == 0x00008000
    assert Rgb.rgba_to_int() == 0xFF000000

def test_to_rgba_int():
    color = Rgb(1.0, 0.0, 0.0)
    assert color.to_rgba_int() == 0xFFFF0000
    assert color.to_rgba_int(False) == 0x00FF0000

def test_set_rgba_int():
    color = Rgb()
    color.set_rgba_int(0x80FF8000)
    assert color.rgba == (1.0, 128 / 255, 0.0, 128 / 255)
    assert color.to_rgba_int() == 0x80FF8000

def test_set_hex():
    color = Rgb(0.0, 0.0, 0.0, 0.5)
    color.set_hex('12 34 56')
    assert color.to_hex() == '123456'
    assert color.alpha == 0.5
    for text in ('#12345', '', '#1234567'):
        with pytest.raises(UnparseableColorError):
            color.set_hex(text)
    assert color.to_hex() == '123456'

def test_set_named_color_unknown():
    color = Rgb(0.5, 0.5, 0.5)
    with pytest.raises(UnknownNamedColorError):
        color.set_named_color('notacolor')
    assert color.rgba == (0.5, 0.5, 0.5, 1.0)


## Conversion between models

def test_convert():
    red = Rgb(1.0, 0.0, 0.0, 0.5)
    hsb = red.convert('HSV')
    assert isinstance(hsb, Hsb)
    assert hsb.rgba == red.rgba
    assert (hsb.hue, hsb.saturation, hsb.brightness) == (0.0, 1.0, 1.0)
    cmyk = hsb.convert('cmyk')
    assert isinstance(cmyk, Cmyk)
    assert cmyk.black == 0.0
    assert isinstance(cmyk.convert('rgb'), Rgb)
    with pytest.raises(ValueError):
        red.convert('lab')

def test_converted_models_agree(random_rgb):
    for r, g, b in random_rgb[:50]:
        source = Rgb(float(r), float(g), float(b))
        for space in ('hsl', 'hsb', 'cmyk'):
            color = source.convert(space)
            assert color.to_css_hex() == source.to_css_hex()
            rebuilt = type(color)(*color._native_values())
            assert close(rebuilt.rgba, source.rgba, 1e-6)

def test_copy_is_independent():
    hsl = Hsl(0.5, 0.5, 0.5, 0.5)
    clone = hsl.copy()
    assert isinstance(clone, Hsl)
    assert clone.state is ModelState.NATIVE_FRESH
    clone.set_lightness(0.9)
    assert hsl.lightness == 0.5
    assert clone.alpha == 0.5
