import numpy as np
import pytest

from colorspace.conversions import convert, np_convert, SPACE_CHANNELS
from ..samples import samples_rgb_hsv, samples_rgb_hsl, samples_rgb_cmyk, CHANNEL_TOL

def test_convert_returns_tuple():
    result = convert((1.0, 0.5, 0.25), "rgb", "hsv")
    assert isinstance(result, tuple)
    assert len(result) == 3

def test_convert_samples():
    for rgb, hsv in samples_rgb_hsv.items():
        assert np.allclose(convert(rgb, "rgb", "hsb"), hsv, atol=CHANNEL_TOL)
    for rgb, hsl in samples_rgb_hsl.items():
        assert np.allclose(convert(rgb, "rgb", "hsl"), hsl, atol=CHANNEL_TOL)
    for rgb, cmyk in samples_rgb_cmyk.items():
        assert np.allclose(convert(rgb, "RGB", "cmyk"), cmyk, atol=CHANNEL_TOL)

def test_convert_between_non_rgb_spaces():
    result = convert((0.5, 1.0, 0.5), "hsl", "hsb")
    assert np.allclose(result, (0.5, 1.0, 1.0))
    result = convert((0.0, 1.0, 1.0, 0.0), "cmyk", "hsl")
    assert np.allclose(result, (0.5, 1.0, 0.5))

def test_convert_carries_alpha():
    result = convert((1.0, 0.0, 0.0, 0.25), "rgb", "cmyk")
    assert len(result) == 5
    assert result[-1] == 0.25
    result = convert((0.0, 1.0, 0.5, 0.75), "hsl", "rgb")
    assert np.allclose(result, (1.0, 0.0, 0.0, 0.75))

def test_convert_same_space_is_identity():
    assert convert((0.1, 0.2, 0.3), "hsl", "hsl") == (0.1, 0.2, 0.3)
    assert convert((0.1, 0.2, 0.3), "hsv", "hsb") == (0.1, 0.2, 0.3)

def test_convert_rejects_bad_input():
    with pytest.raises(ValueError):
        convert((0.1, 0.2, 0.3), "rgb", "lab")
    with pytest.raises(ValueError):
        convert((0.1, 0.2), "rgb", "hsl")
    with pytest.raises(ValueError):
        convert((0.1, 0.2, 0.3, 0.4, 0.5), "rgb", "hsl")

def test_space_channels():
    assert SPACE_CHANNELS == {"rgb": 3, "hsl": 3, "hsb": 3, "cmyk": 4}

def test_np_convert_samples():
    the_matrix = np.array(list(samples_rgb_hsv.keys()))
    expected = np.array(list(samples_rgb_hsv.values()))
    result = np_convert(the_matrix, "rgb", "hsv")
    assert np.allclose(result, expected, atol=CHANNEL_TOL)

    back = np_convert(result, "hsv", "rgb")
    assert np.allclose(back, the_matrix, atol=CHANNEL_TOL)

def test_np_convert_carries_alpha(rng):
    rgba = rng.random((10, 4))
    cmyka = np_convert(rgba, "rgb", "cmyk")
    assert cmyka.shape == (10, 5)
    assert np.array_equal(cmyka[..., -1], rgba[..., -1])
    back = np_convert(cmyka, "cmyk", "rgb")
    assert np.allclose(back, rgba, atol=1e-6)

def test_np_convert_matches_scalar(random_rgb):
    result = np_convert(random_rgb, "rgb", "hsl")
    expected = np.array([convert(tuple(rgb), "rgb", "hsl") for rgb in random_rgb])
    assert np.allclose(result, expected)

def test_np_convert_bad_shape():
    with pytest.raises(ValueError):
        np_convert(np.zeros((3, 2)), "rgb", "hsl")
