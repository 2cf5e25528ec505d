from colorspace.conversions.to_cmyk import unit_rgb_to_cmyk, np_unit_rgb_to_cmyk
import numpy as np
from ..samples import samples_rgb_cmyk, CHANNEL_TOL

def test_unit_rgb_to_cmyk():
    for rgb, expected in samples_rgb_cmyk.items():
        result = unit_rgb_to_cmyk(*rgb)
        assert len(result) == 4
        assert np.allclose(result, expected, atol=CHANNEL_TOL)

def test_black_has_no_colored_ink():
    assert unit_rgb_to_cmyk(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0, 1.0)

def test_unit_rgb_to_cmyk_numpy():
    the_matrix = np.array(list(samples_rgb_cmyk.keys()))
    expected = np.array(list(samples_rgb_cmyk.values()))
    result = np_unit_rgb_to_cmyk(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert result.shape == (len(samples_rgb_cmyk), 4)
    assert np.allclose(result, expected, atol=CHANNEL_TOL)

def test_numpy_matches_scalar(random_rgb):
    result = np_unit_rgb_to_cmyk(random_rgb[:, 0], random_rgb[:, 1], random_rgb[:, 2])
    expected = np.array([unit_rgb_to_cmyk(*rgb) for rgb in random_rgb])
    assert np.allclose(result, expected)
