import numpy as np
from numpy import ndarray as NDArray

from .limiter import clamp01
from .to_hsv import unit_rgb_to_hue, np_unit_rgb_to_hue

## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,1), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)

    lightness = (max_c + min_c) / 2.0
    denominator = 1 - abs(min_c + max_c - 1)
    saturation = (max_c - min_c) / denominator if denominator else 0.0

    return unit_rgb_to_hue(r, g, b), clamp01(saturation), clamp01(lightness)

def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,1), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    max_c = np.maximum(np.maximum(r, g), b)
    min_c = np.minimum(np.minimum(r, g), b)

    lightness = (max_c + min_c) / 2.0
    denominator = 1 - np.abs(min_c + max_c - 1)
    safe_denominator = np.where(denominator > 0, denominator, 1.0)
    saturation = np.where(denominator > 0, (max_c - min_c) / safe_denominator, 0.0)

    hue = np_unit_rgb_to_hue(r, g, b)
    hue, saturation, lightness = np.broadcast_arrays(
        hue, np.clip(saturation, 0.0, 1.0), np.clip(lightness, 0.0, 1.0)
    )
    return np.stack([hue, saturation, lightness], axis=-1)
