import numpy as np
from numpy import ndarray as NDArray

from .limiter import clamp01

## Shared hue

def unit_rgb_to_hue(r: float, g: float, b: float) -> float:
    """
    Hue of an RGB color on the unit circle ``[0, 1)``.

    Shared by every model: the hue of HSB and HSL is the same angle. Achromatic
    colors (and black) have hue 0.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        float: hue in [0, 1)
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    saturation = (max_c - min_c) / max_c if max_c else 0.0
    if not saturation:
        return 0.0

    delta = max_c - min_c
    if r == max_c:
        hue = (g - b) / delta
    elif g == max_c:
        hue = 2 + (b - r) / delta
    else:
        hue = 4 + (r - g) / delta
    hue /= 6
    if hue < 0:
        hue += 1.0
    if hue == 1.0:
        hue = 0.0
    return hue

def np_unit_rgb_to_hue(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: hue of RGB colors on the unit circle ``[0, 1)``.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hue: array broadcast from the inputs, [0, 1)
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c
    chromatic = (max_c > 0) & (delta > 0)
    safe_delta = np.where(chromatic, delta, 1.0)

    hue = np.select(
        [r == max_c, g == max_c],
        [(g - b) / safe_delta, 2 + (b - r) / safe_delta],
        default=4 + (r - g) / safe_delta,
    ) / 6
    hue = np.where(hue < 0, hue + 1.0, hue)
    hue = np.where(hue >= 1.0, 0.0, hue)
    return np.where(chromatic, hue, 0.0)

## RGB to HSV (HSB)

def unit_rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSV / HSB.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,1), saturation [0,1], brightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    saturation = (max_c - min_c) / max_c if max_c else 0.0
    return unit_rgb_to_hue(r, g, b), clamp01(saturation), float(max_c)

def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSV / HSB.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsv: array of shape (..., 3): (hue [0,1), saturation [0,1], brightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    max_c = np.maximum(np.maximum(r, g), b)
    min_c = np.minimum(np.minimum(r, g), b)
    safe_max = np.where(max_c > 0, max_c, 1.0)
    saturation = np.where(max_c > 0, (max_c - min_c) / safe_max, 0.0)

    hue = np_unit_rgb_to_hue(r, g, b)
    hue, saturation, max_c = np.broadcast_arrays(hue, np.clip(saturation, 0.0, 1.0), max_c)
    return np.stack([hue, saturation, max_c], axis=-1)
