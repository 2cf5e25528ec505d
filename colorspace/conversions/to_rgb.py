import math
import numpy as np
from numpy import ndarray as NDArray

from .limiter import clamp01

## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB using the chroma / hue-sector construction.

    Args:
        h: Hue in [0, 1]
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    chroma = (1 - abs(2 * l - 1)) * s
    h6 = h * 6
    x = chroma * (1 - abs((h6 % 2) - 1))
    mid = l - chroma / 2

    hue_section = int(math.floor(h6)) % 6

    if hue_section == 0:
        r, g, b = chroma, x, 0.0
    elif hue_section == 1:
        r, g, b = x, chroma, 0.0
    elif hue_section == 2:
        r, g, b = 0.0, chroma, x
    elif hue_section == 3:
        r, g, b = 0.0, x, chroma
    elif hue_section == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return clamp01(r + mid), clamp01(g + mid), clamp01(b + mid)

def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in [0, 1]
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    chroma = (1 - np.abs(2 * l - 1)) * s
    h6 = h * 6
    x = chroma * (1 - np.abs((h6 % 2) - 1))
    mid = l - chroma / 2
    zero = np.zeros(out_shape)

    hue_section = np.floor(h6).astype(int) % 6
    sections = [hue_section == i for i in range(6)]

    r = np.select(sections, [chroma, x, zero, zero, x, chroma])
    g = np.select(sections, [x, chroma, chroma, x, zero, zero])
    b = np.select(sections, [zero, zero, x, chroma, chroma, x])

    return np.clip(np.stack([r + mid, g + mid, b + mid], axis=-1), 0.0, 1.0)

## HSV (HSB) to RGB conversions

def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV / HSB to RGB.

    Args:
        h: Hue in [0, 1]
        s: Saturation in [0, 1]
        v: Brightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    if not s:
        return clamp01(v), clamp01(v), clamp01(v)

    h6 = h * 6
    sector = math.floor(h6)
    pos = h6 - sector
    c1 = v * (1 - s)
    c2 = v * (1 - s * pos)
    c3 = v * (1 - s * (1 - pos))

    sector = int(sector) % 6
    if sector == 0:
        r, g, b = v, c3, c1
    elif sector == 1:
        r, g, b = c2, v, c1
    elif sector == 2:
        r, g, b = c1, v, c3
    elif sector == 3:
        r, g, b = c1, c2, v
    elif sector == 4:
        r, g, b = c3, c1, v
    else:
        r, g, b = v, c1, c2

    return clamp01(r), clamp01(g), clamp01(b)

def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV / HSB to RGB.

    Args:
        h: array-like or scalar, hue in [0, 1]
        s: array-like or scalar, saturation in [0, 1]
        v: array-like or scalar, brightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    h6 = h * 6
    sector = np.floor(h6)
    pos = h6 - sector
    c1 = v * (1 - s)
    c2 = v * (1 - s * pos)
    c3 = v * (1 - s * (1 - pos))

    sector = sector.astype(int) % 6
    sections = [sector == i for i in range(6)]

    r = np.select(sections, [v, c2, c1, c1, c3, v])
    g = np.select(sections, [c3, v, v, c2, c1, c1])
    b = np.select(sections, [c1, c1, c3, v, v, c2])

    # Achromatic: every channel is the brightness
    gray = s == 0
    r = np.where(gray, v, r)
    g = np.where(gray, v, g)
    b = np.where(gray, v, b)

    return np.clip(np.stack([r, g, b], axis=-1), 0.0, 1.0)

## CMYK to RGB conversions

def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> tuple[float, float, float]:
    """
    Convert CMYK to RGB.

    Args:
        c, m, y, k: Cyan, magenta, yellow and black in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    r = 1 - min(1.0, c * (1 - k) + k)
    g = 1 - min(1.0, m * (1 - k) + k)
    b = 1 - min(1.0, y * (1 - k) + k)
    return clamp01(r), clamp01(g), clamp01(b)

def np_cmyk_to_unit_rgb(c: NDArray, m: NDArray, y: NDArray, k: NDArray) -> NDArray:
    """
    Vectorized: Convert CMYK to RGB.

    Args:
        c, m, y, k: array-like or scalar, [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    c = np.asarray(c, dtype=float)
    m = np.asarray(m, dtype=float)
    y = np.asarray(y, dtype=float)
    k = np.asarray(k, dtype=float)

    r = 1 - np.minimum(1.0, c * (1 - k) + k)
    g = 1 - np.minimum(1.0, m * (1 - k) + k)
    b = 1 - np.minimum(1.0, y * (1 - k) + k)
    r, g, b = np.broadcast_arrays(r, g, b)

    return np.clip(np.stack([r, g, b], axis=-1), 0.0, 1.0)
