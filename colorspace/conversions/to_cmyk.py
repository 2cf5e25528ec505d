import numpy as np
from numpy import ndarray as NDArray

from .limiter import clamp01

## RGB to CMYK conversions

def unit_rgb_to_cmyk(r: float, g: float, b: float) -> tuple[float, float, float, float]:
    """
    Convert RGB to CMYK.

    Black is computed first; cyan, magenta and yellow are then the remaining
    ink relative to ``1 - black``. Pure black has no colored ink.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float, float]: (cyan, magenta, yellow, black), all [0,1]
    """
    black = 1 - max(r, g, b)
    if black == 1.0:
        return 0.0, 0.0, 0.0, 1.0
    div = 1.0 - black
    cyan = (1 - r - black) / div
    magenta = (1 - g - black) / div
    yellow = (1 - b - black) / div
    return clamp01(cyan), clamp01(magenta), clamp01(yellow), clamp01(black)

def np_unit_rgb_to_cmyk(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to CMYK.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        cmyk: array of shape (..., 4): (cyan, magenta, yellow, black), all [0,1]
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    black = 1 - np.maximum(np.maximum(r, g), b)
    inked = black < 1.0
    div = np.where(inked, 1.0 - black, 1.0)

    cyan = np.where(inked, (1 - r - black) / div, 0.0)
    magenta = np.where(inked, (1 - g - black) / div, 0.0)
    yellow = np.where(inked, (1 - b - black) / div, 0.0)

    return np.clip(np.stack([cyan, magenta, yellow, black], axis=-1), 0.0, 1.0)
