import numpy as np
from typing import Callable, Dict, Tuple, cast

from ..types.color_types import ScalarVector, normalize_space
from .to_rgb import (
    hsl_to_unit_rgb, hsv_to_unit_rgb, cmyk_to_unit_rgb,
    np_hsl_to_unit_rgb, np_hsv_to_unit_rgb, np_cmyk_to_unit_rgb,
)
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .to_cmyk import unit_rgb_to_cmyk, np_unit_rgb_to_cmyk

# Native channel count per space, alpha excluded
SPACE_CHANNELS: Dict[str, int] = {
    "rgb": 3,
    "hsl": 3,
    "hsb": 3,
    "cmyk": 4,
}

CONVERT_TO_RGB: Dict[str, Callable[..., Tuple[float, ...]]] = {
    "rgb": lambda r, g, b: (r, g, b),
    "hsl": hsl_to_unit_rgb,
    "hsb": hsv_to_unit_rgb,
    "cmyk": cmyk_to_unit_rgb,
}

CONVERT_FROM_RGB: Dict[str, Callable[[float, float, float], Tuple[float, ...]]] = {
    "rgb": lambda r, g, b: (r, g, b),
    "hsl": unit_rgb_to_hsl,
    "hsb": unit_rgb_to_hsv,
    "cmyk": unit_rgb_to_cmyk,
}

CONVERT_NUMPY_TO_RGB: Dict[str, Callable[..., np.ndarray]] = {
    "rgb": lambda r, g, b: np.stack([r, g, b], axis=-1),
    "hsl": np_hsl_to_unit_rgb,
    "hsb": np_hsv_to_unit_rgb,
    "cmyk": np_cmyk_to_unit_rgb,
}

CONVERT_NUMPY_FROM_RGB: Dict[str, Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    "rgb": lambda r, g, b: np.stack([r, g, b], axis=-1),
    "hsl": np_unit_rgb_to_hsl,
    "hsb": np_unit_rgb_to_hsv,
    "cmyk": np_unit_rgb_to_cmyk,
}


def _check_space(space: str) -> str:
    space = normalize_space(space)
    if space not in SPACE_CHANNELS:
        raise ValueError(f"Unknown space: {space}")
    return space


def _split_alpha(n_values: int, space: str) -> bool:
    n_native = SPACE_CHANNELS[space]
    if n_values not in (n_native, n_native + 1):
        raise ValueError(
            f"{space} expects {n_native} channels (or {n_native + 1} with alpha), got {n_values}"
        )
    return n_values == n_native + 1


def convert(color: ScalarVector, from_space: str, to_space: str) -> ScalarVector:
    """
    Convert a tuple of unit channels between spaces, routing through RGB.

    A trailing alpha channel is passed through untouched.
    """
    from_space = _check_space(from_space)
    to_space = _check_space(to_space)
    values = tuple(float(v) for v in color)
    has_alpha = _split_alpha(len(values), from_space)
    if from_space == to_space:
        return values

    native = values[:-1] if has_alpha else values
    rgb = CONVERT_TO_RGB[from_space](*native)
    result = tuple(float(v) for v in CONVERT_FROM_RGB[to_space](*rgb))
    if has_alpha:
        result += (values[-1],)
    return result


def np_convert(color: np.ndarray, from_space: str, to_space: str) -> np.ndarray:
    """
    Vectorized: convert an array of colors with channels on the last axis.
    """
    from_space = _check_space(from_space)
    to_space = _check_space(to_space)
    color = np.asarray(color, dtype=float)
    has_alpha = _split_alpha(color.shape[-1], from_space)
    if from_space == to_space:
        return color

    native = color[..., :-1] if has_alpha else color
    channels = [native[..., i] for i in range(native.shape[-1])]
    rgb = CONVERT_NUMPY_TO_RGB[from_space](*channels)
    out = CONVERT_NUMPY_FROM_RGB[to_space](rgb[..., 0], rgb[..., 1], rgb[..., 2])
    if has_alpha:
        return np.concatenate([out, color[..., -1:]], axis=-1)
    return cast(np.ndarray, out)
