"""
Colorspace Conversions
======================

Pure conversion functions between RGB, HSL, HSB (HSV) and CMYK, with scalar and
vectorized (numpy) implementations. All channels are unit floats; hue is a
fraction of a full turn in ``[0, 1)``.

RGB → HSB:
    unit_rgb_to_hsv(r, g, b), np_unit_rgb_to_hsv(r, g, b)

RGB → HSL:
    unit_rgb_to_hsl(r, g, b), np_unit_rgb_to_hsl(r, g, b)

RGB → CMYK:
    unit_rgb_to_cmyk(r, g, b), np_unit_rgb_to_cmyk(r, g, b)

→ RGB:
    hsl_to_unit_rgb, hsv_to_unit_rgb, cmyk_to_unit_rgb (+ np_ variants)

Shared:
    unit_rgb_to_hue     hue of any RGB color
    limit               channel value normalisation
    hue_to_human        perceptual hue scale (and human_to_hue)
    rgba_to_int         32-bit ARGB packing

High-Level API
--------------
    convert(color, from_space, to_space)
    np_convert(color, from_space, to_space)

Examples
--------
>>> from colorspace.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb
>>> h, s, l = unit_rgb_to_hsl(1.0, 0.5, 0.0)
>>> r, g, b = hsl_to_unit_rgb(h, s, l)
"""

from .limiter import limit, limit_hue, resolve_channel, resolve_alpha, is_unchanged, clamp01
from .hue_human import (
    HUE_SENSITIVITY,
    hue_human_table,
    hue_to_human,
    human_to_hue,
    np_hue_to_human,
    np_human_to_hue,
    human_hue_distance,
)
from .to_hsv import unit_rgb_to_hue, np_unit_rgb_to_hue, unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .to_cmyk import unit_rgb_to_cmyk, np_unit_rgb_to_cmyk
from .to_rgb import (
    hsl_to_unit_rgb,
    np_hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    np_hsv_to_unit_rgb,
    cmyk_to_unit_rgb,
    np_cmyk_to_unit_rgb,
)
from .packing import rgba_to_int, int_to_rgba, unit_to_hex, hex_to_unit_rgb, round_half_up
from .wrapper import convert, np_convert, SPACE_CHANNELS

__all__ = [
    # Limiting
    'limit',
    'limit_hue',
    'resolve_channel',
    'resolve_alpha',
    'is_unchanged',
    'clamp01',

    # Perceptual hue
    'HUE_SENSITIVITY',
    'hue_human_table',
    'hue_to_human',
    'human_to_hue',
    'np_hue_to_human',
    'np_human_to_hue',
    'human_hue_distance',

    # RGB → *
    'unit_rgb_to_hue',
    'np_unit_rgb_to_hue',
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'unit_rgb_to_cmyk',
    'np_unit_rgb_to_cmyk',

    # * → RGB
    'hsl_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'cmyk_to_unit_rgb',
    'np_cmyk_to_unit_rgb',

    # Packing
    'rgba_to_int',
    'int_to_rgba',
    'unit_to_hex',
    'hex_to_unit_rgb',
    'round_half_up',

    # High-level API
    'convert',
    'np_convert',
    'SPACE_CHANNELS',
]
