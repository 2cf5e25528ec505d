"""Colorspace: color models, conversions and CSS color syntax."""

from .colors import Color, WithHue, Rgb, Hsl, Hsb, Cmyk, COLOR_CLASSES
from .conversions import (
    limit,
    limit_hue,
    hue_to_human,
    human_to_hue,
    np_hue_to_human,
    np_human_to_hue,
    unit_rgb_to_hue,
    unit_rgb_to_hsv,
    unit_rgb_to_hsl,
    unit_rgb_to_cmyk,
    hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    cmyk_to_unit_rgb,
    np_unit_rgb_to_hsv,
    np_unit_rgb_to_hsl,
    np_unit_rgb_to_cmyk,
    np_hsv_to_unit_rgb,
    np_hsl_to_unit_rgb,
    np_cmyk_to_unit_rgb,
    rgba_to_int,
    convert,
    np_convert,
)
from .css import (
    NAMED_COLORS,
    CssFunction,
    CssFunctionTable,
    default_functions,
    parse_css,
    as_percent,
    format_number,
)
from .errors import (
    ColorSpaceError,
    InvalidValueError,
    InvalidArgumentsError,
    UnsupportedFunctionError,
    UnparseableColorError,
    UnknownNamedColorError,
    InvalidQuantumError,
)
from .types.color_types import ModelState, Percentage, UNCHANGED

# Friendly alias
Hsv = Hsb

__version__ = "0.1.0"

__all__ = [
    # Models
    'Color',
    'WithHue',
    'Rgb',
    'Hsl',
    'Hsb',
    'Hsv',
    'Cmyk',
    'COLOR_CLASSES',

    # Conversions
    'limit',
    'limit_hue',
    'hue_to_human',
    'human_to_hue',
    'np_hue_to_human',
    'np_human_to_hue',
    'unit_rgb_to_hue',
    'unit_rgb_to_hsv',
    'unit_rgb_to_hsl',
    'unit_rgb_to_cmyk',
    'hsv_to_unit_rgb',
    'hsl_to_unit_rgb',
    'cmyk_to_unit_rgb',
    'np_unit_rgb_to_hsv',
    'np_unit_rgb_to_hsl',
    'np_unit_rgb_to_cmyk',
    'np_hsv_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'np_cmyk_to_unit_rgb',
    'rgba_to_int',
    'convert',
    'np_convert',

    # CSS
    'NAMED_COLORS',
    'CssFunction',
    'CssFunctionTable',
    'default_functions',
    'parse_css',
    'as_percent',
    'format_number',

    # Errors
    'ColorSpaceError',
    'InvalidValueError',
    'InvalidArgumentsError',
    'UnsupportedFunctionError',
    'UnparseableColorError',
    'UnknownNamedColorError',
    'InvalidQuantumError',

    # Types
    'ModelState',
    'Percentage',
    'UNCHANGED',

    '__version__',
]
