"""
Colorspace Color Classes
========================

Mutable color value objects. Every model keeps canonical RGBA (unit floats) and
its own native components, recomputed lazily from RGBA or pushed to RGBA when
they are set.

Models
------
- Rgb:  red, green, blue
- Hsl:  hue, saturation, lightness
- Hsb:  hue, saturation, brightness (HSV)
- Cmyk: cyan, magenta, yellow, black

Usage
-----
>>> from colorspace.colors import Rgb, Hsl
>>>
>>> color = Rgb(255, 128, 0)
>>> color.to_css()
'rgb(255 128 0)'
>>>
>>> hsl = color.convert("hsl")
>>> hsl.set_lightness(0.25)
>>> hsl.to_css_hex()
'#7f4000'
>>>
>>> Hsl.from_css("hsl(180 10% 25% / 0.5)").alpha
0.5
"""
from .color_base import Color, WithHue, build_registry
from .rgb import Rgb
from .hsl import Hsl
from .hsb import Hsb
from .cmyk import Cmyk

COLOR_CLASSES = build_registry(Rgb, Hsl, Hsb, Cmyk)

__all__ = [
    'Color',
    'WithHue',
    'Rgb',
    'Hsl',
    'Hsb',
    'Cmyk',
    'COLOR_CLASSES',
    'build_registry',
]
