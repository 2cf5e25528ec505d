from __future__ import annotations
from typing import Any, ClassVar, Tuple

from ..conversions.limiter import resolve_alpha
from ..conversions.packing import unit_to_int
from ..conversions.to_hsl import unit_rgb_to_hsl
from ..conversions.to_rgb import hsl_to_unit_rgb
from ..css.formatting import as_percent, format_number
from ..types.color_types import ChannelInput, ColorSpace
from ..types.format_type import HUE_DEGREES
from .color_base import Color, WithHue, is_sequence, unpack_channels


class Hsl(WithHue):
    """
    HSL model: hue, saturation and lightness, each in ``[0, 1]``.

    Integer arguments are on the 0-255 scale like every other channel; CSS text
    (``hsl(180 10% 25%)``) reads hue in degrees.
    """
    __slots__ = ()

    mode: ClassVar[ColorSpace] = "hsl"
    native_channels: ClassVar[Tuple[str, ...]] = ("hue", "saturation", "lightness")

    def __init__(
        self,
        hue: Any = 0.0,
        saturation: ChannelInput = 0.0,
        lightness: ChannelInput = 0.0,
        alpha: ChannelInput = 1.0,
    ) -> None:
        if isinstance(hue, Color):
            super().__init__(hue)
        else:
            super().__init__()
            self.set_hsla(hue, saturation, lightness, alpha)

    def _native_from_rgb(self) -> Tuple[float, float, float]:
        return unit_rgb_to_hsl(self._red, self._green, self._blue)

    def _rgb_from_native(self, native: Tuple[float, ...]) -> Tuple[float, float, float]:
        return hsl_to_unit_rgb(*native)

    @property
    def lightness(self) -> float:
        return self._native_values()[2]

    @lightness.setter
    def lightness(self, value: ChannelInput) -> None:
        self.set_lightness(value)

    @property
    def lightness_int(self) -> int:
        return unit_to_int(self.lightness)

    def set_lightness(self, lightness: ChannelInput) -> None:
        self._set_native_channel(2, lightness)

    def set_hsl(self, hue: Any, saturation: ChannelInput = 0.0, lightness: ChannelInput = 0.0) -> None:
        """Set hue, saturation and lightness without touching alpha."""
        if is_sequence(hue):
            hue, saturation, lightness, _ = unpack_channels(hue, 3, "set_hsl")
        self._set_native(self._resolve_native(hue, saturation, lightness))

    def set_hsla(
        self,
        hue: Any,
        saturation: ChannelInput = 0.0,
        lightness: ChannelInput = 0.0,
        alpha: ChannelInput = 1.0,
    ) -> None:
        """Set all components; ``hue`` may be a sequence of 3 or 4 items."""
        if is_sequence(hue):
            hue, saturation, lightness, alpha = unpack_channels(hue, 3, "set_hsla")
        native = self._resolve_native(hue, saturation, lightness)
        self._set_native(native, resolve_alpha(alpha))

    def to_css(self, legacy: bool = False) -> str:
        """
        CSS ``hsl()`` text, hue in whole degrees.

        >>> Hsl.from_css("hsl(180, 10%, 25%)").to_css(legacy=True)
        'hsl(180, 10%, 25%)'
        """
        hue, saturation, lightness = self._native_values()
        channels = [
            format_number(hue * HUE_DEGREES),
            as_percent(saturation),
            as_percent(lightness),
        ]
        return self._format_css("hsl", channels, legacy)
