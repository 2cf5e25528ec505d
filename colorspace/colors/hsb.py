from __future__ import annotations
from typing import Any, ClassVar, Tuple

from ..conversions.limiter import resolve_alpha
from ..conversions.packing import unit_to_int
from ..conversions.to_hsv import unit_rgb_to_hsv
from ..conversions.to_rgb import hsv_to_unit_rgb
from ..css.formatting import as_percent, format_number
from ..types.color_types import ChannelInput, ColorSpace
from ..types.format_type import HUE_DEGREES, PERCENT_PLACES
from .color_base import Color, WithHue, is_sequence, unpack_channels


class Hsb(WithHue):
    """HSB (HSV) model: hue, saturation and brightness, each in ``[0, 1]``."""
    __slots__ = ()

    mode: ClassVar[ColorSpace] = "hsb"
    native_channels: ClassVar[Tuple[str, ...]] = ("hue", "saturation", "brightness")

    def __init__(
        self,
        hue: Any = 0.0,
        saturation: ChannelInput = 0.0,
        brightness: ChannelInput = 0.0,
        alpha: ChannelInput = 1.0,
    ) -> None:
        if isinstance(hue, Color):
            super().__init__(hue)
        else:
            super().__init__()
            self.set_hsba(hue, saturation, brightness, alpha)

    def _native_from_rgb(self) -> Tuple[float, float, float]:
        return unit_rgb_to_hsv(self._red, self._green, self._blue)

    def _rgb_from_native(self, native: Tuple[float, ...]) -> Tuple[float, float, float]:
        return hsv_to_unit_rgb(*native)

    @property
    def brightness(self) -> float:
        return self._native_values()[2]

    @brightness.setter
    def brightness(self, value: ChannelInput) -> None:
        self.set_brightness(value)

    @property
    def brightness_int(self) -> int:
        return unit_to_int(self.brightness)

    def set_brightness(self, brightness: ChannelInput) -> None:
        self._set_native_channel(2, brightness)

    def set_hsb(self, hue: Any, saturation: ChannelInput = 0.0, brightness: ChannelInput = 0.0) -> None:
        if is_sequence(hue):
            hue, saturation, brightness, _ = unpack_channels(hue, 3, "set_hsb")
        self._set_native(self._resolve_native(hue, saturation, brightness))

    def set_hsba(
        self,
        hue: Any,
        saturation: ChannelInput = 0.0,
        brightness: ChannelInput = 0.0,
        alpha: ChannelInput = 1.0,
    ) -> None:
        if is_sequence(hue):
            hue, saturation, brightness, alpha = unpack_channels(hue, 3, "set_hsba")
        native = self._resolve_native(hue, saturation, brightness)
        self._set_native(native, resolve_alpha(alpha))

    def to_string(self, precision: int = PERCENT_PLACES) -> str:
        """
        ``"<hue degrees>, <saturation>%, <brightness>%"``.

        >>> Hsb(0.5, 0.25, 1.0).to_string()
        '180, 25%, 100%'
        """
        hue, saturation, brightness = self._native_values()
        return ", ".join((
            format_number(hue * HUE_DEGREES, precision),
            as_percent(saturation, precision),
            as_percent(brightness, precision),
        ))
