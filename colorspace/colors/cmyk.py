from __future__ import annotations
from typing import Any, ClassVar, Tuple

from ..conversions.limiter import resolve_alpha
from ..conversions.to_cmyk import unit_rgb_to_cmyk
from ..conversions.to_rgb import cmyk_to_unit_rgb
from ..css.formatting import as_percent, format_number
from ..types.color_types import ChannelInput, ColorSpace
from ..types.format_type import PERCENT_MAX, PERCENT_PLACES
from .color_base import Color, is_sequence, unpack_channels


class Cmyk(Color):
    """
    CMYK model: cyan, magenta, yellow and black, each in ``[0, 1]``.

    Components are unit values: strings without ``%`` are read on the 0-1
    scale. Black is derived first when converting from RGB, and a black of 1
    gives zero cyan, magenta and yellow.
    """
    __slots__ = ()

    mode: ClassVar[ColorSpace] = "cmyk"
    native_channels: ClassVar[Tuple[str, ...]] = ("cyan", "magenta", "yellow", "black")
    native_unit: ClassVar[bool] = True

    def __init__(
        self,
        cyan: Any = 0.0,
        magenta: ChannelInput = 0.0,
        yellow: ChannelInput = 0.0,
        black: ChannelInput = 0.0,
        alpha: ChannelInput = 1.0,
    ) -> None:
        if isinstance(cyan, Color):
            super().__init__(cyan)
        else:
            super().__init__()
            self.set_cmyka(cyan, magenta, yellow, black, alpha)

    def _native_from_rgb(self) -> Tuple[float, float, float, float]:
        return unit_rgb_to_cmyk(self._red, self._green, self._blue)

    def _rgb_from_native(self, native: Tuple[float, ...]) -> Tuple[float, float, float]:
        return cmyk_to_unit_rgb(*native)

    @property
    def cyan(self) -> float:
        return self._native_values()[0]

    @cyan.setter
    def cyan(self, value: ChannelInput) -> None:
        self.set_cyan(value)

    @property
    def magenta(self) -> float:
        return self._native_values()[1]

    @magenta.setter
    def magenta(self, value: ChannelInput) -> None:
        self.set_magenta(value)

    @property
    def yellow(self) -> float:
        return self._native_values()[2]

    @yellow.setter
    def yellow(self, value: ChannelInput) -> None:
        self.set_yellow(value)

    @property
    def black(self) -> float:
        return self._native_values()[3]

    @black.setter
    def black(self, value: ChannelInput) -> None:
        self.set_black(value)

    def set_cyan(self, cyan: ChannelInput) -> None:
        self._set_native_channel(0, cyan)

    def set_magenta(self, magenta: ChannelInput) -> None:
        self._set_native_channel(1, magenta)

    def set_yellow(self, yellow: ChannelInput) -> None:
        self._set_native_channel(2, yellow)

    def set_black(self, black: ChannelInput) -> None:
        self._set_native_channel(3, black)

    def set_cmyk(
        self,
        cyan: Any = 0.0,
        magenta: ChannelInput = 0.0,
        yellow: ChannelInput = 0.0,
        black: ChannelInput = 0.0,
    ) -> None:
        """Set all four inks without touching alpha; ``cyan`` may be a sequence."""
        if is_sequence(cyan):
            cyan, magenta, yellow, black, _ = unpack_channels(cyan, 4, "set_cmyk")
        self._set_native(self._resolve_native(cyan, magenta, yellow, black))

    def set_cmyka(
        self,
        cyan: Any = 0.0,
        magenta: ChannelInput = 0.0,
        yellow: ChannelInput = 0.0,
        black: ChannelInput = 0.0,
        alpha: ChannelInput = 1.0,
    ) -> None:
        if is_sequence(cyan):
            cyan, magenta, yellow, black, alpha = unpack_channels(cyan, 4, "set_cmyka")
        native = self._resolve_native(cyan, magenta, yellow, black)
        self._set_native(native, resolve_alpha(alpha))

    def _percent(self, value: float, precision: int, symbol: str) -> str:
        return format_number(value * PERCENT_MAX, precision) + symbol

    def cyan_percent(self, precision: int = PERCENT_PLACES, symbol: str = "%") -> str:
        return self._percent(self.cyan, precision, symbol)

    def magenta_percent(self, precision: int = PERCENT_PLACES, symbol: str = "%") -> str:
        return self._percent(self.magenta, precision, symbol)

    def yellow_percent(self, precision: int = PERCENT_PLACES, symbol: str = "%") -> str:
        return self._percent(self.yellow, precision, symbol)

    def black_percent(self, precision: int = PERCENT_PLACES, symbol: str = "%") -> str:
        return self._percent(self.black, precision, symbol)

    def to_string(self, precision: int = PERCENT_PLACES) -> str:
        """
        ``"c%, m%, y%, k%"``, followed by ``" / a%"`` when not opaque.

        >>> Cmyk(0.5, 0.25, 0.0, 0.1).to_string()
        '50%, 25%, 0%, 10%'
        """
        text = ", ".join(as_percent(v, precision) for v in self._native_values())
        if self._alpha != 1.0:
            text += " / " + as_percent(self._alpha, precision)
        return text
