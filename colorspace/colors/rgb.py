from __future__ import annotations
from typing import Any, ClassVar, Optional, Tuple

from ..conversions.limiter import is_unchanged, resolve_alpha
from ..css.named_colors import NAMED_COLORS
from ..css.parser import parse_css
from ..errors import InvalidArgumentsError
from ..types.color_types import ChannelInput, ColorSpace
from .color_base import Color, is_sequence


class Rgb(Color):
    """
    RGB model. The native components are the canonical RGB channels.

    >>> Rgb(25, 25, 25).red
    0.09803921568627451
    >>> Rgb((0.5, 0.5, 0.5, 0.2)).to_css()
    'rgba(128 128 128 / 0.2)'
    """
    __slots__ = ()

    mode: ClassVar[ColorSpace] = "rgb"
    native_channels: ClassVar[Tuple[str, ...]] = ("red", "green", "blue")

    def __init__(
        self,
        red: Any = 0.0,
        green: ChannelInput = 0.0,
        blue: ChannelInput = 0.0,
        alpha: ChannelInput = 1.0,
    ) -> None:
        if isinstance(red, Color):
            super().__init__(red)
        else:
            super().__init__()
            self.set_rgba(red, green, blue, alpha)

    def _native_from_rgb(self) -> Tuple[float, float, float]:
        return (self._red, self._green, self._blue)

    def _rgb_from_native(self, native: Tuple[float, ...]) -> Tuple[float, float, float]:
        red, green, blue = native
        return (red, green, blue)

    @staticmethod
    def factory(
        red: Any = 0,
        green: ChannelInput = 0,
        blue: ChannelInput = 0,
        alpha: Optional[ChannelInput] = None,
    ) -> Color:
        """
        Create a color from loosely typed arguments.

        Args:
            red: One of
                - a sequence of up to 4 channels (missing channels are 0, a
                  missing alpha 1.0)
                - a Color, which is copied into a new ``Rgb``
                - a named color, hex text or CSS color function
                - the red channel (int 0-255 or float 0-1)
            green: Green channel, when ``red`` is a channel
            blue: Blue channel, when ``red`` is a channel
            alpha: Alpha, 1.0 if omitted. Overrides the alpha of a named color.
        Returns:
            A new color; CSS functions may produce a model other than Rgb.
        Raises:
            InvalidArgumentsError: if a sequence has more than 4 items.
            UnparseableColorError: if a string is not CSS color text.
        """
        if is_sequence(red):
            channels = list(red)
            if len(channels) > 4:
                raise InvalidArgumentsError(red, "at most 4 items", "factory")
            channels += [0.0] * (3 - len(channels))
            if len(channels) == 3:
                channels.append(1.0 if alpha is None else alpha)
            return Rgb(channels)
        if isinstance(red, Color):
            color = Rgb(red)
            if alpha is not None:
                color.set_alpha(alpha)
            return color
        if isinstance(red, str) and not is_unchanged(red):
            override = None if alpha is None else resolve_alpha(alpha)
            color = parse_css(red)
            if override is not None and red.strip().lower() in NAMED_COLORS:
                color.set_alpha(override)
            return color
        return Rgb(red, green, blue, 1.0 if alpha is None else alpha)
