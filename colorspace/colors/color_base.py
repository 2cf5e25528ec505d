from __future__ import annotations
import math
from abc import ABC, abstractmethod
from typing import Any, ClassVar, List, MutableSequence, Optional, Sequence, Tuple, TypeVar

from numpy import ndarray

from ..conversions.limiter import limit, resolve_channel, resolve_alpha, clamp01
from ..conversions.hue_human import hue_to_human, human_to_hue, human_hue_distance
from ..conversions.to_hsv import unit_rgb_to_hue
from ..conversions.packing import (
    rgba_to_int, int_to_rgba, unit_to_hex, hex_to_unit_rgb, round_half_up, unit_to_int,
)
from ..css.formatting import as_percent, format_number
from ..css.functions import CssFunctionTable
from ..css.named_colors import NAMED_COLORS
from ..css.parser import parse_css
from ..errors import InvalidArgumentsError, InvalidQuantumError, UnknownNamedColorError
from ..types.color_types import (
    ChannelInput, ColorSpace, ModelState, Unchanged, UNCHANGED, normalize_space,
)
from ..types.format_type import ALPHA_PLACES, CHANNEL_MAX

# NTSC/YIQ luma weights
GRAY_WEIGHTS: Tuple[float, float, float] = (0.30, 0.59, 0.11)

C = TypeVar("C", bound="Color")


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple, ndarray))


def unpack_channels(values: Sequence[Any], count: int, function: str) -> List[Any]:
    """
    Unpack a sequence of ``count`` channels plus an optional alpha.

    Args:
        values: The sequence handed to a setter
        count: Number of native channels
        function: Setter name, for the error message
    Returns:
        ``count + 1`` items, alpha defaulting to 1.0
    Raises:
        InvalidArgumentsError: if the sequence is not ``count`` or ``count + 1`` long
    """
    items = list(values)
    if len(items) not in (count, count + 1):
        raise InvalidArgumentsError(values, f"{count} or {count + 1} items", function)
    if len(items) == count:
        items.append(1.0)
    return items


class Color(ABC):
    """
    A single color.

    RGBA (unit floats) is the canonical representation. Each concrete model also
    keeps its own native components, derived lazily from RGBA when RGBA was
    written last (``ModelState.RGB_FRESH``) and pushed to RGBA eagerly when they
    are written (``ModelState.NATIVE_FRESH``).

    Setters mutate in place and validate every argument before assigning any.
    ``blend``, ``delta`` and ``posterize`` return new instances.
    """
    __slots__ = ('_red', '_green', '_blue', '_alpha', '_state', '_native')

    mode: ClassVar[ColorSpace]
    native_channels: ClassVar[Tuple[str, ...]]
    # Native components read as unit values (strings unitless, not 0-255)
    native_unit: ClassVar[bool] = False

    rgba_to_int = staticmethod(rgba_to_int)
    as_percent = staticmethod(as_percent)
    limit = staticmethod(limit)
    hue_to_human = staticmethod(hue_to_human)
    human_to_hue = staticmethod(human_to_hue)

    def __init__(self, color: Optional[Color] = None) -> None:
        self._red = 0.0
        self._green = 0.0
        self._blue = 0.0
        self._alpha = 1.0
        self._native: Optional[Tuple[float, ...]] = None
        self._state = ModelState.RGB_FRESH
        if color is not None:
            self._red, self._green, self._blue, self._alpha = color.rgba

    # ------------------ MODEL HOOKS ------------------
    @abstractmethod
    def _native_from_rgb(self) -> Tuple[float, ...]:
        """Compute native components from the current RGB."""

    @abstractmethod
    def _rgb_from_native(self, native: Tuple[float, ...]) -> Tuple[float, float, float]:
        """Compute unit RGB from native components."""

    def _native_values(self) -> Tuple[float, ...]:
        if self._state is ModelState.RGB_FRESH or self._native is None:
            self._native = self._native_from_rgb()
            self._state = ModelState.NATIVE_FRESH
        return self._native

    def _resolve_native(self, *values: ChannelInput) -> Tuple[float | Unchanged, ...]:
        return tuple(resolve_channel(value, self.native_unit) for value in values)

    def _set_native(
        self,
        values: Sequence[float | Unchanged],
        alpha: float | Unchanged = UNCHANGED,
    ) -> None:
        """Assign resolved native components (UNCHANGED entries kept) and push RGB."""
        native = list(self._native_values())
        for index, value in enumerate(values):
            if value is not UNCHANGED:
                native[index] = value
        if alpha is not UNCHANGED:
            self._alpha = alpha
        self._native = tuple(native)
        self._red, self._green, self._blue = self._rgb_from_native(self._native)
        self._state = ModelState.NATIVE_FRESH

    def _set_native_channel(self, index: int, value: ChannelInput) -> None:
        resolved = resolve_channel(value, self.native_unit)
        if resolved is UNCHANGED:
            return
        values: List[float | Unchanged] = [UNCHANGED] * len(self.native_channels)
        values[index] = resolved
        self._set_native(values)

    def _apply_rgba(
        self,
        red: float | Unchanged = UNCHANGED,
        green: float | Unchanged = UNCHANGED,
        blue: float | Unchanged = UNCHANGED,
        alpha: float | Unchanged = UNCHANGED,
    ) -> None:
        changed = False
        if red is not UNCHANGED:
            self._red = red
            changed = True
        if green is not UNCHANGED:
            self._green = green
            changed = True
        if blue is not UNCHANGED:
            self._blue = blue
            changed = True
        if alpha is not UNCHANGED:
            self._alpha = alpha
            changed = True
        if changed:
            self._state = ModelState.RGB_FRESH

    # ------------------ RGBA ------------------
    @property
    def state(self) -> ModelState:
        return self._state

    @property
    def red(self) -> float:
        return self._red

    @red.setter
    def red(self, value: ChannelInput) -> None:
        self.set_red(value)

    @property
    def green(self) -> float:
        return self._green

    @green.setter
    def green(self, value: ChannelInput) -> None:
        self.set_green(value)

    @property
    def blue(self) -> float:
        return self._blue

    @blue.setter
    def blue(self, value: ChannelInput) -> None:
        self.set_blue(value)

    @property
    def alpha(self) -> float:
        return self._alpha

    @alpha.setter
    def alpha(self, value: ChannelInput) -> None:
        self.set_alpha(value)

    @property
    def red_int(self) -> int:
        return unit_to_int(self._red)

    @property
    def green_int(self) -> int:
        return unit_to_int(self._green)

    @property
    def blue_int(self) -> int:
        return unit_to_int(self._blue)

    @property
    def rgba(self) -> Tuple[float, float, float, float]:
        return (self._red, self._green, self._blue, self._alpha)

    @property
    def gray(self) -> float:
        """Luma of the color."""
        wr, wg, wb = GRAY_WEIGHTS
        return wr * self._red + wg * self._green + wb * self._blue

    @gray.setter
    def gray(self, value: ChannelInput) -> None:
        self.set_gray(value)

    @property
    def hue(self) -> float:
        """Hue in ``[0, 1)`` derived from RGB; 0 for achromatic colors."""
        return unit_rgb_to_hue(self._red, self._green, self._blue)

    @property
    def hue_human(self) -> float:
        """The hue on the perceptual scale."""
        return hue_to_human(self.hue)

    def set_red(self, red: ChannelInput) -> None:
        self._apply_rgba(red=resolve_channel(red))

    def set_green(self, green: ChannelInput) -> None:
        self._apply_rgba(green=resolve_channel(green))

    def set_blue(self, blue: ChannelInput) -> None:
        self._apply_rgba(blue=resolve_channel(blue))

    def set_alpha(self, alpha: ChannelInput) -> None:
        self._apply_rgba(alpha=resolve_alpha(alpha))

    def set_gray(self, gray: ChannelInput) -> None:
        """Set red, green and blue to one level."""
        level = resolve_channel(gray)
        self._apply_rgba(level, level, level)

    def set_rgb(self, red: Any, green: ChannelInput = 0.0, blue: ChannelInput = 0.0) -> None:
        """
        Set RGB without touching alpha.

        ``red`` may be a sequence of 3 (or 4, alpha ignored) channels.
        """
        if is_sequence(red):
            red, green, blue, _ = unpack_channels(red, 3, "set_rgb")
        resolved = (resolve_channel(red), resolve_channel(green), resolve_channel(blue))
        self._apply_rgba(*resolved)

    def set_rgba(
        self,
        red: Any,
        green: ChannelInput = 0.0,
        blue: ChannelInput = 0.0,
        alpha: ChannelInput = 1.0,
    ) -> None:
        """
        Set RGB and alpha.

        ``red`` may be a sequence of 3 or 4 channels; a missing alpha is 1.0.
        """
        if is_sequence(red):
            red, green, blue, alpha = unpack_channels(red, 3, "set_rgba")
        resolved = (
            resolve_channel(red),
            resolve_channel(green),
            resolve_channel(blue),
            resolve_alpha(alpha),
        )
        self._apply_rgba(*resolved)

    def set_rgba_int(self, packed: int) -> None:
        """Set all four channels from a 32-bit ARGB integer."""
        red, green, blue, alpha = int_to_rgba(int(packed))
        self._apply_rgba(
            red / CHANNEL_MAX, green / CHANNEL_MAX, blue / CHANNEL_MAX, alpha / CHANNEL_MAX
        )

    def set_hex(self, text: str) -> None:
        """Set RGB from CSS hex text; alpha is left alone."""
        self._apply_rgba(*hex_to_unit_rgb(text))

    def set_named_color(self, name: str, alpha: Optional[ChannelInput] = None) -> None:
        """
        Set the color from the named color table.

        The table supplies alpha too (``transparent`` is fully transparent);
        pass ``alpha`` to override it.

        Raises:
            UnknownNamedColorError: if the name is not in the table.
        """
        key = name.strip().lower()
        if key not in NAMED_COLORS:
            raise UnknownNamedColorError(name)
        override = UNCHANGED if alpha is None else resolve_alpha(alpha)
        self.set_rgba_int(NAMED_COLORS[key])
        self._apply_rgba(alpha=override)

    # ------------------ ARITHMETIC ------------------
    def add(self, delta: Color) -> None:
        """Add ``delta``'s RGBA to this color, channel by channel, clamped."""
        self._apply_rgba(
            clamp01(self._red + delta.red),
            clamp01(self._green + delta.green),
            clamp01(self._blue + delta.blue),
            clamp01(self._alpha + delta.alpha),
        )

    def blend(self: C, mix: Color, ratio: float, blend_alpha: bool = False) -> C:
        """
        Interpolate towards ``mix``.

        Args:
            mix: The color to move towards
            ratio: 0 is this color, 1 is ``mix``; the absolute value is used
                and capped at 1
            blend_alpha: Interpolate alpha too. When false the ratio is scaled
                by the transparency of ``mix`` and alpha is kept.
        Returns:
            A new color of this color's class
        """
        ratio = min(abs(float(ratio)), 1.0)
        if blend_alpha:
            ratio_alpha = ratio
        else:
            ratio *= 1 - mix.alpha
            ratio_alpha = 0.0
        color = type(self)()
        color.set_rgba(
            self._red + ratio * (mix.red - self._red),
            self._green + ratio * (mix.green - self._green),
            self._blue + ratio * (mix.blue - self._blue),
            self._alpha + ratio_alpha * (mix.alpha - self._alpha),
        )
        return color

    def delta(self: C, other: Color, steps: int = 1) -> C:
        """
        Per-step difference from this color to ``other``, alpha included.

        Channels go through the setters, so negative steps clamp to 0.
        """
        color = type(self)()
        color.set_rgba(
            (other.red - self._red) / steps,
            (other.green - self._green) / steps,
            (other.blue - self._blue) / steps,
            (other.alpha - self._alpha) / steps,
        )
        return color

    def posterize(self: C, quantum: float) -> C:
        """
        Reduce each RGB channel to a number of bands.

        Args:
            quantum: Above 1, the number of bands (rounded). In ``(0, 1]``, the
                band width, so the band count is ``round(1 / quantum)``.
        Returns:
            A new color with the same alpha
        Raises:
            InvalidQuantumError: if ``quantum`` is not positive.
        """
        if quantum > 1:
            bands = round_half_up(quantum)
        elif quantum > 0:
            bands = round_half_up(1 / quantum)
        else:
            raise InvalidQuantumError(quantum)
        color = type(self)()
        if bands == 1:
            color.set_rgba(0.5, 0.5, 0.5, self._alpha)
        else:
            # The top band lands above 1.0; the setter clamps it
            color.set_rgba(
                math.floor(bands * self._red) / (bands - 1),
                math.floor(bands * self._green) / (bands - 1),
                math.floor(bands * self._blue) / (bands - 1),
                self._alpha,
            )
        return color

    def hue_distance(self, other: Color) -> float:
        """Perceptual hue distance in ``[0, 1]``; 1 means opposite hues."""
        return human_hue_distance(self.hue, other.hue)

    def running_sum(self, accumulator: MutableSequence[float], weight: float = 1.0) -> MutableSequence[float]:
        """
        Add ``weight * channel`` into a 4 element (R, G, B, A) running total.

        The accumulator may be a list or a numpy array and is updated in place.
        """
        accumulator[0] += weight * self._red
        accumulator[1] += weight * self._green
        accumulator[2] += weight * self._blue
        accumulator[3] += weight * self._alpha
        return accumulator

    # ------------------ OUTPUT ------------------
    def to_hex(self, with_alpha: bool = False) -> str:
        """Lowercase hex digits, no ``#``."""
        channels = [self._red, self._green, self._blue]
        if with_alpha:
            channels.append(self._alpha)
        return "".join(unit_to_hex(c) for c in channels)

    def to_css_hex(self) -> str:
        return "#" + self.to_hex()

    def to_rgba_int(self, with_alpha: bool = True) -> int:
        return rgba_to_int(self._red, self._green, self._blue, self._alpha if with_alpha else 0.0)

    def _format_css(self, function: str, channels: Sequence[str], legacy: bool) -> str:
        delimiter = ", " if legacy else " "
        body = delimiter.join(channels)
        if self._alpha != 1.0:
            function += "a"
            body += (", " if legacy else " / ") + format_number(self._alpha, ALPHA_PLACES)
        return f"{function}({body})"

    def to_css(self, legacy: bool = False) -> str:
        """
        CSS ``rgb()`` text.

        Args:
            legacy: Comma syntax instead of space/slash syntax
        Returns:
            e.g. ``rgb(32 32 32)``, or ``rgba(32, 32, 32, 0.2)`` in legacy form
        """
        channels = [format_number(c * CHANNEL_MAX) for c in (self._red, self._green, self._blue)]
        return self._format_css("rgb", channels, legacy)

    # ------------------ CONSTRUCTION ------------------
    @classmethod
    def from_css(cls, css: str, functions: Optional[CssFunctionTable] = None) -> Color:
        """
        Parse CSS color text.

        The model is picked by the text (``hsl(...)`` gives an ``Hsl``), not by
        the class this is called on.
        """
        return parse_css(css, functions)

    def convert(self, space: str) -> Color:
        """Return a new instance of the model for ``space`` with the same RGBA."""
        from . import COLOR_CLASSES

        key = normalize_space(space)
        if key not in COLOR_CLASSES:
            raise ValueError(f"Unknown color space: {space}")
        return COLOR_CLASSES[key](self)

    def copy(self: C) -> C:
        clone = type(self)(self)
        clone._native = self._native
        clone._state = self._state
        return clone

    def __repr__(self) -> str:
        native = self._native_values()
        fields = ", ".join(
            f"{name}={value:.4g}" for name, value in zip(self.native_channels, native)
        )
        return f"{type(self).__name__}({fields}, alpha={self._alpha:.4g})"


class WithHue(Color):
    """
    Base for models whose first native component is hue (HSL, HSB).

    Hue and saturation come from the native components rather than from RGB, so
    a hue set on an achromatic color is kept.
    """
    __slots__ = ()

    @property
    def hue(self) -> float:
        return self._native_values()[0]

    @hue.setter
    def hue(self, value: ChannelInput) -> None:
        self.set_hue(value)

    @property
    def hue_int(self) -> int:
        return unit_to_int(self.hue)

    @property
    def saturation(self) -> float:
        return self._native_values()[1]

    @saturation.setter
    def saturation(self, value: ChannelInput) -> None:
        self.set_saturation(value)

    @property
    def saturation_int(self) -> int:
        return unit_to_int(self.saturation)

    def set_hue(self, hue: ChannelInput) -> None:
        self._set_native_channel(0, hue)

    def set_saturation(self, saturation: ChannelInput) -> None:
        self._set_native_channel(1, saturation)

    def set_hue_human(self, human_hue: float) -> None:
        """Set the hue from a value on the perceptual scale."""
        self._set_native((human_to_hue(clamp01(float(human_hue))), UNCHANGED, UNCHANGED))


def build_registry(*classes: type[Color]):
    return {
        cls.mode: cls
        for cls in classes
    }
