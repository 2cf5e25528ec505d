"""
Channel value limiting.

Every model stores its components as floats in ``[0, 1]``. The functions here turn
the loosely typed values callers hand in (0-255 integers, unit floats, numeric
strings, percentages) into that domain.
"""
from __future__ import annotations
import numbers
import re

from boundednumbers.functions import clamp

from ..errors import InvalidValueError
from ..types.color_types import ChannelInput, Percentage, Unchanged, UNCHANGED
from ..types.format_type import CHANNEL_MAX, PERCENT_MAX, HUE_UNITS

_NUMERIC = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_HUE_TOKEN = re.compile(r"(?P<number>[^a-z%]+)(?P<unit>deg|grad|rad|turn|%)?")


def clamp01(value: float) -> float:
    """Clamp a float into ``[0, 1]``."""
    return float(clamp(value, 0.0, 1.0))


def _parse_number(text: str, original) -> float:
    if not _NUMERIC.fullmatch(text):
        raise InvalidValueError(original)
    return float(text)


def limit(value: ChannelInput, alpha: bool = False) -> float:
    """
    Normalise a channel value into ``[0, 1]``.

    Args:
        value: An int (0-255 scale), a float (unit scale), a ``Percentage``, or a
            string. Strings ending in ``%`` are percentages; other strings are on the
            0-255 scale, or the unit scale when ``alpha`` is set.
        alpha: Whether the value is an alpha (or other unit-scale) channel.

    Returns:
        The value clamped to ``[0, 1]``.

    Raises:
        InvalidValueError: if a string is not numeric.
    """
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("%"):
            number = _parse_number(text[:-1].strip(), value) / PERCENT_MAX
        elif alpha:
            number = _parse_number(text, value)
        else:
            number = _parse_number(text, value) / CHANNEL_MAX
    elif isinstance(value, Percentage):
        number = float(value) / PERCENT_MAX
    elif isinstance(value, numbers.Integral):
        number = int(value) / CHANNEL_MAX
    elif isinstance(value, numbers.Real):
        number = float(value)
    else:
        raise InvalidValueError(value)
    return clamp01(number)


def is_unchanged(value) -> bool:
    """True when ``value`` is the "keep current value" marker or the string ``none``."""
    if value is UNCHANGED:
        return True
    return isinstance(value, str) and value.strip().lower() == "none"


def resolve_channel(value: ChannelInput, alpha: bool = False) -> float | Unchanged:
    """
    Resolve a setter argument once, at the API boundary.

    Returns ``UNCHANGED`` for the ``none`` marker, otherwise the limited float.
    """
    if is_unchanged(value):
        return UNCHANGED
    return limit(value, alpha)


def limit_hue(value: ChannelInput) -> float | Unchanged:
    """
    Read a CSS hue token into the unit hue circle ``[0, 1)``.

    Bare numbers are degrees; ``deg``, ``grad``, ``rad`` and ``turn`` units and
    percentages of a full turn are accepted. Out-of-range hues wrap around.
    """
    if is_unchanged(value):
        return UNCHANGED
    if isinstance(value, str):
        text = value.strip().lower()
        match = _HUE_TOKEN.fullmatch(text)
        if match is None:
            raise InvalidValueError(value)
        number = _parse_number(match.group("number").strip(), value)
        unit = match.group("unit")
        if unit == "%":
            turns = number / PERCENT_MAX
        else:
            turns = number / HUE_UNITS[unit or "deg"]
    elif isinstance(value, numbers.Real) and not isinstance(value, bool):
        turns = float(value) / HUE_UNITS["deg"]
    else:
        raise InvalidValueError(value)
    turns %= 1.0
    # -tiny % 1.0 rounds to exactly 1.0
    return 0.0 if turns >= 1.0 else turns


def resolve_alpha(value: ChannelInput) -> float | Unchanged:
    """
    Resolve an alpha argument.

    Alpha is always a unit value, so plain numbers (integers included) are used
    as is rather than read on the 0-255 scale.
    """
    if is_unchanged(value):
        return UNCHANGED
    if isinstance(value, numbers.Integral):
        value = float(value)
    return limit(value, alpha=True)
