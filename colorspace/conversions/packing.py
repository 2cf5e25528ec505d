"""Integer and hexadecimal encodings of RGBA colors."""
import math
import re

from ..errors import UnparseableColorError
from ..types.format_type import CHANNEL_MAX

_NOT_HEX = re.compile(r"[^0-9a-f]", re.IGNORECASE)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def unit_to_int(value: float) -> int:
    """Scale a unit channel to 0-255 with rounding."""
    return round_half_up(CHANNEL_MAX * value)


def rgba_to_int(
    red: float = 0.0,
    green: float = 0.0,
    blue: float = 0.0,
    alpha: float = 1.0,
) -> int:
    """
    Pack unit RGBA floats into a 32-bit ARGB integer.

    Alpha occupies the high byte: ``(alpha << 24) | (red << 16) | (green << 8) | blue``.
    """
    return (
        (unit_to_int(alpha) << 24)
        | (unit_to_int(red) << 16)
        | (unit_to_int(green) << 8)
        | unit_to_int(blue)
    )


def int_to_rgba(packed: int) -> tuple[int, int, int, int]:
    """Unpack a 32-bit ARGB integer into ``(red, green, blue, alpha)`` bytes."""
    return (
        (packed >> 16) & 0xFF,
        (packed >> 8) & 0xFF,
        packed & 0xFF,
        (packed >> 24) & 0xFF,
    )


def unit_to_hex(value: float) -> str:
    """Two lowercase hex digits for a unit channel (truncating, not rounding)."""
    byte = max(0, min(CHANNEL_MAX, int(value * CHANNEL_MAX + 1e-9)))
    return f"{byte:02x}"


def hex_to_unit_rgb(text: str) -> tuple[float, float, float]:
    """
    Decode a CSS hex color into unit RGB.

    Every non-hex character is ignored; what remains must be 3 or 6 digits. In
    the 3-digit form each digit is doubled.

    Raises:
        UnparseableColorError: if the digits are not 3 or 6 long.
    """
    clean = _NOT_HEX.sub("", text)
    if len(clean) == 3:
        clean = "".join(digit * 2 for digit in clean)
    elif len(clean) != 6:
        raise UnparseableColorError(text)
    return tuple(int(clean[i:i + 2], 16) / CHANNEL_MAX for i in (0, 2, 4))
