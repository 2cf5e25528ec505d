from __future__ import annotations
from enum import Enum
from typing import Literal, Tuple, Union

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ColorSpace = Literal["rgb", "hsl", "hsb", "cmyk"]

# "hsv" is accepted anywhere a space name is, as an alias of "hsb"
SPACE_ALIASES = {"hsv": "hsb"}


class ModelState(Enum):
    """
    Which representation of a color is current.

    RGB_FRESH:    RGBA was written last; native components must be recomputed
                  before they are read.
    NATIVE_FRESH: native components are current and RGBA has already been
                  pushed from them.
    """
    RGB_FRESH = "rgb_fresh"
    NATIVE_FRESH = "native_fresh"


class Unchanged(Enum):
    """Channel input meaning "keep the current value" (CSS ``none``)."""
    UNCHANGED = "none"

    def __repr__(self):
        return "UNCHANGED"


UNCHANGED = Unchanged.UNCHANGED


class Percentage(float):
    """A channel value expressed in percent, e.g. ``Percentage(50)`` is 0.5."""

    def __repr__(self):
        return f"Percentage({float(self)})"


ChannelInput = Union[int, float, str, Percentage, Unchanged]


def normalize_space(space: str) -> str:
    """
    Lower-case a color space name and resolve aliases.

    Args:
        space: Color space string such as "RGB", "hsv" or "cmyk"
    Returns:
        Canonical space name
    """
    space = space.lower()
    return SPACE_ALIASES.get(space, space)

