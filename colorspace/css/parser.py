"""
CSS color parsing.

Recognised forms, tried in this order:

* named colors (``springgreen``, ``transparent``...)
* hex, with or without ``#``: ``#rgb`` / ``#rrggbb``
* color functions, legacy comma syntax ``rgb(32, 12.6%, 32, 0.2)`` or modern
  space/slash syntax ``rgb(32 12.6% 32 / 0.2)``; in either, a channel may be
  ``none`` to leave it at its default.
"""
from __future__ import annotations
import re
from typing import TYPE_CHECKING, List, Optional

from ..errors import InvalidArgumentsError, UnparseableColorError
from ..conversions.limiter import limit, limit_hue, is_unchanged
from ..types.color_types import ChannelInput, UNCHANGED
from .functions import CssFunctionTable, default_functions
from .named_colors import NAMED_COLORS

if TYPE_CHECKING:
    from ..colors.color_base import Color

_HEX = re.compile(r"#?(?:[0-9a-f]{3}){1,2}")
_FUNCTION = re.compile(r"(?P<name>[a-z][a-z0-9-]*)\s*\((?P<args>.*)\)", re.DOTALL)
_WHITESPACE = re.compile(r"\s+")
_SLASH = re.compile(r"\s*/\s*")

ALPHA_INDEX = 3


def split_arguments(function: str, args: str) -> List[ChannelInput]:
    """
    Split the argument text of a color function into four raw tokens.

    A single comma-free argument string is modern syntax: three space separated
    channels, the last optionally followed by ``/ alpha``. Three or four comma
    separated tokens are legacy syntax. A missing alpha defaults to 1.0.

    Raises:
        InvalidArgumentsError: if the token count fits neither syntax.
    """
    parts = args.split(",")
    if len(parts) == 1:
        text = _SLASH.sub("/", _WHITESPACE.sub(" ", args.strip()))
        tokens: List[ChannelInput] = list(text.split(" ")) if text else []
        if len(tokens) != 3:
            raise InvalidArgumentsError(args, "three space separated channels", function)
        last = str(tokens[2]).split("/")
        if len(last) > 2:
            raise InvalidArgumentsError(args, "at most one '/' before alpha", function)
        tokens[2] = last[0]
        tokens.append(last[1] if len(last) == 2 else 1.0)
        return tokens

    if len(parts) in (3, 4):
        tokens = [_WHITESPACE.sub("", part) for part in parts]
        if len(tokens) == 3:
            tokens.append(1.0)
        return tokens

    raise InvalidArgumentsError(args, "three or four comma separated channels", function)


def _resolve_token(token: ChannelInput, index: int, hue_channel: Optional[int]):
    if is_unchanged(token):
        return UNCHANGED
    if index == hue_channel:
        return limit_hue(token)
    return limit(token, index == ALPHA_INDEX)


def parse_function(
    function: str,
    args: str,
    functions: Optional[CssFunctionTable] = None,
) -> "Color":
    """
    Build a color from a CSS function name and its argument text.

    Raises:
        UnsupportedFunctionError: if the function is not in ``functions``.
        InvalidArgumentsError: on a wrong argument count.
        InvalidValueError: if a token is not numeric.
    """
    entry = (functions if functions is not None else default_functions()).lookup(function)
    tokens = split_arguments(function, args)
    values = [_resolve_token(token, i, entry.hue_channel) for i, token in enumerate(tokens)]
    return entry.color_cls(values)


def parse_css(css: str, functions: Optional[CssFunctionTable] = None) -> "Color":
    """
    Parse CSS color text into a color model instance.

    Named and hex colors give an ``Rgb``; functions give whatever model the
    function table maps them to.

    Args:
        css: CSS color text, case-insensitive
        functions: Function table, defaults to ``default_functions()``
    Returns:
        A new color
    Raises:
        UnparseableColorError: if the text matches none of the forms.
    """
    from ..colors.rgb import Rgb

    text = css.strip().lower()
    if text in NAMED_COLORS:
        color = Rgb()
        color.set_named_color(text)
        return color
    if _HEX.fullmatch(text):
        color = Rgb()
        color.set_hex(text)
        return color
    match = _FUNCTION.fullmatch(text)
    if match:
        return parse_function(match.group("name"), match.group("args"), functions)
    raise UnparseableColorError(css)
