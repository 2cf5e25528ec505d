"""
CSS color function dispatch table.

Maps a CSS function name (``rgb``, ``hsla``...) to the color model that parses
its arguments. Tables are immutable; ``register`` returns a new table, so adding
a function never changes what other callers see.
"""
from __future__ import annotations
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, Iterator, Mapping, Optional, Type

from ..errors import UnsupportedFunctionError

if TYPE_CHECKING:
    from ..colors.color_base import Color


@dataclass(frozen=True)
class CssFunction:
    """
    A color function: the model it builds and which argument, if any, is a hue.

    Hue arguments are read as angles; every other argument goes through the
    channel limiter.
    """
    color_cls: Type["Color"]
    hue_channel: Optional[int] = None


class CssFunctionTable(Mapping[str, CssFunction]):
    __slots__ = ("_functions",)

    def __init__(self, functions: Optional[Mapping[str, CssFunction]] = None) -> None:
        self._functions = MappingProxyType(dict(functions or {}))

    def __getitem__(self, name: str) -> CssFunction:
        return self._functions[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)

    def __repr__(self) -> str:
        return f"CssFunctionTable({sorted(self._functions)})"

    def register(
        self,
        names: Iterable[str] | str,
        color_cls: Type["Color"],
        hue_channel: Optional[int] = None,
    ) -> "CssFunctionTable":
        """
        Return a new table with ``names`` dispatching to ``color_cls``.

        Args:
            names: One function name or several (e.g. ``("hsb", "hsba")``)
            color_cls: The model class to construct
            hue_channel: Index of the argument holding a hue angle, if any
        Returns:
            A new CssFunctionTable; this one is unchanged
        """
        if isinstance(names, str):
            names = (names,)
        functions = dict(self._functions)
        entry = CssFunction(color_cls, hue_channel)
        for name in names:
            functions[name.lower()] = entry
        return CssFunctionTable(functions)

    def lookup(self, name: str) -> CssFunction:
        """
        Find the entry for a function name.

        Raises:
            UnsupportedFunctionError: if no model is registered for ``name``.
        """
        try:
            return self._functions[name.lower()]
        except KeyError:
            raise UnsupportedFunctionError(name) from None


def _default_functions() -> CssFunctionTable:
    from ..colors.rgb import Rgb
    from ..colors.hsl import Hsl

    return (
        CssFunctionTable()
        .register(("rgb", "rgba"), Rgb)
        .register(("hsl", "hsla"), Hsl, hue_channel=0)
    )


_default_table: Optional[CssFunctionTable] = None
_default_lock = threading.Lock()


def default_functions() -> CssFunctionTable:
    """
    The built-in table: ``rgb``/``rgba`` and ``hsl``/``hsla``.

    Built on first use, since the models import this package.
    """
    global _default_table
    if _default_table is None:
        with _default_lock:
            if _default_table is None:
                _default_table = _default_functions()
    return _default_table
