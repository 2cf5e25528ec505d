"""
CSS color syntax: parsing, the function dispatch table, named colors and the
number formatting used when serialising.
"""
from .formatting import format_number, as_percent
from .named_colors import NAMED_COLORS
from .functions import CssFunction, CssFunctionTable, default_functions
from .parser import parse_css, parse_function, split_arguments

__all__ = [
    'format_number',
    'as_percent',
    'NAMED_COLORS',
    'CssFunction',
    'CssFunctionTable',
    'default_functions',
    'parse_css',
    'parse_function',
    'split_arguments',
]
