"""Number formatting for CSS and human-readable output."""
from decimal import Decimal, ROUND_HALF_UP

from ..types.format_type import PERCENT_PLACES


def format_number(value: float, places: int = 0) -> str:
    """
    Round half away from zero to ``places`` decimals and drop trailing zeros.

    The value is first reduced to 15 significant digits so binary noise such as
    ``10.005000000000001`` or ``10.049999999999999`` rounds the way it reads.

    >>> format_number(10.005, 2)
    '10.01'
    >>> format_number(0.2, 4)
    '0.2'
    """
    exact = Decimal(f"{value:.15g}")
    rounded = exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    text = f"{rounded:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def as_percent(value: float, places: int = PERCENT_PLACES) -> str:
    """
    Format a unit value as a percentage string.

    >>> as_percent(0.1005)
    '10.05%'
    >>> as_percent(0.10005, 3)
    '10.005%'
    """
    return format_number(value * 100, places) + "%"
