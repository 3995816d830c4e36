from typing import Mapping, Optional

from ..types.channel_types import HSL, RGB, Scalar
from ..types.maxima import SHORTHAND_FACTOR


def format_number(value: Scalar) -> str:
    """Render a channel without a trailing ``.0`` on integral floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _alpha(record: Mapping) -> Optional[Scalar]:
    return record.get("a")


def format_rgb_string(rgb: RGB) -> str:
    """Return ``rgb(r, g, b)``, or ``rgba(r, g, b, a)`` when the record has alpha."""
    alpha = _alpha(rgb)
    channels = ", ".join(format_number(rgb[channel]) for channel in ("r", "g", "b"))
    if alpha is None:
        return f"rgb({channels})"
    return f"rgba({channels}, {format_number(alpha)})"


def format_hsl_string(hsl: HSL) -> str:
    """Return ``hsl(h, s%, l%)``, or ``hsla(h, s%, l%, a)`` when the record has alpha."""
    alpha = _alpha(hsl)
    channels = f"{format_number(hsl['h'])}, {format_number(hsl['s'])}%, {format_number(hsl['l'])}%"
    if alpha is None:
        return f"hsl({channels})"
    return f"hsla({channels}, {format_number(alpha)})"


def format_hex_string(rgb: RGB) -> str:
    """
    Return the hex notation of an RGB record.

    Uses the 3 digit shorthand when every channel is a multiple of 17
    (``#F00``), the 6 digit form otherwise (``#FF8000``). Digits are
    upper-case and zero-padded.
    """
    r, g, b = rgb["r"], rgb["g"], rgb["b"]
    shorthand = r % SHORTHAND_FACTOR == 0 and g % SHORTHAND_FACTOR == 0 and b % SHORTHAND_FACTOR == 0
    divider = SHORTHAND_FACTOR if shorthand else 1
    bit_length = 4 if shorthand else 8
    width = 3 if shorthand else 6

    packed = (
        int(r // divider) << (bit_length * 2)
        | int(g // divider) << bit_length
        | int(b // divider)
    )
    return "#" + format(packed, f"0{width}X")
