import re
from typing import Optional, Sequence, Tuple

from ..errors import MalformedNotationError
from ..types.channel_types import HSL, RGB, Scalar
from ..types.maxima import HSL_MAXIMA, RGB_MAXIMA, SHORTHAND_FACTOR

_NUMBER = r"(\d*\.?\d+)"
_SEPARATOR = r"\s*[,\s]\s*"

# name(n1[%], n2[%], n3[%][, alpha]); commas or whitespace between values,
# an optional "/" before alpha as in CSS Color 4. ASCII digits only
_COLOR_FUNCTION = re.compile(
    r"^\s*([a-z]+)\(\s*"
    + _NUMBER + r"(%?)" + _SEPARATOR
    + _NUMBER + r"(%?)" + _SEPARATOR
    + _NUMBER + r"(%?)"
    + r"(?:\s*[,/\s]\s*" + _NUMBER + r")?"
    + r"\s*\)\s*$",
    re.IGNORECASE | re.ASCII,
)

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]+$")

ParsedColor = Tuple[str, Tuple[Scalar, Scalar, Scalar], Optional[float]]


def _to_number(text: str) -> Scalar:
    return float(text) if "." in text else int(text)


def _collapse(value: Scalar) -> Scalar:
    """Turn integral floats (50.0) back into ints."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def parse_color_string(text: str, maxima: Sequence[Scalar]) -> ParsedColor:
    """
    Parse a functional color notation such as ``rgb(255, 0, 0)``.

    Args:
        text: The notation string.
        maxima: Per-channel maximums; a ``%`` value is read as a percentage
            of the matching maximum.

    Returns:
        ``(name, (c1, c2, c3), alpha)``, the name lower-cased and alpha
        ``None`` when the notation has none.

    Raises:
        MalformedNotationError: ``text`` does not follow the grammar.
    """
    if not isinstance(text, str):
        raise MalformedNotationError(repr(text), "expected a string")
    match = _COLOR_FUNCTION.match(text)
    if match is None:
        raise MalformedNotationError(text)

    name = match.group(1).lower()
    channels = []
    for index, maximum in enumerate(maxima[:3]):
        raw = _to_number(match.group(2 + index * 2))
        if match.group(3 + index * 2) == "%":
            raw = raw / 100 * maximum
        channels.append(_collapse(raw))

    alpha_text = match.group(8)
    alpha = float(alpha_text) if alpha_text is not None else None
    return name, (channels[0], channels[1], channels[2]), alpha


def _expect_name(text: str, name: str, allowed: Tuple[str, ...]) -> None:
    if name not in allowed:
        raise MalformedNotationError(text, f"expected {' or '.join(allowed)}(), got {name}()")


def parse_rgb_string(text: str) -> RGB:
    """Parse ``rgb(r, g, b)`` or ``rgba(r, g, b, a)`` into an RGB record."""
    name, (r, g, b), alpha = parse_color_string(text, RGB_MAXIMA)
    _expect_name(text, name, ("rgb", "rgba"))
    rgb: RGB = {"r": r, "g": g, "b": b}
    if alpha is not None:
        rgb["a"] = alpha
    return rgb


def parse_hsl_string(text: str) -> HSL:
    """Parse ``hsl(h, s%, l%)`` or ``hsla(h, s%, l%, a)`` into an HSL record."""
    name, (h, s, l), alpha = parse_color_string(text, HSL_MAXIMA)
    _expect_name(text, name, ("hsl", "hsla"))
    hsl: HSL = {"h": h, "s": s, "l": l}
    if alpha is not None:
        hsl["a"] = alpha
    return hsl


def parse_hex_string(text: str) -> RGB:
    """
    Parse ``#RGB`` or ``#RRGGBB`` into an RGB record.

    A three digit string is shorthand: each digit is a 4-bit channel,
    expanded to 8 bits by multiplying by 17 (``#0f0`` -> ``(0, 255, 0)``).

    Raises:
        MalformedNotationError: not 3 or 6 hex digits after the ``#``.
    """
    if not isinstance(text, str):
        raise MalformedNotationError(repr(text), "expected a string")
    digits = text.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    if not _HEX_DIGITS.match(digits):
        raise MalformedNotationError(text, "not a hexadecimal number")

    if len(digits) == 3:
        bit_length, bit_mask, multiplier = 4, 0xF, SHORTHAND_FACTOR
    elif len(digits) == 6:
        bit_length, bit_mask, multiplier = 8, 0xFF, 1
    else:
        raise MalformedNotationError(text, f"expected 3 or 6 hex digits, got {len(digits)}")

    value = int(digits, 16)
    return {
        "r": ((value >> (bit_length * 2)) & bit_mask) * multiplier,
        "g": ((value >> bit_length) & bit_mask) * multiplier,
        "b": (value & bit_mask) * multiplier,
    }
