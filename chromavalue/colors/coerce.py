from __future__ import annotations
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any, NamedTuple

from ..errors import UnrecognizedShapeError


class InitKind(str, Enum):
    COLOR = "color"
    RGB = "rgb"
    HSV = "hsv"
    HSL = "hsl"
    RGB_STRING = "rgb_string"
    HSL_STRING = "hsl_string"
    HEX_STRING = "hex_string"


class ColorInit(NamedTuple):
    kind: InitKind
    value: Any


_STRING_PREFIXES = (
    (re.compile(r"^\s*rgb", re.IGNORECASE), InitKind.RGB_STRING),
    (re.compile(r"^\s*hsl", re.IGNORECASE), InitKind.HSL_STRING),
    (re.compile(r"^\s*#[0-9A-Fa-f]"), InitKind.HEX_STRING),
)

# Checked in order: a mapping holding both "r" and "l" is RGB
_MAPPING_KEYS = (
    ("r", InitKind.RGB),
    ("v", InitKind.HSV),
    ("l", InitKind.HSL),
)


def classify_init(value: Any) -> ColorInit:
    """
    Work out which kind of color input ``value`` is.

    Mappings are told apart by their keys (``r`` -> RGB, ``v`` -> HSV,
    ``l`` -> HSL), strings by their prefix (``rgb``, ``hsl``, ``#`` followed
    by a hex digit). Strings are only classified here, not parsed; a string
    with the right prefix but a bad body fails later with
    ``MalformedNotationError``.

    Raises:
        UnrecognizedShapeError: ``value`` has none of the known shapes.
    """
    from .color import Color  # local import to avoid cycles

    if isinstance(value, Color):
        return ColorInit(InitKind.COLOR, value)

    if isinstance(value, Mapping):
        for key, kind in _MAPPING_KEYS:
            if key in value:
                return ColorInit(kind, value)
    elif isinstance(value, str):
        for pattern, kind in _STRING_PREFIXES:
            if pattern.match(value):
                return ColorInit(kind, value)

    raise UnrecognizedShapeError(value)
