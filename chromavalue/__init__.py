"""
chromavalue - A Mutable Color Value
===================================

A single color, stored canonically as HSV, converted on demand to RGB, HSL
and the common CSS-style notations, with mixing, lightening and darkening
and per-channel change notification.

Key Features
------------
- Canonical integer HSV storage; RGB/HSL/strings are always recomputed
- Parsing and formatting of rgb()/rgba(), hsl()/hsla(), #RGB and #RRGGBB
- Mixing in RGB space, lightening and darkening in HSV space
- Change listeners receiving a per-channel change record
- Vectorized numpy variants of every conversion kernel

Quick Start
-----------
>>> from chromavalue import Color, mix
>>>
>>> red = Color("#f00")
>>> red.get_hsl_string()
'hsl(0, 100%, 50%)'
>>> mix("#000", "#fff").get_hex_string()
'#808080'

Modules
-------
- colors: the Color value, construction dispatch and color algebra
- conversions: HSV <-> RGB and HSV <-> HSL kernels (scalar and numpy)
- notation: string parsing and formatting
- errors: exception hierarchy
"""

from .colors import (
    Color, get_color, ChangeListener, ColorInput,
    InitKind, ColorInit, classify_init,
    clamp, compare, mix, mix_rgb, lighten, darken,
)
from .conversions import (
    hsv_to_rgb, rgb_to_hsv, hsv_to_hsl, hsl_to_hsv,
    np_hsv_to_rgb, np_rgb_to_hsv, np_hsv_to_hsl, np_hsl_to_hsv,
    round_half_up,
)
from .notation import (
    parse_color_string, parse_rgb_string, parse_hsl_string, parse_hex_string,
    format_rgb_string, format_hsl_string, format_hex_string,
)
from .errors import ColorError, MalformedNotationError, UnrecognizedShapeError, UndefinedChannelError
from .types import HSV, RGB, HSL, ChangeRecord, ColorModel

__version__ = "1.0.0"

__all__ = [
    # Color value
    "Color", "get_color", "ChangeListener", "ColorInput",
    "InitKind", "ColorInit", "classify_init",

    # Algebra
    "clamp", "compare", "mix", "mix_rgb", "lighten", "darken",

    # Conversions
    "hsv_to_rgb", "rgb_to_hsv", "hsv_to_hsl", "hsl_to_hsv",
    "np_hsv_to_rgb", "np_rgb_to_hsv", "np_hsv_to_hsl", "np_hsl_to_hsv",
    "round_half_up",

    # Notation
    "parse_color_string", "parse_rgb_string", "parse_hsl_string", "parse_hex_string",
    "format_rgb_string", "format_hsl_string", "format_hex_string",

    # Errors
    "ColorError", "MalformedNotationError", "UnrecognizedShapeError", "UndefinedChannelError",

    # Types
    "HSV", "RGB", "HSL", "ChangeRecord", "ColorModel",

    # Version
    "__version__",
]
