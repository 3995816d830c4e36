"""
chromavalue Color Space Conversions
===================================

Pure functions mapping one channel record to another. The canonical space of
a ``Color`` is integer HSV; RGB and HSL are derived from it on demand.

Conversion Functions
--------------------

HSV -> RGB:
    hsv_to_rgb(hsv)
        Sector-based conversion, bytes rounded half up
    np_hsv_to_rgb(h, s, v)
        Vectorized HSV to RGB conversion

RGB -> HSV:
    rgb_to_hsv(rgb)
        Hue picked by the first channel equal to the maximum (r, then g, then b)
    np_rgb_to_hsv(r, g, b)
        Vectorized RGB to HSV conversion

HSV <-> HSL:
    hsv_to_hsl(hsv)
    hsl_to_hsv(hsl)
    np_hsv_to_hsl(h, s, v)
    np_hsl_to_hsv(h, s, l)

Rounding
--------
Every kernel rounds half up (``floor(x + 0.5)``), not half to even, so that
``{"h": 0, "s": 0, "v": 50}`` gives ``{"r": 128, "g": 128, "b": 128}``.

Ranges are not enforced: out-of-range channels go through the arithmetic
as-is and can produce out-of-range results.

Examples
--------
>>> from chromavalue.conversions import hsv_to_rgb, rgb_to_hsv
>>> hsv_to_rgb({"h": 120, "s": 100, "v": 100})
{'r': 0, 'g': 255, 'b': 0}
>>> rgb_to_hsv({"r": 255, "g": 128, "b": 0})
{'h': 30, 's': 100, 'v': 100}
"""

# HSV → RGB conversions
from .to_rgb import hsv_to_rgb, np_hsv_to_rgb

# RGB → HSV and HSL → HSV conversions
from .to_hsv import rgb_to_hsv, np_rgb_to_hsv, hsl_to_hsv, np_hsl_to_hsv

# HSV → HSL conversions
from .to_hsl import hsv_to_hsl, np_hsv_to_hsl

from .numbers import round_half_up, np_round_half_up

__all__ = [
    # HSV → RGB
    'hsv_to_rgb',
    'np_hsv_to_rgb',

    # RGB → HSV
    'rgb_to_hsv',
    'np_rgb_to_hsv',

    # HSV ↔ HSL
    'hsv_to_hsl',
    'hsl_to_hsv',
    'np_hsv_to_hsl',
    'np_hsl_to_hsv',

    # Rounding
    'round_half_up',
    'np_round_half_up',
]
