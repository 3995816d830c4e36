"""
chromavalue Color Value
=======================

``Color`` holds a single color as integer HSV and exposes RGB, HSL and the
``rgb()``/``hsl()``/``#hex`` notations as computed views.

Usage
-----
>>> from chromavalue.colors import Color
>>>
>>> accent = Color("rgb(255, 128, 0)")
>>> accent.get_hsv()
{'h': 30, 's': 100, 'v': 100}
>>> accent.get_hex_string()
'#FF8000'
>>>
>>> # Watch for changes
>>> seen = []
>>> watched = Color({"h": 0, "s": 100, "v": 100}, on_change=lambda c, changes: seen.append(changes))
>>> watched.set_channel("hsv", "h", 120)
>>> seen
[{'h': True, 's': False, 'v': False}]

Algebra
-------
``mix``, ``lighten`` and ``darken`` work on any color input (Color, channel
mapping or notation string). ``lighten``/``darken`` modify a Color argument
in place; ``mix`` always returns a new Color.
"""

from .color import Color, get_color, ChangeListener, ColorInput
from .coerce import InitKind, ColorInit, classify_init
from .arithmetic import clamp, compare, mix, mix_rgb, lighten, darken

__all__ = [
    'Color', 'get_color', 'ChangeListener', 'ColorInput',
    'InitKind', 'ColorInit', 'classify_init',
    'clamp', 'compare', 'mix', 'mix_rgb', 'lighten', 'darken',
]
