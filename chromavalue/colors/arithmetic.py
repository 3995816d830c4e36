from __future__ import annotations
from math import floor
from typing import TYPE_CHECKING, Any, Mapping, Optional

from boundednumbers import clamp

from ..errors import UndefinedChannelError
from ..types.channel_types import RGB, ChangeRecord, Scalar
from ..types.maxima import DEFAULT_MIX_WEIGHT, PERCENT_100
from ..utils import value_or_default

if TYPE_CHECKING:
    from .color import Color


def compare(a: Mapping[str, Any], b: Mapping[str, Any]) -> ChangeRecord:
    """
    Report which channels differ between two records of the same shape.

    Keys are taken from ``a``. Values are compared with ``!=``, so ``50`` and
    ``50.0`` count as unchanged.
    """
    return {key: b.get(key) != a[key] for key in a}


def mix_rgb(rgb1: RGB, rgb2: RGB, weight: Optional[Scalar] = None) -> RGB:
    """
    Linearly interpolate two RGB records.

    Args:
        rgb1: Start color.
        rgb2: End color.
        weight: 0 gives ``rgb1``, 100 gives ``rgb2``. Clamped to [0, 100];
            ``None`` means 50.

    Returns:
        The interpolated record, each channel floored.
    """
    weight = clamp(value_or_default(weight, DEFAULT_MIX_WEIGHT) / PERCENT_100, 0, 1)
    return {
        "r": floor(rgb1["r"] + (rgb2["r"] - rgb1["r"]) * weight),
        "g": floor(rgb1["g"] + (rgb2["g"] - rgb1["g"]) * weight),
        "b": floor(rgb1["b"] + (rgb2["b"] - rgb1["b"]) * weight),
    }


def mix(color1: Any, color2: Any, weight: Optional[Scalar] = None) -> "Color":
    """Return a new Color between ``color1`` and ``color2`` (see ``mix_rgb``)."""
    from .color import Color, get_color  # local import to avoid cycles

    rgb1 = get_color(color1).get_rgb()
    rgb2 = get_color(color2).get_rgb()
    return Color(mix_rgb(rgb1, rgb2, weight))


def _shift_value(color: Any, amount: Scalar) -> "Color":
    from .color import get_color  # local import to avoid cycles

    col = get_color(color)
    if not col.is_set:
        raise UndefinedChannelError(f"Cannot change the brightness of an unset color: {col!r}")
    hsv = col.get_hsv()
    hsv["v"] = clamp(hsv["v"] + amount, 0, PERCENT_100)
    col.set_hsv(hsv)
    return col


def lighten(color: Any, amount: Scalar) -> "Color":
    """
    Raise the HSV value of ``color`` by ``amount``, clamped to 100.

    A Color argument is modified in place and returned; any other color
    input is converted to a new Color first.
    """
    return _shift_value(color, amount)


def darken(color: Any, amount: Scalar) -> "Color":
    """Lower the HSV value of ``color`` by ``amount``, clamped to 0 (see ``lighten``)."""
    return _shift_value(color, -amount)
