import numpy as np
from numpy import ndarray as NDArray

from ..types.channel_types import HSL, HSV, RGB
from ..types.maxima import BYTE_MAX, HUE_360, PERCENT_100
from .numbers import round_half_up, np_round_half_up


## RGB to HSV conversions

def rgb_to_hsv(rgb: RGB) -> HSV:
    """
    Convert an RGB record to an HSV record.

    When several channels share the maximum, the hue comes from the first of
    r, g, b that equals it. All outputs are integers; a hue that rounds up to
    360 is reported as 0.
    """
    r = rgb["r"] / BYTE_MAX
    g = rgb["g"] / BYTE_MAX
    b = rgb["b"] / BYTE_MAX
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    if max_c == min_c:
        hue = 0.0
    elif max_c == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4
    hue /= 6

    return {
        "h": round_half_up(hue * HUE_360) % HUE_360,
        "s": round_half_up(0 if max_c == 0 else (delta / max_c) * PERCENT_100),
        "v": round_half_up(max_c * PERCENT_100),
    }


def np_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: convert integer RGB channels to HSV.

    Args:
        r, g, b: array-like or scalar, bytes in [0, 255]

    Returns:
        hsv: integer array of shape (..., 3): (hue [0,360), saturation %, value %)
    """
    r = np.asarray(r, dtype=float) / BYTE_MAX
    g = np.asarray(g, dtype=float) / BYTE_MAX
    b = np.asarray(b, dtype=float) / BYTE_MAX

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c
    gray = delta == 0
    safe_delta = np.where(gray, 1.0, delta)

    hue = np.where(
        max_c == r,
        (g - b) / safe_delta + np.where(g < b, 6, 0),
        np.where(
            max_c == g,
            (b - r) / safe_delta + 2,
            (r - g) / safe_delta + 4,
        ),
    )
    hue = np.where(gray, 0.0, hue) / 6

    black = max_c == 0
    saturation = np.where(black, 0.0, (delta / np.where(black, 1.0, max_c)) * PERCENT_100)

    h = np.mod(np_round_half_up(hue * HUE_360), HUE_360)
    s = np_round_half_up(saturation)
    v = np_round_half_up(max_c * PERCENT_100)
    return np.stack([h, s, v], axis=-1)


## HSL to HSV conversions

def hsl_to_hsv(hsl: HSL) -> HSV:
    """
    Convert an HSL record to an HSV record.

    Hue passes through untouched. Black (``l + s == 0`` after scaling) maps
    to ``s = v = 0`` instead of dividing by zero.
    """
    s = hsl["s"] / PERCENT_100
    l = hsl["l"] / PERCENT_100
    l *= 2
    s *= l if l <= 1 else 2 - l
    total = l + s
    if total == 0:
        return {"h": hsl["h"], "s": 0, "v": 0}
    return {
        "h": hsl["h"],
        "s": round_half_up(((2 * s) / total) * PERCENT_100),
        "v": round_half_up((total / 2) * PERCENT_100),
    }


def np_hsl_to_hsv(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: convert HSL channels to HSV.

    Args:
        h: array-like or scalar, hue in degrees (passed through)
        s: array-like or scalar, saturation in percent
        l: array-like or scalar, lightness in percent

    Returns:
        hsv: float array of shape (..., 3); hue as given, s and v rounded half up
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float) / PERCENT_100
    l = np.asarray(l, dtype=float) / PERCENT_100

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    l = l * 2
    s = s * np.where(l <= 1, l, 2 - l)
    total = l + s
    black = total == 0
    safe_total = np.where(black, 1.0, total)

    s_hsv = np.where(black, 0.0, ((2 * s) / safe_total) * PERCENT_100)
    v_hsv = np.where(black, 0.0, (total / 2) * PERCENT_100)
    return np.stack(
        [h, np_round_half_up(s_hsv), np_round_half_up(v_hsv)],
        axis=-1,
    )
