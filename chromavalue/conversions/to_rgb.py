import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.channel_types import HSV, RGB
from ..types.maxima import BYTE_MAX, HUE_360, PERCENT_100
from .numbers import round_half_up, np_round_half_up


def hsv_to_rgb(hsv: HSV) -> RGB:
    """
    Convert an HSV record to an RGB record.

    Args:
        hsv: ``{"h": degrees, "s": percent, "v": percent}``

    Returns:
        ``{"r", "g", "b"}`` bytes, rounded half up.

    Hues outside [0, 360) are not rejected; the sector index wraps through
    the modulo, so 360 behaves like 0 and -60 like 300.
    """
    h = hsv["h"] / HUE_360
    s = hsv["s"] / PERCENT_100
    v = hsv["v"] / PERCENT_100

    i = math.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sector = i % 6
    if sector == 0:
        r, g, b = v, t, p
    elif sector == 1:
        r, g, b = q, v, p
    elif sector == 2:
        r, g, b = p, v, t
    elif sector == 3:
        r, g, b = p, q, v
    elif sector == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q

    return {
        "r": round_half_up(r * BYTE_MAX),
        "g": round_half_up(g * BYTE_MAX),
        "b": round_half_up(b * BYTE_MAX),
    }


def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: convert HSV channels to integer RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in percent
        v: array-like or scalar, value in percent

    Returns:
        rgb: integer array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float) / HUE_360
    s = np.asarray(s, dtype=float) / PERCENT_100
    v = np.asarray(v, dtype=float) / PERCENT_100

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    i = np.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sector = np.mod(i, 6).astype(int)
    r = np.choose(sector, [v, q, p, p, t, v])
    g = np.choose(sector, [t, v, v, q, p, p])
    b = np.choose(sector, [p, p, t, v, v, q])

    return np_round_half_up(np.stack([r, g, b], axis=-1) * BYTE_MAX)
