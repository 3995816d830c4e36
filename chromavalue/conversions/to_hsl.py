import numpy as np
from numpy import ndarray as NDArray

from ..types.channel_types import HSL, HSV
from ..types.maxima import PERCENT_100
from .numbers import round_half_up, np_round_half_up


## HSV to HSL conversions

def hsv_to_hsl(hsv: HSV) -> HSL:
    """
    Convert an HSV record to an HSL record.

    Hue passes through untouched. At pure black and pure white the
    saturation denominator is zero; the saturation is reported as 0.
    """
    s = hsv["s"] / PERCENT_100
    v = hsv["v"] / PERCENT_100
    l = 0.5 * v * (2 - s)
    denominator = 1 - abs(2 * l - 1)
    s = v * s / denominator if denominator != 0 else 0.0
    return {
        "h": hsv["h"],
        "s": round_half_up(s * PERCENT_100),
        "l": round_half_up(l * PERCENT_100),
    }


def np_hsv_to_hsl(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: convert HSV channels to HSL.

    Args:
        h: array-like or scalar, hue in degrees (passed through)
        s: array-like or scalar, saturation in percent
        v: array-like or scalar, value in percent

    Returns:
        hsl: float array of shape (..., 3); hue as given, s and l rounded half up
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float) / PERCENT_100
    v = np.asarray(v, dtype=float) / PERCENT_100

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    l = 0.5 * v * (2 - s)
    denominator = 1 - np.abs(2 * l - 1)
    degenerate = denominator == 0
    s_hsl = np.where(degenerate, 0.0, v * s / np.where(degenerate, 1.0, denominator))

    return np.stack(
        [h, np_round_half_up(s_hsl * PERCENT_100), np_round_half_up(l * PERCENT_100)],
        axis=-1,
    )
