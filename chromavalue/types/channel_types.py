from __future__ import annotations
from typing import Dict, Literal, Optional, TypedDict, Union

Scalar = Union[int, float]
ColorModel = Literal["hsv", "rgb", "hsl"]


class HSV(TypedDict):
    h: Scalar
    s: Scalar
    v: Scalar


class _RGBBase(TypedDict):
    r: Scalar
    g: Scalar
    b: Scalar


class RGB(_RGBBase, total=False):
    a: float


class _HSLBase(TypedDict):
    h: Scalar
    s: Scalar
    l: Scalar


class HSL(_HSLBase, total=False):
    a: float


# Canonical slot of a Color; channels are None until first assigned
MaybeHSV = Dict[str, Optional[Scalar]]
ChannelRecord = Union[HSV, RGB, HSL]
ChangeRecord = Dict[str, bool]


def is_complete(record: MaybeHSV) -> bool:
    """Return True when every channel of ``record`` holds a value."""
    return all(value is not None for value in record.values())
