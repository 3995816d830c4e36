from .channel_types import (
    HSV, RGB, HSL,
    Scalar, ColorModel, MaybeHSV, ChannelRecord, ChangeRecord,
    is_complete,
)
from .maxima import (
    HUE_360, PERCENT_100, BYTE_MAX,
    RGB_MAXIMA, HSL_MAXIMA, SHORTHAND_FACTOR,
    DEFAULT_MIX_WEIGHT, DEFAULT_MODEL, MODEL_CHANNELS,
)
