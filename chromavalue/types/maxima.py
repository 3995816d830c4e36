# No dependencies
from typing import Dict, Tuple

HUE_360 = 360
PERCENT_100 = 100
BYTE_MAX = 255

RGB_MAXIMA: Tuple[int, int, int] = (BYTE_MAX, BYTE_MAX, BYTE_MAX)
HSL_MAXIMA: Tuple[int, int, int] = (HUE_360, PERCENT_100, PERCENT_100)

# Shorthand hex digits expand to 8 bits as digit * 17 (0xF * 17 == 0xFF)
SHORTHAND_FACTOR = 17

DEFAULT_MIX_WEIGHT = 50
DEFAULT_MODEL = "hsv"

MODEL_CHANNELS: Dict[str, Tuple[str, str, str]] = {
    "hsv": ("h", "s", "v"),
    "rgb": ("r", "g", "b"),
    "hsl": ("h", "s", "l"),
}
