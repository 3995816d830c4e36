from __future__ import annotations
import logging
import warnings
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from . import arithmetic
from .coerce import InitKind, classify_init
from ..conversions import hsl_to_hsv, hsv_to_hsl, hsv_to_rgb, rgb_to_hsv
from ..errors import UndefinedChannelError
from ..notation import (
    format_hex_string,
    format_hsl_string,
    format_rgb_string,
    parse_hex_string,
    parse_hsl_string,
    parse_rgb_string,
)
from ..types.channel_types import HSL, HSV, RGB, ChangeRecord, ChannelRecord, ColorModel, MaybeHSV, Scalar, is_complete
from ..types.maxima import DEFAULT_MODEL, MODEL_CHANNELS
from ..utils import value_or_default

logger = logging.getLogger(__name__)

ChangeListener = Callable[["Color", ChangeRecord], None]
ColorInput = Union["Color", Mapping[str, Any], str]

_HSV_CHANNELS = MODEL_CHANNELS["hsv"]

_INIT_SETTERS: Dict[InitKind, str] = {
    InitKind.RGB: "set_rgb",
    InitKind.HSV: "set_hsv",
    InitKind.HSL: "set_hsl",
    InitKind.RGB_STRING: "set_rgb_string",
    InitKind.HSL_STRING: "set_hsl_string",
    InitKind.HEX_STRING: "set_hex_string",
}


class Color:
    """
    A mutable color stored as integer HSV.

    HSV is the only stored state; RGB, HSL and the string notations are
    computed from it on every read and converted into it on every write.
    A color created without a value is *unset* until all of ``h``, ``s`` and
    ``v`` have been assigned; reading a derived view before that raises
    ``UndefinedChannelError``.

    Listeners registered with ``on_change=`` or ``subscribe()`` are called as
    ``listener(color, changes)`` after any write that changes at least one
    HSV channel, where ``changes`` maps ``h``/``s``/``v`` to booleans.
    Listeners run synchronously inside the setter and must not modify the
    color they are notified about.

    Channel values are not range checked; only ``lighten``, ``darken`` and
    ``mix`` clamp.

    >>> color = Color("#f00")
    >>> color.get_hsv()
    {'h': 0, 's': 100, 'v': 100}
    >>> color.lighten(-50).get_rgb_string()
    'rgb(128, 0, 0)'
    """
    __slots__ = ("_value", "_listeners", "_notify_depth")

    def __init__(self, value: Optional[ColorInput] = None, *, on_change: Optional[ChangeListener] = None) -> None:
        self._value: MaybeHSV = {channel: None for channel in _HSV_CHANNELS}
        self._listeners: List[ChangeListener] = []
        self._notify_depth = 0
        if value is not None:
            self.set(value)
        # registered after the initial value so construction never notifies
        if on_change is not None:
            self.subscribe(on_change)

    # ------------------ LISTENERS ------------------
    def subscribe(self, listener: ChangeListener) -> ChangeListener:
        """Register ``listener`` for change notifications and return it."""
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: ChangeListener) -> None:
        """Remove a listener added with ``subscribe``; unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, changes: ChangeRecord) -> None:
        logger.debug("%r changed %s, notifying %d listener(s)", self, changes, len(self._listeners))
        self._notify_depth += 1
        try:
            for listener in list(self._listeners):
                listener(self, dict(changes))
        finally:
            self._notify_depth -= 1

    # ------------------ STATE ------------------
    @property
    def is_set(self) -> bool:
        """True once h, s and v all hold a value."""
        return is_complete(self._value)

    def _defined_hsv(self) -> HSV:
        if not self.is_set:
            raise UndefinedChannelError(
                f"Color has no value yet (hsv={self._value}); set it before reading rgb, hsl or strings"
            )
        return dict(self._value)  # type: ignore[return-value]

    def set(self, value: ColorInput) -> None:
        """
        Set the color from any supported input.

        Args:
            value: Another Color, an ``{r, g, b}``, ``{h, s, v}`` or
                ``{h, s, l}`` mapping, or an ``rgb()``/``hsl()``/``#hex``
                string.

        Raises:
            UnrecognizedShapeError: ``value`` is none of the above.
            MalformedNotationError: a string has a known prefix but bad body.
        """
        init = classify_init(value)
        logger.debug("Setting color from %s input", init.kind.value)
        if init.kind is InitKind.COLOR:
            self.set_hsv(init.value.get_hsv())
        else:
            getattr(self, _INIT_SETTERS[init.kind])(init.value)

    # ------------------ HSV (canonical) ------------------
    def get_hsv(self) -> HSV:
        """Return a copy of the stored HSV record; channels are None while unset."""
        return dict(self._value)  # type: ignore[return-value]

    def set_hsv(self, value: Mapping[str, Any]) -> None:
        """
        Store a new HSV value.

        Channels missing from ``value`` keep their current value, so
        ``set_hsv({"h": 200})`` only moves the hue. When listeners are
        registered the old and new values are compared and listeners are
        notified if any channel differs.
        """
        if self._notify_depth:
            warnings.warn(
                "Color modified from inside one of its own change listeners; "
                "listener ordering for this write is undefined",
                RuntimeWarning,
                stacklevel=2,
            )
        old_value = self._value
        new_value: MaybeHSV = {
            channel: value[channel] if channel in value else old_value[channel]
            for channel in _HSV_CHANNELS
        }
        if not self._listeners:
            self._value = new_value
            return

        changes = arithmetic.compare(old_value, new_value)
        self._value = new_value
        if any(changes.values()):
            self._notify(changes)

    # ------------------ DERIVED MODELS ------------------
    def get_rgb(self) -> RGB:
        return hsv_to_rgb(self._defined_hsv())

    def set_rgb(self, value: RGB) -> None:
        self.set_hsv(rgb_to_hsv(value))

    def get_hsl(self) -> HSL:
        return hsv_to_hsl(self._defined_hsv())

    def set_hsl(self, value: HSL) -> None:
        self.set_hsv(hsl_to_hsv(value))

    # ------------------ NOTATIONS ------------------
    def get_rgb_string(self) -> str:
        return format_rgb_string(self.get_rgb())

    def set_rgb_string(self, value: str) -> None:
        self.set_rgb(parse_rgb_string(value))

    def get_hsl_string(self) -> str:
        return format_hsl_string(self.get_hsl())

    def set_hsl_string(self, value: str) -> None:
        self.set_hsl(parse_hsl_string(value))

    def get_hex_string(self) -> str:
        return format_hex_string(self.get_rgb())

    def set_hex_string(self, value: str) -> None:
        self.set_rgb(parse_hex_string(value))

    hsv = property(get_hsv, set_hsv)
    rgb = property(get_rgb, set_rgb)
    hsl = property(get_hsl, set_hsl)
    rgb_string = property(get_rgb_string, set_rgb_string)
    hsl_string = property(get_hsl_string, set_hsl_string)
    hex_string = property(get_hex_string, set_hex_string)

    # ------------------ MODEL ACCESS BY NAME ------------------
    @staticmethod
    def _check_model(model: str) -> None:
        if model not in MODEL_CHANNELS:
            raise ValueError(f"Unknown color model: {model!r} (expected one of {', '.join(MODEL_CHANNELS)})")

    def _get_model(self, model: ColorModel) -> ChannelRecord:
        self._check_model(model)
        return getattr(self, f"get_{model}")()

    def _set_model(self, model: ColorModel, value: ChannelRecord) -> None:
        self._check_model(model)
        getattr(self, f"set_{model}")(value)

    def set_channel(self, model: ColorModel, channel: str, value: Scalar) -> None:
        """
        Change one channel of one model, e.g. ``set_channel("rgb", "g", 128)``.

        The whole record of ``model`` is read, patched and written back, so
        listeners fire exactly as for a full write.
        """
        self._check_model(model)
        if channel not in MODEL_CHANNELS[model]:
            raise ValueError(f"{model} has no channel {channel!r} (expected one of {', '.join(MODEL_CHANNELS[model])})")
        record = self._get_model(model)
        record[channel] = value  # type: ignore[literal-required]
        self._set_model(model, record)

    # ------------------ OPERATIONS ------------------
    def clone(self) -> Color:
        """Return a new Color with the same value and no listeners."""
        return Color(self)

    def compare(self, other: ColorInput, model: Optional[ColorModel] = None) -> ChangeRecord:
        """Report which channels of ``model`` (default ``"hsv"``) differ from ``other``."""
        model = value_or_default(model, DEFAULT_MODEL)
        return arithmetic.compare(self._get_model(model), get_color(other)._get_model(model))

    def mix(self, other: ColorInput, weight: Optional[Scalar] = None) -> Color:
        """Mix ``other`` into this color in place (weight 0 keeps this color, 100 takes ``other``)."""
        self.set_hsv(arithmetic.mix(self, other, weight).get_hsv())
        return self

    def lighten(self, amount: Scalar) -> Color:
        arithmetic.lighten(self, amount)
        return self

    def darken(self, amount: Scalar) -> Color:
        arithmetic.darken(self, amount)
        return self

    def __repr__(self) -> str:
        if not self.is_set:
            return f"Color(unset, hsv={self._value})"
        h, s, v = (self._value[channel] for channel in _HSV_CHANNELS)
        return f"Color(h={h}, s={s}, v={v})"


def get_color(value: ColorInput) -> Color:
    """Return ``value`` itself if it is a Color, else a new Color built from it."""
    return value if isinstance(value, Color) else Color(value)
