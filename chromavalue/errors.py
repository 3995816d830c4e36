"""
Exceptions raised by chromavalue.

Every error derives from ``ColorError`` and from the builtin the caller would
otherwise expect (``ValueError`` for bad values, ``TypeError`` for bad
shapes), so ``except ValueError`` keeps working around parsing code.
"""


class ColorError(Exception):
    """Base class for all chromavalue errors."""


class MalformedNotationError(ColorError, ValueError):
    """A notation string does not match the rgb(), hsl() or #hex grammar."""

    def __init__(self, text: str, reason: str = "") -> None:
        self.text = text
        message = f"Malformed color notation: {text!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnrecognizedShapeError(ColorError, TypeError):
    """A value given to Color() or Color.set() matches no known color shape."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Cannot build a color from {type(value).__name__} {value!r}; "
            "expected a Color, an rgb/hsv/hsl mapping or an rgb()/hsl()/#hex string"
        )


class UndefinedChannelError(ColorError, ValueError):
    """A derived view was requested while the canonical HSV value is unset."""
