"""Basic chromavalue usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from chromavalue import (
    Color,
    mix,
    np_hsv_to_rgb,
    MalformedNotationError,
)


def demonstrate_colors() -> None:
    # Build colors from any notation and read them back in other models.
    accent = Color("rgb(255, 128, 0)")
    print("HSV:", accent.get_hsv())
    print("HSL string:", accent.get_hsl_string())
    print("Hex:", accent.get_hex_string())

    accent.set_channel("hsl", "l", 80)
    print("Lighter via HSL:", accent.get_rgb_string())


def demonstrate_algebra() -> None:
    # Mixing works in RGB space, lighten/darken in HSV value.
    purple = mix("#f00", "#00f")
    print("Red + blue:", purple.get_hex_string())

    shade = purple.clone().darken(30)
    print("Darker:", shade.get_hex_string(), "original:", purple.get_hex_string())


def demonstrate_listeners() -> None:
    def on_change(color, changes):
        changed = [channel for channel, flag in changes.items() if flag]
        print(f"  {color!r} changed {changed}")

    watched = Color("#0f0", on_change=on_change)
    watched.set_hsv({"h": 200})
    watched.lighten(0)  # no change, no notification
    watched.darken(40)


def demonstrate_arrays() -> None:
    # Vectorized kernels give the same integers as the scalar ones.
    hues = np.arange(0, 360, 60)
    print("Hue wheel:", np_hsv_to_rgb(hues, 100, 100).tolist())


def demonstrate_errors() -> None:
    try:
        Color("rgb(255, oops, 0)")
    except MalformedNotationError as exc:
        print("Rejected:", exc)


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_algebra()
    demonstrate_listeners()
    demonstrate_arrays()
    demonstrate_errors()
