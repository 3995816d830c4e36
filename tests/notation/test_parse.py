import pytest

from chromavalue.errors import ColorError, MalformedNotationError
from chromavalue.notation import parse_color_string, parse_rgb_string, parse_hsl_string, parse_hex_string
from ..samples import rgb, hsl


def test_parse_rgb_string():
    assert parse_rgb_string("rgb(255, 0, 0)") == rgb(255, 0, 0)
    assert parse_rgb_string("rgb(12,34,56)") == rgb(12, 34, 56)
    assert parse_rgb_string("rgb(12 34 56)") == rgb(12, 34, 56)
    assert parse_rgb_string("RGB(1, 2, 3)") == rgb(1, 2, 3)


def test_parse_rgba_string_keeps_alpha():
    assert parse_rgb_string("rgba(255, 0, 0, 0.5)") == {"r": 255, "g": 0, "b": 0, "a": 0.5}
    assert parse_rgb_string("rgba(255, 0, 0, 0)")["a"] == 0.0


def test_parse_rgb_percentages_scale_to_255():
    assert parse_rgb_string("rgb(100%, 50%, 0%)") == {"r": 255, "g": 127.5, "b": 0}


def test_parse_hsl_string():
    assert parse_hsl_string("hsl(120, 50%, 50%)") == hsl(120, 50, 50)
    assert parse_hsl_string("hsla(240, 100%, 25%, 0.75)") == {"h": 240, "s": 100, "l": 25, "a": 0.75}


def test_parse_hsl_percent_hue_scales_to_360():
    assert parse_hsl_string("hsl(50%, 10%, 20%)")["h"] == 180


def test_parse_decimal_channels():
    assert parse_hsl_string("hsl(137.5, 50%, 25%)") == hsl(137.5, 50, 25)
    assert parse_rgb_string("rgb(12.5, .5, 0)") == rgb(12.5, 0.5, 0)


def test_parse_color_string_generic():
    name, channels, alpha = parse_color_string("hsl(360, 100%, 50%)", (360, 100, 100))
    assert name == "hsl"
    assert channels == (360, 100, 50)
    assert alpha is None


def test_parse_integral_percent_values_are_ints():
    _, channels, _ = parse_color_string("rgb(100%, 0%, 20%)", (255, 255, 255))
    assert channels == (255, 0, 51)
    assert all(isinstance(value, int) for value in channels)


@pytest.mark.parametrize("text", [
    "rgb(255, 0)",
    "rgb(a, b, c)",
    "rgb(255, 0, 0",
    "rgb()",
    "",
    "255, 0, 0",
    "rgb(-1, 0, 0)",
    "rgb(\u0661\u0662, 0, 0)",
    "rgb(\uff11, 0, 0)",
])
def test_parse_rgb_string_malformed(text):
    with pytest.raises(MalformedNotationError):
        parse_rgb_string(text)


def test_parse_rgb_string_rejects_other_functions():
    with pytest.raises(MalformedNotationError):
        parse_rgb_string("hsl(120, 50%, 50%)")
    with pytest.raises(MalformedNotationError):
        parse_hsl_string("rgb(255, 0, 0)")


def test_malformed_notation_is_a_value_error():
    with pytest.raises(ValueError):
        parse_hsl_string("hsl(nope)")
    with pytest.raises(ColorError):
        parse_hsl_string("hsl(nope)")


def test_parse_non_string():
    with pytest.raises(MalformedNotationError):
        parse_rgb_string(None)
    with pytest.raises(MalformedNotationError):
        parse_hex_string(0xFF0000)


def test_parse_hex_string():
    assert parse_hex_string("#0f0") == rgb(0, 255, 0)
    assert parse_hex_string("#F00") == rgb(255, 0, 0)
    assert parse_hex_string("#FF8000") == rgb(255, 128, 0)
    assert parse_hex_string("#010203") == rgb(1, 2, 3)
    assert parse_hex_string("abc") == rgb(170, 187, 204)


@pytest.mark.parametrize("text", ["#", "#12", "#1234", "#12345", "#1234567", "#ggg", "#12345z", "#-12"])
def test_parse_hex_string_malformed(text):
    with pytest.raises(MalformedNotationError):
        parse_hex_string(text)
