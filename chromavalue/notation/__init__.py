"""
Textual color notations.

Parsers return channel records and raise ``MalformedNotationError`` on bad
input; formatters take channel records.

    rgb(R, G, B)        rgba(R, G, B, A)
    hsl(H, S%, L%)      hsla(H, S%, L%, A)
    #RGB                #RRGGBB
"""

from .parse import (
    parse_color_string,
    parse_rgb_string,
    parse_hsl_string,
    parse_hex_string,
)
from .format import (
    format_number,
    format_rgb_string,
    format_hsl_string,
    format_hex_string,
)

__all__ = [
    "parse_color_string",
    "parse_rgb_string",
    "parse_hsl_string",
    "parse_hex_string",
    "format_number",
    "format_rgb_string",
    "format_hsl_string",
    "format_hex_string",
]
