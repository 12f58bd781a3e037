"""RGB565 colour constants, conversions and colour-name parsing."""

from __future__ import annotations

import string

__all__ = [
    "BLACK",
    "NAVY",
    "DARKGREEN",
    "DARKCYAN",
    "MAROON",
    "PURPLE",
    "OLIVE",
    "LIGHTGREY",
    "DARKGREY",
    "BLUE",
    "GREEN",
    "CYAN",
    "RED",
    "MAGENTA",
    "YELLOW",
    "WHITE",
    "ORANGE",
    "GREENYELLOW",
    "PINK",
    "TFT_BLACK",
    "TFT_NAVY",
    "TFT_DARKGREEN",
    "TFT_DARKCYAN",
    "TFT_MAROON",
    "TFT_PURPLE",
    "TFT_OLIVE",
    "TFT_LIGHTGREY",
    "TFT_DARKGREY",
    "TFT_BLUE",
    "TFT_GREEN",
    "TFT_CYAN",
    "TFT_RED",
    "TFT_MAGENTA",
    "TFT_YELLOW",
    "TFT_WHITE",
    "TFT_ORANGE",
    "TFT_GREENYELLOW",
    "TFT_PINK",
    "NAMED_COLORS",
    "color565",
    "color16to8",
    "color8to16",
    "parse_color",
]

BLACK = 0x0000
NAVY = 0x000F
DARKGREEN = 0x03E0
DARKCYAN = 0x03EF
MAROON = 0x7800
PURPLE = 0x780F
OLIVE = 0x7BE0
LIGHTGREY = 0xC618
DARKGREY = 0x7BEF
BLUE = 0x001F
GREEN = 0x07E0
CYAN = 0x07FF
RED = 0xF800
MAGENTA = 0xF81F
YELLOW = 0xFFE0
WHITE = 0xFFFF
ORANGE = 0xFD20
GREENYELLOW = 0xAFE5
PINK = 0xF81F

TFT_BLACK = 0x0000
TFT_NAVY = 0x000F
TFT_DARKGREEN = 0x03E0
TFT_DARKCYAN = 0x03EF
TFT_MAROON = 0x7800
TFT_PURPLE = 0x780F
TFT_OLIVE = 0x7BE0
TFT_LIGHTGREY = 0xC618
TFT_DARKGREY = 0x7BEF
TFT_BLUE = 0x001F
TFT_GREEN = 0x07E0
TFT_CYAN = 0x07FF
TFT_RED = 0xF800
TFT_MAGENTA = 0xF81F
TFT_YELLOW = 0xFFE0
TFT_WHITE = 0xFFFF
TFT_ORANGE = 0xFDA0
TFT_GREENYELLOW = 0xB7E0
TFT_PINK = 0xFC9F

# Matched by prefix in this order; longer names that share a prefix come first.
NAMED_COLORS: tuple[tuple[str, int], ...] = (
    ("BLACK", BLACK),
    ("NAVY", NAVY),
    ("DARKGREEN", DARKGREEN),
    ("DARKCYAN", DARKCYAN),
    ("MAROON", MAROON),
    ("PURPLE", PURPLE),
    ("OLIVE", OLIVE),
    ("LIGHTGREY", LIGHTGREY),
    ("DARKGREY", DARKGREY),
    ("BLUE", BLUE),
    ("GREENYELLOW", GREENYELLOW),
    ("GREEN", GREEN),
    ("CYAN", CYAN),
    ("RED", RED),
    ("MAGENTA", MAGENTA),
    ("YELLOW", YELLOW),
    ("WHITE", WHITE),
    ("ORANGE", ORANGE),
    ("PINK", PINK),
    ("TFT_BLACK", TFT_BLACK),
    ("TFT_NAVY", TFT_NAVY),
    ("TFT_DARKGREEN", TFT_DARKGREEN),
    ("TFT_DARKCYAN", TFT_DARKCYAN),
    ("TFT_MAROON", TFT_MAROON),
    ("TFT_PURPLE", TFT_PURPLE),
    ("TFT_OLIVE", TFT_OLIVE),
    ("TFT_LIGHTGREY", TFT_LIGHTGREY),
    ("TFT_DARKGREY", TFT_DARKGREY),
    ("TFT_BLUE", TFT_BLUE),
    ("TFT_GREENYELLOW", TFT_GREENYELLOW),
    ("TFT_GREEN", TFT_GREEN),
    ("TFT_CYAN", TFT_CYAN),
    ("TFT_RED", TFT_RED),
    ("TFT_MAGENTA", TFT_MAGENTA),
    ("TFT_YELLOW", TFT_YELLOW),
    ("TFT_WHITE", TFT_WHITE),
    ("TFT_ORANGE", TFT_ORANGE),
    ("TFT_PINK", TFT_PINK),
)

_BLUE_2_TO_5 = (0, 11, 21, 31)
_LONG_MAX = 2**31 - 1
_LONG_MIN = -(2**31)
_HEX_DIGITS = frozenset(string.hexdigits)


def color565(r: int, g: int, b: int) -> int:
    """Pack three 8-bit RGB levels into a 16-bit RGB565 value."""
    r &= 0xFF
    g &= 0xFF
    b &= 0xFF
    return ((r & 0xF8) << 8) | ((g & 0xFC) << 3) | (b >> 3)


def color16to8(c: int) -> int:
    """Reduce a 16-bit RGB565 colour to an 8-bit RGB332 colour."""
    c &= 0xFFFF
    return ((c & 0xE000) >> 8) | ((c & 0x0700) >> 6) | ((c & 0x0018) >> 3)


def color8to16(color: int) -> int:
    """Expand an 8-bit RGB332 colour to a 16-bit RGB565 colour."""
    color &= 0xFF
    color16 = ((color & 0x1C) << 6) | ((color & 0xC0) << 5) | ((color & 0xE0) << 8)
    color16 |= ((color & 0x1C) << 3) | _BLUE_2_TO_5[color & 0x03]
    return color16 & 0xFFFF


def _parse_hex_prefix(text: str) -> int:
    """Read a leading base-16 integer the way strtol does, clamped to 32 bits."""
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    if text[:2].lower() == "0x" and text[2:3] in _HEX_DIGITS:
        text = text[2:]
    digits = []
    for ch in text:
        if ch not in _HEX_DIGITS:
            break
        digits.append(ch)
    if not digits:
        return 0
    value = sign * int("".join(digits), 16)
    return max(_LONG_MIN, min(_LONG_MAX, value))


def parse_color(text: str) -> int:
    """Turn a colour name or hexadecimal text into a 16-bit colour value.

    Names are matched by prefix; anything else is read as hexadecimal, and
    text with no leading hex digits yields 0.
    """
    text = text.strip()
    for name, value in NAMED_COLORS:
        if text.startswith(name):
            return value
    return _parse_hex_prefix(text) & 0xFFFF