"""Parsing and dispatch of the text drawing commands sent over the serial link.

A command line looks like ``drawPixel(10,20,f800)``. An optional ``M5.Lcd.``
prefix, as written by the sending side, is accepted and ignored. Parsing
turns a line into a :class:`Command`. Dispatch calls the matching
snake_case method on a drawing target, such as ``draw_pixel(10, 20, 0xF800)``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable

from .colors import parse_color

__all__ = [
    "Command",
    "CommandError",
    "extract_string",
    "extract_string_p",
    "split_string",
    "parse_command",
    "dispatch",
    "execute",
]

_PREFIX = "M5.Lcd."
_ATOI = re.compile(r"\s*([+-]?\d+)")


class CommandError(ValueError):
    """Raised when a command line cannot be turned into a drawing call."""


@dataclass(frozen=True)
class Command:
    """A parsed drawing command: its wire name and converted arguments."""

    name: str
    args: tuple[Any, ...] = ()

    @property
    def method(self) -> str:
        """Name of the target method this command calls."""
        try:
            return _SPECS[self.name][0]
        except KeyError:
            raise CommandError(f"unknown command {self.name!r}") from None


def extract_string(text: str) -> str:
    """Drop parentheses, spaces and both kinds of quote from *text*."""
    for ch in ("(", ")", " ", '"', "'"):
        text = text.replace(ch, "")
    return text


def extract_string_p(text: str) -> str:
    """Drop parentheses and quotes from *text*, keeping inner spaces."""
    text = text.replace("(", "").replace(")", "").strip()
    return text.replace('"', "").replace("'", "")


def split_string(text: str, separator: str, limit: int) -> list[str]:
    """Split *text* at any character of *separator* into at most *limit* fields.

    Empty fields are kept, so an empty text yields one empty field.
    """
    if limit <= 0:
        raise ValueError("limit must be positive")
    if separator:
        fields = re.split("[" + re.escape(separator) + "]", text)
    else:
        fields = [text]
    if len(fields) > limit:
        raise CommandError(f"expected at most {limit} fields, got {len(fields)}")
    return fields


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _u8(text: str) -> int:
    return _atoi(text) & 0xFF


def _char(text: str) -> str:
    return text[:1] or "\0"


_CONVERTERS: dict[str, Callable[[str], Any]] = {
    "i": _atoi,
    "b": _u8,
    "c": parse_color,
    "h": _char,
    "s": str,
}


def _fields(name: str, body: str, kinds: str) -> tuple[Any, ...]:
    fields = split_string(body, ",", len(kinds))
    if len(fields) < len(kinds):
        raise CommandError(
            f"{name} expects {len(kinds)} arguments, got {len(fields)}"
        )
    return tuple(_CONVERTERS[kind](field) for kind, field in zip(kinds, fields))


def _split_args(kinds: str) -> Callable[[str, str], tuple[Any, ...]]:
    def parse(name: str, rest: str) -> tuple[Any, ...]:
        return _fields(name, extract_string(rest).strip(), kinds)

    return parse


def _split_args_p(kinds: str) -> Callable[[str, str], tuple[Any, ...]]:
    def parse(name: str, rest: str) -> tuple[Any, ...]:
        return _fields(name, extract_string_p(rest).strip(), kinds)

    return parse


def _single_int(mask: int | None) -> Callable[[str, str], tuple[Any, ...]]:
    def parse(name: str, rest: str) -> tuple[Any, ...]:
        value = _atoi(extract_string(rest.strip()))
        return (value & mask if mask is not None else value,)

    return parse


def _fill_screen(name: str, rest: str) -> tuple[Any, ...]:
    return (parse_color(extract_string(rest)),)


def _text_color(name: str, rest: str) -> tuple[Any, ...]:
    fields = split_string(extract_string(rest).strip(), ",", 2)
    return tuple(parse_color(field) for field in fields)


def _text_wrap(name: str, rest: str) -> tuple[Any, ...]:
    return (bool(_atoi(extract_string(rest.strip()))),)


def _text(name: str, rest: str) -> tuple[Any, ...]:
    return (extract_string_p(rest),)


# Checked in this order; "println" must come before "print".
_SPECS: dict[str, tuple[str, Callable[[str, str], tuple[Any, ...]]]] = {
    "setBrightness": ("set_brightness", _single_int(0xFF)),
    "setRotation": ("set_rotation", _single_int(None)),
    "drawPixel": ("draw_pixel", _split_args("iic")),
    "drawFastHLine": ("draw_fast_hline", _split_args("iiic")),
    "drawFastVLine": ("draw_fast_vline", _split_args("iiic")),
    "drawLine": ("draw_line", _split_args("iiiic")),
    "drawRect": ("draw_rect", _split_args("iiiic")),
    "fillRect": ("fill_rect", _split_args("iiiic")),
    "fillScreen": ("fill_screen", _fill_screen),
    "drawCircle": ("draw_circle", _split_args("iiic")),
    "drawCircleHelper": ("draw_circle_helper", _split_args("iiibc")),
    "fillCircle": ("fill_circle", _split_args("iiic")),
    "fillCircleHelper": ("fill_circle_helper", _split_args("iiibic")),
    "drawTriangle": ("draw_triangle", _split_args("iiiiiic")),
    "fillTriangle": ("fill_triangle", _split_args("iiiiiic")),
    "drawRoundRect": ("draw_round_rect", _split_args("iiiiic")),
    "fillRoundRect": ("fill_round_rect", _split_args("iiiiic")),
    "drawChar": ("draw_char", _split_args("iihccb")),
    "setCursor": ("set_cursor", _split_args("ii")),
    "setTextColor": ("set_text_color", _text_color),
    "setTextSize": ("set_text_size", _single_int(0xFF)),
    "setTextWrap": ("set_text_wrap", _text_wrap),
    "println": ("println", _text),
    "print": ("print", _text),
    "drawCentreString": ("draw_centre_string", _split_args_p("siii")),
    "drawRightString": ("draw_right_string", _split_args_p("siii")),
    "progressBar": ("progress_bar", _split_args("iiiib")),
    "qrcode": ("qrcode", _split_args("siibb")),
}


def parse_command(line: str) -> Command | None:
    """Parse one command line; return ``None`` for a command that is not known."""
    line = line.strip()
    if line.startswith(_PREFIX):
        line = line[len(_PREFIX):]
    for name, (_, parse) in _SPECS.items():
        if line.startswith(name + "("):
            return Command(name, parse(name, line[len(name):]))
    return None


def dispatch(command: Command, target: Any) -> Any:
    """Call the drawing method of *target* that *command* names."""
    return getattr(target, command.method)(*command.args)


def execute(line: str, target: Any) -> Command | None:
    """Parse *line* and run it on *target*; unknown commands are ignored."""
    command = parse_command(line)
    if command is not None:
        dispatch(command, target)
    return command