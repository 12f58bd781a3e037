"""Client side of the serial drawing link: turns drawing calls into command lines."""

from __future__ import annotations

import time
from typing import Any, Callable

__all__ = ["WIDTH", "HEIGHT", "COMMAND_INTERVAL", "SerialTFT", "open_display"]

WIDTH = 240
HEIGHT = 320
COMMAND_INTERVAL = 0.020  # seconds

_PREFIX = "M5.Lcd."


def _signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    return value - (1 << bits) if value >> (bits - 1) else value


def _i16(value: int) -> str:
    return str(_signed(value, 16))


def _i32(value: int) -> str:
    return str(_signed(value, 32))


def _u16(value: int) -> str:
    return str(value & 0xFFFF)


def _u8(value: int) -> str:
    return str(value & 0xFF)


def _hex16(color: int) -> str:
    return format(color & 0xFFFF, "x")


def _hex32(color: int) -> str:
    return format(color & 0xFFFFFFFF, "x")


class SerialTFT:
    """Sends drawing commands as text lines to a display on a serial stream.

    *stream* needs a ``write(bytes)`` method. After each command the client
    pauses for a fraction of *interval* seconds so the display can keep up.
    """

    def __init__(
        self,
        stream: Any,
        interval: float = COMMAND_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._stream = stream
        self._interval = interval
        self._sleep = sleep

    def __enter__(self) -> SerialTFT:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying stream if it can be closed."""
        close = getattr(self._stream, "close", None)
        if close is not None:
            close()

    def width(self) -> int:
        """Width of the display in pixels."""
        return WIDTH

    def height(self) -> int:
        """Height of the display in pixels."""
        return HEIGHT

    def _send(self, body: str, pause: float | None) -> None:
        self._stream.write(f"{_PREFIX}{body}\r\n".encode("utf-8"))
        if pause:
            self._sleep(pause)

    def _call(self, name: str, *args: str, pause: float | None) -> None:
        self._send(f"{name}({','.join(args)})", pause)

    def set_brightness(self, brightness: int) -> None:
        self._call("setBrightness", str(_signed(brightness, 8)), pause=None)

    def draw_pixel(self, x: int, y: int, color: int) -> None:
        self._call("drawPixel", _i16(x), _i16(y), _hex16(color), pause=self._interval / 4)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        self._call(
            "drawLine", _i16(x0), _i16(y0), _i16(x1), _i16(y1), _hex16(color),
            pause=self._interval / 4,
        )

    def draw_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        self._call(
            "drawRect", _i16(x), _i16(y), _i16(w), _i16(h), _hex16(color),
            pause=self._interval / 2,
        )

    def fill_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        self._call(
            "fillRect", _i16(x), _i16(y), _i16(w), _i16(h), _hex16(color),
            pause=self._interval,
        )

    def fill_screen(self, color: int) -> None:
        self._call("fillScreen", _hex16(color), pause=self._interval)

    def draw_circle(self, x0: int, y0: int, r: int, color: int) -> None:
        self._call(
            "drawCircle", _i16(x0), _i16(y0), _i16(r), _hex16(color),
            pause=self._interval / 2,
        )

    def draw_circle_helper(
        self, x0: int, y0: int, r: int, cornername: int, color: int
    ) -> None:
        self._call(
            "drawCircleHelper", _i16(x0), _i16(y0), _i16(r), _u8(cornername),
            _hex16(color), pause=self._interval / 2,
        )

    def fill_circle(self, x0: int, y0: int, r: int, color: int) -> None:
        self._call(
            "fillCircle", _i16(x0), _i16(y0), _i16(r), _hex16(color),
            pause=self._interval,
        )

    def fill_circle_helper(
        self, x0: int, y0: int, r: int, cornername: int, delta: int, color: int
    ) -> None:
        self._call(
            "fillCircleHelper", _i16(x0), _i16(y0), _i16(r), _u8(cornername),
            _i16(delta), _hex16(color), pause=self._interval,
        )

    def draw_triangle(
        self, x0: int, y0: int, x1: int, y1: int, x2: int, y2: int, color: int
    ) -> None:
        self._call(
            "drawTriangle", _i16(x0), _i16(y0), _i16(x1), _i16(y1), _i16(x2),
            _i16(y2), _hex16(color), pause=self._interval / 2,
        )

    def fill_triangle(
        self, x0: int, y0: int, x1: int, y1: int, x2: int, y2: int, color: int
    ) -> None:
        self._call(
            "fillTriangle", _i16(x0), _i16(y0), _i16(x1), _i16(y1), _i16(x2),
            _i16(y2), _hex16(color), pause=self._interval,
        )

    def draw_round_rect(
        self, x0: int, y0: int, w: int, h: int, radius: int, color: int
    ) -> None:
        self._call(
            "drawRoundRect", _i16(x0), _i16(y0), _i16(w), _i16(h), _i16(radius),
            _hex16(color), pause=self._interval / 2,
        )

    def fill_round_rect(
        self, x0: int, y0: int, w: int, h: int, radius: int, color: int
    ) -> None:
        self._call(
            "fillRoundRect", _i16(x0), _i16(y0), _i16(w), _i16(h), _i16(radius),
            _hex16(color), pause=self._interval,
        )

    def draw_char(self, x: int, y: int, c: str, color: int, bg: int, size: int) -> None:
        if len(c) != 1:
            raise ValueError("draw_char needs exactly one character")
        self._call(
            "drawChar", _u16(x), _u16(y), c, _hex16(color), _hex16(bg), _u8(size),
            pause=self._interval / 2,
        )

    def set_cursor(self, x0: int, y0: int) -> None:
        self._call("setCursor", _u16(x0), _u16(y0), pause=self._interval / 4)

    def set_text_color(self, color: int, background: int | None = None) -> None:
        args = [_hex16(color)]
        if background is not None:
            args.append(_hex16(background))
        self._call("setTextColor", *args, pause=self._interval / 4)

    def set_text_size(self, size: int) -> None:
        self._call("setTextSize", _u8(size), pause=self._interval / 4)

    def set_text_wrap(self, wrap: bool) -> None:
        self._call("setTextWrap", "1" if wrap else "0", pause=self._interval / 4)

    def print(self, text: str) -> None:
        self._send(f'print("{text}")', self._interval / 2)

    def println(self, text: str = "") -> None:
        self._send(f'println("{text}")', self._interval / 2)

    def draw_centre_string(self, text: str, dx: int, poy: int, font: int) -> None:
        self._send(
            f'drawCentreString("{text}",{_i32(dx)},{_i32(poy)},{_i32(font)})',
            self._interval / 4,
        )

    def draw_right_string(self, text: str, dx: int, poy: int, font: int) -> None:
        self._send(
            f'drawRightString("{text}",{_i32(dx)},{_i32(poy)},{_i32(font)})',
            self._interval / 4,
        )

    def progress_bar(self, x: int, y: int, w: int, h: int, val: int) -> None:
        self._call(
            "progressBar", _i32(x), _i32(y), _i32(w), _i32(h), _u8(val),
            pause=self._interval / 2,
        )

    def qrcode(self, text: str, x: int, y: int, width: int, version: int) -> None:
        self._send(
            f'qrcode("{text}",{_u16(x)},{_u16(y)},{_u8(width)},{_u8(version)})',
            self._interval * 2,
        )

    def set_rotation(self, angle: int) -> None:
        self._call("setRotation", _i32(angle), pause=None)

    def draw_fast_hline(self, x: int, y: int, w: int, color: int) -> None:
        self._call(
            "drawFastHLine", _i32(x), _i32(y), _i32(w), _hex32(color),
            pause=self._interval / 4,
        )

    def draw_fast_vline(self, x: int, y: int, h: int, color: int) -> None:
        self._call(
            "drawFastVLine", _i32(x), _i32(y), _i32(h), _hex32(color),
            pause=self._interval / 4,
        )


def open_display(port: str, baudrate: int = 115200) -> SerialTFT:
    """Open *port* at *baudrate* and return a display client on it."""
    import serial

    link = serial.Serial(port, baudrate)
    link.flush()
    time.sleep(0.05)
    return SerialTFT(link)