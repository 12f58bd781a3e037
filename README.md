# serialtft

Draw on an M5Stack LCD from a host computer over a serial line.

Each drawing call becomes one line of text, such as
`M5.Lcd.fillRect(10,20,30,40,f800)`, written to a serial stream. This
package contains the sending side, a parser and dispatcher for those lines,
helpers for RGB565 colours, and readers for two small I2C sensors.

## Installation

```
pip install serialtft
```

## Sending commands

```python
from serialtft.display import open_display
from serialtft.colors import color565, BLACK, WHITE

with open_display("/dev/ttyUSB0", 115200) as tft:
    tft.fill_screen(BLACK)
    tft.set_text_color(WHITE)
    tft.set_cursor(10, 10)
    tft.println("Hello")
    tft.fill_circle(120, 160, 40, color565(255, 180, 0))
    tft.progress_bar(20, 280, 200, 20, 75)
```

`open_display(port, baudrate=115200)` opens the port with pyserial and
returns a `SerialTFT`. You can also build one on any object that has a
`write(bytes)` method:

```python
SerialTFT(stream, interval=0.020, sleep=time.sleep)
```

Each command is written as one line that ends in `\r\n`. Colours are written
in lowercase hexadecimal. After most commands the client calls `sleep` for a
fraction or multiple of `interval`. The fraction is a quarter for small
commands, a half for outlines and text, the whole interval for fills, and
twice the interval for `qrcode`. `set_brightness` and `set_rotation` do not
wait at all. Pass `sleep=lambda s: None` to skip the waits.

`SerialTFT` works as a context manager. `close()` closes the stream if the
stream has a `close` method. `width()` returns 240 and `height()` returns
320.

The drawing methods are `set_brightness`, `draw_pixel`, `draw_line`,
`draw_rect`, `fill_rect`, `fill_screen`, `draw_circle`,
`draw_circle_helper`, `fill_circle`, `fill_circle_helper`, `draw_triangle`,
`fill_triangle`, `draw_round_rect`, `fill_round_rect`, `draw_char`,
`set_cursor`, `set_text_color(color, background=None)`, `set_text_size`,
`set_text_wrap`, `print`, `println(text="")`, `draw_centre_string`,
`draw_right_string`, `progress_bar`, `qrcode`, `set_rotation`,
`draw_fast_hline` and `draw_fast_vline`. Integer arguments wrap to the
width of the field they are sent in. `draw_char` raises `ValueError` unless
it is given exactly one character.

## Interpreting commands

`serialtft.commands` reads the same lines and turns them back into calls:

```python
from serialtft.commands import parse_command, dispatch, execute

cmd = parse_command("M5.Lcd.drawPixel(1,2,RED)")
# Command(name='drawPixel', args=(1, 2, 0xF800)); cmd.method == 'draw_pixel'
dispatch(cmd, target)               # target.draw_pixel(1, 2, 0xF800)
execute("fillScreen(BLACK)", target)
```

`target` is any object that has the snake_case drawing methods listed
above. The `M5.Lcd.` prefix is optional. `parse_command` returns `None` for
a line that names no known command, and `execute` ignores such a line. A
known command with too many or too few arguments raises `CommandError`, a
subclass of `ValueError`. Numbers are read the way `atoi` reads them, so
text that is not a number gives 0.

The helpers `extract_string`, `extract_string_p` and
`split_string(text, separator, limit)` are also public.

## Colours

`serialtft.colors` defines the named RGB565 constants (`BLACK`, `RED`,
`TFT_ORANGE`, ...) and these conversions:

- `color565(r, g, b)` packs 8-bit channels into RGB565.
- `color16to8(c)` turns RGB565 into RGB332.
- `color8to16(c)` turns RGB332 back into RGB565.
- `parse_color(text)` reads a colour name by prefix or a hexadecimal value.
  Text with no leading hex digits gives 0.

## Sensors

Both sensor classes take a bus object that you supply. The bus needs
`write(address, data)` and `read(address, count)` methods.

- `serialtft.dht12.DHT12(bus, scale=0, address=0)` has two methods.
  `read_temperature(scale=None)` reads in Celsius, Kelvin or Fahrenheit
  (`Scale`), and `read_humidity()` reads relative humidity in percent. A
  failed read raises `SensorError`, whose `code` is 1 if there was no
  answer, 2 for a wrong byte count and 3 for a bad checksum.
- `serialtft.bmp280.BMP280(bus, address=0x76)` must be started with
  `begin()`. That method checks the chip id, loads the `Calibration` and
  starts measuring. It raises `RuntimeError` if the chip is not a BMP280.
  After that, `temperature()` gives degrees Celsius and `pressure()` gives
  whole pascals. `calc_altitude(pressure)` converts a pressure into metres
  above sea level.

## What this package does not do

It does not render anything itself. `commands` only calls methods on a
target that you provide. It has no serial listener loop and no I2C bus
driver. It installs no command-line program.

## Running the tests

```
pip install "serialtft[test]"
pytest
```