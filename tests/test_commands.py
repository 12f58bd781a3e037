import pytest

from serialtft.colors import RED, TFT_GREEN, WHITE
from serialtft.commands import (
    Command,
    CommandError,
    dispatch,
    execute,
    extract_string,
    extract_string_p,
    parse_command,
    split_string,
)


class Recorder:
    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)

        def record(*args):
            self.calls.append((name, args))

        return record


def test_extract_string_removes_brackets_spaces_quotes():
    assert extract_string("( \"a b\",'c' )") == "ab,c"


def test_extract_string_p_keeps_inner_spaces():
    assert extract_string_p('("Hello World")') == "Hello World"


def test_split_string_keeps_empty_fields():
    assert split_string("a,,b", ",", 3) == ["a", "", "b"]
    assert split_string("", ",", 1) == [""]
    assert split_string("a,", ",", 2) == ["a", ""]


def test_split_string_over_limit_raises():
    with pytest.raises(CommandError):
        split_string("1,2,3", ",", 2)


def test_parse_draw_pixel_hex_color():
    command = parse_command("drawPixel(10,20,f800)")
    assert command == Command("drawPixel", (10, 20, 0xF800))
    assert command.method == "draw_pixel"


def test_parse_accepts_prefix_and_named_color():
    command = parse_command("M5.Lcd.drawLine(1, 2, 3, 4, RED)\r\n")
    assert command == Command("drawLine", (1, 2, 3, 4, RED))


def test_tft_prefixed_color_name():
    command = parse_command("fillScreen(TFT_GREEN)")
    assert command.args == (TFT_GREEN,)


def test_circle_helper_not_confused_with_circle():
    command = parse_command("drawCircleHelper(5,6,7,3,ffff)")
    assert command.name == "drawCircleHelper"
    assert command.args == (5, 6, 7, 3, WHITE)


def test_set_text_color_one_or_two_args():
    assert parse_command("setTextColor(ffff)").args == (WHITE,)
    assert parse_command("setTextColor(ffff,RED)").args == (WHITE, RED)


def test_println_before_print():
    assert parse_command('println("Hi there")') == Command("println", ("Hi there",))
    assert parse_command('print("Hi there")') == Command("print", ("Hi there",))


def test_qrcode_drops_spaces_from_text():
    command = parse_command('qrcode("a b",10,20,150,6)')
    assert command.args == ("ab", 10, 20, 150, 6)


def test_draw_centre_string():
    command = parse_command('drawCentreString("Hello World",120,30,2)')
    assert command.args == ("Hello World", 120, 30, 2)


def test_draw_char_and_text_wrap():
    assert parse_command("drawChar(1,2,A,ffff,0,2)").args == (1, 2, "A", WHITE, 0, 2)
    assert parse_command("setTextWrap(1)").args == (True,)
    assert parse_command("setTextWrap(0)").args == (False,)


def test_brightness_and_rotation():
    assert parse_command("setBrightness(100)").args == (100,)
    assert parse_command("setRotation(3)").args == (3,)


def test_missing_arguments_raise():
    with pytest.raises(CommandError):
        parse_command("drawRect(1,2,3)")


def test_too_many_arguments_raise():
    with pytest.raises(CommandError):
        parse_command("drawPixel(1,2,3,4)")


def test_unknown_command_is_ignored():
    target = Recorder()
    assert parse_command("drawBitmap(1,2)") is None
    assert execute("drawBitmap(1,2)", target) is None
    assert target.calls == []


def test_execute_calls_target_method():
    target = Recorder()
    command = execute("fillRect(0,0,240,320,BLACK)", target)
    assert command.name == "fillRect"
    assert target.calls == [("fill_rect", (0, 0, 240, 320, 0))]


def test_dispatch_unknown_name_raises():
    with pytest.raises(CommandError):
        dispatch(Command("bogus", ()), Recorder())