import pytest

from vgatext.console import Console, FormatError, Textbox
from vgatext.vga import HEIGHT, VGA, WIDTH, Cell, Color, Position


def _console(width=40, height=5, x=0, y=0):
    vga = VGA()
    console = Console(vga)
    console.set_textbox(Textbox(x_corner=x, y_corner=y, height=height, width=width))
    return vga, console


def _printed(fmt, *args):
    vga, console = _console()
    console.printk(fmt, *args)
    return vga.row_text(0)[:40].rstrip()


@pytest.mark.parametrize(
    "fmt, args, expected",
    [
        ("%c", ("a",), "a"),
        ("%c", ("Q",), "Q"),
        ("%c", (256 + ord("9"),), "9"),
        ("%s", ("test string",), "test string"),
        ("foo%sbar", ("blah",), "fooblahbar"),
        ("foo%%sbar", (), "foo%sbar"),
        ("%d", (-2147483648,), "-2147483648"),
        ("%d", (2147483647,), "2147483647"),
        ("%u", (0,), "0"),
        ("%u", (4294967295,), "4294967295"),
        ("%x", (0xDEADBEEF,), "0xDEADBEEF"),
        ("%p", ((1 << 64) - 1,), "0xFFFFFFFFFFFFFFFF"),
        ("%hd", (0x8000,), "-32768"),
        ("%hd", (0x7FFF,), "32767"),
        ("%hu", (0xFFFF,), "65535"),
        ("%ld", (-(1 << 63),), "-9223372036854775808"),
        ("%ld", ((1 << 63) - 1,), "9223372036854775807"),
        ("%lu", ((1 << 64) - 1,), "18446744073709551615"),
        ("%qd", (-(1 << 63),), "-9223372036854775808"),
        ("%qd", ((1 << 63) - 1,), "9223372036854775807"),
        ("%qu", ((1 << 64) - 1,), "18446744073709551615"),
    ],
)
def test_printk_samples(fmt, args, expected):
    assert _printed(fmt, *args) == expected


@pytest.mark.parametrize("num", [0, 1, 255, 4096, (1 << 64) - 1])
def test_print_hex_round_trip(num):
    vga, console = _console()
    console.print_hex(num)
    text = vga.row_text(0)[:40].rstrip()
    assert text.startswith("0x")
    assert int(text, 16) == num
    assert text[2:] == text[2:].upper()


@pytest.mark.parametrize("num", [0, 7, 10, 12345, (1 << 64) - 1])
def test_print_unsigned_round_trip(num):
    vga, console = _console()
    console.print_unsigned(num)
    assert int(vga.row_text(0)[:40].rstrip()) == num


def test_print_signed_prefixes_minus():
    vga, console = _console()
    console.print_signed(42, True)
    text = vga.row_text(0)[:40].rstrip()
    assert text.startswith("-")
    assert int(text[1:]) == 42


@pytest.mark.parametrize("fmt, args", [("%z", ()), ("%", ()), ("%l", (1,)), ("%d", ())])
def test_printk_format_errors(fmt, args):
    _, console = _console()
    with pytest.raises(FormatError):
        console.printk(fmt, *args)


def test_horizontal_wrap():
    vga, console = _console(width=3, height=3)
    console.print_str("abcd")
    assert vga.row_text(0)[:3] == "abc"
    assert vga.row_text(1)[:1] == "d"
    assert console.textbox.cursor == Position(1, 1)


def test_carriage_return_overwrites():
    vga, console = _console(width=5, height=2)
    console.print_str("ab\rc")
    assert vga.row_text(0)[:2] == "cb"


def test_vertical_wrap_clears_box():
    vga, console = _console(width=5, height=2)
    console.print_str("a\nb\nc")
    assert vga.row_text(0)[:5] == "c    "
    assert vga.row_text(1)[:5] == "     "


def test_print_str_stops_at_nul():
    vga, console = _console()
    console.print_str("ab\0cd")
    assert vga.row_text(0)[:4] == "ab  "


def test_clear_textbox_only_touches_box():
    vga, console = _console(width=3, height=2, x=2, y=1)
    vga.clear()
    console.clear_textbox()
    assert vga.row_text(1)[:6] == "..   ."
    assert vga.row_text(0)[:6] == "......"
    assert console.textbox.cursor == Position(2, 1)


def test_output_uses_default_colors():
    vga, console = _console()
    vga.fg_default = Color.YELLOW
    vga.bg_default = Color.RED
    console.print_char("k")
    assert vga.cell(0, 0) == Cell(ord("k"), Color.YELLOW, Color.RED)


def test_no_textbox_raises():
    console = Console(VGA())
    with pytest.raises(RuntimeError):
        console.print_char("x")


def test_text_taskbar():
    vga = VGA()
    console = Console(vga)
    bar = console.text_taskbar()
    assert bar.y_corner == HEIGHT - 3
    assert bar.width == WIDTH
    for x in (0, WIDTH - 1):
        for y in (HEIGHT - 3, HEIGHT - 2):
            assert vga.cell(x, y) == Cell(ord(" "), Color.BLUE, Color.BLUE)


def test_print_test_screen():
    vga = VGA()
    console = Console(vga)
    console.print_test()
    box_rows = [vga.row_text(y)[8:48].rstrip() for y in range(2, 17)]
    assert box_rows[:6] == [
        "-9223372036854775808",
        "9223372036854775807",
        "18446744073709551615",
        "-9223372036854775808",
        "9223372036854775807",
        "18446744073709551615",
    ]
    assert all(row == "" for row in box_rows[6:])
    assert vga.cell(8, 2).fg == Color.WHITE
    assert vga.cell(8, 2).bg == Color.DARK_GREY
    assert vga.cell(0, HEIGHT - 3) == Cell(ord(" "), Color.BLUE, Color.BLUE)