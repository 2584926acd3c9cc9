"""Text boxes on the VGA screen and a small printf-style formatter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from vgatext.vga import HEIGHT, VGA, WIDTH, Color, Position

_U64 = (1 << 64) - 1
_U32 = (1 << 32) - 1
_INT_MAX = (1 << 31) - 1
_LONG_MIN = -(1 << 63)
_LONG_MAX = (1 << 63) - 1
_ULONG_MAX = _U64
_UINTPTR_MAX = _U64

# Argument mask and sign bit for each integer length specifier.
_INT_SPECS = {
    "l": (_U64, 1 << 63),
    "q": (_U64, 1 << 63),
    "h": (_U32, 1 << 15),
    "d": (_U32, 1 << 31),
    "u": (_U32, 1 << 31),
    "x": (_U32, 1 << 31),
}


class FormatError(ValueError):
    """A format string cannot be printed."""


@dataclass
class Textbox:
    """A rectangle of the screen with its own text cursor."""

    x_corner: int
    y_corner: int
    height: int
    width: int
    cursor: Optional[Position] = field(default=None)

    def __post_init__(self):
        if self.cursor is None:
            self.cursor = Position(self.x_corner, self.y_corner)


class Console:
    """Writes text into the current text box of a VGA screen."""

    def __init__(self, vga: VGA):
        self.vga = vga
        self.textbox: Optional[Textbox] = None

    def _box(self) -> Textbox:
        if self.textbox is None:
            raise RuntimeError("no textbox selected")
        return self.textbox

    def set_textbox(self, box: Textbox) -> None:
        """Make box the target of further output."""
        self.textbox = box

    def clear_textbox(self) -> None:
        """Blank the current box and move its cursor to the corner."""
        box = self._box()
        for x in range(box.x_corner, box.x_corner + box.width):
            for y in range(box.y_corner, box.y_corner + box.height):
                self.vga.cursor = Position(x, y)
                self.vga.display_char(" ", Color.DEFAULT, Color.DEFAULT)
        box.cursor.x = box.x_corner
        box.cursor.y = box.y_corner

    def print_char(self, c: str) -> None:
        """Write one character, handling newline, carriage return and wrapping."""
        box = self._box()
        tc = box.cursor
        if tc.y >= box.y_corner + box.height:
            tc.y = box.y_corner
            self.clear_textbox()

        if c == "\n":
            tc.x = box.x_corner
            tc.y += 1
        elif c == "\r":
            tc.x = box.x_corner
        else:
            self.vga.cursor = Position(tc.x, tc.y)
            self.vga.display_char(c, Color.DEFAULT, Color.DEFAULT)
            tc.x += 1

        if tc.x >= box.x_corner + box.width:
            tc.x = box.x_corner
            tc.y += 1

    def print_str(self, s: str) -> None:
        """Write a string up to its first NUL."""
        for c in s.partition("\0")[0]:
            self.print_char(c)

    def print_hex(self, num: int) -> None:
        """Write a 64-bit value as 0x followed by upper-case hex digits."""
        self.print_str(f"0x{num & _U64:X}")

    def print_unsigned(self, num: int) -> None:
        """Write a 64-bit value in decimal."""
        self.print_str(str(num & _U64))

    def print_signed(self, num_abs: int, is_neg: bool) -> None:
        """Write a magnitude in decimal, preceded by '-' when is_neg."""
        if is_neg:
            self.print_char("-")
        self.print_unsigned(num_abs)

    def printk(self, fmt: str, *args) -> None:
        """Format and write; supports %% %c %s %p %d %u %x with h, l or q lengths."""
        chars = iter(fmt.partition("\0")[0])
        values = iter(args)

        def next_arg(spec: str):
            try:
                return next(values)
            except StopIteration:
                raise FormatError(f"missing argument for %{spec}") from None

        for c in chars:
            if c != "%":
                self.print_char(c)
                continue
            spec = next(chars, None)
            if spec is None:
                raise FormatError("format ends after '%'")
            if spec == "%":
                self.print_char("%")
            elif spec == "p":
                self.print_hex(int(next_arg(spec)))
            elif spec == "s":
                self.print_str(str(next_arg(spec)))
            elif spec == "c":
                value = next_arg(spec)
                code = ord(value) if isinstance(value, str) else int(value)
                self.print_char(chr(code & 0xFF))
            elif spec in _INT_SPECS:
                mask, sign_bit = _INT_SPECS[spec]
                n = int(next_arg(spec)) & mask
                is_neg = bool(n & sign_bit)
                conversion = spec
                if spec in "lqh":
                    conversion = next(chars, None)
                    if conversion is None:
                        raise FormatError(f"format ends after '%{spec}'")
                if conversion == "d":
                    self.print_signed(n, is_neg)
                elif conversion == "u":
                    self.print_unsigned(n)
                else:
                    self.print_hex(n)
            else:
                raise FormatError(f"unknown conversion %{spec}")

    def text_taskbar(self) -> Textbox:
        """Draw a blue bar near the bottom of the screen and return its box."""
        self.vga.bg_default = Color.BLUE
        self.vga.fg_default = Color.BLUE
        bar = Textbox(x_corner=0, y_corner=HEIGHT - 3, width=WIDTH, height=2)
        self.set_textbox(bar)
        self.clear_textbox()
        return bar

    def print_test(self) -> None:
        """Draw the taskbar and a grey box, then print a set of format samples."""
        self.text_taskbar()

        self.vga.bg_default = Color.DARK_GREY
        self.vga.fg_default = Color.WHITE
        box = Textbox(x_corner=8, y_corner=2, width=40, height=15)
        self.set_textbox(box)
        self.clear_textbox()

        samples = [
            ("%c\n", "a"),
            ("%c\n", "Q"),
            ("%c\n", 256 + ord("9")),
            ("%s\n", "test string"),
            ("foo%sbar\n", "blah"),
            ("foo%%sbar\n",),
            ("%d\n", -2147483648),
            ("%d\n", _INT_MAX),
            ("%u\n", 0),
            ("%u\n", 4294967295),
            ("%x\n", 0xDEADBEEF),
            ("%p\n", _UINTPTR_MAX),
            ("%hd\n", 0x8000),
            ("%hd\n", 0x7FFF),
            ("%hu\n", 0xFFFF),
            ("%ld\n", _LONG_MIN),
            ("%ld\n", _LONG_MAX),
            ("%lu\n", _ULONG_MAX),
            ("%qd\n", _LONG_MIN),
            ("%qd\n", _LONG_MAX),
            ("%qu\n", _ULONG_MAX),
        ]
        for fmt, *args in samples:
            self.printk(fmt, *args)