"""An in-memory model of the 80x25 VGA text-mode buffer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

WIDTH = 80
HEIGHT = 25


class Color(IntEnum):
    """The sixteen VGA text colours, plus a marker meaning "use the default"."""

    DEFAULT = 0xFF
    BLACK = 0x00
    BLUE = 0x01
    GREEN = 0x02
    CYAN = 0x03
    RED = 0x04
    PURPLE = 0x05
    ORANGE = 0x06
    LIGHT_GREY = 0x07
    DARK_GREY = 0x08
    BRIGHT_BLUE = 0x09
    BRIGHT_GREEN = 0x0A
    BRIGHT_CYAN = 0x0B
    MAGENTA = 0x0C
    BRIGHT_PURPLE = 0x0D
    YELLOW = 0x0E
    WHITE = 0x0F


@dataclass
class Position:
    """A column/row pair on the screen."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Cell:
    """One screen cell: a character byte and two 4-bit colours."""

    character: int
    fg: int
    bg: int


_BLANK = Cell(ord(" "), Color.LIGHT_GREY, Color.BLACK)


def _c_mod(value: int, modulus: int) -> int:
    """Remainder that keeps the sign of the dividend."""
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


class VGA:
    """A text-mode screen with a write cursor and default colours."""

    def __init__(self):
        self.cursor = Position()
        self.bg_default = Color.DARK_GREY
        self.fg_default = Color.BRIGHT_PURPLE
        self._cells = [_BLANK] * (WIDTH * HEIGHT)

    def offset(self) -> int:
        """Cell index of the cursor, wrapping coordinates onto the screen."""
        row = _c_mod(self.cursor.y, HEIGHT)
        col = _c_mod(self.cursor.x, WIDTH)
        offset = row * WIDTH + col
        if offset < 0:
            raise IndexError(f"cursor {self.cursor} lies before the buffer")
        return offset

    def display_char(self, c, fg=Color.DEFAULT, bg=Color.DEFAULT) -> None:
        """Write a character at the cursor; DEFAULT colours use the defaults."""
        code = ord(c) if isinstance(c, str) else int(c)
        fg = self.fg_default if fg == Color.DEFAULT else fg
        bg = self.bg_default if bg == Color.DEFAULT else bg
        self._cells[self.offset()] = Cell(code & 0xFF, int(fg) & 0xF, int(bg) & 0xF)

    def clear(self) -> None:
        """Fill the whole screen with black dots."""
        for x in range(WIDTH):
            for y in range(HEIGHT):
                self.cursor = Position(x, y)
                self.display_char(".", Color.BLACK, Color.BLACK)

    def cell(self, x: int, y: int) -> Cell:
        """Return the cell at column x, row y."""
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
            raise IndexError(f"({x}, {y}) is off screen")
        return self._cells[y * WIDTH + x]

    def row_text(self, y: int) -> str:
        """Return the characters of one row as text."""
        if not 0 <= y < HEIGHT:
            raise IndexError(f"row {y} is off screen")
        row = self._cells[y * WIDTH:(y + 1) * WIDTH]
        return "".join(chr(cell.character) for cell in row)

    def render(self) -> str:
        """Return the whole screen as lines of text."""
        return "\n".join(self.row_text(y) for y in range(HEIGHT))

    def to_bytes(self) -> bytes:
        """Return the buffer as it sits in video memory: char byte, attribute byte."""
        return bytes(
            byte
            for cell in self._cells
            for byte in (cell.character, (cell.bg << 4) | cell.fg)
        )