# vgatext

An in-memory model of an 80x25 VGA text-mode screen. It comes with a
console that prints into rectangular text boxes and understands a small
`printk`-style format language.

## Modules

### `vgatext.vga`

- `Color` is an `IntEnum` of the sixteen text colours, plus
  `Color.DEFAULT` (0xFF). `DEFAULT` means "use the screen's default
  colour".
- `Position` is a mutable `x`/`y` pair.
- `Cell` is a frozen record of a character byte, a foreground colour and
  a background colour.
- `VGA` is the screen.
  - `cursor` is the `Position` where `display_char(c, fg, bg)` writes.
    `c` may be a one-character string or an integer. Only the low 8 bits
    of the character and the low 4 bits of each colour are kept.
  - `offset()` gives the cell index of the cursor. The cursor
    coordinates wrap around the screen edges.
  - `fg_default` and `bg_default` hold the default colours. At the start
    they are bright purple on dark grey.
  - `clear()` fills the screen with black dots.
  - `cell(x, y)` returns one cell. `row_text(y)` returns one row as text.
    `render()` returns the whole screen as 25 lines. All three raise
    `IndexError` for coordinates off the screen.
  - `to_bytes()` returns the buffer as video memory holds it: a character
    byte followed by an attribute byte, `(bg << 4) | fg`, for each cell.

### `vgatext.console`

- `Textbox(x_corner, y_corner, height, width, cursor=None)` is a
  rectangle with its own cursor. If no cursor is given, it starts at the
  corner.
- `Console(vga)` writes into the box chosen with `set_textbox(box)`.
  - `clear_textbox()` blanks the box in the default colours and moves
    its cursor back to the corner.
  - `print_char(c)` handles `\n` and `\r`. It wraps at the right edge of
    the box. When the cursor has gone past the bottom, the next character
    first clears the box and starts again at the top.
  - `print_str`, `print_hex` (`0x` followed by upper-case digits),
    `print_unsigned` and `print_signed(num_abs, is_neg)` are the building
    blocks that `printk` uses.
  - `printk(fmt, *args)` supports these conversions:
    - `%%`, `%c`, `%s` and `%p`
    - `%d`, `%u` and `%x` (32-bit)
    - `%h`, `%l` and `%q` followed by `d`, `u` or `x`
  - `printk` raises `FormatError` (a `ValueError`) in these cases:
    - an unknown conversion
    - a missing argument
    - a format string that ends in the middle of a conversion
  - `text_taskbar()` draws a blue bar near the bottom of the screen and
    returns its box.
  - `print_test()` draws the taskbar and a grey box, then prints a set of
    sample conversions.
- Printing before a box is chosen raises `RuntimeError`.

### `vgatext.cstring`

Helpers in the manner of a minimal C library. They work on `bytes`-like
buffers, and the buffers they write to are mutable, such as `bytearray`.

- `memset(dst, c, n)` and `memcpy(dest, src, n)` return the destination.
  They raise `ValueError` for a negative length and `IndexError` when `n`
  is larger than a buffer.
- `strlen(s)`, `strcpy(dest, src)` and `strcmp(s1, s2)` treat the data as
  NUL-terminated.
- `strchr(s, c)` returns the index of the first match, or `None` if there
  is none.

### `vgatext.kernel`

- `run_demo(vga=None)` runs `print_test` on the given screen, or on a
  fresh one, and returns the screen.
- `main(argv=None)` is the command-line entry point.

## Usage

```python
from vgatext.vga import VGA
from vgatext.console import Console, Textbox

vga = VGA()
console = Console(vga)
console.set_textbox(Textbox(x_corner=2, y_corner=1, width=30, height=5))
console.clear_textbox()
console.printk("%s has %d items (%x)\n", "list", -3, 255)
print(vga.row_text(1))
```

## Demo

```
vgatext-demo
vgatext-demo --bytes
```

The first command prints the demo screen as 25 lines of text. With
`--bytes` it writes the raw 4000-byte video buffer to standard output
instead.

## What it does not do

The screen exists only in memory. Nothing here drives real video
hardware or draws a live terminal window. Colours are stored in the
cells and in `to_bytes()`, but `render()` shows characters only.

## Tests

```
pip install -e .[test]
pytest
```