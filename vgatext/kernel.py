"""Entry point that draws the formatter demo screen."""

from __future__ import annotations

import argparse
import sys

from vgatext.console import Console
from vgatext.vga import VGA


def run_demo(vga=None) -> VGA:
    """Draw the demo onto vga (a fresh screen if none) and return it."""
    if vga is None:
        vga = VGA()
    Console(vga).print_test()
    return vga


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="vgatext", description="Draw the formatter demo on a text screen."
    )
    parser.add_argument(
        "--bytes",
        action="store_true",
        help="write the raw video buffer instead of text",
    )
    options = parser.parse_args(argv)

    vga = run_demo()
    if options.bytes:
        sys.stdout.buffer.write(vga.to_bytes())
        sys.stdout.buffer.flush()
    else:
        print(vga.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())