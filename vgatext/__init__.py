"""An in-memory VGA text-mode screen, a textbox console with printk formatting, and C-style string helpers."""

__version__ = "0.1.0"
__all__ = ["vga", "console", "cstring", "kernel"]