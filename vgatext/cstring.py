"""Byte-buffer and NUL-terminated string helpers."""

from __future__ import annotations


def _c_string(s) -> bytes:
    """The bytes of s up to its first NUL, or all of them if there is none."""
    return bytes(s).partition(b"\0")[0]


def memset(dst, c, n):
    """Fill the first n bytes of dst with the low byte of c; return dst."""
    if n < 0:
        raise ValueError("negative length")
    if n > len(dst):
        raise IndexError("length exceeds destination buffer")
    dst[:n] = bytes([c & 0xFF]) * n
    return dst


def memcpy(dest, src, n):
    """Copy n bytes from src into dest; return dest."""
    if n < 0:
        raise ValueError("negative length")
    if n > len(dest) or n > len(src):
        raise IndexError("length exceeds a buffer")
    dest[:n] = bytes(src[:n])
    return dest


def strlen(s) -> int:
    """Length of the string in s before its terminator."""
    return len(_c_string(s))


def strcpy(dest, src):
    """Copy the string in src, terminator included, into dest; return dest."""
    data = _c_string(src) + b"\0"
    if len(data) > len(dest):
        raise IndexError("destination buffer too small")
    dest[:len(data)] = data
    return dest


def strcmp(s1, s2) -> int:
    """Difference of the first unequal bytes, compared unsigned; 0 if equal."""
    for a, b in zip(_c_string(s1) + b"\0", _c_string(s2) + b"\0"):
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strchr(s, c):
    """Index of the first byte equal to c's low byte, or None if absent."""
    text = _c_string(s)
    ch = c & 0xFF
    if ch == 0:
        return len(text)
    index = text.find(bytes([ch]))
    return None if index < 0 else index