"""Small text helpers: case-insensitive comparison, trimming, tokenising."""

from __future__ import annotations

import os

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_WHITESPACE = " \t\n\v\f\r"


def to_lower(text: str) -> str:
    """Lower-case the ASCII letters of ``text``, leaving everything else alone."""
    return text.translate(_ASCII_LOWER)


def casecompare(c1: str, c2: str) -> bool:
    """Compare two characters ignoring ASCII case."""
    return to_lower(c1) == to_lower(c2)


def equal(s1: str | None, s2: str | None, n: int | None = None) -> bool:
    """Compare two strings ignoring ASCII case.

    With ``n`` given, only the first ``n`` characters are compared.
    """
    if s1 is s2 or n == 0:
        return True
    if s1 is None or s2 is None:
        return False
    if n is not None:
        s1, s2 = s1[:n], s2[:n]
    return to_lower(s1) == to_lower(s2)


def utf8_to_extended_ascii(data: bytes) -> bytes:
    """Fold two-byte UTF-8 Latin-1 sequences back into single bytes.

    Conversion stops at the first NUL byte.
    """
    out = bytearray()
    it = iter(data)
    for ch in it:
        if ch == 0:
            break
        if ch in (0xC2, 0xC3):
            nxt = next(it, None)
            if nxt is None:
                break
            out.append(nxt if ch == 0xC2 else (nxt + 0x40) & 0xFF)
        else:
            out.append(ch)
    return bytes(out)


def extended_ascii_to_utf8(data: bytes) -> bytes:
    """Encode Latin-1 bytes as UTF-8, stopping at the first NUL byte."""
    return data.split(b"\0", 1)[0].decode("latin-1").encode("utf-8")


def trim(text: str) -> str:
    """Strip leading and trailing ASCII whitespace."""
    return text.strip(_WHITESPACE)


def array_from_tokens(text: str, delimiter: str = "\n") -> list[str]:
    """Split ``text`` on ``delimiter``, trim each part and drop empty ones."""
    return [part for part in map(trim, text.split(delimiter)) if part]


def load_file(filename: str | os.PathLike[str]) -> bytes:
    """Return the whole content of a file, or empty bytes if it cannot be read."""
    try:
        with open(filename, "rb") as handle:
            return handle.read()
    except OSError:
        return b""