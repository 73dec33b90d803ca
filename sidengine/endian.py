"""Helpers for splitting and joining 16-bit words and their bytes."""

from collections.abc import Sequence


def set_16lo8(word: int, byte: int) -> int:
    """Return ``word`` with its low byte replaced by ``byte``."""
    return (word & 0xFF00) | (byte & 0xFF)


def get_16lo8(word: int) -> int:
    """Return the low byte of a 16-bit word."""
    return word & 0xFF


def get_16(hi: int, lo: int) -> int:
    """Join a high and a low byte into a 16-bit word."""
    return (((hi & 0xFF) << 8) | (lo & 0xFF)) & 0xFFFF


def set_16hi8(word: int, byte: int) -> int:
    """Return ``word`` with its high byte replaced by ``byte``."""
    return (word & 0x00FF) | ((byte & 0xFF) << 8)


def get_16hi8(word: int) -> int:
    """Return the high byte of a 16-bit word."""
    return (word >> 8) & 0xFF


def get_little16(data: Sequence[int], offset: int = 0) -> int:
    """Read a little-endian 16-bit word from ``data`` at ``offset``."""
    return get_16(data[offset + 1], data[offset])