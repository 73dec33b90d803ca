"""Helpers for splitting tune file paths."""

from __future__ import annotations


def file_name_without_path(path: str) -> int:
    """Index where the file name starts; ':', '\\' and '/' separate parts."""
    last = -1
    for pos, ch in enumerate(path):
        if ch in ":\\/":
            last = pos
    return last + 1


def slashed_file_name_without_path(path: str) -> int:
    """Index where the file name starts, with '/' as the only separator."""
    return path.rfind("/") + 1


def file_ext_of_path(path: str) -> str:
    """The extension of ``path`` including its dot, or "" if there is none."""
    pos = path.rfind(".")
    return path[pos:] if pos >= 0 else ""