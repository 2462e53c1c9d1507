"""Small string helpers."""

from __future__ import annotations

__all__ = ["ends_with", "equals", "index_of", "insert"]


def _require_char(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError("expected a single character")


def ends_with(text: str, suffix: str) -> bool:
    """Return True if ``text`` ends with ``suffix``."""
    return text.endswith(suffix)


def equals(text: str, other: str, ignore_case: bool = False) -> bool:
    """Compare two strings, optionally ignoring case character by character."""
    if ignore_case:
        return len(text) == len(other) and all(
            a.lower() == b.lower() for a, b in zip(text, other)
        )
    return text == other


def index_of(text: str, char: str) -> int:
    """Return the first index of ``char`` in ``text``, or -1 if it is absent."""
    _require_char(char)
    return text.find(char)


def insert(text: str, index: int, char: str) -> str:
    """Return ``text`` with ``char`` inserted before position ``index``."""
    _require_char(char)
    if not 0 <= index <= len(text):
        raise IndexError(f"index {index} out of range for length {len(text)}")
    return text[:index] + char + text[index:]