"""Strings that carry a precomputed hash and compare by it."""

from __future__ import annotations

from functools import total_ordering
from typing import Optional

__all__ = ["HashString", "string_hash"]

_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193
_MASK = 0xFFFFFFFF


def string_hash(text: str) -> int:
    """Return the 32-bit FNV-1a hash of ``text`` (UTF-8) as a signed int."""
    value = _FNV_OFFSET
    for byte in text.encode("utf-8"):
        value = ((value ^ byte) * _FNV_PRIME) & _MASK
    return value - (1 << 32) if value & 0x80000000 else value


@total_ordering
class HashString:
    """A string paired with its hash; equality and ordering use the hash only.

    A HashString built without text has hash 0 and counts as empty.
    """

    __slots__ = ("_text", "_hash")

    EMPTY: "HashString"

    def __init__(self, text: Optional[str] = None) -> None:
        if text is None:
            self._text = ""
            self._hash = 0
        elif isinstance(text, str):
            self._text = text
            self._hash = string_hash(text)
        else:
            raise TypeError(f"expected str, got {type(text).__name__}")

    @property
    def text(self) -> str:
        return self._text

    @property
    def hash_code(self) -> int:
        return self._hash

    def is_empty(self) -> bool:
        """Return True if the hash is zero."""
        return self._hash == 0

    def __int__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HashString):
            return self._hash == other._hash
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, HashString):
            return self._hash < other._hash
        return NotImplemented

    def __hash__(self) -> int:
        return self._hash

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"HashString({self._text!r})"


HashString.EMPTY = HashString()