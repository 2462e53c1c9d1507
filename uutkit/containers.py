"""General-purpose containers: fixed-size arrays, rich lists and ordered dictionaries."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, List as _TypingList, Optional, TypeVar

from sortedcontainers import SortedDict

__all__ = ["FixedArray", "List", "Dictionary"]

T = TypeVar("T")
U = TypeVar("U")


class FixedArray(Generic[T]):
    """A sequence whose length is fixed when it is created."""

    __slots__ = ("_data",)

    def __init__(self, count: int, fill: Any = None) -> None:
        if count < 0:
            raise ValueError("count must not be negative")
        self._data: _TypingList[Any] = [fill] * count

    def zero(self) -> None:
        """Set every element to zero."""
        self._data = [0] * len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            raise TypeError("slice assignment would change a fixed array's length")
        self._data[index] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FixedArray):
            return self._data == other._data
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FixedArray({self._data!r})"


class List(_TypingList[T]):
    """A list with predicate-based queries and conversions."""

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        """Return True if any element satisfies ``predicate``."""
        return any(predicate(item) for item in self)

    def find_all(self, predicate: Callable[[T], bool]) -> "List[T]":
        """Return a new list of the elements that satisfy ``predicate``."""
        return List(item for item in self if predicate(item))

    def convert_all(self, convert: Callable[[T], U]) -> "List[U]":
        """Return a new list with ``convert`` applied to every element."""
        return List(convert(item) for item in self)

    def index_of(self, item: T) -> int:
        """Return the first index of ``item``, or -1 if it is absent."""
        return next((i for i, value in enumerate(self) if value == item), -1)

    def last_index_of(self, item: T) -> int:
        """Return the last index of ``item``, or -1 if it is absent."""
        last = len(self) - 1
        return next(
            (last - i for i, value in enumerate(reversed(self)) if value == item), -1
        )

    def remove_all(self, predicate: Callable[[T], bool]) -> int:
        """Remove every element that satisfies ``predicate``; return how many went."""
        kept = [item for item in self if not predicate(item)]
        removed = len(self) - len(kept)
        self[:] = kept
        return removed

    def true_for_all(self, predicate: Callable[[T], bool]) -> bool:
        """Return True if every element satisfies ``predicate``."""
        return all(predicate(item) for item in self)


class Dictionary(SortedDict):
    """A mapping kept in key order."""

    def add(self, key: Any, value: Any) -> bool:
        """Insert ``key`` unless it is already present; return True if inserted."""
        if key in self:
            return False
        self[key] = value
        return True

    def try_get(self, key: Any) -> Optional[Any]:
        """Return the value stored under ``key``, or None if there is none."""
        return self.get(key)