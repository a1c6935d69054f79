"""A list whose elements can also be looked up by a unique string key."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar, overload

T = TypeVar("T")


class IndexedVector(Generic[T]):
    """Sequence of entries addressable by position or by a unique name."""

    def __init__(self) -> None:
        self._entries: list[T] = []
        self._index: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[T]:
        return iter(self._entries)

    def __contains__(self, index: object) -> bool:
        return index in self._index

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()
        self._index.clear()

    def insert(self, entry: T, index: str) -> int:
        """Store ``entry`` under ``index`` and return its numeric position.

        If an entry with the same name exists it is replaced in place and
        keeps its position; otherwise the entry is appended.
        """
        position = self._index.get(index)
        if position is not None:
            self._entries[position] = entry
            return position
        position = len(self._entries)
        self._entries.append(entry)
        self._index[index] = position
        return position

    @overload
    def at(self, key: int) -> T | None: ...

    @overload
    def at(self, key: str) -> T | None: ...

    def at(self, key: int | str) -> T | None:
        """Return the entry at a numeric position or name, or None."""
        if isinstance(key, str):
            position = self._index.get(key)
            if position is None:
                return None
            return self._entries[position]
        if 0 <= key < len(self._entries):
            return self._entries[key]
        return None