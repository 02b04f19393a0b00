# Copyright 2026 Checker Framework plugin contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

"""An OrderedSet is a set that remembers its insertion order.

Used throughout the build model wherever Gradle-style collections (task dependencies, configuration
hierarchies, declared dependencies) must keep declaration order while rejecting duplicates.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, MutableSet, TypeVar

T = TypeVar("T")


class OrderedSet(MutableSet[T]):
    """A mutable set that retains its order."""

    def __init__(self, iterable: Iterable[T] | None = None) -> None:
        # NB: Dictionaries are ordered in Python 3.7+.
        self._items: dict[T, None] = {v: None for v in iterable or ()}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: Any) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        name = self.__class__.__name__
        if not self:
            return f"{name}()"
        return f"{name}({list(self)!r})"

    def __eq__(self, other: Any) -> bool:
        """Returns True if other is the same type with the same elements and same order."""
        if not isinstance(other, self.__class__):
            return NotImplemented
        return len(self._items) == len(other._items) and all(
            x == y for x, y in zip(self._items, other._items)
        )

    def add(self, key: T) -> None:
        self._items[key] = None

    def update(self, iterable: Iterable[T]) -> None:
        for item in iterable:
            self.add(item)

    def discard(self, key: T) -> None:
        """Remove an element. Do not raise an exception if absent."""
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()
