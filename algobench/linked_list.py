"""A doubly linked list that appends at its end."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

__all__ = ["DoublyLinkedList"]


@dataclass(eq=False)
class _Link:
    value: Any
    prev: Optional["_Link"] = None
    next: Optional["_Link"] = None


class DoublyLinkedList:
    """Values kept in insertion order, walkable in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Link] = None
        self._tail: Optional[_Link] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add a value after the last one."""
        link = _Link(value, prev=self._tail)
        if self._tail is None:
            self._head = link
        else:
            self._tail.next = link
        self._tail = link
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        link = self._head
        while link is not None:
            yield link.value
            link = link.next

    def __reversed__(self) -> Iterator[Any]:
        link = self._tail
        while link is not None:
            yield link.value
            link = link.prev

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"