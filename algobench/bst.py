"""An unbalanced binary search tree of distinct values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

__all__ = ["Node", "BinarySearchTree"]


@dataclass(eq=False)
class Node:
    """One tree node."""

    value: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


class BinarySearchTree:
    """Binary search tree; inserting a value already present does nothing."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Insert a value; return False if it was already in the tree."""
        if self.root is None:
            self.root = Node(value)
            self._size += 1
            return True
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = Node(value)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def search(self, value: Any) -> Optional[Node]:
        """Return the node holding value, or None."""
        node = self.root
        while node is not None:
            if node.value == value:
                return node
            node = node.left if value < node.value else node.right
        return None

    def __contains__(self, value: Any) -> bool:
        return self.search(value) is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in ascending order."""
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size

    def min(self) -> Any:
        """Smallest value; raises ValueError on an empty tree."""
        if self.root is None:
            raise ValueError("min() of an empty tree")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.value

    def max(self) -> Any:
        """Largest value; raises ValueError on an empty tree."""
        if self.root is None:
            raise ValueError("max() of an empty tree")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.value

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)