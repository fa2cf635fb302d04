"""A self-balancing AVL search tree with parent links."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

__all__ = ["AVLNode", "AVLTree"]


@dataclass(eq=False)
class AVLNode:
    """One tree node; a leaf has height 1."""

    value: Any
    height: int = 1
    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None
    parent: Optional["AVLNode"] = field(default=None, repr=False)

    @property
    def balance(self) -> int:
        """Height of the left subtree minus height of the right one."""
        return _height(self.left) - _height(self.right)

    def _refresh_height(self) -> None:
        self.height = max(_height(self.left), _height(self.right)) + 1


def _height(node: Optional[AVLNode]) -> int:
    return 0 if node is None else node.height


class AVLTree:
    """AVL tree; by default a value already present is not inserted again.

    With ``allow_duplicates`` set, equal values are kept and go to the left
    of the node they meet while descending.
    """

    def __init__(self, allow_duplicates: bool = False) -> None:
        self.allow_duplicates = allow_duplicates
        self.root: Optional[AVLNode] = None
        self._size = 0

    def insert(self, value: Any) -> bool:
        """Insert a value; return False if it was rejected as a duplicate."""
        if self.root is None:
            self.root = AVLNode(value)
            self._size = 1
            return True

        node = self.root
        while True:
            if value < node.value or (self.allow_duplicates and value == node.value):
                if node.left is None:
                    node.left = AVLNode(value, parent=node)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = AVLNode(value, parent=node)
                    break
                node = node.right
            else:
                return False

        self._size += 1
        self._rebalance(node)
        return True

    def search(self, value: Any) -> Optional[AVLNode]:
        """Return a node holding value, or None."""
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
        stack: list[AVLNode] = []
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

    def height(self) -> int:
        """Height of the tree: 0 when empty, 1 for a single node."""
        return _height(self.root)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def _rebalance(self, node: Optional[AVLNode]) -> None:
        while node is not None:
            node._refresh_height()
            balance = node.balance
            if balance > 1:
                if node.left is not None and node.left.balance < 0:
                    self._rotate_left(node.left)
                node = self._rotate_right(node)
            elif balance < -1:
                if node.right is not None and node.right.balance > 0:
                    self._rotate_right(node.right)
                node = self._rotate_left(node)
            node = node.parent

    def _replace_child(self, old: AVLNode, new: AVLNode) -> None:
        parent = old.parent
        new.parent = parent
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, node: AVLNode) -> AVLNode:
        pivot = node.right
        assert pivot is not None
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        self._replace_child(node, pivot)
        pivot.left = node
        node.parent = pivot
        node._refresh_height()
        pivot._refresh_height()
        return pivot

    def _rotate_right(self, node: AVLNode) -> AVLNode:
        pivot = node.left
        assert pivot is not None
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        self._replace_child(node, pivot)
        pivot.right = node
        node.parent = pivot
        node._refresh_height()
        pivot._refresh_height()
        return pivot