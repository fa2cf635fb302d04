"""Search structures: a doubly linked list, binary search and AVL trees, and chained hash tables."""

__version__ = "0.1.0"

__all__ = ["__version__"]