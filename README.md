# algobench

A small collection of classic search structures written in plain Python.

## What is inside

- `algobench.linked_list` — `DoublyLinkedList`, which appends values at the
  end with `append`, reports its length and can be iterated forwards or
  backwards (`reversed(...)`). It can be built from an iterable of values.
- `algobench.bst` — `BinarySearchTree` (made of `Node` objects), an
  unbalanced binary search tree. `insert` returns `False` and leaves the tree
  unchanged when the value is already present. `search` returns the node
  holding a value or `None`; `min` and `max` raise `ValueError` on an empty
  tree. Iterating over the tree yields its values in ascending order.
- `algobench.avl` — `AVLTree` (made of `AVLNode` objects), a self-balancing
  tree with parent links. By default `insert` rejects a value already present
  and returns `False`; `AVLTree(allow_duplicates=True)` keeps repeated values,
  placing each to the left of an equal one. `height()` reports the height of
  the tree (0 when empty, 1 for a single node), and iteration yields values
  in ascending order.
- `algobench.hashtable` — `HashTable`, a chained hash table of integers that
  puts each value in bucket `value % capacity` and doubles its capacity
  whenever the number of stored values reaches the capacity. Inserting a
  value that is already present raises `DuplicateValueError`. `capacity()`,
  `load_factor()` and `buckets()` expose its state. `ScaledHashTable` is a
  deliberately bad variant that stores every value multiplied by the
  capacity, so that all values collide in bucket 0, for worst-case
  behaviour.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using the library

```python
from algobench.bst import BinarySearchTree
from algobench.hashtable import HashTable, DuplicateValueError

tree = BinarySearchTree([8, 3, 10, 1, 6])
print(list(tree))        # [1, 3, 6, 8, 10]
print(tree.min(), tree.max())
print(6 in tree)         # True

table = HashTable(1)
for value in range(5):
    table.insert(value)
print(len(table), table.capacity(), table.load_factor())

try:
    table.insert(3)
except DuplicateValueError:
    print("3 is already stored")
```

## What it does not do

The package is a library only. It installs no commands: there are no
sorting algorithms, no timing benchmarks and no interactive menus for
inserting, printing or searching values. Values are also never removed from
any of the structures.