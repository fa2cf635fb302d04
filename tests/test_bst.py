import random

import pytest

from algobench.bst import BinarySearchTree, Node


def _random_values(seed, n=200):
    rng = random.Random(seed)
    return [rng.randrange(-500, 500) for _ in range(n)]


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_iteration_is_sorted_and_distinct(seed):
    values = _random_values(seed)
    tree = BinarySearchTree(values)
    assert list(tree) == sorted(set(values))
    assert len(tree) == len(set(values))


def test_duplicate_insert_is_ignored():
    tree = BinarySearchTree()
    assert tree.insert(10) is True
    assert tree.insert(10) is False
    assert len(tree) == 1
    assert list(tree) == [10]


def test_first_value_becomes_root_and_children_follow_order():
    tree = BinarySearchTree([50, 30, 70])
    assert tree.root.value == 50
    assert tree.root.left.value == 30
    assert tree.root.right.value == 70


@pytest.mark.parametrize("seed", [3, 4])
def test_search_finds_every_inserted_value(seed):
    values = _random_values(seed)
    tree = BinarySearchTree(values)
    for value in values:
        node = tree.search(value)
        assert isinstance(node, Node) and node.value == value
        assert value in tree


def test_search_missing_returns_none():
    tree = BinarySearchTree([5, 1, 9])
    assert tree.search(4) is None
    assert 4 not in tree
    assert BinarySearchTree().search(0) is None


@pytest.mark.parametrize("seed", [5, 6])
def test_min_and_max(seed):
    values = _random_values(seed)
    tree = BinarySearchTree(values)
    assert tree.min() == min(values)
    assert tree.max() == max(values)


def test_min_max_on_empty_tree_raise():
    tree = BinarySearchTree()
    with pytest.raises(ValueError):
        tree.min()
    with pytest.raises(ValueError):
        tree.max()


def test_degenerate_tree_from_sorted_inserts():
    n = 5000
    tree = BinarySearchTree(range(n))
    assert len(tree) == n
    assert tree.max() == n - 1
    assert n not in tree
    assert (n - 1) in tree


def test_str_lists_values_in_order():
    assert str(BinarySearchTree([2, 3, 1])) == "1 2 3"