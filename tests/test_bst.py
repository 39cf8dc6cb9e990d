import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.bst import BinarySearchTree

keys_strategy = st.lists(st.integers(-100, 100), max_size=30)


def _preorder(node):
    if node is None:
        return []
    return [node.data] + _preorder(node.left) + _preorder(node.right)


def test_search_finds_inserted_key():
    tree = BinarySearchTree([10, 30, 3, 25, 14])
    assert tree.search(25).data == 25
    assert 14 in tree


def test_search_missing_raises():
    tree = BinarySearchTree([10, 30, 3, 25, 14])
    with pytest.raises(KeyError):
        tree.search(7)
    assert 7 not in tree


def test_inorder_of_source_example_is_sorted():
    tree = BinarySearchTree([10, 30, 3, 25, 14])
    assert tree.inorder() == sorted([10, 30, 3, 25, 14])


def test_delete_source_example():
    tree = BinarySearchTree([10, 30, 3, 21, 14, 26, 38])
    for key in (38, 26, 10):
        tree.delete(key)
    assert tree.inorder() == [3, 14, 21, 30]
    assert 26 not in tree
    # the right subtree is taller, so the root takes its in-order successor
    assert tree.root.data == 14


def test_delete_missing_raises():
    tree = BinarySearchTree([5, 2, 8])
    with pytest.raises(KeyError):
        tree.delete(4)
    assert tree.inorder() == [2, 5, 8]


def test_delete_from_empty_raises():
    with pytest.raises(KeyError):
        BinarySearchTree().delete(1)


def test_empty_tree_height_and_inorder():
    tree = BinarySearchTree()
    assert tree.height() == 0
    assert tree.inorder() == []


def test_from_preorder_source_example():
    pre = [30, 20, 10, 15, 25, 40, 50, 45]
    tree = BinarySearchTree.from_preorder(pre)
    assert tree.inorder() == sorted(pre)
    assert _preorder(tree.root) == pre


def test_from_empty_preorder():
    assert BinarySearchTree.from_preorder([]).root is None


@given(keys_strategy)
def test_inorder_is_sorted_unique(keys):
    tree = BinarySearchTree(keys)
    assert tree.inorder() == sorted(set(keys))


@given(keys_strategy)
def test_height_bounds(keys):
    tree = BinarySearchTree(keys)
    unique = len(set(keys))
    assert tree.height() <= unique
    assert (tree.height() == 0) == (unique == 0)


@given(st.integers(1, 30))
def test_sorted_insertion_degenerates(n):
    tree = BinarySearchTree(range(n))
    assert tree.height() == n


@given(st.data())
def test_delete_removes_only_that_key(data):
    keys = data.draw(st.lists(st.integers(-50, 50), min_size=1, max_size=30))
    key = data.draw(st.sampled_from(keys))
    tree = BinarySearchTree(keys)
    tree.delete(key)
    assert key not in tree
    assert tree.inorder() == sorted(set(keys) - {key})


@given(keys_strategy)
def test_preorder_round_trip(keys):
    tree = BinarySearchTree(keys)
    rebuilt = BinarySearchTree.from_preorder(_preorder(tree.root))
    assert _preorder(rebuilt.root) == _preorder(tree.root)
    assert rebuilt.inorder() == tree.inorder()