"""Binary search tree with insertion, lookup, deletion and preorder construction."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """A tree node holding one key and links to its two subtrees."""

    data: int
    left: Node | None = None
    right: Node | None = None


def _height(node: Node | None) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def _rightmost(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node


def _leftmost(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: Node | None, key: int) -> Node | None:
    if node is None:
        raise KeyError(key)
    if key < node.data:
        node.left = _delete(node.left, key)
    elif key > node.data:
        node.right = _delete(node.right, key)
    elif node.left is None and node.right is None:
        return None
    elif _height(node.left) > _height(node.right):
        assert node.left is not None
        predecessor = _rightmost(node.left)
        node.data = predecessor.data
        node.left = _delete(node.left, predecessor.data)
    else:
        assert node.right is not None
        successor = _leftmost(node.right)
        node.data = successor.data
        node.right = _delete(node.right, successor.data)
    return node


class BinarySearchTree:
    """A binary search tree of distinct keys; duplicates are ignored on insert."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        for key in keys:
            self.insert(key)

    def insert(self, key: int) -> None:
        """Add ``key`` as a new leaf unless it is already present."""
        if self.root is None:
            self.root = Node(key)
            return
        current = self.root
        while True:
            if key < current.data:
                if current.left is None:
                    current.left = Node(key)
                    return
                current = current.left
            elif key > current.data:
                if current.right is None:
                    current.right = Node(key)
                    return
                current = current.right
            else:
                return

    def search(self, key: int) -> Node:
        """Return the node holding ``key``; raise KeyError if it is absent."""
        current = self.root
        while current is not None:
            if key == current.data:
                return current
            current = current.left if key < current.data else current.right
        raise KeyError(key)

    def delete(self, key: int) -> None:
        """Remove ``key``, replacing it from the taller subtree; raise KeyError if absent.

        A node with children takes its in-order predecessor when the left
        subtree is strictly taller, and its in-order successor otherwise.
        """
        self.root = _delete(self.root, key)

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        return _height(self.root)

    def inorder(self) -> list[int]:
        """Return the keys in ascending order."""
        return list(self)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        try:
            self.search(key)
        except KeyError:
            return False
        return True

    def __iter__(self) -> Iterator[int]:
        stack: list[Node] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.data
            current = current.right

    @classmethod
    def from_preorder(cls, preorder: Iterable[int]) -> BinarySearchTree:
        """Rebuild the tree whose preorder traversal is ``preorder``."""
        tree = cls()
        keys = iter(preorder)
        try:
            first = next(keys)
        except StopIteration:
            return tree
        tree.root = current = Node(first)
        stack: list[Node] = []
        for key in keys:
            node = Node(key)
            if key < current.data:
                current.left = node
                stack.append(current)
            else:
                while stack and key > stack[-1].data:
                    current = stack.pop()
                current.right = node
            current = node
        return tree