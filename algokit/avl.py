"""A self-balancing AVL binary search tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["AVLNode", "AVLTree"]


@dataclass(eq=False)
class AVLNode:
    """A tree node holding a key, two children and the height of its subtree."""

    key: Any
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1


def _height(node: AVLNode | None) -> int:
    return 0 if node is None else node.height


def _update(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: AVLNode) -> AVLNode:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: AVLNode) -> AVLNode:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


class AVLTree:
    """A binary search tree whose subtrees never differ in height by more than one.

    Inserting a key that is already present leaves the tree unchanged.
    """

    def __init__(self) -> None:
        self.root: AVLNode | None = None

    def balance(self, node: AVLNode | None) -> int:
        """Return the left subtree height minus the right subtree height (0 for None)."""
        if node is None:
            return 0
        return _height(node.left) - _height(node.right)

    def height(self) -> int:
        """Return the height of the whole tree, 0 when empty."""
        return _height(self.root)

    def insert(self, key: Any) -> None:
        """Insert ``key`` and rebalance the path back to the root."""
        self.root = self._insert(self.root, key)

    def _insert(self, node: AVLNode | None, key: Any) -> AVLNode:
        if node is None:
            return AVLNode(key)
        if key < node.key:
            node.left = self._insert(node.left, key)
        elif key > node.key:
            node.right = self._insert(node.right, key)
        else:
            return node

        _update(node)
        balance = self.balance(node)

        if balance > 1 and key < node.left.key:
            return _rotate_right(node)
        if balance < -1 and key > node.right.key:
            return _rotate_left(node)
        if balance > 1 and key > node.left.key:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1 and key < node.right.key:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def preorder(self) -> list[Any]:
        """Return the keys visiting each node before its left and right subtrees."""
        return list(self._preorder(self.root))

    def _preorder(self, node: AVLNode | None) -> Iterator[Any]:
        if node is not None:
            yield node.key
            yield from self._preorder(node.left)
            yield from self._preorder(node.right)