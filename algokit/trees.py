"""Binary trees: an unbalanced search tree with deletion, a lookup tree and traversals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = [
    "TreeNode",
    "BinaryTree",
    "BinarySearchTree",
    "inorder",
    "preorder",
    "postorder",
]


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding a value and up to two children."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the values visiting left subtree, node, then right subtree."""
    return list(_inorder(root))


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the values visiting node, then left subtree, then right subtree."""
    return list(_preorder(root))


def postorder(root: TreeNode | None) -> list[Any]:
    """Return the values visiting left subtree, right subtree, then node."""
    return list(_postorder(root))


def _insert(node: TreeNode | None, value: Any) -> TreeNode:
    if node is None:
        return TreeNode(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    elif value > node.value:
        node.right = _insert(node.right, value)
    return node


class BinaryTree:
    """An ordered binary tree; duplicate values are ignored on insert."""

    def __init__(self) -> None:
        self.root: TreeNode | None = None

    def insert(self, value: Any) -> None:
        """Place ``value`` at the leaf position its ordering selects."""
        self.root = _insert(self.root, value)

    def delete(self, value: Any) -> None:
        """Remove ``value`` if present, replacing it by its in-order successor when needed."""
        self.root = self._delete(self.root, value)

    def _delete(self, node: TreeNode | None, value: Any) -> TreeNode | None:
        if node is None:
            return None
        if value < node.value:
            node.left = self._delete(node.left, value)
        elif value > node.value:
            node.right = self._delete(node.right, value)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node.right = self._delete(node.right, successor.value)
        return node

    def inorder(self) -> list[Any]:
        return inorder(self.root)

    def preorder(self) -> list[Any]:
        return preorder(self.root)

    def postorder(self) -> list[Any]:
        return postorder(self.root)


class BinarySearchTree:
    """A binary search tree of distinct keys supporting insertion and lookup."""

    def __init__(self) -> None:
        self._root: TreeNode | None = None

    def insert(self, key: Any) -> None:
        """Add ``key``; a key already present is left as it is."""
        self._root = _insert(self._root, key)

    def search(self, key: Any) -> bool:
        """Return True if ``key`` is in the tree."""
        node = self._root
        while node is not None:
            if key == node.value:
                return True
            node = node.left if key < node.value else node.right
        return False

    def __contains__(self, key: Any) -> bool:
        return self.search(key)