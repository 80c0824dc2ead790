"""A binary search tree that keeps equal values in the left subtree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from dsakit.trees import Node, inorder, level_order, postorder, preorder


class BinarySearchTree:
    """Values no greater than a node go left, greater values go right."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[Node[Any]] = None
        self._size = 0
        for value in values:
            self.insert(value)

    @property
    def root(self) -> Optional[Node[Any]]:
        return self._root

    def insert(self, value: Any) -> None:
        """Add ``value``; duplicates are kept."""
        new = Node(value)
        self._size += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value <= node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def _delete(self, node: Optional[Node[Any]], value: Any) -> Optional[Node[Any]]:
        if node is None:
            raise KeyError(value)
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

    def delete(self, value: Any) -> None:
        """Remove one occurrence of ``value``; raise KeyError if absent."""
        self._root = self._delete(self._root, value)
        self._size -= 1

    def minimum(self) -> Any:
        """The smallest value; raise ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def maximum(self) -> Any:
        """The largest value; raise ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def inorder(self) -> list[Any]:
        return inorder(self._root)

    def preorder(self) -> list[Any]:
        return preorder(self._root)

    def postorder(self) -> list[Any]:
        return postorder(self._root)

    def level_order(self) -> list[Any]:
        return level_order(self._root)

    def __iter__(self) -> Iterator[Any]:
        """Yield values in ascending order."""
        return iter(self.inorder())

    def __len__(self) -> int:
        return self._size