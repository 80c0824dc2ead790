"""Binary tree nodes, traversals and small tree utilities."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """A binary tree node holding a value and two optional children."""

    value: T
    left: Optional[Node[T]] = None
    right: Optional[Node[T]] = None


def _preorder(node: Optional[Node[T]]) -> Iterator[T]:
    if node is None:
        return
    yield node.value
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _inorder(node: Optional[Node[T]]) -> Iterator[T]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.value
    yield from _inorder(node.right)


def _postorder(node: Optional[Node[T]]) -> Iterator[T]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node.value


def preorder(node: Optional[Node[T]]) -> list[T]:
    """Values in root, left, right order."""
    return list(_preorder(node))


def inorder(node: Optional[Node[T]]) -> list[T]:
    """Values in left, root, right order."""
    return list(_inorder(node))


def postorder(node: Optional[Node[T]]) -> list[T]:
    """Values in left, right, root order."""
    return list(_postorder(node))


def level_order(node: Optional[Node[T]]) -> list[T]:
    """Values breadth first, each level from left to right."""
    if node is None:
        return []
    values: list[T] = []
    pending: deque[Node[T]] = deque([node])
    while pending:
        current = pending.popleft()
        values.append(current.value)
        if current.left is not None:
            pending.append(current.left)
        if current.right is not None:
            pending.append(current.right)
    return values


def insert_left_first(root: Optional[Node[T]], value: T) -> Node[T]:
    """Attach ``value`` and return the root.

    A node with a free left slot takes the new node there, otherwise in
    a free right slot; when both are taken the search continues down
    the right child.
    """
    new = Node(value)
    if root is None:
        return new
    node = root
    while True:
        if node.left is None:
            node.left = new
            return root
        if node.right is None:
            node.right = new
            return root
        node = node.right


def prune_leaf(root: Optional[Node[T]]) -> Optional[Node[T]]:
    """Remove one leaf and return the new root.

    The leaf is found by going left wherever there is a left child and
    right otherwise. A tree of one node becomes empty.
    """
    if root is None:
        return None
    parent: Optional[Node[T]] = None
    node = root
    while node.left is not None or node.right is not None:
        parent = node
        node = node.left if node.left is not None else node.right
    if parent is None:
        return None
    if parent.left is node:
        parent.left = None
    else:
        parent.right = None
    return root


def tree_height(parents: Sequence[int]) -> int:
    """Height of a tree given as a parent array, the root marked by -1.

    Raises ValueError for an empty array, a parent index out of range
    or a cycle.
    """
    n = len(parents)
    if n == 0:
        raise ValueError("empty parent array")
    depth = [0] * n
    for start in range(n):
        path: list[int] = []
        seen: set[int] = set()
        i = start
        while depth[i] == 0:
            if i in seen:
                raise ValueError(f"cycle through node {i}")
            seen.add(i)
            parent = parents[i]
            if parent == -1:
                depth[i] = 1
                break
            if not 0 <= parent < n:
                raise ValueError(f"parent {parent} of node {i} out of range")
            path.append(i)
            i = parent
        for j in reversed(path):
            depth[j] = depth[parents[j]] + 1
    return max(depth)