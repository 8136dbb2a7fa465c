"""An ordered map kept in an unbalanced binary search tree.

Keys are ordered by a user-supplied ``lower_than(a, b)`` predicate. Two
keys are equal when neither is lower than the other. The map keeps a
cursor (``current``) that searches, inserts and traversal calls move.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

LowerThan = Callable[[Any, Any], Any]


@dataclass
class Pair:
    """A key with its associated value."""

    key: Any
    value: Any


@dataclass(eq=False)
class TreeNode:
    """A node of the search tree, linked to its children and parent."""

    pair: Pair
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)
    parent: TreeNode | None = field(default=None, repr=False)


def minimum(node: TreeNode) -> TreeNode:
    """Return the leftmost node of the subtree rooted at ``node``."""
    while node.left is not None:
        node = node.left
    return node


class TreeMap:
    """Ordered map with a movable cursor over its entries."""

    def __init__(self, lower_than: LowerThan) -> None:
        self.lower_than = lower_than
        self.root: TreeNode | None = None
        self.current: TreeNode | None = None

    def is_equal(self, key1: Any, key2: Any) -> bool:
        """True when neither key is lower than the other."""
        return not self.lower_than(key1, key2) and not self.lower_than(key2, key1)

    def search(self, key: Any) -> Pair | None:
        """Return the pair stored under ``key`` and move the cursor to it.

        When the key is absent the cursor is cleared and ``None`` returned.
        """
        node = self.root
        while node is not None:
            if self.is_equal(key, node.pair.key):
                self.current = node
                return node.pair
            node = node.left if self.lower_than(key, node.pair.key) else node.right
        self.current = None
        return None

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``; an existing key is left untouched."""
        if self.search(key) is not None:
            return
        new_node = TreeNode(Pair(key, value))
        if self.root is None:
            self.root = new_node
            self.current = new_node
            return

        parent = None
        node: TreeNode | None = self.root
        while node is not None:
            parent = node
            node = node.left if self.lower_than(key, node.pair.key) else node.right

        assert parent is not None
        new_node.parent = parent
        if self.lower_than(key, parent.pair.key):
            parent.left = new_node
        else:
            parent.right = new_node
        self.current = new_node

    def remove_node(self, node: TreeNode | None) -> None:
        """Unlink ``node`` from the tree.

        A node with two children takes over its in-order successor's pair,
        and the successor is unlinked instead.
        """
        if node is None:
            return
        if node.left is None or node.right is None:
            spliced = node
        else:
            spliced = minimum(node.right)

        child = spliced.left if spliced.left is not None else spliced.right
        if child is not None:
            child.parent = spliced.parent

        parent = spliced.parent
        if parent is None:
            self.root = child
        elif spliced is parent.left:
            parent.left = child
        else:
            parent.right = child

        if spliced is not node:
            node.pair = spliced.pair

    def erase(self, key: Any) -> None:
        """Remove the entry stored under ``key``, if there is one."""
        if self.root is None:
            return
        if self.search(key) is None:
            return
        self.remove_node(self.current)

    def upper_bound(self, key: Any) -> Pair | None:
        """Return the pair with the smallest key not lower than ``key``.

        The cursor moves to the returned entry, or is cleared when there is none.
        """
        node = self.root
        candidate: TreeNode | None = None
        while node is not None:
            if self.is_equal(key, node.pair.key):
                self.current = node
                return node.pair
            if self.lower_than(key, node.pair.key):
                candidate = node
                node = node.left
            else:
                node = node.right
        self.current = candidate
        return candidate.pair if candidate is not None else None

    def first(self) -> Pair | None:
        """Move the cursor to the smallest key and return its pair."""
        if self.root is None:
            return None
        self.current = minimum(self.root)
        return self.current.pair

    def next(self) -> Pair | None:
        """Advance the cursor to the in-order successor and return its pair."""
        node = self.current
        if node is None:
            return None
        if node.right is not None:
            self.current = minimum(node.right)
            return self.current.pair
        parent = node.parent
        while parent is not None and parent.right is node:
            node = parent
            parent = parent.parent
        self.current = parent
        return parent.pair if parent is not None else None

    def __iter__(self) -> Iterator[Pair]:
        """Yield the pairs in key order, moving the cursor along the way."""
        pair = self.first()
        while pair is not None:
            yield pair
            pair = self.next()