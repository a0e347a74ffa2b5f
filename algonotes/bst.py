"""Binary search tree that counts repeated values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class BSTNode:
    """A search tree node with an occurrence count."""

    data: int
    freq: int = 1
    left: Optional[BSTNode] = None
    right: Optional[BSTNode] = None


class FrequencyTree:
    """Binary search tree; greater values go right, others go left."""

    def __init__(self) -> None:
        self.root: Optional[BSTNode] = None

    def insert(self, value: int) -> BSTNode:
        """Insert a new node for value, even if the value is already present."""
        node = BSTNode(value)
        if self.root is None:
            self.root = node
            return node
        current = self.root
        while True:
            if value > current.data:
                if current.right is None:
                    current.right = node
                    return node
                current = current.right
            else:
                if current.left is None:
                    current.left = node
                    return node
                current = current.left

    def search(self, key: int) -> Optional[BSTNode]:
        """Return the node holding key, or None."""
        current = self.root
        while current is not None and current.data != key:
            current = current.right if current.data < key else current.left
        return current

    def add(self, value: int) -> BSTNode:
        """Count one occurrence of value, inserting it when absent."""
        found = self.search(value)
        if found is None:
            return self.insert(value)
        found.freq += 1
        return found

    def inorder(self) -> list[tuple[int, int]]:
        """(value, frequency) pairs in ascending order."""
        result: list[tuple[int, int]] = []
        stack: list[BSTNode] = []
        node = self.root
        while node is not None or stack:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                result.append((node.data, node.freq))
                node = node.right
        return result