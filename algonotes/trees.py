"""Binary tree traversals and measurements."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer."""

    data: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def all_in_one_traversal(root: Optional[TreeNode]) -> tuple[list[int], list[int], list[int]]:
    """Return the preorder, inorder and postorder sequences from one stack pass."""
    pre: list[int] = []
    ino: list[int] = []
    post: list[int] = []
    if root is None:
        return pre, ino, post

    stack: list[tuple[TreeNode, int]] = [(root, 1)]
    while stack:
        node, state = stack.pop()
        if state == 1:
            pre.append(node.data)
            stack.append((node, 2))
            if node.left is not None:
                stack.append((node.left, 1))
        elif state == 2:
            ino.append(node.data)
            stack.append((node, 3))
            if node.right is not None:
                stack.append((node.right, 1))
        else:
            post.append(node.data)
    return pre, ino, post


def preorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Preorder values using an explicit stack."""
    if root is None:
        return []
    result: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Inorder values using an explicit stack."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            result.append(node.data)
            node = node.right
    return result


def postorder_two_stacks(root: Optional[TreeNode]) -> list[int]:
    """Postorder values by collecting a root-right-left order and reversing it."""
    if root is None:
        return []
    collected: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        collected.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    collected.reverse()
    return collected


def postorder_one_stack(root: Optional[TreeNode]) -> list[int]:
    """Postorder values using a single stack."""
    result: list[int] = []
    stack: list[TreeNode] = []
    current = root
    while stack or current is not None:
        if current is not None:
            stack.append(current)
            current = current.left
            continue
        right = stack[-1].right
        if right is None:
            node = stack.pop()
            result.append(node.data)
            while stack and stack[-1].right is node:
                node = stack.pop()
                result.append(node.data)
        else:
            current = right
    return result


def _preorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Recursive preorder values."""
    return list(_preorder(root))


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Recursive inorder values."""
    return list(_inorder(root))


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Recursive postorder values."""
    return list(_postorder(root))


def is_leaf(node: TreeNode) -> bool:
    """True when the node has no children."""
    return node.left is None and node.right is None


def _left_boundary(node: Optional[TreeNode]) -> Iterator[int]:
    while node is not None:
        if not is_leaf(node):
            yield node.data
        node = node.left if node.left is not None else node.right


def _right_boundary(node: Optional[TreeNode]) -> list[int]:
    values: list[int] = []
    while node is not None:
        if not is_leaf(node):
            values.append(node.data)
        node = node.right if node.right is not None else node.left
    values.reverse()
    return values


def _leaves(node: TreeNode) -> Iterator[int]:
    if is_leaf(node):
        yield node.data
        return
    if node.left is not None:
        yield from _leaves(node.left)
    if node.right is not None:
        yield from _leaves(node.right)


def boundary_traversal(root: Optional[TreeNode]) -> list[int]:
    """Anticlockwise boundary: root, left edge, leaves, then right edge bottom-up."""
    if root is None:
        return []
    result: list[int] = []
    if not is_leaf(root):
        result.append(root.data)
    result.extend(_left_boundary(root.left))
    result.extend(_leaves(root))
    result.extend(_right_boundary(root.right))
    return result


def height(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def diameter(root: Optional[TreeNode]) -> int:
    """Length in edges of the longest path passing through the root."""
    if root is None:
        return 0
    return height(root.left) + height(root.right)


def is_identical(first: Optional[TreeNode], second: Optional[TreeNode]) -> bool:
    """True when both trees have the same shape and values."""
    if first is None or second is None:
        return first is second
    return (
        first.data == second.data
        and is_identical(first.left, second.left)
        and is_identical(first.right, second.right)
    )


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Largest sum of a downward-joined path; never below zero."""
    best = 0

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, left + right + node.data)
        return node.data + max(left, right)

    gain(root)
    return best


def zigzag_levels(root: Optional[TreeNode]) -> list[list[int]]:
    """Level order values, alternating left-to-right and right-to-left."""
    if root is None:
        return []
    levels: list[list[int]] = []
    queue: deque[TreeNode] = deque([root])
    left_to_right = True
    while queue:
        level: list[int] = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        if not left_to_right:
            level.reverse()
        levels.append(level)
        left_to_right = not left_to_right
    return levels