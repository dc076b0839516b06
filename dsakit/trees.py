"""Binary trees: building from a preorder listing, traversals and widths."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Iterable[Any], sentinel: Any = -1) -> TreeNode | None:
    """Build a tree from its preorder listing, with sentinel marking empty children.

    Values left over after the tree is complete are ignored.
    """
    source = iter(values)

    def build() -> TreeNode | None:
        try:
            value = next(source)
        except StopIteration:
            raise ValueError("values ended before the tree was complete") from None
        if value == sentinel:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def _preorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def preorder(root: TreeNode | None) -> list[Any]:
    """Values in root, left, right order."""
    return list(_preorder(root))


def inorder(root: TreeNode | None) -> list[Any]:
    """Values in left, root, right order."""
    return list(_inorder(root))


def postorder(root: TreeNode | None) -> list[Any]:
    """Values in left, right, root order."""
    return list(_postorder(root))


def level_order(root: TreeNode | None) -> list[list[Any]]:
    """Values grouped by depth, each level from left to right."""
    levels: list[list[Any]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def max_width(root: TreeNode | None) -> int:
    """Widest level, counting the gaps between its outermost nodes."""
    if root is None:
        return 0
    best = 0
    queue: deque[tuple[TreeNode, int]] = deque([(root, 0)])
    while queue:
        offset = queue[0][1]
        first = last = 0
        for i in range(len(queue)):
            node, position = queue.popleft()
            index = position - offset
            if i == 0:
                first = index
            last = index
            if node.left is not None:
                queue.append((node.left, 2 * index + 1))
            if node.right is not None:
                queue.append((node.right, 2 * index + 2))
        best = max(best, last - first + 1)
    return best


def zigzag(root: TreeNode | None) -> list[Any]:
    """Values level by level, alternating left-to-right and right-to-left."""
    return [
        value
        for depth, level in enumerate(level_order(root))
        for value in (level if depth % 2 == 0 else reversed(level))
    ]