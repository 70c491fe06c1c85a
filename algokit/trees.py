"""Binary trees: construction and common structural queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)


def build_tree(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from level-order values, ``None`` marking a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return p.val == q.val and is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def max_depth(root: TreeNode | None) -> int:
    """Number of nodes on the longest path from the root down to a leaf."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def _balanced_height(root: TreeNode | None) -> tuple[bool, int]:
    if root is None:
        return True, 0
    left_ok, left_height = _balanced_height(root.left)
    right_ok, right_height = _balanced_height(root.right)
    ok = left_ok and right_ok and abs(left_height - right_height) <= 1
    return ok, 1 + max(left_height, right_height)


def is_balanced(root: TreeNode | None) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root)[0]


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Mirror a tree in place and return its root."""
    if root is not None:
        root.left, root.right = root.right, root.left
        invert_tree(root.left)
        invert_tree(root.right)
    return root


def diameter_of_binary_tree(root: TreeNode | None) -> int:
    """Number of edges on the longest path between any two nodes."""
    best = 0

    def height(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    height(root)
    return best


def is_subtree(root: TreeNode | None, sub_root: TreeNode | None) -> bool:
    """Tell whether some node of ``root`` starts a tree equal to ``sub_root``.

    An empty ``root`` contains nothing, and an empty ``sub_root`` is never found.
    """
    if root is None:
        return False
    if is_same_tree(root, sub_root):
        return True
    return is_subtree(root.left, sub_root) or is_subtree(root.right, sub_root)