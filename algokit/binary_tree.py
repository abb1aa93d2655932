"""Binary trees and common operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, with None marking missing nodes."""
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


def _height_if_balanced(node: Optional[TreeNode]) -> Optional[int]:
    if node is None:
        return 0
    left = _height_if_balanced(node.left)
    if left is None:
        return None
    right = _height_if_balanced(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Whether every node's subtrees differ in height by at most one."""
    return _height_if_balanced(root) is not None


def _inorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.val
        yield from _inorder(node.right)


def _preorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield node.val
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.val


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in left, node, right order."""
    return list(_inorder(root))


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in left, right, node order."""
    return list(_postorder(root))


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in node, left, right order."""
    return list(_preorder(root))


def count_nodes(root: Optional[TreeNode]) -> int:
    """Number of nodes in the tree."""
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    if root is not None:
        root.left, root.right = root.right, root.left
        invert_tree(root.left)
        invert_tree(root.right)
    return root


def min_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the shortest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    children = [child for child in (root.left, root.right) if child is not None]
    if not children:
        return 1
    return 1 + min(min_depth(child) for child in children)


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Whether some root-to-leaf path sums to ``target_sum``."""
    if root is None:
        return False
    remaining = target_sum - root.val
    if root.left is None and root.right is None:
        return remaining == 0
    return has_path_sum(root.left, remaining) or has_path_sum(root.right, remaining)