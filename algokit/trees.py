"""Binary trees of integers and path algorithms over them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def binary_tree_paths(root: Optional[TreeNode]) -> list[str]:
    """Return every root-to-leaf path as ``"a->b->c"``, left subtree first."""
    if root is None:
        return []

    head = str(root.val)
    tails = binary_tree_paths(root.left) + binary_tree_paths(root.right)
    if not tails:
        return [head]
    return [f"{head}->{tail}" for tail in tails]


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Tell whether some root-to-leaf path adds up to ``target_sum``."""
    if root is None:
        return False
    if root.left is None and root.right is None:
        return root.val == target_sum
    remaining = target_sum - root.val
    return has_path_sum(root.right, remaining) or has_path_sum(root.left, remaining)