"""Binary and n-ary tree routines: path sums, balance checks and comparison."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Union


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


@dataclass(eq=False)
class NaryNode:
    """A node of a tree whose nodes may have any number of children."""

    data: int
    children: list[NaryNode] = field(default_factory=list)


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Tell whether some root-to-leaf path adds up to ``target_sum``."""
    if root is None:
        return False
    remaining = target_sum - root.val
    if root.left is None and root.right is None:
        return remaining == 0
    return has_path_sum(root.left, remaining) or has_path_sum(root.right, remaining)


def _balanced_height(node: Optional[TreeNode]) -> Optional[int]:
    """Height of a balanced subtree, or None as soon as imbalance is found."""
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return 1 + max(left, right)


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Tell whether the heights of every node's two subtrees differ by at most one."""
    return _balanced_height(root) is not None


def are_identical(root1: Optional[NaryNode], root2: Optional[NaryNode]) -> bool:
    """Tell whether two n-ary trees hold the same data in the same shape."""
    if root1 is None or root2 is None:
        return root1 is root2
    if root1.data != root2.data or len(root1.children) != len(root2.children):
        return False
    return all(
        are_identical(first, second)
        for first, second in zip(root1.children, root2.children)
    )


def read_tree_level_wise(tokens: Iterable[Union[int, str]]) -> NaryNode:
    """Build an n-ary tree from tokens given level by level.

    The first token is the root's data; then, for each node in breadth-first
    order, the number of its children followed by the children's data.
    """
    stream: Iterator[Union[int, str]] = iter(tokens)

    def take() -> int:
        try:
            return int(next(stream))
        except StopIteration:
            raise ValueError("tree description ended too early") from None

    root = NaryNode(take())
    pending = deque([root])
    while pending:
        node = pending.popleft()
        count = take()
        if count < 0:
            raise ValueError(f"negative number of children: {count}")
        for _ in range(count):
            child = NaryNode(take())
            node.children.append(child)
            pending.append(child)
    return root