"""Binary and N-ary tree nodes with a few classic tree algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


@dataclass(eq=False)
class NaryNode:
    """A node of a tree whose nodes may have any number of children."""

    val: int
    children: list["NaryNode"] = field(default_factory=list)


def flip_equiv(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> bool:
    """Return True if one tree can be turned into the other by swapping children."""
    if root1 is None and root2 is None:
        return True
    if root1 is None or root2 is None or root1.val != root2.val:
        return False
    without_flip = flip_equiv(root1.left, root2.left) and flip_equiv(root1.right, root2.right)
    with_flip = flip_equiv(root1.left, root2.right) and flip_equiv(root1.right, root2.left)
    return with_flip or without_flip


def _postorder(node: NaryNode) -> Iterator[int]:
    for child in node.children:
        yield from _postorder(child)
    yield node.val


def postorder(root: Optional[NaryNode]) -> list[int]:
    """Return the node values of an N-ary tree in post-order."""
    if root is None:
        return []
    return list(_postorder(root))