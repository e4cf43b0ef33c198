"""Singly linked lists and algorithms over them."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain, repeat
from math import gcd
from typing import Iterable, Iterator, Optional

from dsakit.trees import TreeNode


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: Optional["ListNode"] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val})"


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding the given values, or None if there are none."""
    dummy = ListNode(0)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic linked list in order."""
    return [node.val for node in _nodes(head)]


def _matches_from(head: Optional[ListNode], root: Optional[TreeNode]) -> bool:
    if head is None:
        return True
    if root is None or root.val != head.val:
        return False
    return _matches_from(head.next, root.left) or _matches_from(head.next, root.right)


def is_sub_path(head: Optional[ListNode], root: Optional[TreeNode]) -> bool:
    """Return True if the list appears as a downward path in the binary tree."""
    if root is None:
        return False
    return (
        _matches_from(head, root)
        or is_sub_path(head, root.left)
        or is_sub_path(head, root.right)
    )


def merge_nodes(head: ListNode) -> Optional[ListNode]:
    """Replace each run of nodes between zeros by one node holding their sum.

    The list is expected to start with a zero node, which is skipped.
    """
    sums: list[int] = []
    current = 0
    started = False
    for node in _nodes(head.next):
        if node.val == 0:
            sums.append(current)
            current = 0
            started = False
        else:
            current += node.val
            started = True
    if started:
        sums.append(current)
    return from_values(sums)


def _spiral_order(m: int, n: int) -> Iterator[tuple[int, int]]:
    top, bottom, left, right = 0, m - 1, 0, n - 1
    while top <= bottom and left <= right:
        for col in range(left, right + 1):
            yield top, col
        top += 1
        for row in range(top, bottom + 1):
            yield row, right
        right -= 1
        if top <= bottom:
            for col in range(right, left - 1, -1):
                yield bottom, col
            bottom -= 1
        if left <= right:
            for row in range(bottom, top - 1, -1):
                yield row, left
            left += 1


def spiral_matrix(m: int, n: int, head: Optional[ListNode]) -> list[list[int]]:
    """Lay the list's values out in an m x n matrix in clockwise spiral order.

    Cells left over once the list is exhausted hold -1.
    """
    values = to_values(head)
    if len(values) > m * n:
        raise ValueError(f"list of {len(values)} values does not fit a {m}x{n} matrix")
    matrix = [[0] * n for _ in range(m)]
    for (row, col), value in zip(_spiral_order(m, n), chain(values, repeat(-1))):
        matrix[row][col] = value
    return matrix


def insert_greatest_common_divisors(head: Optional[ListNode]) -> Optional[ListNode]:
    """Insert between every two adjacent nodes a node holding their gcd."""
    node = head
    while node is not None and node.next is not None:
        following = node.next
        node.next = ListNode(gcd(node.val, following.val), following)
        node = following
    return head


def modified_list(nums: Iterable[int], head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove every node whose value is among nums."""
    banned = set(nums)
    while head is not None and head.val in banned:
        head = head.next
    node = head
    while node is not None:
        while node.next is not None and node.next.val in banned:
            node.next = node.next.next
        node = node.next
    return head


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list to the right by k places."""
    if head is None or head.next is None or k == 0:
        return head
    tail = head
    count = 1
    while tail.next is not None:
        tail = tail.next
        count += 1
    tail.next = head
    for _ in range(count - k % count):
        tail = tail.next
    new_head = tail.next
    tail.next = None
    return new_head


def split_list_to_parts(head: Optional[ListNode], k: int) -> list[Optional[ListNode]]:
    """Split the list into k consecutive parts whose sizes differ by at most one.

    Earlier parts are the larger ones; parts beyond the list's end are None.
    """
    if k <= 0:
        raise ValueError("number of parts must be positive")
    length = sum(1 for _ in _nodes(head))
    base, extra = divmod(length, k)
    parts: list[Optional[ListNode]] = [None] * k
    node = head
    for index in range(k):
        if node is None:
            break
        parts[index] = node
        size = base + (1 if index < extra else 0)
        for _ in range(size - 1):
            node = node.next
        following = node.next
        node.next = None
        node = following
    return parts


def count_nodes_in_loop(head: Optional[ListNode]) -> int:
    """Return the number of nodes in the list's cycle, or 0 if it has none."""
    if head is None or head.next is None:
        return 0
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            length = 1
            node = slow
            while node.next is not slow:
                length += 1
                node = node.next
            return length
    return 0


def create_loop(head: ListNode, position: int) -> None:
    """Link the last node back to the node at the 1-based position.

    Nothing happens when position is 0 or does not name a node before the last.
    """
    if position == 0:
        return
    loop_start: Optional[ListNode] = None
    tail = head
    current = 1
    while tail.next is not None:
        if current == position:
            loop_start = tail
        tail = tail.next
        current += 1
    if loop_start is not None:
        tail.next = loop_start