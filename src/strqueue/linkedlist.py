"""Singly-linked list with head and tail references for O(1) end operations."""

from collections.abc import Iterator


class Node:
    """A node in the singly-linked list."""

    __slots__ = ("value", "next")

    def __init__(self, value: bytes) -> None:
        self.value = value
        self.next: Node | None = None


class SinglyLinkedList:
    """Singly-linked list owning its nodes.

    Nodes are linked through ``next`` only. ``_head`` and ``_tail`` are both
    ``None`` exactly when the list is empty.
    """

    def __init__(self) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0

    @property
    def head(self) -> Node | None:
        return self._head

    @property
    def tail(self) -> Node | None:
        return self._tail

    def append(self, node: Node) -> None:
        """Link node after the current tail. O(1)."""
        node.next = None
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def appendleft(self, node: Node) -> None:
        """Link node before the current head. O(1)."""
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def popleft(self) -> Node | None:
        """Detach and return the first node. O(1)."""
        node = self._head
        if node is None:
            return None
        self._head = node.next
        if self._head is None:
            # Only head was advanced; the tail must be cleared as well
            self._tail = None
        node.next = None
        self._size -= 1
        return node

    def clear(self) -> None:
        """Drop every node."""
        node = self._head
        self._head = None
        self._tail = None
        self._size = 0
        # Unlink one by one so long chains are not released recursively
        while node is not None:
            node.next, node = None, node.next

    def reverse(self) -> None:
        """Reverse the list in place by relinking nodes. O(n), O(1) space."""
        prev: Node | None = None
        cur = self._head
        while cur is not None:
            nxt = cur.next
            cur.next = prev
            prev = cur
            cur = nxt
        self._head, self._tail = self._tail, self._head

    def sort(self) -> None:
        """Stable ascending merge sort on node values. O(n log n)."""
        if self._size < 2:
            return
        self._head = _merge_sort(self._head)
        tail = self._head
        while tail is not None and tail.next is not None:
            tail = tail.next
        self._tail = tail

    def __iter__(self) -> Iterator[bytes]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0


def _split(head: Node) -> Node | None:
    """Cut the chain after its midpoint and return the second half."""
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    second = slow.next
    slow.next = None
    return second


def _merge(left: Node | None, right: Node | None) -> Node | None:
    """Merge two sorted chains by relinking. Ties take from ``left``."""
    if left is None:
        return right
    if right is None:
        return left

    if left.value <= right.value:
        head, left = left, left.next
    else:
        head, right = right, right.next
    tail = head

    while left is not None and right is not None:
        if left.value <= right.value:
            tail.next, left = left, left.next
        else:
            tail.next, right = right, right.next
        tail = tail.next

    tail.next = left if left is not None else right
    return head


def _merge_sort(head: Node | None) -> Node | None:
    if head is None or head.next is None:
        return head
    second = _split(head)
    return _merge(_merge_sort(head), _merge_sort(second))
