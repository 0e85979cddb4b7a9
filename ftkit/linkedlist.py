"""A singly linked list whose nodes carry a content and a content size."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Callable[[Any, int], object]
Comparator = Callable[["Node", "Node"], float]


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    content_size: int = 0
    next: Optional["Node"] = field(default=None, repr=False)


def _split(head: Node) -> tuple[Node, Optional[Node]]:
    """Cut the list after its middle node; return the front and back halves."""
    slow = head
    fast = head.next
    while fast is not None:
        fast = fast.next
        if fast is not None:
            slow = slow.next
            fast = fast.next
    back = slow.next
    slow.next = None
    return head, back


def _merge(left: Optional[Node], right: Optional[Node], compare: Comparator) -> Optional[Node]:
    """Merge two sorted chains, taking from the left on ties."""
    anchor = Node(None)
    tail = anchor
    while left is not None and right is not None:
        if compare(left, right) < 1:
            tail.next, left = left, left.next
        else:
            tail.next, right = right, right.next
        tail = tail.next
    tail.next = left if left is not None else right
    return anchor.next


def _sort(head: Optional[Node], compare: Comparator) -> Optional[Node]:
    if head is None or head.next is None:
        return head
    front, back = _split(head)
    return _merge(_sort(front, compare), _sort(back, compare), compare)


class LinkedList:
    """A singly linked list of :class:`Node` objects reached from ``head``.

    Iterating over the list yields the contents of its nodes in order.
    """

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in iterable:
            self.append(content)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: Any, content_size: int = 0) -> Node:
        """Put a new node at the front of the list and return it."""
        node = Node(content, content_size, self.head)
        self.head = node
        return node

    def append(self, content: Any, content_size: int = 0) -> Node:
        """Put a new node at the end of the list and return it."""
        node = Node(content, content_size)
        if self.head is None:
            self.head = node
            return node
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node
        return node

    def delete_first(self, deleter: Optional[Deleter] = None) -> None:
        """Remove the first node, handing its content and size to ``deleter``.

        An empty list is left as it is.
        """
        node = self.head
        if node is None:
            return
        if deleter is not None:
            deleter(node.content, node.content_size)
        self.head = node.next
        node.next = None

    def clear(self, deleter: Optional[Deleter] = None) -> None:
        """Remove every node in order, handing each to ``deleter``."""
        while self.head is not None:
            self.delete_first(deleter)

    def for_each(self, f: Callable[[Node], object]) -> None:
        """Call ``f`` on every node in order."""
        for node in self._nodes():
            f(node)

    def map(self, f: Callable[[Node], Any]) -> "LinkedList":
        """Return a new list built from the content and size of ``f(node)`` for each node."""
        result = LinkedList()
        tail: Optional[Node] = None
        for node in self._nodes():
            produced = f(node)
            fresh = Node(produced.content, produced.content_size)
            if tail is None:
                result.head = fresh
            else:
                tail.next = fresh
            tail = fresh
        return result

    def merge_sort(self, compare: Comparator) -> None:
        """Sort the nodes in place with a stable merge sort.

        ``compare(a, b)`` is negative when ``a`` belongs before ``b``,
        zero when they tie and positive when ``a`` belongs after ``b``.
        """
        self.head = _sort(self.head, compare)