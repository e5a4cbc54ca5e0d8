"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the link that follows it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps a reference to its first node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert content at the front and return its new node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the end and return its new node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], object]] = None) -> None:
        """Empty the list, handing every content to delete first when given."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def iterate(self, func: Optional[Callable[[Any], object]]) -> None:
        """Call func on every content in order; a missing func does nothing."""
        if func is None:
            return
        for node in self._nodes():
            func(node.content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], object],
    ) -> "LinkedList":
        """Return a new list of func applied to every content.

        If func raises part-way, the contents already produced are handed to
        delete and the exception propagates.
        """
        if not callable(func) or not callable(delete):
            raise TypeError("map needs a callable func and a callable delete")
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for node in self._nodes():
                new = Node(func(node.content))
                if tail is None:
                    result.head = new
                else:
                    tail.next = new
                tail = new
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"