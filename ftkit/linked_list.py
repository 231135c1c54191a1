"""A singly linked list holding arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a LinkedList."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list with constant-time insertion at both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert content at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the back and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call f on every content, front to back."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """A new list of f applied to every content.

        If f raises, delete is called on each content produced so far and
        the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, calling delete on each content first when given."""
        if delete is not None:
            for content in self:
                delete(content)
        self.head = None
        self._tail = None
        self._size = 0