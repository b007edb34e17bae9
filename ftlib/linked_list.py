"""A singly linked list whose nodes each hold one piece of content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One element of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list reached through its ``head`` node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Add ``content`` at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Add ``content`` at the end of the list and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or ``None`` when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on the content of every node, first to last."""
        if not callable(func):
            raise TypeError("func must be callable")
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding ``func(content)`` for every node.

        The original list is left unchanged.
        """
        if not callable(func):
            raise TypeError("func must be callable")
        return LinkedList(func(content) for content in self)

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node, first passing its content to ``delete`` if given."""
        if delete is not None and not callable(delete):
            raise TypeError("delete must be callable")
        node = self.head
        while node is not None:
            following = node.next
            self.head = following
            node.next = None
            if delete is not None:
                delete(node.content)
            node = following
        self.head = None