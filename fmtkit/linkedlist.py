"""A singly linked list of arbitrary contents."""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator


@dataclass
class Node:
    """One element of a linked list."""

    content: Any
    next: "Node | None" = None


class LinkedList:
    """A singly linked list; iteration yields the contents in order."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for content in contents:
            self.add_back(content)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> Node:
        """Insert ``content`` at the start and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The final node, or ``None`` when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[Any], None]) -> None:
        """Pass every content to ``delete`` in order and empty the list."""
        while self.head is not None:
            node = self.head
            self.head = node.next
            delete(node.content)

    def iterate(self, f: Callable[[Any], None]) -> None:
        """Call ``f`` on every content in order."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Callable[[Any], None]) -> "LinkedList":
        """A new list of ``f(content)`` for each content.

        If ``f`` raises, the contents made so far are passed to ``delete``
        and the exception propagates.
        """
        if f is None or delete is None:
            raise TypeError("both f and delete are required")
        result = LinkedList()
        try:
            for content in self:
                result.add_back(f(content))
        except Exception:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"