"""A doubly linked chain of values, walkable in both directions through its nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(eq=False)
class Node(Generic[T]):
    """One link of a chain, holding a value and its neighbours."""

    value: T
    next: Optional["Node[T]"] = field(default=None, repr=False)
    prev: Optional["Node[T]"] = field(default=None, repr=False)


class Chain(Generic[T]):
    """An ordered, doubly linked sequence of values."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self.head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def append(self, value: T) -> Node[T]:
        """Add ``value`` at the end and return its node."""
        node = Node(value, prev=self._tail)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def prepend(self, value: T) -> Node[T]:
        """Add ``value`` at the front and return its node."""
        node = Node(value, next=self.head)
        if self.head is None:
            self._tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1
        return node

    def last(self) -> Optional[Node[T]]:
        """The final node, or None when the chain is empty."""
        return self._tail

    def remove(self, node: Node[T], on_delete: Optional[Callable[[T], Any]] = None) -> None:
        """Unlink ``node`` from the chain, passing its value to ``on_delete`` if given."""
        if not any(candidate is node for candidate in self._nodes()):
            raise ValueError("node does not belong to this chain")
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        self._size -= 1
        if on_delete is not None:
            on_delete(node.value)

    def clear(self, on_delete: Optional[Callable[[T], Any]] = None) -> None:
        """Empty the chain, passing each value in order to ``on_delete`` if given."""
        for node in self._nodes():
            node.next = node.prev = None
            if on_delete is not None:
                on_delete(node.value)
        self.head = self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every value, front to back."""
        for value in self:
            func(value)

    def map(self, func: Callable[[T], U]) -> "Chain[U]":
        """A new chain holding ``func`` applied to every value; this one is unchanged."""
        return Chain(func(value) for value in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self._nodes())

    def __repr__(self) -> str:
        return f"Chain({list(self)!r})"