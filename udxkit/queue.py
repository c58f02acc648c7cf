"""A doubly linked queue with constant-time unlinking of any member."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class _Node:
    __slots__ = ("item", "prev", "next")

    def __init__(self, item: Any) -> None:
        self.item = item
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


class Queue:
    """Ordered collection supporting push, unshift, shift and unlink.

    Items are tracked by identity; an item may be in the queue only once.
    """

    def __init__(self) -> None:
        self._head = _Node(None)
        self._head.prev = self._head
        self._head.next = self._head
        self._nodes: dict[int, _Node] = {}

    def _insert(self, item: Any, prev: _Node, nxt: _Node) -> None:
        if id(item) in self._nodes:
            raise ValueError("item is already in the queue")
        node = _Node(item)
        node.prev = prev
        node.next = nxt
        nxt.prev = node
        prev.next = node
        self._nodes[id(item)] = node

    def push(self, item: Any) -> None:
        """Append *item* at the tail."""
        self._insert(item, self._head.prev, self._head)

    def unshift(self, item: Any) -> None:
        """Insert *item* at the head."""
        self._insert(item, self._head, self._head.next)

    def unlink(self, item: Any) -> None:
        """Remove *item* from wherever it is in the queue."""
        node = self._nodes.pop(id(item), None)
        if node is None:
            raise ValueError("item is not in the queue")
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = None

    def peek(self) -> Optional[Any]:
        """Return the head item without removing it, or None if empty."""
        node = self._head.next
        return None if node is self._head else node.item

    def shift(self) -> Optional[Any]:
        """Remove and return the head item, or None if empty."""
        node = self._head.next
        if node is self._head:
            return None
        self.unlink(node.item)
        return node.item

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not None and node is not self._head:
            following = node.next
            yield node.item
            node = following

    def __contains__(self, item: Any) -> bool:
        return id(item) in self._nodes