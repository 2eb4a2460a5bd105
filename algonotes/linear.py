"""Linear structures: a sentinel-headed linked list, stack, queue and Josephus."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next: _Node | None = None) -> None:
        self.value = value
        self.next = next


class LinkedList:
    """Singly linked list with a head sentinel.

    Positions are 0-based; position -1 stands for the head sentinel, so
    operations "after -1" act on the front of the list.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head = _Node(None)
        self._size = 0
        last = self._head
        for value in values:
            last.next = _Node(value)
            last = last.next
            self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_at(self, index: int) -> _Node:
        if not -1 <= index < self._size:
            raise IndexError(f"position {index} out of range")
        node = self._head
        for _ in range(index + 1):
            node = node.next
        return node

    @staticmethod
    def _successor(node: _Node) -> _Node:
        if node.next is None:
            raise IndexError("no node after this position")
        return node.next

    def insert_after(self, index: int, value: Any) -> None:
        """Insert ``value`` right after the node at ``index``."""
        node = self._node_at(index)
        node.next = _Node(value, node.next)
        self._size += 1

    def delete_after(self, index: int) -> Any:
        """Remove the node following ``index`` and return its value."""
        node = self._node_at(index)
        target = self._successor(node)
        node.next = target.next
        self._size -= 1
        return target.value

    def _move_successor_to_front(self, node: _Node) -> None:
        target = self._successor(node)
        node.next = target.next
        target.next = self._head.next
        self._head.next = target

    def move_next_to_front(self, index: int) -> None:
        """Move the node following ``index`` to the front of the list."""
        self._move_successor_to_front(self._node_at(index))

    def reverse(self) -> None:
        """Reverse in place by moving successors of the first node to the front."""
        first = self._head.next
        if first is None:
            return
        for _ in range(self._size - 1):
            self._move_successor_to_front(first)


class Stack:
    """Push-down stack."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


class Queue:
    """First-in first-out queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def put(self, value: Any) -> None:
        self._items.append(value)

    def get(self) -> Any:
        if not self._items:
            raise IndexError("get from empty queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


def josephus(people: int, step: int) -> int:
    """Return the survivor when every ``step``-th of ``people`` in a circle is removed.

    People are numbered from 1; counting starts at person 1.
    """
    if people < 1 or step < 1:
        raise ValueError("people and step must be positive")
    if people < step:
        raise ValueError("Number of people must be greater than the position")
    circle = deque(range(1, people + 1))
    while len(circle) > 1:
        circle.rotate(-(step - 1))
        circle.popleft()
    return circle[0]