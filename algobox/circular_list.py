"""A singly linked circular list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional[_Node] = None


class CircularLinkedList:
    """A circular singly linked list; positions count from 1 at the head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, value: Any) -> None:
        """Put ``value`` in front of the current head."""
        node = _Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1

    def insert_at_tail(self, value: Any) -> None:
        """Put ``value`` after the last element."""
        self.insert_at_head(value)
        assert self._tail is not None
        self._tail = self._tail.next

    def delete_at_head(self) -> Any:
        """Remove the head and return its value."""
        if self._tail is None:
            raise IndexError("delete from an empty list")
        head = self._tail.next
        assert head is not None
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        self._size -= 1
        return head.value

    def delete(self, position: int) -> Any:
        """Remove the element at the 1-based ``position`` and return its value."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            return self.delete_at_head()
        assert self._tail is not None
        previous = self._tail.next
        assert previous is not None
        for _ in range(position - 2):
            previous = previous.next
        removed = previous.next
        assert removed is not None
        previous.next = removed.next
        if removed is self._tail:
            self._tail = previous
        self._size -= 1
        return removed.value

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            assert node is not None
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)