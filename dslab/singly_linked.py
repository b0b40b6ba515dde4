"""Singly linked list with insertion and removal at the front."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class _Node:
    value: int
    next: Optional[_Node] = None


class SinglyLinkedList:
    """A list of nodes linked forward from the head."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def push_front(self, value: int) -> None:
        """Insert a value before the current head."""
        self._head = _Node(value, self._head)
        self._size += 1

    def pop_front(self) -> int:
        """Remove and return the head value."""
        if self._head is None:
            raise IndexError("list is empty")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def render(self) -> str:
        """Return the list as it is displayed."""
        return "".join(f"{value} -> " for value in self) + "NULL"

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


def main(argv=None) -> int:
    """Show insertion and removal at the front of a list."""
    argparse.ArgumentParser(description="Singly linked list demonstration.").parse_args(argv)
    items = SinglyLinkedList()
    for value in (10, 20, 30):
        items.push_front(value)
    print("List after insertion:")
    print(items.render())
    items.pop_front()
    print("List after deletion:")
    print(items.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())