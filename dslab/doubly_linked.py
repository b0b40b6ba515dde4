"""Doubly linked list of integers with an interactive menu."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


class EmptyListError(LookupError):
    """Raised when removing from an empty list."""


class ValueNotFoundError(LookupError):
    """Raised when the value to remove is not in the list."""


@dataclass(eq=False)
class _Node:
    value: int
    next: Optional[_Node] = None
    prev: Optional[_Node] = None


class DoublyLinkedList:
    """A list of nodes linked in both directions."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: int) -> None:
        """Add a value at the end of the list."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def remove(self, value: int) -> None:
        """Remove the first node holding ``value``."""
        if self._head is None:
            raise EmptyListError("list is empty")
        for node in self._nodes():
            if node.value == value:
                self._unlink(node)
                return
        raise ValueNotFoundError(f"{value!r} not found in the list")

    def sort(self) -> None:
        """Sort the values in place with a bubble sort."""
        if self._size < 2:
            return
        boundary: Optional[_Node] = None
        swapped = True
        while swapped:
            swapped = False
            node = self._head
            while node.next is not boundary:
                following = node.next
                if node.value > following.value:
                    node.value, following.value = following.value, node.value
                    swapped = True
                node = following
            boundary = node

    def render(self) -> str:
        """Return the list as it is displayed."""
        if not self:
            return "List is empty."
        return "the List: " + "".join(f"{value} -> " for value in self) + "NULL"

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _unlink(self, node: _Node) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        self._size -= 1

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"


_MENU = "1. Add Node\n2. Delete Node\n3. Display List\n4. Sort List\n5. Exit"


def _read_int(prompt: str) -> Optional[int]:
    text = input(prompt)
    try:
        return int(text.strip())
    except ValueError:
        return None


def main(argv=None) -> int:
    """Run the interactive list menu on standard input."""
    argparse.ArgumentParser(description="Interactive doubly linked list.").parse_args(argv)
    items = DoublyLinkedList()
    try:
        while True:
            print(_MENU)
            match _read_int("Enter your choice: "):
                case 1:
                    value = _read_int("Enter data to add: ")
                    if value is None:
                        print("Invalid number.")
                        continue
                    items.append(value)
                    print("Node added.")
                case 2:
                    if not items:
                        print("List is empty. Cannot delete.")
                        continue
                    value = _read_int("Enter value to delete: ")
                    if value is None:
                        print("Invalid number.")
                        continue
                    try:
                        items.remove(value)
                    except ValueNotFoundError:
                        print("Value not found in the list.")
                    else:
                        print("Node deleted.")
                case 3:
                    print(items.render())
                case 4:
                    if len(items) > 1:
                        items.sort()
                        print("List sorted.")
                case 5:
                    print("Exiting program.")
                    return 0
                case _:
                    print("Invalid choice.")
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())