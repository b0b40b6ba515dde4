"""Fixed-capacity circular queue with an interactive menu."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from typing import Optional


class QueueFullError(OverflowError):
    """Raised when adding to a full queue."""


class QueueEmptyError(LookupError):
    """Raised when reading from an empty queue."""


class CircularQueue:
    """A FIFO queue stored in a ring of fixed size."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Optional[int]] = [None] * capacity
        self._head = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def is_full(self) -> bool:
        return self._size == len(self._slots)

    def is_empty(self) -> bool:
        return self._size == 0

    def enqueue(self, value: int) -> None:
        """Add a value at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots[(self._head + self._size) % len(self._slots)] = value
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._size -= 1
        self._head = 0 if self._size == 0 else (self._head + 1) % len(self._slots)
        return value

    def front(self) -> int:
        """Return the value at the front without removing it."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._slots[self._head]

    def render(self) -> str:
        """Return the queue as it is displayed."""
        if self.is_empty():
            return "queue is empty"
        return "queue elements: " + " ".join(str(value) for value in self)

    def __iter__(self) -> Iterator[int]:
        capacity = len(self._slots)
        return (self._slots[(self._head + offset) % capacity] for offset in range(self._size))

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularQueue({list(self)!r}, capacity={self.capacity})"


_MENU = "\n1. enqueue\n2. dequeue\n3. display queue"


def _read_int(prompt: str) -> Optional[int]:
    text = input(prompt)
    try:
        return int(text.strip())
    except ValueError:
        return None


def main(argv=None) -> int:
    """Run the interactive queue menu until input ends."""
    argparse.ArgumentParser(description="Interactive circular queue.").parse_args(argv)
    queue = CircularQueue()
    try:
        while True:
            print(_MENU)
            match _read_int("enter your choice: "):
                case 1:
                    if queue.is_full():
                        print("Queue is full, cannot add more element")
                        continue
                    value = _read_int("enter the value: ")
                    if value is None:
                        print("invalid value !")
                        continue
                    queue.enqueue(value)
                    print("element added to the queue")
                case 2:
                    try:
                        value = queue.dequeue()
                    except QueueEmptyError:
                        print("queue is empty cannot remove element")
                    else:
                        print(f"element {value} removed from the queue")
                case 3:
                    print(queue.render())
                case _:
                    print("invalid choice !")
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())