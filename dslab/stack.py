"""Bounded integer stack with an interactive menu."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from typing import Optional


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(LookupError):
    """Raised when reading from an empty stack."""


class BoundedStack:
    """A LIFO stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[int] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: int) -> None:
        """Put a value on top of the stack."""
        if len(self._items) >= self._capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def render(self) -> str:
        """Return the stack, bottom first, as it is displayed."""
        if not self._items:
            return "stack is empty"
        return "stack element: " + " ".join(str(value) for value in self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack({self._items!r}, capacity={self._capacity})"


_MENU = "\n1. push\n2. pop\n3. print\n4. peek"


def _read_int(prompt: str) -> Optional[int]:
    text = input(prompt)
    try:
        return int(text.strip())
    except ValueError:
        return None


def main(argv=None) -> int:
    """Run the interactive stack menu until input ends."""
    argparse.ArgumentParser(description="Interactive bounded stack.").parse_args(argv)
    stack = BoundedStack()
    try:
        while True:
            print(_MENU)
            match _read_int("enter your choice: "):
                case 1:
                    value = _read_int("enter value to push: ")
                    if value is None:
                        print("invalid value !")
                        continue
                    try:
                        stack.push(value)
                    except StackOverflowError:
                        print("stack overflow!")
                    else:
                        print("pushed into stack")
                case 2:
                    try:
                        value = stack.pop()
                    except StackUnderflowError:
                        print("stack underflow")
                    else:
                        print(f"{value} popped from stack")
                case 3:
                    print(stack.render())
                case 4:
                    try:
                        print(stack.peek())
                    except StackUnderflowError:
                        print("empty")
                case _:
                    print("invalid choice !")
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())