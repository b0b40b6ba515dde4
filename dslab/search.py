"""Linear and binary search over integer sequences."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Optional

_LINEAR_TABLE = (1, 2, 3, 4, 5, 6, 0, 0, 0, 0)
_SORTED_TABLE = (1, 2, 3, 5, 10, 12, 14, 15)


def linear_search(values: Sequence[int], target: int) -> list[int]:
    """Return every index at which ``target`` occurs, in ascending order."""
    return [index for index, value in enumerate(values) if value == target]


def binary_search(values: Sequence[int], target: int) -> Optional[int]:
    """Return an index of ``target`` in the ascending ``values``, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def _read_int(prompt: str) -> Optional[int]:
    text = input(prompt)
    try:
        return int(text.strip())
    except ValueError:
        return None


def main(argv=None) -> int:
    """Search a fixed table for a number, linearly or by bisection."""
    parser = argparse.ArgumentParser(description="Search a fixed table of numbers.")
    sub = parser.add_subparsers(dest="mode")
    linear = sub.add_parser("linear", help="scan every slot of the table")
    linear.add_argument("target", type=int, nargs="?")
    binary = sub.add_parser("binary", help="bisect the sorted table")
    binary.add_argument("target", type=int, nargs="?", default=1)
    args = parser.parse_args(argv)

    if args.mode == "binary":
        target = args.target
        print(f"target : {target}")
        index = binary_search(_SORTED_TABLE, target)
        if index is None:
            print(f"the element {target} not found")
        else:
            print(f"found the {target} in: {index}")
        return 0

    target = getattr(args, "target", None)
    if target is None:
        try:
            target = _read_int("enter the number: ")
        except EOFError:
            print()
            return 1
        if target is None:
            print("invalid number")
            return 1
    indices = linear_search(_LINEAR_TABLE, target)
    if indices:
        print(" ".join(str(index) for index in indices))
    else:
        print("not found")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())