# dslab

Small, readable implementations of classic data structures, searches and
CPU scheduling algorithms. Each one is a plain Python class or function, and
each module also has a menu-driven console.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dslab.doubly_linked` | `DoublyLinkedList` with `append`, `remove` (first matching value), bubble `sort` and `render`. `remove` raises `EmptyListError` on an empty list and `ValueNotFoundError` when the value is absent. |
| `dslab.circular_queue` | `CircularQueue(capacity=5)`, a fixed-size ring with `enqueue`, `dequeue`, `front`, `is_full`, `is_empty`, `render` and a `capacity` property. Raises `QueueFullError` and `QueueEmptyError`. |
| `dslab.singly_linked` | `SinglyLinkedList` with `push_front`, `pop_front` (raises `IndexError` when empty) and `render`. |
| `dslab.stack` | `BoundedStack(capacity=100)` with `push`, `pop`, `peek`, `render` and a `capacity` property. Raises `StackOverflowError` and `StackUnderflowError`. |
| `dslab.search` | `linear_search`, which returns every index of the target, and `binary_search`, which returns an index in a sorted sequence or `None`. |
| `dslab.scheduling` | `Process`, `ScheduleResult`, `fcfs`, `sjf`, `priority_schedule`, `round_robin` and `format_table`. |

All containers support `len()` and iteration (the stack iterates bottom to
top). `DoublyLinkedList` accepts initial values and can be walked backwards
with `reversed()`. A capacity below 1 raises `ValueError`.

## Using the library

```python
from dslab.stack import BoundedStack

stack = BoundedStack(3)
stack.push(1)
stack.push(2)
print(stack.peek())   # 2
print(stack.pop())    # 2
print(list(stack))    # [1]
```

```python
from dslab.circular_queue import CircularQueue, QueueFullError

queue = CircularQueue(2)
queue.enqueue(10)
queue.enqueue(20)
try:
    queue.enqueue(30)
except QueueFullError:
    print("no room left")
print(queue.dequeue())  # 10
```

```python
from dslab.search import binary_search, linear_search

print(binary_search([1, 2, 3, 5, 10, 12, 14, 15], 1))  # 0
print(linear_search([4, 7, 4], 4))                     # [0, 2]
```

```python
from dslab.scheduling import Process, format_table, round_robin

jobs = [Process(1, 0, 5), Process(2, 1, 3), Process(3, 2, 1)]
result = round_robin(jobs, quantum=2)
print(result.waiting, result.turnaround)
print(format_table(result))
```

A `Process` holds `pid`, `arrival`, `burst` and `priority` (lower runs
first, default 0). Process ids must be unique, otherwise the scheduling
functions raise `ValueError`. Every function returns a `ScheduleResult`
holding per-process `waiting` and `turnaround` dictionaries keyed by id, with
`average_waiting()` and `average_turnaround()`. `fcfs` orders by arrival;
`sjf` and `priority_schedule` are non-preemptive and break ties in favour of
the earlier process in the input; `round_robin` needs a quantum of at least 1.
`format_table` renders the process table and both averages to two decimals.

## Interactive consoles

```
dslab-doubly-linked    # add, delete, display and sort a doubly linked list
dslab-circular-queue   # enqueue, dequeue and display a five-slot circular queue
dslab-singly-linked    # push 10, 20, 30 at the front, print, remove the head, print
dslab-stack            # push, pop, print and peek a stack of up to 100 values
dslab-search           # find every index of a number in a fixed table (prompts for it)
dslab-search linear 3  # the same, with the number given on the command line
dslab-search binary 12 # bisect the sorted table 1 2 3 5 10 12 14 15 (target 1 if omitted)
dslab-scheduling       # enter processes and compare FCFS, SJF, Priority and Round Robin
```

The queue and stack consoles run until standard input ends; the list and
scheduling consoles also have an exit choice.

## What it does not do

The consoles keep everything in memory: nothing is saved between runs, and
the search tables and queue size are fixed rather than read from a file or
option.