"""CPU scheduling simulations: FCFS, SJF, priority and round robin."""

from __future__ import annotations

import argparse
import math
from collections import deque
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Process:
    """A job with an arrival time, a CPU burst and a priority (lower runs first)."""

    pid: int
    arrival: int
    burst: int
    priority: int = 0


@dataclass(frozen=True)
class ScheduleResult:
    """Waiting and turnaround times of each process, keyed by process id."""

    processes: tuple[Process, ...]
    waiting: dict[int, int]
    turnaround: dict[int, int]

    def average_waiting(self) -> float:
        return self._mean(self.waiting)

    def average_turnaround(self) -> float:
        return self._mean(self.turnaround)

    def _mean(self, times: dict[int, int]) -> float:
        if not self.processes:
            return math.nan
        return sum(times[p.pid] for p in self.processes) / len(self.processes)

    def __iter__(self) -> Iterator[tuple[Process, int, int]]:
        return ((p, self.waiting[p.pid], self.turnaround[p.pid]) for p in self.processes)


def _checked(processes: Iterable[Process]) -> list[Process]:
    items = list(processes)
    if len({p.pid for p in items}) != len(items):
        raise ValueError("process ids must be unique")
    return items


def fcfs(processes: Iterable[Process]) -> ScheduleResult:
    """Run processes in order of arrival."""
    order = sorted(_checked(processes), key=lambda p: p.arrival)
    waiting: dict[int, int] = {}
    turnaround: dict[int, int] = {}
    clock = 0
    for p in order:
        clock = max(clock, p.arrival)
        waiting[p.pid] = clock - p.arrival
        clock += p.burst
        turnaround[p.pid] = waiting[p.pid] + p.burst
    return ScheduleResult(tuple(order), waiting, turnaround)


def _non_preemptive(
    processes: Iterable[Process], key: Callable[[Process], int]
) -> ScheduleResult:
    items = _checked(processes)
    pending = list(items)
    waiting: dict[int, int] = {}
    turnaround: dict[int, int] = {}
    clock = 0
    while pending:
        ready = [p for p in pending if p.arrival <= clock]
        if not ready:
            clock = min(p.arrival for p in pending)
            continue
        chosen = min(ready, key=key)
        pending.remove(chosen)
        waiting[chosen.pid] = clock - chosen.arrival
        clock += chosen.burst
        turnaround[chosen.pid] = clock - chosen.arrival
    return ScheduleResult(tuple(items), waiting, turnaround)


def sjf(processes: Iterable[Process]) -> ScheduleResult:
    """Non-preemptive shortest job first; ties go to the earlier process."""
    return _non_preemptive(processes, key=lambda p: p.burst)


def priority_schedule(processes: Iterable[Process]) -> ScheduleResult:
    """Non-preemptive priority scheduling; a lower number runs first."""
    return _non_preemptive(processes, key=lambda p: p.priority)


def round_robin(processes: Iterable[Process], quantum: int) -> ScheduleResult:
    """Preemptive round robin with the given time quantum."""
    if quantum < 1:
        raise ValueError("quantum must be at least 1")
    items = _checked(processes)
    remaining = {p.pid: p.burst for p in items}
    waiting: dict[int, int] = {}
    turnaround: dict[int, int] = {}
    ready: deque[Process] = deque()
    admitted: set[int] = set()
    clock = 0

    def admit() -> None:
        for p in items:
            if p.pid not in admitted and p.arrival <= clock:
                ready.append(p)
                admitted.add(p.pid)

    while len(turnaround) < len(items):
        admit()
        if not ready:
            clock = min(p.arrival for p in items if p.pid not in admitted)
            continue
        current = ready.popleft()
        run = min(quantum, remaining[current.pid])
        clock += run
        remaining[current.pid] -= run
        admit()
        if remaining[current.pid] > 0:
            ready.append(current)
        else:
            turnaround[current.pid] = clock - current.arrival
            waiting[current.pid] = turnaround[current.pid] - current.burst
    return ScheduleResult(tuple(items), waiting, turnaround)


def format_table(result: ScheduleResult) -> str:
    """Render the process table with the average times."""
    lines = ["Process Table:", "ID\tArrival\tBurst\tWaiting\tTurnaround"]
    lines.extend(
        f"{p.pid}\t{p.arrival}\t{p.burst}\t{wait}\t{turn}" for p, wait, turn in result
    )
    lines.append("")
    lines.append(f"Average Waiting Time: {result.average_waiting():.2f}")
    lines.append(f"Average Turnaround Time: {result.average_turnaround():.2f}")
    return "\n".join(lines)


_MENU = (
    "\nChoose Scheduling Algorithm:\n"
    "1. FCFS\n2. SJF\n3. Priority\n4. Round Robin\n0. Exit"
)


def _read_int(prompt: str) -> Optional[int]:
    text = input(prompt)
    try:
        return int(text.strip())
    except ValueError:
        return None


def _ask_int(prompt: str) -> int:
    while (value := _read_int(prompt)) is None:
        print("Please enter a whole number.")
    return value


def main(argv=None) -> int:
    """Read processes from standard input and compare scheduling algorithms."""
    argparse.ArgumentParser(description="CPU scheduling simulator.").parse_args(argv)
    try:
        count = _ask_int("Enter the number of processes: ")
        processes = []
        for pid in range(1, count + 1):
            print(f"\nProcess {pid}:")
            arrival = _ask_int("Arrival Time: ")
            burst = _ask_int("Burst Time: ")
            priority = _ask_int("Priority (lower = higher priority): ")
            processes.append(Process(pid, arrival, burst, priority))

        while True:
            print(_MENU)
            match _read_int("Your choice: "):
                case 1:
                    print(format_table(fcfs(processes)))
                case 2:
                    print(format_table(sjf(processes)))
                case 3:
                    print(format_table(priority_schedule(processes)))
                case 4:
                    quantum = _ask_int("Enter Quantum Time: ")
                    try:
                        print(format_table(round_robin(processes, quantum)))
                    except ValueError as exc:
                        print(exc)
                case 0:
                    print("Exiting program.")
                    return 0
                case _:
                    print("Invalid choice. Try again.")
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())