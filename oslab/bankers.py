"""Banker's algorithm: need matrix and safe sequence search."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class UnsafeStateError(Exception):
    """No safe sequence exists; ``finished`` holds the processes that could still run."""

    def __init__(self, finished: Iterable[int]) -> None:
        self.finished = tuple(finished)
        super().__init__("System is not in a safe state.")


def need_matrix(
    allocation: Sequence[Sequence[int]], maximum: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Return maximum minus allocation, row by row."""
    if len(allocation) != len(maximum):
        raise ValueError("allocation and maximum must have the same number of processes")
    need = []
    for process, (alloc_row, max_row) in enumerate(zip(allocation, maximum)):
        if len(alloc_row) != len(max_row):
            raise ValueError(f"process {process}: rows differ in number of resources")
        need.append([m - a for a, m in zip(alloc_row, max_row)])
    return need


def safe_sequence(
    allocation: Sequence[Sequence[int]],
    maximum: Sequence[Sequence[int]],
    available: Sequence[int],
) -> list[int]:
    """Find a safe order of processes, sweeping them in index order each pass.

    Raises UnsafeStateError when a pass finishes no process.
    """
    need = need_matrix(allocation, maximum)
    work = list(available)
    if any(len(row) != len(work) for row in allocation):
        raise ValueError("available must list every resource")

    finished = [False] * len(need)
    sequence: list[int] = []
    while len(sequence) < len(need):
        progressed = False
        for process, (need_row, alloc_row) in enumerate(zip(need, allocation)):
            if finished[process]:
                continue
            if all(n <= w for n, w in zip(need_row, work)):
                work = [w + a for w, a in zip(work, alloc_row)]
                finished[process] = True
                sequence.append(process)
                progressed = True
        if not progressed:
            raise UnsafeStateError(sequence)
    return sequence