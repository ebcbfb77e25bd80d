"""Disk head scheduling: first come first served and shortest seek time first."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import pairwise


@dataclass(frozen=True)
class SeekResult:
    """The starting head position and the order in which tracks were served."""

    head: int
    order: tuple[int, ...]

    @property
    def distance(self) -> int:
        """Total number of tracks the head moved across."""
        return sum(abs(b - a) for a, b in pairwise((self.head, *self.order)))

    @property
    def path(self) -> tuple[int, ...]:
        """Every head position, starting with the initial one."""
        return (self.head, *self.order)


def fcfs_seek(requests: Iterable[int], head: int) -> SeekResult:
    """Serve requests in the order they arrived."""
    return SeekResult(head, tuple(requests))


def sstf_seek(requests: Iterable[int], head: int) -> SeekResult:
    """Always serve the pending request nearest the head; ties go to the earlier request."""
    pending = list(requests)
    position = head
    order: list[int] = []
    while pending:
        nearest = min(pending, key=lambda track: abs(track - position))
        pending.remove(nearest)
        order.append(nearest)
        position = nearest
    return SeekResult(head, tuple(order))