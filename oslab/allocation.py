"""Contiguous memory allocation: first, best and worst fit."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Allocation:
    """Where one process was placed, if anywhere."""

    process: int
    size: int
    block: int | None
    block_size: int | None

    @property
    def fragment(self) -> int | None:
        """Unused space left in the block, or None if unallocated."""
        if self.block_size is None:
            return None
        return self.block_size - self.size


def _allocate(
    processes: Iterable[int],
    blocks: Sequence[int],
    fits: Callable[[int, int], bool],
    choose: Callable[[list[int]], int],
) -> list[Allocation]:
    block_sizes = list(blocks)
    free = [True] * len(block_sizes)
    result = []
    for index, size in enumerate(processes):
        candidates = [
            j for j, block in enumerate(block_sizes) if free[j] and fits(block, size)
        ]
        if not candidates:
            result.append(Allocation(index, size, None, None))
            continue
        chosen = choose(candidates)
        free[chosen] = False
        result.append(Allocation(index, size, chosen, block_sizes[chosen]))
    return result


def first_fit(processes: Iterable[int], blocks: Sequence[int]) -> list[Allocation]:
    """Place each process in the first free block large enough."""
    return _allocate(processes, blocks, lambda b, p: b >= p, lambda c: c[0])


def best_fit(processes: Iterable[int], blocks: Sequence[int]) -> list[Allocation]:
    """Place each process in the smallest free block large enough."""
    sizes = list(blocks)
    return _allocate(
        processes, sizes, lambda b, p: b >= p, lambda c: min(c, key=sizes.__getitem__)
    )


def worst_fit(processes: Iterable[int], blocks: Sequence[int]) -> list[Allocation]:
    """Place each process in the largest free block strictly larger than it."""
    sizes = list(blocks)
    return _allocate(
        processes, sizes, lambda b, p: b > p, lambda c: max(c, key=sizes.__getitem__)
    )