"""Page replacement (FIFO, LRU) and page-table address translation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class PageStep:
    """One reference: the page, the frames afterwards, and whether it hit."""

    page: int
    frames: tuple[int | None, ...]
    hit: bool


@dataclass(frozen=True)
class ReplacementResult:
    """The trace of a page replacement run."""

    frame_count: int
    steps: tuple[PageStep, ...]

    def hits(self) -> int:
        return sum(step.hit for step in self.steps)

    def faults(self) -> int:
        return len(self.steps) - self.hits()

    def hit_ratio(self) -> float:
        return self.hits() / len(self.steps)

    def miss_ratio(self) -> float:
        return self.faults() / len(self.steps)


def _check(references: Iterable[int], frame_count: int) -> list[int]:
    refs = list(references)
    if frame_count <= 0:
        raise ValueError("frame count must be positive")
    if not refs:
        raise ValueError("reference string must not be empty")
    return refs


def fifo_replace(references: Iterable[int], frame_count: int) -> ReplacementResult:
    """Replace the page that was loaded earliest."""
    refs = _check(references, frame_count)
    frames: list[int | None] = [None] * frame_count
    position = 0
    steps = []
    for page in refs:
        hit = page in frames
        if not hit:
            frames[position] = page
            position = (position + 1) % frame_count
        steps.append(PageStep(page, tuple(frames), hit))
    return ReplacementResult(frame_count, tuple(steps))


def lru_replace(references: Iterable[int], frame_count: int) -> ReplacementResult:
    """Replace the page that was used least recently."""
    refs = _check(references, frame_count)
    frames: list[int | None] = [None] * frame_count
    last_used = [0] * frame_count
    clock = 0
    steps = []
    for page in refs:
        clock += 1
        hit = page in frames
        if hit:
            slot = frames.index(page)
        else:
            slot = min(range(frame_count), key=last_used.__getitem__)
            frames[slot] = page
        last_used[slot] = clock
        steps.append(PageStep(page, tuple(frames), hit))
    return ReplacementResult(frame_count, tuple(steps))


@dataclass(frozen=True)
class PageTable:
    """Maps page numbers to frame numbers for a fixed page size."""

    frames: tuple[int, ...]
    page_size: int

    def __init__(self, frames: Sequence[int], page_size: int) -> None:
        if page_size <= 0:
            raise ValueError("page size must be positive")
        object.__setattr__(self, "frames", tuple(frames))
        object.__setattr__(self, "page_size", page_size)

    def translate(self, logical_address: int) -> int:
        """Return the physical address for a logical address."""
        if logical_address < 0:
            raise ValueError(f"invalid logical address {logical_address}")
        page, offset = divmod(logical_address, self.page_size)
        if page >= len(self.frames):
            raise ValueError(f"invalid logical address {logical_address}")
        return self.frames[page] * self.page_size + offset


MEMORY_SIZE = 400
PAGE_SIZE = 10
NUM_PAGES = MEMORY_SIZE // PAGE_SIZE

DEMO_PAGE_TABLE = PageTable((11, 23, 5) + (0,) * (NUM_PAGES - 3), PAGE_SIZE)

_WELCOME_START = 10
_WELCOME_TEXT = "Hello, Welcome"


def _load_welcome_memory() -> list[str]:
    memory = [""] * MEMORY_SIZE
    for address, char in enumerate(_WELCOME_TEXT, start=_WELCOME_START):
        memory[address] = char
    return memory


def welcome_message() -> str:
    """Load the greeting into simulated memory, one character per word, and read it back."""
    memory = _load_welcome_memory()
    end = _WELCOME_START + len(_WELCOME_TEXT)
    return "".join(memory[_WELCOME_START:end])