"""Non-preemptive and round-robin CPU scheduling with Gantt charts."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Process:
    """A process waiting to be scheduled."""

    pid: int
    arrival: int
    burst: int
    priority: int = 0

    def __post_init__(self) -> None:
        if self.arrival < 0:
            raise ValueError(f"process {self.pid}: arrival time must not be negative")
        if self.burst < 0:
            raise ValueError(f"process {self.pid}: burst time must not be negative")


@dataclass(frozen=True)
class ProcessStats:
    """Timing figures of one process after scheduling."""

    pid: int
    arrival: int
    burst: int
    priority: int
    start: int
    completion: int

    @property
    def turnaround(self) -> int:
        return self.completion - self.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.burst

    @property
    def response(self) -> int:
        return self.start - self.arrival


@dataclass(frozen=True)
class GanttSlice:
    """A stretch of CPU time given to one process."""

    pid: int
    start: int
    end: int


@dataclass(frozen=True)
class ScheduleResult:
    """Per-process statistics, in input order, and the Gantt chart."""

    stats: tuple[ProcessStats, ...]
    gantt: tuple[GanttSlice, ...]

    def average_turnaround(self) -> float:
        return sum(s.turnaround for s in self.stats) / len(self.stats)

    def average_waiting(self) -> float:
        return sum(s.waiting for s in self.stats) / len(self.stats)


def _prepare(processes: Iterable[Process]) -> list[Process]:
    procs = list(processes)
    if not procs:
        raise ValueError("at least one process is required")
    return procs


def _stats(process: Process, start: int, completion: int) -> ProcessStats:
    return ProcessStats(
        pid=process.pid,
        arrival=process.arrival,
        burst=process.burst,
        priority=process.priority,
        start=start,
        completion=completion,
    )


def fcfs(processes: Iterable[Process]) -> ScheduleResult:
    """First come, first served in the order the processes are given."""
    procs = _prepare(processes)
    stats: list[ProcessStats] = []
    gantt: list[GanttSlice] = []
    clock: int | None = None
    for process in procs:
        start = process.arrival if clock is None else max(clock, process.arrival)
        end = start + process.burst
        stats.append(_stats(process, start, end))
        gantt.append(GanttSlice(process.pid, start, end))
        clock = end
    return ScheduleResult(tuple(stats), tuple(gantt))


def _run_selected(procs: list[Process], start_time: int, pick) -> ScheduleResult:
    pending = list(range(len(procs)))
    finished: dict[int, ProcessStats] = {}
    gantt: list[GanttSlice] = []
    time = start_time
    while pending:
        ready = [i for i in pending if procs[i].arrival <= time]
        if not ready:
            time = min(procs[i].arrival for i in pending)
            continue
        chosen = pick(ready)
        process = procs[chosen]
        end = time + process.burst
        finished[chosen] = _stats(process, time, end)
        gantt.append(GanttSlice(process.pid, time, end))
        time = end
        pending.remove(chosen)
    return ScheduleResult(tuple(finished[i] for i in range(len(procs))), tuple(gantt))


def sjf(processes: Iterable[Process]) -> ScheduleResult:
    """Non-preemptive shortest job first; ties go to the earlier process."""
    procs = _prepare(processes)
    return _run_selected(procs, 0, lambda ready: min(ready, key=lambda i: procs[i].burst))


def priority_schedule(processes: Iterable[Process]) -> ScheduleResult:
    """Non-preemptive priority scheduling; a higher number wins.

    Equal priorities go to the earlier arrival, then to the earlier process.
    """
    procs = _prepare(processes)

    def pick(ready: list[int]) -> int:
        best = ready[0]
        for i in ready[1:]:
            candidate, current = procs[i], procs[best]
            if candidate.priority > current.priority or (
                candidate.priority == current.priority
                and candidate.arrival < current.arrival
            ):
                best = i
        return best

    first_arrival = min(p.arrival for p in procs)
    return _run_selected(procs, first_arrival, pick)


def round_robin(processes: Iterable[Process], quantum: int) -> ScheduleResult:
    """Round robin that sweeps the processes in input order each pass."""
    procs = _prepare(processes)
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    if any(p.burst == 0 for p in procs):
        raise ValueError("round robin needs positive burst times")

    remaining = [p.burst for p in procs]
    first_start: dict[int, int] = {}
    completion: dict[int, int] = {}
    gantt: list[GanttSlice] = []
    time = 0
    while len(completion) < len(procs):
        executed = False
        for i, process in enumerate(procs):
            if remaining[i] > 0 and process.arrival <= time:
                run = min(quantum, remaining[i])
                first_start.setdefault(i, time)
                gantt.append(GanttSlice(process.pid, time, time + run))
                time += run
                remaining[i] -= run
                if remaining[i] == 0:
                    completion[i] = time
                executed = True
        if not executed:
            time = min(p.arrival for i, p in enumerate(procs) if remaining[i] > 0)

    stats = tuple(
        _stats(process, first_start[i], completion[i]) for i, process in enumerate(procs)
    )
    return ScheduleResult(stats, tuple(gantt))


def format_gantt(result: ScheduleResult) -> str:
    """Render the Gantt chart as a bar line and a timeline line."""
    bar = "|" + "".join(f" P{s.pid} |" for s in result.gantt)
    ticks = "".join(f"{s.start}\t" for s in result.gantt) + str(result.gantt[-1].end)
    return f"{bar}\n{ticks}"