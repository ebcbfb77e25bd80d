import pytest

from oslab.scheduling import (
    Process,
    format_gantt,
    fcfs,
    priority_schedule,
    round_robin,
    sjf,
)

WORKLOAD = [
    Process(1, 0, 5, 2),
    Process(2, 1, 3, 1),
    Process(3, 2, 8, 4),
    Process(4, 3, 6, 3),
]

ALGORITHMS = [fcfs, sjf, priority_schedule, lambda ps: round_robin(ps, 2)]


@pytest.mark.parametrize("schedule", ALGORITHMS)
def test_stats_are_consistent(schedule):
    result = schedule(WORKLOAD)
    assert [s.pid for s in result.stats] == [p.pid for p in WORKLOAD]
    for s in result.stats:
        assert s.turnaround == s.completion - s.arrival
        assert s.waiting == s.turnaround - s.burst
        assert s.start >= s.arrival
        assert s.completion >= s.start + s.burst


@pytest.mark.parametrize("schedule", ALGORITHMS)
def test_gantt_covers_all_bursts_without_overlap(schedule):
    result = schedule(WORKLOAD)
    busy = sum(sl.end - sl.start for sl in result.gantt)
    assert busy == sum(p.burst for p in WORKLOAD)
    for before, after in zip(result.gantt, result.gantt[1:]):
        assert before.end <= after.start


@pytest.mark.parametrize("schedule", ALGORITHMS)
def test_averages_match_stats(schedule):
    result = schedule(WORKLOAD)
    n = len(result.stats)
    assert result.average_turnaround() == pytest.approx(
        sum(s.turnaround for s in result.stats) / n
    )
    assert result.average_waiting() == pytest.approx(
        sum(s.waiting for s in result.stats) / n
    )


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        fcfs([])
    with pytest.raises(ValueError):
        sjf([])
    with pytest.raises(ValueError):
        priority_schedule([])
    with pytest.raises(ValueError):
        round_robin([], 2)


def test_fcfs_completion_times():
    procs = [Process(1, 0, 5), Process(2, 1, 3), Process(3, 2, 8)]
    result = fcfs(procs)
    assert [s.completion for s in result.stats] == [5, 8, 16]


def test_fcfs_idles_until_arrival():
    result = fcfs([Process(1, 0, 2), Process(2, 5, 1)])
    assert result.stats[1].start == 5
    assert result.stats[1].response == 0


def test_sjf_orders_by_burst_when_all_ready():
    procs = [Process(1, 0, 7), Process(2, 0, 2), Process(3, 0, 4)]
    result = sjf(procs)
    expected = [p.pid for p in sorted(procs, key=lambda p: p.burst)]
    assert [sl.pid for sl in result.gantt] == expected


def test_sjf_tie_goes_to_earlier_process():
    result = sjf([Process(1, 0, 4), Process(2, 0, 4)])
    assert [sl.pid for sl in result.gantt] == [1, 2]


def test_sjf_waits_for_first_arrival():
    result = sjf([Process(1, 3, 2)])
    assert result.gantt[0].start == 3


def test_priority_orders_by_priority_when_all_ready():
    procs = [Process(1, 0, 2, 1), Process(2, 0, 2, 9), Process(3, 0, 2, 5)]
    result = priority_schedule(procs)
    expected = [p.pid for p in sorted(procs, key=lambda p: -p.priority)]
    assert [sl.pid for sl in result.gantt] == expected


def test_priority_starts_with_earliest_arrival():
    result = priority_schedule([Process(1, 2, 3, 9), Process(2, 0, 4, 1)])
    assert [sl.pid for sl in result.gantt] == [2, 1]


def test_priority_tie_goes_to_earlier_arrival():
    procs = [Process(1, 0, 3, 1), Process(2, 2, 1, 5), Process(3, 1, 1, 5)]
    result = priority_schedule(procs)
    assert [sl.pid for sl in result.gantt] == [1, 3, 2]


def test_round_robin_slices_respect_quantum():
    result = round_robin(WORKLOAD, 3)
    assert all(sl.end - sl.start <= 3 for sl in result.gantt)


def test_round_robin_all_ready_finishes_at_total_burst():
    procs = [Process(1, 0, 5), Process(2, 0, 3), Process(3, 0, 1)]
    result = round_robin(procs, 2)
    assert max(s.completion for s in result.stats) == sum(p.burst for p in procs)
    assert result.gantt[0].pid == 1


def test_round_robin_rejects_bad_quantum():
    with pytest.raises(ValueError):
        round_robin(WORKLOAD, 0)


def test_round_robin_rejects_zero_burst():
    with pytest.raises(ValueError):
        round_robin([Process(1, 0, 0)], 2)


def test_negative_times_rejected():
    with pytest.raises(ValueError):
        Process(1, -1, 3)
    with pytest.raises(ValueError):
        Process(1, 0, -3)


def test_format_gantt():
    procs = [Process(1, 0, 5), Process(2, 1, 3), Process(3, 2, 8)]
    result = fcfs(procs)
    bar, ticks = format_gantt(result).splitlines()
    assert bar == "| P1 | P2 | P3 |"
    assert ticks.split("\t") == [str(result.gantt[0].start)] + [
        str(s.completion) for s in result.stats
    ]