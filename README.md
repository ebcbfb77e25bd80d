# oslab

Small, readable simulations of the classic operating-system lab exercises.

## What is in the package

- **CPU scheduling** (`oslab.scheduling`): `fcfs`, `sjf`, `priority_schedule`
  and `round_robin(processes, quantum)` take `Process(pid, arrival, burst,
  priority=0)` objects and return a `ScheduleResult`. Its `stats` hold one
  `ProcessStats` per process in input order (with `turnaround`, `waiting` and
  `response`), its `gantt` holds `GanttSlice` entries, and
  `average_turnaround()` and `average_waiting()` give the averages.
  `format_gantt(result)` renders the chart as a bar line and a timeline.
- **Paging** (`oslab.paging`): `fifo_replace` and `lru_replace` take a
  reference string and a frame count and return a `ReplacementResult` whose
  `steps` are `PageStep` records (page, frames afterwards, hit or miss), with
  `hits()`, `faults()`, `hit_ratio()` and `miss_ratio()`. `PageTable(frames,
  page_size).translate(address)` maps a logical address to a physical one and
  raises `ValueError` for an address outside the table. `welcome_message()`
  stores a greeting in simulated memory, one character per word, and reads it
  back.
- **Contiguous memory allocation** (`oslab.allocation`): `first_fit`,
  `best_fit` and `worst_fit` take process sizes and block sizes and return one
  `Allocation` per process (`block` and `block_size` are `None` when nothing
  fits; `fragment` is the space left over). Worst fit only uses a block that
  is strictly larger than the process.
- **Disk scheduling** (`oslab.disk`): `fcfs_seek` and `sstf_seek` return a
  `SeekResult` with the `order` served, the full `path` and the total
  `distance` the head moved.
- **Deadlock avoidance** (`oslab.bankers`): `need_matrix` and
  `safe_sequence`; the latter raises `UnsafeStateError` (with the processes
  that did finish in `finished`) when no safe sequence exists.
- **A toy batch machine, flat memory** (`oslab.phase1`): `Phase1Machine`
  loads program cards into 100 four-character words and runs the `GD`, `PD`,
  `LR`, `SR`, `CR`, `BT` and `H` instructions; `memory_map()` prints memory.
  `run_batch(lines)` processes `$AMJ` / `$DTA` / `$END` jobs and returns the
  console log and the output text. `CheckedMachine` is a 200-word machine that
  raises `MachineError` on an invalid opcode or an out-of-range operand.
  `render_locations(memory)` lists words as `Location NN: ...`.
- **A toy batch machine, paged** (`oslab.phase2`): `Phase2OS(lines, seed)`
  places a page table and program pages in randomly chosen frames, enforces
  the time and line limits from the `$AMJ` card, and `run()` returns one
  `JobReport` per job with an `ErrorCode`. `run_phase2(input_text, seed)`
  returns the console log and the output text. Give a `seed` to make frame
  placement repeatable.

## Installation

```
pip install .
```

Only the Python standard library is needed. Python 3.10 or later.

## Using the library

```python
from oslab.paging import fifo_replace, lru_replace
from oslab.disk import sstf_seek
from oslab.bankers import safe_sequence, UnsafeStateError
from oslab.scheduling import Process, round_robin, format_gantt

result = fifo_replace([7, 0, 1, 2, 0, 3, 0, 4], 3)
print(result.faults(), result.hits(), f"{result.hit_ratio():.2f}")

print(lru_replace([7, 0, 1, 2, 0, 3, 0, 4], 3).faults())

seek = sstf_seek([98, 183, 37, 122, 14, 124, 65, 67], 53)
print(seek.order, seek.distance)

schedule = round_robin([Process(1, 0, 5), Process(2, 1, 3)], quantum=2)
print(f"{schedule.average_waiting():.2f}")
print(format_gantt(schedule))

try:
    order = safe_sequence(
        allocation=[[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]],
        maximum=[[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]],
        available=[3, 3, 2],
    )
    print("safe:", order)
except UnsafeStateError:
    print("the system is not in a safe state")
```

## Command line

Installing the package provides the `oslab` command, which runs a job file
through one of the batch machines, writes the job output to a file and prints
the console log:

```
oslab phase1
oslab phase2 --seed 42
oslab phase2 -i jobs.txt -o results.txt
```

`-i/--input` defaults to `input.txt` and `-o/--output` to `output.txt`.
`--seed` (phase2 only) fixes the random frame placement. If the input cannot
be read the command prints `Error opening file.` and exits with status 1.

## What the package does not do

The scheduling, paging, allocation, disk and banker's modules are library
functions only: there is no command that prompts for their inputs or prints
their tables. Call them from Python and format the results as you need.

## Running the tests

```
pip install ".[test]"
pytest
```