"""Command line entry point for the batch machines."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from .phase1 import MachineError, run_batch
from .phase2 import run_phase2


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oslab", description="Run a batch of jobs on a simulated machine."
    )
    machines = parser.add_subparsers(dest="machine", required=True)
    for name, text in (
        ("phase1", "the plain 100-word machine"),
        ("phase2", "the paged machine with time and line limits"),
    ):
        sub = machines.add_parser(name, help=text)
        sub.add_argument("-i", "--input", type=Path, default=Path("input.txt"))
        sub.add_argument("-o", "--output", type=Path, default=Path("output.txt"))
        if name == "phase2":
            sub.add_argument("--seed", type=int, default=None)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Read the job file, run it, write the output file and print the console log."""
    args = _parser().parse_args(argv)
    try:
        text = args.input.read_text()
    except OSError:
        print("Error opening file.")
        return 1
    try:
        if args.machine == "phase1":
            console, output = run_batch(text)
        else:
            console, output = run_phase2(text, args.seed)
    except (MachineError, ValueError, RuntimeError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    try:
        args.output.write_text(output)
    except OSError:
        print("Error opening file.")
        return 1
    sys.stdout.write(console)
    return 0


if __name__ == "__main__":
    sys.exit(main())