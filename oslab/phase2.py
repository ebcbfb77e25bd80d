"""A paged batch machine with time limits, line limits and error reporting."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

MEMORY_WORDS = 300
WORD = 4
PAGE_WORDS = 10
FRAMES = 29
SEPARATOR = "-" * 83

_EMPTY = "_" * WORD
_DIGITS = frozenset("0123456789")


class ErrorCode(IntEnum):
    """Why a job ended."""

    NO_ERROR = 0
    OUT_OF_DATA = 1
    LINE_LIMIT_EXCEEDED = 2
    TIME_LIMIT_EXCEEDED = 3
    OPCODE_ERROR = 4
    OPERAND_ERROR = 5
    INVALID_PAGE_FAULT = 6

    @property
    def message(self) -> str:
        """The text written to the job report."""
        return _REPORT_MESSAGES[self]


_REPORT_MESSAGES = {
    ErrorCode.NO_ERROR: "No Errors",
    ErrorCode.OUT_OF_DATA: "Out of Data",
    ErrorCode.LINE_LIMIT_EXCEEDED: "Line limit exceeded",
    ErrorCode.TIME_LIMIT_EXCEEDED: "Time Limit Exceeded",
    ErrorCode.OPCODE_ERROR: "Opcode Error",
    ErrorCode.OPERAND_ERROR: "Operand Error",
    ErrorCode.INVALID_PAGE_FAULT: "Invalid Page Fault",
}

_CONSOLE_MESSAGES = {
    ErrorCode.NO_ERROR: "No Error",
    ErrorCode.OUT_OF_DATA: "Out of Data",
    ErrorCode.LINE_LIMIT_EXCEEDED: "Line Limit Exceeded",
    ErrorCode.TIME_LIMIT_EXCEEDED: "Time Limit Exceeded",
    ErrorCode.OPCODE_ERROR: "Opcode Error",
    ErrorCode.OPERAND_ERROR: "Operand Error",
    ErrorCode.INVALID_PAGE_FAULT: "Invalid Page Fault",
}


@dataclass(frozen=True)
class PCB:
    """Job identity and limits taken from the $AMJ card."""

    job_id: str
    ttl: int
    tll: int


@dataclass(frozen=True)
class JobReport:
    """The state of a job when it ended."""

    number: int
    pcb: PCB
    error: ErrorCode
    ttc: int
    llc: int
    ptr: int
    ic: int
    ir: str
    output: tuple[str, ...]
    messages: tuple[str, ...]
    memory: tuple[str, ...]


class _Terminate(Exception):
    def __init__(self, error: ErrorCode, *, time_exceeded: bool = False) -> None:
        super().__init__(error.message)
        self.error = error
        prefix = (_CONSOLE_MESSAGES[ErrorCode.TIME_LIMIT_EXCEEDED],) if time_exceeded else ()
        self.messages = (*prefix, _CONSOLE_MESSAGES[error])


def _parse_pcb(card: str) -> PCB:
    job_id, ttl, tll = card[4:8], card[8:12], card[12:16]
    if len(tll) != WORD or not set(ttl + tll) <= _DIGITS:
        raise ValueError(f"malformed job card {card!r}")
    return PCB(job_id, int(ttl), int(tll))


def _summary_lines(report: JobReport) -> tuple[str, str]:
    pcb = report.pcb
    header = (
        f"Job ID : {pcb.job_id} \tTTL ={pcb.ttl}\t\tTLL ={pcb.tll}"
        f"\t\tTTC = {report.ttc}\tLLC ={report.llc}"
    )
    status = f"PTR = {report.ptr}\tIC = {report.ic}\t\tEM = {int(report.error)}\t\tIR = {report.ir}"
    return header, status


def _memory_dump(memory: Iterable[str]) -> list[str]:
    lines = []
    for address, word in enumerate(memory):
        gap = " \t\t\t |" if address < 100 else " \t\t |"
        lines.append(f"M [{address}]{gap}" + "".join(f"{char}|" for char in word))
    return lines


class Phase2OS:
    """Loads $AMJ/$DTA/$END jobs into randomly placed page frames and runs them."""

    def __init__(self, lines: Iterable[str] | str, seed: int | None = None) -> None:
        source = lines.splitlines() if isinstance(lines, str) else lines
        self._cards = deque(line.rstrip("\r\n") for line in source)
        self._rng = random.Random(seed)
        self.console: list[str] = []
        self.output: list[str] = []
        self.reports: list[JobReport] = []
        self._jobs = 0
        self._active = False
        self._reset(None)

    def _reset(self, pcb: PCB | None) -> None:
        self.pcb = pcb
        self.memory = [_EMPTY] * MEMORY_WORDS
        self.ir = "&" * WORD
        self.gr = _EMPTY
        self.ptr = 0
        self.ic = 0
        self.ttc = 0
        self.llc = 0
        self.toggle = False
        self._used: set[int] = set()
        self._job_output: list[str] = []

    def run(self) -> list[JobReport]:
        """Process every job in the input and return their reports."""
        while self._cards:
            card = self._cards.popleft()
            if card.startswith("$AMJ"):
                self._start(card)
            elif card.startswith("$DTA") and self._active:
                try:
                    self._run_program()
                except _Terminate as stop:
                    self._terminate(stop)
        return list(self.reports)

    def _start(self, card: str) -> None:
        pcb = _parse_pcb(card)
        self._jobs += 1
        self.console += [f"Starting job No.: {self._jobs}", ""]
        self._reset(pcb)
        self.ptr = self._allocate_frame() * PAGE_WORDS
        self.console.append(f"PTR: {self.ptr}")
        self.memory[self.ptr:self.ptr + PAGE_WORDS] = ["*" * WORD] * PAGE_WORDS
        self._load_program()
        self._active = True

    def _allocate_frame(self) -> int:
        free = [frame for frame in range(FRAMES) if frame not in self._used]
        if not free:
            raise RuntimeError("no free memory frame")
        frame = self._rng.choice(free)
        self._used.add(frame)
        return frame

    def _map(self, page: int, frame: int) -> None:
        entry = self.ptr + page
        self.memory[entry] = self.memory[entry][:2] + f"{frame:02d}"

    def _load_program(self) -> None:
        while self._cards and not self._cards[0].startswith("$"):
            frame = self._allocate_frame()
            self._map(0, frame)
            card = self._cards.popleft()
            base = frame * PAGE_WORDS
            halted = False
            for i in range(min(len(card) // WORD, PAGE_WORDS)):
                self.memory[base + i] = card[i * WORD:(i + 1) * WORD]
                if "H" in card[i * WORD + 1:(i + 1) * WORD + 1]:
                    self.memory[base + i + 1] = "H000"
                    halted = True
            if halted:
                return

    @property
    def _ttl(self) -> int:
        assert self.pcb is not None
        return self.pcb.ttl

    def _operand_error(self) -> _Terminate:
        return _Terminate(ErrorCode.OPERAND_ERROR, time_exceeded=self.ttc >= self._ttl)

    def _opcode_error(self, time_exceeded: bool) -> _Terminate:
        return _Terminate(ErrorCode.OPCODE_ERROR, time_exceeded=time_exceeded)

    def _check_time(self) -> None:
        if self.ttc > self._ttl:
            raise _Terminate(ErrorCode.TIME_LIMIT_EXCEEDED)

    def _run_program(self) -> None:
        entry = self.memory[self.ptr][2:]
        if not set(entry) <= _DIGITS:
            raise self._operand_error()
        base = int(entry) * PAGE_WORDS
        self.ic = 0
        while True:
            address = base + self.ic
            if address >= MEMORY_WORDS:
                raise self._operand_error()
            self.ir = self.memory[address]
            operand = self.ir[2:]
            if not set(operand) <= _DIGITS:
                raise self._operand_error()
            va = int(operand)
            if self.ir[:2] in ("GD", "PD") and va % PAGE_WORDS:
                raise self._operand_error()
            ra, fault = self._translate(va)
            self._examine(va, ra, fault)

    def _translate(self, va: int) -> tuple[int, bool]:
        page, offset = divmod(va, PAGE_WORDS)
        entry = self.ptr + page
        fault = self.memory[entry][3] == "*"
        if fault:
            self.console.append("Valid Page Fault Handled")
            self._map(page, self._allocate_frame())
        frame = self.memory[entry][2:]
        if not set(frame) <= _DIGITS:
            raise self._operand_error()
        return int(frame) * PAGE_WORDS + offset, fault

    def _examine(self, va: int, ra: int, fault: bool) -> None:
        kind, variant = self.ir[0], self.ir[1]
        ttl = self._ttl
        if kind == "G":
            self.ic += 1
            if variant != "D":
                raise self._opcode_error(self.ttc > ttl)
            self.ttc += 2
            if self.ttc >= ttl:
                raise _Terminate(ErrorCode.TIME_LIMIT_EXCEEDED)
            self._read(ra)
        elif kind == "P":
            self.ic += 1
            if variant != "D":
                raise self._opcode_error(self.ttc >= ttl)
            self.llc += 1
            self.ttc += 1
            if self.ttc < ttl:
                if fault:
                    raise _Terminate(ErrorCode.INVALID_PAGE_FAULT)
                self._write(ra)
            else:
                if not fault:
                    self._write(ra)
                raise _Terminate(ErrorCode.TIME_LIMIT_EXCEEDED)
        elif kind == "L":
            self.ic += 1
            if variant != "R":
                raise self._opcode_error(False)
            if fault:
                raise _Terminate(ErrorCode.INVALID_PAGE_FAULT)
            self.gr = self.memory[ra]
            self.ttc += 1
            self._check_time()
        elif kind == "S":
            self.ic += 1
            if variant != "R":
                raise self._opcode_error(False)
            self.memory[ra] = self.gr
            self.ttc += 2
            self._check_time()
        elif kind == "C":
            self.ic += 1
            if variant != "R":
                raise self._opcode_error(False)
            if fault:
                raise _Terminate(ErrorCode.INVALID_PAGE_FAULT)
            self.toggle = self.memory[ra] == self.gr
            self.ttc += 1
            self._check_time()
        elif kind == "B":
            self.ic += 1
            if variant != "T":
                raise self._opcode_error(False)
            if fault:
                raise _Terminate(ErrorCode.INVALID_PAGE_FAULT)
            if self.toggle:
                self.ic = va
            self.ttc += 1
            self._check_time()
        elif kind == "H":
            self.ic += 1
            self.ttc += 1
            self._check_time()
            raise _Terminate(ErrorCode.NO_ERROR)
        else:
            raise self._opcode_error(False)

    def _read(self, ra: int) -> None:
        card = self._cards.popleft() if self._cards else None
        if card is not None:
            self.console.append(card)
        if card is None or card.startswith("$END"):
            raise _Terminate(ErrorCode.OUT_OF_DATA)
        text = card + "\0"
        for offset in range(0, len(text), WORD):
            target = ra + offset // WORD
            if target >= MEMORY_WORDS:
                break
            chunk = text[offset:offset + WORD]
            self.memory[target] = chunk + self.memory[target][len(chunk):]

    def _write(self, ra: int) -> None:
        assert self.pcb is not None
        if self.llc > self.pcb.tll:
            raise _Terminate(ErrorCode.LINE_LIMIT_EXCEEDED)
        parts = []
        for word in self.memory[ra:]:
            parts.append(word.split("_", 1)[0])
            if "_" in word:
                break
        line = "".join(parts).split("\0", 1)[0]
        self._job_output.append(line)
        self.output.append(line)
        self.console.append(line)

    def _terminate(self, stop: _Terminate) -> None:
        assert self.pcb is not None
        self._active = False
        self.console.extend(stop.messages)
        report = JobReport(
            number=self._jobs,
            pcb=self.pcb,
            error=stop.error,
            ttc=self.ttc,
            llc=self.llc,
            ptr=self.ptr,
            ic=self.ic,
            ir=self.ir,
            output=tuple(self._job_output),
            messages=stop.messages,
            memory=tuple(self.memory),
        )
        self.reports.append(report)
        header, status = _summary_lines(report)
        self.console += ["", "", "MEMORY (After Execution):", *_memory_dump(self.memory), ""]
        self.console += [header, status, "", f"Ending of job No.: {self._jobs}", "", "", ""]
        self.output += [header, status + report.error.message, SEPARATOR, SEPARATOR]


def _joined(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def run_phase2(input_text: Iterable[str] | str, seed: int | None = None) -> tuple[str, str]:
    """Run every job; return the console log and the output file text."""
    machine = Phase2OS(input_text, seed)
    machine.run()
    return _joined(machine.console), _joined(machine.output)