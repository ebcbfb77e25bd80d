"""A small word-addressed machine: batch job loading, execution and error checking."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence

MEMORY_WORDS = 100
WORD = 4
BLOCK_WORDS = 10
CARD_CHARS = BLOCK_WORDS * WORD
HALT_MESSAGE = "Program Halted Normally."

_BLANK = " " * WORD
_DIGITS = frozenset("0123456789")


class MachineError(Exception):
    """Raised when a job cannot continue."""

    def __init__(
        self, message: str, *, instruction: int | None = None, ir: str | None = None
    ) -> None:
        super().__init__(message)
        self.instruction = instruction
        self.ir = ir


def _operand(word: str) -> int | None:
    digits = word[2:4]
    if len(digits) != 2 or not set(digits) <= _DIGITS:
        return None
    return int(digits)


def _pack_program(card: str) -> Iterator[str]:
    """Split a program card into words; an 'H' always ends its word."""
    word = ""
    for char in card:
        word += char
        if char == "H" or len(word) == WORD:
            yield word
            word = ""
    if word:
        yield word


class Phase1Machine:
    """A 100-word machine that loads program cards and runs GD/PD/LR/SR/CR/BT/H."""

    def __init__(self) -> None:
        self.toggle = False
        self.reset()

    def reset(self) -> None:
        """Clear memory and registers for a new job."""
        self.memory = [_BLANK] * MEMORY_WORDS
        self.ir = _BLANK
        self.r = _BLANK
        self.block = 0

    def load_card(self, card: str) -> None:
        """Store a program card in the next ten-word block."""
        if self.block >= MEMORY_WORDS:
            raise MachineError("Out of memory.")
        card = card.rstrip("\r\n")
        addresses = range(self.block, self.block + BLOCK_WORDS)
        for address, word in zip(addresses, _pack_program(card)):
            self.memory[address] = word + self.memory[address][len(word):]
        self.block += BLOCK_WORDS

    def _address(self) -> int:
        address = _operand(self.ir)
        if address is None or address >= MEMORY_WORDS:
            raise MachineError(f"invalid operand in {self.ir!r}", ir=self.ir)
        return address

    def _read(self, address: int, card: str | None) -> None:
        if card is None:
            raise MachineError("Out of data", ir=self.ir)
        text = card.rstrip("\r\n")[:CARD_CHARS]
        if address + -(-len(text) // WORD) > MEMORY_WORDS:
            raise MachineError(f"data card does not fit at {address}", ir=self.ir)
        for offset in range(0, len(text), WORD):
            chunk = text[offset:offset + WORD]
            target = address + offset // WORD
            self.memory[target] = chunk + self.memory[target][len(chunk):]

    def _write(self, address: int) -> str:
        if address + BLOCK_WORDS > MEMORY_WORDS:
            raise MachineError(f"output block at {address} runs past memory", ir=self.ir)
        return "".join(self.memory[address:address + BLOCK_WORDS])

    def execute(self, data_cards: Iterable[str]) -> list[str]:
        """Run the loaded program from word 0, reading GD data from ``data_cards``.

        Returns the output lines: one per PD and an empty one for H.
        """
        cards = iter(data_cards)
        output: list[str] = []
        counter = 0
        while True:
            if counter >= MEMORY_WORDS:
                raise MachineError("instruction counter ran past memory", ir=self.ir)
            self.ir = self.memory[counter]
            counter += 1
            opcode = self.ir[:2]
            if opcode == "GD":
                self._read(self._address(), next(cards, None))
            elif opcode == "PD":
                output.append(self._write(self._address()))
            elif opcode == "LR":
                self.r = self.memory[self._address()]
            elif opcode == "SR":
                self.memory[self._address()] = self.r
            elif opcode == "CR":
                self.toggle = self.r == self.memory[self._address()]
            elif opcode == "BT":
                address = self._address()
                if self.toggle:
                    counter = address
            elif self.ir.startswith("H"):
                output.append("")
                return output

    def memory_map(self) -> str:
        """Render memory, marking untouched words with '*'."""
        lines = []
        for address, word in enumerate(self.memory):
            used = word != _BLANK
            cells = "".join(
                ("  " if used else "* ") if char == " " else f"{char} " for char in word
            )
            lines.append(f"{address:02d}: {cells}")
        return "\n".join(lines)


CHECKED_WORDS = 200
DEMO_PROGRAM: tuple[str, ...] = ("LR10", "CR10", "ZZ99", "SR205", "H")
DEMO_DATA: Mapping[int, str] = {10: "1234"}


class CheckedMachine:
    """A 200-word machine that stops on invalid opcodes and out-of-range operands."""

    def __init__(
        self,
        program: Sequence[str] = DEMO_PROGRAM,
        data: Mapping[int, str] | None = None,
    ) -> None:
        self.memory = [_BLANK] * CHECKED_WORDS
        for address, word in enumerate(program):
            self._store(address, word)
        for address, word in (DEMO_DATA if data is None else data).items():
            self._store(address, word)
        self.ir = _BLANK
        self.r = _BLANK
        self.counter = 0
        self.toggle = False

    def _store(self, address: int, word: str) -> None:
        self.memory[address] = word[:WORD].ljust(WORD)

    def _fail(self, reason: str) -> MachineError:
        instruction = self.counter - 1
        return MachineError(
            f"{reason} at instruction {instruction}: {self.ir}",
            instruction=instruction,
            ir=self.ir,
        )

    def run(self) -> str:
        """Execute until halt; raise MachineError on a bad instruction."""
        while True:
            if self.counter >= CHECKED_WORDS:
                raise MachineError("instruction counter ran past memory", ir=self.ir)
            self.ir = self.memory[self.counter]
            self.counter += 1
            if self.ir.startswith("H"):
                return HALT_MESSAGE
            operand = _operand(self.ir)
            if operand is None or not 0 <= operand < CHECKED_WORDS:
                raise self._fail("Operand out of memory bounds")
            opcode = self.ir[:2]
            if opcode == "LR":
                self.r = self.memory[operand]
            elif opcode == "SR":
                self.memory[operand] = self.r
            elif opcode == "CR":
                self.toggle = self.r == self.memory[operand]
            elif opcode == "BT":
                if self.toggle:
                    self.counter = operand
            elif opcode in ("GD", "PD"):
                pass
            else:
                raise self._fail("Invalid opcode")


def render_locations(memory: Sequence[str]) -> str:
    """List each word's characters; words with none show as '* * * *'."""
    lines = []
    for address, word in enumerate(memory):
        chars = [char for char in word[:WORD] if char != "\0"]
        body = "".join(f"{char} " for char in chars) if chars else "* * * *"
        lines.append(f"Location {address:02d}: {body}")
    return "\n".join(lines)


def run_batch(lines: Iterable[str] | str) -> tuple[str, str]:
    """Process a batch of $AMJ/$DTA/$END jobs.

    Returns the console log and the text written to the output file.
    """
    cards = iter(lines.splitlines() if isinstance(lines, str) else lines)
    machine = Phase1Machine()
    console: list[str] = []
    output: list[str] = []
    for raw in cards:
        card = raw.rstrip("\r\n")
        if card.startswith("$AMJ"):
            console.extend(["", "Processing new job"])
            machine.reset()
        elif card.startswith("$DTA"):
            output.extend(machine.execute(cards))
        elif card.startswith("$END"):
            console.extend(["Job ended.", "", "Memory Map:", machine.memory_map()])
        else:
            try:
                machine.load_card(card)
            except MachineError as error:
                console.append(str(error))
    console.extend(["", "All jobs processed"])
    return "\n".join(console) + "\n", "".join(f"{line}\n" for line in output)