"""Conway's Game of Life on a bounded square board, driven by typed or scripted commands."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence

BOARD_SIZE = 40
FRAME_DELAY = 0.1

ALIVE = "X"
DEAD = " "


class Command(Enum):
    ADD = "a"
    REMOVE = "r"
    QUIT = "q"
    NEXT = "n"
    PLAY = "p"


@dataclass(frozen=True)
class Instruction:
    command: Command
    x: int = 0
    y: int = 0


class Board:
    """A square grid of cells; cells beyond the edge count as dead."""

    def __init__(self, size: int = BOARD_SIZE) -> None:
        if size < 1:
            raise ValueError("board size must be positive")
        self.size = size
        self._alive: set[tuple[int, int]] = set()

    @property
    def cells(self) -> frozenset[tuple[int, int]]:
        return frozenset(self._alive)

    def __contains__(self, cell: object) -> bool:
        return cell in self._alive

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def add(self, x: int, y: int) -> None:
        """Bring a cell to life; positions off the board are ignored."""
        if self._inside(x, y):
            self._alive.add((x, y))

    def remove(self, x: int, y: int) -> None:
        """Kill a cell; positions off the board are ignored."""
        if self._inside(x, y):
            self._alive.discard((x, y))

    def _around(self, x: int, y: int) -> Iterator[tuple[int, int]]:
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if (dx or dy) and self._inside(x + dx, y + dy):
                    yield x + dx, y + dy

    def count_neighbors(self, x: int, y: int) -> int:
        return sum(cell in self._alive for cell in self._around(x, y))

    def step(self) -> None:
        """Advance one generation."""
        candidates = set(self._alive)
        for cell in self._alive:
            candidates.update(self._around(*cell))
        survivors = set()
        for cell in candidates:
            count = self.count_neighbors(*cell)
            if count == 3 or (count == 2 and cell in self._alive):
                survivors.add(cell)
        self._alive = survivors

    def render(self) -> str:
        """The board framed by dashes and bars, one row per line."""
        body = "".join(
            "|"
            + "".join(ALIVE if (x, y) in self._alive else DEAD for y in range(self.size))
            + "|\n"
            for x in range(self.size)
        )
        return "-" * (self.size + 2) + "\n" + body + "-" * self.size + "\n"


def parse_command(line: str) -> Instruction:
    """Read a command letter, followed by two coordinates for adding or removing."""
    fields = line.split()
    if not fields:
        raise ValueError("empty command")
    try:
        command = Command(fields[0])
    except ValueError:
        raise ValueError(f"unknown command {fields[0]!r}") from None
    if command not in (Command.ADD, Command.REMOVE):
        return Instruction(command)
    if len(fields) < 3:
        raise ValueError(f"command {command.value!r} needs two coordinates")
    try:
        x, y = int(fields[1]), int(fields[2])
    except ValueError:
        raise ValueError("coordinates must be whole numbers") from None
    return Instruction(command, x, y)


def apply_command(board: Board, line: str) -> Command:
    """Carry out an add, remove or next-generation command and return the command read.

    Quit and play are returned without acting on the board.
    """
    instruction = parse_command(line)
    if instruction.command is Command.ADD:
        board.add(instruction.x, instruction.y)
    elif instruction.command is Command.REMOVE:
        board.remove(instruction.x, instruction.y)
    elif instruction.command is Command.NEXT:
        board.step()
    return instruction.command


def _play(board: Board) -> None:
    while True:
        board.step()
        sys.stdout.write(board.render())
        sys.stdout.flush()
        time.sleep(FRAME_DELAY)


def _interactive(board: Board) -> None:
    while True:
        sys.stdout.write(board.render())
        print("COMMAND: ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            return
        try:
            command = apply_command(board, line)
        except ValueError:
            print("Please enter a valid input")
            continue
        if command is Command.QUIT:
            return
        if command is Command.PLAY:
            _play(board)


def _scripted(board: Board, lines: Iterable[str]) -> None:
    for line in lines:
        sys.stdout.write(board.render())
        sys.stdout.flush()
        time.sleep(FRAME_DELAY)
        try:
            instruction = parse_command(line)
        except ValueError:
            print("Improper file format")
            continue
        if instruction.command is Command.ADD:
            board.add(instruction.x, instruction.y)
        elif instruction.command is Command.PLAY:
            _play(board)
        else:
            print("Improper file format")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    board = Board()
    try:
        if not args:
            _interactive(board)
        elif len(args) == 1:
            try:
                lines = Path(args[0]).read_text().splitlines()
            except OSError:
                print("Can't open the file")
                return 1
            _scripted(board, lines)
        else:
            print("Error: please enter the proper number of elements")
    except KeyboardInterrupt:
        return 130
    print("Program terminated")
    return 0


if __name__ == "__main__":
    sys.exit(main())