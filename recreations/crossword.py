"""Anagram crossword generator: lays words out on a grid and writes scrambled clues."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from enum import Enum
from itertools import product
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, Sequence

BOARD_SIZE = 15
MAX_WORDS = 20
MIN_LENGTH = 2
MAX_LENGTH = 15

EMPTY = "."
BLOCK = "#"
OPEN = " "

HEADER = "\nAnagram Crossword Puzzle Generator\n-----------------------------------\n"

Reporter = Callable[[str, bool], None]


class Direction(Enum):
    ACROSS = "Across"
    DOWN = "Down"


@dataclass(frozen=True)
class Placement:
    """One-based position of a word's first letter and its direction."""

    column: int
    row: int
    direction: Direction

    def __str__(self) -> str:
        return f"{self.column}, {self.row} {self.direction.value}"


@dataclass(frozen=True)
class Clue:
    word: str
    anagram: str
    placement: Optional[Placement]

    def __str__(self) -> str:
        if self.placement is None:
            return f"Word '{self.word}' not found on the board."
        return f"{self.placement} {self.anagram}"


class Crossword:
    """A square grid of letters in which words are laid across or down."""

    def __init__(self, size: int = BOARD_SIZE) -> None:
        if size < 1:
            raise ValueError("board size must be positive")
        self.size = size
        self._grid = [[EMPTY] * size for _ in range(size)]

    def _inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def _occupied(self, row: int, col: int) -> bool:
        return self._inside(row, col) and self._grid[row][col] != EMPTY

    @staticmethod
    def _cells(word: str, row: int, col: int, vertical: bool) -> Iterator[tuple[int, int, str]]:
        for offset, letter in enumerate(word):
            if vertical:
                yield row + offset, col, letter
            else:
                yield row, col + offset, letter

    def can_place(self, word: str, row: int, col: int, vertical: bool) -> bool:
        """Whether the word fits here, crossing only matching letters and touching nothing else."""
        for r, c, letter in self._cells(word, row, col, vertical):
            if not self._inside(r, c):
                return False
            cell = self._grid[r][c]
            if cell != EMPTY and cell != letter:
                return False
            if cell == EMPTY:
                sides = ((r, c - 1), (r, c + 1)) if vertical else ((r - 1, c), (r + 1, c))
                if any(self._occupied(*side) for side in sides):
                    return False
        length = len(word)
        if vertical:
            ends = ((row - 1, col), (row + length, col))
        else:
            ends = ((row, col - 1), (row, col + length))
        return not any(self._occupied(*end) for end in ends)

    def place(self, word: str, row: int, col: int, vertical: bool) -> None:
        """Write the word onto the grid, overwriting whatever is there."""
        cells = list(self._cells(word, row, col, vertical))
        if any(not self._inside(r, c) for r, c, _ in cells):
            raise ValueError(f"word {word!r} runs off the board")
        for r, c, letter in cells:
            self._grid[r][c] = letter

    def place_first_two(self, first: str, second: str) -> bool:
        """Centre the first word across the middle row and hang the second down through it.

        Returns whether the two words share a letter.
        """
        if len(first) > self.size:
            raise ValueError(f"word {first!r} is longer than the board")
        middle = self.size // 2
        start = (self.size - len(first)) // 2
        self.place(first, middle, start, False)
        for offset, letter in enumerate(first):
            index = second.find(letter)
            if index >= 0:
                self.place(second, middle - index, start + offset, True)
                return True
        return False

    def _place_crossing(self, word: str) -> bool:
        for row, col in product(range(self.size), repeat=2):
            cell = self._grid[row][col]
            for offset, letter in enumerate(word):
                if cell != letter:
                    continue
                if self.can_place(word, row, col - offset, False):
                    self.place(word, row, col - offset, False)
                    return True
                if self.can_place(word, row - offset, col, True):
                    self.place(word, row - offset, col, True)
                    return True
        return False

    def place_remaining(self, words: Iterable[str]) -> Optional[str]:
        """Place each word across an existing letter.

        Stops at the first word that cannot be placed and returns it; returns None
        when every word was placed.
        """
        for word in words:
            if not self._place_crossing(word):
                return word
        return None

    def solution_rows(self) -> list[str]:
        return ["".join(row) for row in self._grid]

    def puzzle_rows(self) -> list[str]:
        return [
            "".join(BLOCK if cell == EMPTY else OPEN for cell in row) for row in self._grid
        ]

    def locate(self, word: str) -> Optional[Placement]:
        """Find the first place, scanning row by row, where the word reads across or down."""
        length = len(word)
        grid = self._grid
        for row, col in product(range(self.size), repeat=2):
            if col + length <= self.size and all(
                grid[row][col + i] == letter for i, letter in enumerate(word)
            ):
                return Placement(col + 1, row + 1, Direction.ACROSS)
            if row + length <= self.size and all(
                grid[row + i][col] == letter for i, letter in enumerate(word)
            ):
                return Placement(col + 1, row + 1, Direction.DOWN)
        return None


@dataclass
class Report:
    words: list[str]
    board: Crossword
    intersects: bool
    unplaced: Optional[str]
    clues: list[Clue]


def _is_letters(word: str) -> bool:
    return word.isascii() and word.isalpha()


def is_valid_word(word: str) -> bool:
    """Whether a word is made only of letters and has an acceptable length."""
    return _is_letters(word) and MIN_LENGTH <= len(word) <= MAX_LENGTH


def read_words(tokens: Iterable[str], report: Optional[Reporter] = None) -> list[str]:
    """Collect acceptable words up to a lone '.', reporting each rejected one.

    The reporter is called with the rejected word and whether it was made only of letters.
    """
    accepted: list[str] = []
    for token in tokens:
        if token == ".":
            break
        if is_valid_word(token) and len(accepted) < MAX_WORDS:
            accepted.append(token)
        elif report is not None:
            report(token, _is_letters(token))
    return accepted


def sort_by_length(words: Iterable[str]) -> list[str]:
    """Longest first; words of equal length keep their order."""
    return sorted(words, key=len, reverse=True)


def scramble(word: str, rng: random.Random) -> str:
    letters = list(word)
    rng.shuffle(letters)
    return "".join(letters)


def render_board(rows: Sequence[str]) -> str:
    """Draw rows inside a box of dashes and bars."""
    width = len(rows[0]) if rows else 0
    edge = "-" * (width + 2)
    body = "".join(f"|{row}|\n" for row in rows)
    return f"{edge}\n{body}{edge}\n"


def build_report(words: Iterable[str], rng: random.Random) -> Report:
    """Lay the words out, longest first, and make a scrambled clue for each."""
    ordered = sort_by_length(word.upper() for word in words)
    board = Crossword()
    first = ordered[0] if ordered else ""
    second = ordered[1] if len(ordered) > 1 else ""
    intersects = board.place_first_two(first, second)
    unplaced = board.place_remaining(ordered[2:])
    clues = [Clue(word, scramble(word, rng), board.locate(word)) for word in ordered]
    return Report(ordered, board, intersects, unplaced, clues)


def _rejector(interactive: bool) -> Reporter:
    def report(word: str, letters_only: bool) -> None:
        if not letters_only:
            print("Word must contain only letters")
        if interactive:
            print("Word does not meet input criteria")
        else:
            print(f"{word} does not meet input criteria")

    return report


def _stdin_tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def _screen_text(report: Report) -> str:
    clues = "".join(f"{clue}\n" for clue in report.clues)
    return (
        "Solution:\n"
        + render_board(report.board.solution_rows())
        + "\n\nCrossword Puzzle:\n"
        + render_board(report.board.puzzle_rows())
        + "\nClues:\n\n"
        + clues
    )


def _file_text(report: Report) -> str:
    lines = []
    if not report.intersects:
        first = report.words[0] if report.words else ""
        second = report.words[1] if len(report.words) > 1 else ""
        lines.append(f"The two words '{first}' and '{second}' do not intersect.\n")
    lines.append("Solution:\n")
    lines.append(render_board(report.board.solution_rows()))
    lines.append("\nCrossword Puzzle:\n")
    lines.append(render_board(report.board.puzzle_rows()))
    lines.append("\nClues:\n")
    lines.extend(f"{clue}\n" for clue in report.clues)
    return "".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    print(HEADER)
    if len(args) > 2:
        return 0

    if not args:
        print("Enter a list of words: ")
        tokens: Iterable[str] = _stdin_tokens()
    else:
        try:
            tokens = Path(args[0]).read_text().split()
        except OSError:
            print("Can't open the file")
            return 1

    words = read_words(tokens, _rejector(interactive=not args))

    try:
        report = build_report(words, random.Random())
    except ValueError as exc:
        print(exc)
        return 1

    to_file = len(args) == 2
    if not report.intersects and not to_file:
        print("The two words do not intersect")
    if report.unplaced is not None:
        print(f"Could not place word '{report.unplaced}' on the board")

    if to_file:
        try:
            Path(args[1]).write_text(_file_text(report))
        except OSError:
            print("Can't open the file")
            return 1
    else:
        sys.stdout.write(_screen_text(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())