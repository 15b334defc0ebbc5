# recreations

This package holds three small recreational programs:

- **crossword** builds an anagram crossword from a list of words. It prints the
  solution grid, the empty puzzle grid and a list of clues. Each clue is a
  scrambled form of a word, with the word's position and direction.
- **life** runs Conway's Game of Life on a 40×40 board. You drive it with typed
  commands or with a script file.
- **fractals** computes recursive figures and saves them as images. The figures
  are Sierpinski triangles, shrinking squares, a square spiral, circles, a
  snowflake, a tree, a fern and a spiral of spirals.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Crossword

```
crossword                      # type words, finish with "."
crossword words.txt            # read words from a file
crossword words.txt out.txt    # read words from a file, write the result to out.txt
```

Input is split on whitespace and ends at a lone `.` or at the end of the input.

Word rules:

- A word is made only of ASCII letters.
- A word is 2 to 15 letters long.
- At most 20 words are used.

The program reports each word it rejects.

How the grid is built:

1. The words are uppercased and sorted longest first. Words of equal length keep their order.
2. The longest word is centred across the middle row of the 15×15 grid.
3. The second word is hung down through the first letter that the two words share.
4. Each later word is fitted where it crosses a letter already on the grid. It must not touch any other word.
5. If a word cannot be fitted, placement stops at that word and the program says so.

In the printed solution, empty cells show as `.`. In the puzzle grid, empty cells show as `#` and letter cells as blanks. Clues read as `column, row Across|Down ANAGRAM`, counted from 1.

From Python:

```python
import random
from recreations.crossword import build_report, render_board

report = build_report(["python", "typing", "note"], random.Random(1))
print(render_board(report.board.solution_rows()))
for clue in report.clues:
    print(clue)
```

`Crossword` has these methods, which work on a grid of any size:

- `can_place`
- `place`
- `place_first_two`
- `place_remaining`
- `locate`
- `solution_rows`
- `puzzle_rows`

The module also provides these helpers:

- `is_valid_word`
- `read_words`
- `sort_by_length`
- `scramble`

## Game of Life

```
life              # interactive
life script.txt   # replay commands from a file
```

| command | effect                                    |
|---------|-------------------------------------------|
| `a X Y` | bring the cell at row X, column Y to life |
| `r X Y` | kill the cell at row X, column Y          |
| `n`     | advance one generation                    |
| `p`     | play generations forever                  |
| `q`     | quit                                      |

Interactive mode:

- The board is drawn before each prompt.
- Cells outside the board are ignored.
- An unknown or malformed command prints `Please enter a valid input`.
- End of input ends the session, as does `q`.

Script mode:

- The board is drawn before each line, with a short pause.
- Only `a` and `p` lines are carried out. Any other line prints `Improper file format`.

Playing runs until you interrupt it with Ctrl-C.

From Python:

```python
from recreations.life import Board, apply_command

board = Board(40)
for y in (4, 5, 6):
    board.add(5, y)
apply_command(board, "n")
print(board.render())
```

## Fractals

```
fractals FIGURE OUTPUT [--width W] [--height H] [--margin M]
```

`FIGURE` is a key from `1` to `8`:

| key | figure               |
|-----|----------------------|
| 1   | Sierpinski triangles |
| 2   | shrinking squares    |
| 3   | spiral of squares    |
| 4   | circles              |
| 5   | snowflake            |
| 6   | tree                 |
| 7   | fern                 |
| 8   | spiral of spirals    |

`OUTPUT` is an image file. Pillow picks the format from the file's extension, for example `.png`. The canvas is 700×700 with a 20-pixel margin unless you give other sizes. The figure is drawn in white on black.

From Python, each figure function yields plain `Line`, `Circle` and `Point` records. `figure` collects the shapes for one numbered figure, and `render` draws them:

```python
from recreations.fractals import figure, render

shapes = figure("1", 700, 700, 20)
render(shapes, 700, 700).save("sierpinski.png")
```

## What it does not do

`fractals` opens no window and takes no key presses. It writes one figure to one image file per run.