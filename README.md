# stacklab

Eight small console programs that are built on stacks and queues. You can also import each one as a library module.

## Installation

```
pip install .
```

It needs Python 3.10 or later and has no third-party dependencies.

## Commands

| Command | What it does |
| --- | --- |
| `stacklab-infix [expression]` | Takes an infix expression from its arguments, or asks for one. It prints the postfix form and then the value to two decimals. It handles `+ - * / ^`, parentheses, decimals and signed numbers. |
| `stacklab-notepad` | A note pad driven by `add <text>`, `undo`, `redo`, `view` and `exit`. It holds at most 100 entries. |
| `stacklab-maze` | Reads the maze size (`rows cols`) and then the rows from standard input. `S` is the start, `E` the exit, `0` a path and `1` a wall. It searches depth-first and prints the route marked with `*`. |
| `stacklab-dna [sequence]` | Checks that the second half of a DNA string pairs with the first half read in reverse (A–T, G–C). It reports the first pair that does not match. |
| `stacklab-player` | A music player driven by `play <title>`, `prev`, `next`, `list` and `exit`. |
| `stacklab-autocomplete` | You type one character per line and it suggests fruit names. `/u` undoes, `/r` redoes and `/q` quits. |
| `stacklab-chat` | A chat log of at most ten messages, driven by `send`, `view`, `delete` and `exit`. When the log is full, the oldest message is dropped. |
| `stacklab-cards` | A shuffled 52-card deck driven by `draw`, `return`, `shuffle`, `status` and `exit`. |

The interactive commands stop at the end of input, as well as on `exit`.

## Library use

### `stacklab.infix`

```python
from stacklab.infix import infix_to_postfix, evaluate_postfix, precedence

postfix = infix_to_postfix("(3.5+4.2)*2")   # "3.5 4.2 + 2 * "
round(evaluate_postfix(postfix), 2)          # 15.4
precedence("^")                              # 3; unknown operators give -1
```

`ExpressionError` (a `ValueError`) is raised in these cases:

- mismatched parentheses
- an invalid character
- too few operands
- a malformed expression
- division by zero

### `stacklab.notepad`

```python
from stacklab.notepad import Notepad

pad = Notepad()
pad.add("first line")
pad.undo()       # "first line"; None when there is nothing to undo
pad.redo()       # "first line"; None when there is nothing to redo
pad.entries()    # ["first line"]
```

Adding an entry clears the redo history. If the pad is at capacity (100 by default), `add` raises `StackFullError`.

### `stacklab.maze`

```python
from stacklab.maze import find_path, mark_path

grid = ["S01", "00E"]
path = find_path(grid)        # list of (row, col) from S to E, or None
print("\n".join(mark_path(grid, path)))
```

Neighbours are tried in the order up, down, left, right. `MazeError` is raised in these cases:

- the rows have unequal lengths
- there is no `S`
- the maze is larger than 100×100
- the search stack grows beyond 100 cells

### `stacklab.dna`

```python
from stacklab.dna import find_mismatch, is_pair

find_mismatch("ATGCAT")   # None: every pair matches
find_mismatch("AAAA")     # Mismatch(stacked='A', current='A', position=3)
is_pair("G", "C")         # True
```

`position` is 1-based. A string of odd length raises `OddLengthError`.

### `stacklab.player`

`Player` has the following members:

- `play(title)`
- `previous()`
- `next()`
- `history()` (most recent first)
- `upcoming()`
- the `current` title

`previous` and `next` return the new song, or `None` when there is nowhere to move.

### `stacklab.autocomplete`

`Autocomplete` has the following members:

- `type_char(ch)`
- `undo()`
- `redo()`
- `text()`
- `suggestions()`

It uses a built-in fruit dictionary unless you pass a list of words. `is_prefix(prefix, word)` compares without regard to case. `type_char` raises `ValueError` for anything that is not a single character, and `StackFullError` when the input is full.

### `stacklab.chat`

`MessageQueue` has `send(message)`, `delete()` and `messages()`. `send` returns the message it dropped to make room, or `None` if it dropped nothing. `delete` returns the oldest message, or `None` if the queue is empty.

### `stacklab.cards`

`Deck` has `shuffle(rng=None)`, `draw()`, `return_last()` and `suit_counts()`.

- The cards are `Card(suit, rank)` values built from the `Suit` and `Rank` enums. `str(card)` gives names such as `"Heart A"`.
- `draw` raises `IndexError` when the deck is empty.
- `return_last` raises `IndexError` when no card has been drawn.

## Running the tests

```
pip install .[test]
pytest
```