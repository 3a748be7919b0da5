# blockfall

A falling-block puzzle game that runs in your terminal.

The playing field is 10 squares wide and 20 squares tall. Each new piece
appears just above the top edge and falls one row at a time; a filled row is
cleared and the rows above it move down. Every 10 cleared rows raise the
level, and each level shortens the time between falling steps. A shaded
ghost shows where the falling piece would land. A new piece is never one of
the four pieces dealt most recently.

## Installing

```
pip install .
```

The game draws with the standard `curses` module, so it needs a terminal
and a Python build that provide it (any common Unix terminal will do).
Colours are used when the terminal offers them.

## Playing

```
blockfall
```

The same game can be started with `python -m blockfall.game`. The command
takes no options besides `-h`/`--help`.

| Key                  | Action                      |
|----------------------|-----------------------------|
| Left arrow or `a`    | Move left                   |
| Right arrow or `d`   | Move right                  |
| Up arrow or `w`      | Rotate                      |
| Down arrow or `s`    | Soft drop                   |
| Space                | Hard drop                   |
| `p` / `P`            | Pause and resume            |
| `q`, `Q`, `x`, `X`   | Quit                        |

The game ends when a piece comes to rest while still partly above the
field. Ctrl-C also ends it. When the game is over, the final level and the
number of lines cleared towards the next level are printed, for example:

```
Game over. level: 3, extra lines: 4
```

## Using it from Python

- `blockfall.pieces.Piece` — an immutable shape in a square grid with a
  colour and a position; `at(x, y)` tells whether a grid cell is filled,
  `rotated()` returns it turned a quarter turn clockwise, `moved(dx, dy)`
  returns it shifted. `blockfall.pieces.PIECES` holds the seven shapes.
- `blockfall.board.Board` and `blockfall.board.Movement` — the playing
  field. `Board(term, rng)` takes anything with a
  `printat(x, y, text, colour)` method and an optional `random.Random`.
  It offers `add_piece()`, `move(movement)` (returns `True` when the game is
  over), `check(piece)`, `clear_lines()`, `random_index()` and
  `draw(title)`.
- `blockfall.game.Game` — the main loop (`start()`), with `score()`,
  `add_lines(count)` and `title(paused)`; `blockfall.game.delay_for_level`
  gives the milliseconds between falling steps at a level, and
  `blockfall.game.main` is the command's entry point.
- `blockfall.terminal.Terminal` — the curses screen, usable as a context
  manager; drawing and key reads do nothing until it is started.

## What it does not do

There is no points score, no saved high scores, no preview of the next
piece and no hold slot. The only record of a game is the level and line
count printed at the end.

## Running the tests

```
pip install .[test]
pytest
```