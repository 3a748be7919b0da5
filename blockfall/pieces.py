"""Tetromino shapes and their rotation."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

Grid = tuple[tuple[bool, ...], ...]


@dataclass(frozen=True)
class Piece:
    """A shape in a square grid, with a colour and a position on the board.

    The extents ``xmin``/``xmax``/``ymin``/``ymax`` are the bounds of the
    filled cells within the grid; they are all zero for an empty grid.
    """

    cells: Grid = ()
    colour: int = 8
    x: int = 0
    y: int = 0
    xmin: int = field(init=False, default=0)
    xmax: int = field(init=False, default=0)
    ymin: int = field(init=False, default=0)
    ymax: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        grid = tuple(tuple(value == 1 for value in row) for row in self.cells)
        size = len(grid)
        if any(len(row) != size for row in grid):
            raise ValueError("piece cells must form a square grid")
        object.__setattr__(self, "cells", grid)

        filled = [
            (cx, cy)
            for cy, row in enumerate(grid)
            for cx, value in enumerate(row)
            if value
        ]
        if filled:
            xs = [cx for cx, _ in filled]
            object.__setattr__(self, "xmin", min(xs))
            object.__setattr__(self, "xmax", max(xs))
            object.__setattr__(self, "ymin", filled[0][1])
            object.__setattr__(self, "ymax", filled[-1][1])

    @property
    def size(self) -> int:
        """Side length of the piece's grid."""
        return len(self.cells)

    def at(self, x: int, y: int) -> bool:
        """Return whether the grid cell at (x, y) is filled."""
        size = self.size
        if not (0 <= x < size and 0 <= y < size):
            return False
        return self.cells[y][x]

    def rotated(self) -> Piece:
        """Return this piece turned a quarter turn clockwise in its grid."""
        n = self.size
        cells = tuple(
            tuple(self.cells[n - 1 - cx][cy] for cx in range(n))
            for cy in range(n)
        )
        return replace(self, cells=cells)

    def moved(self, dx: int, dy: int) -> Piece:
        """Return this piece shifted by (dx, dy) on the board."""
        return replace(self, x=self.x + dx, y=self.y + dy)


PIECES: tuple[Piece, ...] = (
    # I
    Piece(
        ((0, 0, 0, 0),
         (1, 1, 1, 1),
         (0, 0, 0, 0),
         (0, 0, 0, 0)),
        colour=1,
    ),
    # J
    Piece(
        ((1, 0, 0),
         (1, 1, 1),
         (0, 0, 0)),
        colour=2,
    ),
    # L
    Piece(
        ((0, 0, 1),
         (1, 1, 1),
         (0, 0, 0)),
        colour=3,
    ),
    # O
    Piece(
        ((1, 1),
         (1, 1)),
        colour=4,
    ),
    # S
    Piece(
        ((0, 1, 1),
         (1, 1, 0),
         (0, 0, 0)),
        colour=5,
    ),
    # Z
    Piece(
        ((1, 1, 0),
         (0, 1, 1),
         (0, 0, 0)),
        colour=6,
    ),
    # T
    Piece(
        ((0, 1, 0),
         (1, 1, 1),
         (0, 0, 0)),
        colour=7,
    ),
)