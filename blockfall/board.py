"""The playing field: settled cells, the falling piece and its ghost."""

from __future__ import annotations

import random
from dataclasses import replace
from enum import Enum

from .pieces import PIECES, Piece
from .terminal import (
    BORDER_HORIZONTAL,
    BORDER_VERTICAL,
    CORNER_BOTLEFT,
    CORNER_BOTRIGHT,
    CORNER_TOPLEFT,
    CORNER_TOPRIGHT,
    FALLING,
    FULL,
    GHOST,
    NCH,
)

HSQUARES = 10
VSQUARES = 20
REQUIRED_WIDTH = 1 + HSQUARES * NCH + 1

DEFAULT_COLOUR = 8
GHOST_COLOUR = 3

# Every piece index five times; a draw picks one entry uniformly.
_POOL = tuple(range(len(PIECES))) * 5


class Movement(Enum):
    """A move the player (or gravity) can make with the falling piece."""

    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    ROTATE = "rotate"


class Board:
    """A grid of settled cells with one falling piece.

    ``buffer[y][x]`` holds the colour of a settled cell, or 0 when empty.
    """

    def __init__(self, term, rng: random.Random | None = None) -> None:
        self.term = term
        self.rng = rng if rng is not None else random.Random()
        self.buffer: list[list[int]] = [[0] * HSQUARES for _ in range(VSQUARES)]
        self.current_piece = Piece()
        self.ghost = Piece()
        self.falling = False
        self.history = [len(PIECES), 0, 0, 0]

    def random_index(self) -> int:
        """Pick the next piece index, never one of the last four picked."""
        while True:
            choice = _POOL[self.rng.randint(0, len(_POOL) - 1)]
            if choice not in self.history:
                break
        self.history = [choice, *self.history[:-1]]
        return choice

    def add_piece(self) -> None:
        """Spawn a new piece above the top edge unless one is still falling."""
        if self.falling:
            return
        template = PIECES[self.random_index()]
        self.current_piece = replace(
            template, x=HSQUARES // 2 - template.size // 2, y=-2
        )
        self.falling = True

    def clear_lines(self) -> int:
        """Remove full rows, shifting the rows above them down; return the count."""
        lines = 0
        for i, row in enumerate(self.buffer):
            if all(row):
                # Rows above move down one; the top row keeps its contents.
                self.buffer[1 : i + 1] = [list(r) for r in self.buffer[:i]]
                lines += 1
        return lines

    def move(self, movement: Movement) -> bool:
        """Apply a movement to the falling piece.

        Returns True when the game is over: nothing is falling, or the piece
        settled while still partly above the board.
        """
        if not self.falling:
            return True

        pc = self.current_piece
        if movement is Movement.LEFT:
            if pc.x + pc.xmin > 0:
                pc = pc.moved(-1, 0)
        elif movement is Movement.RIGHT:
            if pc.x + pc.xmax < HSQUARES:
                pc = pc.moved(1, 0)
        elif movement is Movement.ROTATE:
            pc = self._rotate(pc)
        elif movement is Movement.DOWN:
            if pc.y + pc.ymax < VSQUARES:
                pc = pc.moved(0, 1)

        if self.check(pc):
            self.current_piece = pc
            self.ghost = self._drop_position(pc)
            return False

        pc = self.current_piece
        if movement is Movement.DOWN:
            if pc.y < 0:
                return True
            self.falling = False
            self._settle(pc)
        return False

    def _rotate(self, pc: Piece) -> Piece:
        turned = pc.rotated()
        if self.check(turned):
            return turned
        if pc.y + pc.ymin <= 0:
            return pc
        lifted = pc.moved(0, -1).rotated()
        if self.check(lifted):
            return lifted
        if lifted.x + lifted.xmin < 0:
            pc = pc.moved(-(lifted.x + lifted.xmin), 0)
        elif lifted.x + lifted.xmax >= HSQUARES - 1:
            pc = pc.moved(-1, 0)
        return pc.rotated()

    def _drop_position(self, pc: Piece) -> Piece:
        while True:
            last = pc
            pc = pc.moved(0, 1)
            if not (pc.y + pc.ymax < VSQUARES and self.check(pc)):
                return last

    def _settle(self, pc: Piece) -> None:
        for y in range(pc.y + pc.ymin, pc.y + pc.ymax + 1):
            for x in range(pc.x + pc.xmin, pc.x + pc.xmax + 1):
                if x < 0 or y < 0:
                    continue
                if pc.at(x - pc.x, y - pc.y):
                    self.buffer[y][x] = pc.colour

    def check(self, piece: Piece) -> bool:
        """Return whether the piece fits on the board without overlapping."""
        if piece.x + piece.xmax >= HSQUARES or piece.y + piece.ymax >= VSQUARES:
            return False
        if piece.x + piece.xmin < 0:
            return False
        for y in range(piece.y + piece.ymin, piece.y + piece.ymax + 1):
            if y < 0:
                continue
            for x in range(piece.x + piece.xmin, piece.x + piece.xmax + 1):
                if x < 0 or (self.buffer[y][x] and piece.at(x - piece.x, y - piece.y)):
                    return False
        return True

    def _covers(self, piece: Piece, size: int, x: int, y: int) -> bool:
        return (
            self.falling
            and piece.x <= x < piece.x + size
            and piece.y <= y < piece.y + size
            and piece.at(x - piece.x, y - piece.y)
        )

    def draw(self, title: str) -> None:
        """Draw the border, the title, settled cells, the falling piece and its ghost."""
        if len(title) - 2 > REQUIRED_WIDTH - 2:
            raise ValueError("title is too wide for the board")

        def printat(x: int, y: int, text: str, colour: int = DEFAULT_COLOUR) -> None:
            self.term.printat(x, y, text, colour)

        right = REQUIRED_WIDTH - 1
        bottom = VSQUARES + 1
        for y in range(1, VSQUARES + 1):
            printat(0, y, BORDER_VERTICAL)
            printat(right, y, BORDER_VERTICAL)

        printat(0, 0, CORNER_TOPLEFT)
        printat(0, bottom, CORNER_BOTLEFT)
        for x in range(1, right):
            printat(x, 0, BORDER_HORIZONTAL)
            printat(x, bottom, BORDER_HORIZONTAL)
        printat(right, 0, CORNER_TOPRIGHT)
        printat(right, bottom, CORNER_BOTRIGHT)

        printat(REQUIRED_WIDTH // 2 - len(title) // 2, 0, title)

        current = self.current_piece
        size = current.size
        for y, row in enumerate(self.buffer):
            for x, cell in enumerate(row):
                column = x * NCH + 1
                if self._covers(current, size, x, y):
                    printat(column, y + 1, FALLING, current.colour)
                elif cell:
                    printat(column, y + 1, FULL, cell)
                elif self._covers(self.ghost, size, x, y):
                    printat(column, y + 1, GHOST, GHOST_COLOUR)