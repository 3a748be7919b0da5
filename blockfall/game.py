"""The game loop: timing, input handling, levels and scoring."""

from __future__ import annotations

import argparse
import curses
import signal
import time

from .board import Board, Movement
from .terminal import Terminal

LINES_PER_LEVEL = 10
SOFTDROP_DELAY_MS = 10
_IDLE_SLEEP = 0.001

_PAUSE_KEYS = {ord("p"), ord("P")}
_QUIT_KEYS = {ord("q"), ord("Q"), ord("x"), ord("X")}
_MOVE_KEYS = {
    curses.KEY_LEFT: Movement.LEFT,
    ord("a"): Movement.LEFT,
    curses.KEY_RIGHT: Movement.RIGHT,
    ord("d"): Movement.RIGHT,
    curses.KEY_UP: Movement.ROTATE,
    ord("w"): Movement.ROTATE,
}
_SOFTDROP_KEYS = {curses.KEY_DOWN, ord("s")}
_HARDDROP_KEY = ord(" ")


def delay_for_level(level: int) -> int:
    """Milliseconds between gravity steps at the given level."""
    base = 0.8 - (level - 1) * 0.007
    return max(0, int(base ** (level - 1) * 1000))


class Game:
    """A single game session on a terminal."""

    def __init__(self, term=None, board: Board | None = None) -> None:
        self.term = term if term is not None else Terminal()
        self.board = board if board is not None else Board(self.term)
        self.level = 1
        self.lines = 0
        self.game_over = False

    def score(self) -> tuple[int, int]:
        """Return (level, lines cleared towards the next level)."""
        return self.level, self.lines

    def add_lines(self, count: int) -> bool:
        """Credit cleared lines; return whether the level went up."""
        old_level = self.level
        self.lines += count
        levels, self.lines = divmod(self.lines, LINES_PER_LEVEL)
        self.level += levels
        return self.level != old_level

    def title(self, paused: bool) -> str:
        """The text shown in the top border."""
        if paused:
            return " Paused "
        return f" Level: {self.level} - {self.lines}/{LINES_PER_LEVEL} "

    def start(self) -> None:
        """Run the game until it is over or the player quits."""
        delay = delay_for_level(self.level) / 1000
        paused = False
        softdrop_delay = SOFTDROP_DELAY_MS / 1000

        def update() -> None:
            nonlocal delay
            if self.add_lines(self.board.clear_lines()):
                delay = delay_for_level(self.level) / 1000
            self.term.clear()
            self.board.draw(self.title(paused))
            self.term.refresh()

        self.term.init()
        try:
            self.board.add_piece()
            update()
            end = time.monotonic() + delay

            while not self.game_over:
                now = time.monotonic()
                softdrop = False
                should_update = False

                if not self.board.falling:
                    self.board.add_piece()

                key = self.term.getkey()
                if key == -1:
                    time.sleep(_IDLE_SLEEP)
                if key in _PAUSE_KEYS:
                    paused = not paused
                    update()
                    continue
                if key in _QUIT_KEYS:
                    break
                if paused:
                    continue

                if key in _MOVE_KEYS:
                    self.board.move(_MOVE_KEYS[key])
                    should_update = True
                elif key in _SOFTDROP_KEYS:
                    softdrop = True
                elif key == _HARDDROP_KEY:
                    while self.board.falling:
                        if self.board.move(Movement.DOWN):
                            self.game_over = True
                            break
                    if self.game_over:
                        update()
                        continue
                    should_update = True

                deadline = end - (delay - softdrop_delay) if softdrop else end
                if now < deadline:
                    if should_update:
                        update()
                    continue
                end = now + delay

                if self.board.falling and self.board.move(Movement.DOWN):
                    self.game_over = True
                update()
        finally:
            self.term.deinit()


def main(argv: list[str] | None = None) -> int:
    """Play a game in the terminal and print the final score."""
    parser = argparse.ArgumentParser(
        prog="blockfall", description="Falling-block puzzle game for the terminal."
    )
    parser.parse_args(argv)

    game = Game()

    def _stop(signum, frame) -> None:
        game.game_over = True

    previous = signal.signal(signal.SIGINT, _stop)
    try:
        game.start()
    finally:
        signal.signal(signal.SIGINT, previous)

    level, lines = game.score()
    print(f"Game over. level: {level}, extra lines: {lines}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())