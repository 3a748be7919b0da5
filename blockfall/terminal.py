"""Curses-backed terminal used to draw the board and read keys."""

from __future__ import annotations

import curses
import locale

FULL = "██"
FALLING = "▒▒"
GHOST = "░░"
NCH = 2

BORDER_VERTICAL = "┃"
BORDER_HORIZONTAL = "━"
CORNER_TOPLEFT = "┏"
CORNER_TOPRIGHT = "┓"
CORNER_BOTLEFT = "┗"
CORNER_BOTRIGHT = "┛"

# Colour pairs 1..8, indexed by piece colour.
_PAIR_COLOURS = (
    curses.COLOR_CYAN,
    curses.COLOR_BLUE,
    curses.COLOR_WHITE,
    curses.COLOR_YELLOW,
    curses.COLOR_GREEN,
    curses.COLOR_RED,
    curses.COLOR_MAGENTA,
    curses.COLOR_WHITE,
)


class Terminal:
    """A full-screen, non-blocking terminal session.

    Drawing and key reads are no-ops until :meth:`init` has been called.
    """

    def __init__(self) -> None:
        self.inited = False
        self.colours = False
        self._screen = None

    def init(self) -> None:
        """Enter curses mode; calling it again while active does nothing."""
        if self.inited:
            return
        try:
            locale.setlocale(locale.LC_ALL, "")
        except locale.Error:
            pass

        screen = curses.initscr()
        self.colours = bool(curses.has_colors())
        if self.colours:
            curses.start_color()
            curses.use_default_colors()
            for pair, colour in enumerate(_PAIR_COLOURS, start=1):
                curses.init_pair(pair, colour, -1)

        screen.keypad(True)
        screen.nodelay(True)
        curses.cbreak()
        curses.noecho()
        try:
            curses.curs_set(0)
        except curses.error:
            pass

        screen.erase()
        screen.refresh()

        self._screen = screen
        self.inited = True

    def deinit(self) -> None:
        """Leave curses mode if it is active."""
        if self.inited:
            curses.endwin()
            self.inited = False
            self._screen = None

    def __enter__(self) -> Terminal:
        self.init()
        return self

    def __exit__(self, *args) -> None:
        self.deinit()

    def width(self) -> int:
        """Number of columns on the screen."""
        return getattr(curses, "COLS", 0)

    def height(self) -> int:
        """Number of lines on the screen."""
        return getattr(curses, "LINES", 0)

    def refresh(self) -> None:
        if self.inited:
            self._screen.refresh()

    def clear(self) -> None:
        if self.inited:
            self._screen.erase()

    def getkey(self) -> int:
        """Return the pending key code, -1 if none, or 0 when not active."""
        if not self.inited:
            return 0
        return self._screen.getch()

    def printat(self, x: int, y: int, text: str, colour: int) -> None:
        """Write text at column x, line y in the given colour pair."""
        if not self.inited:
            return
        screen = self._screen
        attr = curses.color_pair(colour) if self.colours else 0
        if self.colours:
            screen.attron(attr)
        try:
            screen.addstr(y, x, text)
        except curses.error:
            pass
        finally:
            if self.colours:
                screen.attroff(attr)