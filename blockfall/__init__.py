"""A falling-block puzzle game for the terminal: pieces, board, game loop and curses screen."""

__version__ = "0.1.0"