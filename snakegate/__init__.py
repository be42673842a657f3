"""A curses snake game with growth and poison items, warp gates and missions."""

__version__ = "0.1.0"