"""Command-line entry point that starts the game in the terminal."""

from __future__ import annotations

import argparse
import curses
from contextlib import suppress

from snakegate.game import Game, init_colors

MIN_HEIGHT = 21
MIN_WIDTH = 67


def _session(stdscr) -> bool:
    """Play one game; return False if the terminal is too small to start."""
    height, width = stdscr.getmaxyx()
    if height < MIN_HEIGHT or width < MIN_WIDTH:
        return False
    with suppress(curses.error):
        curses.curs_set(0)
    init_colors()
    Game(height, width).run(stdscr)
    return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="snakegate",
        description="Snake with growth and poison items, gates and missions.",
    )
    parser.parse_args(argv)
    if not curses.wrapper(_session):
        print("Terminal window is too small.")
        print(f"Please resize it to be at least {MIN_WIDTH}x{MIN_HEIGHT} and run again.")
    return 0