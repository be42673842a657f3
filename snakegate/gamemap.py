"""The playing field: outer walls, immune corners, inner walls and gates."""

from __future__ import annotations

import curses
import enum
import random
from contextlib import suppress

from snakegate.common import Point

_SIDE_PANEL_WIDTH = 25


class Cell(enum.IntEnum):
    """What occupies a single map cell."""

    EMPTY = 0
    WALL = 1
    IMMUNE_WALL = 2
    GATE = 3


_CELL_COLORS = {
    Cell.EMPTY: 7,
    Cell.WALL: 1,
    Cell.IMMUNE_WALL: 2,
    Cell.GATE: 8,
}


class GameMap:
    """A rectangular map sized to fit the terminal beside the score panel."""

    def __init__(self, term_height: int, term_width: int, rng: random.Random | None = None):
        self.height = term_height
        self.width = min(term_width - _SIDE_PANEL_WIDTH, term_height * 2)
        self.center = Point(self.height // 2, self.width // 2)
        self._rng = rng if rng is not None else random.Random()

        c = self.center
        if c.y - 5 < 0 or c.y + 5 >= self.height or c.x + 9 >= self.width:
            raise ValueError(
                f"terminal {term_height}x{term_width} is too small for the map layout"
            )

        last_y, last_x = self.height - 1, self.width - 1
        self._grid: list[list[Cell]] = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                on_edge_y = y in (0, last_y)
                on_edge_x = x in (0, last_x)
                if on_edge_y and on_edge_x:
                    row.append(Cell.IMMUNE_WALL)
                elif on_edge_y or on_edge_x:
                    row.append(Cell.WALL)
                else:
                    row.append(Cell.EMPTY)
            self._grid.append(row)

        for dx in range(10):
            self._grid[c.y][c.x + dx] = Cell.WALL
        for dy in range(-5, 6):
            self._grid[c.y + dy][c.x] = Cell.WALL

    def _in_bounds(self, point: Point) -> bool:
        return 0 <= point.y < self.height and 0 <= point.x < self.width

    def __getitem__(self, point: Point) -> Cell:
        if not self._in_bounds(point):
            raise IndexError(f"{point} is outside the map")
        return self._grid[point.y][point.x]

    def is_wall(self, point: Point) -> bool:
        """Return True for walls, immune walls and anything off the map."""
        if not self._in_bounds(point):
            return True
        return self._grid[point.y][point.x] in (Cell.WALL, Cell.IMMUNE_WALL)

    def random_empty_position(self) -> Point:
        """Pick a random empty cell."""
        while True:
            y = self._rng.randrange(self.height)
            x = self._rng.randrange(self.width)
            if self._grid[y][x] is Cell.EMPTY:
                return Point(y, x)

    def wall_positions(self) -> list[Point]:
        """All plain wall cells, in row-major order; candidates for gates."""
        return [
            Point(y, x)
            for y, row in enumerate(self._grid)
            for x, cell in enumerate(row)
            if cell is Cell.WALL
        ]

    def place_gate(self, point: Point) -> None:
        """Turn a cell into a gate; points off the map are ignored."""
        if self._in_bounds(point):
            self._grid[point.y][point.x] = Cell.GATE

    def remove_gate(self, point: Point) -> None:
        """Turn a gate back into a wall; points off the map are ignored."""
        if self._in_bounds(point):
            self._grid[point.y][point.x] = Cell.WALL

    def draw(self, window) -> None:
        """Paint every cell onto a curses window."""
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                with suppress(curses.error):
                    window.addstr(y, x, " ", curses.color_pair(_CELL_COLORS[cell]))