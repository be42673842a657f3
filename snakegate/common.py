"""Basic value types shared across the game: points, directions and item effects."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Direction(enum.Enum):
    """A direction of travel, valued by its (dy, dx) offset."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def dy(self) -> int:
        return self.value[0]

    @property
    def dx(self) -> int:
        return self.value[1]

    def is_opposite(self, other: Direction) -> bool:
        """Return True if ``other`` points exactly the other way."""
        return self.dy == -other.dy and self.dx == -other.dx


@dataclass(frozen=True, slots=True)
class Point:
    """A cell on the screen, row first."""

    y: int
    x: int

    def step(self, direction: Direction) -> Point:
        """Return the neighbouring point one cell away in ``direction``."""
        return Point(self.y + direction.dy, self.x + direction.dx)


class ItemEffect(enum.Enum):
    """What eating a cell's content does to the snake."""

    NONE = enum.auto()
    GROWTH = enum.auto()
    POISON = enum.auto()