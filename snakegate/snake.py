"""The snake: an ordered body of points with a heading."""

from __future__ import annotations

import curses
from contextlib import suppress

from snakegate.common import Direction, Point

_HEAD_COLOR = 3
_BODY_COLOR = 4


class Snake:
    """A snake whose first body point is its head."""

    def __init__(self, start: Point, direction: Direction, length: int):
        self.direction = direction
        self._body = [Point(start.y, start.x - i) for i in range(length)]

    @property
    def head(self) -> Point:
        return self._body[0]

    @property
    def body(self) -> tuple[Point, ...]:
        return tuple(self._body)

    def __len__(self) -> int:
        return len(self._body)

    def move(self) -> None:
        """Advance one cell in the current direction, keeping the length."""
        self._body.insert(0, self.head.step(self.direction))
        self._body.pop()

    def set_direction(self, direction: Direction) -> bool:
        """Turn to ``direction``; refuse a reversal and return False for it."""
        if self.direction.is_opposite(direction):
            return False
        self.direction = direction
        return True

    def grow(self) -> None:
        """Lengthen by one segment right behind the head."""
        if self._body:
            self._body.insert(1, self._body[0])

    def shrink(self) -> None:
        """Drop the tail, never below a single segment."""
        if len(self._body) > 1:
            self._body.pop()

    def prepend_head(self, point: Point) -> None:
        """Put a new head at ``point`` without dropping the tail."""
        self._body.insert(0, point)

    def collides_with_self(self) -> bool:
        return self.head in self._body[1:]

    def occupies(self, point: Point) -> bool:
        return point in self._body

    def draw(self, window) -> None:
        """Paint the body and then the head onto a curses window."""
        for segment in self._body[1:]:
            with suppress(curses.error):
                window.addstr(segment.y, segment.x, "o", curses.color_pair(_BODY_COLOR))
        with suppress(curses.error):
            window.addstr(self.head.y, self.head.x, "@", curses.color_pair(_HEAD_COLOR))