"""Growth and poison items that appear on the map and expire."""

from __future__ import annotations

import curses
import time
from collections.abc import Callable
from contextlib import suppress
from dataclasses import dataclass

from snakegate.common import ItemEffect, Point

ITEM_LIFETIME = 20.0


@dataclass(frozen=True)
class Item:
    """An item at a position, created at a clock reading in seconds."""

    position: Point
    growth: bool
    created: float


class ItemManager:
    """Keeps the live items and expires them after their lifetime."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._items: list[Item] = []

    @property
    def items(self) -> tuple[Item, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def update(self) -> None:
        """Drop items that have lived for the full lifetime."""
        now = self._clock()
        self._items = [i for i in self._items if now - i.created < ITEM_LIFETIME]

    def spawn(self, point: Point, growth: bool) -> None:
        self._items.append(Item(point, growth, self._clock()))

    def consume_at(self, point: Point) -> ItemEffect:
        """Remove the first item at ``point`` and return its effect."""
        for index, item in enumerate(self._items):
            if item.position == point:
                del self._items[index]
                return ItemEffect.GROWTH if item.growth else ItemEffect.POISON
        return ItemEffect.NONE

    def draw(self, window) -> None:
        """Paint growth items as '+' and poison items as '-'."""
        for item in self._items:
            text, color = ("+", 5) if item.growth else ("-", 6)
            with suppress(curses.error):
                window.addstr(item.position.y, item.position.x, text, curses.color_pair(color))