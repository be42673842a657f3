"""A pair of linked gates that open on map walls and close again on a timer."""

from __future__ import annotations

import curses
import random
import time
from collections.abc import Callable
from contextlib import suppress

from snakegate.common import Point
from snakegate.gamemap import GameMap

GATE_FIRST_DELAY = 10.0
GATE_LIFETIME = 20.0
GATE_COOLDOWN = 10.0

_GATE_COLOR = 8


class GateManager:
    """Opens two gates on random wall cells, keeps them open, then closes them."""

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        rng: random.Random | None = None,
    ):
        self._clock = clock
        self._rng = rng if rng is not None else random.Random()
        self._gates: list[Point] = []
        self._active = False
        self._next_action = clock() + GATE_FIRST_DELAY

    @property
    def active(self) -> bool:
        return self._active

    @property
    def gates(self) -> tuple[Point, ...]:
        return tuple(self._gates)

    def update(self, game_map: GameMap) -> None:
        """Open or close the gates once their time has come."""
        now = self._clock()
        if now < self._next_action:
            return
        if self._active:
            self._despawn(game_map)
            self._active = False
            self._next_action = now + GATE_COOLDOWN
        else:
            self._spawn(game_map)
            self._active = True
            self._next_action = now + GATE_LIFETIME

    def draw(self, window) -> None:
        """Paint open gates as 'G' onto a curses window."""
        if not self._active:
            return
        for gate in self._gates:
            with suppress(curses.error):
                window.addstr(gate.y, gate.x, "G", curses.color_pair(_GATE_COLOR))

    def is_gate(self, point: Point) -> bool:
        return self._active and point in self._gates

    def exit_for(self, point: Point) -> Point:
        """Return the gate paired with ``point``, or ``point`` itself if it is not a gate."""
        if len(self._gates) == 2:
            first, second = self._gates
            if point == first:
                return second
            if point == second:
                return first
        return point

    def _spawn(self, game_map: GameMap) -> None:
        self._gates.clear()
        walls = game_map.wall_positions()
        if len(walls) < 2:
            return
        self._gates.extend(self._rng.sample(walls, 2))
        for gate in self._gates:
            game_map.place_gate(gate)

    def _despawn(self, game_map: GameMap) -> None:
        for gate in self._gates:
            game_map.remove_gate(gate)
        self._gates.clear()