"""The game loop: input, state updates, gate passage and rendering."""

from __future__ import annotations

import curses
import enum
import random
import time
from collections.abc import Callable
from contextlib import suppress

from snakegate.common import Direction, ItemEffect, Point
from snakegate.gamemap import GameMap
from snakegate.gates import GateManager
from snakegate.items import ItemManager
from snakegate.scoreboard import Scoreboard
from snakegate.snake import Snake

TICK_RATE = 0.2
SPAWN_INTERVAL = 5.0
MAX_ITEMS = 3
INITIAL_LENGTH = 5
MIN_LENGTH = 3

_KEY_DIRECTIONS = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
}

_CLOCKWISE = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}

_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class GameState(enum.Enum):
    PLAYING = enum.auto()
    PASSING_THROUGH_GATE = enum.auto()
    GAME_OVER = enum.auto()


def init_colors() -> None:
    """Define the colour pairs used by every drawn element."""
    pairs = [
        (1, curses.COLOR_BLACK, curses.COLOR_CYAN),
        (2, curses.COLOR_WHITE, curses.COLOR_BLACK),
        (3, curses.COLOR_BLACK, curses.COLOR_YELLOW),
        (4, curses.COLOR_WHITE, 208),
        (5, curses.COLOR_WHITE, curses.COLOR_GREEN),
        (6, curses.COLOR_WHITE, curses.COLOR_RED),
        (7, curses.COLOR_BLACK, curses.COLOR_WHITE),
        (8, curses.COLOR_BLACK, curses.COLOR_MAGENTA),
    ]
    for number, foreground, background in pairs:
        with suppress(curses.error):
            curses.init_pair(number, foreground, background)


class Game:
    """One game of snake with items, gates and missions."""

    def __init__(
        self,
        term_height: int,
        term_width: int,
        clock: Callable[[], float] = time.monotonic,
        rng: random.Random | None = None,
    ):
        self._clock = clock
        self._rng = rng if rng is not None else random.Random()
        self.state = GameState.PLAYING
        self.game_map = GameMap(term_height, term_width, self._rng)
        center = self.game_map.center
        self.snake = Snake(Point(center.y, center.x - 10), Direction.RIGHT, INITIAL_LENGTH)
        self.items = ItemManager(clock)
        self.gates = GateManager(clock, self._rng)
        self.scoreboard = Scoreboard(self.game_map.width)

        self.max_length = INITIAL_LENGTH
        self.growth_count = 0
        self.poison_count = 0
        self.gate_count = 0

        self._exit_position = center
        self._exit_direction = Direction.RIGHT
        self._length_before_gate = 0
        self._gate_progress = 0

        now = clock()
        self._next_tick = now
        self._next_item_spawn = now + SPAWN_INTERVAL

    def handle_key(self, key: int) -> None:
        """Turn on arrow keys, quit on 'q'; reversing the snake ends the game."""
        if key in _KEY_DIRECTIONS:
            if not self.snake.set_direction(_KEY_DIRECTIONS[key]):
                self.state = GameState.GAME_OVER
        elif key == ord("q"):
            self.state = GameState.GAME_OVER

    def tick(self) -> None:
        """Advance the game by one step according to its state."""
        if self.state is GameState.PLAYING:
            self._tick_playing()
        elif self.state is GameState.PASSING_THROUGH_GATE:
            self._tick_passing()

    def _tick_playing(self) -> None:
        self.gates.update(self.game_map)
        self.snake.move()
        head = self.snake.head

        if self.gates.is_gate(head):
            self.gate_count += 1
            self.state = GameState.PASSING_THROUGH_GATE
            self._length_before_gate = len(self.snake)
            self._gate_progress = 0
            exit_gate = self.gates.exit_for(head)
            self._exit_position, self._exit_direction = self.calculate_exit(
                exit_gate, self.snake.direction
            )
            self.snake.set_direction(self._exit_direction)
            return

        if self.game_map.is_wall(head) or self.snake.collides_with_self():
            self.state = GameState.GAME_OVER
            return

        now = self._clock()
        if now >= self._next_item_spawn and len(self.items) < MAX_ITEMS:
            point = self.game_map.random_empty_position()
            while self.snake.occupies(point):
                point = self.game_map.random_empty_position()
            self.items.spawn(point, self._rng.randrange(2) == 0)
            self._next_item_spawn = now + SPAWN_INTERVAL
        self.items.update()

        effect = self.items.consume_at(head)
        if effect is ItemEffect.GROWTH:
            self.snake.grow()
            self.growth_count += 1
            self.max_length = max(self.max_length, len(self.snake))
        elif effect is ItemEffect.POISON:
            self.snake.shrink()
            self.poison_count += 1

        if len(self.snake) <= MIN_LENGTH:
            self.state = GameState.GAME_OVER
            return

        self.scoreboard.update(
            len(self.snake),
            self.max_length,
            self.growth_count,
            self.poison_count,
            self.gate_count,
        )
        if self.scoreboard.all_missions_complete():
            self.state = GameState.GAME_OVER

    def _tick_passing(self) -> None:
        self.snake.shrink()
        if self._gate_progress == 0:
            new_head = self._exit_position
        else:
            new_head = self.snake.head.step(self._exit_direction)
        self.snake.prepend_head(new_head)
        self._gate_progress += 1
        if self._gate_progress >= self._length_before_gate:
            self.state = GameState.PLAYING

    def calculate_exit(self, gate: Point, entry_direction: Direction) -> tuple[Point, Direction]:
        """Where and in which direction the snake leaves through ``gate``."""
        last_y = self.game_map.height - 1
        last_x = self.game_map.width - 1
        if gate.y == 0:
            return gate.step(Direction.DOWN), Direction.DOWN
        if gate.y == last_y:
            return gate.step(Direction.UP), Direction.UP
        if gate.x == 0:
            return gate.step(Direction.RIGHT), Direction.RIGHT
        if gate.x == last_x:
            return gate.step(Direction.LEFT), Direction.LEFT

        clockwise = _CLOCKWISE[entry_direction]
        candidates = (
            entry_direction,
            clockwise,
            _OPPOSITE[clockwise],
            _OPPOSITE[entry_direction],
        )
        for direction in candidates:
            position = gate.step(direction)
            if not self.game_map.is_wall(position):
                return position, direction
        return gate, entry_direction

    def render(self, window) -> None:
        """Redraw the whole screen."""
        window.erase()
        self.game_map.draw(window)
        self.gates.draw(window)
        self.snake.draw(window)
        self.items.draw(window)
        self.scoreboard.draw(window)
        window.refresh()

    def run(self, window) -> None:
        """Read keys and advance at the tick rate until the game is over."""
        window.keypad(True)
        window.nodelay(True)
        while self.state is not GameState.GAME_OVER:
            self.handle_key(window.getch())
            now = self._clock()
            if now >= self._next_tick:
                self.tick()
                self.render(window)
                self._next_tick += TICK_RATE
            else:
                time.sleep(min(self._next_tick - now, 0.01))