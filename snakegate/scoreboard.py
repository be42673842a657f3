"""The score and mission panels shown beside the map."""

from __future__ import annotations

import curses
from contextlib import suppress
from dataclasses import dataclass

_BOARD_TOP = 2
_BOARD_WIDTH = 26
_BOARD_HEIGHT = 6


@dataclass
class Mission:
    """A target for one counter; once reached it stays completed."""

    name: str
    target: int
    current: int = 0
    completed: bool = False


class Scoreboard:
    """Tracks scores and missions and paints both panels."""

    def __init__(self, map_width: int):
        self.left = map_width + 3
        self.current_length = 0
        self.max_length = 0
        self.growth_items = 0
        self.poison_items = 0
        self.gate_usage = 0
        self.missions = [
            Mission("B", 10),
            Mission("+", 5),
            Mission("-", 2),
            Mission("G", 1),
        ]

    def update(
        self,
        current_length: int,
        max_length: int,
        growth_items: int,
        poison_items: int,
        gate_usage: int,
    ) -> None:
        """Record the latest counters and mark missions whose target is reached."""
        self.current_length = current_length
        self.max_length = max_length
        self.growth_items = growth_items
        self.poison_items = poison_items
        self.gate_usage = gate_usage
        values = (max_length, growth_items, poison_items, gate_usage)
        for mission, value in zip(self.missions, values):
            mission.current = value
            if mission.current >= mission.target:
                mission.completed = True

    def all_missions_complete(self) -> bool:
        return all(mission.completed for mission in self.missions)

    def draw(self, window) -> None:
        """Paint the score panel and, below it, the mission panel."""
        score_top = _BOARD_TOP
        self._draw_panel(window, score_top, "Score Board", self._score_lines())
        mission_top = _BOARD_TOP + _BOARD_HEIGHT + 2
        self._draw_panel(window, mission_top, "Mission", self._mission_lines())

    def _score_lines(self) -> list[str]:
        return [
            f"B: (current){self.current_length} / (max){self.max_length}",
            f"+: {self.growth_items}",
            f"-: {self.poison_items}",
            f"G: {self.gate_usage}",
        ]

    def _mission_lines(self) -> list[str]:
        return [
            f"{m.name}: {m.target} ({'v' if m.completed else ' '})"
            for m in self.missions
        ]

    def _draw_panel(self, window, top: int, title: str, lines: list[str]) -> None:
        def put(y: int, x: int, text: str) -> None:
            with suppress(curses.error):
                window.addstr(y, x, text)

        for i in range(_BOARD_WIDTH):
            put(top, self.left + i, "-")
            put(top + _BOARD_HEIGHT, self.left + i, "-")
        for i in range(_BOARD_HEIGHT + 1):
            put(top + i, self.left, "|")
            put(top + i, self.left + _BOARD_WIDTH, "|")
        put(top + 1, self.left + 2, title)
        for row, text in enumerate(lines, start=2):
            put(top + row, self.left + 2, text)