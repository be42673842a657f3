import random

import pytest

from snakegate.gamemap import Cell, GameMap
from snakegate.gates import GateManager


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def setup():
    clock = FakeClock()
    game_map = GameMap(21, 67, random.Random(3))
    manager = GateManager(clock, random.Random(7))
    return clock, game_map, manager


def test_no_gates_before_first_delay(setup):
    clock, game_map, manager = setup
    clock.now = 9.9
    manager.update(game_map)
    assert not manager.active
    assert manager.gates == ()
    assert not any(cell is Cell.GATE for row in game_map._grid for cell in row)


def test_gates_open_on_two_distinct_walls(setup):
    clock, game_map, manager = setup
    walls = set(game_map.wall_positions())
    clock.now = 10.0
    manager.update(game_map)
    assert manager.active
    first, second = manager.gates
    assert first != second
    assert {first, second} <= walls
    assert game_map[first] is Cell.GATE
    assert game_map[second] is Cell.GATE
    assert manager.is_gate(first)
    assert manager.is_gate(second)


def test_exit_is_the_other_gate(setup):
    clock, game_map, manager = setup
    clock.now = 10.0
    manager.update(game_map)
    first, second = manager.gates
    assert manager.exit_for(first) == second
    assert manager.exit_for(second) == first
    elsewhere = game_map.center
    assert manager.exit_for(elsewhere) == elsewhere
    assert not manager.is_gate(elsewhere)


def test_gates_close_after_lifetime_and_reopen(setup):
    clock, game_map, manager = setup
    clock.now = 10.0
    manager.update(game_map)
    opened = manager.gates

    clock.now = 29.9
    manager.update(game_map)
    assert manager.gates == opened

    clock.now = 30.0
    manager.update(game_map)
    assert not manager.active
    assert manager.gates == ()
    assert all(game_map[gate] is Cell.WALL for gate in opened)
    assert not manager.is_gate(opened[0])

    clock.now = 39.9
    manager.update(game_map)
    assert not manager.active

    clock.now = 40.0
    manager.update(game_map)
    assert manager.active
    assert len(manager.gates) == 2


def test_exit_without_gates_returns_point(setup):
    _, game_map, manager = setup
    point = game_map.wall_positions()[0]
    assert manager.exit_for(point) == point