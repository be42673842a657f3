import pytest

from snakegate.scoreboard import Mission, Scoreboard


class RecordingWindow:
    def __init__(self):
        self.calls = []

    def addstr(self, y, x, text, attr=0):
        self.calls.append((y, x, text))

    @property
    def texts(self):
        return [text for _, _, text in self.calls]


def test_missions_are_fixed_targets():
    board = Scoreboard(42)
    assert [(m.name, m.target) for m in board.missions] == [
        ("B", 10),
        ("+", 5),
        ("-", 2),
        ("G", 1),
    ]
    assert not board.all_missions_complete()


def test_update_records_scores():
    board = Scoreboard(42)
    board.update(7, 9, 3, 1, 0)
    assert (
        board.current_length,
        board.max_length,
        board.growth_items,
        board.poison_items,
        board.gate_usage,
    ) == (7, 9, 3, 1, 0)
    assert [m.current for m in board.missions] == [9, 3, 1, 0]


def test_partial_progress_is_not_complete():
    board = Scoreboard(42)
    board.update(10, 10, 5, 2, 0)
    assert [m.completed for m in board.missions] == [True, True, True, False]
    assert not board.all_missions_complete()


def test_all_targets_met_completes():
    board = Scoreboard(42)
    board.update(10, 10, 5, 2, 1)
    assert board.all_missions_complete()


def test_completion_is_sticky():
    board = Scoreboard(42)
    board.update(4, 10, 0, 0, 0)
    board.update(4, 4, 0, 0, 0)
    assert board.missions[0].completed
    assert board.missions[0].current == 4


@pytest.mark.parametrize("map_width", [20, 42])
def test_draw_stays_right_of_the_map(map_width):
    board = Scoreboard(map_width)
    window = RecordingWindow()
    board.draw(window)
    assert all(x > map_width for _, x, _ in window.calls)
    assert "Score Board" in window.texts
    assert "Mission" in window.texts


def test_draw_shows_scores_and_checkmarks():
    board = Scoreboard(42)
    board.update(7, 10, 3, 1, 0)
    window = RecordingWindow()
    board.draw(window)
    assert "B: (current)7 / (max)10" in window.texts
    assert "+: 3" in window.texts
    assert "B: 10 (v)" in window.texts
    assert "G: 1 ( )" in window.texts


def test_mission_defaults():
    mission = Mission("X", 3)
    assert (mission.current, mission.completed) == (0, False)