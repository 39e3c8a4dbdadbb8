import pytest

from term2048.config import GameRules, ManagerRules
from term2048.controllers.base import Controller
from term2048.controllers.player import PlayerController
from term2048.controllers.uniform import RandomController
from term2048.errors import ExitSignal, GridFull
from term2048.game_core import Move


class RecordingDisplay:
    def __init__(self):
        self.turns = []
        self.pumps = 0

    def show(self, view):
        self.turns.append(view.turn_index)

    def pump(self):
        self.pumps += 1


class Cycle(Controller):
    def __init__(self, moves):
        self.moves = moves
        self.calls = 0

    def next_move(self, game):
        move = self.moves[self.calls % len(self.moves)]
        self.calls += 1
        return move


def _manager(controller, **rules):
    from term2048.manager import GameManager

    display = RecordingDisplay()
    manager = GameManager(controller, GameRules(), ManagerRules(**rules), display=display, seed=0)
    return manager, display


def test_display_skips_turns():
    manager, display = _manager(Cycle([Move.LEFT, Move.UP]), display_skips=2, max_turns=7)
    manager.play_all()
    assert manager.game.turn_index == 7
    assert display.turns == [0, 3, 6]
    # the skipped refreshes still service the display
    assert display.pumps == 4


def test_display_can_be_disabled():
    manager, display = _manager(Cycle([Move.LEFT]), display=False, max_turns=3)
    manager.play_all()
    assert display.turns == []
    assert display.pumps == 0


def test_turn_asks_the_controller_once():
    controller = Cycle([Move.DOWN])
    manager, _ = _manager(controller)
    manager.turn()
    assert controller.calls == 1
    assert manager.game.turn_index == 1
    assert manager.game.grid.tile_count() == 1


def test_grid_full_ends_the_game():
    from term2048.manager import GameManager

    manager = GameManager(
        RandomController(seed=4),
        GameRules(size=2, spawn_per_turn=2),
        ManagerRules(display=False),
        seed=4,
    )
    with pytest.raises(GridFull):
        manager.play_all()
    assert manager.game.grid.empty_positions() == []


def test_exit_signal_propagates():
    manager, _ = _manager(PlayerController(keys=["left", "up", "q"]))
    with pytest.raises(ExitSignal):
        manager.play_all()
    assert manager.game.turn_index == 2


def test_zero_max_turns_plays_nothing():
    manager, display = _manager(Cycle([Move.LEFT]), max_turns=0)
    manager.play_all()
    assert manager.game.turn_index == 0
    assert display.turns == []


def test_print_display_shows_current_state():
    manager, display = _manager(Cycle([Move.LEFT]), max_turns=2)
    manager.play_all()
    manager.print_display()
    assert display.turns[-1] == 2
