from collections import Counter

import pytest

from term2048 import controllers
from term2048.config import Objective, SimulationConfig
from term2048.controllers import build_controller
from term2048.controllers.player import PlayerController
from term2048.controllers.simulated import SimulatedController
from term2048.controllers.uniform import RandomController
from term2048.errors import ExitSignal
from term2048.game_core import ACTIONS, Game, Move


EMPTY_4 = [[None] * 4 for _ in range(4)]


def test_random_controller_is_uniform():
    controller = RandomController(seed=1234)
    view = Game(seed=0).view()
    counts = Counter(controller.next_move(view) for _ in range(10_000))
    assert set(counts) == set(ACTIONS)
    for move in ACTIONS:
        assert abs(counts[move] - 2500) < 200


def test_random_controller_is_reproducible():
    view = Game(seed=0).view()
    first = RandomController(seed=5)
    second = RandomController(seed=5)
    assert [first.next_move(view) for _ in range(50)] == [second.next_move(view) for _ in range(50)]


def test_player_maps_arrows_and_ignores_other_keys():
    view = Game(seed=0).view()
    player = PlayerController(keys=iter(["x", "enter", "left", "up", "w", "down", "right"]))
    assert player.next_move(view) is Move.LEFT
    assert player.next_move(view) is Move.UP
    assert player.next_move(view) is Move.DOWN
    assert player.next_move(view) is Move.RIGHT


@pytest.mark.parametrize("keys", [["a", "q", "left"], ["ctrl-c"], ["escape", "ctrl-d", "up"], []])
def test_player_quits_on_quit_keys_or_closed_input(keys):
    player = PlayerController(keys=keys)
    with pytest.raises(ExitSignal):
        player.next_move(Game(seed=0).view())


@pytest.mark.parametrize(
    "kwargs",
    [{"simulations_per_move": 0}, {"length_of_simulation": 0}, {"simulations_per_move": -3}],
)
def test_simulated_rejects_empty_rollouts(kwargs):
    with pytest.raises(ValueError):
        SimulatedController(**kwargs)


def test_simulated_ties_go_to_the_first_move(make_game):
    game = make_game(EMPTY_4)
    with SimulatedController(simulations_per_move=4, length_of_simulation=1, seed=0) as controller:
        assert controller.evaluate(game.view()) == {move: 0 for move in ACTIONS}
        assert controller.next_move(game.view()) is Move.LEFT


def test_simulated_prefers_the_first_of_equal_merges(make_game):
    rows = [row[:] for row in EMPTY_4]
    rows[0][0] = rows[1][0] = 2
    game = make_game(rows)
    with SimulatedController(simulations_per_move=3, length_of_simulation=1, seed=0) as controller:
        assert controller.evaluate(game.view()) == {
            Move.LEFT: 0,
            Move.RIGHT: 0,
            Move.UP: 4,
            Move.DOWN: 4,
        }
        assert controller.next_move(game.view()) is Move.UP


def test_simulated_tile_count_objective(make_game):
    rows = [row[:] for row in EMPTY_4]
    rows[0][0] = rows[0][1] = 2
    game = make_game(rows)
    controller = SimulatedController(
        simulations_per_move=2, length_of_simulation=1, objective=Objective.TILE_COUNT, seed=0
    )
    assert controller.evaluate(game.view()) == {
        Move.LEFT: 0,
        Move.RIGHT: 0,
        Move.UP: -1,
        Move.DOWN: -1,
    }
    assert controller.next_move(game.view()) is Move.LEFT


def test_simulated_does_not_touch_the_game(make_game):
    game = make_game([[2, None, 2, None], [None, 4, None, 4], [1, None, None, 1], [None] * 4])
    before = game.grid.clone()
    controller = SimulatedController(simulations_per_move=5, length_of_simulation=6, seed=3)
    controller.next_move(game.view())
    assert game.grid == before
    assert game.score == 0
    assert game.turn_index == 0


def test_simulated_is_independent_of_the_worker_count(make_game):
    rows = [[2, None, 2, 4], [None, 4, None, 4], [1, 1, None, 2], [8, None, 8, None]]
    sequential = SimulatedController(simulations_per_move=6, length_of_simulation=8, workers=1, seed=21)
    with SimulatedController(simulations_per_move=6, length_of_simulation=8, workers=4, seed=21) as threaded:
        for _ in range(3):
            assert threaded.evaluate(make_game(rows).view()) == sequential.evaluate(make_game(rows).view())


def test_simulated_survives_a_full_grid(make_game):
    game = make_game([[1, 2], [2, 1]])
    controller = SimulatedController(simulations_per_move=2, length_of_simulation=3, seed=0)
    assert controller.next_move(game.view()) is Move.LEFT


def test_build_controller():
    assert isinstance(build_controller("random", seed=1), RandomController)
    simulated = build_controller("simulated", simulation=SimulationConfig(simulations_per_move=2, workers=3))
    assert isinstance(simulated, SimulatedController)
    assert simulated.config.workers == 3
    assert isinstance(build_controller("player", keys=["q"]), PlayerController)
    with pytest.raises(ValueError):
        build_controller("minimax")


def test_controller_classes_load_lazily():
    assert controllers.RandomController is RandomController
    assert set(controllers.available_controllers()) == {"player", "random", "simulated"}
    with pytest.raises(AttributeError):
        controllers.Nothing
