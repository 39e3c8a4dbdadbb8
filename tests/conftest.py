from typing import Optional, Sequence

import pytest

from term2048.config import GameRules
from term2048.game_core import Game
from term2048.grid import Grid


def game_from_rows(rows: Sequence[Sequence[Optional[int]]], spawn_per_turn: int = 1, seed: int = 0) -> Game:
    game = Game(GameRules(size=len(rows), spawn_per_turn=spawn_per_turn), seed=seed)
    game.grid = Grid.from_rows(rows)
    return game


# no empty cell, no equal neighbours in any direction
CHECKERBOARD = [
    [1, 2, 1, 2],
    [2, 1, 2, 1],
    [1, 2, 1, 2],
    [2, 1, 2, 1],
]


@pytest.fixture
def make_game():
    return game_from_rows
