from typing import Optional

import numpy as np

from term2048.api import GameView
from term2048.controllers.base import Controller
from term2048.game_core import Move


# integer drawn in 0..3 -> move
DRAW_TO_MOVE = (Move.DOWN, Move.LEFT, Move.RIGHT, Move.UP)


class RandomController(Controller):
    """Plays one of the four moves with probability 1/4 each, ignoring the board."""

    def __init__(self, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def next_move(self, game: GameView) -> Move:
        return DRAW_TO_MOVE[int(self.rng.integers(0, 4))]
