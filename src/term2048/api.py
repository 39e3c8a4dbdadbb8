from __future__ import annotations
from typing import Optional, Tuple

import numpy as np

from term2048.game_core import Game, ACTIONS
from term2048.grid import Position, Tile


class GameView:
    """
    Read-only facade over a Game, handed to controllers and renderers:
    - size / score / turn_index properties
    - tiles() -> tiles()[y][x]
    - get_value(pos) -> Optional[int]
    - biggest_value()
    - clone(rng) -> private, mutable Game copy
    """
    def __init__(self, game: Game):
        self._game = game

    @property
    def size(self) -> int:
        return self._game.grid.size

    @property
    def score(self) -> int:
        return self._game.score

    @property
    def turn_index(self) -> int:
        return self._game.turn_index

    @property
    def spawn_per_turn(self) -> int:
        return self._game.spawn_per_turn

    def tiles(self) -> Tuple[Tuple[Tile, ...], ...]:
        return self._game.grid.tiles()

    def get_value(self, pos: Position) -> Optional[int]:
        return self._game.grid.get_value(pos)

    def tile_count(self) -> int:
        return self._game.grid.tile_count()

    def biggest_value(self) -> int:
        return self._game.grid.biggest_value()

    def clone(self, rng: Optional[np.random.Generator] = None) -> Game:
        return self._game.clone(rng=rng)


# re-exported for collaborators that only import the facade
ACTIONS = ACTIONS
