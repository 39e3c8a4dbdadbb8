from __future__ import annotations
import copy
from enum import Enum
from typing import Iterator, Optional, Tuple, TYPE_CHECKING

import numpy as np

from term2048.config import GameRules
from term2048.errors import GridFull
from term2048.grid import Grid, Position

if TYPE_CHECKING:
    from term2048.api import GameView


class Move(Enum):
    # value = (dx, dy) travel vector
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value


# Canonical enumeration order, also the tie-break order of the rollout controller
ACTIONS: Tuple[Move, Move, Move, Move] = (Move.LEFT, Move.RIGHT, Move.UP, Move.DOWN)

# Value placed by every spawn
SPAWN_VALUE = 1


def processing_order(size: int, move: Move) -> Iterator[Position]:
    """
    Order in which tiles are pushed for a given move: tiles nearest to the
    destination edge go first, so every tile meets an already settled line.
    """
    forward = range(size)
    backward = range(size - 1, -1, -1)
    if move is Move.LEFT:
        return ((x, y) for y in forward for x in forward)
    if move is Move.RIGHT:
        return ((x, y) for y in forward for x in backward)
    if move is Move.UP:
        return ((x, y) for x in forward for y in forward)
    if move is Move.DOWN:
        return ((x, y) for x in forward for y in backward)
    raise ValueError(f"Invalid move: {move!r}")


def _slide(grid: Grid, pos: Position, delta: Tuple[int, int]) -> int:
    value = grid.get_value(pos)
    dx, dy = delta
    while True:
        nxt = (pos[0] + dx, pos[1] + dy)
        if not grid.contains(nxt):
            return 0
        other = grid.get_value(nxt)
        if other is None:
            grid.move_tile(pos, nxt)
            pos = nxt
            continue
        if other == value:
            grid.move_tile(pos, nxt)
            grid.set(nxt, value * 2)
            return value * 2
        return 0


def perform_move(grid: Grid, move: Move) -> int:
    """
    Slide and merge every tile of ``grid`` in place, in the direction of ``move``.

    Each tile travels until it leaves an edge, hits a different value or
    merges. A merged cell stays open to the tiles pushed after it, so
    ``[2, 2, 4]`` moved left ends as ``[8]``.

    Returns the score of the move: ``2 * v`` for every pair of ``v`` merged.
    """
    score = 0
    for pos in processing_order(grid.size, move):
        if grid.get_value(pos) is None:
            continue
        score += _slide(grid, pos, move.delta)
    return score


class Game:
    def __init__(
        self,
        rules: Optional[GameRules] = None,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ):
        self.rules = rules if rules is not None else GameRules()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.grid = Grid(self.rules.size)
        self.score: int = 0
        self.turn_index: int = 0

    @property
    def size(self) -> int:
        return self.grid.size

    @property
    def spawn_per_turn(self) -> int:
        return self.rules.spawn_per_turn

    def turn(self, move: Move) -> int:
        """
        Play one turn: resolve ``move``, then spawn ``spawn_per_turn`` tiles.

        Raises GridFull when a spawn finds no empty cell. The turn is not
        rolled back: the move score and earlier spawns stay applied.
        """
        move_score = perform_move(self.grid, move)
        self.score += move_score
        for _ in range(self.rules.spawn_per_turn):
            self.spawn_random()
        self.turn_index += 1
        return move_score

    def spawn_random(self) -> Position:
        empties = self.grid.empty_positions()
        if not empties:
            raise GridFull()
        # u in [0, 1) keeps the index below len(empties)
        index = int(self.rng.random() * len(empties))
        pos = empties[index]
        self.grid.set(pos, SPAWN_VALUE)
        return pos

    def clone(self, rng: Optional[np.random.Generator] = None) -> "Game":
        other = Game.__new__(Game)
        other.rules = self.rules
        # without an injected generator the clone replays the spawns of its source game
        other.rng = rng if rng is not None else copy.deepcopy(self.rng)
        other.grid = self.grid.clone()
        other.score = self.score
        other.turn_index = self.turn_index
        return other

    def view(self) -> "GameView":
        from term2048.api import GameView
        return GameView(self)
