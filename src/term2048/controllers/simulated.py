"""
Monte-Carlo rollout controller.

For every candidate move, ``simulations_per_move`` playouts are run on private
copies of the game: the candidate is applied, then up to
``length_of_simulation - 1`` uniformly random moves. The candidate whose
playouts gained the most on average is played.
"""

from __future__ import annotations
import concurrent.futures
import logging
from typing import Dict, List, Optional, Tuple

import numpy as np

from term2048.api import GameView
from term2048.config import Objective, SimulationConfig
from term2048.controllers.base import Controller
from term2048.controllers.uniform import RandomController
from term2048.errors import GridFull
from term2048.game_core import ACTIONS, Game, Move

logger = logging.getLogger(__name__)


def measure(game: Game, objective: Objective) -> int:
    if objective is Objective.TILE_COUNT:
        # fewer occupied cells is better
        return -game.grid.tile_count()
    return game.score


class SimulatedController(Controller):
    def __init__(
        self,
        simulations_per_move: int = 100,
        length_of_simulation: int = 10,
        workers: int = 1,
        objective: Objective = Objective.SCORE,
        seed: Optional[int] = None,
    ):
        self.config = SimulationConfig(
            simulations_per_move=simulations_per_move,
            length_of_simulation=length_of_simulation,
            workers=workers,
            objective=objective,
        )
        self._seed_sequence = np.random.SeedSequence(seed)
        self._executor: Optional[concurrent.futures.ThreadPoolExecutor] = None

    @classmethod
    def from_config(cls, config: SimulationConfig, seed: Optional[int] = None) -> "SimulatedController":
        return cls(
            simulations_per_move=config.simulations_per_move,
            length_of_simulation=config.length_of_simulation,
            workers=config.workers,
            objective=config.objective,
            seed=seed,
        )

    def next_move(self, game: GameView) -> Move:
        averages = self.evaluate(game)
        # max() keeps the first maximum, i.e. ties go to the earliest move of ACTIONS
        best = max(ACTIONS, key=averages.__getitem__)
        logger.debug("rollout averages %s -> %s", {m.name: v for m, v in averages.items()}, best.name)
        return best

    def evaluate(self, game: GameView) -> Dict[Move, int]:
        """Average gain of every candidate move, truncated toward zero."""
        runs = self.config.simulations_per_move
        snapshot = game.clone()
        baseline = measure(snapshot, self.config.objective)

        seeds = self._seed_sequence.spawn(len(ACTIONS) * runs)
        jobs = [(snapshot, move, seeds[i * runs + j]) for i, move in enumerate(ACTIONS) for j in range(runs)]
        results = self._run(jobs)

        averages: Dict[Move, int] = {}
        for i, move in enumerate(ACTIONS):
            deltas = np.array(results[i * runs:(i + 1) * runs], dtype=np.int64) - baseline
            averages[move] = int(deltas.mean())
        return averages

    def _run(self, jobs: List[Tuple[Game, Move, np.random.SeedSequence]]) -> List[int]:
        if self.config.workers <= 1:
            return [self._playout(*job) for job in jobs]
        if self._executor is None:
            self._executor = concurrent.futures.ThreadPoolExecutor(
                max_workers=self.config.workers, thread_name_prefix="rollout"
            )
        return list(self._executor.map(lambda job: self._playout(*job), jobs))

    def _playout(self, snapshot: Game, first_move: Move, seed: np.random.SeedSequence) -> int:
        rng = np.random.default_rng(seed)
        sim = snapshot.clone(rng=rng)
        policy = RandomController(rng=rng)
        try:
            sim.turn(first_move)
        except GridFull:
            # the rollout still goes on from whatever the move left
            pass
        view = sim.view()
        for _ in range(self.config.length_of_simulation - 1):
            try:
                sim.turn(policy.next_move(view))
            except GridFull:
                break
        return measure(sim, self.config.objective)

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
