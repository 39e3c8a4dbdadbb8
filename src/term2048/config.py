from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Objective(Enum):
    SCORE = "score"
    TILE_COUNT = "tile-count"


@dataclass
class GameRules:
    size: int = 4
    spawn_per_turn: int = 1

    def __post_init__(self):
        if self.size < 1:
            raise ValueError(f"size must be at least 1, got {self.size}")
        if self.spawn_per_turn < 0:
            raise ValueError(f"spawn_per_turn must not be negative, got {self.spawn_per_turn}")


@dataclass
class ManagerRules:
    display: bool = True
    # number of turns whose display is skipped after each refresh
    display_skips: int = 0
    clear_term: bool = True
    # seed for the procedural coloration of tiles
    color_seed: int = 35
    # pause between turns, in seconds
    turn_duration: float = 0.0
    max_turns: Optional[int] = None

    def __post_init__(self):
        if self.display_skips < 0:
            raise ValueError(f"display_skips must not be negative, got {self.display_skips}")
        if self.turn_duration < 0:
            raise ValueError(f"turn_duration must not be negative, got {self.turn_duration}")
        if self.max_turns is not None and self.max_turns < 0:
            raise ValueError(f"max_turns must not be negative, got {self.max_turns}")


@dataclass
class SimulationConfig:
    simulations_per_move: int = 100
    length_of_simulation: int = 10
    # <= 1 runs every playout on the calling thread
    workers: int = 1
    objective: Objective = Objective.SCORE

    def __post_init__(self):
        if self.simulations_per_move < 1:
            raise ValueError(f"simulations_per_move must be at least 1, got {self.simulations_per_move}")
        if self.length_of_simulation < 1:
            raise ValueError(f"length_of_simulation must be at least 1, got {self.length_of_simulation}")
        if isinstance(self.objective, str):
            self.objective = Objective(self.objective)
