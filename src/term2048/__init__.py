from term2048.api import GameView
from term2048.config import GameRules, ManagerRules, Objective, SimulationConfig
from term2048.errors import ExitSignal, GameError, GridFull
from term2048.game_core import ACTIONS, Game, Move, perform_move
from term2048.grid import Grid, Tile

__version__ = "0.1.0"

__all__ = [
    "ACTIONS",
    "ExitSignal",
    "Game",
    "GameError",
    "GameRules",
    "GameView",
    "Grid",
    "GridFull",
    "ManagerRules",
    "Move",
    "Objective",
    "SimulationConfig",
    "Tile",
    "perform_move",
]
