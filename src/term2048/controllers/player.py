from typing import Dict, Iterable, Iterator, Optional

from term2048.api import GameView
from term2048.controllers.base import Controller
from term2048.errors import ExitSignal
from term2048.game_core import Move


KEY_TO_MOVE: Dict[str, Move] = {
    "left": Move.LEFT,
    "right": Move.RIGHT,
    "up": Move.UP,
    "down": Move.DOWN,
}
QUIT_KEYS = frozenset({"q", "ctrl-c", "ctrl-d"})


class PlayerController(Controller):
    """
    Human player reading key names from an input device.

    ``keys`` is any iterable of key names; by default the terminal is read in
    raw mode. Unknown keys are ignored, the call blocks until a directional
    or quit key arrives.
    """

    def __init__(self, keys: Optional[Iterable[str]] = None):
        if keys is None:
            from term2048.terminal import read_keys
            keys = read_keys()
        self._keys: Iterator[str] = iter(keys)

    def next_move(self, game: GameView) -> Move:
        for key in self._keys:
            if key in QUIT_KEYS:
                raise ExitSignal()
            move = KEY_TO_MOVE.get(key)
            if move is not None:
                return move
        # input stream closed
        raise ExitSignal("input stream closed")
