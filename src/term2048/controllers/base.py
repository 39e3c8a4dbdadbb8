"""Controller interface shared by every move source"""

from abc import ABC, abstractmethod

from term2048.api import GameView
from term2048.game_core import Move


class Controller(ABC):
    """
    Decides the next move of a game.

    Implementations only read the game through its GameView; a controller
    that needs to experiment clones the game first.
    """

    @abstractmethod
    def next_move(self, game: GameView) -> Move:
        """
        Return the move to play on ``game``.

        Raises:
            ExitSignal: the user asked to stop playing
        """
        pass

    def close(self) -> None:
        """Release resources held by the controller"""
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
