class GameError(Exception):
    """Base class for the conditions that end a game."""
    pass


class GridFull(GameError):
    """Raised when a tile has to spawn but every cell is occupied"""

    def __init__(self, message: str = "grid is full"):
        super().__init__(message)


class ExitSignal(GameError):
    """Raised by a controller when the user asks to quit"""

    def __init__(self, message: str = "received exit signal"):
        super().__init__(message)
