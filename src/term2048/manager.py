from __future__ import annotations
import logging
import time
from typing import Optional, Protocol

from term2048.api import GameView
from term2048.config import GameRules, ManagerRules
from term2048.controllers.base import Controller
from term2048.game_core import Game

logger = logging.getLogger(__name__)


class Display(Protocol):
    def show(self, view: GameView) -> None:
        ...

    def pump(self) -> None:
        """Called on the turns whose refresh is skipped."""
        ...


class GameManager:
    """
    Sequential game loop: display, ask the controller, play the turn, pause.

    GridFull and ExitSignal are not handled here, they end ``play_all``.
    """

    def __init__(
        self,
        controller: Controller,
        game_rules: Optional[GameRules] = None,
        manager_rules: Optional[ManagerRules] = None,
        display: Optional[Display] = None,
        game: Optional[Game] = None,
        seed: Optional[int] = None,
    ):
        self.rules = manager_rules if manager_rules is not None else ManagerRules()
        self.game = game if game is not None else Game(game_rules, seed=seed)
        self.controller = controller
        if display is None and self.rules.display:
            from term2048.terminal import TerminalDisplay
            display = TerminalDisplay(color_seed=self.rules.color_seed, clear=self.rules.clear_term)
        self.display = display
        self.view = self.game.view()
        self._display_to_skip = 0

    def turn(self) -> int:
        self._display_conditionally()
        movement = self.controller.next_move(self.view)
        move_score = self.game.turn(movement)
        if self.rules.turn_duration > 0:
            time.sleep(self.rules.turn_duration)
        return move_score

    def _display_conditionally(self) -> None:
        if not self.rules.display or self.display is None:
            return
        if self._display_to_skip == 0:
            self.display.show(self.view)
            self._display_to_skip = self.rules.display_skips
        else:
            self.display.pump()
            self._display_to_skip -= 1

    def print_display(self) -> None:
        if self.display is not None:
            self.display.show(self.view)

    def play_all(self) -> None:
        max_turns = self.rules.max_turns
        while max_turns is None or self.game.turn_index < max_turns:
            self.turn()
        logger.info("stopped after %d turns, score %d", self.game.turn_index, self.game.score)
