"""
The Game drives a match between a human (through a View) and a computer opponent.
One call to `tick()` is one step of the outer loop the view runs: it either handles the human's input or lets the opponent play.
"""

import logging
from dataclasses import dataclass
from typing import Protocol

from src.core.shared_types import Player
from src.yinsh.coord import HexCoord
from src.yinsh.opponent import Opponent
from src.yinsh.state import GameState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionAtCoord:
    """The human pointed at an intersection"""

    coord: HexCoord


@dataclass(frozen=True)
class Undo:
    pass


UserAction = ActionAtCoord | Undo


class View(Protocol):
    """Just the parts of a presentation layer the Game talks to"""

    def poll_user_actions(self) -> list[UserAction]: ...
    def invalid_action(self) -> None: ...
    def update(self, state: GameState) -> None: ...
    def set_interactive(self, flag: bool) -> None: ...


class Game:
    def __init__(
        self,
        state: GameState,
        view: View,
        human_player: Player,
        opponent: Opponent,
    ) -> None:
        self.state = state
        self.view = view
        self.human_player = human_player
        self.opponent = opponent
        self.view.update(self.state)

    def tick(self) -> None:
        if self.state.current_player == self.human_player:
            self.view.set_interactive(True)
            self._handle_user_actions()
            return

        self.view.set_interactive(False)
        if self.state.is_terminal:
            return
        if self.opponent.take_turn(self.state):
            self.view.update(self.state)

    def _handle_user_actions(self) -> None:
        """Only the first action that succeeds gets used: a burst of clicks must not play several commands."""
        actions = self.view.poll_user_actions()
        if not actions:
            return

        if any(self._perform(action) for action in actions):
            self.view.update(self.state)
        else:
            logger.debug("None of the user actions %s could be performed", actions)
            self.view.invalid_action()

    def _perform(self, action: UserAction) -> bool:
        match action:
            case ActionAtCoord(coord=coord):
                return self.state.execute_for_coord(coord)
            case Undo():
                return self.state.undo()
