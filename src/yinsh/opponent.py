"""Computer opponents. They only get to use what a human gets: the legal moves and the same execute path."""

import logging
import random
from typing import Optional, Protocol

from src.core.shared_types import Player
from src.yinsh.commands import Command, PlaceMarker
from src.yinsh.state import GameState

logger = logging.getLogger(__name__)


class Opponent(Protocol):
    player: Player

    def take_turn(self, state: GameState) -> bool:
        """Play one command. Returns False if nothing was played."""
        ...


def is_dead_end(state: GameState, command: Command) -> bool:
    """
    A marker may go into any ring of the player, even one that cannot move afterwards.
    Doing so leaves the game in MOVE_RING without a single legal command.
    """
    match command:
        case PlaceMarker(pos=pos):
            return not state.board.ring_targets(pos)
        case _:
            return False


class RandomOpponent:
    """Picks any legal command (that does not strand the game), uniformly at random. (Mostly useful to exercise the engine.)"""

    def __init__(self, player: Player, seed: Optional[int] = None) -> None:
        self.player = player
        self._rng = random.Random(seed)

    def take_turn(self, state: GameState) -> bool:
        if state.current_player != self.player or state.is_terminal:
            return False

        candidates = [move for move in state.legal_moves() if not is_dead_end(state, move)]
        if not candidates:
            logger.debug("%s has no playable command in phase %s", self.player, state.phase)
            return False

        command = self._rng.choice(candidates)
        return state.execute(command)
