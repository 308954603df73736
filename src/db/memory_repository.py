"""Implementation of (Game)Repository that keeps the live GameState objects in a dictionary"""

import logging
from uuid import UUID, uuid4

from src.yinsh.state import GameState

logger = logging.getLogger(__name__)


class InMemoryGameRepository:
    """
    Games are mutated in place by the service (a GameState owns its history, which is what undo needs),
    so there is no update method: storing the object once is enough.
    """

    def __init__(self) -> None:
        self._games: dict[UUID, GameState] = {}

    def get_game(self, game_id: UUID) -> GameState | None:
        """Get game by ID, if record exists."""
        return self._games.get(game_id)

    def create_game(self, game: GameState) -> UUID:
        """Store new game and return the newly created game ID."""
        game_id = uuid4()
        self._games[game_id] = game
        logger.debug("Stored new game %s", game_id)
        return game_id

    def delete_game(self, game_id: UUID) -> GameState | None:
        """Remove a game's record."""
        return self._games.pop(game_id, None)

    def __len__(self) -> int:
        return len(self._games)
