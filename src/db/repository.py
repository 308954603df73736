"""Protocol repository (the service does not care where live games are kept)"""

from typing import Protocol
from uuid import UUID

from src.yinsh.state import GameState


class GameRepository(Protocol):
    """Keeps running games, by ID"""

    def get_game(self, game_id: UUID) -> GameState | None:
        """Get game by ID, if record exists."""
        ...

    def create_game(self, game: GameState) -> UUID:
        """Store new game and return the newly created game ID."""
        ...

    def delete_game(self, game_id: UUID) -> GameState | None:
        """Remove a game's record."""
        ...
