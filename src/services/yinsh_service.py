"""Orchestration of communication from a presentation layer to the rules engine and the game repository (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    ChangeModel,
    CoordModel,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveModel,
    PhaseModel,
    PieceModel,
    PlayRequest,
    UndoRequest,
)
from src.core.exceptions import (
    EmptyHistoryError,
    GameStateError,
    IllegalMoveError,
    RepositoryError,
)
from src.core.shared_types import Player
from src.db.repository import GameRepository
from src.yinsh.board import Board
from src.yinsh.changes import change_coords
from src.yinsh.coord import HexCoord
from src.yinsh.phase import Phase
from src.yinsh.pieces import Piece
from src.yinsh.state import GameState

logger = logging.getLogger(__name__)


class YinshService:
    """Orchestration of layers for a game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- Request handling logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a match, optionally from a pre-seeded board."""
        board = Board.from_pieces(
            (Piece(piece.kind, piece.owner), HexCoord(piece.q, piece.r))
            for piece in request.pieces
        )
        state = GameState(board=board, current_player=request.first_player)
        game_id = self.repo.create_game(state)
        logger.info("Created game %s, %s to move", game_id, request.first_player)
        return self._create_game_response(game_id, state)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used by the presentation layer to redraw the board.
        """
        state = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, state)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """retrieve set of legal moves (for highlighting)."""
        state = self._fetch_game(request.game_id)
        return LegalMovesResponse(
            game_id=request.game_id,
            player=state.current_player,
            phase=self._phase_model(state.phase),
            legal_moves=[
                MoveModel(
                    command=type(command).__name__,
                    anchor=CoordModel.from_coord(command.anchor_coord()),
                )
                for command in state.legal_moves()
            ],
        )

    def play(self, request: PlayRequest) -> GameResponse:
        """Play whatever legal command is anchored at the requested intersection."""
        state = self._fetch_game(request.game_id)
        if state.is_terminal:
            raise GameStateError(f"Game is over. {state.phase}")

        coord = HexCoord(request.q, request.r)
        if not state.execute_for_coord(coord):
            raise IllegalMoveError(
                f"Nothing legal to do at ({request.q}, {request.r}) in phase: {state.phase}"
            )
        return self._create_game_response(request.game_id, state)

    def undo(self, request: UndoRequest) -> GameResponse:
        """Take back the last command."""
        state = self._fetch_game(request.game_id)
        if not state.undo():
            raise EmptyHistoryError("Nothing to undo.")
        return self._create_game_response(request.game_id, state)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if self.repo.delete_game(request.game_id) is None:
            raise RepositoryError(f"Game with {request.game_id=} not found.")

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, state: GameState) -> GameResponse:
        """Convert the GameState to a GameResponse (for game with given ID.)"""
        return GameResponse(
            game_id=game_id,
            phase=self._phase_model(state.phase),
            current_player=state.current_player,
            scores={player: state.score(player) for player in Player},
            pieces=[
                PieceModel(q=pos.q, r=pos.r, kind=piece.kind, owner=piece.owner)
                for pos, piece in sorted(state.board.position.items())
            ],
            runs={
                player: [
                    [CoordModel.from_coord(pos) for pos in run]
                    for run in state.runs_of(player)
                ]
                for player in Player
            },
            last_changes=[
                ChangeModel(
                    kind=change.kind,
                    player=change.player,
                    coords=[CoordModel.from_coord(pos) for pos in change_coords(change)],
                )
                for change in state.last_changes
            ],
            history_length=len(state.history),
        )

    def _phase_model(self, phase: Phase) -> PhaseModel:
        return PhaseModel(
            kind=phase.kind,
            origin=CoordModel.from_coord(phase.origin) if phase.origin is not None else None,
            winner=phase.winner,
        )

    def _fetch_game(self, game_id: UUID) -> GameState:
        """Attempt to find the game in the repository and raise error if it fails."""
        state = self.repo.get_game(game_id)
        if state is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return state
