"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Any, Callable, Iterator, Optional

import pytest

from src.core.shared_types import Player
from src.db.memory_repository import InMemoryGameRepository
from src.yinsh.board import Board
from src.yinsh.coord import HexCoord
from src.yinsh.phase import Phase
from src.yinsh.pieces import Piece
from src.yinsh.state import GameState

StateFactory = Callable[..., GameState]


@pytest.fixture
def snapshot() -> Callable[[GameState], dict[str, Any]]:
    """Call the inner function to capture everything undo promises to restore (plus the runs, which must follow the board)"""

    def _snapshot(state: GameState) -> dict[str, Any]:
        return {
            "position": dict(state.board.position),
            "phase": state.phase,
            "current_player": state.current_player,
            "scores": dict(state.scores),
            "runs": {player: list(runs) for player, runs in state.runs.items()},
        }

    return _snapshot


@pytest.fixture
def make_state() -> StateFactory:
    """Call the inner function with the phase, player to move, and the pieces that should be on the board"""

    def _create_state(
        phase: Optional[Phase] = None,
        player: Player = Player.WHITE,
        pieces: Optional[dict[tuple[int, int], Piece]] = None,
        scores: Optional[dict[Player, int]] = None,
    ) -> GameState:
        board = Board.from_pieces(
            (piece, HexCoord(q, r)) for (q, r), piece in (pieces or {}).items()
        )
        state = GameState(board=board, current_player=player)
        if phase is not None:
            state.set_phase(phase)
        if scores is not None:
            state.scores.update(scores)
        return state

    return _create_state


@pytest.fixture
def memory_repository() -> Iterator[InMemoryGameRepository]:
    """Fresh repository for every test"""
    repo = InMemoryGameRepository()
    yield repo
