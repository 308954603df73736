"""Requests and Response models"""

from typing import Optional, Self
from uuid import UUID

from pydantic import BaseModel, ValidationInfo, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import ChangeKind, PhaseKind, PieceKind, Player
from src.yinsh.commands import RINGS_PER_PLAYER
from src.yinsh.coord import BOARD_RADIUS, HexCoord


def _assert_on_board(q: int, r: int) -> None:
    if not HexCoord(q, r).is_valid(BOARD_RADIUS):
        raise InvalidRequestError(f"Intersection ({q}, {r}) is not on the board.")


# --- SHARED MODELS ---
class CoordModel(BaseModel):
    q: int
    r: int

    @classmethod
    def from_coord(cls, coord: HexCoord) -> Self:
        return cls(q=coord.q, r=coord.r)


class PieceModel(BaseModel):
    q: int
    r: int
    kind: PieceKind
    owner: Player


class PhaseModel(BaseModel):
    kind: PhaseKind
    origin: Optional[CoordModel] = None
    winner: Optional[Player] = None


class ChangeModel(BaseModel):
    """One event of the last change (used to animate)"""

    kind: ChangeKind
    player: Player
    coords: list[CoordModel]


class MoveModel(BaseModel):
    """A legal command and the intersection that selects it"""

    command: str
    anchor: CoordModel


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    first_player: Player = Player.WHITE
    pieces: list[PieceModel] = []

    @field_validator("pieces")
    @classmethod
    def validate_pieces(cls, value: list[PieceModel]) -> list[PieceModel]:
        """A pre-seeded board has to fit the real one: pieces on the board, one per intersection, no more rings than a player owns"""
        seen: set[tuple[int, int]] = set()
        for piece in value:
            _assert_on_board(piece.q, piece.r)
            if (piece.q, piece.r) in seen:
                raise InvalidRequestError(
                    f"More than one piece placed on ({piece.q}, {piece.r})."
                )
            seen.add((piece.q, piece.r))

        for owner in Player:
            rings = sum(1 for piece in value if piece.kind == PieceKind.RING and piece.owner == owner)
            if rings > RINGS_PER_PLAYER:
                raise InvalidRequestError(
                    f"{owner} has {rings} rings, at most {RINGS_PER_PLAYER} are allowed."
                )
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID


class PlayRequest(BaseModel):
    game_id: UUID
    q: int
    r: int

    @field_validator("r")
    @classmethod
    def validate_on_board(cls, value: int, info: ValidationInfo) -> int:
        # q is validated first (field order), so it is available here unless it failed itself
        q = info.data.get("q")
        if q is not None:
            _assert_on_board(q, value)
        return value


class UndoRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    phase: PhaseModel
    current_player: Player
    scores: dict[Player, int]
    pieces: list[PieceModel]
    runs: dict[Player, list[list[CoordModel]]]
    last_changes: list[ChangeModel]
    history_length: int


class LegalMovesResponse(BaseModel):
    game_id: UUID
    player: Player
    phase: PhaseModel
    legal_moves: list[MoveModel]
