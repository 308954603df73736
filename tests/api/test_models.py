"""Unit tests for /src/api/models.py"""

from uuid import UUID, uuid4

import pytest

from src.api.models import CoordModel, CreateGameRequest, PieceModel, PlayRequest
from src.core.exceptions import GameError, InvalidRequestError
from src.core.shared_types import PieceKind, Player
from src.yinsh.coord import HexCoord


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - CreateGameRequest --
def test_empty_board_by_default() -> None:
    request = CreateGameRequest()
    assert request.first_player == Player.WHITE
    assert request.pieces == []


def test_seeded_board() -> None:
    pieces = [
        PieceModel(q=0, r=0, kind=PieceKind.RING, owner=Player.WHITE),
        PieceModel(q=4, r=4, kind=PieceKind.MARKER, owner=Player.BLACK),
    ]
    request = CreateGameRequest(first_player=Player.BLACK, pieces=pieces)
    assert request.pieces == pieces


def test_piece_from_json_values() -> None:
    request = CreateGameRequest.model_validate(
        {"first_player": "black", "pieces": [{"q": 1, "r": 0, "kind": "marker", "owner": "white"}]}
    )
    assert request.first_player == Player.BLACK
    assert request.pieces[0].kind == PieceKind.MARKER


@pytest.mark.parametrize("q, r", [(5, 0), (-1, 4), (4, -1)])
def test_piece_off_the_board(q: int, r: int) -> None:
    with pytest.raises(InvalidRequestError):
        CreateGameRequest(pieces=[PieceModel(q=q, r=r, kind=PieceKind.RING, owner=Player.WHITE)])


def test_two_pieces_on_one_intersection() -> None:
    with pytest.raises(InvalidRequestError):
        CreateGameRequest(
            pieces=[
                PieceModel(q=1, r=1, kind=PieceKind.RING, owner=Player.WHITE),
                PieceModel(q=1, r=1, kind=PieceKind.MARKER, owner=Player.BLACK),
            ]
        )


def test_ring_limit_per_player() -> None:
    """Five rings each is a full setup, a sixth ring for one player is not."""
    pieces = [
        PieceModel(q=q, r=r, kind=PieceKind.RING, owner=owner)
        for q in range(-2, 3)
        for r, owner in ((-1, Player.WHITE), (1, Player.BLACK))
    ]
    assert len(CreateGameRequest(pieces=pieces).pieces) == 10

    with pytest.raises(InvalidRequestError):
        CreateGameRequest(
            pieces=[*pieces, PieceModel(q=0, r=3, kind=PieceKind.RING, owner=Player.BLACK)]
        )


def test_markers_do_not_count_as_rings() -> None:
    pieces = [PieceModel(q=q, r=0, kind=PieceKind.MARKER, owner=Player.WHITE) for q in range(-3, 4)]
    assert len(CreateGameRequest(pieces=pieces).pieces) == 7


# -- Validation - PlayRequest --
def test_play_request(mock_id: UUID) -> None:
    request = PlayRequest(game_id=mock_id, q=-2, r=1)
    assert (request.q, request.r) == (-2, 1)


@pytest.mark.parametrize("q, r", [(5, 0), (0, -5), (-1, 4)])
def test_play_request_off_the_board(mock_id: UUID, q: int, r: int) -> None:
    with pytest.raises(GameError):
        PlayRequest(game_id=mock_id, q=q, r=r)


# -- Conversion --
def test_coord_model_conversion() -> None:
    model = CoordModel.from_coord(HexCoord(3, -1))
    assert model.q == 3
    assert model.r == -1
