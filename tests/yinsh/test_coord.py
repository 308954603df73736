"""Unit tests for /src/yinsh/coord.py"""

from typing import Optional

import pytest

from src.yinsh.coord import (
    BOARD_RADIUS,
    DIRECTIONS,
    HexCoord,
    Vector,
    board_coords,
    hex_distance,
    is_adjacent,
    line_between,
    line_walk,
)


# -- BOARD SHAPE --
@pytest.mark.parametrize(
    "radius, expected_count",
    [
        (BOARD_RADIUS, 61),
        (4.6, 85),
    ],
)
def test_number_of_intersections(radius: float, expected_count: int) -> None:
    """Default board has 61 intersections, the tournament board 85."""
    coords = board_coords(radius)
    assert len(coords) == expected_count
    assert len(set(coords)) == expected_count


def test_board_coords_sorted() -> None:
    coords = board_coords()
    assert coords == sorted(coords)


@pytest.mark.parametrize(
    "q, r, radius, expected",
    [
        (0, 0, BOARD_RADIUS, True),
        (4, 0, BOARD_RADIUS, True),
        (4, 4, BOARD_RADIUS, True),
        (-4, -4, BOARD_RADIUS, True),
        (2, -2, BOARD_RADIUS, True),
        (5, 0, BOARD_RADIUS, False),
        (4, -1, BOARD_RADIUS, False),
        (-1, 4, BOARD_RADIUS, False),
        (-1, 4, 4.6, True),
        (5, 0, 4.6, False),
    ],
)
def test_is_valid(q: int, r: int, radius: float, expected: bool) -> None:
    assert HexCoord(q, r).is_valid(radius) is expected


def test_board_symmetric_under_negation() -> None:
    """Every line through the center is as long on both sides."""
    coords = set(board_coords())
    assert all(HexCoord(-pos.q, -pos.r) in coords for pos in coords)


# -- ARITHMETIC --
def test_add_and_sub_vector() -> None:
    pos = HexCoord(1, -2)
    assert pos + (1, 1) == HexCoord(2, -1)
    assert pos - (0, 1) == HexCoord(1, -3)
    assert (pos + (1, 0)) - (1, 0) == pos


def test_ordering_is_q_then_r() -> None:
    assert HexCoord(-1, 3) < HexCoord(0, -3)
    assert HexCoord(0, -1) < HexCoord(0, 1)


# -- NEIGHBORS / DISTANCE --
def test_center_has_six_neighbors() -> None:
    neighbors = HexCoord(0, 0).neighbors()
    assert sorted(neighbors) == sorted(HexCoord(0, 0) + d for d in DIRECTIONS)


def test_corner_has_three_neighbors() -> None:
    neighbors = HexCoord(4, 0).neighbors()
    assert sorted(neighbors) == [HexCoord(3, -1), HexCoord(3, 0), HexCoord(4, 1)]


def test_neighbors_are_adjacent() -> None:
    pos = HexCoord(-1, 2)
    assert all(is_adjacent(pos, neighbor) for neighbor in pos.neighbors())


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (HexCoord(0, 0), HexCoord(0, 0), 0),
        (HexCoord(0, 0), HexCoord(1, 1), 1),
        (HexCoord(0, 0), HexCoord(1, -1), 2),
        (HexCoord(0, 0), HexCoord(3, 3), 3),
        (HexCoord(0, 0), HexCoord(2, -2), 4),
        (HexCoord(-2, 1), HexCoord(2, 1), 4),
    ],
)
def test_hex_distance(a: HexCoord, b: HexCoord, expected: int) -> None:
    assert hex_distance(a, b) == expected
    assert hex_distance(b, a) == expected


def test_not_adjacent() -> None:
    assert not is_adjacent(HexCoord(0, 0), HexCoord(0, 0))
    assert not is_adjacent(HexCoord(0, 0), HexCoord(1, -1))


# -- LINES --
@pytest.mark.parametrize(
    "a, b, expected",
    [
        (HexCoord(0, 0), HexCoord(3, 0), (1, 0)),
        (HexCoord(0, 0), HexCoord(-2, 0), (-1, 0)),
        (HexCoord(1, 1), HexCoord(1, 4), (0, 1)),
        (HexCoord(0, 0), HexCoord(0, -2), (0, -1)),
        (HexCoord(0, 0), HexCoord(3, 3), (1, 1)),
        (HexCoord(1, 0), HexCoord(-1, -2), (-1, -1)),
        (HexCoord(0, 0), HexCoord(2, 1), None),
        (HexCoord(0, 0), HexCoord(1, -1), None),
        (HexCoord(2, 2), HexCoord(2, 2), None),
    ],
)
def test_direction_to(a: HexCoord, b: HexCoord, expected: Optional[Vector]) -> None:
    assert a.direction_to(b) == expected


def test_line_walk_excludes_start_and_stops_at_edge() -> None:
    walk = list(line_walk(HexCoord(0, 0), (1, 0)))
    assert walk == [HexCoord(1, 0), HexCoord(2, 0), HexCoord(3, 0), HexCoord(4, 0)]


def test_line_walk_from_edge_is_empty() -> None:
    assert list(line_walk(HexCoord(4, 0), (1, 0))) == []


def test_line_walk_restartable() -> None:
    """Every call starts a fresh walk."""
    start = HexCoord(-1, -1)
    assert list(line_walk(start, (1, 1))) == list(line_walk(start, (1, 1)))


def test_line_between() -> None:
    assert line_between(HexCoord(-2, 0), HexCoord(2, 0)) == [
        HexCoord(-1, 0),
        HexCoord(0, 0),
        HexCoord(1, 0),
    ]
    assert line_between(HexCoord(2, 2), HexCoord(0, 0)) == [HexCoord(1, 1)]


def test_line_between_adjacent_is_empty() -> None:
    assert line_between(HexCoord(0, 0), HexCoord(0, 1)) == []


@pytest.mark.parametrize(
    "a, b",
    [
        (HexCoord(0, 0), HexCoord(2, 1)),
        (HexCoord(0, 0), HexCoord(0, 0)),
    ],
)
def test_line_between_not_collinear(a: HexCoord, b: HexCoord) -> None:
    with pytest.raises(ValueError):
        line_between(a, b)
