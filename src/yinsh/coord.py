"""
An intersection on the board, plus the geometry of the lines that run through it

(placed in its own module as multiple other modules need to import it)

The board is a triangular grid of intersections. We use axial coordinates (q, r):
moving along q is one step "east", moving along r is one step at 120 degrees from that.
That makes (1, 1) a unit step as well, so there are three line axes and six directions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

# 61 intersections. Just in case we want to play on the 85-point tournament board, make it adjustable (radius 4.6)
BOARD_RADIUS: float = 4

Vector = tuple[int, int]

# one direction per line axis, used when scanning for runs
AXES: tuple[Vector, ...] = ((1, 0), (0, 1), (1, 1))

# the six directions a ring can slide in
DIRECTIONS: tuple[Vector, ...] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (-1, -1),
)


@dataclass(frozen=True, order=True)
class HexCoord:
    q: int
    r: int

    def __add__(self, vector: Vector) -> HexCoord:
        dq, dr = vector
        return HexCoord(self.q + dq, self.r + dr)

    def __sub__(self, vector: Vector) -> HexCoord:
        dq, dr = vector
        return HexCoord(self.q - dq, self.r - dr)

    def norm_squared(self) -> int:
        """Squared euclidean length of the point on the grid (the two axes are 120 degrees apart)"""
        return self.q * self.q + self.r * self.r - self.q * self.r

    def is_valid(self, radius: float = BOARD_RADIUS) -> bool:
        return self.norm_squared() <= radius * radius

    def neighbors(self, radius: float = BOARD_RADIUS) -> list[HexCoord]:
        return [
            neighbor for neighbor in (self + d for d in DIRECTIONS) if neighbor.is_valid(radius)
        ]

    def direction_to(self, other: HexCoord) -> Optional[Vector]:
        """The unit direction pointing from self to other, if both lie on a common grid line."""
        dq = other.q - self.q
        dr = other.r - self.r
        if dq == 0 and dr == 0:
            return None
        if dq == 0:
            return (0, 1 if dr > 0 else -1)
        if dr == 0:
            return (1 if dq > 0 else -1, 0)
        if dq == dr:
            return (1, 1) if dq > 0 else (-1, -1)
        return None


def hex_distance(a: HexCoord, b: HexCoord) -> int:
    """Number of single steps between two intersections"""
    dq = a.q - b.q
    dr = a.r - b.r
    return max(abs(dq), abs(dr), abs(dq - dr))


def is_adjacent(a: HexCoord, b: HexCoord) -> bool:
    return hex_distance(a, b) == 1


def line_walk(
    start: HexCoord, direction: Vector, radius: float = BOARD_RADIUS
) -> Iterator[HexCoord]:
    """
    Walk away from `start` (exclusive) one step at a time until we leave the board.

    Lazy and finite. Calling it again simply starts a fresh walk.
    """
    coord = start + direction
    while coord.is_valid(radius):
        yield coord
        coord = coord + direction


def line_between(a: HexCoord, b: HexCoord) -> list[HexCoord]:
    """
    Find the intersections strictly between two intersections on a common line

    Used to find the markers a ring jumped over.
    """
    direction = a.direction_to(b)
    if direction is None:
        raise ValueError(
            f"line_between requires both coordinates to lie on a common line. \n a: {a}\n b:{b}"
        )

    coords: list[HexCoord] = []
    coord = a + direction
    while coord != b:
        coords.append(coord)
        coord = coord + direction
    return coords


def board_coords(radius: float = BOARD_RADIUS) -> list[HexCoord]:
    """All valid intersections, sorted (q first, then r)"""
    # |q| and |r| never exceed 2/sqrt(3) * radius on the board
    bound = int(radius * 2) + 1
    return [
        HexCoord(q, r)
        for q in range(-bound, bound + 1)
        for r in range(-bound, bound + 1)
        if HexCoord(q, r).is_valid(radius)
    ]
