"""The Game board implements all rules that only depend on the pieces on the board (not on whose turn it is)"""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Self

from src.core.shared_types import PieceKind, Player
from src.yinsh.coord import (
    AXES,
    BOARD_RADIUS,
    DIRECTIONS,
    HexCoord,
    board_coords,
    line_between,
    line_walk,
)
from src.yinsh.pieces import Piece

# Five markers in a line
RUN_LENGTH = 5

Run = tuple[HexCoord, ...]


@dataclass
class Board:
    """Sparse storage: a coordinate that is not in `position` is empty."""

    position: dict[HexCoord, Piece] = field(default_factory=dict)
    radius: float = BOARD_RADIUS

    @classmethod
    def from_pieces(
        cls, pieces: Iterable[tuple[Piece, HexCoord]], radius: float = BOARD_RADIUS
    ) -> Self:
        """Convenience method: start from a pre-seeded board (for tests, puzzles, etc.)"""
        board = cls(radius=radius)
        for piece, pos in pieces:
            board.place_unchecked(piece, pos)
        return board

    # --- GEOMETRY ---
    def get_radius(self) -> float:
        return self.radius

    def board_coords(self) -> list[HexCoord]:
        return board_coords(self.radius)

    def is_valid(self, pos: HexCoord) -> bool:
        return pos.is_valid(self.radius)

    # --- OCCUPANCY ---
    def occupied(self, pos: HexCoord) -> Optional[Piece]:
        return self.position.get(pos)

    def free_board_field(self, pos: HexCoord) -> bool:
        return self.is_valid(pos) and pos not in self.position

    def player_ring_at(self, pos: HexCoord, player: Player) -> bool:
        return self.occupied(pos) == Piece.ring(player)

    def player_marker_at(self, pos: HexCoord, player: Player) -> bool:
        return self.occupied(pos) == Piece.marker(player)

    def rings(self) -> list[tuple[HexCoord, Player]]:
        return self._locate(PieceKind.RING)

    def markers(self) -> list[tuple[HexCoord, Player]]:
        return self._locate(PieceKind.MARKER)

    def player_rings(self, player: Player) -> list[HexCoord]:
        return [pos for pos, owner in self.rings() if owner == player]

    def player_markers(self, player: Player) -> list[HexCoord]:
        return [pos for pos, owner in self.markers() if owner == player]

    def _locate(self, kind: PieceKind) -> list[tuple[HexCoord, Player]]:
        """Sorted, so that enumerating moves is deterministic"""
        return sorted(
            (pos, piece.owner) for pos, piece in self.position.items() if piece.kind == kind
        )

    # --- UPDATES (legality is checked by the commands, not here) ---
    def place_unchecked(self, piece: Piece, pos: HexCoord) -> None:
        self.position[pos] = piece

    def remove(self, pos: HexCoord) -> None:
        self.position.pop(pos, None)

    def flip_between(self, from_pos: HexCoord, to_pos: HexCoord) -> list[HexCoord]:
        """
        Flip every marker strictly between the two coordinates. Returns the coordinates that flipped.

        Flipping twice restores the board, which is what undoing a ring move relies on.
        """
        flipped: list[HexCoord] = []
        for pos in line_between(from_pos, to_pos):
            piece = self.occupied(pos)
            if piece is not None and piece.is_marker:
                self.position[pos] = piece.flipped()
                flipped.append(pos)
        return flipped

    # --- RING MOVEMENT ---
    def ring_targets(self, from_pos: HexCoord) -> list[HexCoord]:
        """
        Slide algorithm
        -----

        Similar to raycasting, walk outward along each of the six directions:

        * every empty intersection is a place the ring can stop at
        * a ring blocks the way: stop looking in this direction
        * markers have to be jumped: the whole contiguous group of markers (of any color) is passed over, never landed on.
          Only a single group may be jumped, so the walk ends at the next marker after we passed an empty intersection.
        """
        targets: list[HexCoord] = []
        for direction in DIRECTIONS:
            jumping = False
            jumped = False
            for pos in line_walk(from_pos, direction, self.radius):
                piece = self.occupied(pos)
                if piece is None:
                    targets.append(pos)
                    if jumping:
                        jumping = False
                        jumped = True
                    continue

                if piece.is_ring or jumped:
                    break

                jumping = True
        return targets

    # --- RUNS ---
    def runs(self, player: Player) -> list[Run]:
        """
        Find all runs of `player` markers along the three line axes.

        A line of exactly RUN_LENGTH markers is a single run.
        A longer line of n markers counts as n - RUN_LENGTH + 1 overlapping runs: the player picks which five to take.
        """
        runs: list[Run] = []
        for axis in AXES:
            for start in self._line_starts(axis):
                line = [start, *line_walk(start, axis, self.radius)]
                for segment in self._marker_segments(line, player):
                    runs.extend(
                        tuple(segment[idx : idx + RUN_LENGTH])
                        for idx in range(len(segment) - RUN_LENGTH + 1)
                    )
        return runs

    def _line_starts(self, axis: tuple[int, int]) -> list[HexCoord]:
        """First intersection of every line along the axis (the step backwards leaves the board)"""
        return [pos for pos in self.board_coords() if not self.is_valid(pos - axis)]

    def _marker_segments(
        self, line: list[HexCoord], player: Player
    ) -> list[list[HexCoord]]:
        """Split a line into maximal groups of consecutive markers of the player"""
        segments: list[list[HexCoord]] = []
        current: list[HexCoord] = []
        for pos in line:
            if self.player_marker_at(pos, player):
                current.append(pos)
                continue
            if current:
                segments.append(current)
                current = []
        if current:
            segments.append(current)
        return segments

    # --- DEBUGGING ---
    def to_text(self) -> str:
        """
        One line of text per r-row (top row first), "." for an empty intersection.
        Upper case: white pieces, lower case: black pieces. ex) "R" is a white ring, "m" a black marker
        """
        coords = self.board_coords()
        rows: list[str] = []
        for r in sorted({pos.r for pos in coords}, reverse=True):
            row = [pos for pos in coords if pos.r == r]
            symbols = [
                piece.to_symbol() if (piece := self.occupied(pos)) else "."
                for pos in row
            ]
            rows.append(" ".join(symbols))
        return "\n".join(rows)
