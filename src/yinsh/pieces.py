"""Defines the two kinds of pieces: rings and markers"""

from dataclasses import dataclass
from typing import Self

from src.core.shared_types import PieceKind, Player

PIECE_SYMBOLS: dict[PieceKind, str] = {
    PieceKind.RING: "r",
    PieceKind.MARKER: "m",
}


@dataclass(frozen=True)
class Piece:
    kind: PieceKind
    owner: Player

    @classmethod
    def ring(cls, owner: Player) -> Self:
        return cls(PieceKind.RING, owner)

    @classmethod
    def marker(cls, owner: Player) -> Self:
        return cls(PieceKind.MARKER, owner)

    @property
    def is_ring(self) -> bool:
        return self.kind == PieceKind.RING

    @property
    def is_marker(self) -> bool:
        return self.kind == PieceKind.MARKER

    def flipped(self) -> Self:
        """A jumped marker changes owner. (Rings never flip, but flipping one is harmless, so no check here.)"""
        return type(self)(self.kind, self.owner.other())

    def to_symbol(self) -> str:
        # upper case: white pieces, lower case: black pieces
        symbol = PIECE_SYMBOLS[self.kind]
        return symbol.upper() if self.owner == Player.WHITE else symbol
