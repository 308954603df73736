"""The phases of a turn. Exactly one is active and it decides which commands can be enumerated."""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.shared_types import PhaseKind, Player
from src.yinsh.coord import HexCoord


@dataclass(frozen=True)
class Phase:
    """
    Tagged value: only MOVE_RING carries the ring's origin, only PLAYER_WON carries the winner.
    Use the constructors below rather than filling in the fields by hand.
    """

    kind: PhaseKind
    origin: Optional[HexCoord] = None
    winner: Optional[Player] = None

    @classmethod
    def place_ring(cls) -> Self:
        return cls(PhaseKind.PLACE_RING)

    @classmethod
    def place_marker(cls) -> Self:
        return cls(PhaseKind.PLACE_MARKER)

    @classmethod
    def move_ring(cls, origin: HexCoord) -> Self:
        return cls(PhaseKind.MOVE_RING, origin=origin)

    @classmethod
    def remove_run(cls) -> Self:
        return cls(PhaseKind.REMOVE_RUN)

    @classmethod
    def remove_ring(cls) -> Self:
        return cls(PhaseKind.REMOVE_RING)

    @classmethod
    def player_won(cls, winner: Player) -> Self:
        return cls(PhaseKind.PLAYER_WON, winner=winner)

    @property
    def is_terminal(self) -> bool:
        return self.kind == PhaseKind.PLAYER_WON

    def __str__(self) -> str:
        if self.origin is not None:
            return f"{self.kind} ({self.origin.q}, {self.origin.r})"
        if self.winner is not None:
            return f"{self.kind}: {self.winner}"
        return str(self.kind)
