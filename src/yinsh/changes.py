"""
The "last change" log.

Every command reports what it did as a list of semantic events. The engine never reads these back,
they are there so a presentation layer can animate a move without diffing two boards.
"""

from dataclasses import dataclass
from typing import ClassVar

from src.core.shared_types import ChangeKind, Player
from src.yinsh.coord import HexCoord


@dataclass(frozen=True)
class RingPlaced:
    kind: ClassVar[ChangeKind] = ChangeKind.RING_PLACED
    player: Player
    pos: HexCoord


@dataclass(frozen=True)
class RingMoved:
    kind: ClassVar[ChangeKind] = ChangeKind.RING_MOVED
    player: Player
    from_pos: HexCoord
    to_pos: HexCoord


@dataclass(frozen=True)
class MarkerFlipped:
    """`player` owns the marker after the flip"""

    kind: ClassVar[ChangeKind] = ChangeKind.MARKER_FLIPPED
    player: Player
    pos: HexCoord


@dataclass(frozen=True)
class MarkerPlaced:
    kind: ClassVar[ChangeKind] = ChangeKind.MARKER_PLACED
    player: Player
    pos: HexCoord


@dataclass(frozen=True)
class MarkerRemoved:
    kind: ClassVar[ChangeKind] = ChangeKind.MARKER_REMOVED
    player: Player
    pos: HexCoord


@dataclass(frozen=True)
class RingRemoved:
    kind: ClassVar[ChangeKind] = ChangeKind.RING_REMOVED
    player: Player
    pos: HexCoord


StateChange = (
    RingPlaced | RingMoved | MarkerFlipped | MarkerPlaced | MarkerRemoved | RingRemoved
)
ChangeLog = list[StateChange]


def change_coords(change: StateChange) -> list[HexCoord]:
    """The coordinate(s) an event touches, in order (a moved ring: from, then to)"""
    match change:
        case RingMoved(from_pos=from_pos, to_pos=to_pos):
            return [from_pos, to_pos]
        case (
            RingPlaced(pos=pos)
            | MarkerFlipped(pos=pos)
            | MarkerPlaced(pos=pos)
            | MarkerRemoved(pos=pos)
            | RingRemoved(pos=pos)
        ):
            return [pos]
