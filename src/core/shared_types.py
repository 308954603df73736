"""
Type definitions used across layers
"""

from enum import StrEnum


class Player(StrEnum):
    WHITE = "white"
    BLACK = "black"

    def other(self) -> "Player":
        return Player.BLACK if self == Player.WHITE else Player.WHITE


class PieceKind(StrEnum):
    RING = "ring"
    MARKER = "marker"


class PhaseKind(StrEnum):
    """The single active step of the per-turn state machine."""

    PLACE_RING = "place ring"
    PLACE_MARKER = "place marker"
    MOVE_RING = "move ring"
    REMOVE_RUN = "remove run"
    REMOVE_RING = "remove ring"
    PLAYER_WON = "player won"


class ChangeKind(StrEnum):
    """Names of the events in the last-change log (what the presentation layer animates)."""

    RING_PLACED = "ring placed"
    RING_MOVED = "ring moved"
    MARKER_FLIPPED = "marker flipped"
    MARKER_PLACED = "marker placed"
    MARKER_REMOVED = "marker removed"
    RING_REMOVED = "ring removed"
