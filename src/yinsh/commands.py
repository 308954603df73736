"""
The five commands that mutate a game
-----

Every command is an immutable value that knows

* when it is legal (`is_legal`)
* what it does (`apply`)
* how to take it back again (`invert`), exactly: board, phase, player to move and score are restored.
* which intersection a player points at to select it (`anchor_coord`)

The set of commands is closed, so each of these is a single `match` over the variants.
Both `apply` and `invert` report what they did as a change log.
NOTE: `invert` assumes it is called on the state right after `apply` (the history stack guarantees that).
"""

from dataclasses import dataclass
from typing import Protocol

from src.core.shared_types import Player
from src.yinsh.board import Board, Run
from src.yinsh.changes import (
    ChangeLog,
    MarkerFlipped,
    MarkerPlaced,
    MarkerRemoved,
    RingMoved,
    RingPlaced,
    RingRemoved,
)
from src.yinsh.coord import HexCoord
from src.yinsh.phase import Phase
from src.yinsh.pieces import Piece

# Setup is over once both players placed all their rings
RINGS_PER_PLAYER = 5
# Removing three rings wins the game
WINNING_SCORE = 3


class GameState(Protocol):
    """Just the parts the commands need"""

    board: Board
    current_player: Player
    phase: Phase

    def at_phase(self, phase: Phase) -> bool: ...
    def set_phase(self, phase: Phase) -> None: ...
    def next_player(self) -> None: ...
    def compute_runs(self) -> None: ...
    def has_run(self, player: Player) -> bool: ...
    def is_valid_run(self, player: Player, run: Run) -> bool: ...
    def score(self, player: Player) -> int: ...
    def inc_score(self, player: Player) -> None: ...
    def dec_score(self, player: Player) -> None: ...


class _CommandMethods:
    """Method-style access to the module level functions, so callers can write `command.is_legal(state)`"""

    def is_legal(self, state: GameState) -> bool:
        return is_legal(self, state)

    def apply(self, state: GameState) -> ChangeLog:
        return apply(self, state)

    def invert(self, state: GameState) -> ChangeLog:
        return invert(self, state)

    def anchor_coord(self) -> HexCoord:
        return anchor_coord(self)


@dataclass(frozen=True)
class PlaceRing(_CommandMethods):
    pos: HexCoord


@dataclass(frozen=True)
class PlaceMarker(_CommandMethods):
    pos: HexCoord


@dataclass(frozen=True)
class MoveRing(_CommandMethods):
    """Stores the player that moves, so undo can hand the turn back even if the move passed it on."""

    from_pos: HexCoord
    to_pos: HexCoord
    player: Player


@dataclass(frozen=True)
class RemoveRun(_CommandMethods):
    """`pos` is the intersection a player clicks to select this run (one of its markers)"""

    run_idx: int
    run: Run
    pos: HexCoord


@dataclass(frozen=True)
class RemoveRing(_CommandMethods):
    pos: HexCoord
    player: Player


Command = PlaceRing | PlaceMarker | MoveRing | RemoveRun | RemoveRing


# --- DISPATCH ---
def is_legal(command: Command, state: GameState) -> bool:
    match command:
        case PlaceRing(pos=pos):
            return state.at_phase(Phase.place_ring()) and state.board.free_board_field(pos)
        case PlaceMarker(pos=pos):
            return state.at_phase(Phase.place_marker()) and state.board.player_ring_at(
                pos, state.current_player
            )
        case MoveRing(from_pos=from_pos, to_pos=to_pos, player=player):
            return (
                state.at_phase(Phase.move_ring(from_pos))
                and player == state.current_player
                and to_pos in state.board.ring_targets(from_pos)
            )
        case RemoveRun(run=run):
            return state.at_phase(Phase.remove_run()) and state.is_valid_run(
                state.current_player, run
            )
        case RemoveRing(pos=pos, player=player):
            return (
                state.at_phase(Phase.remove_ring())
                and state.board.player_ring_at(pos, state.current_player)
                and player == state.current_player
            )


def apply(command: Command, state: GameState) -> ChangeLog:
    match command:
        case PlaceRing():
            return _place_ring(command, state)
        case PlaceMarker():
            return _place_marker(command, state)
        case MoveRing():
            return _move_ring(command, state)
        case RemoveRun():
            return _remove_run(command, state)
        case RemoveRing():
            return _remove_ring(command, state)


def invert(command: Command, state: GameState) -> ChangeLog:
    match command:
        case PlaceRing():
            return _undo_place_ring(command, state)
        case PlaceMarker():
            return _undo_place_marker(command, state)
        case MoveRing():
            return _undo_move_ring(command, state)
        case RemoveRun():
            return _undo_remove_run(command, state)
        case RemoveRing():
            return _undo_remove_ring(command, state)


def anchor_coord(command: Command) -> HexCoord:
    match command:
        case MoveRing(to_pos=to_pos):
            return to_pos
        case PlaceRing(pos=pos) | PlaceMarker(pos=pos) | RemoveRun(pos=pos) | RemoveRing(pos=pos):
            return pos


# --- PLACE RING ---
def _place_ring(command: PlaceRing, state: GameState) -> ChangeLog:
    player = state.current_player
    state.board.place_unchecked(Piece.ring(player), command.pos)

    if len(state.board.rings()) >= 2 * RINGS_PER_PLAYER:
        state.set_phase(Phase.place_marker())

    state.next_player()
    return [RingPlaced(player, command.pos)]


def _undo_place_ring(command: PlaceRing, state: GameState) -> ChangeLog:
    state.board.remove(command.pos)
    state.set_phase(Phase.place_ring())
    state.next_player()
    return [RingRemoved(state.current_player, command.pos)]


# --- PLACE MARKER ---
def _place_marker(command: PlaceMarker, state: GameState) -> ChangeLog:
    """The marker goes inside the ring: the ring is lifted off the board until it lands again."""
    player = state.current_player
    state.board.place_unchecked(Piece.marker(player), command.pos)
    state.compute_runs()
    state.set_phase(Phase.move_ring(command.pos))
    return [MarkerPlaced(player, command.pos)]


def _undo_place_marker(command: PlaceMarker, state: GameState) -> ChangeLog:
    player = state.current_player
    state.board.place_unchecked(Piece.ring(player), command.pos)
    state.compute_runs()
    state.set_phase(Phase.place_marker())
    return [MarkerRemoved(player, command.pos)]


# --- MOVE RING ---
def _move_ring(command: MoveRing, state: GameState) -> ChangeLog:
    """
    Land the ring, flip what it jumped, then decide who acts next:

    1. the mover made a run --> the mover removes it first
    2. only the opponent has a run --> hand over the turn, the opponent removes it
    3. nobody has a run --> regular turn change
    """
    state.board.place_unchecked(Piece.ring(command.player), command.to_pos)
    flipped = state.board.flip_between(command.from_pos, command.to_pos)

    state.compute_runs()

    if state.has_run(state.current_player):
        state.set_phase(Phase.remove_run())
    elif state.has_run(state.current_player.other()):
        state.set_phase(Phase.remove_run())
        state.next_player()
    else:
        state.set_phase(Phase.place_marker())
        state.next_player()

    return [
        RingMoved(command.player, command.from_pos, command.to_pos),
        *_flip_changes(state, flipped),
    ]


def _undo_move_ring(command: MoveRing, state: GameState) -> ChangeLog:
    state.board.remove(command.to_pos)
    # flipping is its own inverse
    flipped = state.board.flip_between(command.from_pos, command.to_pos)
    state.current_player = command.player
    state.set_phase(Phase.move_ring(command.from_pos))
    state.compute_runs()
    return [
        RingMoved(command.player, command.to_pos, command.from_pos),
        *_flip_changes(state, flipped),
    ]


def _flip_changes(state: GameState, flipped: list[HexCoord]) -> ChangeLog:
    """Report each flipped marker with its new owner"""
    changes: ChangeLog = []
    for pos in flipped:
        piece = state.board.occupied(pos)
        # for the type checker: flip_between only reports intersections holding a marker
        assert piece is not None
        changes.append(MarkerFlipped(piece.owner, pos))
    return changes


# --- REMOVE RUN ---
def _remove_run(command: RemoveRun, state: GameState) -> ChangeLog:
    player = state.current_player
    for pos in command.run:
        state.board.remove(pos)

    state.compute_runs()
    state.set_phase(Phase.remove_ring())
    return [MarkerRemoved(player, pos) for pos in command.run]


def _undo_remove_run(command: RemoveRun, state: GameState) -> ChangeLog:
    player = state.current_player
    state.set_phase(Phase.remove_run())
    for pos in command.run:
        state.board.place_unchecked(Piece.marker(player), pos)

    state.compute_runs()
    return [MarkerPlaced(player, pos) for pos in command.run]


# --- REMOVE RING ---
def _remove_ring(command: RemoveRing, state: GameState) -> ChangeLog:
    """
    Take the ring off the board as a point, then decide who acts next:

    1. third point --> game over, nothing else matters (not even pending runs)
    2. the same player still has a run (several runs at once) --> remove the next one
    3. otherwise pass the turn, the next player removes a run of their own first if they have one.
    """
    player = state.current_player
    changes: ChangeLog = [RingRemoved(player, command.pos)]
    state.board.remove(command.pos)
    state.inc_score(player)

    if state.score(player) == WINNING_SCORE:
        state.set_phase(Phase.player_won(player))
        return changes

    if state.has_run(player):
        state.set_phase(Phase.remove_run())
        return changes

    state.next_player()

    if state.has_run(state.current_player):
        state.set_phase(Phase.remove_run())
    else:
        state.set_phase(Phase.place_marker())
    return changes


def _undo_remove_ring(command: RemoveRing, state: GameState) -> ChangeLog:
    state.current_player = command.player
    state.dec_score(command.player)
    state.set_phase(Phase.remove_ring())
    state.board.place_unchecked(Piece.ring(command.player), command.pos)
    return [RingPlaced(command.player, command.pos)]
