"""
The GameState is the entrypoint into the rules engine for any driver (a view, the service layer, an opponent).
It is responsible for knowing whose turn it is, which phase of the turn we are in, the score, and the history of commands,
and it is the only place where commands get applied / undone.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from src.core.shared_types import PhaseKind, Player
from src.yinsh.board import Board, Run
from src.yinsh.changes import ChangeLog
from src.yinsh.commands import (
    Command,
    MoveRing,
    PlaceMarker,
    PlaceRing,
    RemoveRing,
    RemoveRun,
)
from src.yinsh.coord import HexCoord
from src.yinsh.phase import Phase

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    board: Board = field(default_factory=Board)
    current_player: Player = Player.WHITE
    phase: Phase = field(default_factory=Phase.place_ring)
    scores: dict[Player, int] = field(default_factory=lambda: {player: 0 for player in Player})
    runs: dict[Player, list[Run]] = field(default_factory=lambda: {player: [] for player in Player})
    history: list[Command] = field(default_factory=list)
    last_changes: ChangeLog = field(default_factory=list)

    def __post_init__(self) -> None:
        # runs are derived from the board: never trust a cache handed in from outside
        self.compute_runs()

    # --- DRIVER API ---
    def legal_moves(self) -> list[Command]:
        """
        All legal commands of the active phase, in a deterministic order.
        ----

        * PLACE_RING: one per empty intersection
        * PLACE_MARKER: one per ring of the player to move
        * MOVE_RING: one per target the lifted ring can slide to
        * REMOVE_RUN: one per run of the player to move (runs are removed one at the time,
          the list is rebuilt from the refreshed runs before the next one.)
        * REMOVE_RING: one per ring of the player to move
        * PLAYER_WON: nothing
        """
        player = self.current_player
        match self.phase.kind:
            case PhaseKind.PLACE_RING:
                return [
                    PlaceRing(pos)
                    for pos in self.board.board_coords()
                    if self.board.occupied(pos) is None
                ]
            case PhaseKind.PLACE_MARKER:
                return [PlaceMarker(pos) for pos in self.board.player_rings(player)]
            case PhaseKind.MOVE_RING:
                # for the type checker: MOVE_RING always carries its origin
                assert self.phase.origin is not None
                origin = self.phase.origin
                return [
                    MoveRing(origin, target, player)
                    for target in self.board.ring_targets(origin)
                ]
            case PhaseKind.REMOVE_RUN:
                runs = self.runs_of(player)
                return [
                    RemoveRun(idx, run, self._run_anchor(run, runs))
                    for idx, run in enumerate(runs)
                ]
            case PhaseKind.REMOVE_RING:
                return [RemoveRing(pos, player) for pos in self.board.player_rings(player)]
            case PhaseKind.PLAYER_WON:
                return []

    def execute_for_coord(self, coord: HexCoord) -> bool:
        """Find the first legal command anchored at `coord` and execute it. Returns False (and changes nothing) if there is none."""
        command = next(
            (move for move in self.legal_moves() if move.anchor_coord() == coord), None
        )
        if command is None:
            logger.debug("No legal command at %s in phase %s", coord, self.phase)
            return False
        return self.execute(command)

    def execute(self, command: Command) -> bool:
        """
        The one path through which commands get applied. (Opponents use it directly, a view goes through execute_for_coord)
        """
        if not command.is_legal(self):
            logger.debug("Rejected illegal command %s in phase %s", command, self.phase)
            return False

        self.last_changes = command.apply(self)
        self.history.append(command)
        logger.debug("Applied %s, phase is now %s", command, self.phase)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Board:\n%s", self.board.to_text())
        return True

    def undo(self) -> bool:
        """Take back the most recent command. Returns False if there is nothing to take back."""
        if not self.history:
            return False

        command = self.history.pop()
        self.last_changes = command.invert(self)
        logger.debug("Undid %s, phase is now %s", command, self.phase)
        return True

    # --- STATE MACHINE HELPERS (used by the commands) ---
    def next_player(self) -> None:
        self.current_player = self.current_player.other()

    def set_phase(self, phase: Phase) -> None:
        self.phase = phase

    def at_phase(self, phase: Phase) -> bool:
        return self.phase == phase

    def compute_runs(self) -> None:
        """Refresh the cached runs. Must be called after anything that changes the markers on the board."""
        self.runs = {player: self.board.runs(player) for player in Player}

    def runs_of(self, player: Player) -> list[Run]:
        return self.runs[player]

    def has_run(self, player: Player) -> bool:
        return len(self.runs[player]) > 0

    def get_run(self, player: Player, idx: int) -> Optional[Run]:
        runs = self.runs[player]
        return runs[idx] if 0 <= idx < len(runs) else None

    def is_valid_run(self, player: Player, run: Run) -> bool:
        return tuple(run) in self.runs[player]

    # --- SCORE ---
    def score(self, player: Player) -> int:
        return self.scores[player]

    def inc_score(self, player: Player) -> None:
        self.scores[player] += 1

    def dec_score(self, player: Player) -> None:
        self.scores[player] -= 1

    # --- END OF GAME ---
    def won_by(self) -> Optional[Player]:
        return self.phase.winner if self.phase.is_terminal else None

    @property
    def is_terminal(self) -> bool:
        return self.phase.is_terminal

    # --- PRIVATE HELPERS ---
    def _run_anchor(self, run: Run, runs: list[Run]) -> HexCoord:
        """
        The intersection to click to select this run.
        Runs can cross or overlap (six in a row), so prefer a marker no other run contains. Falls back to the first marker.
        """
        for pos in run:
            if not any(pos in other for other in runs if other != run):
                return pos
        return run[0]
