"""GameController — the engine object owning one game.

Coordinates: Players, GameState, MoveGenerator, RandomMover.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from chessling.core.enums import Side
from chessling.core.move import Move
from chessling.core.move_generator import MoveGenerator
from chessling.core.rules import IllegalMoveError, Rules
from chessling.core.types import Square
from chessling.engine.random_engine import RandomMover
from chessling.game.interfaces import GamePhase, IPlayer
from chessling.game.state import GameState, MoveRecord, Selection

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
PhaseCallback = Callable[[GamePhase], None]
SelectionCallback = Callable[[Selection | None], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a game: handles selections, validates and applies moves,
    switches turns, prompts auto-players, notifies listeners.

    Each instance owns its own board and selection, so several games can
    run side by side.  Methods are meant to be called from a single thread.

    Automatic players without a scheduler are answered on the spot, inside
    whichever call handed them the turn.

    Args:
        rng: Random source for automatic moves; seed it for reproducible
            games.
        max_plies: Once this many plies are played, automatic players are
            no longer prompted.  Required when both sides play immediately.
    """

    __slots__ = (
        "_state",
        "_players",
        "_mover",
        "_max_plies",
        "_prompting",
        "events",
    )

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        max_plies: int | None = None,
    ) -> None:
        if max_plies is not None and max_plies < 0:
            raise ValueError(f"max_plies must be >= 0, got {max_plies}")
        self._state = GameState()
        self._players: dict[Side, IPlayer] = {}
        self._mover = RandomMover(rng)
        self._max_plies = max_plies
        self._prompting = False
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def turn(self) -> Side:
        """Side to move."""
        return self._state.side_to_move

    @property
    def selection(self) -> Selection | None:
        return self._state.selection

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self.turn)

    def player(self, side: Side) -> IPlayer | None:
        return self._players.get(side)

    @property
    def max_plies(self) -> int | None:
        return self._max_plies

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(self, first: IPlayer, second: IPlayer, fen: str | None = None) -> None:
        """Set up a new game and prompt the side to move."""
        both_immediate = first.plays_immediately and second.plays_immediately
        if both_immediate and self._max_plies is None:
            raise ValueError("Two immediate automatic players need max_plies")
        self._cancel_players()
        self._players = {Side.FIRST: first, Side.SECOND: second}
        self._state = GameState()
        self._state.setup(fen)
        _LOGGER.debug("New game: %s vs %s", first.name, second.name)

        self._emit_phase(GamePhase.AWAITING_SELECTION)
        self._prompt_current_player()

    def reset(self, fen: str | None = None) -> None:
        """Restart with the same players."""
        if not self._players:
            self._state.setup(fen)
            self._emit_phase(GamePhase.AWAITING_SELECTION)
            return
        self.new_game(self._players[Side.FIRST], self._players[Side.SECOND], fen)

    # ── Human interaction ────────────────────────────────────────────────

    def select(self, sq: Square) -> list[Square]:
        """Handle a click on *sq*; returns the destinations now on offer.

        With a piece selected, clicking one of its destinations plays the
        move and clicking the selected square again drops the selection.
        Otherwise a piece of the side to move gets selected and any other
        click clears the selection.
        """
        if self._state.phase in (GamePhase.NOT_STARTED, GamePhase.THINKING):
            return []
        cp = self.current_player
        if cp is not None and not cp.is_human:
            return []

        selection = self._state.selection
        if selection is not None and selection.offers(sq):
            self.submit_move(Move(selection.square, sq))
            return []
        if selection is not None and selection.square == sq:
            self._state.clear_selection()
            self._emit_selection(None)
            self._emit_phase(self._state.phase)
            return []

        new_selection = self._state.select(sq)
        self._emit_selection(new_selection)
        self._emit_phase(self._state.phase)
        if new_selection is None:
            return []
        return list(new_selection.destinations)

    def legal_destinations(self, sq: Square) -> list[Square]:
        """Destinations of the piece on *sq*, regardless of selection."""
        gen = MoveGenerator(self._state.position)
        return gen.legal_destinations(sq, self._state.position.board[sq])

    # ── Move execution ───────────────────────────────────────────────────

    def submit_move(self, move: Move) -> bool:
        """Validate and apply *move*. Returns True if it was played.

        Moves for a side held by an automatic player are rejected; those
        arrive through :meth:`choose_and_execute`.
        """
        if self._state.phase == GamePhase.NOT_STARTED:
            return False
        cp = self.current_player
        if cp is not None and not cp.is_human:
            _LOGGER.warning(
                "Rejected move %s: %s is played automatically", move, self.turn
            )
            return False
        try:
            Rules.validate(self._state.position, move)
        except IllegalMoveError as exc:
            _LOGGER.warning("Rejected move %s: %s", move, exc)
            return False

        self._apply(move)
        return True

    def choose_and_execute(self, side: Side) -> Move | None:
        """Let the auto-player move for *side*.

        No-op when the game has not started, *side* is not to move, or it
        has no moves.
        """
        if self._state.phase == GamePhase.NOT_STARTED:
            return None
        if side != self.turn:
            _LOGGER.debug("Ignoring auto move for %s: %s is to move", side, self.turn)
            return None
        move = self._mover.choose(self._state.position, side)
        if move is None:
            _LOGGER.debug("No moves available for %s", side)
            return None
        self._apply(move)
        return move

    # ── Internal helpers ─────────────────────────────────────────────────

    def _apply(self, move: Move) -> None:
        had_selection = self._state.selection is not None
        record = self._state.apply_move(move)
        _LOGGER.debug("Played %s (%s)", move, record.piece)

        if had_selection:
            self._emit_selection(None)
        self._emit_move(record)
        self._prompt_current_player()

    def _prompt_current_player(self) -> None:
        """Ask the current player to move.

        Runs as a loop so consecutive immediate replies do not recurse
        through ``_apply``; nested calls made from inside it return at once.
        """
        if self._prompting:
            return
        self._prompting = True
        try:
            while True:
                cp = self.current_player
                if cp is None:
                    return
                if cp.is_human:
                    self._set_phase(GamePhase.AWAITING_SELECTION)
                    return

                self._set_phase(GamePhase.THINKING)
                if self._limit_reached():
                    return
                if not cp.plays_immediately:
                    plies = self._state.ply_count
                    cp.request_move(self._state.position)
                    # A scheduler may answer synchronously.
                    if self._state.ply_count == plies:
                        return
                    continue
                if self.choose_and_execute(cp.side) is None:
                    return
        finally:
            self._prompting = False

    def _limit_reached(self) -> bool:
        if self._max_plies is None or self._state.ply_count < self._max_plies:
            return False
        _LOGGER.debug("Ply limit %d reached", self._max_plies)
        return True

    def _set_phase(self, phase: GamePhase) -> None:
        self._state.phase = phase
        self._emit_phase(phase)

    def _cancel_players(self) -> None:
        for player in self._players.values():
            if not player.is_human:
                player.cancel()

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_selection(self, selection: Selection | None) -> None:
        for cb in self.events.on_selection_changed:
            cb(selection)
