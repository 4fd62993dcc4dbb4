"""Game state — position, turn-cycle phase and the current selection."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessling.core.enums import Side
from chessling.core.move import Move
from chessling.core.move_generator import MoveGenerator
from chessling.core.notation import position_from_fen
from chessling.core.piece import Piece
from chessling.core.position import Position
from chessling.core.types import Square
from chessling.game.interfaces import GamePhase


@dataclass(frozen=True, slots=True)
class Selection:
    """A selected square and the destinations offered for it."""

    square: Square
    piece: Piece
    destinations: tuple[Square, ...]

    def offers(self, sq: Square) -> bool:
        return sq in self.destinations


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """The most recently executed move."""

    move: Move
    piece: Piece
    captured: Piece | None = None
    promoted: bool = False

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass
class GameState:
    """Board state plus the transient selection of the calling layer.

    Holds no timers and knows nothing about the UI.
    """

    position: Position = field(default_factory=Position.initial, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    selection: Selection | None = field(default=None, init=False)
    last_move: MoveRecord | None = field(default=None, init=False)
    ply_count: int = field(default=0, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game."""
        self.position = position_from_fen(fen) if fen else Position.initial()
        self.phase = GamePhase.AWAITING_SELECTION
        self.selection = None
        self.last_move = None
        self.ply_count = 0

    # ── Selection ────────────────────────────────────────────────────────

    def select(self, sq: Square) -> Selection | None:
        """Select *sq* if it holds a piece of the side to move."""
        piece = self.position.board[sq]
        if piece is None or piece.side != self.side_to_move:
            self.clear_selection()
            return None
        gen = MoveGenerator(self.position)
        self.selection = Selection(sq, piece, tuple(gen.legal_destinations(sq, piece)))
        self.phase = GamePhase.DESTINATION_CHOSEN
        return self.selection

    def clear_selection(self) -> None:
        self.selection = None
        if self.phase == GamePhase.DESTINATION_CHOSEN:
            self.phase = GamePhase.AWAITING_SELECTION

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a validated move and return its record.

        Caller is responsible for the legality check.
        """
        piece = self.position.board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        captured = self.position.make_move(move)
        placed = self.position.board[move.to_sq]
        record = MoveRecord(
            move=move,
            piece=piece,
            captured=captured,
            promoted=placed != piece,
        )
        self.last_move = record
        self.ply_count += 1
        self.selection = None
        self.phase = GamePhase.AWAITING_SELECTION
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Side:
        return self.position.side_to_move

    def legal_moves(self) -> list[Move]:
        """Moves available to the side to move."""
        return MoveGenerator(self.position).generate_moves()
