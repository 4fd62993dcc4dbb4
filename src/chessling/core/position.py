"""Position — board plus side to move, with in-place move execution."""

from __future__ import annotations

from chessling.core.board import Board
from chessling.core.enums import PieceKind, Side
from chessling.core.move import Move
from chessling.core.piece import Piece


class Position:
    """Board state: piece placement and whose turn it is.

    :meth:`make_move` is the only mutator used during play.  It trusts its
    caller for legality; see :meth:`chessling.core.rules.Rules.execute` for
    the validating variant.
    """

    __slots__ = ("board", "side_to_move")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Side = Side.FIRST,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move

    @classmethod
    def initial(cls) -> Position:
        """Starting layout with the first side to move."""
        return cls(Board.initial(), Side.FIRST)

    # ── Core move operation ──────────────────────────────────────────────

    def make_move(self, move: Move) -> Piece | None:
        """Apply *move* in place and return the captured piece, if any.

        Order of effects: the destination content is discarded, the piece is
        relocated, a pawn reaching its promotion row becomes a queen, and the
        turn flips.
        """
        board = self.board
        piece = board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        captured = board[move.to_sq]
        board[move.to_sq] = None

        board[move.from_sq] = None
        if piece.kind == PieceKind.PAWN and move.to_sq[0] == piece.side.promotion_row:
            piece = piece.promoted()
        board[move.to_sq] = piece

        self.side_to_move = self.side_to_move.opposite
        return captured

    # ── Helpers ──────────────────────────────────────────────────────────

    def copy(self) -> Position:
        return Position(self.board.copy(), self.side_to_move)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.board == other.board and self.side_to_move == other.side_to_move

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move!s} to move"
