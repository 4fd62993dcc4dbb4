"""Move legality checks and the validating move executor."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessling.core.enums import PieceKind
from chessling.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessling.core.move import Move
    from chessling.core.piece import Piece
    from chessling.core.position import Position


class IllegalMoveError(ValueError):
    """Raised when a move violates the executor's preconditions."""


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def is_legal(position: Position, move: Move) -> bool:
        try:
            Rules.validate(position, move)
        except IllegalMoveError:
            return False
        return True

    @staticmethod
    def validate(position: Position, move: Move) -> None:
        """Raise :class:`IllegalMoveError` unless *move* may be executed."""
        piece = position.board[move.from_sq]
        if piece is None:
            raise IllegalMoveError(f"No piece on {move.from_sq}: {move}")
        if piece.side != position.side_to_move:
            raise IllegalMoveError(
                f"It is {position.side_to_move!s}'s turn, "
                f"not {piece.side!s}'s: {move}"
            )
        gen = MoveGenerator(position)
        if move.to_sq not in gen.legal_destinations(move.from_sq, piece):
            raise IllegalMoveError(f"Illegal destination: {move}")

    @staticmethod
    def execute(position: Position, move: Move) -> Piece | None:
        """Validate-then-execute; returns the captured piece, if any."""
        Rules.validate(position, move)
        return position.make_move(move)

    @staticmethod
    def is_capture(position: Position, move: Move) -> bool:
        """Whether *move* lands on an opposing piece (checked before moving)."""
        mover = position.board[move.from_sq]
        target = position.board[move.to_sq]
        return mover is not None and target is not None and target.side != mover.side

    @staticmethod
    def is_promotion(position: Position, move: Move) -> bool:
        piece = position.board[move.from_sq]
        return (
            piece is not None
            and piece.kind == PieceKind.PAWN
            and move.to_sq[0] == piece.side.promotion_row
        )
