"""Core domain layer — pure rule logic with zero external dependencies.

Quick start::

    from chessling.core import MoveGenerator, Position, parse_square

    pos = Position.initial()
    gen = MoveGenerator(pos)
    sq = parse_square("e2")
    print(gen.legal_destinations(sq, pos.board[sq]))
"""

from chessling.core.board import Board
from chessling.core.enums import PieceKind, Side
from chessling.core.move import Move
from chessling.core.move_generator import MoveGenerator
from chessling.core.notation import (
    STARTING_FEN,
    board_from_symbols,
    board_to_symbols,
    position_from_fen,
    position_to_fen,
)
from chessling.core.piece import Piece, side_of
from chessling.core.position import Position
from chessling.core.rules import IllegalMoveError, Rules
from chessling.core.types import (
    Square,
    is_on_board,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "PieceKind",
    "Side",
    # Types / helpers
    "Square",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "IllegalMoveError",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    "side_of",
    # Notation
    "STARTING_FEN",
    "board_from_symbols",
    "board_to_symbols",
    "position_from_fen",
    "position_to_fen",
]
